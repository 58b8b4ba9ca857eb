from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from guesthouse.database import MAX_ID, RecordId, get_db
from guesthouse.repositories import BookingRepository


router = APIRouter()


class BookingFields(BaseModel):
    room_id: Optional[int] = Field(None, le=MAX_ID)
    client_id: Optional[int] = Field(None, le=MAX_ID)
    check_in_date: Optional[date] = None
    check_out_date: Optional[date] = None
    total_price: Optional[float] = None
    status: Optional[str] = None  # "Confirmed", "Completed", ...


def get_repository(db: Session = Depends(get_db)) -> BookingRepository:
    return BookingRepository(db)


@router.get("/rooms")
def get_room_bookings(repo: BookingRepository = Depends(get_repository)):
    """Get all bookings with their room and client details"""
    return repo.list_detailed()


@router.get("/rooms/{booking_id}")
def get_room_booking(booking_id: RecordId, repo: BookingRepository = Depends(get_repository)):
    """Get single booking with room and client details"""
    return repo.get_detailed(booking_id)


@router.post("/rooms", status_code=status.HTTP_201_CREATED)
def create_room_booking(data: BookingFields, repo: BookingRepository = Depends(get_repository)):
    """Create a booking; room and client ids are stored as given"""
    return repo.create(data.model_dump())


@router.put("/rooms/{booking_id}")
def update_room_booking(
    booking_id: RecordId,
    data: BookingFields,
    repo: BookingRepository = Depends(get_repository)
):
    """Replace a booking"""
    return repo.update(booking_id, data.model_dump())


@router.delete("/rooms/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room_booking(booking_id: RecordId, repo: BookingRepository = Depends(get_repository)):
    """Delete booking"""
    repo.delete(booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
