from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, validator
from typing import Optional
from guesthouse.database import RecordId, get_db
from guesthouse.repositories import RoomRepository


router = APIRouter()


class RoomFields(BaseModel):
    room_number: Optional[str] = None
    type: Optional[str] = None
    price_per_night: Optional[float] = None
    status: Optional[str] = None  # "Available", "Occupied", ...

    @validator("room_number", pre=True)
    def room_number_as_text(cls, v):
        # admin forms may send the number as a JSON number
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


def get_repository(db: Session = Depends(get_db)) -> RoomRepository:
    return RoomRepository(db)


@router.get("")
def list_rooms(repo: RoomRepository = Depends(get_repository)):
    """Get all rooms"""
    return repo.list()


@router.get("/{room_id}")
def get_room(room_id: RecordId, repo: RoomRepository = Depends(get_repository)):
    return repo.get(room_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_room(data: RoomFields, repo: RoomRepository = Depends(get_repository)):
    """Add a room"""
    return repo.create(data.model_dump())


@router.put("/{room_id}")
def update_room(room_id: RecordId, data: RoomFields, repo: RoomRepository = Depends(get_repository)):
    """Replace a room"""
    return repo.update(room_id, data.model_dump())


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: RecordId, repo: RoomRepository = Depends(get_repository)):
    """Delete room; bookings that reference it stay listed"""
    repo.delete(room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
