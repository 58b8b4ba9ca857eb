from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Optional
from guesthouse.database import RecordId, get_db
from guesthouse.repositories import ClientRepository


router = APIRouter()


class ClientFields(BaseModel):
    name: Optional[str] = None
    contact_info: Optional[str] = None


def get_repository(db: Session = Depends(get_db)) -> ClientRepository:
    return ClientRepository(db)


@router.get("")
def list_clients(repo: ClientRepository = Depends(get_repository)):
    """Get all clients (used by the bookings form)"""
    return repo.list()


@router.get("/{client_id}")
def get_client(client_id: RecordId, repo: ClientRepository = Depends(get_repository)):
    return repo.get(client_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_client(data: ClientFields, repo: ClientRepository = Depends(get_repository)):
    return repo.create(data.model_dump())


@router.put("/{client_id}")
def update_client(client_id: RecordId, data: ClientFields, repo: ClientRepository = Depends(get_repository)):
    return repo.update(client_id, data.model_dump())


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: RecordId, repo: ClientRepository = Depends(get_repository)):
    repo.delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
