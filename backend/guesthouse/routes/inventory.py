from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field
from typing import Optional
from guesthouse.database import MAX_ID, RecordId, get_db
from guesthouse.repositories import InventoryRepository


router = APIRouter()


class InventoryItemFields(BaseModel):
    name: Optional[str] = None
    category_id: Optional[int] = Field(None, le=MAX_ID)
    quantity: Optional[int] = Field(None, le=MAX_ID)
    unit: Optional[str] = None
    cost_price: Optional[float] = None
    selling_price: Optional[float] = None
    reorder_level: Optional[int] = Field(None, le=MAX_ID)


def get_repository(db: Session = Depends(get_db)) -> InventoryRepository:
    return InventoryRepository(db)


@router.get("")
def list_inventory(repo: InventoryRepository = Depends(get_repository)):
    """Get all inventory items"""
    return repo.list()


@router.get("/{item_id}")
def get_inventory_item(item_id: RecordId, repo: InventoryRepository = Depends(get_repository)):
    """Get single inventory item"""
    return repo.get(item_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    data: InventoryItemFields,
    repo: InventoryRepository = Depends(get_repository)
):
    """Add an inventory item"""
    return repo.create(data.model_dump())


@router.put("/{item_id}")
def update_inventory_item(
    item_id: RecordId,
    data: InventoryItemFields,
    repo: InventoryRepository = Depends(get_repository)
):
    """Replace an inventory item; every field must be sent"""
    return repo.update(item_id, data.model_dump())


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(item_id: RecordId, repo: InventoryRepository = Depends(get_repository)):
    """Delete inventory item"""
    repo.delete(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
