from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel
from typing import Optional
from guesthouse.database import RecordId, get_db
from guesthouse.repositories import CategoryRepository


router = APIRouter()


class CategoryFields(BaseModel):
    name: Optional[str] = None


def get_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    return CategoryRepository(db)


@router.get("")
def list_categories(repo: CategoryRepository = Depends(get_repository)):
    """Get all categories (used by the inventory form)"""
    return repo.list()


@router.get("/{category_id}")
def get_category(category_id: RecordId, repo: CategoryRepository = Depends(get_repository)):
    return repo.get(category_id)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(data: CategoryFields, repo: CategoryRepository = Depends(get_repository)):
    return repo.create(data.model_dump())


@router.put("/{category_id}")
def update_category(
    category_id: RecordId,
    data: CategoryFields,
    repo: CategoryRepository = Depends(get_repository)
):
    return repo.update(category_id, data.model_dump())


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: RecordId, repo: CategoryRepository = Depends(get_repository)):
    repo.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
