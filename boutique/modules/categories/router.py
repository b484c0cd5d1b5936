# boutique/modules/categories/router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from boutique.config.database import get_db
from boutique.core.auth.dependencies import get_admin_user, get_current_user
from boutique.shared.schemas.common import BaseResponse
from .service import CategoryService
from .schemas import CategoryCreate, CategoryResponse

router = APIRouter()

@router.post("", response_model=CategoryResponse)
def insert_category(
    payload: CategoryCreate,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """
    Create a category

    **Required role:** admin
    """
    return CategoryService(db).insert(payload)

@router.get("/{category_id}", response_model=CategoryResponse)
def find_category(
    category_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a category by id"""
    return CategoryService(db).find_by_id(category_id)

@router.get("", response_model=List[CategoryResponse])
def list_categories(
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List every category"""
    return CategoryService(db).list_all()

@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    payload: CategoryCreate,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """
    Replace a category

    **Required role:** admin
    """
    return CategoryService(db).update(category_id, payload)

@router.delete("/{category_id}", response_model=BaseResponse)
def delete_category(
    category_id: int,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """
    Delete a category

    **Required role:** admin
    """
    CategoryService(db).delete(category_id)
    return BaseResponse(success=True, message=f"Category {category_id} deleted")

@router.get("/description/{description}", response_model=List[CategoryResponse])
def find_categories_by_description(
    description: str,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Search categories whose description contains the text (case-insensitive)"""
    return CategoryService(db).find_by_description_containing_ignore_case(description)
