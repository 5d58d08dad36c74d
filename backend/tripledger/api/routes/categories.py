"""
Expense category routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripledger.core.exceptions import NotFoundError, ResourceInUseError
from tripledger.db.session import get_db
from tripledger.models.catalog import Category
from tripledger.models.user import User
from tripledger.schemas.catalog import CategoryCreate, CategoryUpdate, CategoryResponse
from tripledger.api.dependencies import get_current_user, require_admin
from tripledger.services import catalog_service

router = APIRouter(prefix="/categories", tags=["categories"])


def catalog_error(exc: Exception) -> HTTPException:
    """Map a catalog service error to an HTTP error."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ResourceInUseError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(exc), "expense_count": exc.count}
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("", response_model=List[CategoryResponse])
async def list_categories(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return catalog_service.list_entries(Category, db)


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryCreate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    try:
        return catalog_service.create_entry(Category, data, db)
    except ValueError as exc:
        raise catalog_error(exc)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    try:
        return catalog_service.update_entry(Category, category_id, data, db)
    except (NotFoundError, ValueError) as exc:
        raise catalog_error(exc)


@router.delete("/{category_id}")
async def delete_category(
    category_id: int,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a category; refused while expenses use it."""
    try:
        catalog_service.delete_entry(Category, category_id, db)
    except (NotFoundError, ResourceInUseError) as exc:
        raise catalog_error(exc)
    return {"message": "Category deleted successfully"}
