"""
Payment type routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from tripledger.core.exceptions import NotFoundError, ResourceInUseError
from tripledger.db.session import get_db
from tripledger.models.catalog import PaymentType
from tripledger.models.user import User
from tripledger.schemas.catalog import PaymentTypeCreate, PaymentTypeUpdate, PaymentTypeResponse
from tripledger.api.dependencies import get_current_user, require_admin
from tripledger.api.routes.categories import catalog_error
from tripledger.services import catalog_service

router = APIRouter(prefix="/payment-types", tags=["payment-types"])


@router.get("", response_model=List[PaymentTypeResponse])
async def list_payment_types(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return catalog_service.list_entries(PaymentType, db)


@router.post("", response_model=PaymentTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_payment_type(
    data: PaymentTypeCreate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    try:
        return catalog_service.create_entry(PaymentType, data, db)
    except ValueError as exc:
        raise catalog_error(exc)


@router.put("/{payment_type_id}", response_model=PaymentTypeResponse)
async def update_payment_type(
    payment_type_id: int,
    data: PaymentTypeUpdate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    try:
        return catalog_service.update_entry(PaymentType, payment_type_id, data, db)
    except (NotFoundError, ValueError) as exc:
        raise catalog_error(exc)


@router.delete("/{payment_type_id}")
async def delete_payment_type(
    payment_type_id: int,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a payment type; refused while expenses use it."""
    try:
        catalog_service.delete_entry(PaymentType, payment_type_id, db)
    except (NotFoundError, ResourceInUseError) as exc:
        raise catalog_error(exc)
    return {"message": "Payment type deleted successfully"}
