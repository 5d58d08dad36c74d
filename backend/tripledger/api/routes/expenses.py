"""
Expense management routes.

Create and update take multipart form data so a receipt image can travel
with the expense.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status, UploadFile, File, Form
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
from decimal import Decimal
from tripledger.core.exceptions import InvalidReceiptError, NotFoundError
from tripledger.db.session import get_db
from tripledger.models.user import User
from tripledger.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseResponse
from tripledger.api.dependencies import get_current_user, require_admin
from tripledger.services import expense_service
from tripledger.services.receipt_service import discard_receipt, save_receipt

router = APIRouter(prefix="/expenses", tags=["expenses"])


async def _store_receipt(receipt: Optional[UploadFile]) -> Optional[str]:
    try:
        return await save_receipt(receipt)
    except InvalidReceiptError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(
    trip_id: Optional[int] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List expenses, optionally for a single trip."""
    return expense_service.list_expenses(db, trip_id=trip_id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    trip_id: int = Form(...),
    category_id: int = Form(...),
    payment_type_id: int = Form(...),
    amount: Decimal = Form(..., gt=0),
    date: date = Form(...),
    description: Optional[str] = Form(None),
    receipt: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record an expense. Any authenticated user may do this."""
    expense_data = ExpenseCreate(
        trip_id=trip_id,
        category_id=category_id,
        payment_type_id=payment_type_id,
        amount=amount,
        date=date,
        description=description
    )
    expense_data.receipt_path = await _store_receipt(receipt)

    try:
        return expense_service.create_expense(expense_data, db, created_by=current_user.id)
    except NotFoundError as exc:
        discard_receipt(expense_data.receipt_path)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(
    expense_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    try:
        return expense_service.get_expense(expense_id, db)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc)
        )


@router.put("/{expense_id}", response_model=ExpenseResponse)
async def update_expense(
    expense_id: int,
    request: Request,
    trip_id: Optional[int] = Form(None),
    category_id: Optional[int] = Form(None),
    payment_type_id: Optional[int] = Form(None),
    amount: Optional[Decimal] = Form(None, gt=0),
    date: Optional[date] = Form(None),
    description: Optional[str] = Form(None),
    receipt: Optional[UploadFile] = File(None),
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    Edit an expense (admin only). A new receipt replaces the stored one.

    Fields left out of the form keep their value; sending an empty
    description clears it.
    """
    fields = {
        "trip_id": trip_id,
        "category_id": category_id,
        "payment_type_id": payment_type_id,
        "amount": amount,
        "date": date,
    }
    changes = {k: v for k, v in fields.items() if v is not None}
    # Empty form values arrive as None, so look at the raw form
    if "description" in await request.form():
        changes["description"] = description or None
    expense_data = ExpenseUpdate(**changes)

    receipt_path = await _store_receipt(receipt)
    if receipt_path:
        expense_data.receipt_path = receipt_path

    try:
        return expense_service.update_expense(expense_id, expense_data, db)
    except NotFoundError as exc:
        discard_receipt(receipt_path)
        code = status.HTTP_404_NOT_FOUND if exc.entity == "Expense" else status.HTTP_400_BAD_REQUEST
        raise HTTPException(status_code=code, detail=str(exc))


@router.delete("/{expense_id}")
async def delete_expense(
    expense_id: int,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete an expense (admin only)."""
    try:
        expense_service.delete_expense(expense_id, db)
    except NotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc)
        )
    return {"message": "Expense deleted successfully"}
