"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as dt_date, datetime
from decimal import Decimal


class ExpenseBase(BaseModel):
    """Base expense schema."""
    trip_id: int
    category_id: int
    payment_type_id: int
    amount: Decimal = Field(..., gt=0)
    description: Optional[str] = None
    date: dt_date


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation."""
    receipt_path: Optional[str] = None


class ExpenseUpdate(BaseModel):
    """Schema for expense update."""
    trip_id: Optional[int] = None
    category_id: Optional[int] = None
    payment_type_id: Optional[int] = None
    amount: Optional[Decimal] = Field(None, gt=0)
    description: Optional[str] = None
    date: Optional[dt_date] = None
    receipt_path: Optional[str] = None


class ExpenseResponse(ExpenseBase):
    """Schema for expense response, with the names of referenced rows."""
    id: int
    receipt_path: Optional[str] = None
    category_name: Optional[str] = None
    payment_type_name: Optional[str] = None
    trip_destination: Optional[str] = None
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
