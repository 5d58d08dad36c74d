"""
Pydantic schemas for categories and payment types.
"""
from pydantic import BaseModel, Field
from typing import Optional


class CategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str = ""


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    icon: Optional[str] = None


class CategoryResponse(CategoryBase):
    id: int

    class Config:
        from_attributes = True


class PaymentTypeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    icon: str = ""
    is_cash: bool = False  # expenses paid this way draw down the trip's initial cash


class PaymentTypeCreate(PaymentTypeBase):
    pass


class PaymentTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    icon: Optional[str] = None
    is_cash: Optional[bool] = None


class PaymentTypeResponse(PaymentTypeBase):
    id: int

    class Config:
        from_attributes = True
