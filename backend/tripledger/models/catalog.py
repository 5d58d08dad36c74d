"""
Category and payment type lookup tables.
"""
from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel


class Category(BaseModel):
    """Expense category (fuel, food, lodging...)."""
    __tablename__ = "categories"

    name = Column(String(100), unique=True, nullable=False)
    icon = Column(String(100), nullable=False, default="")

    expenses = relationship("Expense", back_populates="category")


class PaymentType(BaseModel):
    """How an expense was paid. Cash types lower the trip's remaining cash."""
    __tablename__ = "payment_types"

    name = Column(String(100), unique=True, nullable=False)
    icon = Column(String(100), nullable=False, default="")
    is_cash = Column(Boolean, default=False, nullable=False)

    expenses = relationship("Expense", back_populates="payment_type")
