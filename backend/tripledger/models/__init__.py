"""Models package - Import all models for SQLAlchemy registration."""
from tripledger.models.user import User, UserRole
from tripledger.models.trip import Trip, TripStatus
from tripledger.models.expense import Expense
from tripledger.models.catalog import Category, PaymentType

__all__ = [
    "User",
    "UserRole",
    "Trip",
    "TripStatus",
    "Expense",
    "Category",
    "PaymentType",
]
