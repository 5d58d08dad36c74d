"""
Expense model for tracking spending.
"""
from sqlalchemy import Column, String, Numeric, Date, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single spending event on a trip."""
    __tablename__ = "expenses"

    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    payment_type_id = Column(Integer, ForeignKey("payment_types.id"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)
    receipt_path = Column(String(255), nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    # Relationships
    trip = relationship("Trip", back_populates="expenses")
    category = relationship("Category", back_populates="expenses")
    payment_type = relationship("PaymentType", back_populates="expenses")
    creator = relationship("User", back_populates="expenses_created")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    @property
    def payment_type_name(self):
        return self.payment_type.name if self.payment_type else None

    @property
    def trip_destination(self):
        return self.trip.main_destination if self.trip else None
