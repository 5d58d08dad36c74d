"""
Trip model for travel expense tracking.
"""
from sqlalchemy import Column, String, Date, Numeric, Text, Enum as SQLEnum, ForeignKey, Integer
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel
import enum


class TripStatus(str, enum.Enum):
    """Trip status enumeration."""
    PLANNED = "planned"
    ACTIVE = "active"
    COMPLETED = "completed"


class Trip(BaseModel):
    """Trip model holding the cash budget and route data of a journey."""
    __tablename__ = "trips"

    main_destination = Column(String(200), nullable=False)
    main_reason = Column(String(200), nullable=False)
    other_destinations = Column(Text, nullable=True)
    companions = Column(Text, nullable=True)
    distance = Column(Numeric(10, 2), nullable=True)  # km
    fuel_consumption = Column(Numeric(10, 2), nullable=True)  # km per liter
    estimated_fuel_cost = Column(Numeric(15, 2), nullable=True)  # derived on every create/update
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    initial_cash = Column(Numeric(15, 2), nullable=False, default=0)
    status = Column(SQLEnum(TripStatus), default=TripStatus.PLANNED, nullable=False)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)

    # Relationships
    creator = relationship("User", back_populates="trips_created")
    expenses = relationship("Expense", back_populates="trip", cascade="all, delete-orphan")
