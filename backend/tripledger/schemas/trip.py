"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from tripledger.models.trip import TripStatus


class TripBase(BaseModel):
    """Base trip schema."""
    main_destination: str = Field(..., min_length=1, max_length=200)
    main_reason: str = Field(..., min_length=1, max_length=200)
    other_destinations: Optional[str] = None
    companions: Optional[str] = None
    distance: Optional[Decimal] = Field(None, ge=0)  # km
    fuel_consumption: Optional[Decimal] = Field(None, gt=0)  # km per liter
    start_date: date
    end_date: date
    initial_cash: Decimal = Field(Decimal(0), ge=0)


class TripCreate(TripBase):
    """Schema for trip creation."""

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripUpdate(BaseModel):
    """Schema for trip update. Only the fields sent are changed."""
    main_destination: Optional[str] = Field(None, min_length=1, max_length=200)
    main_reason: Optional[str] = Field(None, min_length=1, max_length=200)
    other_destinations: Optional[str] = None
    companions: Optional[str] = None
    distance: Optional[Decimal] = Field(None, ge=0)
    fuel_consumption: Optional[Decimal] = Field(None, gt=0)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    initial_cash: Optional[Decimal] = Field(None, ge=0)
    status: Optional[TripStatus] = None


class TripStatusUpdate(BaseModel):
    """Schema for a status transition."""
    status: TripStatus


class TripResponse(TripBase):
    """Schema for trip response."""
    id: int
    status: TripStatus
    estimated_fuel_cost: Optional[Decimal] = None
    created_by: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
