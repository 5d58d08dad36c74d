"""
Trip service for trip-related business logic.
"""
import logging
from decimal import Decimal
from typing import List, Optional
from sqlalchemy.orm import Session
from tripledger.core.exceptions import NotFoundError
from tripledger.models.trip import Trip, TripStatus
from tripledger.schemas.trip import TripCreate, TripUpdate
from tripledger.services.fuel_service import estimate_fuel_cost

logger = logging.getLogger(__name__)


def get_trip(trip_id: int, db: Session) -> Trip:
    """Return the trip or raise NotFoundError."""
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    if not trip:
        raise NotFoundError("Trip", trip_id)
    return trip


def list_trips(db: Session) -> List[Trip]:
    """All trips, newest first."""
    return db.query(Trip).order_by(Trip.created_at.desc(), Trip.id.desc()).all()


def create_trip(
    trip_data: TripCreate,
    fuel_price: Decimal,
    db: Session,
    created_by: Optional[int] = None
) -> Trip:
    """Create a trip in the planned state with a fresh fuel estimate."""
    new_trip = Trip(
        **trip_data.model_dump(),
        estimated_fuel_cost=estimate_fuel_cost(
            trip_data.distance, trip_data.fuel_consumption, fuel_price
        ),
        status=TripStatus.PLANNED,
        created_by=created_by
    )
    db.add(new_trip)
    db.commit()
    db.refresh(new_trip)

    logger.info("Created trip %s to %s", new_trip.id, new_trip.main_destination)
    return new_trip


def update_trip(trip_id: int, trip_data: TripUpdate, fuel_price: Decimal, db: Session) -> Trip:
    """
    Apply a partial update and recompute the fuel estimate.

    The estimate is always derived from the distance and consumption the trip
    holds after the update; clearing either field clears the estimate.

    Raises:
        NotFoundError: if the trip does not exist
        ValueError: if the resulting end date is before the start date
    """
    trip = get_trip(trip_id, db)
    changes = trip_data.model_dump(exclude_unset=True)

    # Required columns cannot be cleared
    for field in ("main_destination", "main_reason", "start_date", "end_date", "initial_cash", "status"):
        if field in changes and changes[field] is None:
            del changes[field]

    start_date = changes.get("start_date", trip.start_date)
    end_date = changes.get("end_date", trip.end_date)
    if end_date < start_date:
        raise ValueError("end_date must not be before start_date")

    for field, value in changes.items():
        setattr(trip, field, value)

    trip.estimated_fuel_cost = estimate_fuel_cost(trip.distance, trip.fuel_consumption, fuel_price)

    db.commit()
    db.refresh(trip)

    logger.info("Updated trip %s (%s)", trip.id, ", ".join(sorted(changes)) or "no fields")
    return trip


def set_trip_status(trip_id: int, status: TripStatus, db: Session) -> Trip:
    """Move a trip to any of planned, active or completed."""
    trip = get_trip(trip_id, db)
    previous = trip.status
    trip.status = status
    db.commit()
    db.refresh(trip)

    logger.info("Trip %s status %s -> %s", trip.id, previous.value, status.value)
    return trip


def delete_trip(trip_id: int, db: Session) -> None:
    """Delete a trip together with all of its expenses."""
    trip = get_trip(trip_id, db)
    expense_count = len(trip.expenses)
    db.delete(trip)
    db.commit()

    logger.info("Deleted trip %s and %d expense(s)", trip_id, expense_count)
