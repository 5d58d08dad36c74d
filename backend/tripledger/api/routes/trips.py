"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from tripledger.core.config import settings
from tripledger.core.exceptions import NotFoundError
from tripledger.db.session import get_db
from tripledger.models.user import User
from tripledger.schemas.trip import TripCreate, TripUpdate, TripStatusUpdate, TripResponse
from tripledger.api.dependencies import get_current_user, require_admin
from tripledger.services import trip_service

router = APIRouter(prefix="/trips", tags=["trips"])


def trip_not_found(exc: NotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(exc)
    )


@router.get("", response_model=List[TripResponse])
async def list_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List all trips, newest first."""
    return trip_service.list_trips(db)


@router.post("", response_model=TripResponse, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Create a new trip."""
    return trip_service.create_trip(
        trip_data, settings.FUEL_PRICE_PER_LITER, db, created_by=current_user.id
    )


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get trip details."""
    try:
        return trip_service.get_trip(trip_id, db)
    except NotFoundError as exc:
        raise trip_not_found(exc)


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Edit a trip; the fuel estimate is recomputed."""
    try:
        return trip_service.update_trip(trip_id, trip_data, settings.FUEL_PRICE_PER_LITER, db)
    except NotFoundError as exc:
        raise trip_not_found(exc)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )


@router.patch("/{trip_id}/status", response_model=TripResponse)
async def update_trip_status(
    trip_id: int,
    status_data: TripStatusUpdate,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Move a trip between planned, active and completed."""
    try:
        return trip_service.set_trip_status(trip_id, status_data.status, db)
    except NotFoundError as exc:
        raise trip_not_found(exc)


@router.delete("/{trip_id}")
async def delete_trip(
    trip_id: int,
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """Delete a trip and all of its expenses."""
    try:
        trip_service.delete_trip(trip_id, db)
    except NotFoundError as exc:
        raise trip_not_found(exc)
    return {"message": "Trip deleted successfully"}
