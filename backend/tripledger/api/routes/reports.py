"""
Financial report routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tripledger.core.exceptions import NotFoundError
from tripledger.db.session import get_db
from tripledger.models.user import User
from tripledger.schemas.report import OverallSummaryResponse, TripSummaryResponse
from tripledger.schemas.trip import TripResponse
from tripledger.api.dependencies import get_current_user
from tripledger.services import report_service

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/summary", response_model=OverallSummaryResponse)
async def get_overall_summary(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Counts and totals across every trip."""
    summary = report_service.get_overall_summary(db)
    return OverallSummaryResponse(
        total_trips=summary.total_trips,
        active_trips=summary.active_trips,
        completed_trips=summary.completed_trips,
        total_expenses=summary.total_expenses,
        average_expense_per_trip=summary.average_expense_per_trip
    )


@router.get("/trip/{trip_id}", response_model=TripSummaryResponse)
async def get_trip_summary(
    trip_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Totals, remaining cash and breakdowns for one trip."""
    try:
        summary = report_service.get_trip_summary(trip_id, db)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Trip not found"
        )

    return TripSummaryResponse(
        trip=TripResponse.model_validate(summary.trip),
        total_expenses=summary.total_expenses,
        cash_expenses=summary.cash_expenses,
        remaining_cash=summary.remaining_cash,
        expenses_by_category=summary.expenses_by_category,
        expenses_by_payment_type=summary.expenses_by_payment_type,
        expenses_count=summary.expenses_count
    )
