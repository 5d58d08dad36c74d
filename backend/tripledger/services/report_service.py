"""
Reporting facade: loads snapshots from the database and runs the summary calculators.
"""
from sqlalchemy.orm import Session, joinedload
from tripledger.models.expense import Expense
from tripledger.models.trip import Trip
from tripledger.services.summary_service import (
    OverallSummary, TripSummary, summarize_overall, summarize_trip
)


def get_trip_summary(trip_id: int, db: Session) -> TripSummary:
    """Summary of one trip; raises NotFoundError when the id does not resolve."""
    trip = db.query(Trip).filter(Trip.id == trip_id).first()
    expenses = []
    if trip is not None:
        expenses = db.query(Expense).options(
            joinedload(Expense.category),
            joinedload(Expense.payment_type)
        ).filter(Expense.trip_id == trip_id).all()
    return summarize_trip(trip, expenses)


def get_overall_summary(db: Session) -> OverallSummary:
    trips = db.query(Trip).all()
    expenses = db.query(Expense).all()
    return summarize_overall(trips, expenses)
