"""
Financial summary calculations for trips and for the whole ledger.

Both calculators are pure: they read the records handed to them and never
touch the database. Records only need the attributes the ORM models expose
(``amount``, ``trip_id``, ``category.name``, ``payment_type.name``,
``payment_type.is_cash`` for expenses; ``id``, ``initial_cash``, ``status``
for trips).
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Sequence
from tripledger.core.exceptions import NotFoundError
from tripledger.models.trip import TripStatus

logger = logging.getLogger(__name__)

ZERO = Decimal(0)
CENTS = Decimal("0.01")


class TripSummary:
    """Derived financial figures of a single trip, bundled with the trip."""

    def __init__(
        self,
        trip: Any,
        total_expenses: Decimal,
        cash_expenses: Decimal,
        remaining_cash: Decimal,
        expenses_by_category: Dict[str, Decimal],
        expenses_by_payment_type: Dict[str, Decimal],
        expenses_count: int
    ):
        self.trip = trip
        self.total_expenses = total_expenses
        self.cash_expenses = cash_expenses
        self.remaining_cash = remaining_cash
        self.expenses_by_category = expenses_by_category
        self.expenses_by_payment_type = expenses_by_payment_type
        self.expenses_count = expenses_count


class OverallSummary:
    """Aggregates across every trip and expense."""

    def __init__(
        self,
        total_trips: int,
        active_trips: int,
        completed_trips: int,
        total_expenses: Decimal,
        average_expense_per_trip: Decimal
    ):
        self.total_trips = total_trips
        self.active_trips = active_trips
        self.completed_trips = completed_trips
        self.total_expenses = total_expenses
        self.average_expense_per_trip = average_expense_per_trip


def to_decimal(value: Any) -> Decimal:
    """Convert an amount to Decimal without going through binary float."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def sum_amounts(expenses: Sequence[Any]) -> Decimal:
    """Exact sum of ``amount`` over the given expenses."""
    return sum((to_decimal(e.amount) for e in expenses), ZERO)


def add_to_bucket(buckets: Dict[str, Decimal], key: str, amount: Decimal) -> None:
    buckets[key] = buckets.get(key, ZERO) + amount


def _status_value(status: Any) -> Optional[str]:
    if isinstance(status, TripStatus):
        return status.value
    return status


def _usable_expenses(trip: Any, expenses: Sequence[Any]) -> List[Any]:
    """
    Drop expenses that cannot be attributed to this trip's report.

    An expense is skipped when it belongs to another trip or when its
    category or payment type no longer resolves. Skipped expenses count
    towards nothing, so the per-category and per-payment-type maps always
    partition the total.
    """
    usable = []
    for expense in expenses:
        if expense.trip_id != trip.id:
            logger.warning(
                "Skipping expense %s: belongs to trip %s, not %s",
                getattr(expense, "id", None), expense.trip_id, trip.id
            )
            continue
        if expense.category is None or expense.payment_type is None:
            logger.warning(
                "Skipping expense %s on trip %s: dangling category or payment type",
                getattr(expense, "id", None), trip.id
            )
            continue
        usable.append(expense)
    return usable


def summarize_trip(trip: Any, expenses: Sequence[Any]) -> TripSummary:
    """
    Compute the financial summary of one trip.

    Args:
        trip: The trip record, or None when the id did not resolve
        expenses: Every expense whose trip_id is the trip's id

    Returns:
        TripSummary with totals, remaining cash and the per-category and
        per-payment-type breakdowns (keyed by display name)

    Raises:
        NotFoundError: if trip is None
    """
    if trip is None:
        raise NotFoundError("Trip")

    usable = _usable_expenses(trip, expenses)

    total_expenses = ZERO
    cash_expenses = ZERO
    by_category: Dict[str, Decimal] = {}
    by_payment_type: Dict[str, Decimal] = {}

    for expense in usable:
        amount = to_decimal(expense.amount)
        total_expenses += amount
        if expense.payment_type.is_cash:
            cash_expenses += amount
        add_to_bucket(by_category, expense.category.name, amount)
        add_to_bucket(by_payment_type, expense.payment_type.name, amount)

    # No floor: a negative value means cash on hand was overspent
    remaining_cash = to_decimal(trip.initial_cash) - cash_expenses

    return TripSummary(
        trip=trip,
        total_expenses=total_expenses,
        cash_expenses=cash_expenses,
        remaining_cash=remaining_cash,
        expenses_by_category=by_category,
        expenses_by_payment_type=by_payment_type,
        expenses_count=len(usable)
    )


def summarize_overall(trips: Sequence[Any], expenses: Sequence[Any]) -> OverallSummary:
    """Compute trip counts and expense totals across the whole ledger."""
    total_trips = len(trips)
    statuses = [_status_value(t.status) for t in trips]
    total_expenses = sum_amounts(expenses)

    if total_trips > 0:
        average = (total_expenses / total_trips).quantize(CENTS, rounding=ROUND_HALF_UP)
    else:
        average = ZERO

    return OverallSummary(
        total_trips=total_trips,
        active_trips=statuses.count(TripStatus.ACTIVE.value),
        completed_trips=statuses.count(TripStatus.COMPLETED.value),
        total_expenses=total_expenses,
        average_expense_per_trip=average
    )
