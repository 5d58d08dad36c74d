"""
Pydantic schemas for financial reports.

Report keys are camelCase on the wire; the embedded trip keeps its own
field names.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict
from decimal import Decimal
from tripledger.schemas.trip import TripResponse


class TripSummaryResponse(BaseModel):
    """Financial summary of one trip."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    trip: TripResponse
    total_expenses: Decimal
    cash_expenses: Decimal
    remaining_cash: Decimal  # may be negative when cash was overspent
    expenses_by_category: Dict[str, Decimal]
    expenses_by_payment_type: Dict[str, Decimal]
    expenses_count: int


class OverallSummaryResponse(BaseModel):
    """Aggregates across every trip and expense."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_trips: int
    active_trips: int
    completed_trips: int
    total_expenses: Decimal
    average_expense_per_trip: Decimal
