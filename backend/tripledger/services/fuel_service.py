"""
Fuel cost estimation for trips.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

Number = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")


def estimate_fuel_cost(
    distance: Optional[Number],
    fuel_consumption: Optional[Number],
    price_per_liter: Number
) -> Optional[Decimal]:
    """
    Estimate the fuel cost of a trip.

    Args:
        distance: Distance in km, or None if unknown
        fuel_consumption: Vehicle consumption in km per liter, or None if unknown
        price_per_liter: Fuel price per liter

    Returns:
        (distance / fuel_consumption) * price_per_liter rounded to cents, or
        None when either input is missing or the consumption is not positive.
        None means "unknown", which is different from a zero cost.
    """
    if distance is None or fuel_consumption is None:
        return None

    consumption = Decimal(str(fuel_consumption))
    if consumption <= 0:
        return None

    liters = Decimal(str(distance)) / consumption
    cost = liters * Decimal(str(price_per_liter))
    return cost.quantize(CENTS, rounding=ROUND_HALF_UP)
