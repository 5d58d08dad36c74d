"""
Domain exceptions raised by the service layer.

Routes translate these into HTTP responses; services never swallow them.
"""
from typing import Any


class TripLedgerError(Exception):
    """Base class for domain errors."""


class NotFoundError(TripLedgerError):
    """A referenced entity does not exist."""

    def __init__(self, entity: str, identifier: Any = None):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found")


class ResourceInUseError(TripLedgerError):
    """An entity cannot be deleted while expenses still reference it."""

    def __init__(self, entity: str, identifier: Any, count: int):
        self.entity = entity
        self.identifier = identifier
        self.count = count
        super().__init__(
            f"Cannot delete this {entity.lower()}: "
            f"{count} expense(s) are registered with it"
        )


class InvalidReceiptError(TripLedgerError):
    """An uploaded receipt was rejected."""
