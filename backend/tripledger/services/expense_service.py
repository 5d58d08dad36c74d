"""
Expense service for expense-related business logic.
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from tripledger.core.exceptions import NotFoundError
from tripledger.models.catalog import Category, PaymentType
from tripledger.models.expense import Expense
from tripledger.models.trip import Trip
from tripledger.schemas.expense import ExpenseCreate, ExpenseUpdate

logger = logging.getLogger(__name__)


def _with_references(query):
    return query.options(
        joinedload(Expense.trip),
        joinedload(Expense.category),
        joinedload(Expense.payment_type)
    )


def _check_references(
    db: Session,
    trip_id: Optional[int] = None,
    category_id: Optional[int] = None,
    payment_type_id: Optional[int] = None
) -> None:
    """Raise NotFoundError for the first reference that does not exist."""
    checks = [
        ("Trip", Trip, trip_id),
        ("Category", Category, category_id),
        ("Payment type", PaymentType, payment_type_id),
    ]
    for entity, model, identifier in checks:
        if identifier is None:
            continue
        if not db.query(model.id).filter(model.id == identifier).first():
            raise NotFoundError(entity, identifier)


def get_expense(expense_id: int, db: Session) -> Expense:
    """Return the expense or raise NotFoundError."""
    expense = _with_references(db.query(Expense)).filter(Expense.id == expense_id).first()
    if not expense:
        raise NotFoundError("Expense", expense_id)
    return expense


def list_expenses(db: Session, trip_id: Optional[int] = None) -> List[Expense]:
    """Expenses, newest first, optionally restricted to one trip."""
    query = _with_references(db.query(Expense))
    if trip_id is not None:
        query = query.filter(Expense.trip_id == trip_id)
    return query.order_by(Expense.created_at.desc(), Expense.id.desc()).all()


def create_expense(expense_data: ExpenseCreate, db: Session, created_by: Optional[int] = None) -> Expense:
    """Create an expense after checking that its trip, category and payment type exist."""
    _check_references(
        db,
        trip_id=expense_data.trip_id,
        category_id=expense_data.category_id,
        payment_type_id=expense_data.payment_type_id
    )

    expense = Expense(**expense_data.model_dump(), created_by=created_by)
    db.add(expense)
    db.commit()

    logger.info("Created expense %s on trip %s: %s", expense.id, expense.trip_id, expense.amount)
    return get_expense(expense.id, db)


def update_expense(expense_id: int, expense_data: ExpenseUpdate, db: Session) -> Expense:
    """Apply a partial update. A new receipt replaces the old one; omitting it keeps it."""
    expense = get_expense(expense_id, db)
    changes = {
        field: value
        for field, value in expense_data.model_dump(exclude_unset=True).items()
        if value is not None or field == "description"
    }
    _check_references(
        db,
        trip_id=changes.get("trip_id"),
        category_id=changes.get("category_id"),
        payment_type_id=changes.get("payment_type_id")
    )

    for field, value in changes.items():
        setattr(expense, field, value)
    db.commit()

    logger.info("Updated expense %s (%s)", expense_id, ", ".join(sorted(changes)) or "no fields")
    return get_expense(expense_id, db)


def delete_expense(expense_id: int, db: Session) -> None:
    expense = get_expense(expense_id, db)
    db.delete(expense)
    db.commit()
    logger.info("Deleted expense %s", expense_id)
