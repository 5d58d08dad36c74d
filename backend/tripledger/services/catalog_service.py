"""
Catalog service for expense categories and payment types.

Both catalogs behave the same way: names are unique, and an entry cannot be
deleted while any expense still references it.
"""
import logging
from typing import List, Type, Union
from sqlalchemy import func
from sqlalchemy.orm import Session
from tripledger.core.exceptions import NotFoundError, ResourceInUseError
from tripledger.models.catalog import Category, PaymentType
from tripledger.models.expense import Expense
from pydantic import BaseModel

logger = logging.getLogger(__name__)

CatalogModel = Union[Type[Category], Type[PaymentType]]

_ENTITY_NAMES = {
    Category: "Category",
    PaymentType: "Payment type",
}

_EXPENSE_COLUMNS = {
    Category: Expense.category_id,
    PaymentType: Expense.payment_type_id,
}


def list_entries(model: CatalogModel, db: Session) -> List:
    """All entries ordered by name."""
    return db.query(model).order_by(model.name).all()


def get_entry(model: CatalogModel, entry_id: int, db: Session):
    entry = db.query(model).filter(model.id == entry_id).first()
    if not entry:
        raise NotFoundError(_ENTITY_NAMES[model], entry_id)
    return entry


def _check_unique_name(model: CatalogModel, name: str, db: Session, exclude_id: int = None) -> None:
    query = db.query(model).filter(model.name == name)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first():
        raise ValueError(f"{_ENTITY_NAMES[model]} '{name}' already exists")


def create_entry(model: CatalogModel, data: BaseModel, db: Session):
    """Create a category or payment type."""
    _check_unique_name(model, data.name, db)
    entry = model(**data.model_dump())
    db.add(entry)
    db.commit()
    db.refresh(entry)

    logger.info("Created %s %s (%s)", _ENTITY_NAMES[model].lower(), entry.id, entry.name)
    return entry


def update_entry(model: CatalogModel, entry_id: int, data: BaseModel, db: Session):
    """Rename or re-icon an entry. Reports group by name, so a rename shows up there immediately."""
    entry = get_entry(model, entry_id, db)
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    if "name" in changes:
        _check_unique_name(model, changes["name"], db, exclude_id=entry_id)

    for field, value in changes.items():
        setattr(entry, field, value)
    db.commit()
    db.refresh(entry)
    return entry


def count_references(model: CatalogModel, entry_id: int, db: Session) -> int:
    """Number of expenses pointing at the entry."""
    column = _EXPENSE_COLUMNS[model]
    return db.query(func.count(Expense.id)).filter(column == entry_id).scalar() or 0


def delete_entry(model: CatalogModel, entry_id: int, db: Session) -> None:
    """
    Delete an entry that no expense uses.

    Raises:
        NotFoundError: if the entry does not exist
        ResourceInUseError: if expenses reference it; carries their count
    """
    entry = get_entry(model, entry_id, db)
    in_use = count_references(model, entry_id, db)
    if in_use > 0:
        raise ResourceInUseError(_ENTITY_NAMES[model], entry_id, in_use)

    db.delete(entry)
    db.commit()
    logger.info("Deleted %s %s", _ENTITY_NAMES[model].lower(), entry_id)
