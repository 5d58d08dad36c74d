"""
Database initialization script.

Creates every table and seeds the default users, categories and payment
types. Safe to run repeatedly: existing rows (matched by name) are kept.
"""
import logging
from sqlalchemy.orm import Session
from tripledger.core.config import settings
from tripledger.core.security import get_password_hash
from tripledger.models import User, UserRole, Category, PaymentType

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    ("Combustível", "fas fa-gas-pump"),
    ("Alimentação", "fas fa-utensils"),
    ("Hospedagem", "fas fa-bed"),
    ("Transporte", "fas fa-car"),
    ("Entretenimento", "fas fa-ticket-alt"),
    ("Compras", "fas fa-shopping-bag"),
    ("Outros", "fas fa-ellipsis-h"),
]

# (name, icon, is_cash)
DEFAULT_PAYMENT_TYPES = [
    ("Dinheiro", "fas fa-money-bill-wave", True),
    ("Cartão de Crédito", "fas fa-credit-card", False),
    ("Cartão de Débito", "fas fa-credit-card", False),
    ("PIX", "fas fa-mobile-alt", False),
    ("Transferência", "fas fa-exchange-alt", False),
]


def seed_database(db: Session) -> None:
    """Insert default users and catalog rows that are not present yet."""
    users = [
        (settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD, UserRole.ADMIN, "Administrador"),
        (settings.GUEST_USERNAME, settings.GUEST_PASSWORD, UserRole.GUEST, "Convidado"),
    ]
    for username, password, role, name in users:
        if not db.query(User).filter(User.username == username).first():
            db.add(User(
                username=username,
                hashed_password=get_password_hash(password),
                role=role,
                name=name
            ))
            logger.info("Seeded user %s", username)

    for name, icon in DEFAULT_CATEGORIES:
        if not db.query(Category).filter(Category.name == name).first():
            db.add(Category(name=name, icon=icon))

    for name, icon, is_cash in DEFAULT_PAYMENT_TYPES:
        if not db.query(PaymentType).filter(PaymentType.name == name).first():
            db.add(PaymentType(name=name, icon=icon, is_cash=is_cash))

    db.commit()


if __name__ == "__main__":
    from tripledger.core.logging_config import setup_logging
    from tripledger.db.session import SessionLocal, init_db

    setup_logging()
    logger.info("Initializing database...")
    init_db()
    session = SessionLocal()
    try:
        seed_database(session)
    finally:
        session.close()
    logger.info("Database initialized successfully!")
