"""
User model for authentication and user management.
"""
import enum
from sqlalchemy import Column, String, Boolean, Enum as SQLEnum
from sqlalchemy.orm import relationship
from tripledger.db.base import BaseModel


class UserRole(str, enum.Enum):
    """Access level of a user."""
    ADMIN = "admin"
    GUEST = "guest"


class User(BaseModel):
    """User model; admins manage trips and catalogs, guests only log expenses."""
    __tablename__ = "users"

    username = Column(String(50), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    role = Column(SQLEnum(UserRole), default=UserRole.GUEST, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    # Relationships
    trips_created = relationship("Trip", back_populates="creator")
    expenses_created = relationship("Expense", back_populates="creator")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
