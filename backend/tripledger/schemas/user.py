"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel
from datetime import datetime
from tripledger.models.user import UserRole


class UserResponse(BaseModel):
    """Schema for user response."""
    id: int
    username: str
    name: str
    role: UserRole
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class UserLogin(BaseModel):
    """Schema for user login."""
    username: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
