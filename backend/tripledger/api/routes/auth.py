"""
Authentication routes for login and guest access.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from tripledger.core.config import settings
from tripledger.db.session import get_db
from tripledger.schemas.user import UserLogin, UserResponse, Token
from tripledger.models.user import User
from tripledger.core.security import verify_password, create_access_token

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(user: User) -> dict:
    access_token = create_access_token(user)
    return {"access_token": access_token, "token_type": "bearer", "user": UserResponse.model_validate(user)}


@router.post("/login", response_model=Token)
async def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    user = db.query(User).filter(User.username == credentials.username).first()

    if not user or not verify_password(credentials.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password"
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive"
        )

    return _issue_token(user)


@router.post("/guest-login", response_model=Token)
async def guest_login(db: Session = Depends(get_db)):
    """Get a token for the shared guest account without a password."""
    user = db.query(User).filter(User.username == settings.GUEST_USERNAME).first()
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Guest access is disabled"
        )

    return _issue_token(user)
