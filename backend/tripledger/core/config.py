"""
Application configuration and environment settings.
"""
from decimal import Decimal
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Travel Ledger"
    APP_VERSION: str = "2.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./travel.db"
    DB_ECHO: bool = False

    # JWT
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000", "http://localhost:8282"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    # Receipt upload
    MAX_UPLOAD_SIZE: int = 5 * 1024 * 1024  # 5MB
    UPLOAD_DIR: str = "uploads"

    # Average local fuel price, used to estimate a trip's fuel cost
    FUEL_PRICE_PER_LITER: Decimal = Decimal("5.50")

    # Seed accounts
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    GUEST_USERNAME: str = "guest"
    GUEST_PASSWORD: str = "guest123"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
