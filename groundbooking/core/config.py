"""Configuration settings for the ground booking service."""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Ground Booking Service")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/groundbooking/v1")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./groundbooking.db")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # "jwt" verifies HS256 tokens locally, "firebase" verifies Firebase ID tokens.
    AUTH_PROVIDER: str = os.getenv("AUTH_PROVIDER", "jwt").strip().lower()
    SECRET_KEY: str = os.getenv("SECRET_KEY", "change_me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    FIREBASE_CREDENTIALS_PATH: str = os.getenv("FIREBASE_CREDENTIALS_PATH", "")
    FIREBASE_PROJECT_ID: str = os.getenv("FIREBASE_PROJECT_ID", "")

    NOTIFICATION_SERVICE_URL: Optional[str] = os.getenv("NOTIFICATION_SERVICE_URL", "")
    NOTIFICATION_SERVICE_TIMEOUT: float = float(
        os.getenv("NOTIFICATION_SERVICE_TIMEOUT", "10")
    )

    # Amount charged per booking in paise (25000 = 250.00 INR).
    BOOKING_AMOUNT_PAISE: int = int(os.getenv("BOOKING_AMOUNT_PAISE", "25000"))
    BOOKING_CONFLICT_GUARD: bool = _to_bool(
        os.getenv("BOOKING_CONFLICT_GUARD", "true"), default=True
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

__all__ = ["settings", "get_settings", "Settings"]
