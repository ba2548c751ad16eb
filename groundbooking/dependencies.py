"""Shared dependencies for the ground booking service."""

from typing import Generator

from groundbooking.core.database import SessionLocal


def get_db() -> Generator:
    """Provide a database session for request handling."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = ["get_db"]
