"""SQLAlchemy model with the contact details and role of an authenticated user."""

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from groundbooking.core.catalog import UserRole
from groundbooking.core.database import Base


class UserProfile(Base):
    __tablename__ = "user_profile"

    uid = Column(String(128), primary_key=True)
    name = Column(String(200), nullable=True)
    email = Column(String(255), nullable=True, index=True)
    phone = Column(String(20), nullable=True)
    role = Column(String(30), nullable=False, default=UserRole.USER.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<UserProfile(uid={self.uid}, email={self.email}, role={self.role})>"
