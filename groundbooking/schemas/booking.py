"""Pydantic schemas for booking resources."""

import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from groundbooking.core.catalog import BookingStatus, GroundType

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class BookingCreate(BaseModel):
    """Contact details and slot submitted once the payment step has completed."""

    ground_type: GroundType
    booking_date: date
    time_slot: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., max_length=200)
    email: str = Field(..., max_length=255)
    phone: str = Field(..., pattern=r"^\d{10}$", description="10-digit phone number")
    payment_reference: Optional[str] = Field(
        None,
        max_length=100,
        description="UPI transaction id typed in by the user; it is not verified.",
    )

    @field_validator("name")
    def validate_name(cls, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("name must not be blank")
        return name

    @field_validator("email")
    def validate_email(cls, email: str) -> str:
        email = email.strip()
        if not _EMAIL_PATTERN.match(email):
            raise ValueError("enter a valid email address")
        return email

    @field_validator("payment_reference")
    def normalize_payment_reference(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class BookingStatusUpdate(BaseModel):
    status: BookingStatus


class BookingResponse(BaseModel):
    id_booking: int
    ground_type: str
    booking_date: date
    time_slot: str
    status: str
    name: str
    email: str
    phone: str
    payment_reference: Optional[str] = None
    amount: int
    id_user: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
