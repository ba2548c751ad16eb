"""Availability response models."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from groundbooking.core.catalog import DateStatus, GroundType, SlotStatus


class SlotCatalogResponse(BaseModel):
    ground_type: GroundType
    slots: List[str] = Field(..., description="Bookable slots in display order.")
    full_day_slot: Optional[str] = Field(
        None, description="Slot that overlaps every other slot of the day, if any."
    )


class SlotAvailabilityResponse(BaseModel):
    slot: str
    status: SlotStatus
    is_full_day: bool
    is_available: bool


class GroundAvailabilityResponse(BaseModel):
    """Status of every slot of a ground on one date."""

    ground_type: GroundType
    target_date: date
    date_status: DateStatus
    slots: List[SlotAvailabilityResponse]


class CalendarMark(BaseModel):
    booking_date: date
    status: DateStatus


class CalendarResponse(BaseModel):
    """Dates that are fully booked or have pending bookings."""

    ground_type: GroundType
    marks: List[CalendarMark]


__all__ = [
    "CalendarMark",
    "CalendarResponse",
    "GroundAvailabilityResponse",
    "SlotAvailabilityResponse",
    "SlotCatalogResponse",
]
