"""Pydantic schemas for the ground booking service."""

from groundbooking.schemas.availability import (
    CalendarMark,
    CalendarResponse,
    GroundAvailabilityResponse,
    SlotAvailabilityResponse,
    SlotCatalogResponse,
)
from groundbooking.schemas.booking import BookingCreate, BookingResponse, BookingStatusUpdate
from groundbooking.schemas.report import BookingReportResponse
from groundbooking.schemas.user import UserProfileResponse, UserProfileUpdate

__all__ = [
    "BookingCreate",
    "BookingReportResponse",
    "BookingResponse",
    "BookingStatusUpdate",
    "CalendarMark",
    "CalendarResponse",
    "GroundAvailabilityResponse",
    "SlotAvailabilityResponse",
    "SlotCatalogResponse",
    "UserProfileResponse",
    "UserProfileUpdate",
]
