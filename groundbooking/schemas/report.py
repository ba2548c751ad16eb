"""Report response models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from groundbooking.core.catalog import ReportPeriod


class BookingReportResponse(BaseModel):
    """Booking counts for the calendar day, month or year containing ``anchor``."""

    period: ReportPeriod
    anchor: date
    total_count: int = Field(..., ge=0)
    approved_count: int = Field(..., ge=0)
    rejected_count: int = Field(..., ge=0)
    pending_count: int = Field(..., ge=0)
    cricket_count: int = Field(..., ge=0)
    football_count: int = Field(..., ge=0)

    class Config:
        from_attributes = True


__all__ = ["BookingReportResponse"]
