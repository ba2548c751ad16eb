"""Aggregate booking reports for administrators."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from groundbooking.core.catalog import ReportPeriod
from groundbooking.repository import booking_repository
from groundbooking.schemas.report import BookingReportResponse
from groundbooking.services import availability_engine


class ReportService:
    """Recomputes report counts from the full booking set on every call."""

    def __init__(self, db: Session) -> None:
        self._db = db

    def get_report(
        self,
        *,
        period: ReportPeriod,
        anchor: Optional[date] = None,
    ) -> BookingReportResponse:
        anchor = anchor or date.today()
        records = booking_repository.list_bookings(self._db)
        report = availability_engine.aggregate_report(records, period, anchor)
        return BookingReportResponse.model_validate(report)


__all__ = ["ReportService"]
