"""API routes for booking reports."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from groundbooking.core.catalog import ReportPeriod
from groundbooking.core.security import Identity, require_admin
from groundbooking.dependencies import get_db
from groundbooking.schemas.report import BookingReportResponse
from groundbooking.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/", response_model=BookingReportResponse)
def get_booking_report(
    period: ReportPeriod = Query(
        ReportPeriod.DAY,
        description="Calendar unit used to select bookings: day, month or year.",
    ),
    anchor: Optional[date] = Query(
        None,
        description="Any date inside the requested unit. Defaults to the current date.",
    ),
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
) -> BookingReportResponse:
    """Return booking counts by status and ground for the selected period."""

    service = ReportService(db)
    return service.get_report(period=period, anchor=anchor)


__all__ = ["router"]
