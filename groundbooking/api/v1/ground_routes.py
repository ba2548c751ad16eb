"""API routes exposing slot catalogs and availability per ground."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from groundbooking.core.catalog import GroundType
from groundbooking.core.security import Identity, get_current_identity
from groundbooking.dependencies import get_db
from groundbooking.schemas.availability import (
    CalendarResponse,
    GroundAvailabilityResponse,
    SlotCatalogResponse,
)
from groundbooking.services.availability_service import AvailabilityService

router = APIRouter(prefix="/grounds", tags=["grounds"])


@router.get("/{ground_type}/slots", response_model=SlotCatalogResponse)
def get_slot_catalog(
    ground_type: GroundType,
    identity: Identity = Depends(get_current_identity),
) -> SlotCatalogResponse:
    """Return the fixed slots offered by a ground."""

    return AvailabilityService.get_slot_catalog(ground_type)


@router.get("/{ground_type}/availability", response_model=GroundAvailabilityResponse)
def get_availability(
    ground_type: GroundType,
    *,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
    date_value: Optional[date] = Query(
        None,
        alias="date",
        description="Date in ISO format (YYYY-MM-DD). Defaults to the current date.",
        examples=["2024-07-04"],
    ),
) -> GroundAvailabilityResponse:
    """Return the status of every slot of the ground on the selected date."""

    service = AvailabilityService(db)
    return service.get_availability(ground_type, date_value or date.today())


@router.get("/{ground_type}/calendar", response_model=CalendarResponse)
def get_calendar(
    ground_type: GroundType,
    *,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> CalendarResponse:
    """Return dates that are fully booked or have pending bookings."""

    service = AvailabilityService(db)
    return service.get_calendar(ground_type)


__all__ = ["router"]
