"""API routes for creating and reviewing bookings."""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status
from sqlalchemy.orm import Session

from groundbooking.core.catalog import BookingStatus
from groundbooking.core.security import Identity, get_current_identity, require_admin
from groundbooking.dependencies import get_db
from groundbooking.schemas.booking import BookingCreate, BookingResponse, BookingStatusUpdate
from groundbooking.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> BookingResponse:
    """Submit a booking request; it stays pending until an administrator decides."""

    service = BookingService(db)
    return service.create_booking(identity, payload, background_tasks=background_tasks)


@router.get("/me", response_model=List[BookingResponse])
def list_my_bookings(
    *,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
    status_filter: Optional[BookingStatus] = Query(
        None, alias="status", description="Filter bookings by status"
    ),
) -> List[BookingResponse]:
    """Retrieve the caller's bookings ordered from newest to oldest."""

    service = BookingService(db)
    return service.list_my_bookings(identity, status_filter=status_filter)


@router.get("/", response_model=List[BookingResponse])
def list_bookings(
    *,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
    status_filter: Optional[BookingStatus] = Query(
        None, alias="status", description="Filter bookings by status"
    ),
    start_date: Optional[date] = Query(None, description="First booking date (inclusive)"),
    end_date: Optional[date] = Query(None, description="Last booking date (inclusive)"),
) -> List[BookingResponse]:
    """Retrieve all bookings for review."""

    service = BookingService(db)
    return service.list_bookings(
        status_filter=status_filter,
        start_date=start_date,
        end_date=end_date,
    )


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
) -> BookingResponse:
    service = BookingService(db)
    return service.get_booking(booking_id, identity=identity)


@router.patch("/{booking_id}/status", response_model=BookingResponse)
def update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(require_admin),
) -> BookingResponse:
    """Approve or reject a pending booking."""

    service = BookingService(db)
    return service.update_status(booking_id, payload.status)


__all__ = ["router"]
