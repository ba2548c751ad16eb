import logging
from datetime import date
from typing import List, Optional

from fastapi import BackgroundTasks, HTTPException, status
from sqlalchemy.orm import Session

from groundbooking.core.catalog import (
    BookingStatus,
    GroundType,
    coerce_enum,
    slots_for,
)
from groundbooking.core.config import settings
from groundbooking.core.security import Identity
from groundbooking.models.booking import Booking
from groundbooking.repository import booking_repository
from groundbooking.schemas.booking import BookingCreate
from groundbooking.services import availability_engine
from groundbooking.services.notification_client import NotificationClient

logger = logging.getLogger(__name__)

# Bookings are only ever decided once, by an administrator.
_ALLOWED_TRANSITIONS = {
    BookingStatus.PENDING: (BookingStatus.APPROVED, BookingStatus.REJECTED),
}


class BookingService:

    def __init__(
        self,
        db: Session,
        *,
        conflict_guard: Optional[bool] = None,
        notification_client: Optional[NotificationClient] = None,
    ):
        self.db = db
        self.conflict_guard = (
            settings.BOOKING_CONFLICT_GUARD if conflict_guard is None else conflict_guard
        )
        self.notification_client = notification_client or NotificationClient()

    def _ensure_slot_in_catalog(self, ground_type: GroundType, time_slot: str) -> None:
        if time_slot not in slots_for(ground_type):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown time slot '{time_slot}' for {ground_type.value} ground",
            )

    def _ensure_slot_free(
        self, *, ground_type: GroundType, booking_date: date, time_slot: str
    ) -> None:
        booking_repository.lock_ground_day(
            self.db, ground_type=ground_type, booking_date=booking_date
        )
        day_bookings = booking_repository.list_bookings_for_day(
            self.db, ground_type=ground_type, booking_date=booking_date
        )
        if not availability_engine.is_slot_bookable(
            booking_date, time_slot, ground_type, day_bookings
        ):
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Time slot is no longer available for this date",
            )

    def get_booking(self, booking_id: int, *, identity: Optional[Identity] = None) -> Booking:
        """Return a booking; non-admin identities only see their own."""

        booking = booking_repository.get_booking(self.db, booking_id)
        visible = booking is not None and (
            identity is None
            or identity.is_admin
            or booking.email.lower() == identity.email.lower()
        )
        if not visible:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Booking not found",
            )
        return booking

    def list_bookings(
        self,
        *,
        status_filter: Optional[BookingStatus] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Booking]:
        if start_date is not None and end_date is not None and start_date > end_date:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="start_date must be on or before end_date",
            )

        return booking_repository.list_bookings(
            self.db,
            status_filter=status_filter,
            start_date=start_date,
            end_date=end_date,
        )

    def list_my_bookings(
        self,
        identity: Identity,
        *,
        status_filter: Optional[BookingStatus] = None,
    ) -> List[Booking]:
        return booking_repository.list_bookings_by_email(
            self.db, identity.email, status_filter=status_filter
        )

    def create_booking(
        self,
        identity: Identity,
        payload: BookingCreate,
        *,
        background_tasks: Optional[BackgroundTasks] = None,
    ) -> Booking:
        self._ensure_slot_in_catalog(payload.ground_type, payload.time_slot)

        if self.conflict_guard:
            self._ensure_slot_free(
                ground_type=payload.ground_type,
                booking_date=payload.booking_date,
                time_slot=payload.time_slot,
            )

        booking_data = payload.model_dump()
        booking_data["ground_type"] = payload.ground_type.value
        booking_data["status"] = BookingStatus.PENDING.value
        booking_data["amount"] = settings.BOOKING_AMOUNT_PAISE
        booking_data["id_user"] = identity.uid

        booking = booking_repository.create_booking(self.db, booking_data)
        logger.info(
            "Created pending booking %s for %s on %s (%s)",
            booking.id_booking,
            booking.ground_type,
            booking.booking_date,
            booking.time_slot,
        )

        if background_tasks is not None:
            background_tasks.add_task(
                self.notification_client.notify_pending_booking,
                NotificationClient.build_pending_payload(booking),
            )

        return booking

    def update_status(self, booking_id: int, new_status: BookingStatus) -> Booking:
        booking = self.get_booking(booking_id)

        current_status = coerce_enum(BookingStatus, booking.status)
        if new_status not in _ALLOWED_TRANSITIONS.get(current_status, ()):
            raise self._transition_error(booking.status, new_status)

        applied = booking_repository.update_status(
            self.db, booking, new_status, expected_status=current_status
        )
        if not applied:
            # Another administrator decided the booking after it was read.
            raise self._transition_error(booking.status, new_status)

        logger.info("Booking %s marked as %s", booking_id, new_status.value)
        return booking

    @staticmethod
    def _transition_error(current: str, new_status: BookingStatus) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Cannot change booking status from '{current}' to '{new_status.value}'",
        )


__all__ = ["BookingService"]
