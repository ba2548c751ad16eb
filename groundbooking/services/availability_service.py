"""Ground availability views built from the stored bookings."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Session

from groundbooking.core.catalog import FULL_DAY_SLOTS, GroundType, slots_for
from groundbooking.repository import booking_repository
from groundbooking.schemas.availability import (
    CalendarMark,
    CalendarResponse,
    GroundAvailabilityResponse,
    SlotAvailabilityResponse,
    SlotCatalogResponse,
)
from groundbooking.services import availability_engine


class AvailabilityService:

    def __init__(self, db: Session):
        self.db = db

    @staticmethod
    def get_slot_catalog(ground_type: GroundType) -> SlotCatalogResponse:
        return SlotCatalogResponse(
            ground_type=ground_type,
            slots=list(slots_for(ground_type)),
            full_day_slot=FULL_DAY_SLOTS[ground_type],
        )

    def get_availability(
        self, ground_type: GroundType, target_date: date
    ) -> GroundAvailabilityResponse:
        records = booking_repository.list_bookings_by_ground(self.db, ground_type)
        board = availability_engine.slot_board(target_date, ground_type, records)

        return GroundAvailabilityResponse(
            ground_type=ground_type,
            target_date=target_date,
            date_status=availability_engine.classify_date(target_date, ground_type, records),
            slots=[
                SlotAvailabilityResponse(
                    slot=entry.slot,
                    status=entry.status,
                    is_full_day=entry.is_full_day,
                    is_available=entry.is_available,
                )
                for entry in board
            ],
        )

    def get_calendar(self, ground_type: GroundType) -> CalendarResponse:
        records = booking_repository.list_bookings_by_ground(self.db, ground_type)
        marks = availability_engine.calendar_marks(ground_type, records)

        return CalendarResponse(
            ground_type=ground_type,
            marks=[
                CalendarMark(booking_date=booking_date, status=status_value)
                for booking_date, status_value in marks.items()
            ],
        )
