"""Closed value sets and the per-ground slot catalog."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple, Type, TypeVar


class GroundType(str, Enum):
    CRICKET = "cricket"
    FOOTBALL = "football"


class BookingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SlotStatus(str, Enum):
    AVAILABLE = "available"
    PENDING = "pending"
    BOOKED = "booked"


class DateStatus(str, Enum):
    NORMAL = "normal"
    FULLY_BOOKED = "fully_booked"
    HAS_PENDING = "has_pending"


class ReportPeriod(str, Enum):
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


CRICKET_SLOT = "09:00 AM - 05:00 PM"

FOOTBALL_SUB_SLOTS: Tuple[str, ...] = (
    "07:00 AM - 10:00 AM",
    "10:00 AM - 01:00 PM",
    "02:00 PM - 05:00 PM",
)
FOOTBALL_FULL_DAY_SLOT = "08:00 AM - 05:00 PM (Full Day)"

SUB_SLOTS: Dict[GroundType, Tuple[str, ...]] = {
    GroundType.CRICKET: (CRICKET_SLOT,),
    GroundType.FOOTBALL: FOOTBALL_SUB_SLOTS,
}
FULL_DAY_SLOTS: Dict[GroundType, Optional[str]] = {
    GroundType.CRICKET: None,
    GroundType.FOOTBALL: FOOTBALL_FULL_DAY_SLOT,
}

_EnumT = TypeVar("_EnumT", bound=Enum)


def coerce_enum(enum_cls: Type[_EnumT], value: object) -> Optional[_EnumT]:
    """Return the member matching ``value`` or ``None`` when it does not match.

    Matching ignores case and surrounding whitespace so raw strings read from
    storage can be mapped onto the closed value sets.
    """

    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower()
    for member in enum_cls:
        if member.value == normalized:
            return member
    return None


def slots_for(ground_type: GroundType) -> Tuple[str, ...]:
    """Ordered display list of slots: sub-day slots first, then the full-day slot."""

    full_day = FULL_DAY_SLOTS[ground_type]
    if full_day is None:
        return SUB_SLOTS[ground_type]
    return SUB_SLOTS[ground_type] + (full_day,)


def ground_for_slot(slot: str) -> Optional[GroundType]:
    for ground_type in GroundType:
        if slot in slots_for(ground_type):
            return ground_type
    return None


__all__ = [
    "BookingStatus",
    "CRICKET_SLOT",
    "DateStatus",
    "FOOTBALL_FULL_DAY_SLOT",
    "FOOTBALL_SUB_SLOTS",
    "FULL_DAY_SLOTS",
    "GroundType",
    "ReportPeriod",
    "SUB_SLOTS",
    "SlotStatus",
    "UserRole",
    "coerce_enum",
    "ground_for_slot",
    "slots_for",
]
