"""Slot and date availability rules computed over a snapshot of bookings.

Every function here is pure: it receives the complete list of booking records
for a ground (ORM rows or plain mappings), never mutates it and keeps no state
between calls. Callers re-run the functions in full whenever their snapshot
changes.

Records whose date, status or ground type cannot be interpreted are dropped
before any rule is applied, so they never block a slot and never show up in a
report.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, Mapping, Optional, Set

from groundbooking.core.catalog import (
    FULL_DAY_SLOTS,
    SUB_SLOTS,
    BookingStatus,
    DateStatus,
    GroundType,
    ReportPeriod,
    SlotStatus,
    coerce_enum,
    ground_for_slot,
    slots_for,
)

_FIELD_ALIASES = {
    "booking_date": ("booking_date", "date"),
    "time_slot": ("time_slot", "timeSlot"),
    "status": ("status",),
    "ground_type": ("ground_type", "groundType"),
}

_SEVERITY = {
    SlotStatus.AVAILABLE: 0,
    SlotStatus.PENDING: 1,
    SlotStatus.BOOKED: 2,
}

DayIndex = Dict[str, Set[BookingStatus]]


@dataclass(frozen=True)
class _Entry:
    booking_date: date
    time_slot: str
    status: BookingStatus
    ground_type: GroundType


@dataclass(frozen=True)
class SlotAvailability:
    slot: str
    status: SlotStatus
    is_full_day: bool = False

    @property
    def is_available(self) -> bool:
        return self.status is SlotStatus.AVAILABLE


@dataclass(frozen=True)
class BookingReport:
    period: ReportPeriod
    anchor: date
    total_count: int = 0
    approved_count: int = 0
    rejected_count: int = 0
    pending_count: int = 0
    cricket_count: int = 0
    football_count: int = 0


def _read(record: object, field: str) -> object:
    for name in _FIELD_ALIASES[field]:
        if isinstance(record, Mapping):
            value = record.get(name)
        else:
            value = getattr(record, name, None)
        if value is not None:
            return value
    return None


def _coerce_date(value: object) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00")).date()
        except ValueError:
            return None
    return None


def _as_day(value: object) -> date:
    day = _coerce_date(value)
    if day is None:
        raise ValueError(f"Unrecognized date: {value!r}")
    return day


def _normalize(
    records: Iterable[object], ground_type: Optional[GroundType] = None
) -> List[_Entry]:
    entries: List[_Entry] = []
    for record in records:
        booking_date = _coerce_date(_read(record, "booking_date"))
        status = coerce_enum(BookingStatus, _read(record, "status"))
        record_ground = coerce_enum(GroundType, _read(record, "ground_type"))
        time_slot = _read(record, "time_slot")

        if booking_date is None or status is None or record_ground is None:
            continue
        if not isinstance(time_slot, str):
            continue
        if ground_type is not None and record_ground is not ground_type:
            continue

        entries.append(_Entry(booking_date, time_slot, status, record_ground))
    return entries


def _index_by_date(entries: Iterable[_Entry]) -> Dict[date, DayIndex]:
    index: Dict[date, DayIndex] = defaultdict(lambda: defaultdict(set))
    for entry in entries:
        index[entry.booking_date][entry.time_slot].add(entry.status)
    return index


def _severity(statuses: Iterable[BookingStatus]) -> SlotStatus:
    statuses = set(statuses)
    if BookingStatus.APPROVED in statuses:
        return SlotStatus.BOOKED
    if BookingStatus.PENDING in statuses:
        return SlotStatus.PENDING
    return SlotStatus.AVAILABLE


def _most_severe(*values: SlotStatus) -> SlotStatus:
    return max(values, key=_SEVERITY.__getitem__)


def _classify_in_day(
    day: DayIndex, slot: str, ground_type: Optional[GroundType]
) -> SlotStatus:
    own = _severity(day.get(slot, ()))
    full_day = FULL_DAY_SLOTS[ground_type] if ground_type is not None else None
    if full_day is None:
        return own

    sub_slots = SUB_SLOTS[ground_type]
    if slot == full_day:
        sub_statuses = [_severity(day.get(sub_slot, ())) for sub_slot in sub_slots]
        if all(status is SlotStatus.BOOKED for status in sub_statuses):
            return SlotStatus.BOOKED
        return _most_severe(own, *sub_statuses)

    if slot in sub_slots:
        return _most_severe(own, _severity(day.get(full_day, ())))

    return own


def _is_fully_covered(ground_type: GroundType, approved_slots: Set[str]) -> bool:
    full_day = FULL_DAY_SLOTS[ground_type]
    if full_day is not None and full_day in approved_slots:
        return True
    return all(slot in approved_slots for slot in SUB_SLOTS[ground_type])


def _classify_day(ground_type: GroundType, day: DayIndex) -> DateStatus:
    approved_slots = {
        slot for slot, statuses in day.items() if BookingStatus.APPROVED in statuses
    }
    if _is_fully_covered(ground_type, approved_slots):
        return DateStatus.FULLY_BOOKED
    if any(BookingStatus.PENDING in statuses for statuses in day.values()):
        return DateStatus.HAS_PENDING
    return DateStatus.NORMAL


def classify_slot(
    target_date: date,
    slot: str,
    records: Iterable[object],
    ground_type: Optional[GroundType] = None,
) -> SlotStatus:
    """Classify one slot of one day as available, pending or booked.

    Approved bookings dominate pending ones and rejected bookings never block.
    When the slot belongs to the football catalog the full-day slot and the
    three sub-day slots block each other. ``ground_type`` is inferred from the
    slot when it is not given.
    """

    ground_type = ground_type or ground_for_slot(slot)
    index = _index_by_date(_normalize(records, ground_type))
    return _classify_in_day(index.get(_as_day(target_date), {}), slot, ground_type)


def classify_date(
    target_date: date, ground_type: GroundType, records: Iterable[object]
) -> DateStatus:
    """Classify a whole day for calendar display.

    A day is fully booked only through approved bookings; pending coverage
    marks it as having pending bookings instead.
    """

    index = _index_by_date(_normalize(records, ground_type))
    return _classify_day(ground_type, index.get(_as_day(target_date), {}))


def slot_board(
    target_date: date, ground_type: GroundType, records: Iterable[object]
) -> List[SlotAvailability]:
    index = _index_by_date(_normalize(records, ground_type))
    day = index.get(_as_day(target_date), {})
    full_day = FULL_DAY_SLOTS[ground_type]
    return [
        SlotAvailability(
            slot=slot,
            status=_classify_in_day(day, slot, ground_type),
            is_full_day=slot == full_day,
        )
        for slot in slots_for(ground_type)
    ]


def is_slot_bookable(
    target_date: date, slot: str, ground_type: GroundType, records: Iterable[object]
) -> bool:
    status = classify_slot(target_date, slot, records, ground_type=ground_type)
    return status is SlotStatus.AVAILABLE


def calendar_marks(
    ground_type: GroundType, records: Iterable[object]
) -> Dict[date, DateStatus]:
    """Return every booked-into day whose classification is not ``normal``."""

    index = _index_by_date(_normalize(records, ground_type))
    marks: Dict[date, DateStatus] = {}
    for booking_date in sorted(index):
        status = _classify_day(ground_type, index[booking_date])
        if status is not DateStatus.NORMAL:
            marks[booking_date] = status
    return marks


def _in_period(booking_date: date, period: ReportPeriod, anchor: date) -> bool:
    if booking_date.year != anchor.year:
        return False
    if period is ReportPeriod.YEAR:
        return True
    if booking_date.month != anchor.month:
        return False
    if period is ReportPeriod.MONTH:
        return True
    return booking_date.day == anchor.day


def aggregate_report(
    records: Iterable[object], period: ReportPeriod, anchor: date
) -> BookingReport:
    """Count bookings falling in the calendar day, month or year of ``anchor``."""

    anchor = _as_day(anchor)
    status_counts = {status: 0 for status in BookingStatus}
    ground_counts = {ground: 0 for ground in GroundType}
    total = 0

    for entry in _normalize(records):
        if not _in_period(entry.booking_date, period, anchor):
            continue
        total += 1
        status_counts[entry.status] += 1
        ground_counts[entry.ground_type] += 1

    return BookingReport(
        period=period,
        anchor=anchor,
        total_count=total,
        approved_count=status_counts[BookingStatus.APPROVED],
        rejected_count=status_counts[BookingStatus.REJECTED],
        pending_count=status_counts[BookingStatus.PENDING],
        cricket_count=ground_counts[GroundType.CRICKET],
        football_count=ground_counts[GroundType.FOOTBALL],
    )


__all__ = [
    "BookingReport",
    "SlotAvailability",
    "aggregate_report",
    "calendar_marks",
    "classify_date",
    "classify_slot",
    "is_slot_bookable",
    "slot_board",
]
