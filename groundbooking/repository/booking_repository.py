from __future__ import annotations

import zlib
from datetime import date
from typing import Dict, Optional

from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from groundbooking.core.catalog import BookingStatus, GroundType
from groundbooking.models.booking import Booking


class BookingRepositoryError(RuntimeError):
    """Raised when the booking store cannot fulfill a request."""


def commit_or_raise(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise BookingRepositoryError(str(exc)) from exc


def list_bookings_by_ground(db: Session, ground_type: GroundType) -> list[Booking]:
    return (
        db.query(Booking)
        .filter(func.lower(Booking.ground_type) == ground_type.value)
        .all()
    )


def list_bookings_by_email(
    db: Session,
    email: str,
    *,
    status_filter: Optional[BookingStatus] = None,
) -> list[Booking]:
    query = db.query(Booking).filter(func.lower(Booking.email) == email.strip().lower())

    if status_filter is not None:
        query = query.filter(func.lower(Booking.status) == status_filter.value)

    return query.order_by(Booking.booking_date.desc(), Booking.id_booking.desc()).all()


def list_bookings(
    db: Session,
    *,
    status_filter: Optional[BookingStatus] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> list[Booking]:
    query = db.query(Booking)

    if status_filter is not None:
        query = query.filter(func.lower(Booking.status) == status_filter.value)
    if start_date is not None:
        query = query.filter(Booking.booking_date >= start_date)
    if end_date is not None:
        query = query.filter(Booking.booking_date <= end_date)

    return query.order_by(Booking.booking_date.desc(), Booking.id_booking.desc()).all()


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id_booking == booking_id).first()


def lock_ground_day(db: Session, *, ground_type: GroundType, booking_date: date) -> None:
    """Serialize writers for one ground and day until the transaction ends.

    PostgreSQL takes a transaction-scoped advisory lock keyed on the ground and
    day. SQLite has no row or key locks, so the whole database write lock is
    taken up front with ``BEGIN IMMEDIATE``; pysqlite would otherwise run the
    following reads outside any transaction.
    """

    dialect = db.get_bind().dialect.name

    if dialect == "postgresql":
        key = zlib.crc32(f"{ground_type.value}:{booking_date.isoformat()}".encode("utf-8"))
        db.execute(text("SELECT pg_advisory_xact_lock(:key)"), {"key": key})
    elif dialect == "sqlite":
        connection = db.connection()
        # A pysqlite transaction is only open after a write, which already holds the lock.
        if not connection.connection.driver_connection.in_transaction:
            connection.exec_driver_sql("BEGIN IMMEDIATE")


def list_bookings_for_day(
    db: Session, *, ground_type: GroundType, booking_date: date
) -> list[Booking]:
    return (
        db.query(Booking)
        .filter(func.lower(Booking.ground_type) == ground_type.value)
        .filter(Booking.booking_date == booking_date)
        .all()
    )


def create_booking(db: Session, booking_data: Dict[str, object]) -> Booking:
    booking = Booking(**booking_data)
    db.add(booking)
    commit_or_raise(db)
    db.refresh(booking)
    return booking


def update_status(
    db: Session,
    booking: Booking,
    new_status: BookingStatus,
    *,
    expected_status: Optional[BookingStatus] = None,
) -> bool:
    """Write ``new_status``; return ``False`` when the stored status moved on.

    With ``expected_status`` the row is only updated while it still holds that
    status, so two concurrent decisions cannot both be applied.
    """

    query = db.query(Booking).filter(Booking.id_booking == booking.id_booking)
    if expected_status is not None:
        query = query.filter(func.lower(Booking.status) == expected_status.value)

    updated = query.update({Booking.status: new_status.value}, synchronize_session=False)
    commit_or_raise(db)
    db.refresh(booking)
    return updated == 1


__all__ = [
    "BookingRepositoryError",
    "commit_or_raise",
    "create_booking",
    "get_booking",
    "list_bookings",
    "list_bookings_by_email",
    "list_bookings_by_ground",
    "list_bookings_for_day",
    "lock_ground_day",
    "update_status",
]
