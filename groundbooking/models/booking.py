"""SQLAlchemy model for ground bookings."""

from sqlalchemy import BigInteger, Column, Date, DateTime, Integer, String, func

from groundbooking.core.catalog import BookingStatus
from groundbooking.core.database import Base


class Booking(Base):
    """A request to use a ground on a given date and time slot.

    Rows are never deleted; only ``status`` changes after creation.
    """

    __tablename__ = "booking"

    id_booking = Column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True
    )
    ground_type = Column(String(30), nullable=False, index=True)
    booking_date = Column(Date, nullable=False, index=True)
    time_slot = Column(String(100), nullable=False)
    status = Column(String(30), nullable=False, default=BookingStatus.PENDING.value)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(20), nullable=False)
    payment_reference = Column(String(100), nullable=True)
    amount = Column(Integer, nullable=False)
    id_user = Column(String(128), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Booking(id_booking={self.id_booking}, ground_type={self.ground_type}, "
            f"booking_date={self.booking_date}, time_slot={self.time_slot}, "
            f"status={self.status})>"
        )


__all__ = ["Booking"]
