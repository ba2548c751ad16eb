"""HTTP client that hands booking events to the external notification service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from groundbooking.core.config import settings
from groundbooking.models.booking import Booking

logger = logging.getLogger(__name__)


class NotificationClient:
    """Posts events for administrators; delivery to devices happens downstream."""

    PENDING_BOOKING_PATH = "/notifications/bookings/pending"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        configured_base = base_url if base_url is not None else settings.NOTIFICATION_SERVICE_URL
        self._base_url = configured_base.rstrip("/") if configured_base else ""
        self._timeout = timeout or settings.NOTIFICATION_SERVICE_TIMEOUT

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url)

    @staticmethod
    def build_pending_payload(booking: Booking) -> Dict[str, Any]:
        return {
            "booking_id": booking.id_booking,
            "title": "New Pending Booking",
            "body": (
                f"{booking.name} has requested a booking for {booking.ground_type} "
                f"on {booking.booking_date.isoformat()} at {booking.time_slot}"
            ),
            "ground_type": booking.ground_type,
            "booking_date": booking.booking_date.isoformat(),
            "time_slot": booking.time_slot,
        }

    def notify_pending_booking(self, payload: Dict[str, Any]) -> bool:
        """Send the event; return ``False`` when it was skipped or failed."""

        if not self.is_configured:
            logger.info("Notification service URL not configured; skipping pending booking event")
            return False

        url = f"{self._base_url}{self.PENDING_BOOKING_PATH}"
        try:
            response = httpx.post(url, json=payload, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Notification service returned HTTP %s for booking %s: %s",
                exc.response.status_code,
                payload.get("booking_id"),
                exc.response.text,
            )
            return False
        except httpx.RequestError as exc:
            logger.warning("Failed to reach notification service: %s", exc)
            return False
        return True


__all__ = ["NotificationClient"]
