"""Domain services for the ground booking service."""

from groundbooking.services.availability_service import AvailabilityService
from groundbooking.services.booking_service import BookingService
from groundbooking.services.notification_client import NotificationClient
from groundbooking.services.report_service import ReportService
from groundbooking.services.user_service import UserService

__all__ = [
    "AvailabilityService",
    "BookingService",
    "NotificationClient",
    "ReportService",
    "UserService",
]
