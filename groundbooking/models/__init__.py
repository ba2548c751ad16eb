"""SQLAlchemy models for the ground booking service."""
from groundbooking.models.booking import Booking
from groundbooking.models.user_profile import UserProfile

__all__ = ["Booking", "UserProfile"]
