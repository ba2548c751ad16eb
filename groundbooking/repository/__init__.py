"""Persistence helpers for bookings and user profiles."""

from groundbooking.repository.booking_repository import BookingRepositoryError

__all__ = ["BookingRepositoryError"]
