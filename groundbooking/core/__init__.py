"""Core infrastructure for the ground booking service."""
