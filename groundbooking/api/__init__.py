"""HTTP API for the ground booking service."""
