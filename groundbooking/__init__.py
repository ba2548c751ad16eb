"""Ground booking service: slot availability, booking review and reports."""
