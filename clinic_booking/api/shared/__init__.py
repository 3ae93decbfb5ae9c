"""
Shared utilities for the Clinic Booking API.
"""

from .validators import (
    validate_booking_date,
    validate_doctor_id,
    validate_docname,
    validate_status,
    validate_time_string,
)

__all__ = [
    "validate_booking_date",
    "validate_doctor_id",
    "validate_docname",
    "validate_status",
    "validate_time_string",
]
