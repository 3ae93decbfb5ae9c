"""
Clinic Booking API

Structure:
    api/
    ├── __init__.py              # This file
    ├── booking_api.py           # Whitelisted booking endpoints
    └── shared/                  # Shared utilities
        ├── __init__.py
        └── validators.py        # Input validators

Usage:
    frappe.call("clinic_booking.api.booking_api.check_booking_availability", ...)
"""

from . import shared

__all__ = [
    "shared",
]
