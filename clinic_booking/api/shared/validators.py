"""
Booking-specific Validators

Input checks for the booking API. Each validator returns the accepted value
or throws frappe.ValidationError.
"""

import re
import frappe
from frappe import _

from clinic_booking.clinic_booking.scheduling.time_of_day import (
    InvalidTimeFormat,
    parse_time_of_day,
)

APPOINTMENT_STATUSES = ("pending", "approved", "rejected")


def validate_docname(name: str, field_name: str = "name") -> str:
    """
    Validate a document name (ID).

    Ensures the name is not too long and doesn't contain injection patterns.

    Args:
        name: Document name to validate
        field_name: Name of field for error messages

    Returns:
        str: Validated document name

    Raises:
        frappe.ValidationError: If name is invalid
    """
    if not name:
        frappe.throw(_(f"{field_name} is required"), frappe.ValidationError)

    name = str(name).strip()

    if len(name) > 140:
        frappe.throw(_(f"{field_name} is too long"), frappe.ValidationError)

    dangerous_patterns = [
        r"<script",
        r"javascript:",
        r"SELECT\s+",
        r"INSERT\s+",
        r"UPDATE\s+",
        r"DELETE\s+",
        r"DROP\s+",
        r"UNION\s+",
        r"--",
        r";",
    ]

    for pattern in dangerous_patterns:
        if re.search(pattern, name, re.IGNORECASE):
            frappe.throw(_(f"Invalid {field_name}"), frappe.ValidationError)

    return name


_USER_ID = re.compile(r"^[^@\s<>;'\"]+@[^@\s<>;'\"]+\.[^@\s<>;'\"]+$", re.ASCII)


def validate_doctor_id(doctor: str, field_name: str = "doctor") -> str:
    """
    Validate a doctor identifier.

    Doctors are named by their User ID, an email address, so the check is
    on the address shape. Characters legal in addresses (e.g. "--") pass.
    """
    if not doctor:
        frappe.throw(_(f"{field_name} is required"), frappe.ValidationError)

    doctor = str(doctor).strip()

    if len(doctor) > 140:
        frappe.throw(_(f"{field_name} is too long"), frappe.ValidationError)

    if not _USER_ID.match(doctor):
        frappe.throw(_(f"Invalid {field_name}"), frappe.ValidationError)

    return doctor


def validate_booking_date(date_str: str, field_name: str = "date") -> str:
    """
    Validate the appointment date.

    The date is opaque: it is stored and matched exactly as sent, so only
    presence and length are checked.
    """
    if not date_str:
        frappe.throw(_(f"{field_name} is required"), frappe.ValidationError)

    date_str = str(date_str)

    if len(date_str) > 140:
        frappe.throw(_(f"{field_name} is too long"), frappe.ValidationError)

    return date_str


def validate_time_string(time_str: str, field_name: str = "time") -> str:
    """
    Validate a wall-clock time in HH:mm or hh:mm AM/PM form.

    Returns:
        str: The time as sent (normalization happens in the scheduling layer)

    Raises:
        frappe.ValidationError: If the time parses under neither form
    """
    if not time_str:
        frappe.throw(_(f"{field_name} is required"), frappe.ValidationError)

    try:
        parse_time_of_day(str(time_str))
    except InvalidTimeFormat as e:
        frappe.throw(_(str(e)), frappe.ValidationError)

    return str(time_str).strip()


def validate_status(status: str) -> str:
    """Validate an appointment status value."""
    if not status:
        frappe.throw(_("status is required"), frappe.ValidationError)

    status = str(status).strip().lower()

    if status not in APPOINTMENT_STATUSES:
        frappe.throw(
            _("Invalid status. Use one of: {0}").format(", ".join(APPOINTMENT_STATUSES)),
            frappe.ValidationError,
        )

    return status
