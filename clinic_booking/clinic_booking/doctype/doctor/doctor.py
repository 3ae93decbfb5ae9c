# Copyright (c) 2026, Clinic Booking Contributors
# For license information, please see license.txt

"""
Doctor DocType

Doctor profile with daily working hours. Named by the doctor's User, so the
User ID is the doctor identifier used by the booking API.
"""

import frappe
from frappe import _
from frappe.model.document import Document

from clinic_booking.clinic_booking.scheduling.time_of_day import (
	InvalidTimeFormat,
	format_24h,
	parse_time_of_day,
)

DOCTOR_STATUSES = ("pending", "approved", "rejected")


class Doctor(Document):
	"""
	Doctor with working-hours validation.

	Validations:
	- from_time and to_time in HH:mm or hh:mm AM/PM (stored as HH:mm)
	- from_time <= to_time (same-day window, no overnight shifts)
	- status in pending/approved/rejected
	"""

	def validate(self) -> None:
		self._validate_status()
		self._validate_working_hours()

	def _validate_status(self) -> None:
		if not self.status:
			self.status = "pending"

		if self.status not in DOCTOR_STATUSES:
			frappe.throw(_("Invalid status {0}").format(self.status))

	def _validate_working_hours(self) -> None:
		"""Normaliza from_time/to_time a HH:mm y valida que from_time <= to_time."""
		if not self.from_time or not self.to_time:
			frappe.throw(_("From Time and To Time are required"))

		try:
			start = parse_time_of_day(self.from_time)
			end = parse_time_of_day(self.to_time)
		except InvalidTimeFormat as e:
			frappe.throw(_(str(e)))

		if start > end:
			frappe.throw(_("From Time must be earlier than or equal to To Time"))

		self.from_time = format_24h(start)
		self.to_time = format_24h(end)
