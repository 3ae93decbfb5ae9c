# Copyright (c) 2026, Clinic Booking Contributors
# For license information, please see license.txt

"""
Clinic Appointment DocType

A patient's booking with a doctor on an opaque date string at a wall-clock
time. Status changes notify the patient.
"""

import frappe
from frappe import _
from frappe.model.document import Document

from clinic_booking.clinic_booking.scheduling.time_of_day import (
	InvalidTimeFormat,
	format_24h,
	parse_time_of_day,
)

APPOINTMENT_STATUSES = ("pending", "approved", "rejected")


class ClinicAppointment(Document):
	"""
	Clinic Appointment.

	Flujo:
	1. Se crea en estado pending (vía book_appointment o desk)
	2. El doctor la aprueba o rechaza (change_appointment_status)
	3. Cada cambio de estado encola una notificación al paciente
	"""

	def validate(self) -> None:
		"""
		Validación antes de guardar.

		Ejecuta:
		1. Validar doctor y fecha requeridos
		2. Normalizar time a HH:mm
		3. Validar status
		"""
		self._validate_required()
		self._normalize_time()
		self._validate_status()

	def on_update(self) -> None:
		"""Encola la notificación al paciente si cambió el status."""
		doc_before_save = self.get_doc_before_save()
		if not doc_before_save or doc_before_save.status == self.status:
			return

		frappe.enqueue(
			"clinic_booking.clinic_booking.notifications.appointment.send_status_change_notification",
			appointment_name=self.name,
			queue="short",
			enqueue_after_commit=True,
		)

	# ===== VALIDATION METHODS =====

	def _validate_required(self) -> None:
		if not self.doctor:
			frappe.throw(_("Doctor is required"))
		if not self.date:
			frappe.throw(_("Date is required"))

	def _normalize_time(self) -> None:
		"""Acepta HH:mm o hh:mm AM/PM y almacena HH:mm."""
		if not self.time:
			frappe.throw(_("Time is required"))

		try:
			self.time = format_24h(parse_time_of_day(self.time))
		except InvalidTimeFormat as e:
			frappe.throw(_(str(e)))

	def _validate_status(self) -> None:
		if not self.status:
			self.status = "pending"

		if self.status not in APPOINTMENT_STATUSES:
			frappe.throw(_("Invalid status {0}").format(self.status))
