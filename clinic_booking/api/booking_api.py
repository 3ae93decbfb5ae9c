"""
Booking API Endpoints

Whitelisted functions for frontend/external use. All endpoints require a
logged-in session and reply with the {"status", "message"} envelope.

Business rejections are thrown as frappe.ValidationError and a missing
doctor/appointment as frappe.DoesNotExistError, so Frappe's exception
handler renders them with a 4xx status.
"""

import frappe
from frappe import _
from typing import Any, Dict

from clinic_booking.clinic_booking.scheduling.availability import (
	AvailabilityResult,
	UnavailableReason,
)
from clinic_booking.clinic_booking.scheduling.overlap import evaluate_booking
from clinic_booking.clinic_booking.scheduling.time_of_day import InvalidTimeFormat

from clinic_booking.api.shared import (
	validate_booking_date,
	validate_doctor_id,
	validate_docname,
	validate_status,
	validate_time_string,
)


def _evaluate_or_throw(doctor: str, date: str, time: str, for_update: bool = False) -> AvailabilityResult:
	"""Run the booking check and throw the matching Frappe exception on rejection."""
	try:
		result = evaluate_booking(doctor, date, time, for_update=for_update)
	except InvalidTimeFormat as e:
		frappe.throw(_(str(e)), frappe.ValidationError)

	if result.available:
		return result

	if result.reason == UnavailableReason.DOCTOR_NOT_FOUND:
		frappe.throw(_(result.message), frappe.DoesNotExistError)

	frappe.throw(_(result.message), frappe.ValidationError)


@frappe.whitelist(methods=['GET', 'POST'])
def check_booking_availability(doctor: str, date: str, time: str) -> Dict[str, Any]:
	"""
	Verifica si el doctor puede aceptar una cita en date/time.

	No reserva el slot: dos solicitudes simultáneas pueden ver disponible el
	mismo horario. Para reservar con bloqueo usar book_appointment.

	Args:
		doctor: identificador del doctor (User ID)
		date: fecha opaca, comparada por igualdad exacta
		time: hora "HH:mm" o "hh:mm A"

	Returns:
		dict: {"status": True, "message": "Appointment available"}

	Example:
		```javascript
		frappe.call({
			method: "clinic_booking.api.booking_api.check_booking_availability",
			args: {doctor: "dr.house@example.com", date: "2026-01-20", time: "02:30 PM"},
			callback: function(r) {
				console.log(r.message.message);
			}
		});
		```
	"""
	doctor = validate_doctor_id(doctor)
	date = validate_booking_date(date)
	time = validate_time_string(time)

	result = _evaluate_or_throw(doctor, date, time)

	return {
		"status": True,
		"message": _(result.message)
	}


@frappe.whitelist(methods=['POST'])
def book_appointment(doctor: str, date: str, time: str) -> Dict[str, Any]:
	"""
	Verifica disponibilidad y crea el Clinic Appointment en la misma transacción.

	La fila del Doctor se lee con SELECT ... FOR UPDATE, así que dos reservas
	concurrentes para el mismo doctor se serializan y la segunda ve la primera.

	Args:
		doctor: identificador del doctor (User ID)
		date: fecha opaca
		time: hora "HH:mm" o "hh:mm A"

	Returns:
		dict: {"status": True, "message": ..., "data": {"name": ..., "time": "HH:mm"}}
	"""
	doctor = validate_doctor_id(doctor)
	date = validate_booking_date(date)
	time = validate_time_string(time)

	_evaluate_or_throw(doctor, date, time, for_update=True)

	appointment = frappe.get_doc({
		"doctype": "Clinic Appointment",
		"doctor": doctor,
		"patient": frappe.session.user,
		"date": date,
		"time": time,
		"status": "pending"
	})
	appointment.insert()

	frappe.logger("clinic_booking").info(
		f"Appointment {appointment.name} booked with {doctor} on {date} at {appointment.time}"
	)

	return {
		"status": True,
		"message": _("Appointment booked successfully"),
		"data": {
			"name": appointment.name,
			"time": appointment.time
		}
	}


@frappe.whitelist(methods=['POST'])
def change_appointment_status(appointment: str, status: str) -> Dict[str, Any]:
	"""
	Cambia el status de un Clinic Appointment (pending/approved/rejected).

	Solo el doctor de la cita o un System Manager pueden cambiarlo. El
	paciente recibe una notificación (ver ClinicAppointment.on_update).

	Args:
		appointment: nombre del Clinic Appointment
		status: nuevo status

	Returns:
		dict: {"status": True, "message": "Appointment status changed successfully"}
	"""
	appointment = validate_docname(appointment, "appointment")
	status = validate_status(status)

	if not frappe.db.exists("Clinic Appointment", appointment):
		frappe.throw(_("Appointment not found"), frappe.DoesNotExistError)

	doc = frappe.get_doc("Clinic Appointment", appointment)

	if doc.doctor != frappe.session.user and "System Manager" not in frappe.get_roles():
		frappe.throw(_("Not permitted to change this appointment"), frappe.PermissionError)

	doc.status = status
	doc.save(ignore_permissions=True)

	return {
		"status": True,
		"message": _("Appointment status changed successfully")
	}
