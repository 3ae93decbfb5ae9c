"""
Booking Lookup Service

Loads what the availability check needs from the database:
- Doctor working hours (Doctor DocType, named by the doctor's User)
- Non-rejected Clinic Appointments for the same doctor and date

and runs the pure check from availability.py.

The date is an opaque string matched by equality; it is never parsed.
"""

import frappe
from typing import List, Optional

from .availability import (
	BUFFER_AFTER_MINUTES,
	BUFFER_BEFORE_MINUTES,
	REJECTED_STATUS,
	AvailabilityResult,
	WorkingHours,
	check_availability,
	doctor_not_found,
)


def get_buffer_minutes() -> tuple:
	"""Read (before, after) buffers from site config, defaulting to 30/15."""
	before = frappe.conf.get("clinic_booking_buffer_before_minutes")
	after = frappe.conf.get("clinic_booking_buffer_after_minutes")
	return (
		BUFFER_BEFORE_MINUTES if before is None else int(before),
		BUFFER_AFTER_MINUTES if after is None else int(after),
	)


def get_working_hours(doctor: str, for_update: bool = False) -> Optional[WorkingHours]:
	"""
	Obtiene el horario de trabajo del doctor.

	Args:
		doctor: identificador del doctor (nombre del Doctor = User)
		for_update: bloquear la fila del doctor (SELECT ... FOR UPDATE)

	Returns:
		WorkingHours o None si el doctor no existe
	"""
	row = frappe.db.get_value(
		"Doctor",
		doctor,
		["name", "from_time", "to_time"],
		as_dict=True,
		for_update=for_update
	)
	if not row:
		return None

	return WorkingHours(from_time=row.from_time, to_time=row.to_time)


def get_booked_times(doctor: str, date: str) -> List[str]:
	"""
	Horas de los Clinic Appointments no rechazados del doctor en la fecha.

	Args:
		doctor: nombre del Doctor
		date: fecha opaca, comparada por igualdad exacta

	Returns:
		list[str]: horas en el formato almacenado
	"""
	filters = {
		"doctor": doctor,
		"date": date,
		"status": ["!=", REJECTED_STATUS]
	}
	appointments = frappe.get_all(
		"Clinic Appointment",
		filters=filters,
		fields=["name", "time", "status"]
	)

	return [appt.time for appt in appointments]


def evaluate_booking(
	doctor: str,
	date: str,
	time: str,
	for_update: bool = False
) -> AvailabilityResult:
	"""
	Evalúa si el doctor puede aceptar una cita en date/time.

	Algoritmo:
		1. Obtener horario del doctor (DOCTOR_NOT_FOUND si no existe)
		2. Obtener horas de appointments no rechazados para doctor + date
		3. Ejecutar check_availability con los buffers configurados

	Raises:
		InvalidTimeFormat: si la hora solicitada (o una almacenada) no se puede parsear
	"""
	working_hours = get_working_hours(doctor, for_update=for_update)
	if working_hours is None:
		return doctor_not_found()

	booked_times = get_booked_times(doctor, date)
	buffer_before, buffer_after = get_buffer_minutes()

	result = check_availability(
		working_hours,
		time,
		booked_times,
		buffer_before=buffer_before,
		buffer_after=buffer_after
	)

	if not result.available:
		frappe.logger("clinic_booking").info(
			f"Booking rejected for doctor {doctor} on {date} at {time}: "
			f"{result.reason.value} ({result.detail or result.message})"
		)

	return result
