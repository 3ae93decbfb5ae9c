"""
Availability Service

Decides whether a new booking may be accepted for a doctor, considering:
- The doctor's working hours (same-day window, inclusive bounds)
- A conflict window around the requested time
- Existing non-rejected appointments on the same date

Pure computation: no database access, no shared state. Callers fetch the
working hours and the appointments (see overlap.py) and pass them in.
"""

from dataclasses import dataclass
from datetime import time, timedelta
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .time_of_day import TimeValue, format_12h, format_24h, parse_time_of_day, shift

# Buffer around the requested time blocked by an existing booking's start.
BUFFER_BEFORE_MINUTES = 30
BUFFER_AFTER_MINUTES = 15

REJECTED_STATUS = "rejected"


class UnavailableReason(str, Enum):
	DOCTOR_NOT_FOUND = "doctor_not_found"
	OUT_OF_WORKING_HOURS = "out_of_working_hours"
	SLOT_CONFLICT = "slot_conflict"


@dataclass(frozen=True)
class WorkingHours:
	"""Daily window during which a doctor accepts appointments."""

	from_time: TimeValue
	to_time: TimeValue

	def bounds(self) -> Tuple[int, int]:
		return parse_time_of_day(self.from_time), parse_time_of_day(self.to_time)

	def display(self) -> str:
		"""Window in 12-hour form, e.g. "09:00 AM to 05:00 PM"."""
		start, end = self.bounds()
		return f"{format_12h(start)} to {format_12h(end)}"


@dataclass(frozen=True)
class AvailabilityResult:
	available: bool
	message: str
	reason: Optional[UnavailableReason] = None
	detail: Optional[str] = None

	def as_dict(self) -> Dict[str, Any]:
		return {
			"available": self.available,
			"message": self.message,
			"reason": self.reason.value if self.reason else None,
			"detail": self.detail,
		}


AVAILABLE_MESSAGE = "Appointment available"
SLOT_CONFLICT_MESSAGE = "Appointment not available"
DOCTOR_NOT_FOUND_MESSAGE = "Doctor not found"


def available() -> AvailabilityResult:
	return AvailabilityResult(available=True, message=AVAILABLE_MESSAGE)


def unavailable(reason: UnavailableReason, message: str, detail: Optional[str] = None) -> AvailabilityResult:
	return AvailabilityResult(available=False, message=message, reason=reason, detail=detail)


def doctor_not_found() -> AvailabilityResult:
	return unavailable(UnavailableReason.DOCTOR_NOT_FOUND, DOCTOR_NOT_FOUND_MESSAGE)


def get_conflict_window(
	requested_time: TimeValue,
	buffer_before: int = BUFFER_BEFORE_MINUTES,
	buffer_after: int = BUFFER_AFTER_MINUTES
) -> Tuple[int, int]:
	"""
	Calcula la ventana de conflicto alrededor de la hora solicitada.

	Args:
		requested_time: hora solicitada
		buffer_before: minutos bloqueados antes (default 30)
		buffer_after: minutos bloqueados después (default 15)

	Returns:
		tuple: (window_start, window_end) en minutos del día, inclusivos.
			No se recorta a las horas de trabajo.
	"""
	requested = parse_time_of_day(requested_time)
	return shift(requested, -buffer_before), shift(requested, buffer_after)


def _is_rejected(appointment: Any) -> bool:
	if isinstance(appointment, dict):
		return appointment.get("status") == REJECTED_STATUS
	return getattr(appointment, "status", None) == REJECTED_STATUS


def _appointment_time(appointment: Any) -> Optional[TimeValue]:
	"""
	Extrae la hora de un appointment existente.

	Acepta un string/time directamente, o un registro (dict u objeto) con
	campos "time" y "status". Un registro sin "time" devuelve None, que
	parse_time_of_day rechaza como InvalidTimeFormat.
	"""
	if isinstance(appointment, dict):
		return appointment.get("time")

	if isinstance(appointment, (str, int, time, timedelta)):
		return appointment

	time_value = getattr(appointment, "time", None)
	if callable(time_value):
		return appointment
	return time_value


def find_conflicts(
	requested_time: TimeValue,
	existing_appointments: Iterable[Any],
	buffer_before: int = BUFFER_BEFORE_MINUTES,
	buffer_after: int = BUFFER_AFTER_MINUTES
) -> List[str]:
	"""
	Retorna las horas (formato HH:mm) de los appointments que caen dentro de
	la ventana de conflicto, inclusiva en ambos extremos.
	"""
	window_start, window_end = get_conflict_window(requested_time, buffer_before, buffer_after)

	conflicts = []
	for appointment in existing_appointments:
		if _is_rejected(appointment):
			continue

		minutes = parse_time_of_day(_appointment_time(appointment))
		if window_start <= minutes <= window_end:
			conflicts.append(format_24h(minutes))

	return conflicts


def check_availability(
	working_hours: WorkingHours,
	requested_time: TimeValue,
	existing_appointments: Iterable[Any] = (),
	buffer_before: int = BUFFER_BEFORE_MINUTES,
	buffer_after: int = BUFFER_AFTER_MINUTES
) -> AvailabilityResult:
	"""
	Determina si una nueva cita puede aceptarse.

	Args:
		working_hours: horario del doctor (from_time <= to_time, mismo día)
		requested_time: hora solicitada, "HH:mm" o "hh:mm A"
		existing_appointments: appointments del mismo doctor y la misma fecha.
			Pueden ser horas sueltas o registros con "time"/"status"; los
			rechazados se ignoran.
		buffer_before: minutos de margen antes de la hora solicitada
		buffer_after: minutos de margen después de la hora solicitada

	Returns:
		AvailabilityResult: available=True, o available=False con reason
			OUT_OF_WORKING_HOURS o SLOT_CONFLICT

	Raises:
		InvalidTimeFormat: si alguna hora no se puede parsear

	Algoritmo:
		1. Parsear from_time, to_time y la hora solicitada a minutos
		2. Rechazar si la hora es estrictamente anterior a from_time o
		   estrictamente posterior a to_time (los extremos se aceptan)
		3. Calcular ventana [solicitada - 30, solicitada + 15]
		4. Rechazar si algún appointment cae dentro de la ventana (inclusivo)
		5. Si no, disponible
	"""
	work_start, work_end = working_hours.bounds()
	requested = parse_time_of_day(requested_time)

	if requested < work_start or requested > work_end:
		window = working_hours.display()
		return unavailable(
			UnavailableReason.OUT_OF_WORKING_HOURS,
			f"Please select a time within doctor's working hours {window}",
			detail=window
		)

	conflicts = find_conflicts(requested, existing_appointments, buffer_before, buffer_after)
	if conflicts:
		return unavailable(
			UnavailableReason.SLOT_CONFLICT,
			SLOT_CONFLICT_MESSAGE,
			detail=", ".join(conflicts)
		)

	return available()
