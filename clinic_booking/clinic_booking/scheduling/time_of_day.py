"""
Time-of-day Utilities

Parses wall-clock times into minute-of-day integers (0-1439) and renders
them back. Two textual forms are accepted:
- 24-hour: "HH:mm" (e.g. "14:30")
- 12-hour with meridiem: "hh:mm A" (e.g. "02:30 PM")

Parsing is explicit (no strptime %p) so the result never depends on the
process locale or timezone.
"""

import re
from datetime import time, timedelta
from typing import Union

MINUTES_PER_DAY = 24 * 60

_TIME_24H = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)
_TIME_12H = re.compile(r"^(\d{1,2}):(\d{2})\s?([AaPp][Mm])$", re.ASCII)

TimeValue = Union[str, time, timedelta, int]


class InvalidTimeFormat(ValueError):
	"""Raised when a time value parses under neither accepted form."""

	def __init__(self, value):
		self.value = value
		super().__init__(
			f"Invalid time format: {value!r}. Use HH:mm (24-hour) or hh:mm AM/PM (12-hour)"
		)


def parse_time_of_day(value: TimeValue) -> int:
	"""
	Convierte un valor de hora a minutos desde medianoche.

	Args:
		value: string "HH:mm" o "hh:mm A", datetime.time, timedelta
			(Frappe devuelve los campos Time como timedelta) o int ya normalizado

	Returns:
		int: minuto del día (0-1439)

	Raises:
		InvalidTimeFormat: si el valor no corresponde a ningún formato aceptado
	"""
	if isinstance(value, bool):
		raise InvalidTimeFormat(value)

	if isinstance(value, int):
		if 0 <= value < MINUTES_PER_DAY:
			return value
		raise InvalidTimeFormat(value)

	if isinstance(value, time):
		return value.hour * 60 + value.minute

	if isinstance(value, timedelta):
		total_minutes = int(value.total_seconds()) // 60
		if 0 <= total_minutes < MINUTES_PER_DAY:
			return total_minutes
		raise InvalidTimeFormat(value)

	if not isinstance(value, str):
		raise InvalidTimeFormat(value)

	text = value.strip()

	match = _TIME_24H.match(text)
	if match:
		hour, minute = int(match.group(1)), int(match.group(2))
		if hour > 23 or minute > 59:
			raise InvalidTimeFormat(value)
		return hour * 60 + minute

	match = _TIME_12H.match(text)
	if match:
		hour, minute = int(match.group(1)), int(match.group(2))
		if not 1 <= hour <= 12 or minute > 59:
			raise InvalidTimeFormat(value)
		# 12 AM es medianoche, 12 PM es mediodía
		hour = hour % 12
		if match.group(3).upper() == "PM":
			hour += 12
		return hour * 60 + minute

	raise InvalidTimeFormat(value)


def format_12h(minutes: int) -> str:
	"""Render minute-of-day as "hh:mm AM"."""
	hour, minute = divmod(minutes, 60)
	meridiem = "PM" if hour >= 12 else "AM"
	display_hour = hour % 12 or 12
	return f"{display_hour:02d}:{minute:02d} {meridiem}"


def format_24h(minutes: int) -> str:
	"""Render minute-of-day as "HH:mm"."""
	hour, minute = divmod(minutes, 60)
	return f"{hour:02d}:{minute:02d}"


def shift(minutes: int, delta: int) -> int:
	"""
	Desplaza un minuto del día sin dar la vuelta a medianoche.

	El resultado puede quedar fuera de 0-1439: una ventana de conflicto
	cerca de medianoche no se envuelve al día anterior o siguiente.
	"""
	return minutes + delta
