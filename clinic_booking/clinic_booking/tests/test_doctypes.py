"""
Tests for the Doctor and Clinic Appointment controllers

Validation methods are called on plain namespaces standing in for the
documents, with the controller module's frappe reference patched.
"""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from clinic_booking.clinic_booking.doctype.clinic_appointment.clinic_appointment import ClinicAppointment
from clinic_booking.clinic_booking.doctype.doctor.doctor import Doctor

DOCTOR_MODULE = "clinic_booking.clinic_booking.doctype.doctor.doctor"
APPOINTMENT_MODULE = "clinic_booking.clinic_booking.doctype.clinic_appointment.clinic_appointment"


class ValidationError(Exception):
	pass


def _raise(message, *args, **kwargs):
	raise ValidationError(message)


def _mock_frappe():
	mock_frappe = MagicMock()
	mock_frappe.throw.side_effect = _raise
	return mock_frappe


class TestDoctor(unittest.TestCase):
	"""Tests for Doctor validation."""

	def setUp(self):
		self.patches = [
			patch(f"{DOCTOR_MODULE}.frappe", _mock_frappe()),
			patch(f"{DOCTOR_MODULE}._", lambda message: message),
		]
		for p in self.patches:
			p.start()

	def tearDown(self):
		for p in self.patches:
			p.stop()

	def test_working_hours_normalized(self):
		doc = SimpleNamespace(from_time="09:00 AM", to_time="05:00 PM")
		Doctor._validate_working_hours(doc)

		self.assertEqual(doc.from_time, "09:00")
		self.assertEqual(doc.to_time, "17:00")

	def test_equal_bounds_allowed(self):
		doc = SimpleNamespace(from_time="12:00", to_time="12:00 PM")
		Doctor._validate_working_hours(doc)

	def test_overnight_window_rejected(self):
		doc = SimpleNamespace(from_time="22:00", to_time="06:00")
		with self.assertRaises(ValidationError):
			Doctor._validate_working_hours(doc)

	def test_malformed_working_hours_rejected(self):
		doc = SimpleNamespace(from_time="nine", to_time="17:00")
		with self.assertRaises(ValidationError):
			Doctor._validate_working_hours(doc)

	def test_status_defaults_to_pending(self):
		doc = SimpleNamespace(status=None)
		Doctor._validate_status(doc)
		self.assertEqual(doc.status, "pending")

	def test_unknown_status_rejected(self):
		with self.assertRaises(ValidationError):
			Doctor._validate_status(SimpleNamespace(status="retired"))


class TestClinicAppointment(unittest.TestCase):
	"""Tests for Clinic Appointment validation and status hook."""

	def setUp(self):
		self.mock_frappe = _mock_frappe()
		self.patches = [
			patch(f"{APPOINTMENT_MODULE}.frappe", self.mock_frappe),
			patch(f"{APPOINTMENT_MODULE}._", lambda message: message),
		]
		for p in self.patches:
			p.start()

	def tearDown(self):
		for p in self.patches:
			p.stop()

	def test_time_stored_as_24h(self):
		doc = SimpleNamespace(time="02:30 PM")
		ClinicAppointment._normalize_time(doc)
		self.assertEqual(doc.time, "14:30")

	def test_malformed_time_rejected(self):
		with self.assertRaises(ValidationError):
			ClinicAppointment._normalize_time(SimpleNamespace(time="2.30pm"))

	def test_required_fields(self):
		with self.assertRaises(ValidationError):
			ClinicAppointment._validate_required(SimpleNamespace(doctor=None, date="2026-01-20"))
		with self.assertRaises(ValidationError):
			ClinicAppointment._validate_required(SimpleNamespace(doctor="dr@example.com", date=""))

	def test_status_validation(self):
		doc = SimpleNamespace(status="")
		ClinicAppointment._validate_status(doc)
		self.assertEqual(doc.status, "pending")

		with self.assertRaises(ValidationError):
			ClinicAppointment._validate_status(SimpleNamespace(status="cancelled"))

	def test_status_change_enqueues_notification(self):
		doc = SimpleNamespace(
			name="A1",
			status="approved",
			get_doc_before_save=lambda: SimpleNamespace(status="pending"),
		)
		ClinicAppointment.on_update(doc)

		self.mock_frappe.enqueue.assert_called_once()
		args, kwargs = self.mock_frappe.enqueue.call_args
		self.assertEqual(
			args[0],
			"clinic_booking.clinic_booking.notifications.appointment.send_status_change_notification"
		)
		self.assertEqual(kwargs["appointment_name"], "A1")
		self.assertTrue(kwargs["enqueue_after_commit"])

	def test_unchanged_status_does_not_notify(self):
		doc = SimpleNamespace(
			name="A1",
			status="pending",
			get_doc_before_save=lambda: SimpleNamespace(status="pending"),
		)
		ClinicAppointment.on_update(doc)
		self.mock_frappe.enqueue.assert_not_called()

	def test_insert_does_not_notify(self):
		doc = SimpleNamespace(name="A1", status="pending", get_doc_before_save=lambda: None)
		ClinicAppointment.on_update(doc)
		self.mock_frappe.enqueue.assert_not_called()


def run_tests():
	"""Run all tests in this module."""
	unittest.main()
