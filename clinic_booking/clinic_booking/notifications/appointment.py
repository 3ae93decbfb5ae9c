"""
Appointment Notification Service

Tells the patient when a Clinic Appointment status changes.
Delivery and storage are Frappe's: a Notification Log entry is created
for the patient's User and shows up in the desk notification dropdown.
"""

import frappe
from frappe import _
from frappe.desk.doctype.notification_log.notification_log import make_notification_logs


def build_status_message(status: str) -> str:
	return _("Your appointment status has been {0}").format(status)


def send_status_change_notification(appointment_name: str) -> None:
	"""
	Crea la notificación de cambio de estado para el paciente.

	Se ejecuta como background job (enqueue_after_commit=True) para leer el
	estado ya commiteado. Nunca propaga errores: un fallo de notificación no
	debe revertir el cambio de estado.

	Args:
		appointment_name: nombre del Clinic Appointment
	"""
	logger = frappe.logger("clinic_booking")

	try:
		appointment = frappe.get_doc("Clinic Appointment", appointment_name)

		if not appointment.patient or not frappe.db.exists("User", appointment.patient):
			logger.info(
				f"Status notification skipped for {appointment_name}: no patient user"
			)
			return

		notification = frappe._dict(
			type="Alert",
			document_type="Clinic Appointment",
			document_name=appointment.name,
			subject=build_status_message(appointment.status),
			from_user=frappe.session.user,
		)
		make_notification_logs(notification, [appointment.patient])

		logger.info(
			f"Status notification sent for {appointment_name} to {appointment.patient} "
			f"({appointment.status})"
		)

	except Exception as e:
		frappe.log_error(
			message=f"Failed to send status notification for {appointment_name}: {str(e)}",
			title="Clinic Appointment Notification Failed"
		)
