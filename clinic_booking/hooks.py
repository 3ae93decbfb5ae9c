app_name = "clinic_booking"
app_title = "Clinic Booking"
app_publisher = "Clinic Booking Contributors"
app_description = "Doctor working hours and appointment booking for clinics"
app_email = "dev@clinic-booking.example"
app_license = "mit"

# Apps
# ------------------

# required_apps = []

# Includes in <head>
# ------------------

# include js, css files in header of desk.html
# app_include_css = "/assets/clinic_booking/css/clinic_booking.css"
# app_include_js = "/assets/clinic_booking/js/clinic_booking.js"

# include js in doctype views
# doctype_js = {"doctype" : "public/js/doctype.js"}

# Installation
# ------------

# before_install = "clinic_booking.install.before_install"
# after_install = "clinic_booking.install.after_install"

# Permissions
# -----------
# Permissions evaluated in scripted ways

# permission_query_conditions = {
# 	"Clinic Appointment": "clinic_booking.permissions.get_permission_query_conditions",
# }

# Document Events
# ---------------
# Clinic Appointment status notifications are raised from the controller's
# on_update (clinic_booking/doctype/clinic_appointment), not from doc_events.

# doc_events = {
# 	"*": {
# 		"on_update": "method",
# 	}
# }

# Site configuration
# ------------------
# Read from site_config.json via frappe.conf:
#   clinic_booking_buffer_before_minutes (default 30)
#   clinic_booking_buffer_after_minutes (default 15)

# Testing
# -------

# before_tests = "clinic_booking.install.before_tests"

# User Data Protection
# --------------------

user_data_fields = [
	{
		"doctype": "Clinic Appointment",
		"filter_by": "patient",
		"redact_fields": ["date", "time"],
		"partial": 1,
	},
]
