"""
Scheduling Services Module

This module provides core business logic for appointment booking:
- Time-of-day parsing and rendering (time_of_day.py)
- Availability check against working hours and bookings (availability.py)
- Database lookups feeding the check (overlap.py)
"""
