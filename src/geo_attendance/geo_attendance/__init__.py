"""Geo Attendance package.

Feature modules (academic_calendar, attendance, ...) keep the decision logic
in plain Python; Flask controllers and the MySQL store are thin layers on top.
"""
