"""Attendance Analytics package.

Derives working hours, lateness, absences, weekend work and time-of-day
distributions from per-day biometric check-in/check-out records. The engine
(attendance.time_parser, attendance.calculator, attendance.lateness, reports)
is pure; controllers, repositories and the container are thin layers around it.
"""
