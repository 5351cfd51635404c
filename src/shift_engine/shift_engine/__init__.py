"""Shift Engine package.

Infers which clock-in/clock-out records belong to an employee's work shift on a
given date and computes worked and pause time with interval algebra. Organized
by feature modules (time_logs, schedules, workshift, ...) around a small
service layer; persistence and transport live outside this package.
"""
