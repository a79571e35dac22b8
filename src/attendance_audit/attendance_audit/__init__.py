"""Attendance Audit package.

Feature modules (attendance, accounting, reviews, reports) sit on top of small
reference models (employees, shifts, holidays) and a thin Flask controller layer.
"""
