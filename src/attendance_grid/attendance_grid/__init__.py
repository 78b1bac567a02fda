"""Attendance Grid package.

Organized by feature modules (columns, attendance, employees) with a thin
Flask controller layer over pure service code.
"""
