"""Attendance Tracker package.

Organized by feature modules (attendance, reports, dashboard, system) with a
thin Flask controller layer over service and repository layers.
"""
