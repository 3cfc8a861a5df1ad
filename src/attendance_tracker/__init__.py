"""Attendance Tracker package.

Feature modules (attendance, employees, reports, dashboard) follow a
service/repository split with a thin Flask controller layer on top.
"""
