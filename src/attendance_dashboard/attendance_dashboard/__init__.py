"""Attendance Dashboard package.

Feature modules (logs, employees, shifts, attendance, sheets) turn the rows of a
spreadsheet-backed data source into typed records and lateness reports, with a
thin Flask controller layer on top.
"""
