"""Student Attendance package.

This package is organized by feature modules (students, classes, attendance, ...)
with a thin Flask controller layer and service/repository layers over an
in-memory data store.
"""
