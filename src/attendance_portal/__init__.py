"""Attendance Portal package.

This package is organized by feature modules (identity, roster, attendance,
courses) with repository protocols, service layers and a thin portal facade
that stands where a web controller would.
"""
