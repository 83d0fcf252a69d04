"""Timesheet package.

Feature modules (stamps, payroll, attendance) sit on top of shared core value
types, with a thin Flask controller layer and service/repository layers.
"""
