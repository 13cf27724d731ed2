"""Time & payroll computation package.

Feature modules (attendance, timesheet, payroll, ...) keep the calculation core
pure; services and MySQL repositories wrap it, and a thin Flask controller layer
exposes it over JSON.
"""
