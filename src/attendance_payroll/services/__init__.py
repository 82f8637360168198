"""Payroll collaborator services."""

from attendance_payroll.services.directory import (
    SqlAttendanceSource,
    SqlEmployeeDirectory,
    SqlRoleCatalog,
)
from attendance_payroll.services.payroll_store import SqlPayrollSink
from attendance_payroll.services.state_machine import (
    InvalidTransitionError,
    PayrollStatusMachine,
)

__all__ = [
    "SqlEmployeeDirectory",
    "SqlAttendanceSource",
    "SqlRoleCatalog",
    "SqlPayrollSink",
    "PayrollStatusMachine",
    "InvalidTransitionError",
]
