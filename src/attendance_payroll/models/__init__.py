"""SQLAlchemy ORM models."""

from attendance_payroll.models.base import Base, TimestampMixin
from attendance_payroll.models.directory import Attendance, Employee, Role, RoleSeniorityLevel
from attendance_payroll.models.payroll import PayrollEntry, PayrollRun

__all__ = [
    "Base",
    "TimestampMixin",
    "Attendance",
    "Employee",
    "Role",
    "RoleSeniorityLevel",
    "PayrollEntry",
    "PayrollRun",
]
