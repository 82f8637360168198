"""Payroll calculation engine."""

from attendance_payroll.calculators.attendance import AttendanceAggregator
from attendance_payroll.calculators.entry_builder import PayrollEntryBuilder
from attendance_payroll.calculators.errors import (
    InvalidConfigurationError,
    InvalidInputError,
    LevelNotFoundError,
    PayrollError,
)
from attendance_payroll.calculators.rate_resolver import PayRateResolver
from attendance_payroll.calculators.role_salary import RoleSalaryCalculator
from attendance_payroll.calculators.runner import PayrollPolicy, PayrollRunner

__all__ = [
    "AttendanceAggregator",
    "PayRateResolver",
    "PayrollEntryBuilder",
    "PayrollRunner",
    "PayrollPolicy",
    "RoleSalaryCalculator",
    "PayrollError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "LevelNotFoundError",
]
