"""Payroll entry builder."""

from __future__ import annotations

from datetime import datetime

from attendance_payroll.calculators.types import (
    EmployeePayrollInput,
    HoursSummary,
    PayRates,
    PayrollEntry,
    PayrollPeriod,
    PayrollStatus,
    round2,
)


class PayrollEntryBuilder:
    """Combines hours and rates into a PayrollEntry.

    Rounding:
    - Internal compute at full Decimal precision
    - Money and hours to 2 decimals at output only
    - total_salary is the rounded sum of the unrounded pays
    """

    @staticmethod
    def build(
        employee: EmployeePayrollInput,
        hours: HoursSummary,
        rates: PayRates,
        period: PayrollPeriod,
        generated_at: datetime,
    ) -> PayrollEntry:
        """Build a pending entry. Pure and deterministic."""
        regular_pay = hours.regular_hours * rates.hourly_rate
        overtime_pay = hours.overtime_hours * rates.overtime_hourly_rate

        return PayrollEntry(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            position=employee.position,
            regular_hours=round2(hours.regular_hours),
            overtime_hours=round2(hours.overtime_hours),
            regular_pay=round2(regular_pay),
            overtime_rate=employee.overtime_rate,
            overtime_pay=round2(overtime_pay),
            total_salary=round2(regular_pay + overtime_pay),
            month=period.label,
            year=period.year,
            generated_at=generated_at,
            status=PayrollStatus.PENDING,
        )
