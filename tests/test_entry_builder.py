"""Tests for payroll entry builder."""

from decimal import Decimal

import pytest

from attendance_payroll.calculators.entry_builder import PayrollEntryBuilder
from attendance_payroll.calculators.rate_resolver import PayRateResolver
from attendance_payroll.calculators.types import (
    EmployeePayrollInput,
    HoursSummary,
    PayRates,
    PayrollPeriod,
    PayrollStatus,
)

from tests.conftest import FIXED_NOW


@pytest.fixture
def employee() -> EmployeePayrollInput:
    return EmployeePayrollInput(
        employee_id="emp-1",
        name="Alice Nguyen",
        position="Operator",
        monthly_salary=Decimal("8800"),
        overtime_rate=Decimal("1.5"),
    )


@pytest.fixture
def march() -> PayrollPeriod:
    return PayrollPeriod(month=3, year=2024)


class TestPayrollEntryBuilder:
    """Test entry construction."""

    def test_no_overtime(self, employee, march):
        """160h at 50/h gives 8000 with no overtime."""
        rates = PayRateResolver.resolve(Decimal("8800"), Decimal("176"), Decimal("1.5"))
        hours = HoursSummary(regular_hours=Decimal("160"))

        entry = PayrollEntryBuilder.build(employee, hours, rates, march, FIXED_NOW)

        assert entry.regular_hours == Decimal("160.00")
        assert entry.overtime_hours == Decimal("0.00")
        assert entry.regular_pay == Decimal("8000.00")
        assert entry.overtime_pay == Decimal("0.00")
        assert entry.total_salary == Decimal("8000.00")

    def test_with_overtime(self, employee, march):
        """176 regular + 14 overtime at 75/h gives 9850."""
        rates = PayRateResolver.resolve(Decimal("8800"), Decimal("176"), Decimal("1.5"))
        hours = HoursSummary(regular_hours=Decimal("176"), overtime_hours=Decimal("14"))

        entry = PayrollEntryBuilder.build(employee, hours, rates, march, FIXED_NOW)

        assert entry.regular_pay == Decimal("8800.00")
        assert entry.overtime_pay == Decimal("1050.00")
        assert entry.total_salary == Decimal("9850.00")

    def test_identity_period_and_status(self, employee, march):
        rates = PayRates(hourly_rate=Decimal("50"), overtime_hourly_rate=Decimal("75"))

        entry = PayrollEntryBuilder.build(employee, HoursSummary(), rates, march, FIXED_NOW)

        assert entry.employee_id == "emp-1"
        assert entry.employee_name == "Alice Nguyen"
        assert entry.position == "Operator"
        assert entry.overtime_rate == Decimal("1.5")
        assert entry.month == "March"
        assert entry.year == 2024
        assert entry.generated_at == FIXED_NOW
        assert entry.status == PayrollStatus.PENDING

    def test_total_rounds_unrounded_sum(self, employee, march):
        """Total is round(regular + overtime), not the sum of rounded parts."""
        rates = PayRates(
            hourly_rate=Decimal("10.005"),
            overtime_hourly_rate=Decimal("10.005"),
        )
        hours = HoursSummary(regular_hours=Decimal("1"), overtime_hours=Decimal("1"))

        entry = PayrollEntryBuilder.build(employee, hours, rates, march, FIXED_NOW)

        # Each part rounds half-up to 10.01; the true total 20.01 is kept
        assert entry.regular_pay == Decimal("10.01")
        assert entry.overtime_pay == Decimal("10.01")
        assert entry.total_salary == Decimal("20.01")

    def test_repeating_hourly_rate(self, march):
        """1000 over 176 hours is a repeating decimal; rounding happens once."""
        employee = EmployeePayrollInput(
            employee_id="emp-9",
            name="Dung Pham",
            position="Clerk",
            monthly_salary=Decimal("1000"),
            overtime_rate=Decimal("1.5"),
        )
        rates = PayRateResolver.resolve(Decimal("1000"), Decimal("176"), Decimal("1.5"))
        hours = HoursSummary(regular_hours=Decimal("176"), overtime_hours=Decimal("3"))

        entry = PayrollEntryBuilder.build(employee, hours, rates, march, FIXED_NOW)

        assert entry.regular_pay == Decimal("1000.00")
        assert entry.overtime_pay == Decimal("25.57")
        assert entry.total_salary == Decimal("1025.57")

    def test_build_is_deterministic(self, employee, march):
        rates = PayRateResolver.resolve(Decimal("8800"), Decimal("176"), Decimal("1.5"))
        hours = HoursSummary(regular_hours=Decimal("176"), overtime_hours=Decimal("14"))

        first = PayrollEntryBuilder.build(employee, hours, rates, march, FIXED_NOW)
        second = PayrollEntryBuilder.build(employee, hours, rates, march, FIXED_NOW)

        assert first == second
