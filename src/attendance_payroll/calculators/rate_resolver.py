"""Hourly pay rate resolution."""

from __future__ import annotations

from decimal import Decimal

from attendance_payroll.calculators.errors import (
    InvalidConfigurationError,
    InvalidInputError,
)
from attendance_payroll.calculators.types import PayRates, SalaryBasis

DEFAULT_OVERTIME_RATE = Decimal("1.5")
MONTHS_PER_YEAR = Decimal("12")


class PayRateResolver:
    """Derives hourly and overtime rates from a monthly salary.

    Rates are left unrounded; rounding happens once, when an entry is built.
    """

    @staticmethod
    def resolve(
        monthly_salary: Decimal,
        regular_hours_per_month: Decimal,
        overtime_rate_multiplier: Decimal,
    ) -> PayRates:
        """Resolve the effective hourly and overtime hourly rates.

        Raises:
            InvalidConfigurationError: If the monthly hours budget is not positive
            InvalidInputError: If salary or multiplier is negative
        """
        if regular_hours_per_month <= 0:
            raise InvalidConfigurationError(
                f"regular_hours_per_month must be positive, got {regular_hours_per_month}"
            )
        if monthly_salary < 0:
            raise InvalidInputError(f"Monthly salary cannot be negative: {monthly_salary}")
        if overtime_rate_multiplier < 0:
            raise InvalidInputError(
                f"Overtime rate multiplier cannot be negative: {overtime_rate_multiplier}"
            )

        hourly_rate = monthly_salary / regular_hours_per_month
        return PayRates(
            hourly_rate=hourly_rate,
            overtime_hourly_rate=hourly_rate * overtime_rate_multiplier,
        )

    @staticmethod
    def monthly_salary(amount: Decimal, basis: SalaryBasis = SalaryBasis.MONTHLY) -> Decimal:
        """Express a directory salary figure per month."""
        if basis == SalaryBasis.ANNUAL:
            return amount / MONTHS_PER_YEAR
        return amount

    @staticmethod
    def overtime_multiplier(
        employee_rate: Decimal | None,
        role_rate: Decimal | None = None,
        default: Decimal = DEFAULT_OVERTIME_RATE,
    ) -> Decimal:
        """Pick the employee's multiplier, else the role's, else the default."""
        if employee_rate is not None:
            return employee_rate
        if role_rate is not None:
            return role_rate
        return default
