"""Type definitions for the payroll calculation pipeline."""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from attendance_payroll.calculators.errors import InvalidInputError

TWO_PLACES = Decimal("0.01")
SECONDS_PER_HOUR = Decimal("3600")


def round2(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half-up."""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


class PayrollStatus(str, Enum):
    """Payroll entry status values."""

    PENDING = "pending"
    APPROVED = "approved"
    PAID = "paid"


class OvertimePolicy(str, Enum):
    """Where the regular-hours threshold is applied."""

    MONTHLY = "monthly"  # only hours beyond the monthly budget
    DAILY = "daily"  # hours beyond the daily threshold, per record


class CalculationMode(str, Enum):
    """How a completed attendance record is converted into hours."""

    HOURLY = "hourly"  # actual check-in/check-out span
    DAILY = "daily"  # a full regular day per completed record


class SalaryBasis(str, Enum):
    """Period the directory salary figure is expressed in."""

    MONTHLY = "monthly"
    ANNUAL = "annual"


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's presence on one calendar day."""

    employee_id: str
    date: date
    check_in: datetime | None
    check_out: datetime | None = None

    @property
    def hours_worked(self) -> Decimal | None:
        """Span between check-in and check-out in hours, or None if unusable."""
        if self.check_in is None or self.check_out is None:
            return None
        if self.check_out <= self.check_in:
            return None
        seconds = Decimal(str((self.check_out - self.check_in).total_seconds()))
        return round2(seconds / SECONDS_PER_HOUR)


@dataclass(frozen=True)
class SeniorityLevel:
    """A tier within a role that scales its base salary."""

    level: int
    salary_multiplier: Decimal
    title: str | None = None


@dataclass(frozen=True)
class Role:
    """A job title with compensation rules."""

    id: str
    title: str
    base_salary: Decimal
    overtime_rate: Decimal
    seniority_levels: tuple[SeniorityLevel, ...] = ()
    department_id: str | None = None

    def find_level(self, level: int) -> SeniorityLevel | None:
        for entry in self.seniority_levels:
            if entry.level == level:
                return entry
        return None


@dataclass(frozen=True)
class DirectoryEmployee:
    """Employee projection returned by an employee directory."""

    employee_id: str
    name: str
    position: str
    monthly_salary: Decimal
    overtime_rate: Decimal | None = None
    role_id: str | None = None


@dataclass(frozen=True)
class EmployeePayrollInput:
    """Per-employee input assembled for one payroll run."""

    employee_id: str
    name: str
    position: str
    monthly_salary: Decimal
    overtime_rate: Decimal
    attendance: tuple[AttendanceRecord, ...] = ()


@dataclass(frozen=True)
class HoursSummary:
    """Regular/overtime split for one employee and period."""

    regular_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")

    @property
    def total_hours(self) -> Decimal:
        return self.regular_hours + self.overtime_hours


@dataclass(frozen=True)
class PayRates:
    """Effective hourly rates for one employee."""

    hourly_rate: Decimal
    overtime_hourly_rate: Decimal


@dataclass(frozen=True)
class PayrollPeriod:
    """A calendar month."""

    month: int  # 1..12
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidInputError(f"Month must be between 1 and 12, got {self.month}")

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def label(self) -> str:
        """English month name, e.g. 'March'."""
        return calendar.month_name[self.month]


@dataclass(frozen=True)
class PayrollEntry:
    """Computed pay for one employee for one period.

    ``regular_pay`` is serialized under the historical ``baseSalary`` key so
    records written by the dashboard remain readable.
    """

    employee_id: str
    employee_name: str
    position: str
    regular_hours: Decimal
    overtime_hours: Decimal
    regular_pay: Decimal
    overtime_rate: Decimal
    overtime_pay: Decimal
    total_salary: Decimal
    month: str
    year: int
    generated_at: datetime
    status: PayrollStatus = PayrollStatus.PENDING

    def to_record(self) -> dict[str, Any]:
        """Return the persisted/serialized shape (numbers stay numeric)."""
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "position": self.position,
            "regularHours": float(self.regular_hours),
            "overtimeHours": float(self.overtime_hours),
            "baseSalary": float(self.regular_pay),
            "overtimeRate": float(self.overtime_rate),
            "overtimePay": float(self.overtime_pay),
            "totalSalary": float(self.total_salary),
            "month": self.month,
            "year": self.year,
            "generatedAt": self.generated_at.isoformat(),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class PerEmployeeFailure:
    """An employee excluded from a run, with the reason."""

    employee_id: str
    employee_name: str
    stage: str  # 'attendance', 'role' or 'calculation'
    reason: str


@dataclass
class PayrollRunResult:
    """Entries and failures of one department payroll run."""

    department_id: str
    period: PayrollPeriod
    entries: list[PayrollEntry] = field(default_factory=list)
    failures: list[PerEmployeeFailure] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def succeeded(self) -> bool:
        return len(self.failures) == 0

    @property
    def total_regular_pay(self) -> Decimal:
        return sum((e.regular_pay for e in self.entries), Decimal("0"))

    @property
    def total_overtime_pay(self) -> Decimal:
        return sum((e.overtime_pay for e in self.entries), Decimal("0"))

    @property
    def total_payroll(self) -> Decimal:
        return sum((e.total_salary for e in self.entries), Decimal("0"))


@dataclass(frozen=True)
class SalaryChange:
    """Salary history entry produced by a promotion preview."""

    employee_id: str
    old_salary: Decimal
    new_salary: Decimal
    old_level: int
    new_level: int
    effective_date: date
    notes: str
    reason: str = "promotion"
