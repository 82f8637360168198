"""Department payroll run - main orchestrator."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol

from attendance_payroll.calculators.attendance import AttendanceAggregator
from attendance_payroll.calculators.entry_builder import PayrollEntryBuilder
from attendance_payroll.calculators.rate_resolver import (
    DEFAULT_OVERTIME_RATE,
    PayRateResolver,
)
from attendance_payroll.calculators.types import (
    AttendanceRecord,
    CalculationMode,
    DirectoryEmployee,
    EmployeePayrollInput,
    OvertimePolicy,
    PayrollEntry,
    PayrollPeriod,
    PayrollRunResult,
    PerEmployeeFailure,
    Role,
    SalaryBasis,
)

if TYPE_CHECKING:
    from attendance_payroll.config import Settings

logger = logging.getLogger(__name__)


class EmployeeDirectory(Protocol):
    """Read-only source of department membership."""

    async def list_by_department(self, department_id: str) -> list[DirectoryEmployee]:
        ...


class AttendanceSource(Protocol):
    """Read-only source of attendance events."""

    async def fetch(
        self, employee_id: str, period_start: date, period_end: date
    ) -> list[AttendanceRecord]:
        ...


class RoleCatalog(Protocol):
    """Read-only source of role compensation rules."""

    async def get_role(self, role_id: str) -> Role | None:
        ...


class PayrollSink(Protocol):
    """Persists confirmed payroll runs. The runner never calls this."""

    async def save(
        self,
        department_id: str,
        month: int,
        year: int,
        entries: list[PayrollEntry],
    ) -> str:
        ...


@dataclass(frozen=True)
class PayrollPolicy:
    """Payroll knobs shared by every employee of a run."""

    regular_hours_per_day: Decimal = Decimal("8")
    working_days_per_month: int = 22
    overtime_policy: OvertimePolicy = OvertimePolicy.MONTHLY
    calculation_mode: CalculationMode = CalculationMode.HOURLY
    salary_basis: SalaryBasis = SalaryBasis.MONTHLY
    default_overtime_rate: Decimal = DEFAULT_OVERTIME_RATE

    @property
    def regular_hours_per_month(self) -> Decimal:
        return self.regular_hours_per_day * self.working_days_per_month

    @classmethod
    def from_settings(cls, settings: Settings) -> PayrollPolicy:
        return cls(
            regular_hours_per_day=settings.regular_hours_per_day,
            working_days_per_month=settings.working_days_per_month,
            overtime_policy=OvertimePolicy(settings.overtime_policy),
            calculation_mode=CalculationMode(settings.calculation_mode),
            salary_basis=SalaryBasis(settings.salary_basis),
            default_overtime_rate=settings.default_overtime_rate,
        )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PayrollRunner:
    """Computes a department's payroll for one month.

    Pipeline (stable order per employee):
    1) Fetch attendance for the month
    2) Resolve the overtime multiplier (employee, then role, then default)
    3) Aggregate hours, resolve rates, build the entry

    A failure in any step excludes that employee only; it is recorded as a
    PerEmployeeFailure and the run moves on. Employees come out in directory
    order. The runner keeps no state between runs.
    """

    def __init__(
        self,
        directory: EmployeeDirectory,
        attendance_source: AttendanceSource,
        roles: RoleCatalog | None = None,
        policy: PayrollPolicy | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.directory = directory
        self.attendance_source = attendance_source
        self.roles = roles
        self.policy = policy or PayrollPolicy()
        self.clock = clock

    async def run(self, department_id: str, month: int, year: int) -> PayrollRunResult:
        """Run payroll for a department and collect entries and failures."""
        period = PayrollPeriod(month=month, year=year)
        result = PayrollRunResult(department_id=department_id, period=period)

        async for outcome in self.iter_run(department_id, period):
            if isinstance(outcome, PerEmployeeFailure):
                result.failures.append(outcome)
            else:
                result.entries.append(outcome)

        logger.info(
            "Payroll run for department %s %s %s: %d entries, %d failures",
            department_id,
            period.label,
            period.year,
            len(result.entries),
            result.failure_count,
        )
        return result

    async def iter_run(
        self, department_id: str, period: PayrollPeriod
    ) -> AsyncIterator[PayrollEntry | PerEmployeeFailure]:
        """Yield one outcome per department employee, in directory order."""
        employees = await self.directory.list_by_department(department_id)
        generated_at = self.clock()
        logger.info(
            "Starting payroll for department %s (%s %s, %d employees)",
            department_id,
            period.label,
            period.year,
            len(employees),
        )

        for employee in employees:
            yield await self._calculate_employee(employee, period, generated_at)

    async def _calculate_employee(
        self,
        employee: DirectoryEmployee,
        period: PayrollPeriod,
        generated_at: datetime,
    ) -> PayrollEntry | PerEmployeeFailure:
        try:
            attendance = await self.attendance_source.fetch(
                employee.employee_id, period.start, period.end
            )
        except Exception as e:
            return self._failure(employee, "attendance", e)

        role_rate: Decimal | None = None
        if employee.overtime_rate is None and self.roles is not None and employee.role_id:
            try:
                role = await self.roles.get_role(employee.role_id)
            except Exception as e:
                return self._failure(employee, "role", e)
            if role is not None:
                role_rate = role.overtime_rate

        try:
            return self.calculate(employee, attendance, role_rate, period, generated_at)
        except Exception as e:
            return self._failure(employee, "calculation", e)

    def calculate(
        self,
        employee: DirectoryEmployee,
        attendance: list[AttendanceRecord],
        role_rate: Decimal | None,
        period: PayrollPeriod,
        generated_at: datetime,
    ) -> PayrollEntry:
        """Compute one employee's entry from already-fetched data."""
        policy = self.policy
        payroll_input = EmployeePayrollInput(
            employee_id=employee.employee_id,
            name=employee.name,
            position=employee.position,
            monthly_salary=PayRateResolver.monthly_salary(
                employee.monthly_salary, policy.salary_basis
            ),
            overtime_rate=PayRateResolver.overtime_multiplier(
                employee.overtime_rate, role_rate, policy.default_overtime_rate
            ),
            attendance=tuple(attendance),
        )

        hours = AttendanceAggregator.aggregate(
            payroll_input.attendance,
            period.start,
            period.end,
            regular_hours_per_month=policy.regular_hours_per_month,
            overtime_policy=policy.overtime_policy,
            regular_hours_per_day=policy.regular_hours_per_day,
            calculation_mode=policy.calculation_mode,
        )
        rates = PayRateResolver.resolve(
            payroll_input.monthly_salary,
            policy.regular_hours_per_month,
            payroll_input.overtime_rate,
        )
        return PayrollEntryBuilder.build(payroll_input, hours, rates, period, generated_at)

    @staticmethod
    def _failure(
        employee: DirectoryEmployee, stage: str, error: Exception
    ) -> PerEmployeeFailure:
        logger.warning(
            "Excluding employee %s from payroll (%s): %s",
            employee.employee_id,
            stage,
            error,
        )
        return PerEmployeeFailure(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            stage=stage,
            reason=str(error) or type(error).__name__,
        )
