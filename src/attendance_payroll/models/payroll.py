"""Persisted payroll runs and entries."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from attendance_payroll.calculators.types import PayrollEntry as PayrollEntryValue
from attendance_payroll.calculators.types import PayrollStatus
from attendance_payroll.models.base import Base, TimestampMixin


class PayrollRun(Base, TimestampMixin):
    """A saved payroll run for one department and month.

    Uniqueness per (department, month, year) is not enforced; the newest run
    is the one the dashboard shows.
    """

    __tablename__ = "payroll_run"

    payroll_run_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    department_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        CheckConstraint("month BETWEEN 1 AND 12", name="payroll_run_month_check"),
    )

    entries: Mapped[list[PayrollEntry]] = relationship(
        back_populates="payroll_run",
        order_by="PayrollEntry.position_in_run",
        cascade="all, delete-orphan",
    )


class PayrollEntry(Base):
    """One employee's computed pay within a saved run."""

    __tablename__ = "payroll_entry"

    payroll_entry_id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    payroll_run_id: Mapped[UUID] = mapped_column(
        ForeignKey("payroll_run.payroll_run_id", ondelete="CASCADE"),
        nullable=False,
    )
    position_in_run: Mapped[int] = mapped_column(Integer, nullable=False)
    employee_id: Mapped[str] = mapped_column(String, nullable=False)
    employee_name: Mapped[str] = mapped_column(String, nullable=False)
    position: Mapped[str] = mapped_column(String, nullable=False)
    regular_hours: Mapped[Decimal] = mapped_column(nullable=False)
    overtime_hours: Mapped[Decimal] = mapped_column(nullable=False)
    # Holds regular pay; column name kept from the dashboard's stored records
    base_salary: Mapped[Decimal] = mapped_column(nullable=False)
    overtime_rate: Mapped[Decimal] = mapped_column(Numeric(6, 2), nullable=False)
    overtime_pay: Mapped[Decimal] = mapped_column(nullable=False)
    total_salary: Mapped[Decimal] = mapped_column(nullable=False)
    month: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    generated_at: Mapped[datetime] = mapped_column(nullable=False)
    status: Mapped[str] = mapped_column(String, nullable=False, default="pending")

    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'approved', 'paid')",
            name="payroll_entry_status_check",
        ),
        CheckConstraint("total_salary >= 0", name="payroll_entry_total_check"),
    )

    payroll_run: Mapped[PayrollRun] = relationship(back_populates="entries")

    @classmethod
    def from_value(
        cls, entry: PayrollEntryValue, position_in_run: int
    ) -> PayrollEntry:
        return cls(
            position_in_run=position_in_run,
            employee_id=entry.employee_id,
            employee_name=entry.employee_name,
            position=entry.position,
            regular_hours=entry.regular_hours,
            overtime_hours=entry.overtime_hours,
            base_salary=entry.regular_pay,
            overtime_rate=entry.overtime_rate,
            overtime_pay=entry.overtime_pay,
            total_salary=entry.total_salary,
            month=entry.month,
            year=entry.year,
            generated_at=entry.generated_at,
            status=entry.status.value,
        )

    def to_value(self) -> PayrollEntryValue:
        return PayrollEntryValue(
            employee_id=self.employee_id,
            employee_name=self.employee_name,
            position=self.position,
            regular_hours=self.regular_hours,
            overtime_hours=self.overtime_hours,
            regular_pay=self.base_salary,
            overtime_rate=self.overtime_rate,
            overtime_pay=self.overtime_pay,
            total_salary=self.total_salary,
            month=self.month,
            year=self.year,
            generated_at=self.generated_at,
            status=PayrollStatus(self.status),
        )
