"""Directory models: employees, roles and attendance."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from attendance_payroll.models.base import Base, TimestampMixin


class Role(Base, TimestampMixin):
    """Job title with compensation rules."""

    __tablename__ = "role"

    role_id: Mapped[str] = mapped_column(String, primary_key=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    base_salary: Mapped[Decimal] = mapped_column(nullable=False)
    overtime_rate: Mapped[Decimal] = mapped_column(
        Numeric(6, 2), nullable=False, default=Decimal("1.5")
    )
    department_id: Mapped[str | None] = mapped_column(String, nullable=True)

    __table_args__ = (
        CheckConstraint("base_salary >= 0", name="role_base_salary_check"),
    )

    seniority_levels: Mapped[list[RoleSeniorityLevel]] = relationship(
        back_populates="role",
        order_by="RoleSeniorityLevel.level",
        cascade="all, delete-orphan",
    )


class RoleSeniorityLevel(Base):
    """One row of a role's seniority multiplier table."""

    __tablename__ = "role_seniority_level"

    role_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("role.role_id", ondelete="CASCADE"),
        primary_key=True,
    )
    level: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str | None] = mapped_column(String, nullable=True)
    salary_multiplier: Mapped[Decimal] = mapped_column(Numeric(6, 3), nullable=False)

    __table_args__ = (
        CheckConstraint("level >= 1", name="role_seniority_level_level_check"),
    )

    role: Mapped[Role] = relationship(back_populates="seniority_levels")


class Employee(Base, TimestampMixin):
    """Employee record as kept by the HR directory."""

    __tablename__ = "employee"

    employee_id: Mapped[str] = mapped_column(String, primary_key=True)
    department_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    name: Mapped[str | None] = mapped_column(String, nullable=True)
    first_name: Mapped[str | None] = mapped_column(String, nullable=True)
    last_name: Mapped[str | None] = mapped_column(String, nullable=True)
    position: Mapped[str | None] = mapped_column(String, nullable=True)
    salary: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal("0"))
    overtime_rate: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    role_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("role.role_id"), nullable=True
    )
    current_level: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    # Insertion order doubles as directory order
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    role: Mapped[Role | None] = relationship()
    attendance: Mapped[list[Attendance]] = relationship(back_populates="employee")

    @property
    def display_name(self) -> str:
        """Name with fallback: name, then first + last, then 'Unknown Employee'."""
        if self.name:
            return self.name
        full = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full or "Unknown Employee"


class Attendance(Base, TimestampMixin):
    """One check-in/check-out event for one day."""

    __tablename__ = "attendance"

    attendance_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("employee.employee_id", ondelete="CASCADE"),
        nullable=False,
    )
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    check_in: Mapped[datetime | None] = mapped_column(nullable=True)
    check_out: Mapped[datetime | None] = mapped_column(nullable=True)

    __table_args__ = (
        UniqueConstraint("employee_id", "work_date", name="attendance_employee_day_unique"),
    )

    employee: Mapped[Employee] = relationship(back_populates="attendance")
