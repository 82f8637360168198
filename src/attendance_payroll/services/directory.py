"""SQL-backed directory, attendance and role collaborators."""

from __future__ import annotations

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from attendance_payroll.calculators.types import (
    AttendanceRecord,
    DirectoryEmployee,
    Role,
    SeniorityLevel,
)
from attendance_payroll.models import Attendance, Employee
from attendance_payroll.models import Role as RoleModel


class SqlEmployeeDirectory:
    """Lists department employees from the ``employee`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_department(self, department_id: str) -> list[DirectoryEmployee]:
        result = await self.session.execute(
            select(Employee)
            .where(Employee.department_id == department_id)
            .order_by(Employee.sort_order, Employee.employee_id)
        )
        return [
            DirectoryEmployee(
                employee_id=emp.employee_id,
                name=emp.display_name,
                position=emp.position or "N/A",
                monthly_salary=emp.salary,
                overtime_rate=emp.overtime_rate,
                role_id=emp.role_id,
            )
            for emp in result.scalars().all()
        ]

    async def get_employee(self, employee_id: str) -> Employee | None:
        return await self.session.get(Employee, employee_id)


class SqlAttendanceSource:
    """Fetches attendance events from the ``attendance`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch(
        self, employee_id: str, period_start: date, period_end: date
    ) -> list[AttendanceRecord]:
        result = await self.session.execute(
            select(Attendance)
            .where(
                Attendance.employee_id == employee_id,
                Attendance.work_date >= period_start,
                Attendance.work_date <= period_end,
            )
            .order_by(Attendance.work_date)
        )
        return [
            AttendanceRecord(
                employee_id=row.employee_id,
                date=row.work_date,
                check_in=row.check_in,
                check_out=row.check_out,
            )
            for row in result.scalars().all()
        ]


class SqlRoleCatalog:
    """Loads roles with their seniority tables."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_role(self, role_id: str) -> Role | None:
        result = await self.session.execute(
            select(RoleModel)
            .where(RoleModel.role_id == role_id)
            .options(selectinload(RoleModel.seniority_levels))
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None

        return Role(
            id=row.role_id,
            title=row.title,
            base_salary=row.base_salary,
            overtime_rate=row.overtime_rate,
            seniority_levels=tuple(
                SeniorityLevel(
                    level=lvl.level,
                    salary_multiplier=lvl.salary_multiplier,
                    title=lvl.title,
                )
                for lvl in row.seniority_levels
            ),
            department_id=row.department_id,
        )
