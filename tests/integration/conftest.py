"""Integration test fixtures with a seeded in-memory database."""

from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from attendance_payroll.api.app import create_app
from attendance_payroll.api.dependencies import get_db_session
from attendance_payroll.models import Attendance, Employee, Role, RoleSeniorityLevel

from tests.factories import month_of_shifts, shift

DEPARTMENT_ID = "ops"


def _attendance_rows(records) -> list[Attendance]:
    return [
        Attendance(
            employee_id=r.employee_id,
            work_date=r.date,
            check_in=r.check_in,
            check_out=r.check_out,
        )
        for r in records
    ]


@pytest.fixture
async def seeded_db(session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """Two roles, four employees and March 2024 attendance.

    Department 'ops':
    - emp-1 Alice Nguyen, 160h
    - emp-2 first/last name only, no position, 190h
    - emp-3 no name at all, on role-eng (overtime 2.0), 198h
    Department 'sales':
    - emp-4 Dana Pham, no attendance
    """
    session.add_all(
        [
            Role(
                role_id="role-eng",
                title="Software Engineer",
                base_salary=Decimal("80000"),
                overtime_rate=Decimal("2.0"),
                seniority_levels=[
                    RoleSeniorityLevel(level=1, salary_multiplier=Decimal("1.0"), title="Junior"),
                    RoleSeniorityLevel(level=2, salary_multiplier=Decimal("1.2"), title="Mid-Level"),
                    RoleSeniorityLevel(level=3, salary_multiplier=Decimal("1.5"), title="Senior"),
                    RoleSeniorityLevel(level=4, salary_multiplier=Decimal("1.8"), title="Lead"),
                    RoleSeniorityLevel(level=5, salary_multiplier=Decimal("2.0"), title="Principal"),
                ],
            ),
            Role(
                role_id="role-odd",
                title="Field Technician",
                base_salary=Decimal("60000"),
                seniority_levels=[
                    RoleSeniorityLevel(level=1, salary_multiplier=Decimal("1.0")),
                    RoleSeniorityLevel(level=2, salary_multiplier=Decimal("0.9")),
                ],
            ),
        ]
    )
    await session.flush()

    session.add_all(
        [
            Employee(
                employee_id="emp-1",
                department_id=DEPARTMENT_ID,
                name="Alice Nguyen",
                position="Operator",
                salary=Decimal("8800"),
                overtime_rate=Decimal("1.5"),
                sort_order=0,
            ),
            Employee(
                employee_id="emp-2",
                department_id=DEPARTMENT_ID,
                first_name="Bob",
                last_name="Tran",
                salary=Decimal("7040"),
                overtime_rate=Decimal("1.5"),
                sort_order=1,
            ),
            Employee(
                employee_id="emp-3",
                department_id=DEPARTMENT_ID,
                salary=Decimal("10560"),
                role_id="role-eng",
                current_level=2,
                sort_order=2,
            ),
            Employee(
                employee_id="emp-4",
                department_id="sales",
                name="Dana Pham",
                position="Account Manager",
                salary=Decimal("9000"),
                overtime_rate=Decimal("1.5"),
            ),
        ]
    )
    await session.flush()

    session.add_all(
        _attendance_rows(month_of_shifts("emp-1", 2024, 3, 20, 8))
        + _attendance_rows(month_of_shifts("emp-2", 2024, 3, 19, 10))
        + _attendance_rows(month_of_shifts("emp-3", 2024, 3, 22, 9))
        # Outside March: must never be counted
        + _attendance_rows([shift("emp-1", date(2024, 4, 1), 12)])
    )
    await session.commit()
    yield session


@pytest.fixture
async def client(engine, seeded_db) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client backed by the seeded database."""
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
