"""Pytest fixtures for attendance payroll tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from attendance_payroll.calculators.types import (
    AttendanceRecord,
    DirectoryEmployee,
    Role,
    SeniorityLevel,
)
from attendance_payroll.models import Base

from tests.factories import month_of_shifts

# Use in-memory SQLite for tests (with async support)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

FIXED_NOW = datetime(2024, 4, 1, 9, 0, tzinfo=timezone.utc)


# ============================================================================
# Domain fixtures
# ============================================================================


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def engineer_role() -> Role:
    """Role with the default five-level seniority table."""
    return Role(
        id="role-eng",
        title="Software Engineer",
        base_salary=Decimal("80000"),
        overtime_rate=Decimal("2.0"),
        seniority_levels=(
            SeniorityLevel(1, Decimal("1.0"), "Junior"),
            SeniorityLevel(2, Decimal("1.2"), "Mid-Level"),
            SeniorityLevel(3, Decimal("1.5"), "Senior"),
            SeniorityLevel(4, Decimal("1.8"), "Lead"),
            SeniorityLevel(5, Decimal("2.0"), "Principal"),
        ),
    )


@pytest.fixture
def department_employees() -> list[DirectoryEmployee]:
    """Three employees of department 'ops'."""
    return [
        DirectoryEmployee(
            employee_id="emp-1",
            name="Alice Nguyen",
            position="Operator",
            monthly_salary=Decimal("8800"),
            overtime_rate=Decimal("1.5"),
        ),
        DirectoryEmployee(
            employee_id="emp-2",
            name="Bob Tran",
            position="Operator",
            monthly_salary=Decimal("7040"),
            overtime_rate=Decimal("1.5"),
        ),
        DirectoryEmployee(
            employee_id="emp-3",
            name="Chi Le",
            position="Supervisor",
            monthly_salary=Decimal("10560"),
            overtime_rate=None,
            role_id="role-eng",
        ),
    ]


@pytest.fixture
def march_attendance() -> dict[str, list[AttendanceRecord]]:
    """March 2024 attendance for the 'ops' employees."""
    return {
        "emp-1": month_of_shifts("emp-1", 2024, 3, 20, 8),  # 160h
        "emp-2": month_of_shifts("emp-2", 2024, 3, 19, 10),  # 190h
        "emp-3": month_of_shifts("emp-3", 2024, 3, 22, 9),  # 198h
    }


# ============================================================================
# Database fixtures
# ============================================================================


@pytest.fixture
async def engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session
        await session.rollback()
