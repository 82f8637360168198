"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from attendance_payroll.calculators.runner import PayrollPolicy, PayrollRunner
from attendance_payroll.config import get_settings
from attendance_payroll.database import init_db
from attendance_payroll.services import (
    SqlAttendanceSource,
    SqlEmployeeDirectory,
    SqlPayrollSink,
    SqlRoleCatalog,
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


def get_payroll_policy() -> PayrollPolicy:
    """Payroll knobs from settings."""
    return PayrollPolicy.from_settings(get_settings())


DbSession = Annotated[AsyncSession, Depends(get_db_session)]
Policy = Annotated[PayrollPolicy, Depends(get_payroll_policy)]


def get_payroll_runner(db: DbSession, policy: Policy) -> PayrollRunner:
    """Runner wired to the SQL collaborators of the request session."""
    return PayrollRunner(
        directory=SqlEmployeeDirectory(db),
        attendance_source=SqlAttendanceSource(db),
        roles=SqlRoleCatalog(db),
        policy=policy,
    )


def get_payroll_sink(db: DbSession) -> SqlPayrollSink:
    return SqlPayrollSink(db)


def get_role_catalog(db: DbSession) -> SqlRoleCatalog:
    return SqlRoleCatalog(db)


def get_employee_directory(db: DbSession) -> SqlEmployeeDirectory:
    return SqlEmployeeDirectory(db)


# Type aliases for cleaner dependency injection
Runner = Annotated[PayrollRunner, Depends(get_payroll_runner)]
Sink = Annotated[SqlPayrollSink, Depends(get_payroll_sink)]
Roles = Annotated[SqlRoleCatalog, Depends(get_role_catalog)]
Directory = Annotated[SqlEmployeeDirectory, Depends(get_employee_directory)]
