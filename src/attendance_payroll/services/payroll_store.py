"""SQL-backed persistence of confirmed payroll runs."""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from attendance_payroll.calculators.types import PayrollEntry as PayrollEntryValue
from attendance_payroll.models import PayrollEntry, PayrollRun
from attendance_payroll.services.state_machine import PayrollStatusMachine

logger = logging.getLogger(__name__)


class SqlPayrollSink:
    """Stores payroll runs and manages entry status.

    Operations:
    - save: persist a previewed run and its entries
    - list_runs: run history for a department, newest first
    - update_entry_status: move one entry through the status workflow
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def save(
        self,
        department_id: str,
        month: int,
        year: int,
        entries: list[PayrollEntryValue],
    ) -> str:
        """Persist a run and return its id."""
        payroll_run = PayrollRun(department_id=department_id, month=month, year=year)
        payroll_run.entries = [
            PayrollEntry.from_value(entry, position_in_run=i)
            for i, entry in enumerate(entries)
        ]
        self.session.add(payroll_run)
        await self.session.flush()

        logger.info(
            "Saved payroll run %s for department %s (%02d/%d, %d entries)",
            payroll_run.payroll_run_id,
            department_id,
            month,
            year,
            len(entries),
        )
        return str(payroll_run.payroll_run_id)

    async def get_run(self, payroll_run_id: UUID) -> PayrollRun | None:
        result = await self.session.execute(
            select(PayrollRun)
            .where(PayrollRun.payroll_run_id == payroll_run_id)
            .options(selectinload(PayrollRun.entries))
        )
        return result.scalar_one_or_none()

    async def list_runs(
        self, department_id: str, year: int | None = None
    ) -> list[PayrollRun]:
        query = (
            select(PayrollRun)
            .where(PayrollRun.department_id == department_id)
            .options(selectinload(PayrollRun.entries))
        )
        if year is not None:
            query = query.where(PayrollRun.year == year)
        query = query.order_by(
            PayrollRun.year.desc(),
            PayrollRun.month.desc(),
            PayrollRun.created_at.desc(),
        )
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def update_entry_status(
        self, payroll_entry_id: UUID, to_status: str
    ) -> PayrollEntry | None:
        """Transition an entry's status.

        Returns None if the entry does not exist.

        Raises:
            InvalidTransitionError: If the workflow forbids the transition
        """
        row = await self.session.get(PayrollEntry, payroll_entry_id)
        if row is None:
            return None

        from_status = row.status
        updated = PayrollStatusMachine.transition_entry(row.to_value(), to_status)
        row.status = updated.status.value
        await self.session.flush()

        if PayrollStatusMachine.is_reopen(from_status, row.status):
            logger.info(
                "Reopened payroll entry %s for employee %s (%s %d)",
                row.payroll_entry_id,
                row.employee_id,
                row.month,
                row.year,
            )
        else:
            logger.info(
                "Payroll entry %s moved %s -> %s",
                row.payroll_entry_id,
                from_status,
                row.status,
            )
        return row
