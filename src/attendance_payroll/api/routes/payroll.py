"""Department payroll API endpoints."""

import dataclasses
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Path, Query, status

from attendance_payroll.api.dependencies import DbSession, Runner, Sink
from attendance_payroll.api.schemas import (
    ErrorResponse,
    PayrollEntryResponse,
    PayrollFailureResponse,
    PayrollPreviewResponse,
    PayrollRunHistoryResponse,
    PayrollRunRequest,
    PayrollRunSummary,
    PayrollSaveResponse,
    StatusUpdateRequest,
)
from attendance_payroll.calculators.types import PayrollRunResult
from attendance_payroll.models import PayrollEntry, PayrollRun

router = APIRouter(tags=["payroll"])


def _entry_response(row: PayrollEntry) -> PayrollEntryResponse:
    return PayrollEntryResponse(
        payroll_entry_id=row.payroll_entry_id,
        **dataclasses.asdict(row.to_value()),
    )


def _failures(result: PayrollRunResult) -> list[PayrollFailureResponse]:
    return [PayrollFailureResponse.model_validate(f) for f in result.failures]


def _run_summary(run: PayrollRun) -> PayrollRunSummary:
    entries = [_entry_response(row) for row in run.entries]
    return PayrollRunSummary(
        payroll_run_id=run.payroll_run_id,
        department_id=run.department_id,
        month=run.month,
        year=run.year,
        created_at=run.created_at,
        entries=entries,
        total_payroll=sum((e.total_salary for e in entries), Decimal("0")),
    )


# ============================================================================
# Preview / save
# ============================================================================


@router.post(
    "/departments/{department_id}/payroll/preview",
    response_model=PayrollPreviewResponse,
    responses={422: {"model": ErrorResponse}},
)
async def preview_payroll(
    runner: Runner,
    department_id: Annotated[str, Path()],
    payload: PayrollRunRequest,
) -> PayrollPreviewResponse:
    """Compute a department's payroll without saving it.

    Employees whose data could not be processed are listed under
    ``failures``; the remaining entries are always returned.
    """
    result = await runner.run(department_id, payload.month, payload.year)

    return PayrollPreviewResponse(
        department_id=department_id,
        month=result.period.month,
        year=result.period.year,
        month_label=result.period.label,
        entries=[PayrollEntryResponse.model_validate(e) for e in result.entries],
        failures=_failures(result),
        failure_count=result.failure_count,
        total_regular_pay=result.total_regular_pay,
        total_overtime_pay=result.total_overtime_pay,
        total_payroll=result.total_payroll,
    )


@router.post(
    "/departments/{department_id}/payroll",
    response_model=PayrollSaveResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def save_payroll(
    db: DbSession,
    runner: Runner,
    sink: Sink,
    department_id: Annotated[str, Path()],
    payload: PayrollRunRequest,
) -> PayrollSaveResponse:
    """Compute and save a department's payroll for the month."""
    result = await runner.run(department_id, payload.month, payload.year)
    run_id = await sink.save(department_id, payload.month, payload.year, result.entries)
    await db.commit()

    return PayrollSaveResponse(
        payroll_run_id=UUID(run_id),
        department_id=department_id,
        month=payload.month,
        year=payload.year,
        entry_count=len(result.entries),
        failure_count=result.failure_count,
        failures=_failures(result),
    )


@router.get(
    "/departments/{department_id}/payroll",
    response_model=PayrollRunHistoryResponse,
)
async def list_payroll_runs(
    sink: Sink,
    department_id: Annotated[str, Path()],
    year: Annotated[int | None, Query(ge=1900, le=9999)] = None,
) -> PayrollRunHistoryResponse:
    """List saved runs for a department, newest period first."""
    runs = await sink.list_runs(department_id, year)
    return PayrollRunHistoryResponse(
        items=[_run_summary(run) for run in runs],
        total=len(runs),
    )


# ============================================================================
# Entry status
# ============================================================================


@router.patch(
    "/payroll/entries/{payroll_entry_id}/status",
    response_model=PayrollEntryResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
async def update_entry_status(
    db: DbSession,
    sink: Sink,
    payroll_entry_id: Annotated[UUID, Path()],
    payload: StatusUpdateRequest,
) -> PayrollEntryResponse:
    """Approve, reopen or mark an entry as paid."""
    row = await sink.update_entry_status(payroll_entry_id, payload.status.value)
    if row is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Payroll entry not found",
        )
    await db.commit()
    return _entry_response(row)
