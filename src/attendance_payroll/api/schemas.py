"""Pydantic schemas for API request/response models."""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from attendance_payroll.calculators.types import PayrollStatus

# Money and hours go over the wire as JSON numbers, not strings
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ErrorResponse(BaseModel):
    """Error body."""

    detail: str
    code: str | None = None


# ============================================================================
# Payroll run schemas
# ============================================================================


class PayrollRunRequest(BaseModel):
    """Schema for previewing or saving a department payroll."""

    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1900, le=9999)


class PayrollEntryResponse(BaseModel):
    """Schema for one employee's payroll entry.

    Serialized with the same camelCase keys as ``PayrollEntry.to_record()``;
    regular pay goes out as ``baseSalary``.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    payroll_entry_id: UUID | None = None
    employee_id: str
    employee_name: str
    position: str
    regular_hours: Amount
    overtime_hours: Amount
    regular_pay: Amount = Field(alias="baseSalary")
    overtime_rate: Amount
    overtime_pay: Amount
    total_salary: Amount
    month: str
    year: int
    generated_at: datetime
    status: PayrollStatus


class PayrollFailureResponse(BaseModel):
    """Schema for an employee excluded from a run."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    employee_name: str
    stage: str
    reason: str


class PayrollPreviewResponse(BaseModel):
    """Schema for a computed, unsaved payroll run."""

    department_id: str
    month: int
    year: int
    month_label: str
    entries: list[PayrollEntryResponse]
    failures: list[PayrollFailureResponse]
    failure_count: int
    total_regular_pay: Amount
    total_overtime_pay: Amount
    total_payroll: Amount


class PayrollSaveResponse(BaseModel):
    """Schema returned after a run is saved."""

    payroll_run_id: UUID
    department_id: str
    month: int
    year: int
    entry_count: int
    failure_count: int
    failures: list[PayrollFailureResponse]


class PayrollRunSummary(BaseModel):
    """Schema for a saved run in the history list."""

    payroll_run_id: UUID
    department_id: str
    month: int
    year: int
    created_at: datetime
    entries: list[PayrollEntryResponse]
    total_payroll: Amount


class PayrollRunHistoryResponse(BaseModel):
    """Schema for listing saved runs."""

    items: list[PayrollRunSummary]
    total: int


class StatusUpdateRequest(BaseModel):
    """Schema for moving an entry through the status workflow."""

    status: PayrollStatus


# ============================================================================
# Role schemas
# ============================================================================


class RoleSalaryResponse(BaseModel):
    """Schema for a seniority salary preview."""

    role_id: str
    role_title: str
    level: int
    base_salary: Amount
    salary_multiplier: Amount
    salary: Amount
    warnings: list[str] = Field(default_factory=list)


class PromotionPreviewRequest(BaseModel):
    """Schema for previewing an employee's promotion."""

    new_level: int = Field(ge=1)
    effective_date: date | None = None


class SalaryChangeResponse(BaseModel):
    """Schema for the salary history entry a promotion would write."""

    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    old_salary: Amount
    new_salary: Amount
    old_level: int
    new_level: int
    effective_date: date
    reason: str
    notes: str
