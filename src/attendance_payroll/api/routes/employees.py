"""Employee promotion preview endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from attendance_payroll.api.dependencies import Directory, Roles
from attendance_payroll.api.schemas import (
    ErrorResponse,
    PromotionPreviewRequest,
    SalaryChangeResponse,
)
from attendance_payroll.calculators.errors import LevelNotFoundError
from attendance_payroll.calculators.role_salary import RoleSalaryCalculator

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post(
    "/{employee_id}/promotion/preview",
    response_model=SalaryChangeResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def preview_promotion(
    directory: Directory,
    roles: Roles,
    employee_id: Annotated[str, Path()],
    payload: PromotionPreviewRequest,
) -> SalaryChangeResponse:
    """Preview the salary change of promoting an employee within their role.

    Starts from the employee's current salary and seniority level. Nothing
    is written.
    """
    employee = await directory.get_employee(employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    if employee.role_id is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Employee has no role to be promoted in",
        )

    role = await roles.get_role(employee.role_id)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Role not found",
        )

    try:
        change = RoleSalaryCalculator.preview_promotion(
            employee_id=employee.employee_id,
            current_salary=employee.salary,
            current_level=employee.current_level,
            role=role,
            new_level=payload.new_level,
            effective_date=payload.effective_date or date.today(),
        )
    except LevelNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return SalaryChangeResponse.model_validate(change)
