"""Role salary preview endpoints."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from attendance_payroll.api.dependencies import Roles
from attendance_payroll.api.schemas import ErrorResponse, RoleSalaryResponse
from attendance_payroll.calculators.errors import LevelNotFoundError
from attendance_payroll.calculators.role_salary import RoleSalaryCalculator

router = APIRouter(prefix="/roles", tags=["roles"])


@router.get(
    "/{role_id}/levels/{level}/salary",
    response_model=RoleSalaryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_salary_for_level(
    roles: Roles,
    role_id: Annotated[str, Path()],
    level: Annotated[int, Path(ge=1)],
) -> RoleSalaryResponse:
    """Preview the salary a promotion to ``level`` would give."""
    role = await roles.get_role(role_id)
    if role is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Role not found",
        )

    try:
        entry = RoleSalaryCalculator.require_level(role, level)
    except LevelNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return RoleSalaryResponse(
        role_id=role.id,
        role_title=role.title,
        level=level,
        base_salary=role.base_salary,
        salary_multiplier=entry.salary_multiplier,
        salary=RoleSalaryCalculator.scaled_salary(role, entry),
        warnings=RoleSalaryCalculator.validate_levels(role),
    )
