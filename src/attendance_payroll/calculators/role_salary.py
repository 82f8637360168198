"""Seniority-based salary computation for promotions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from attendance_payroll.calculators.errors import InvalidInputError, LevelNotFoundError
from attendance_payroll.calculators.types import Role, SalaryChange, SeniorityLevel, round2


class RoleSalaryCalculator:
    """Previews salaries from a role's seniority multiplier table.

    Nothing here writes to an employee record; the promotion workflow decides
    whether to commit the preview.
    """

    @staticmethod
    def require_level(role: Role, level: int) -> SeniorityLevel:
        """Return the role's seniority level, or raise LevelNotFoundError."""
        entry = role.find_level(level)
        if entry is None:
            raise LevelNotFoundError(
                role.id, level, [lvl.level for lvl in role.seniority_levels]
            )
        return entry

    @staticmethod
    def scaled_salary(role: Role, entry: SeniorityLevel) -> Decimal:
        """Base salary x multiplier of an already resolved level, rounded to cents."""
        if role.base_salary < 0:
            raise InvalidInputError(f"Role {role.id} has a negative base salary")
        return round2(role.base_salary * entry.salary_multiplier)

    @staticmethod
    def salary_for_level(role: Role, level: int) -> Decimal:
        """Return base salary x level multiplier, rounded to cents.

        Raises:
            LevelNotFoundError: If the role has no such seniority level
            InvalidInputError: If the role's base salary is negative
        """
        entry = RoleSalaryCalculator.require_level(role, level)
        return RoleSalaryCalculator.scaled_salary(role, entry)

    @staticmethod
    def validate_levels(role: Role) -> list[str]:
        """Check the seniority table for structural problems.

        Returns list of error messages (empty if valid). Advisory only.
        """
        errors: list[str] = []
        levels = role.seniority_levels

        if not levels:
            errors.append(f"Role {role.id} has no seniority levels")
            return errors

        seen: set[int] = set()
        for i, entry in enumerate(levels):
            if entry.level < 1:
                errors.append(f"Level {i} has invalid number {entry.level}, expected >= 1")
            if entry.level in seen:
                errors.append(f"Level {entry.level} is defined more than once")
            seen.add(entry.level)
            if entry.salary_multiplier <= 0:
                errors.append(
                    f"Level {entry.level} has non-positive multiplier {entry.salary_multiplier}"
                )

        for prev, cur in zip(levels, levels[1:]):
            if cur.level <= prev.level:
                errors.append(f"Levels not in ascending order at {prev.level} -> {cur.level}")
            if cur.salary_multiplier < prev.salary_multiplier:
                errors.append(
                    f"Multiplier decreases from level {prev.level} to level {cur.level}"
                )

        return errors

    @staticmethod
    def preview_promotion(
        employee_id: str,
        current_salary: Decimal,
        current_level: int,
        role: Role,
        new_level: int,
        effective_date: date,
    ) -> SalaryChange:
        """Build the salary history entry for a promotion to ``new_level``."""
        new_salary = RoleSalaryCalculator.salary_for_level(role, new_level)
        return SalaryChange(
            employee_id=employee_id,
            old_salary=current_salary,
            new_salary=new_salary,
            old_level=current_level,
            new_level=new_level,
            effective_date=effective_date,
            notes=f"Promoted to {role.title} (Level {current_level} → {new_level})",
        )
