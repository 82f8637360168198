"""Errors raised by the payroll calculators."""

from __future__ import annotations


class PayrollError(Exception):
    """Base class for payroll calculation errors."""


class InvalidConfigurationError(PayrollError):
    """Raised when a structural precondition is violated (e.g. zero hours budget)."""


class InvalidInputError(PayrollError):
    """Raised for malformed numeric input such as a negative salary."""


class LevelNotFoundError(PayrollError):
    """Raised when a seniority level is absent from a role's table."""

    def __init__(
        self,
        role_id: str,
        level: int,
        available_levels: list[int] | None = None,
    ):
        self.role_id = role_id
        self.level = level
        self.available_levels = available_levels or []
        super().__init__(
            f"Seniority level {level} not found for role {role_id} "
            f"(available: {self.available_levels})"
        )
