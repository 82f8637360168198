"""Payroll entry status state machine with transition validation."""

from __future__ import annotations

import dataclasses

from attendance_payroll.calculators.types import PayrollEntry, PayrollStatus


def _value(status: str) -> str:
    return status.value if isinstance(status, PayrollStatus) else status


class InvalidTransitionError(Exception):
    """Raised when an invalid status transition is attempted."""

    def __init__(self, from_status: str, to_status: str, reason: str | None = None):
        self.from_status = from_status
        self.to_status = to_status
        self.reason = reason
        msg = f"Invalid transition from '{from_status}' to '{to_status}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class PayrollStatusMachine:
    """State machine for payroll entry status.

    Allowed transitions:
    - pending → approved
    - approved → pending (reopen)
    - approved → paid
    """

    VALID_TRANSITIONS: dict[str, list[str]] = {
        PayrollStatus.PENDING: [PayrollStatus.APPROVED],
        PayrollStatus.APPROVED: [PayrollStatus.PENDING, PayrollStatus.PAID],
        PayrollStatus.PAID: [],  # Terminal state
    }

    @classmethod
    def can_transition(cls, from_status: str, to_status: str) -> bool:
        """Check if a transition is valid."""
        allowed = cls.VALID_TRANSITIONS.get(from_status, [])
        return to_status in allowed

    @classmethod
    def validate_transition(cls, from_status: str, to_status: str) -> None:
        """Validate a transition, raising InvalidTransitionError if invalid."""
        if not cls.can_transition(from_status, to_status):
            allowed = [_value(s) for s in cls.get_next_statuses(from_status)]
            raise InvalidTransitionError(
                _value(from_status),
                _value(to_status),
                f"allowed: {', '.join(allowed)}" if allowed else "no transitions allowed",
            )

    @classmethod
    def is_reopen(cls, from_status: str, to_status: str) -> bool:
        return from_status == PayrollStatus.APPROVED and to_status == PayrollStatus.PENDING

    @classmethod
    def get_next_statuses(cls, current_status: str) -> list[str]:
        """Get list of valid next statuses from current status."""
        return cls.VALID_TRANSITIONS.get(current_status, [])

    @classmethod
    def transition_entry(cls, entry: PayrollEntry, to_status: str) -> PayrollEntry:
        """Return a copy of ``entry`` with its status moved to ``to_status``.

        Status is the only field of an entry that changes after creation.
        """
        cls.validate_transition(entry.status, to_status)
        return dataclasses.replace(entry, status=PayrollStatus(to_status))
