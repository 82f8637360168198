"""Attendance aggregation into regular/overtime hours."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from attendance_payroll.calculators.errors import InvalidConfigurationError
from attendance_payroll.calculators.types import (
    AttendanceRecord,
    CalculationMode,
    HoursSummary,
    OvertimePolicy,
)

logger = logging.getLogger(__name__)

REGULAR_HOURS_PER_DAY = Decimal("8")
WORKING_DAYS_PER_MONTH = 22
REGULAR_HOURS_PER_MONTH = REGULAR_HOURS_PER_DAY * WORKING_DAYS_PER_MONTH


class AttendanceAggregator:
    """Converts daily check-in/check-out events into an hours split.

    Attendance quality is not this engine's call: records outside the period,
    still-open shifts, check-outs that precede check-in and records with
    incomparable dates or timestamps contribute zero hours instead of raising.

    Splitting policies:
    - MONTHLY: hours past ``regular_hours_per_month`` are overtime
    - DAILY: hours past ``regular_hours_per_day`` on a single record are
      overtime, with no monthly cap on regular hours
    """

    @staticmethod
    def in_period(record: AttendanceRecord, period_start: date, period_end: date) -> bool:
        return record.date is not None and period_start <= record.date <= period_end

    @staticmethod
    def daily_hours(
        records: Iterable[AttendanceRecord],
        period_start: date,
        period_end: date,
    ) -> list[Decimal]:
        """Hours worked for each usable record inside the period."""
        hours: list[Decimal] = []
        for record in records:
            try:
                if not AttendanceAggregator.in_period(record, period_start, period_end):
                    continue
                worked = record.hours_worked
            except TypeError as e:
                # datetime vs date, or aware vs naive timestamps
                logger.debug(
                    "Skipping malformed attendance for %s: %s", record.employee_id, e
                )
                continue
            if worked is None:
                logger.debug(
                    "Skipping incomplete attendance for %s on %s",
                    record.employee_id,
                    record.date,
                )
                continue
            hours.append(worked)
        return hours

    @staticmethod
    def aggregate(
        records: Iterable[AttendanceRecord],
        period_start: date,
        period_end: date,
        regular_hours_per_month: Decimal = REGULAR_HOURS_PER_MONTH,
        overtime_policy: OvertimePolicy = OvertimePolicy.MONTHLY,
        regular_hours_per_day: Decimal = REGULAR_HOURS_PER_DAY,
        calculation_mode: CalculationMode = CalculationMode.HOURLY,
    ) -> HoursSummary:
        """Aggregate attendance for one employee over ``[period_start, period_end]``."""
        if regular_hours_per_month <= 0:
            raise InvalidConfigurationError(
                f"regular_hours_per_month must be positive, got {regular_hours_per_month}"
            )
        if regular_hours_per_day <= 0:
            raise InvalidConfigurationError(
                f"regular_hours_per_day must be positive, got {regular_hours_per_day}"
            )

        daily = AttendanceAggregator.daily_hours(records, period_start, period_end)
        if not daily:
            return HoursSummary()

        if calculation_mode == CalculationMode.DAILY:
            # Presence-based: each completed day counts as one regular day
            return HoursSummary(regular_hours=regular_hours_per_day * len(daily))

        if overtime_policy == OvertimePolicy.DAILY:
            regular = Decimal("0")
            overtime = Decimal("0")
            for hours in daily:
                if hours <= regular_hours_per_day:
                    regular += hours
                else:
                    regular += regular_hours_per_day
                    overtime += hours - regular_hours_per_day
            return HoursSummary(regular_hours=regular, overtime_hours=overtime)

        total = sum(daily, Decimal("0"))
        return HoursSummary(
            regular_hours=min(total, regular_hours_per_month),
            overtime_hours=max(Decimal("0"), total - regular_hours_per_month),
        )
