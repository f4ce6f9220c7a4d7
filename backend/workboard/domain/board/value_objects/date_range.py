"""
Date Range Value Object

Represents the calendar-date span a work order occupies on a work center.
Used for overlap detection.
"""

from dataclasses import dataclass
from datetime import date

from ...shared.exceptions import ValidationError
from .calendar import to_iso_date
from .enums import BoundaryRule


@dataclass(frozen=True)
class DateRange:
    """
    A closed calendar-date range ``[start, end]`` with ``end`` strictly after ``start``.

    Whether two ranges that merely touch (one ends on the day the other
    starts) overlap is decided by a ``BoundaryRule`` at comparison time.
    """

    start: date
    end: date

    def __post_init__(self):
        if self.end <= self.start:
            raise ValidationError(
                "endDate",
                to_iso_date(self.end),
                "End date must be after start date",
                "END_BEFORE_START",
            )

    def overlaps_with(
        self, other: "DateRange", rule: BoundaryRule = BoundaryRule.EXCLUSIVE
    ) -> bool:
        """
        Check if this range overlaps another.

        Args:
            other: Range to compare against
            rule: EXCLUSIVE treats touching endpoints as adjacent,
                INCLUSIVE treats them as overlapping

        Returns:
            True if the ranges overlap under ``rule``
        """
        if rule == BoundaryRule.INCLUSIVE:
            return self.start <= other.end and self.end >= other.start
        return self.start < other.end and self.end > other.start

    def __str__(self) -> str:
        return f"{to_iso_date(self.start)} - {to_iso_date(self.end)}"
