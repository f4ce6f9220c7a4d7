"""Timeline column value object."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Column:
    """One rendered unit of the timescale.

    ``date`` is the anchor of the column: the day itself, the Monday of the
    week, or the first of the month.
    """

    date: date
    label: str
    is_current_period: bool = False

    def to_dict(self) -> dict[str, str | bool]:
        return {
            "date": self.date.isoformat(),
            "label": self.label,
            "isCurrentPeriod": self.is_current_period,
        }
