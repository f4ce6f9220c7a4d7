"""Domain enums for the timeline board."""

from enum import Enum


class Granularity(str, Enum):
    """Timescale unit used to generate columns and measure positions."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class WorkOrderStatus(str, Enum):
    """Work order status enumeration."""

    OPEN = "open"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"
    BLOCKED = "blocked"

    @property
    def label(self) -> str:
        """Human-readable label shown on bars and badges."""
        return {
            WorkOrderStatus.OPEN: "Open",
            WorkOrderStatus.IN_PROGRESS: "In progress",
            WorkOrderStatus.COMPLETE: "Complete",
            WorkOrderStatus.BLOCKED: "Blocked",
        }[self]


class BoundaryRule(str, Enum):
    """How touching endpoints of two date ranges are treated."""

    EXCLUSIVE = "exclusive"  # end == other start is adjacent, not overlapping
    INCLUSIVE = "inclusive"  # any shared date, endpoints included, overlaps
