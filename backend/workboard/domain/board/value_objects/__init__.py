"""Value objects for the timeline board domain."""

from .column import Column
from .date_range import DateRange
from .enums import BoundaryRule, Granularity, WorkOrderStatus

__all__ = [
    "BoundaryRule",
    "Column",
    "DateRange",
    "Granularity",
    "WorkOrderStatus",
]
