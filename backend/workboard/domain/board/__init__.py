"""
Timeline Board Domain

Entities, value objects and services for placing work orders on work
centers along a day, week or month timescale.
"""

from .entities import WorkCenter, WorkOrder, WorkOrderData
from .services import OverlapValidator, TimescaleEngine, TimescaleState
from .value_objects import BoundaryRule, Column, DateRange, Granularity, WorkOrderStatus

__all__ = [
    # Entities
    "WorkCenter",
    "WorkOrder",
    "WorkOrderData",
    # Services
    "OverlapValidator",
    "TimescaleEngine",
    "TimescaleState",
    # Value objects
    "BoundaryRule",
    "Column",
    "DateRange",
    "Granularity",
    "WorkOrderStatus",
]
