"""
Data Transfer Objects for the application layer.

Shapes exchanged with the HTTP API, camelCase on the wire.
"""

from .board_dtos import (
    ColumnResponse,
    DateAtPositionResponse,
    ExpandResponse,
    GranularityRequest,
    OperationResult,
    TimelineResponse,
    WorkCenterResponse,
    WorkOrderBar,
    WorkOrderForm,
    WorkOrderResponse,
)

__all__ = [
    # Timeline
    "ColumnResponse",
    "DateAtPositionResponse",
    "ExpandResponse",
    "GranularityRequest",
    "TimelineResponse",
    # Work orders
    "OperationResult",
    "WorkCenterResponse",
    "WorkOrderBar",
    "WorkOrderForm",
    "WorkOrderResponse",
]
