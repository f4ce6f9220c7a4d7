"""Entities for the timeline board domain."""

from .work_center import WorkCenter
from .work_order import WorkOrder, WorkOrderData

__all__ = ["WorkCenter", "WorkOrder", "WorkOrderData"]
