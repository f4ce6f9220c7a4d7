"""Application services."""

from .work_order_service import WorkOrderService
from .work_order_store import WorkOrderStore, generate_work_order_id

__all__ = ["WorkOrderService", "WorkOrderStore", "generate_work_order_id"]
