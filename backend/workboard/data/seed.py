"""
Seed dataset for an empty board.

Dates are relative to the day the data is generated so a fresh board
always shows past, current and upcoming work.
"""

from datetime import date

from workboard.domain.board.entities import WorkCenter, WorkOrder
from workboard.domain.board.value_objects.calendar import add_days
from workboard.domain.board.value_objects.enums import WorkOrderStatus

WORK_CENTERS: tuple[tuple[str, str], ...] = (
    ("wc-001", "Genesis Hardware"),
    ("wc-002", "Rodriques Electrics"),
    ("wc-003", "Konsulting Inc"),
    ("wc-004", "McMarrow Distribution"),
    ("wc-005", "Spartan Manufacturing"),
)

# (id, work center, name, status, start offset, end offset)
WORK_ORDERS: tuple[tuple[str, str, str, WorkOrderStatus, int, int], ...] = (
    ("wo-001", "wc-001", "Consulting Inc", WorkOrderStatus.COMPLETE, -45, -15),
    ("wo-002", "wc-002", "Rodriques Electrics", WorkOrderStatus.IN_PROGRESS, -30, 15),
    ("wo-003", "wc-003", "Konsulting Inc", WorkOrderStatus.IN_PROGRESS, -20, 25),
    ("wo-004", "wc-003", "Compleks Systems", WorkOrderStatus.IN_PROGRESS, 30, 75),
    ("wo-005", "wc-004", "McMarrow Distribution", WorkOrderStatus.BLOCKED, -10, 45),
    ("wo-006", "wc-005", "Assembly Line Alpha", WorkOrderStatus.OPEN, 5, 20),
    ("wo-007", "wc-005", "Quality Check Batch", WorkOrderStatus.COMPLETE, -60, -40),
    ("wo-008", "wc-001", "Maintenance Schedule", WorkOrderStatus.OPEN, 10, 25),
)


def seed_work_centers() -> list[WorkCenter]:
    return [WorkCenter(id=wc_id, name=name) for wc_id, name in WORK_CENTERS]


def seed_work_orders(today: date) -> list[WorkOrder]:
    """Build the sample work orders relative to ``today``."""
    return [
        WorkOrder(
            id=wo_id,
            resource_id=wc_id,
            name=name,
            status=status,
            start_date=add_days(today, start_offset),
            end_date=add_days(today, end_offset),
        )
        for wo_id, wc_id, name, status, start_offset, end_offset in WORK_ORDERS
    ]
