"""
Board read queries.

Combine the store's collections with the timescale engine's coordinate
mapping into the rows a renderer lays out.
"""

from workboard.application.dtos.board_dtos import (
    ColumnResponse,
    TimelineResponse,
    WorkCenterResponse,
    WorkOrderBar,
)
from workboard.application.services.work_order_store import WorkOrderStore
from workboard.domain.board.entities import WorkOrder
from workboard.domain.board.services.timescale_engine import TimescaleEngine


def build_timeline(engine: TimescaleEngine) -> TimelineResponse:
    """Snapshot of the timescale: window, geometry and columns."""
    state = engine.state
    columns = [ColumnResponse.from_column(c) for c in engine.generate_columns()]
    return TimelineResponse(
        granularity=state.granularity,
        view_start=state.view_start,
        view_end=state.view_end,
        column_width=engine.column_width(),
        total_columns=len(columns),
        total_width=len(columns) * engine.column_width(),
        today_position=engine.get_today_indicator_position(),
        columns=columns,
    )


def build_bar(engine: TimescaleEngine, work_order: WorkOrder) -> WorkOrderBar:
    return WorkOrderBar(
        id=work_order.id,
        name=work_order.name,
        resource_id=work_order.resource_id,
        status=work_order.status,
        status_label=work_order.status.label,
        start_date=work_order.start_date,
        end_date=work_order.end_date,
        left=engine.calculate_bar_left(work_order.start_date),
        width=engine.calculate_bar_width(work_order.start_date, work_order.end_date),
    )


def build_work_center_rows(
    store: WorkOrderStore, engine: TimescaleEngine
) -> list[WorkCenterResponse]:
    """One row per work center with its work orders as positioned bars."""
    return [
        WorkCenterResponse.from_entity(
            work_center,
            [build_bar(engine, wo) for wo in store.list_by_resource(work_center.id)],
        )
        for work_center in store.work_centers
    ]
