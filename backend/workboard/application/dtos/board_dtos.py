"""
Board Data Transfer Objects.

Request and response shapes for the timeline and work order endpoints.
Field names are camelCase on the wire, matching the persisted layout.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from workboard.domain.board.entities import WorkCenter, WorkOrder, WorkOrderData
from workboard.domain.board.value_objects import (
    Column,
    Granularity,
    WorkOrderStatus,
    calendar,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WorkOrderForm(CamelModel):
    """DTO for creating or replacing a work order."""

    name: str = Field(..., max_length=200, description="Work order name")
    resource_id: str = Field(..., description="Work center the order runs on")
    status: WorkOrderStatus = Field(
        WorkOrderStatus.OPEN, description="open, in-progress, complete or blocked"
    )
    start_date: date = Field(..., description="First day (YYYY-MM-DD or MM.DD.YYYY)")
    end_date: date = Field(
        ..., description="Last day (YYYY-MM-DD or MM.DD.YYYY), after start"
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Assembly Line Alpha",
                "resourceId": "wc-005",
                "status": "open",
                "startDate": "2025-01-20",
                "endDate": "2025-01-25",
            }
        },
    )

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _accept_display_format(cls, v: object) -> object:
        """Dates typed in the form's MM.DD.YYYY format are accepted as well."""
        if isinstance(v, str):
            parsed = calendar.parse_display_date(v)
            if parsed is not None:
                return parsed
        return v

    def to_data(self) -> WorkOrderData:
        return WorkOrderData(
            name=self.name,
            resource_id=self.resource_id,
            status=self.status,
            start_date=self.start_date,
            end_date=self.end_date,
        )


class WorkOrderResponse(CamelModel):
    """A work order with its status label."""

    id: str
    name: str
    resource_id: str
    status: WorkOrderStatus
    status_label: str
    start_date: date
    end_date: date

    @classmethod
    def from_entity(cls, work_order: WorkOrder) -> "WorkOrderResponse":
        return cls(
            id=work_order.id,
            name=work_order.name,
            resource_id=work_order.resource_id,
            status=work_order.status,
            status_label=work_order.status.label,
            start_date=work_order.start_date,
            end_date=work_order.end_date,
        )


class WorkOrderBar(WorkOrderResponse):
    """A work order placed on the current timescale."""

    left: float
    width: float


class WorkCenterResponse(CamelModel):
    id: str
    name: str
    work_orders: list[WorkOrderBar] = []

    @classmethod
    def from_entity(
        cls, work_center: WorkCenter, bars: list[WorkOrderBar]
    ) -> "WorkCenterResponse":
        return cls(id=work_center.id, name=work_center.name, work_orders=bars)


class OperationResult(CamelModel):
    """Outcome of a form submission: ``{success, error?}``."""

    success: bool
    error: str | None = None
    error_type: str | None = None
    work_order: WorkOrderResponse | None = None


class ColumnResponse(CamelModel):
    date: date
    label: str
    is_current_period: bool

    @classmethod
    def from_column(cls, column: Column) -> "ColumnResponse":
        return cls(
            date=column.date,
            label=column.label,
            is_current_period=column.is_current_period,
        )


class TimelineResponse(CamelModel):
    granularity: Granularity
    view_start: date
    view_end: date
    column_width: int
    total_columns: int
    total_width: int
    today_position: float
    columns: list[ColumnResponse]


class GranularityRequest(CamelModel):
    granularity: Granularity


class ExpandResponse(CamelModel):
    direction: Literal["past", "future"]
    added: int
    scroll_compensation: int
    view_start: date
    view_end: date


class DateAtPositionResponse(CamelModel):
    """Date under a pixel offset; seeds a new work order's start date."""

    offset_x: float
    date: date
    display_date: str
