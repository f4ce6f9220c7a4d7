"""
Work Order Entity

A named, status-tagged, date-bounded allocation against exactly one work
center. Work orders are replaced wholesale on update; the record itself is
immutable.
"""

from datetime import date

from pydantic import ConfigDict, Field, model_validator

from ...shared.base import Entity, ValueObject
from ...shared.exceptions import ValidationError
from ..value_objects.date_range import DateRange
from ..value_objects.enums import WorkOrderStatus


class WorkOrderData(ValueObject):
    """
    The editable part of a work order, as submitted by the form.

    Field-level types are enforced on construction; the cross-field rules
    (non-blank name, end after start) are checked by ``validate_record`` so
    they surface as domain validation errors.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    resource_id: str = Field(..., alias="resourceId")
    status: WorkOrderStatus = WorkOrderStatus.OPEN
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")

    def validate_record(self) -> DateRange:
        """
        Check the record-level invariants.

        Returns:
            The validated date range

        Raises:
            ValidationError: If the name is blank or end is not after start
        """
        if not self.name.strip():
            raise ValidationError("name", self.name, "Name is required", "NAME_REQUIRED")
        return DateRange(self.start_date, self.end_date)


class WorkOrder(Entity):
    """A persisted work order: generated id plus its data."""

    name: str
    resource_id: str = Field(..., alias="resourceId")
    status: WorkOrderStatus
    start_date: date = Field(..., alias="startDate")
    end_date: date = Field(..., alias="endDate")

    @model_validator(mode="after")
    def _end_after_start(self) -> "WorkOrder":
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self

    @classmethod
    def from_data(cls, work_order_id: str, data: WorkOrderData) -> "WorkOrder":
        return cls(
            id=work_order_id,
            name=data.name,
            resource_id=data.resource_id,
            status=data.status,
            start_date=data.start_date,
            end_date=data.end_date,
        )

    @property
    def date_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)
