"""
Overlap Validator

Decides whether a candidate date range may be placed on a work center
without double-booking it. Pure: no state beyond the configured boundary
rule, no side effects.
"""

from collections.abc import Iterable

from ...shared.base import DomainService
from ...shared.exceptions import ConflictError
from ..entities.work_order import WorkOrder
from ..value_objects.calendar import to_iso_date
from ..value_objects.date_range import DateRange
from ..value_objects.enums import BoundaryRule


def find_conflict(
    resource_id: str,
    candidate: DateRange,
    existing: Iterable[WorkOrder],
    exclude_id: str | None = None,
    rule: BoundaryRule = BoundaryRule.EXCLUSIVE,
) -> WorkOrder | None:
    """
    Return the first work order on ``resource_id`` that overlaps ``candidate``.

    Args:
        resource_id: Work center the candidate is placed on
        candidate: Proposed date range (already known to have end > start)
        existing: Work orders to check, in collection order
        exclude_id: Work order being edited, skipped by identity
        rule: Boundary rule for touching endpoints

    Returns:
        The first conflicting work order, or None
    """
    for work_order in existing:
        if work_order.resource_id != resource_id:
            continue
        if exclude_id is not None and work_order.id == exclude_id:
            continue
        if candidate.overlaps_with(work_order.date_range, rule):
            return work_order
    return None


class OverlapValidator(DomainService):
    """
    Overlap check shared by the pre-submit form check and the commit path.

    Both call sites go through one instance so they always apply the same
    boundary rule.
    """

    def __init__(self, rule: BoundaryRule = BoundaryRule.EXCLUSIVE) -> None:
        self._rule = rule

    @property
    def rule(self) -> BoundaryRule:
        return self._rule

    def find_conflict(
        self,
        resource_id: str,
        candidate: DateRange,
        existing: Iterable[WorkOrder],
        exclude_id: str | None = None,
    ) -> WorkOrder | None:
        return find_conflict(resource_id, candidate, existing, exclude_id, self._rule)

    def has_conflict(
        self,
        resource_id: str,
        candidate: DateRange,
        existing: Iterable[WorkOrder],
        exclude_id: str | None = None,
    ) -> bool:
        return self.find_conflict(resource_id, candidate, existing, exclude_id) is not None

    def ensure_no_conflict(
        self,
        resource_id: str,
        candidate: DateRange,
        existing: Iterable[WorkOrder],
        exclude_id: str | None = None,
    ) -> None:
        """
        Raise if the candidate collides with an existing work order.

        Raises:
            ConflictError: Naming the first colliding work order and its range
        """
        conflict = self.find_conflict(resource_id, candidate, existing, exclude_id)
        if conflict is not None:
            raise ConflictError(
                conflicting_id=conflict.id,
                conflicting_name=conflict.name,
                start_date=to_iso_date(conflict.start_date),
                end_date=to_iso_date(conflict.end_date),
            )
