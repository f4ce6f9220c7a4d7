"""
Work order application service.

The form boundary of the board: accepts plain work order records and
reports ``{success, error}`` instead of raising, so the caller (a form or
an HTTP handler) can show the message and stay interactive.
"""

from collections.abc import Callable
from typing import TypeVar

from workboard.application.dtos.board_dtos import (
    OperationResult,
    WorkOrderForm,
    WorkOrderResponse,
)
from workboard.application.services.work_order_store import WorkOrderStore
from workboard.core.observability import get_logger
from workboard.domain.board.entities import WorkOrder
from workboard.domain.shared.exceptions import DomainError

logger = get_logger(__name__)

T = TypeVar("T")


class WorkOrderService:
    """
    Create, update, delete and pre-check work orders.

    The pre-submit ``check`` and the committing calls share the store's
    overlap validator, so both apply the same boundary rule.
    """

    def __init__(self, store: WorkOrderStore) -> None:
        self._store = store

    def check(self, form: WorkOrderForm, exclude_id: str | None = None) -> OperationResult:
        """Validate a form without saving it."""
        return self._run(lambda: self._store.check(form.to_data(), exclude_id))

    def create(self, form: WorkOrderForm) -> OperationResult:
        return self._run(lambda: self._store.create(form.to_data()))

    def update(self, work_order_id: str, form: WorkOrderForm) -> OperationResult:
        return self._run(lambda: self._store.update(work_order_id, form.to_data()))

    def delete(self, work_order_id: str) -> OperationResult:
        self._store.delete(work_order_id)
        return OperationResult(success=True)

    def _run(self, operation: Callable[[], T]) -> OperationResult:
        try:
            outcome = operation()
        except DomainError as e:
            logger.info(
                "Work order submission rejected",
                error_type=e.error_type.value,
                error=e.message,
            )
            return OperationResult(
                success=False, error=e.message, error_type=e.error_type.value
            )

        work_order = (
            WorkOrderResponse.from_entity(outcome)
            if isinstance(outcome, WorkOrder)
            else None
        )
        return OperationResult(success=True, work_order=work_order)
