"""
Work Order Store

Authoritative owner of the board's work centers and work orders. Every
mutation is validated first and committed second: the overlap check, the
record check and the write to storage all happen before the in-memory
collections change, so a rejected or failed call leaves the board as it
was.

Both collections are written whole on every mutation under two keys,
``resources`` and ``assignments``.
"""

import threading
import uuid
from collections.abc import Callable
from datetime import date

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from workboard.core.observability import get_logger
from workboard.data import seed_work_centers, seed_work_orders
from workboard.domain.board.entities import WorkCenter, WorkOrder, WorkOrderData
from workboard.domain.board.services.overlap_validator import OverlapValidator
from workboard.domain.board.value_objects import calendar
from workboard.domain.board.value_objects.date_range import DateRange
from workboard.domain.shared.base import KeyValueStore
from workboard.domain.shared.exceptions import ConflictError, NotFoundError

logger = get_logger(__name__)

RESOURCES_KEY = "resources"
ASSIGNMENTS_KEY = "assignments"

_work_centers_adapter = TypeAdapter(list[WorkCenter])
_work_orders_adapter = TypeAdapter(list[WorkOrder])


def generate_work_order_id() -> str:
    return f"wo-{uuid.uuid4().hex[:12]}"


class WorkOrderStore:
    """
    Work center and work order collections with overlap-checked mutations.

    Restores both collections from ``storage`` on construction. If either
    key is missing or unparsable, the whole board is reseeded and written
    back. The same happens when a restored work order is one ``create``
    would have refused.
    """

    def __init__(
        self,
        storage: KeyValueStore,
        validator: OverlapValidator | None = None,
        *,
        clock: Callable[[], date] = calendar.today,
        id_factory: Callable[[], str] = generate_work_order_id,
    ) -> None:
        self._storage = storage
        self._validator = validator or OverlapValidator()
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()

        self._work_centers: list[WorkCenter] = []
        self._work_orders: list[WorkOrder] = []
        self._load()

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def validator(self) -> OverlapValidator:
        return self._validator

    @property
    def work_centers(self) -> list[WorkCenter]:
        return list(self._work_centers)

    @property
    def work_orders(self) -> list[WorkOrder]:
        return list(self._work_orders)

    def get(self, work_order_id: str) -> WorkOrder | None:
        return next((wo for wo in self._work_orders if wo.id == work_order_id), None)

    def get_work_center(self, work_center_id: str) -> WorkCenter | None:
        return next((wc for wc in self._work_centers if wc.id == work_center_id), None)

    def list_by_resource(self, work_center_id: str) -> list[WorkOrder]:
        """Work orders on a work center, in insertion order."""
        return [wo for wo in self._work_orders if wo.resource_id == work_center_id]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def check(self, data: WorkOrderData, exclude_id: str | None = None) -> DateRange:
        """
        Run every check ``create``/``update`` would run, without committing.

        Raises:
            ValidationError: If the record itself is invalid
            NotFoundError: If the work center does not exist
            ConflictError: If the range overlaps another work order
        """
        with self._lock:
            candidate = data.validate_record()
            if self.get_work_center(data.resource_id) is None:
                raise NotFoundError("WorkCenter", data.resource_id)
            self._validator.ensure_no_conflict(
                data.resource_id, candidate, self._work_orders, exclude_id
            )
            return candidate

    def create(self, data: WorkOrderData) -> WorkOrder:
        """Add a work order under a freshly generated id."""
        with self._lock:
            try:
                self.check(data)
            except ConflictError as e:
                self._log_rejection("create", data, e)
                raise

            work_order = WorkOrder.from_data(self._next_id(), data)
            work_orders = [*self._work_orders, work_order]
            self._persist(self._work_centers, work_orders)
            self._work_orders = work_orders

        logger.info(
            "Work order created",
            work_order_id=work_order.id,
            work_center_id=work_order.resource_id,
            start_date=work_order.start_date.isoformat(),
            end_date=work_order.end_date.isoformat(),
        )
        return work_order

    def update(self, work_order_id: str, data: WorkOrderData) -> WorkOrder:
        """
        Replace a work order's data wholesale.

        The work order's own current range is excluded from the overlap check.

        Raises:
            NotFoundError: If no work order has ``work_order_id``
        """
        with self._lock:
            if self.get(work_order_id) is None:
                raise NotFoundError("WorkOrder", work_order_id)
            try:
                self.check(data, exclude_id=work_order_id)
            except ConflictError as e:
                self._log_rejection("update", data, e, work_order_id)
                raise

            updated = WorkOrder.from_data(work_order_id, data)
            work_orders = [
                updated if wo.id == work_order_id else wo for wo in self._work_orders
            ]
            self._persist(self._work_centers, work_orders)
            self._work_orders = work_orders

        logger.info(
            "Work order updated",
            work_order_id=work_order_id,
            work_center_id=updated.resource_id,
            start_date=updated.start_date.isoformat(),
            end_date=updated.end_date.isoformat(),
        )
        return updated

    def delete(self, work_order_id: str) -> bool:
        """
        Remove a work order; unknown ids are a no-op.

        Returns:
            True if a work order was removed
        """
        with self._lock:
            work_orders = [wo for wo in self._work_orders if wo.id != work_order_id]
            removed = len(work_orders) != len(self._work_orders)
            self._persist(self._work_centers, work_orders)
            self._work_orders = work_orders

        logger.info("Work order deleted", work_order_id=work_order_id, removed=removed)
        return removed

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def reload(self) -> None:
        """Discard in-memory state and restore from storage (or reseed)."""
        with self._lock:
            self._load()

    def _load(self) -> None:
        restored = self._restore()
        if restored is None:
            work_centers = seed_work_centers()
            work_orders = seed_work_orders(calendar.normalize_date(self._clock()))
            self._persist(work_centers, work_orders)
            logger.info(
                "Board seeded",
                work_centers=len(work_centers),
                work_orders=len(work_orders),
            )
        else:
            work_centers, work_orders = restored
            logger.info(
                "Board restored",
                work_centers=len(work_centers),
                work_orders=len(work_orders),
            )
        self._work_centers = work_centers
        self._work_orders = work_orders

    def _restore(self) -> tuple[list[WorkCenter], list[WorkOrder]] | None:
        raw_centers = self._storage.get(RESOURCES_KEY)
        raw_orders = self._storage.get(ASSIGNMENTS_KEY)
        if raw_centers is None or raw_orders is None:
            logger.info(
                "Persisted board incomplete",
                has_resources=raw_centers is not None,
                has_assignments=raw_orders is not None,
            )
            return None

        try:
            work_centers = _work_centers_adapter.validate_json(raw_centers)
            work_orders = _work_orders_adapter.validate_json(raw_orders)
        except PydanticValidationError as e:
            logger.warning(
                "Persisted board is malformed, reseeding",
                error_count=e.error_count(),
                error=str(e),
            )
            return None

        problem = self._find_inconsistency(work_centers, work_orders)
        if problem is not None:
            logger.warning("Persisted board is inconsistent, reseeding", **problem)
            return None

        return work_centers, work_orders

    def _find_inconsistency(
        self, work_centers: list[WorkCenter], work_orders: list[WorkOrder]
    ) -> dict[str, str] | None:
        """First restored record that ``create`` would have refused, if any."""
        center_ids = {wc.id for wc in work_centers}
        accepted: list[WorkOrder] = []
        for work_order in work_orders:
            if work_order.resource_id not in center_ids:
                return {
                    "reason": "unknown_work_center",
                    "work_order_id": work_order.id,
                    "work_center_id": work_order.resource_id,
                }
            if any(wo.id == work_order.id for wo in accepted):
                return {"reason": "duplicate_id", "work_order_id": work_order.id}
            conflict = self._validator.find_conflict(
                work_order.resource_id, work_order.date_range, accepted
            )
            if conflict is not None:
                return {
                    "reason": "overlap",
                    "work_order_id": work_order.id,
                    "conflicting_id": conflict.id,
                }
            accepted.append(work_order)
        return None

    def _persist(
        self, work_centers: list[WorkCenter], work_orders: list[WorkOrder]
    ) -> None:
        self._storage.set(
            RESOURCES_KEY,
            _work_centers_adapter.dump_json(work_centers, by_alias=True).decode(),
        )
        self._storage.set(
            ASSIGNMENTS_KEY,
            _work_orders_adapter.dump_json(work_orders, by_alias=True).decode(),
        )

    def _next_id(self) -> str:
        existing = {wo.id for wo in self._work_orders}
        work_order_id = self._id_factory()
        while work_order_id in existing:
            work_order_id = self._id_factory()
        return work_order_id

    def _log_rejection(
        self,
        operation: str,
        data: WorkOrderData,
        error: ConflictError,
        work_order_id: str | None = None,
    ) -> None:
        logger.warning(
            "Work order rejected: overlap",
            operation=operation,
            work_order_id=work_order_id,
            work_center_id=data.resource_id,
            start_date=data.start_date.isoformat(),
            end_date=data.end_date.isoformat(),
            conflicting_id=error.conflicting_id,
        )
