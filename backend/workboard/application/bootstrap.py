"""Wire the engine, validator, store and service from settings."""

from collections.abc import Callable
from datetime import date

from workboard.application.services.work_order_service import WorkOrderService
from workboard.application.services.work_order_store import WorkOrderStore
from workboard.core.config import Settings
from workboard.domain.board.services.overlap_validator import OverlapValidator
from workboard.domain.board.services.timescale_engine import TimescaleEngine
from workboard.domain.board.value_objects import BoundaryRule, Granularity, calendar
from workboard.domain.shared.base import KeyValueStore
from workboard.infrastructure.persistence import build_key_value_store


def build_engine(
    config: Settings, clock: Callable[[], date] = calendar.today
) -> TimescaleEngine:
    return TimescaleEngine(
        Granularity(config.DEFAULT_GRANULARITY),
        initial_columns=config.INITIAL_COLUMNS,
        expansion_buffer=config.EXPANSION_BUFFER,
        column_width=config.COLUMN_WIDTH,
        column_width_overrides=config.COLUMN_WIDTH_OVERRIDES,
        min_bar_width=config.MIN_BAR_WIDTH,
        clock=clock,
    )


def build_store(
    config: Settings,
    storage: KeyValueStore | None = None,
    clock: Callable[[], date] = calendar.today,
) -> WorkOrderStore:
    """Build the store; ``storage`` defaults to the configured backend."""
    return WorkOrderStore(
        storage if storage is not None else build_key_value_store(config),
        OverlapValidator(BoundaryRule(config.OVERLAP_BOUNDARY)),
        clock=clock,
    )


def build_service(store: WorkOrderStore) -> WorkOrderService:
    return WorkOrderService(store)
