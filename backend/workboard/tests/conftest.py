import itertools
import json
from collections.abc import Callable, Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from workboard.application.services.work_order_store import (
    ASSIGNMENTS_KEY,
    RESOURCES_KEY,
    WorkOrderStore,
)
from workboard.core.config import Settings
from workboard.data import seed_work_centers
from workboard.domain.board.services.timescale_engine import TimescaleEngine
from workboard.infrastructure.persistence import InMemoryKeyValueStore
from workboard.main import create_app

# Wednesday
FIXED_TODAY = date(2025, 1, 15)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def clock(today: date) -> Callable[[], date]:
    return lambda: today


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Deterministic work order ids: wo-test-001, wo-test-002, ..."""
    counter = itertools.count(1)
    return lambda: f"wo-test-{next(counter):03d}"


@pytest.fixture
def memory_storage() -> InMemoryKeyValueStore:
    """Empty storage; a store built on it seeds the sample board."""
    return InMemoryKeyValueStore()


@pytest.fixture
def board_storage() -> InMemoryKeyValueStore:
    """Storage holding the five sample work centers and no work orders."""
    storage = InMemoryKeyValueStore()
    centers = [wc.model_dump(mode="json") for wc in seed_work_centers()]
    storage.set(RESOURCES_KEY, json.dumps(centers))
    storage.set(ASSIGNMENTS_KEY, "[]")
    return storage


@pytest.fixture
def store(
    board_storage: InMemoryKeyValueStore,
    clock: Callable[[], date],
    id_factory: Callable[[], str],
) -> WorkOrderStore:
    """Store with the sample work centers and an empty schedule."""
    return WorkOrderStore(board_storage, clock=clock, id_factory=id_factory)


@pytest.fixture
def seeded_store(
    memory_storage: InMemoryKeyValueStore, clock: Callable[[], date]
) -> WorkOrderStore:
    """Store seeded with the sample board."""
    return WorkOrderStore(memory_storage, clock=clock)


@pytest.fixture
def engine(clock: Callable[[], date]) -> TimescaleEngine:
    """Month-view engine centered on the fixed day."""
    return TimescaleEngine(clock=clock)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(STORAGE_BACKEND="memory", LOG_FORMAT="console", LOG_LEVEL="WARNING")


@pytest.fixture
def client(
    test_settings: Settings,
    board_storage: InMemoryKeyValueStore,
    clock: Callable[[], date],
) -> Generator[TestClient, None, None]:
    app = create_app(test_settings, storage=board_storage, clock=clock)
    with TestClient(app) as c:
        yield c
