import pytest
from fastapi.testclient import TestClient

from workboard.core.config import Settings, settings
from workboard.infrastructure.persistence import InMemoryKeyValueStore
from workboard.main import create_app

TIMELINE = f"{settings.API_V1_STR}/timeline"


def test_health(client: TestClient) -> None:
    response = client.get(f"{settings.API_V1_STR}/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["work_centers"] == 5
    assert body["work_orders"] == 0


def test_health_reports_injected_settings(board_storage: InMemoryKeyValueStore, clock) -> None:
    config = Settings(
        PROJECT_NAME="Plant 7 Board",
        ENVIRONMENT="staging",
        STORAGE_BACKEND="memory",
        LOG_LEVEL="WARNING",
    )
    app = create_app(config, storage=board_storage, clock=clock)

    with TestClient(app) as c:
        body = c.get(f"{settings.API_V1_STR}/health").json()

    assert body["service"] == "Plant 7 Board"
    assert body["environment"] == "staging"


def test_correlation_id_echoed(client: TestClient) -> None:
    response = client.get(TIMELINE, headers={"X-Correlation-ID": "req-123"})

    assert response.headers["X-Correlation-ID"] == "req-123"


def test_get_timeline(client: TestClient) -> None:
    response = client.get(TIMELINE)

    assert response.status_code == 200
    body = response.json()
    assert body["granularity"] == "month"
    assert body["viewStart"] == "2024-07-01"
    assert body["viewEnd"] == "2025-06-01"
    assert body["columnWidth"] == 100
    assert body["totalColumns"] == 12
    assert body["totalWidth"] == 1200
    assert len(body["columns"]) == 12
    assert body["columns"][6] == {
        "date": "2025-01-01",
        "label": "Jan 2025",
        "isCurrentPeriod": True,
    }


def test_set_granularity(client: TestClient) -> None:
    response = client.put(f"{TIMELINE}/granularity", json={"granularity": "day"})

    assert response.status_code == 200
    body = response.json()
    assert body["granularity"] == "day"
    assert body["viewStart"] == "2025-01-09"
    assert body["columns"][6]["label"] == "Jan 15"
    assert body["todayPosition"] == 600


def test_set_unknown_granularity(client: TestClient) -> None:
    response = client.put(f"{TIMELINE}/granularity", json={"granularity": "year"})

    assert response.status_code == 422


def test_expand_past_and_today(client: TestClient) -> None:
    response = client.post(f"{TIMELINE}/expand/past")

    assert response.status_code == 200
    body = response.json()
    assert body["added"] == 6
    assert body["scrollCompensation"] == 600
    assert body["viewStart"] == "2024-01-01"
    assert client.get(TIMELINE).json()["totalColumns"] == 18

    response = client.post(f"{TIMELINE}/today")

    assert response.json()["viewStart"] == "2024-07-01"
    assert response.json()["totalColumns"] == 12


def test_expand_future(client: TestClient) -> None:
    response = client.post(f"{TIMELINE}/expand/future")

    body = response.json()
    assert body["added"] == 6
    assert body["scrollCompensation"] == 0
    assert body["viewEnd"] == "2025-12-01"


def test_expand_unknown_direction(client: TestClient) -> None:
    response = client.post(f"{TIMELINE}/expand/sideways")

    assert response.status_code == 422


def test_date_at_position(client: TestClient) -> None:
    client.put(f"{TIMELINE}/granularity", json={"granularity": "day"})

    response = client.get(f"{TIMELINE}/date-at", params={"offset_x": 650})

    assert response.status_code == 200
    assert response.json() == {
        "offsetX": 650,
        "date": "2025-01-15",
        "displayDate": "01.15.2025",
    }


def test_date_at_position_requires_offset(client: TestClient) -> None:
    response = client.get(f"{TIMELINE}/date-at")

    assert response.status_code == 422


@pytest.mark.parametrize("offset_x", ["inf", "-inf", "nan"])
def test_date_at_position_rejects_non_finite(client: TestClient, offset_x: str) -> None:
    response = client.get(f"{TIMELINE}/date-at", params={"offset_x": offset_x})

    assert response.status_code == 422


@pytest.mark.parametrize("offset_x", [1e9, -1e9])
def test_date_at_position_outside_calendar(client: TestClient, offset_x: float) -> None:
    response = client.get(f"{TIMELINE}/date-at", params={"offset_x": offset_x})

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["field"] == "offset_x"
    assert detail["error_code"] == "OFFSET_OUT_OF_RANGE"
