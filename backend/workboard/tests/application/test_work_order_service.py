"""Tests for the form-facing work order service and the board queries."""

from datetime import date

import pytest

from workboard.application.bootstrap import build_engine, build_store
from workboard.application.dtos.board_dtos import WorkOrderForm
from workboard.application.queries.board_queries import (
    build_timeline,
    build_work_center_rows,
)
from workboard.application.services.work_order_service import WorkOrderService
from workboard.core.config import Settings
from workboard.domain.board.value_objects import BoundaryRule, Granularity, WorkOrderStatus


def make_form(start: date, end: date, resource_id: str = "wc-001", name: str = "Order") -> WorkOrderForm:
    return WorkOrderForm(
        name=name, resource_id=resource_id, start_date=start, end_date=end
    )


@pytest.fixture
def service(store) -> WorkOrderService:
    return WorkOrderService(store)


class TestWorkOrderService:
    """Test the {success, error} form boundary."""

    def test_create_success(self, service):
        """Test a valid form is saved and echoed back."""
        result = service.create(make_form(date(2025, 1, 10), date(2025, 1, 20)))

        assert result.success
        assert result.error is None
        assert result.work_order.id == "wo-test-001"
        assert result.work_order.status == WorkOrderStatus.OPEN
        assert result.work_order.status_label == "Open"

    def test_create_conflict_reports_message(self, service):
        """Test a conflict becomes an error message instead of an exception."""
        service.create(make_form(date(2025, 1, 10), date(2025, 1, 20), name="Existing"))

        result = service.create(make_form(date(2025, 1, 15), date(2025, 1, 18)))

        assert not result.success
        assert result.error_type == "resource_conflict"
        assert result.error == 'This time period overlaps with "Existing" (2025-01-10 - 2025-01-20)'
        assert result.work_order is None

    def test_validation_error_reported(self, service):
        """Test an inverted range is reported as a validation error."""
        result = service.create(make_form(date(2025, 1, 20), date(2025, 1, 10)))

        assert not result.success
        assert result.error_type == "validation"
        assert result.error == "End date must be after start date"

    def test_check_matches_commit(self, service):
        """Test the pre-submit check and the commit agree on every case."""
        service.create(make_form(date(2025, 1, 10), date(2025, 1, 20)))
        cases = [
            (date(2025, 1, 20), date(2025, 1, 25)),
            (date(2025, 1, 5), date(2025, 1, 10)),
            (date(2025, 1, 15), date(2025, 1, 18)),
            (date(2025, 1, 1), date(2025, 1, 31)),
        ]

        for start, end in cases:
            form = make_form(start, end)
            checked = service.check(form)
            committed = service.create(form)
            assert checked.success == committed.success
            if committed.success:
                service.delete(committed.work_order.id)

    def test_check_excludes_edited_order(self, service):
        """Test checking an edit does not collide with the order itself."""
        created = service.create(make_form(date(2025, 1, 10), date(2025, 1, 20)))

        result = service.check(
            make_form(date(2025, 1, 12), date(2025, 1, 22)), exclude_id=created.work_order.id
        )

        assert result.success
        assert result.work_order is None

    def test_update_unknown_reports_not_found(self, service):
        """Test updating a missing work order is reported."""
        result = service.update("wo-missing", make_form(date(2025, 1, 10), date(2025, 1, 20)))

        assert not result.success
        assert result.error_type == "not_found"

    def test_delete_always_succeeds(self, service):
        """Test deleting is idempotent at the form boundary."""
        assert service.delete("wo-missing").success

    def test_form_accepts_camel_case(self):
        """Test the form parses the camelCase record."""
        form = WorkOrderForm.model_validate(
            {
                "name": "Order",
                "resourceId": "wc-002",
                "status": "in-progress",
                "startDate": "2025-01-10",
                "endDate": "2025-01-20",
            }
        )

        data = form.to_data()
        assert data.resource_id == "wc-002"
        assert data.status == WorkOrderStatus.IN_PROGRESS


class TestBoardQueries:
    """Test the renderer-facing read models."""

    def test_timeline_snapshot(self, engine):
        """Test the timeline response mirrors the engine."""
        timeline = build_timeline(engine)

        assert timeline.granularity == Granularity.MONTH
        assert timeline.total_columns == 12
        assert timeline.total_width == 1200
        assert timeline.columns[6].is_current_period
        assert timeline.view_start == date(2024, 7, 1)

    def test_work_center_rows_place_bars(self, store, engine):
        """Test rows carry positioned bars for their own work orders."""
        store.create(make_form(date(2025, 1, 1), date(2025, 1, 30)).to_data())

        rows = build_work_center_rows(store, engine)

        assert [row.id for row in rows] == ["wc-001", "wc-002", "wc-003", "wc-004", "wc-005"]
        bar = rows[0].work_orders[0]
        assert bar.left == pytest.approx(600)
        assert bar.width == pytest.approx(100)
        assert rows[1].work_orders == []


class TestBootstrap:
    """Test wiring from settings."""

    def test_build_engine_from_settings(self, clock):
        """Test engine settings are applied."""
        config = Settings(DEFAULT_GRANULARITY="week", INITIAL_COLUMNS=8, COLUMN_WIDTH=50)

        engine = build_engine(config, clock)

        assert engine.granularity == Granularity.WEEK
        assert engine.total_columns() == 8
        assert engine.column_width() == 50

    def test_build_store_uses_boundary_setting(self, board_storage, clock):
        """Test the overlap boundary policy reaches the store's validator."""
        store = build_store(Settings(OVERLAP_BOUNDARY="inclusive"), board_storage, clock)

        assert store.validator.rule == BoundaryRule.INCLUSIVE

    def test_build_store_memory_backend(self, clock):
        """Test the memory backend starts from the seed."""
        store = build_store(Settings(STORAGE_BACKEND="memory"), clock=clock)

        assert len(store.work_orders) == 8
