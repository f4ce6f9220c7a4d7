"""
Unit Tests for Calendar Arithmetic

Covers date shifting, unit differences, week/month anchoring, the
current-period predicates and the label and display formats.
"""

from datetime import date, datetime

import pytest

from workboard.domain.board.value_objects import calendar


class TestNormalization:
    """Test coercion of date-like values."""

    def test_date_passes_through(self):
        """Test a plain date is returned unchanged."""
        assert calendar.normalize_date(date(2025, 1, 15)) == date(2025, 1, 15)

    def test_datetime_drops_time(self):
        """Test a datetime is truncated to its calendar date."""
        assert calendar.normalize_date(datetime(2025, 1, 15, 23, 59)) == date(2025, 1, 15)

    def test_iso_string_is_parsed(self):
        """Test an ISO string is parsed."""
        assert calendar.normalize_date("2025-01-15") == date(2025, 1, 15)

    def test_invalid_iso_string_fails(self):
        """Test a malformed ISO string is rejected."""
        with pytest.raises(ValueError, match="Invalid ISO date"):
            calendar.parse_iso_date("2025-13-01")

    def test_unsupported_type_fails(self):
        """Test non date-like values are rejected."""
        with pytest.raises(TypeError):
            calendar.normalize_date(20250115)  # type: ignore[arg-type]

    def test_iso_round_trip(self):
        """Test ISO formatting matches the persisted layout."""
        assert calendar.to_iso_date(date(2025, 3, 7)) == "2025-03-07"


class TestArithmetic:
    """Test date shifting and unit differences."""

    def test_add_days_forward_and_back(self):
        """Test adding positive and negative day counts."""
        assert calendar.add_days(date(2025, 1, 30), 3) == date(2025, 2, 2)
        assert calendar.add_days(date(2025, 1, 1), -1) == date(2024, 12, 31)

    def test_add_months_anchors_on_first(self):
        """Test month steps land on the first of the target month."""
        assert calendar.add_months(date(2025, 1, 31), 1) == date(2025, 2, 1)
        assert calendar.add_months(date(2025, 1, 15), -6) == date(2024, 7, 1)
        assert calendar.add_months(date(2024, 12, 1), 13) == date(2026, 1, 1)

    def test_days_between_sign(self):
        """Test day difference is positive when the end is later."""
        assert calendar.days_between(date(2025, 1, 10), date(2025, 1, 20)) == 10
        assert calendar.days_between(date(2025, 1, 20), date(2025, 1, 10)) == -10

    def test_months_between_whole_months(self):
        """Test whole months between month starts."""
        assert calendar.months_between(date(2024, 7, 1), date(2025, 1, 1)) == 6

    def test_months_between_fraction_uses_thirty_day_month(self):
        """Test the fractional part is (day - 1) / 30."""
        assert calendar.months_between(date(2025, 1, 1), date(2025, 1, 16)) == pytest.approx(0.5)

    def test_months_between_caps_day_31(self):
        """Test the 31st stays inside its own month."""
        assert calendar.months_between(date(2025, 1, 1), date(2025, 1, 31)) == pytest.approx(29 / 30)

    def test_months_between_negative(self):
        """Test dates before the start give negative months."""
        assert calendar.months_between(date(2025, 3, 1), date(2025, 1, 1)) == -2

    def test_month_index_between_ignores_day(self):
        """Test calendar-month difference ignores the day of month."""
        assert calendar.month_index_between(date(2024, 7, 31), date(2025, 6, 1)) == 11


class TestWeekAndMonthAnchors:
    """Test week start and month start anchoring."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (date(2025, 1, 13), date(2025, 1, 13)),  # Monday
            (date(2025, 1, 15), date(2025, 1, 13)),  # Wednesday
            (date(2025, 1, 19), date(2025, 1, 13)),  # Sunday
            (date(2025, 1, 1), date(2024, 12, 30)),  # crosses the year
        ],
    )
    def test_week_start_is_monday(self, value, expected):
        """Test week start is the Monday on or before the date."""
        assert calendar.week_start(value) == expected

    def test_month_start(self):
        """Test month start is the first of the month."""
        assert calendar.month_start(date(2025, 2, 28)) == date(2025, 2, 1)


class TestPredicates:
    """Test current-period predicates."""

    def test_is_same_day(self):
        """Test same-day comparison."""
        assert calendar.is_same_day(date(2025, 1, 15), date(2025, 1, 15))
        assert not calendar.is_same_day(date(2025, 1, 15), date(2025, 1, 16))

    def test_is_same_month_requires_same_year(self):
        """Test same month in a different year is not the same month."""
        assert calendar.is_same_month(date(2025, 1, 1), date(2025, 1, 31))
        assert not calendar.is_same_month(date(2025, 1, 1), date(2024, 1, 1))

    def test_is_in_week_bounds(self):
        """Test week membership includes both ends of the 7-day span."""
        start = date(2025, 1, 13)
        assert calendar.is_in_week(date(2025, 1, 13), start)
        assert calendar.is_in_week(date(2025, 1, 19), start)
        assert not calendar.is_in_week(date(2025, 1, 20), start)
        assert not calendar.is_in_week(date(2025, 1, 12), start)


class TestLabels:
    """Test column labels and the display format."""

    def test_day_label(self):
        """Test day labels have no zero padding."""
        assert calendar.format_day_label(date(2026, 1, 5)) == "Jan 5"

    def test_week_label_spans_seven_days(self):
        """Test week labels show start and start + 6 days."""
        assert calendar.format_week_label(date(2025, 1, 27)) == "Jan 27 - Feb 2"

    def test_month_label(self):
        """Test month labels show abbreviation and year."""
        assert calendar.format_month_label(date(2026, 1, 1)) == "Jan 2026"
        assert calendar.format_month_label(date(2025, 9, 30)) == "Sep 2025"

    def test_display_format(self):
        """Test the MM.DD.YYYY display format."""
        assert calendar.format_for_display(date(2025, 1, 5)) == "01.05.2025"

    def test_parse_display_date(self):
        """Test parsing the display format."""
        assert calendar.parse_display_date("01.05.2025") == date(2025, 1, 5)

    @pytest.mark.parametrize("value", ["", "2025-01-05", "13.01.2025", "02.30.2025", "a.b.c"])
    def test_parse_display_date_rejects_invalid(self, value):
        """Test invalid display strings parse to None."""
        assert calendar.parse_display_date(value) is None
