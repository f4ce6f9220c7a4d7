"""
Timescale Engine

Owns the current granularity and the materialized view window of the
timeline, generates its columns, and maps calendar dates to horizontal
pixel offsets and back. The window only grows (``expand_past`` /
``expand_future``) until a granularity change or ``center_on_today``
resets it around today.
"""

import math
import threading
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date

from ....core.observability import get_logger
from ...shared.base import DomainService
from ...shared.exceptions import ValidationError
from ..value_objects import calendar
from ..value_objects.calendar import DateLike, normalize_date
from ..value_objects.column import Column
from ..value_objects.enums import Granularity

logger = get_logger(__name__)

DEFAULT_INITIAL_COLUMNS = 12
DEFAULT_EXPANSION_BUFFER = 6
DEFAULT_COLUMN_WIDTH = 100
DEFAULT_MIN_BAR_WIDTH = 80


@dataclass(frozen=True)
class TimescaleState:
    """Snapshot of the engine's granularity and view window."""

    granularity: Granularity
    view_start: date
    view_end: date


class TimescaleEngine(DomainService):
    """
    Date-range bookkeeping and date/pixel coordinate mapping for the board.

    Positions are measured in the unit of the current granularity: exact
    days in day view, fractional 7-day weeks in week view, and fractional
    months (see ``calendar.months_between``) in month view. Nothing is
    clamped to the rendered window; callers decide when to expand.
    """

    def __init__(
        self,
        granularity: Granularity | str = Granularity.MONTH,
        *,
        initial_columns: int = DEFAULT_INITIAL_COLUMNS,
        expansion_buffer: int = DEFAULT_EXPANSION_BUFFER,
        column_width: int = DEFAULT_COLUMN_WIDTH,
        column_width_overrides: Mapping[Granularity | str, int] | None = None,
        min_bar_width: int = DEFAULT_MIN_BAR_WIDTH,
        clock: Callable[[], date] = calendar.today,
    ) -> None:
        """
        Initialize the engine centered on today.

        Args:
            granularity: Initial timescale
            initial_columns: Columns in a freshly centered window
            expansion_buffer: Units added per expand call
            column_width: Pixel width of one column
            column_width_overrides: Optional per-granularity widths
            min_bar_width: Floor for computed bar widths in pixels
            clock: Source of "today"

        Raises:
            ValueError: If a size parameter is out of range
        """
        if initial_columns < 1:
            raise ValueError(f"initial_columns must be at least 1, got {initial_columns}")
        if expansion_buffer < 0:
            raise ValueError(f"expansion_buffer cannot be negative, got {expansion_buffer}")
        if column_width <= 0:
            raise ValueError(f"column_width must be positive, got {column_width}")

        self._initial_columns = initial_columns
        self._expansion_buffer = expansion_buffer
        self._column_width = column_width
        self._column_width_overrides = {
            Granularity(key): width
            for key, width in (column_width_overrides or {}).items()
        }
        self._min_bar_width = min_bar_width
        self._clock = clock
        self._lock = threading.RLock()

        self._granularity = Granularity(granularity)
        self._view_start = self._today()
        self._view_end = self._view_start
        self.center_on_today()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def granularity(self) -> Granularity:
        return self._granularity

    @property
    def view_start(self) -> date:
        return self._view_start

    @property
    def view_end(self) -> date:
        return self._view_end

    @property
    def state(self) -> TimescaleState:
        with self._lock:
            return TimescaleState(self._granularity, self._view_start, self._view_end)

    @property
    def expansion_buffer(self) -> int:
        return self._expansion_buffer

    def set_granularity(self, granularity: Granularity | str) -> None:
        """Switch timescale; the current window is discarded and re-centered."""
        with self._lock:
            previous = self._granularity
            self._granularity = Granularity(granularity)
            self.center_on_today()

        logger.info(
            "Timescale changed",
            previous=previous.value,
            granularity=self._granularity.value,
            view_start=self._view_start.isoformat(),
            view_end=self._view_end.isoformat(),
        )

    def center_on_today(self) -> None:
        """
        Reset the window to ``initial_columns`` units with today's unit in the middle.

        Today's column lands at index ``initial_columns // 2``.
        """
        with self._lock:
            today = self._today()
            offset = self._initial_columns // 2

            if self._granularity == Granularity.DAY:
                anchor = today
            elif self._granularity == Granularity.WEEK:
                anchor = calendar.week_start(today)
            else:
                anchor = calendar.month_start(today)

            self._view_start = self._step(anchor, -offset)
            self._view_end = self._step(self._view_start, self._initial_columns - 1)

    # -------------------------------------------------------------------------
    # Columns
    # -------------------------------------------------------------------------

    def column_width(self) -> int:
        """Pixel width of one column at the current granularity."""
        return self._column_width_overrides.get(self._granularity, self._column_width)

    def total_columns(self) -> int:
        """Number of discrete units between view start and view end, inclusive."""
        with self._lock:
            start, end = self._view_start, self._view_end
            if self._granularity == Granularity.DAY:
                return calendar.days_between(start, end) + 1
            if self._granularity == Granularity.WEEK:
                return math.ceil(calendar.days_between(start, end) / calendar.DAYS_PER_WEEK) + 1
            return calendar.month_index_between(start, end) + 1

    def total_width(self) -> int:
        """Pixel width of the whole materialized window."""
        return self.total_columns() * self.column_width()

    def generate_columns(self) -> Iterator[Column]:
        """
        Yield ``total_columns()`` columns starting at view start.

        "Today" and the window are captured when this is called, not when the
        iterator is consumed. The returned iterator is single-use.
        """
        with self._lock:
            current = self._today()
            granularity = self._granularity
            start = self._view_start
            count = self.total_columns()
        return self._iter_columns(granularity, start, count, current)

    @property
    def columns(self) -> list[Column]:
        """Materialized column list for the current window."""
        return list(self.generate_columns())

    def _iter_columns(
        self, granularity: Granularity, start: date, count: int, current: date
    ) -> Iterator[Column]:
        for index in range(count):
            anchor = self._step(start, index, granularity)
            if granularity == Granularity.DAY:
                yield Column(
                    anchor,
                    calendar.format_day_label(anchor),
                    calendar.is_same_day(anchor, current),
                )
            elif granularity == Granularity.WEEK:
                yield Column(
                    anchor,
                    calendar.format_week_label(anchor),
                    calendar.is_in_week(current, anchor),
                )
            else:
                yield Column(
                    anchor,
                    calendar.format_month_label(anchor),
                    calendar.is_same_month(anchor, current),
                )

    # -------------------------------------------------------------------------
    # Coordinate mapping
    # -------------------------------------------------------------------------

    def calculate_bar_left(self, start_date: DateLike) -> float:
        """
        Pixel offset of ``start_date`` from the left edge of the window.

        May be negative or beyond ``total_width()`` when the date is outside
        the window.
        """
        target = normalize_date(start_date)
        with self._lock:
            if self._granularity == Granularity.DAY:
                units = calendar.days_between(self._view_start, target)
            elif self._granularity == Granularity.WEEK:
                units = calendar.days_between(self._view_start, target) / calendar.DAYS_PER_WEEK
            else:
                units = calendar.months_between(self._view_start, target)
            return units * self.column_width()

    def calculate_bar_width(self, start_date: DateLike, end_date: DateLike) -> float:
        """
        Pixel width of a bar spanning ``start_date`` through ``end_date``.

        The end date is inclusive, so a one-day work order is a full day
        column wide. Month view divides the day span by 30 instead of using
        ``months_between``. The result is never below the minimum bar width.
        """
        start = normalize_date(start_date)
        end = normalize_date(end_date)
        span_days = calendar.days_between(start, end) + 1

        if self._granularity == Granularity.DAY:
            units = float(span_days)
        elif self._granularity == Granularity.WEEK:
            units = span_days / calendar.DAYS_PER_WEEK
        else:
            units = span_days / calendar.DAYS_PER_MONTH_APPROX

        return max(units * self.column_width(), float(self._min_bar_width))

    def get_date_from_position(self, offset_x: float) -> date:
        """
        Anchor date of the column under ``offset_x``.

        Sub-column offsets snap down to the column start.

        Raises:
            ValidationError: If the offset is not finite or lands outside
                the representable calendar
        """
        with self._lock:
            try:
                column_index = math.floor(offset_x / self.column_width())
                return self._step(self._view_start, column_index)
            except (OverflowError, ValueError) as e:
                raise ValidationError(
                    "offset_x",
                    offset_x,
                    "Position is outside the supported date range",
                    "OFFSET_OUT_OF_RANGE",
                ) from e

    def get_today_indicator_position(self) -> float:
        """Pixel offset of today; may fall outside the rendered width."""
        return self.calculate_bar_left(self._today())

    # -------------------------------------------------------------------------
    # Window expansion
    # -------------------------------------------------------------------------

    def expand_past(self) -> int:
        """
        Move view start back by the expansion buffer.

        Returns:
            Number of columns prepended, 0 once the earliest date is
            reached; see ``scroll_compensation``
        """
        with self._lock:
            added = self._expansion_buffer
            try:
                self._view_start = self._step(self._view_start, -added)
            except (OverflowError, ValueError):
                logger.warning(
                    "Timeline cannot expand further into the past",
                    granularity=self._granularity.value,
                    view_start=self._view_start.isoformat(),
                )
                return 0

        logger.debug(
            "Timeline expanded into the past",
            granularity=self._granularity.value,
            added=added,
            view_start=self._view_start.isoformat(),
        )
        return added

    def expand_future(self) -> int:
        """
        Move view end forward by the expansion buffer.

        Returns:
            Number of columns appended, 0 once the latest date is reached
        """
        with self._lock:
            added = self._expansion_buffer
            try:
                self._view_end = self._step(self._view_end, added)
            except (OverflowError, ValueError):
                logger.warning(
                    "Timeline cannot expand further into the future",
                    granularity=self._granularity.value,
                    view_end=self._view_end.isoformat(),
                )
                return 0

        logger.debug(
            "Timeline expanded into the future",
            granularity=self._granularity.value,
            added=added,
            view_end=self._view_end.isoformat(),
        )
        return added

    def scroll_compensation(self, columns_added: int) -> int:
        """Horizontal scroll shift that keeps content still after prepending columns."""
        return columns_added * self.column_width()

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _today(self) -> date:
        return normalize_date(self._clock())

    def _step(self, base: date, units: int, granularity: Granularity | None = None) -> date:
        granularity = granularity or self._granularity
        if granularity == Granularity.DAY:
            return calendar.add_days(base, units)
        if granularity == Granularity.WEEK:
            return calendar.add_days(base, units * calendar.DAYS_PER_WEEK)
        return calendar.add_months(base, units)
