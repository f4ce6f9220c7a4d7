"""
Calendar Arithmetic

Pure functions over local calendar dates. Nothing here carries a time of
day or a timezone: datetimes are normalized to their date before use.
Month-proportional helpers use a flat 30-day month on purpose; they size
bars, they do not do exact calendar math.
"""

from datetime import date, datetime, timedelta

DAYS_PER_WEEK = 7
DAYS_PER_MONTH_APPROX = 30

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

DateLike = date | datetime | str


def normalize_date(value: DateLike) -> date:
    """
    Coerce a date-like value to a plain calendar date.

    Accepts ``date``, ``datetime`` (time component dropped) or an ISO
    ``YYYY-MM-DD`` string.

    Raises:
        ValueError: If a string is not a valid ISO calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value)
    raise TypeError(f"Expected date, datetime or ISO string, got {type(value)}")


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` string."""
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(f"Invalid ISO date '{value}'") from e


def to_iso_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def today() -> date:
    """Today's local calendar date."""
    return date.today()


# -----------------------------------------------------------------------------
# Arithmetic
# -----------------------------------------------------------------------------


def add_days(value: date, days: int) -> date:
    """Shift a date by ``days`` (may be negative)."""
    return value + timedelta(days=days)


def add_months(value: date, months: int) -> date:
    """First day of the month ``months`` away from ``value``'s month."""
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end``; positive if ``end`` is later."""
    return (end - start).days


def months_between(start: date, end: date) -> float:
    """
    Fractional months from ``start`` to ``end``.

    Whole calendar months plus ``(end.day - 1) / 30``. Intended for a
    ``start`` anchored at the first of a month. The 31st counts as the
    30th so a date never reaches into the following month's column.
    """
    day_offset = min(end.day, DAYS_PER_MONTH_APPROX) - 1
    return (
        (end.year - start.year) * 12
        + (end.month - start.month)
        + day_offset / DAYS_PER_MONTH_APPROX
    )


def month_index_between(start: date, end: date) -> int:
    """Whole calendar-month difference, ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def week_start(value: date) -> date:
    """The Monday on or before ``value`` (Sunday belongs to the prior week)."""
    return value - timedelta(days=value.weekday())


def month_start(value: date) -> date:
    """First day of ``value``'s month."""
    return value.replace(day=1)


# -----------------------------------------------------------------------------
# Comparison
# -----------------------------------------------------------------------------


def is_same_day(first: date, second: date) -> bool:
    return first == second


def is_same_month(first: date, second: date) -> bool:
    return first.year == second.year and first.month == second.month


def is_in_week(value: date, start_of_week: date) -> bool:
    """True if ``value`` falls within the 7 days starting at ``start_of_week``."""
    return start_of_week <= value <= add_days(start_of_week, DAYS_PER_WEEK - 1)


# -----------------------------------------------------------------------------
# Labels and display formats
# -----------------------------------------------------------------------------


def format_day_label(value: date) -> str:
    """Day column label, e.g. ``Jan 5``."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}"


def format_week_label(start: date) -> str:
    """Week column label, e.g. ``Jan 5 - Jan 11``."""
    end = add_days(start, DAYS_PER_WEEK - 1)
    return f"{format_day_label(start)} - {format_day_label(end)}"


def format_month_label(value: date) -> str:
    """Month column label, e.g. ``Jan 2026``."""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.year}"


def format_for_display(value: DateLike) -> str:
    """Form display format ``MM.DD.YYYY``."""
    d = normalize_date(value)
    return f"{d.month:02d}.{d.day:02d}.{d.year}"


def parse_display_date(value: str) -> date | None:
    """
    Parse the ``MM.DD.YYYY`` display format.

    Returns None for anything that is not three dot-separated numbers
    forming a real calendar date.
    """
    parts = value.strip().split(".") if value else []
    if len(parts) != 3:
        return None
    try:
        month, day, year = (int(part) for part in parts)
        return date(year, month, day)
    except ValueError:
        return None
