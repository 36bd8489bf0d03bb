"""Civil-date helpers. Pure computation on datetime.date, no timezones.

The UTC offset is only ever text: it is appended to ISO strings and checked
for shape, but never applied to a date.
"""

import re
from datetime import date, datetime, timedelta

from .validation import InvalidArgument

DEFAULT_OFFSET = "-05:00"  # America/Bogota, no DST

# Sunday-based weekday numbers
SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)

_OFFSET_RE = re.compile(r"^(Z|[+-](?:[01]\d|2[0-3]):[0-5]\d)$")


def _as_date(d: date) -> date:
    return d.date() if isinstance(d, datetime) else d


def check_offset(offset: str) -> str:
    """Return offset unchanged if it looks like +hh:mm, -hh:mm or Z."""
    if not isinstance(offset, str) or not _OFFSET_RE.match(offset):
        raise InvalidArgument(f"Invalid UTC offset {offset!r}. Expected ±hh:mm")
    return offset


def iso_string(d: date, offset: str = DEFAULT_OFFSET) -> str:
    """Format d as YYYY-MM-DDT00:00:00.000±hh:mm.

    The year/month/day of d are used as-is; the offset is appended literally.
    """
    d = _as_date(d)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}T00:00:00.000{offset}"


def parse_iso_date(year: int, month: int, day: int, offset: str = DEFAULT_OFFSET) -> date:
    """Build the civil date year-month-day.

    The result's fields always equal the inputs, whatever the host timezone.
    """
    check_offset(offset)
    try:
        return date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Invalid date {year}-{month}-{day}: {e}") from e


def add_days(d: date, n: int) -> date:
    return _as_date(d) + timedelta(days=n)


def is_same_calendar_day(a: date, b: date) -> bool:
    """Same month and day of month. The year is not compared.

    Callers must pass two dates from the same target year.
    """
    return a.month == b.month and a.day == b.day


def day_of_week(d: date) -> int:
    """Weekday number with 0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7


def next_day_of_week(d: date, target_dow: int) -> date:
    """First date >= d that falls on target_dow (0=Sunday .. 6=Saturday).

    Returns d itself when it already is that weekday.
    """
    if isinstance(target_dow, bool) or not isinstance(target_dow, int) or not 0 <= target_dow <= 6:
        raise InvalidArgument(f"Invalid weekday {target_dow!r}. Expected 0 (Sunday) to 6 (Saturday)")
    d = _as_date(d)
    return add_days(d, (7 + target_dow - day_of_week(d)) % 7)
