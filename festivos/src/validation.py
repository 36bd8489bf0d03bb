"""Input guards for years and dates.

Ley 51 de 1983 moved most Colombian holidays to the following Monday, so
only years after 1983 follow the rules implemented here.
"""

import numbers
from datetime import date, datetime

MIN_YEAR_EXCLUSIVE = 1983


class InvalidArgument(ValueError):
    """Raised for a year or date the holiday rules cannot be applied to."""


def validate_year(value) -> int:
    """Coerce value to an int year > 1983, or raise InvalidArgument."""
    if isinstance(value, bool):
        raise InvalidArgument(f"Invalid year {value!r}. Should be an integer > {MIN_YEAR_EXCLUSIVE}")
    if isinstance(value, numbers.Integral):
        # numpy integers from pandas columns included
        year = int(value)
    elif isinstance(value, float) and value.is_integer():
        year = int(value)
    elif isinstance(value, str):
        try:
            year = int(value.strip())
        except ValueError:
            raise InvalidArgument(
                f"Invalid year {value!r}. Should be an integer > {MIN_YEAR_EXCLUSIVE}"
            ) from None
    else:
        raise InvalidArgument(f"Invalid year {value!r}. Should be an integer > {MIN_YEAR_EXCLUSIVE}")

    if year <= MIN_YEAR_EXCLUSIVE:
        raise InvalidArgument(f"Invalid year {year}. Should be an integer > {MIN_YEAR_EXCLUSIVE}")
    return year


def validate_date(value) -> bool:
    """True if value is a date whose year passes validate_year.

    Strings and numeric timestamps are not dates and give False. A date with
    a year <= 1983 raises InvalidArgument from validate_year.
    """
    if not isinstance(value, date):
        return False
    if isinstance(value, datetime):
        value = value.date()
    validate_year(value.year)
    return True
