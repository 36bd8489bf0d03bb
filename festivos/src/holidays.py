"""Colombian public holidays.

Three kinds of holiday (Ley 51 de 1983):
  1. Fixed date: always on the same day, e.g. 25 December.
  2. Next Monday: observed on the Monday on or after the nominal date,
     e.g. 6 January. If the nominal date is a Monday it stays there.
  3. Easter-relative: a fixed number of days from Easter Sunday.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum
from typing import ClassVar

from .dates import DEFAULT_OFFSET, MONDAY, add_days, is_same_calendar_day, iso_string, next_day_of_week, parse_iso_date
from .easter import easter_sunday
from .validation import InvalidArgument, validate_date, validate_year


class HolidayType(IntEnum):
    FIXED = 1
    NEXT_MONDAY = 2
    EASTER = 3


@dataclass(frozen=True)
class FixedDate:
    month: int
    day: int
    kind: ClassVar[HolidayType] = HolidayType.FIXED


@dataclass(frozen=True)
class NextMonday:
    month: int
    day: int
    kind: ClassVar[HolidayType] = HolidayType.NEXT_MONDAY


@dataclass(frozen=True)
class EasterOffset:
    offset_days: int
    kind: ClassVar[HolidayType] = HolidayType.EASTER


Rule = FixedDate | NextMonday | EasterOffset


@dataclass(frozen=True)
class HolidayDefinition:
    name: str
    rule: Rule


@dataclass(frozen=True)
class ResolvedHoliday:
    date: date
    kind: HolidayType
    name: str

    def as_dict(self, offset: str = DEFAULT_OFFSET) -> dict:
        return {"date": iso_string(self.date, offset), "type": int(self.kind), "name": self.name}


HOLIDAYS: tuple[HolidayDefinition, ...] = (
    HolidayDefinition("Año Nuevo", FixedDate(1, 1)),
    HolidayDefinition("Día del Trabajo", FixedDate(5, 1)),
    HolidayDefinition("Grito de la Independencia", FixedDate(7, 20)),
    HolidayDefinition("Batalla de Boyacá", FixedDate(8, 7)),
    HolidayDefinition("Inmaculada Concepción", FixedDate(12, 8)),
    HolidayDefinition("Navidad", FixedDate(12, 25)),
    HolidayDefinition("Reyes Magos", NextMonday(1, 6)),
    HolidayDefinition("San José", NextMonday(3, 19)),
    HolidayDefinition("San Pedro y San Pablo", NextMonday(6, 29)),
    HolidayDefinition("Asunción de la Virgen", NextMonday(8, 15)),
    HolidayDefinition("Día de la Raza", NextMonday(10, 12)),
    HolidayDefinition("Todos los Santos", NextMonday(11, 1)),
    HolidayDefinition("Independencia de Cartagena", NextMonday(11, 11)),
    HolidayDefinition("Jueves Santo", EasterOffset(-3)),
    HolidayDefinition("Viernes Santo", EasterOffset(-2)),
    HolidayDefinition("Ascensión de Jesús", EasterOffset(43)),
    HolidayDefinition("Corpus Christi", EasterOffset(64)),
    HolidayDefinition("Sagrado Corazón de Jesús", EasterOffset(71)),
)


def resolve_rule(rule: Rule, year: int, offset: str = DEFAULT_OFFSET) -> date:
    """Concrete date of a single rule in the given year."""
    if isinstance(rule, FixedDate):
        return parse_iso_date(year, rule.month, rule.day, offset)
    if isinstance(rule, NextMonday):
        return next_day_of_week(parse_iso_date(year, rule.month, rule.day, offset), MONDAY)
    if isinstance(rule, EasterOffset):
        return add_days(easter_sunday(year, offset), rule.offset_days)
    raise TypeError(f"Unknown holiday rule: {rule!r}")


def resolve_holidays_for_year(year, offset: str = DEFAULT_OFFSET) -> list[ResolvedHoliday]:
    """All holidays of a year, in table order (not chronological)."""
    year = validate_year(year)
    return [
        ResolvedHoliday(resolve_rule(h.rule, year, offset), h.rule.kind, h.name)
        for h in HOLIDAYS
    ]


def holiday_name_on_date(d, offset: str = DEFAULT_OFFSET) -> str | None:
    """Name of the first holiday in table order falling on d, or None."""
    if not validate_date(d):
        raise InvalidArgument(f"Invalid date {d!r}.")
    if isinstance(d, datetime):
        d = d.date()
    for h in HOLIDAYS:
        # Candidate is built for d's own year, so comparing month/day is enough
        if is_same_calendar_day(d, resolve_rule(h.rule, d.year, offset)):
            return h.name
    return None


def get_holiday(d=None, offset: str = DEFAULT_OFFSET) -> str:
    """Holiday name on d (default: today), or "" if it is a working day."""
    if d is None:
        d = date.today()
    return holiday_name_on_date(d, offset) or ""


def get_all_holidays(year=None, offset: str = DEFAULT_OFFSET) -> list[dict]:
    """All 18 holidays of year (default: current year) as {date, type, name} dicts.

    For 2010:
      {'date': '2010-01-01T00:00:00.000-05:00', 'type': 1, 'name': 'Año Nuevo'}
      ...
      {'date': '2010-01-11T00:00:00.000-05:00', 'type': 2, 'name': 'Reyes Magos'}
      ...
      {'date': '2010-06-14T00:00:00.000-05:00', 'type': 3, 'name': 'Sagrado Corazón de Jesús'}
    """
    if year is None:
        year = date.today().year
    return [h.as_dict(offset) for h in resolve_holidays_for_year(year, offset)]


def is_holiday(d: date) -> bool:
    """Check if a date is a Colombian public holiday."""
    return get_holiday(d) != ""


def holidays_in_range(start: date, end: date, offset: str = DEFAULT_OFFSET) -> list[ResolvedHoliday]:
    """Holidays between start and end (inclusive), chronologically."""
    if not validate_date(start) or not validate_date(end):
        raise InvalidArgument(f"Invalid date range {start!r} to {end!r}.")
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    if start > end:
        return []

    found = []
    for year in range(start.year, end.year + 1):
        found.extend(h for h in resolve_holidays_for_year(year, offset) if start <= h.date <= end)
    return sorted(found, key=lambda h: h.date)
