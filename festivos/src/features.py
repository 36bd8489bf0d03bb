"""Holiday tables and flags as pandas DataFrames."""

from collections.abc import Iterable

import pandas as pd

from .dates import DEFAULT_OFFSET
from .holidays import holiday_name_on_date, resolve_holidays_for_year


def holidays_frame(years: Iterable[int], offset: str = DEFAULT_OFFSET) -> pd.DataFrame:
    """One row per holiday for every year given, sorted by date.

    Columns: date (datetime64), type (1/2/3), name, year.
    """
    rows = []
    for year in years:
        for h in resolve_holidays_for_year(year, offset):
            rows.append({"date": h.date, "type": int(h.kind), "name": h.name, "year": h.date.year})

    df = pd.DataFrame(rows, columns=["date", "type", "name", "year"])
    df["date"] = pd.to_datetime(df["date"])
    return df.sort_values("date", kind="stable").reset_index(drop=True)


def add_holiday_features(df: pd.DataFrame, date_col: str = "date") -> pd.DataFrame:
    """Return a copy of df with is_holiday (0/1) and holiday_name columns."""
    out = df.copy()
    days = pd.to_datetime(out[date_col]).dt.date
    # Resolve each distinct day once; missing timestamps are not holidays
    names = {d: holiday_name_on_date(d) or "" for d in days.dropna().unique()}
    out["holiday_name"] = days.map(names).fillna("")
    out["is_holiday"] = (out["holiday_name"] != "").astype(int)
    return out
