"""CLI entry point: list Colombian holidays for a year or look up a date."""

import argparse
import json
from datetime import date
from pathlib import Path

from .config import load_config
from .features import holidays_frame
from .holidays import get_all_holidays, get_holiday
from .validation import InvalidArgument


def _print_year(year, offset: str, fmt: str, csv_path: str | None) -> None:
    if fmt == "json":
        print(json.dumps(get_all_holidays(year, offset), ensure_ascii=False, indent=2))
    elif fmt == "csv":
        df = holidays_frame([year], offset)
        if csv_path:
            df.to_csv(csv_path, index=False)
            print(f"Saved {len(df)} holidays to {csv_path}")
        else:
            print(df.to_csv(index=False), end="")
    else:
        holidays = get_all_holidays(year, offset)
        print(f"Festivos en Colombia {year}:")
        for h in holidays:
            print(f"  {h['date'][:10]}  [{h['type']}]  {h['name']}")
        print(f"  Total: {len(holidays)}")


def _print_date(d: date, offset: str, fmt: str) -> None:
    name = get_holiday(d, offset)
    if fmt == "json":
        print(json.dumps({"date": d.isoformat(), "name": name}, ensure_ascii=False))
    elif name:
        print(f"{d.isoformat()}: {name}")
    else:
        print(f"{d.isoformat()}: no es festivo")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Colombian public holidays")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--year", default=None, help="Year to list (default: current year)")
    group.add_argument(
        "--date", type=date.fromisoformat, default=None,
        help="Look up a single date (YYYY-MM-DD)",
    )
    parser.add_argument("--format", choices=["table", "json", "csv"], default=None,
                        help="Output format (default from config.yaml)")
    parser.add_argument("--offset", default=None, help="UTC offset for ISO dates, e.g. -05:00")
    parser.add_argument("--config", type=Path, default=None, help="Alternate config.yaml")
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    offset = args.offset if args.offset is not None else cfg["timezone_offset"]
    fmt = args.format or cfg["output"]["format"]

    try:
        if args.date is not None:
            _print_date(args.date, offset, fmt)
        else:
            year = args.year if args.year is not None else date.today().year
            _print_year(year, offset, fmt, cfg["output"]["csv_path"])
    except InvalidArgument as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
