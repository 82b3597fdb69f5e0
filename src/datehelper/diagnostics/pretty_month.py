from __future__ import annotations

import argparse
from datetime import MAXYEAR, MINYEAR

import datehelper
from datehelper import DateHelper


def dow_header(names: tuple[str, ...], w: int = 4) -> str:
    return " ".join(n[:w].ljust(w) for n in names)


def cell(text: str, w: int = 4) -> str:
    return text[:w].ljust(w)


def print_grid(title: str, header: str, weeks: list[list[str]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(wk).rstrip())
    print()


def month_weeks(first: DateHelper) -> list[list[str]]:
    """Sunday-first rows of day numbers for the month containing `first`."""
    weeks: list[list[str]] = []
    wk: list[str] = [cell("") for _ in range(first.get_first_weekday_of_month())]
    for day in range(1, first.get_days_in_month() + 1):
        wk.append(cell(f"{day:2d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell(""))
        weeks.append(wk)
    return weeks


def month_calendar(year: int, month: int, *, language: str = "en", short: bool = True, buddhist_era: bool = False) -> None:
    first = DateHelper.from_triple_and_time(
        (year, month, 1),
        language=language,
        use_short_text=short,
        use_buddhist_era=buddhist_era,
    )
    table = datehelper.get_locale(language)
    names = table.weekdays_abbr if short else table.weekdays
    title = f"{first.get_month_name()} {first.get_era_year()}"
    print_grid(title, dow_header(names), month_weeks(first))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a Sunday-first month calendar with localized names.")
    p.add_argument("year", type=int, nargs="?", help="Gregorian year (default: current)")
    p.add_argument("month", type=int, nargs="?", help="Month 1..12 (default: current)")
    p.add_argument("--lang", choices=datehelper.list_locales(), default="en")
    p.add_argument("--long", action="store_true", help="Full month/weekday names")
    p.add_argument("--be", action="store_true", help="Buddhist Era year in the title")
    args = p.parse_args(argv)

    year = args.year if args.year is not None else datehelper.current_year()
    month = args.month if args.month is not None else datehelper.current_month()
    if not 1 <= month <= 12:
        raise SystemExit("month must be in 1..12")
    if not MINYEAR <= year <= MAXYEAR:
        raise SystemExit(f"year must be in {MINYEAR}..{MAXYEAR}")

    month_calendar(year, month, language=args.lang, short=not args.long, buddhist_era=args.be)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
