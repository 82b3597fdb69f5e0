from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_display_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--lang", choices=("en", "th"), default="en")
    p.add_argument("--short", action="store_true", help="abbreviated names, two-digit year")
    p.add_argument("--be", action="store_true", help="Buddhist Era year")
    p.add_argument("--12h", dest="twelve_hour", action="store_true", help="12-hour clock with AM/PM")
    p.add_argument("--seconds", action="store_true", help="show seconds")
    p.add_argument("--utc", action="store_true", help="shift by the current local UTC offset")


def cmd_show(argv: list[str]) -> int:
    import datehelper

    p = argparse.ArgumentParser(prog="datehelper show", description="Display a date/time in the configured locale")
    p.add_argument("value", nargs="?", help="date string or epoch milliseconds (default: now)")
    _add_display_options(p)
    args = p.parse_args(argv)

    try:
        dh = datehelper.DateHelper(
            args.value,
            language=args.lang,
            is_utc=args.utc,
            use_short_text=args.short,
            use_buddhist_era=args.be,
            use_12_hour_format=args.twelve_hour,
            show_seconds=args.seconds,
        )
    except datehelper.InvalidInputError as e:
        raise SystemExit(str(e))

    print(f"Display:  {dh.get_display_date_and_time()}")
    print(f"Weekday:  {dh.get_weekday_name()}")
    print(f"ISO date: {dh.to_iso_date()}")
    print(f"UTC:      {dh.to_iso8601_string()}")
    print(f"Relative: {dh.get_relative_time_description()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `datehelper YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_show(argv)

    p = argparse.ArgumentParser(prog="datehelper", description="English/Thai date display toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("show", help="Display a date/time (en/th, Gregorian/Buddhist Era)")
    sub.add_parser("month", help="Print a month calendar grid")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.cmd == "show":
        return cmd_show(rest)

    if args.cmd == "month":
        return _run_module_main("datehelper.diagnostics.pretty_month", rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
