"""Command line day counter: python -m calday FIRST LAST."""
from __future__ import annotations

import argparse
import logging
import re
import sys

from calday import cnumba
from calday.calendar import CalendarKind
from calday.dt import Date, days_between
from calday.errors import CalendarError

log = logging.getLogger("calday")

_DATE_RE = re.compile(r"^(-?\d{1,4})-(\d{1,2})-(\d{1,2})$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    m = _DATE_RE.match(s)
    if m is None:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    y, mo, d = map(int, m.groups())
    return y, mo, d


def _parse_calendar(s: str) -> CalendarKind:
    try:
        return CalendarKind[s.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"calendar must be julian or gregorian, got {s!r}") from None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="calday", description="Count the days between two dates")
    p.add_argument("first", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("last", type=_parse_ymd,
                   help="YYYY-MM-DD (put -- before negative years)")
    p.add_argument("--calendar", type=_parse_calendar,
                   default=CalendarKind.GREGORIAN, help="julian or gregorian")
    p.add_argument("--long", action="store_true",
                   help="print dates as 'February 29, 2000'")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    log.setLevel(logging.DEBUG if args.verbose else logging.NOTSET)
    log.debug("numba jit %s", "enabled" if cnumba.numba_acc else "disabled")

    try:
        first = Date(*args.first, args.calendar)
        last = Date(*args.last, args.calendar)
    except CalendarError as e:
        print(f"calday: {e}", file=sys.stderr)
        return 1

    log.debug("%r: JD %d, %r: JD %d", first, first.jd, last, last.jd)
    fmt = Date.longformat if args.long else Date.display
    print(f"{fmt(first)} - {fmt(last)}: {days_between(first, last)} days")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
