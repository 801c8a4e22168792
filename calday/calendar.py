#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Calendar rules.

There are 2 supported calendars:
    - Julian: Quadrennial leap years. Dates are supported from -4712-1-1
      (=4713 BC, Julian day 0) until 9999-12-31.
    - Gregorian: Similar to Julian plus a centennial leap year rule. Dates
      are supported from 1583-1-1, the first full year after the reform of
      October 15, 1582, until 9999-12-31.

The rule functions in this module are pure and apply a calendar's leap year
rule to any year (the proleptic calendar). The validity range of a calendar
is checked when a Date is constructed.
"""

from enum import IntEnum
from operator import index as _index

from calday import dtmath
from calday.constants import MINYEAR, MAXYEAR, GREGORIAN_MINYEAR
from calday.errors import InvalidMonth


class CalendarKind(IntEnum):
    JULIAN = dtmath.JULIAN
    GREGORIAN = dtmath.GREGORIAN

    @property
    def minyear(self):
        if self is CalendarKind.GREGORIAN:
            return GREGORIAN_MINYEAR
        return MINYEAR

    @property
    def maxyear(self):
        return MAXYEAR


JULIAN = CalendarKind.JULIAN
GREGORIAN = CalendarKind.GREGORIAN


def calendar_kind(calendar):
    """
    Return calendar as a CalendarKind.

    Parameters
    ----------
    calendar : CalendarKind or int

    Raises
    ------
    TypeError
        calendar is not a CalendarKind or the integer value of one.

    Returns
    -------
    CalendarKind
    """
    if isinstance(calendar, CalendarKind):
        return calendar
    if isinstance(calendar, int) and not isinstance(calendar, bool):
        try:
            return CalendarKind(calendar)
        except ValueError:
            pass
    raise TypeError(f"calendar must be JULIAN or GREGORIAN, not {calendar!r}")


# Both leap year rules repeat every 400 years; the kernels take int64 years.
def _cycle_year(year):
    return _index(year) % 400


def is_leap_year(year, calendar):
    """
    Check if year is a leap year (february has 29 days).

    Julian: every year divisible by 4.
    Gregorian: every year divisible by 4, except centennial years that are
    not divisible by 400.

    Parameters
    ----------
    year : int

    calendar : CalendarKind

    Returns
    -------
    bool
        True if year is a leap year in the given calendar.
    """
    return bool(dtmath.is_leapyear(_cycle_year(year),
                                   int(calendar_kind(calendar))))


def days_in_month(year, month, calendar):
    """
    Number of days in a month.

    Parameters
    ----------
    year : int

    month : int
        1 .. 12

    calendar : CalendarKind

    Raises
    ------
    InvalidMonth
        If month is not in 1..12.

    Returns
    -------
    int
        28, 29, 30 or 31.
    """
    year, month = _cycle_year(year), _index(month)
    calendar = calendar_kind(calendar)
    if not 1 <= month <= 12:
        raise InvalidMonth(f"month must be in 1..12, not {month}")
    return int(dtmath.month_days(year, month, int(calendar)))


def days_in_year(year, calendar):
    return int(dtmath.year_days(_cycle_year(year),
                                int(calendar_kind(calendar))))
