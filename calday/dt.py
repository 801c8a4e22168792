#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Immutable calendar dates and day counting.

A Date carries its calendar. Day differences are computed on the Julian day
number, which both calendars share; dates of different calendars are only
related through an explicit to_calendar conversion.
"""

from dataclasses import dataclass
from functools import total_ordering, cached_property
from operator import index as _index

from calday import dtmath
from calday.calendar import CalendarKind, calendar_kind, days_in_month
from calday.constants import months, GREGORIAN_YEAR
from calday.errors import (InvalidMonth, InvalidDay, InvalidYearForCalendar,
                           YearOutOfRange, CalendarMismatch)


def _check_date_fields(year, month, day, calendar):
    for value in (year, month, day):
        if isinstance(value, bool):
            raise TypeError(f"integer expected, not {value!r}")
    year = _index(year)
    month = _index(month)
    day = _index(day)
    calendar = calendar_kind(calendar)
    if not 1 <= month <= 12:
        raise InvalidMonth(f"month must be in 1..12, not {month}")
    if calendar is CalendarKind.GREGORIAN and year <= GREGORIAN_YEAR:
        raise InvalidYearForCalendar(
            f"the Gregorian calendar starts after {GREGORIAN_YEAR}, not in "
            f"{year}")
    if not calendar.minyear <= year <= calendar.maxyear:
        raise YearOutOfRange('year must be in %d..%d, not %d' %
                             (calendar.minyear, calendar.maxyear, year))
    dmax = days_in_month(year, month, calendar)
    if not 1 <= day <= dmax:
        raise InvalidDay('day must be in 1..%d, not %d' % (dmax, day))
    return year, month, day, calendar


@total_ordering
@dataclass(frozen=True, eq=False, repr=False)
class Date:
    """
    A date in the Julian or the Gregorian calendar.

    Parameters
    ----------
    year : int
        Astronomical year: 0 is 1 BC, -1 is 2 BC.
    month : int
        1 .. 12
    day : int
        1 .. number of days in the month.
    calendar : CalendarKind
        JULIAN or GREGORIAN.

    Raises
    ------
    TypeError
        A field is not an integer or calendar is not a CalendarKind.
    InvalidMonth, InvalidDay, InvalidYearForCalendar, YearOutOfRange
        The fields do not form a date in the calendar. All are InvalidDate.
    """
    year: int
    month: int
    day: int
    calendar: CalendarKind

    def __post_init__(self):
        fields = _check_date_fields(self.year, self.month, self.day,
                                    self.calendar)
        for name, value in zip(("year", "month", "day", "calendar"), fields):
            object.__setattr__(self, name, value)

    @classmethod
    def new(cls, year, month, day, calendar):
        return cls(year, month, day, calendar)

    @classmethod
    def from_absolute_day_number(cls, jd, calendar):
        """
        The date of Julian day number jd in the given calendar.

        Inverse of to_absolute_day_number.

        Raises
        ------
        YearOutOfRange
            If the day is outside the supported range of the calendar.
        """
        jd = _index(jd)
        calendar = calendar_kind(calendar)
        jdmin = dtmath.JD(calendar.minyear, 1, 1, int(calendar))
        jdmax = dtmath.JD(calendar.maxyear, 12, 31, int(calendar))
        if not jdmin <= jd <= jdmax:
            raise YearOutOfRange(
                f"Julian day {jd} is outside {jdmin}..{jdmax} in the "
                f"{calendar.name.lower()} calendar")
        year, month, day = dtmath.RJD(jd, int(calendar))
        return cls(year, month, day, calendar)

    @cached_property
    def jd(self):
        return int(dtmath.JD(self.year, self.month, self.day,
                             int(self.calendar)))

    def day_of_year(self):
        return int(dtmath.day_of_year(self.year, self.month, self.day,
                                      int(self.calendar)))

    def to_absolute_day_number(self):
        """
        Julian day number of the date.

        Day 0 is January 1, 4713 BC (Julian calendar). The number is the
        same for a given day in both calendars.

        Returns
        -------
        int
        """
        return self.jd

    def to_calendar(self, calendar):
        """
        The same day expressed in another calendar.

        Raises
        ------
        YearOutOfRange
            If the day is outside the supported range of the target
            calendar.
        """
        return Date.from_absolute_day_number(self.jd, calendar)

    def is_leap_year(self):
        return bool(dtmath.is_leapyear(self.year, int(self.calendar)))

    def display(self):
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"

    def longformat(self):
        """
        Historical rendering such as "March 15, 44 BC".

        Years before 1 are counted backwards from 1 BC (the year 0).
        """
        if self.year <= 0:
            return f"{months[self.month]} {self.day}, {1 - self.year} BC"
        return f"{months[self.month]} {self.day}, {self.year}"

    def __str__(self):
        return self.display()

    def __repr__(self):
        return (f"Date({self.year}, {self.month}, {self.day}, "
                f"CalendarKind.{self.calendar.name})")

    def __hash__(self):
        return hash((self.year, self.month, self.day, self.calendar))

    def __eq__(self, b):
        if not isinstance(b, Date):
            return NotImplemented
        return (self.calendar == b.calendar and self.year == b.year
                and self.month == b.month and self.day == b.day)

    def __lt__(self, b):
        if not isinstance(b, Date):
            return NotImplemented
        _check_calendars(self, b)
        return self.jd < b.jd

    def __sub__(self, b):
        if isinstance(b, Date):
            return days_between(b, self)
        return NotImplemented


def _check_calendars(a, b):
    if a.calendar != b.calendar:
        raise CalendarMismatch(
            f"{a!r} and {b!r} are in different calendars, convert one with "
            f"to_calendar()")


def days_between(a, b):
    """
    Number of days from date a to date b.

    Parameters
    ----------
    a : Date

    b : Date
        Must be in the same calendar as a.

    Raises
    ------
    TypeError
        An argument is not a Date.
    CalendarMismatch
        The dates are in different calendars.

    Returns
    -------
    int
        Positive if b is after a, negative if b is before a.
    """
    if not (isinstance(a, Date) and isinstance(b, Date)):
        raise TypeError(f"Incompatible types for days_between: {type(a)}, "
                        f"{type(b)}")
    _check_calendars(a, b)
    return b.jd - a.jd
