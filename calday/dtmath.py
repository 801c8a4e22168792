#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Integer date math. These kernels use Julian day numbers to compute differences
between dates. Julian day 0 is January 1, 4713 BC in the Julian calendar
(-4712-01-01), and a given day has the same Julian day number in both
calendars, so the Julian and the Gregorian calendar share one continuous
day count.

Years are numbered astronomically: the year before +1 is the year 0.

The kernels assume their arguments are valid. Validation is done by
calday.calendar and calday.dt before they are called. The calendar argument
is the integer tag JULIAN or GREGORIAN.
"""

from calday.constants import MDAYS, CDAYS, EPOCH_YEAR, JD2000, JD2000_J
from calday.cnumba import cnjit

JULIAN = 1
GREGORIAN = 2


@cnjit(signature_or_function='boolean(i8)')
def is_julian_leapyear(year):
    """
    Check if a given year is a leap year in the (proleptic) Julian calendar.

    1 BC (year 0) is a leap year.

    Parameters
    ----------
    year : int

    Returns
    -------
    Boolean
        True if year is a leap year
    """
    return year % 4 == 0


@cnjit(signature_or_function='boolean(i8)')
def is_gregorian_leapyear(year):
    """
    Check if a given year is a leap year in the (proleptic) Gregorian calendar.

    Parameters
    ----------
    year : int

    Returns
    -------
    leapyear : Boolean
        True if year is a leap year
    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear


@cnjit(signature_or_function='boolean(i8, i8)')
def is_leapyear(year, calendar):
    """
    Checks if a year is a leap year (february has 29 days) under the
    leap year rule of the given calendar.

    Parameters
    ----------
    year : int

    calendar : int
        JULIAN or GREGORIAN.

    Returns
    -------
    Boolean
        True if year is a leap year.
    """
    if calendar == GREGORIAN:
        return is_gregorian_leapyear(year)
    return is_julian_leapyear(year)


@cnjit(signature_or_function='i8(i8, i8, i8)')
def month_days(year, month, calendar):
    days = MDAYS[month - 1]
    if month == 2 and is_leapyear(year, calendar):
        days += 1
    return days


@cnjit(signature_or_function='i8(i8, i8)')
def year_days(year, calendar):
    if is_leapyear(year, calendar):
        return 366
    return 365


@cnjit(signature_or_function='i8(i8, i8, i8, i8)')
def day_of_year(year, month, day, calendar):
    """
    Day number within the year, January 1 being day 1.

    Parameters
    ----------
    year : int

    month : int

    day : int

    calendar : int

    Returns
    -------
    int
        1 .. 365, or 366 in a leap year.
    """
    yday = CDAYS[month - 1] + day
    if month > 2 and is_leapyear(year, calendar):
        yday += 1
    return yday


@cnjit(signature_or_function='i8(i8, i8)')
def days_before_year(year, calendar):
    """
    Number of days from January 1 of the epoch year (2000) until January 1
    of the given year.

    The lengths of all years between the epoch and the given year are
    accumulated, so the result is negative for years before the epoch.

    Parameters
    ----------
    year : int

    calendar : int

    Returns
    -------
    int
        Signed day count.
    """
    days = 0
    if year >= EPOCH_YEAR:
        for y in range(EPOCH_YEAR, year):
            days += year_days(y, calendar)
    else:
        for y in range(year, EPOCH_YEAR):
            days -= year_days(y, calendar)
    return days


@cnjit(signature_or_function='i8(i8)')
def epoch_jd(calendar):
    # Julian day of January 1 of the epoch year in the given calendar
    if calendar == GREGORIAN:
        return JD2000
    return JD2000_J


@cnjit(signature_or_function='i8(i8, i8, i8, i8)')
def JD(year, month, day, calendar):
    """
    Julian day number of a valid date.

    Parameters
    ----------
    year : int
           Year.
    month : int
           Month.
    day : int
           Day.
    calendar : int
           JULIAN or GREGORIAN.

    Returns
    -------
    int
           The corresponding Julian day number.
    """
    return (epoch_jd(calendar) + days_before_year(year, calendar)
            + day_of_year(year, month, day, calendar) - 1)


@cnjit(signature_or_function='UniTuple(i8, 3)(i8, i8)')
def RJD(jd, calendar):
    """
    Reverse Julian Day. Compute the date (year, month, day) of Julian day
    number jd in the given calendar.

    RJD(JD(y, m, d, c), c) is an invariant.

    Parameters
    ----------
    jd : int
         Julian day number.
    calendar : int
         JULIAN or GREGORIAN.

    Returns
    -------
    year : int

    month : int

    day : int
    """
    d = jd - epoch_jd(calendar)           # days since 1-1 of the epoch year
    year = EPOCH_YEAR + (4 * d) // 1461   # estimate, off by at most a few
    start = days_before_year(year, calendar)
    while start > d:
        year -= 1
        start -= year_days(year, calendar)
    while start + year_days(year, calendar) <= d:
        start += year_days(year, calendar)
        year += 1
    p = d - start                         # 0 is January 1
    if is_leapyear(year, calendar):
        leap = 1
    else:
        leap = 0
    month = 12
    while month > 1 and p < CDAYS[month - 1] + (leap if month > 2 else 0):
        month -= 1
    day = p - CDAYS[month - 1] + 1
    if month > 2:
        day -= leap
    return year, month, day
