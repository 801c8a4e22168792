#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exceptions raised by calday.

All of them are ValueErrors: they signal a date or a combination of dates
that does not exist, never a programming error.
"""


class CalendarError(ValueError):
    """Base error."""


class InvalidDate(CalendarError):
    """The fields do not form a date in the requested calendar."""


class InvalidMonth(InvalidDate):
    """Month outside 1..12."""


class InvalidDay(InvalidDate):
    """Day outside 1..days_in_month."""


class InvalidYearForCalendar(InvalidDate):
    """Gregorian calendar requested for a year before its introduction."""


class YearOutOfRange(InvalidDate):
    """Year outside the supported range of the calendar."""


class CalendarMismatch(CalendarError):
    """Two dates of different calendars were combined."""
