"""calday public API.

Julian and Gregorian dates, leap years and day counting.
"""

from .calendar import (
    CalendarKind,
    JULIAN,
    GREGORIAN,
    is_leap_year,
    days_in_month,
    days_in_year,
)
from .dt import Date, days_between
from .errors import (
    CalendarError,
    InvalidDate,
    InvalidMonth,
    InvalidDay,
    InvalidYearForCalendar,
    YearOutOfRange,
    CalendarMismatch,
)

__all__ = [
    "CalendarKind",
    "JULIAN",
    "GREGORIAN",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "Date",
    "days_between",
    "CalendarError",
    "InvalidDate",
    "InvalidMonth",
    "InvalidDay",
    "InvalidYearForCalendar",
    "YearOutOfRange",
    "CalendarMismatch",
]
