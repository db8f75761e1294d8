"""A module for housing the Date class.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Date -- An immutable proleptic Gregorian calendar date.

Exported Functions:
DateFromOrdinal -- Converts a day number to a Date object.
DateFromTicks -- Converts ticks to a Date object.
DateToTicks -- Converts a Date object to ticks.
DateFromBinary -- Converts the binary form to a Date object.
DateToBinary -- Converts a Date object to its binary form.
DateFromISO -- Converts ISO-8601 text to a Date object.
DateToISO -- Converts a Date object to ISO-8601 text.
"""

__all__ = ['Date', 'DateFromOrdinal', 'DateFromTicks', 'DateToTicks',
           'DateFromBinary', 'DateToBinary', 'DateFromISO', 'DateToISO',
           'LOCALZONE']

import datetime
import functools
import operator
from datetime import tzinfo  # pylint: disable=unused-import
from typing import Tuple, Union  # pylint: disable=unused-import

import tzlocal

from . import calendar
from . import codec
from . import protocol
from .calendar import ymd2day, day2ymd, MIN_DAY, MAX_DAY
from .exception import RangeError

TICKSDAY = 86400
LOCALZONE = tzlocal.get_localzone()

# Day number of the unix epoch, 1970-01-01.
EPOCH_DAY = ymd2day(1970, 1, 1)


def _checked(daynum):
    # type: (int) -> int
    """Return daynum as an int, rejecting non-integers and out of range values."""
    daynum = operator.index(daynum)
    if daynum < MIN_DAY or daynum > MAX_DAY:
        raise RangeError("day number %d is outside the representable range" % (daynum))
    return daynum


@functools.total_ordering
class Date(object):
    """A calendar date in the proleptic Gregorian calendar.

    Internally a Date is only a signed day number counted from
    0001-01-01, so any year is allowed: year 0, negative years and years
    with more than four digits.  Dates compare and hash by that number.

    Construction is permissive: a month or day out of its usual range is
    not an error but rolls over into the neighbouring months and years,
    e.g. Date(2012, 13, 1) is 2013-01-01 and Date(2012, 3, 0) is
    2012-02-29.  This differs from datetime.date, which rejects such
    values; callers wanting strict checks must validate first.
    """

    __slots__ = ('_day',)

    min = None  # type: Date
    max = None  # type: Date

    def __init__(self, year, month, day):
        # type: (int, int, int) -> None
        object.__setattr__(self, '_day', _checked(ymd2day(year, month, day)))

    @classmethod
    def from_ordinal(cls, daynum):
        # type: (int) -> Date
        """Return the Date for a day number (0 is 0001-01-01)."""
        obj = object.__new__(cls)
        object.__setattr__(obj, '_day', _checked(daynum))
        return obj

    @classmethod
    def from_date(cls, value):
        # type: (datetime.date) -> Date
        """Convert a datetime.date (or datetime.datetime) to a Date."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls, zoneinfo=LOCALZONE):
        # type: (tzinfo) -> Date
        """The current date in zoneinfo, the local zone by default."""
        return cls.from_date(datetime.datetime.now(zoneinfo))

    @classmethod
    def parse_iso(cls, value):
        # type: (Union[str, bytes]) -> Date
        return cls.from_ordinal(codec.iso2day(value))

    @classmethod
    def from_bytes(cls, data):
        # type: (Union[bytes, bytearray, memoryview]) -> Date
        return cls.from_ordinal(codec.bytes2day(data))

    def __setattr__(self, name, value):
        raise AttributeError("Date objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Date objects are immutable")

    # Calendar fields

    @property
    def ordinal(self):
        # type: () -> int
        return self._day

    @property
    def year(self):
        # type: () -> int
        return day2ymd(self._day)[0]

    @property
    def month(self):
        # type: () -> int
        return day2ymd(self._day)[1]

    @property
    def day(self):
        # type: () -> int
        return day2ymd(self._day)[2]

    def ymd(self):
        # type: () -> Tuple[int, int, int]
        return day2ymd(self._day)

    def weekday(self):
        # type: () -> int
        """Day of the week, Monday is 0 and Sunday is 6."""
        return calendar.weekday(self._day)

    def isoweekday(self):
        # type: () -> int
        """Day of the week, Monday is 1 and Sunday is 7."""
        return calendar.weekday(self._day) + 1

    def yearday(self):
        # type: () -> int
        return calendar.yearday(self._day)

    def isoweek(self):
        # type: () -> Tuple[int, int]
        """ISO-8601 (year, week); the year may differ from self.year."""
        return calendar.isoweek(self._day)

    def isleap(self):
        # type: () -> bool
        return calendar.isleap(self.year)

    def days_in_month(self):
        # type: () -> int
        year, month, _ = day2ymd(self._day)
        return calendar.days_in_month(year, month)

    def mjd(self):
        # type: () -> int
        """Modified Julian Day number."""
        return calendar.day2mjd(self._day)

    def julian_day(self):
        # type: () -> float
        """Julian date at the midnight starting this day."""
        return calendar.day2jd(self._day)

    # Arithmetic

    def add_days(self, days):
        # type: (int) -> Date
        return Date.from_ordinal(self._day + days)

    def add_date(self, years=0, months=0, days=0):
        # type: (int, int, int) -> Date
        """Add years, months and days to the calendar fields.

        The result is normalized the same way the constructor is, so
        adding a month to January 31st lands in early March.
        """
        year, month, day = day2ymd(self._day)
        return Date(year + years, month + months, day + days)

    def __add__(self, other):
        if isinstance(other, int):
            return self.add_days(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Date):
            return self._day - other._day
        if isinstance(other, int):
            return self.add_days(-other)
        return NotImplemented

    # Comparison

    def __eq__(self, other):
        if isinstance(other, Date):
            return self._day == other._day
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Date):
            return self._day < other._day
        return NotImplemented

    def __hash__(self):
        return hash(self._day)

    def before(self, other):
        # type: (Date) -> bool
        return self._day < other._day

    def after(self, other):
        # type: (Date) -> bool
        return self._day > other._day

    # Conversions

    def format_iso(self, year_digits=protocol.MIN_YEAR_DIGITS):
        # type: (int) -> str
        """Format as [sign]YYYY-MM-DD with at least year_digits year digits."""
        return codec.day2iso(self._day, year_digits)

    def to_bytes(self):
        # type: () -> bytes
        return codec.day2bytes(self._day)

    def to_date(self):
        # type: () -> datetime.date
        """Convert to datetime.date, only possible for years 1 - 9999."""
        year, month, day = day2ymd(self._day)
        if year < datetime.MINYEAR or year > datetime.MAXYEAR:
            raise RangeError("year %d is out of range for datetime.date" % (year))
        return datetime.date(year, month, day)

    def __str__(self):
        return codec.day2iso(self._day)

    def __repr__(self):
        return "Date(%d, %d, %d)" % day2ymd(self._day)

    def __reduce__(self):
        return (DateFromBinary, (codec.day2bytes(self._day),))


Date.min = Date.from_ordinal(MIN_DAY)
Date.max = Date.from_ordinal(MAX_DAY)


def DateFromOrdinal(daynum):
    # type: (int) -> Date
    """Convert a day number (0 is 0001-01-01) to a Date object."""
    return Date.from_ordinal(daynum)


def DateFromTicks(ticks):
    # type: (float) -> Date
    """Convert ticks (seconds since 1970-01-01, as time.time() returns) to a Date object."""
    return Date.from_ordinal(EPOCH_DAY + int(ticks // TICKSDAY))


def DateToTicks(value):
    # type: (Union[Date, datetime.date]) -> int
    """Convert a Date object to ticks."""
    day = ymd2day(value.year, value.month, value.day)
    return (day - EPOCH_DAY) * TICKSDAY


def DateFromBinary(data):
    # type: (Union[bytes, bytearray, memoryview]) -> Date
    """Convert the versioned binary form to a Date object."""
    return Date.from_ordinal(codec.bytes2day(data))


def DateToBinary(value):
    # type: (Date) -> bytes
    """Convert a Date object to its versioned binary form."""
    return codec.day2bytes(value.ordinal)


def DateFromISO(value):
    # type: (Union[str, bytes]) -> Date
    """Convert [sign]YYYY-MM-DD text to a Date object."""
    return Date.from_ordinal(codec.iso2day(value))


def DateToISO(value, year_digits=protocol.MIN_YEAR_DIGITS):
    # type: (Date, int) -> str
    """Convert a Date object to [sign]YYYY-MM-DD text."""
    return codec.day2iso(value.ordinal, year_digits)
