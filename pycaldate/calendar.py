"""A module to convert between calendar dates and day numbers.

(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to a day
number counted from 0001-01-01 (day 0), in the proleptic Gregorian
calendar.  The Gregorian leap year rule is applied to every year,
including year 0 (a leap year) and negative years, and there is no
upper or lower bound on the year.

Months and days outside their normal range are not rejected: they
roll over into the neighbouring months and years, so month 13 of a
year is January of the next one and day 0 of a month is the last day
of the month before.
"""
from typing import Tuple  # pylint: disable=unused-import
import jdcal

# Day numbers are stored and transmitted as signed 64-bit integers.
MIN_DAY = -(1 << 63)
MAX_DAY = (1 << 63) - 1

DAYS_IN_400Y = 146097
DAYS_IN_100Y = 36524
DAYS_IN_4Y = 1461

# Modified Julian Day of day 0 (0001-01-01).
MJD_EPOCH = int(jdcal.gcal2jd(1, 1, 1)[1])

_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def isleap(year):
    # type: (int) -> bool
    """Return True for leap years, also for year 0 and negative years."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year):
    # type: (int) -> int
    return 366 if isleap(year) else 365


def days_in_month(year, month):
    # type: (int, int) -> int
    """Number of days in month (1-12) of year."""
    if month == 2 and isleap(year):
        return 29
    return _DAYS_IN_MONTH[month]


def days_before_month(year, month):
    # type: (int, int) -> int
    """Number of days in year preceding the first of month (1-12)."""
    return _DAYS_BEFORE_MONTH[month] + (month > 2 and isleap(year))


def days_before_year(year):
    # type: (int) -> int
    """Number of days from 0001-01-01 to the first day of year.

    Negative for years before 1.  Floor division keeps the leap day
    count correct on both sides of year 1.
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def normalize(year, month):
    # type: (int, int) -> Tuple[int, int]
    """Roll month into the range 1-12, carrying into year.

       +------------+-----------+
       | (year, mo) | result    |
       |------------+-----------|
       | (2012, 13) | (2013, 1) |
       | (2012, 0)  | (2011, 12)|
       | (2012, -1) | (2011, 11)|
       +------------+-----------+
    """
    carry, month = divmod(month - 1, 12)
    return year + carry, month + 1


def ymd2day(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to number of days since 0001-01-01.
      year  - any integer
      month - normally 1 - 12, other values roll over into other years
      day   - normally 1 - 31, other values roll over into other months
    This never fails: the month is normalized first, then day is taken
    as an offset from the first of that month.
    """
    year, month = normalize(year, month)
    return days_before_year(year) + days_before_month(year, month) + day - 1


def day2ymd(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given day number relative to 0001-01-01 to a tuple (year,month,day).

       +----------------------------+
       |  daynum | (year,month,day) |
       |---------+------------------|
       |       0 | (1,1,1)          |
       |      -1 | (0,12,31)        |
       |    -366 | (0,1,1)          |
       |  719162 | (1970,1,1)       |
       | 3652058 | (9999,12,31)     |
       +----------------------------+
    """
    n400, n = divmod(daynum, DAYS_IN_400Y)
    n100, n = divmod(n, DAYS_IN_100Y)
    n4, n = divmod(n, DAYS_IN_4Y)
    n1, n = divmod(n, 365)
    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # The last day of a 4 year or 400 year cycle is Dec 31 of the leap year
    # that ends it; the divisions above have overflowed into the next year.
    if n1 == 4 or n100 == 4:
        return year - 1, 12, 31

    leap = n1 == 3 and (n4 != 24 or n100 == 3)
    month = (n + 50) >> 5
    preceding = _DAYS_BEFORE_MONTH[month] + (month > 2 and leap)
    if preceding > n:
        month -= 1
        preceding -= _DAYS_IN_MONTH[month] + (month == 2 and leap)
    return year, month, n - preceding + 1


def weekday(daynum):
    # type: (int) -> int
    """Day of the week, Monday is 0.  0001-01-01 was a Monday."""
    return daynum % 7


def yearday(daynum):
    # type: (int) -> int
    year = day2ymd(daynum)[0]
    return daynum - days_before_year(year) + 1


def isoweek(daynum):
    # type: (int) -> Tuple[int, int]
    """Return the ISO-8601 (year, week) containing daynum.

    ISO weeks start on Monday, and week 1 is the week holding the
    year's first Thursday.
    """
    thursday = daynum - weekday(daynum) + 3
    year = day2ymd(thursday)[0]
    return year, (thursday - days_before_year(year)) // 7 + 1


def day2mjd(daynum):
    # type: (int) -> int
    """Modified Julian Day number of daynum."""
    return daynum + MJD_EPOCH


def mjd2day(mjd):
    # type: (int) -> int
    return mjd - MJD_EPOCH


def day2jd(daynum):
    # type: (int) -> float
    """Julian date at midnight starting daynum, as jdcal reports it."""
    return jdcal.MJD_0 + day2mjd(daynum)
