"""Encode and decode day numbers as bytes or as ISO-8601 text.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Binary format: a version byte followed by the payload for that version.
Version 1 carries the day number as a signed 64-bit big-endian integer,
9 bytes in total.

Text format: [sign]YYYY-MM-DD where MM and DD are always two digits and
the year has at least four.  Years 0 to 9999 have no sign, negative years
always carry '-', and years above 9999 always carry '+'.  Parsing starts
from the right hand end: the last six characters are -MM-DD, anything in
front of them is the (optionally signed) year.
"""

__all__ = ['day2bytes', 'bytes2day', 'day2iso', 'iso2day']

import logging
import re
import struct

from typing import Union  # pylint: disable=unused-import

from . import protocol
from .calendar import day2ymd, ymd2day, days_in_month, MIN_DAY, MAX_DAY
from .exception import DataError, RangeError, decode_error_handler

# -MM-DD, anchored at the end of the string
_SUFFIX_LEN = 6
_SUFFIX = re.compile(r'-([0-9]{2})-([0-9]{2})\Z')
_YEAR = re.compile(r'([+-]?)([0-9]+)\Z')

_KNOWN_LENGTHS = frozenset(protocol.VERSION_LENGTHS.values())

_log = logging.getLogger('pycaldate')


def _out_of_range(op, value):
    # type: (str, str) -> RangeError
    _log.debug("%s failed with a year out of range: %.80r", op, value)
    return RangeError("%s: %s is outside the representable range" % (op, value))


def day2bytes(daynum, version=protocol.CURRENT_VERSION):
    # type: (int, int) -> bytes
    """Pack daynum using the binary layout of version."""
    if daynum < MIN_DAY or daynum > MAX_DAY:
        raise RangeError("day number %d does not fit in 64 bits" % (daynum))
    layout = protocol.VERSION_FORMATS.get(version)
    if layout is None:
        raise DataError("unsupported binary format version %r" % (version,))
    return struct.pack(layout, version, daynum)


def bytes2day(data):
    # type: (Union[bytes, bytearray, memoryview]) -> int
    """Unpack a day number packed by day2bytes.

    The payload is only read through the layout registered for its
    version byte, so a layout added later can never be misread as an
    older one.  A length that matches no known layout at all is reported
    as BadLength before the version byte is looked at.
    """
    data = bytes(data)
    op = protocol.OP_FROM_BINARY
    if not data:
        decode_error_handler(protocol.EMPTY_INPUT, op, data)
    if len(data) not in _KNOWN_LENGTHS:
        decode_error_handler(protocol.BAD_LENGTH, op, data)

    version = data[0]
    length = protocol.VERSION_LENGTHS.get(version)
    if length is None:
        decode_error_handler(protocol.BAD_VERSION, op, data)
    if len(data) != length:
        decode_error_handler(protocol.BAD_LENGTH, op, data)

    _, daynum = struct.unpack(protocol.VERSION_FORMATS[version], data)
    return daynum


def day2iso(daynum, year_digits=protocol.MIN_YEAR_DIGITS):
    # type: (int, int) -> str
    """Format daynum as [sign]YYYY-MM-DD.

    year_digits is the minimum width of the year.  Widths above four
    always get a sign so the result still parses back to the same year.
    """
    year, month, day = day2ymd(daynum)
    width = max(year_digits, protocol.MIN_YEAR_DIGITS)
    if year < 0:
        text = '-%0*d' % (width, -year)
    elif year > protocol.YEAR_DIGITS_MAX_UNSIGNED or width > protocol.MIN_YEAR_DIGITS:
        text = '+%0*d' % (width, year)
    else:
        text = '%04d' % (year)
    return '%s-%02d-%02d' % (text, month, day)


def iso2day(value):
    # type: (Union[str, bytes]) -> int
    """Parse [sign]YYYY-MM-DD text into a day number.

    Raises SyntaxError if the text is not of that form, YearError if the
    year has fewer than four digits, and MonthError or DayError if the
    month or day is out of range.

    The year width is not held to the exact padding day2iso uses: any
    sign with four or more digits is accepted, so "+2012-06-25",
    "12345-06-07" and "-0000-01-01" parse, as does the output of
    day2iso with a wider year_digits.  A year too long to fit the 64-bit
    day range is a RangeError.
    """
    op = protocol.OP_PARSE_ISO
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode('ascii')
        except UnicodeDecodeError:
            decode_error_handler(protocol.BAD_SYNTAX, op, value)

    suffix = _SUFFIX.match(value, len(value) - _SUFFIX_LEN) if len(value) > _SUFFIX_LEN else None
    if suffix is None:
        decode_error_handler(protocol.BAD_SYNTAX, op, value)
    head = _YEAR.match(value[:-_SUFFIX_LEN])
    if head is None:
        decode_error_handler(protocol.BAD_SYNTAX, op, value)

    sign, digits = head.groups()
    if len(digits) < protocol.MIN_YEAR_DIGITS:
        decode_error_handler(protocol.BAD_YEAR, op, value)
    significant = digits.lstrip('0') or '0'
    if len(significant) > protocol.MAX_YEAR_DIGITS:
        raise _out_of_range(op, value)
    year = -int(significant) if sign == '-' else int(significant)

    month = int(suffix.group(1))
    if month < 1 or month > 12:
        decode_error_handler(protocol.BAD_MONTH, op, value)
    day = int(suffix.group(2))
    if day < 1 or day > days_in_month(year, month):
        decode_error_handler(protocol.BAD_DAY, op, value)

    daynum = ymd2day(year, month, day)
    if daynum < MIN_DAY or daynum > MAX_DAY:
        raise _out_of_range(op, value)
    return daynum
