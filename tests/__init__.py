"""
(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

from typing import List, Tuple  # pylint: disable=unused-import

_log = logging.getLogger("pycaldatetest")

# (year, month, day, ISO-8601 text) covering every year width rule.
ISO_CASES = [
    (-11111, 2, 3, '-11111-02-03'),
    (-1, 12, 31, '-0001-12-31'),
    (0, 1, 1, '0000-01-01'),
    (1, 1, 1, '0001-01-01'),
    (1970, 1, 1, '1970-01-01'),
    (2012, 6, 25, '2012-06-25'),
    (12345, 6, 7, '+12345-06-07'),
]  # type: List[Tuple[int, int, int, str]]


def gregorian_walk(start, stop):
    # type: (int, int) -> List[Tuple[int, int, int]]
    """Every (year, month, day) from Jan 1st of start to Dec 31st of stop-1,
    built by counting days rather than by calendar arithmetic."""
    dim = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
    out = []
    for year in range(start, stop):
        leap = year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)
        for month in range(1, 13):
            last = 29 if month == 2 and leap else dim[month - 1]
            for day in range(1, last + 1):
                out.append((year, month, day))
    _log.debug("walked %d days in [%d, %d)", len(out), start, stop)
    return out
