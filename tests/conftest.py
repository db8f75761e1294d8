"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
import random

import pytest

from typing import List  # pylint: disable=unused-import

import pycaldate

from . import ISO_CASES

_log = logging.getLogger("pycaldatetest")

# Fixed so that a failure can be reproduced.
RANDOM_SEED = 20150822


@pytest.fixture(params=ISO_CASES, ids=[c[3] for c in ISO_CASES])
def iso_case(request):
    """One (Date, text) pair from the ISO table."""
    year, month, day, text = request.param
    return pycaldate.Date(year, month, day), text


@pytest.fixture(scope="session")
def random_dates():
    # type: () -> List[pycaldate.Date]
    """A reproducible spread of dates over the whole 64-bit day range."""
    rnd = random.Random(RANDOM_SEED)
    _log.info("Generating random dates with seed %d", RANDOM_SEED)
    days = [rnd.randint(-10**7, 10**7) for _ in range(500)]
    days += [rnd.randint(pycaldate.calendar.MIN_DAY, pycaldate.calendar.MAX_DAY)
             for _ in range(500)]
    days += [pycaldate.calendar.MIN_DAY, pycaldate.calendar.MAX_DAY, -1, 0, 1]
    return [pycaldate.Date.from_ordinal(d) for d in days]
