"""A proleptic Gregorian Date type with binary and ISO-8601 codecs.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .datatype import *   # pylint: disable=wildcard-import
from .document import *   # pylint: disable=wildcard-import
from .exception import *  # pylint: disable=wildcard-import, redefined-builtin
from .calendar import isleap, days_in_month, days_in_year
