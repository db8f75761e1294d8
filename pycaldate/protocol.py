"""Constants for the Date wire and text formats.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

# pylint: disable=bad-whitespace

# Binary Format Versions
VERSION1                          = 1
CURRENT_VERSION                   = VERSION1

# Total encoded length (including the version byte) for each known version.
# Decoders must look the version up here before touching the payload.
VERSION_LENGTHS = {
    VERSION1: 9,
}

# struct layout of each version: version tag, signed 64-bit day number
VERSION_FORMATS = {
    VERSION1: '!Bq',
}

# Text Format
MIN_YEAR_DIGITS                   = 4
YEAR_DIGITS_MAX_UNSIGNED          = 9999
# Longest year (leading zeros aside) whose dates can still fit in the
# 64-bit day range; longer years are rejected before int() conversion.
MAX_YEAR_DIGITS                   = 20

# Operation qualifiers used as error message prefixes
OP_PARSE_ISO                      = 'Date.ParseISO'
OP_FROM_BINARY                    = 'Date.FromBinary'
OP_FROM_JSON                      = 'Date.FromJSON'

# Decode Error Codes
EMPTY_INPUT                       = 1
BAD_VERSION                       = 2
BAD_LENGTH                        = 3
BAD_SYNTAX                        = 4
BAD_YEAR                          = 5
BAD_MONTH                         = 6
BAD_DAY                           = 7

BINARY_ERRORS = {EMPTY_INPUT,
                 BAD_VERSION,
                 BAD_LENGTH}

TEXT_ERRORS = {BAD_SYNTAX,
               BAD_YEAR,
               BAD_MONTH,
               BAD_DAY}


stringifyError = {
    EMPTY_INPUT: 'EMPTY_INPUT',
    BAD_VERSION: 'BAD_VERSION',
    BAD_LENGTH: 'BAD_LENGTH',
    BAD_SYNTAX: 'BAD_SYNTAX',
    BAD_YEAR: 'BAD_YEAR',
    BAD_MONTH: 'BAD_MONTH',
    BAD_DAY: 'BAD_DAY',
}

# Human readable reason, the last part of every decode error message.
reasonForError = {
    EMPTY_INPUT: 'no data',
    BAD_VERSION: 'unsupported version',
    BAD_LENGTH: 'invalid length',
    BAD_SYNTAX: 'incorrect syntax',
    BAD_YEAR: 'invalid year',
    BAD_MONTH: 'invalid month',
    BAD_DAY: 'invalid day',
}


def lookup_code(error_code):
    # type: (int) -> str
    """Return a string-ified version of an error code."""
    return stringifyError.get(error_code, '[UNKNOWN ERROR CODE]')


def lookup_reason(error_code):
    # type: (int) -> str
    """Return the message reason for an error code."""
    return reasonForError.get(error_code, 'unknown error')
