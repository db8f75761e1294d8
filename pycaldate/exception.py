"""Classes containing the exceptions for reporting errors.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
from typing import NoReturn, Union  # pylint: disable=unused-import

from . import protocol

__all__ = ['Error', 'DataError', 'RangeError', 'DecodeError',
           'EmptyInput', 'BadVersion', 'BadLength', 'SyntaxError',
           'YearError', 'MonthError', 'DayError', 'decode_error_handler']

_log = logging.getLogger('pycaldate')


class Error(Exception):
    def __init__(self, value):
        Exception.__init__(self, value)
        self.__value = value

    def __str__(self):
        return str(self.__value)


class DataError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class RangeError(DataError):
    """A day number or calendar date outside the representable range."""

    def __init__(self, value):
        DataError.__init__(self, value)


class DecodeError(DataError):
    """Base class for failures to decode a Date from bytes or text.

    operation -- qualifier of the failing operation, e.g. Date.ParseISO
    value -- the offending input, verbatim
    code -- the protocol error code
    """

    code = None  # type: int

    def __init__(self, operation, value, reason=None):
        # type: (str, Union[str, bytes], str) -> None
        self.operation = operation
        self.value = value
        if reason is None:
            reason = protocol.lookup_reason(self.code)
        self.reason = reason
        shown = value if isinstance(value, str) else repr(bytes(value))
        DataError.__init__(self, '%s: cannot parse %s: %s' % (operation, shown, reason))


class EmptyInput(DecodeError):
    code = protocol.EMPTY_INPUT


class BadVersion(DecodeError):
    code = protocol.BAD_VERSION


class BadLength(DecodeError):
    code = protocol.BAD_LENGTH


class SyntaxError(DecodeError):  # pylint: disable=redefined-builtin
    code = protocol.BAD_SYNTAX


class YearError(DecodeError):
    code = protocol.BAD_YEAR


class MonthError(DecodeError):
    code = protocol.BAD_MONTH


class DayError(DecodeError):
    code = protocol.BAD_DAY


_ERROR_CLASSES = {cls.code: cls for cls in (EmptyInput, BadVersion, BadLength,
                                            SyntaxError, YearError,
                                            MonthError, DayError)}


def decode_error_handler(error_code, operation, value):
    # type: (int, str, Union[str, bytes]) -> NoReturn
    """
    :type error_code int
    :type operation str
    """
    cls = _ERROR_CLASSES.get(error_code)
    if cls is None:
        err = DecodeError(operation, value, protocol.lookup_reason(error_code))
    else:
        err = cls(operation, value)
    _log.debug("%s failed with %s: %r", operation,
               protocol.lookup_code(error_code), value)
    raise err
