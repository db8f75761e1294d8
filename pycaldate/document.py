"""JSON support for Date objects.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

A Date is written to JSON as a string holding its ISO-8601 text, for
example "+12345-06-07".  Nothing else is added: reading it back is just
DateFromISO on the string.

Exported Classes:
DateJSONEncoder -- json.JSONEncoder that knows how to write Date objects.

Exported Functions:
to_json -- Converts a single Date object to a JSON string literal.
from_json -- Converts a JSON string literal to a Date object.
date_object_hook -- Builds a json object_hook parsing the named keys.
dumps -- json.dumps using DateJSONEncoder.
loads -- json.loads, optionally parsing dates under the named keys.
"""

__all__ = ['DateJSONEncoder', 'to_json', 'from_json', 'date_object_hook',
           'dumps', 'loads']

import json

from typing import Any, Callable, Dict, Iterable, Optional, Union  # pylint: disable=unused-import

from . import protocol
from .datatype import Date, DateFromISO, DateToISO
from .exception import decode_error_handler


class DateJSONEncoder(json.JSONEncoder):
    """Write Date objects as their ISO-8601 text."""

    def default(self, o):  # pylint: disable=method-hidden
        if isinstance(o, Date):
            return DateToISO(o)
        return json.JSONEncoder.default(self, o)


def to_json(value):
    # type: (Date) -> str
    """Return value as a quoted JSON string."""
    return json.dumps(DateToISO(value))


def from_json(text):
    # type: (Union[str, bytes]) -> Date
    """Parse a JSON string literal holding a date.

    Anything which is not valid JSON, or is JSON but not a string, is a
    SyntaxError.  The string itself is parsed by DateFromISO.
    """
    try:
        value = json.loads(text)
    except ValueError:
        decode_error_handler(protocol.BAD_SYNTAX, protocol.OP_FROM_JSON, text)
    if not isinstance(value, str):
        decode_error_handler(protocol.BAD_SYNTAX, protocol.OP_FROM_JSON, text)
    return DateFromISO(value)


def date_object_hook(keys):
    # type: (Iterable[str]) -> Callable[[Dict[str, Any]], Dict[str, Any]]
    """Return an object_hook converting the string values of keys to Date."""
    names = frozenset(keys)

    def hook(obj):
        # type: (Dict[str, Any]) -> Dict[str, Any]
        for name in names.intersection(obj):
            if isinstance(obj[name], str):
                obj[name] = DateFromISO(obj[name])
        return obj

    return hook


def dumps(obj, **kwargs):
    # type: (Any, Any) -> str
    kwargs.setdefault('cls', DateJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads(text, keys=None, **kwargs):
    # type: (Union[str, bytes], Optional[Iterable[str]], Any) -> Any
    """json.loads, turning the string values of any of keys into Date."""
    if keys is not None:
        kwargs.setdefault('object_hook', date_object_hook(keys))
    return json.loads(text, **kwargs)
