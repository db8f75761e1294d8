"""
(C) Copyright 2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging

import pytest

from pycaldate import codec, protocol
from pycaldate.calendar import ymd2day, MIN_DAY, MAX_DAY
from pycaldate.exception import DecodeError, EmptyInput, BadVersion, BadLength
from pycaldate.exception import SyntaxError as DateSyntaxError  # pylint: disable=redefined-builtin
from pycaldate.exception import DataError, YearError, MonthError, DayError, RangeError

from . import ISO_CASES


class TestBinary(object):
    """Versioned binary encoding of day numbers."""

    CVT = {0: b'\x01\x00\x00\x00\x00\x00\x00\x00\x00',
           1: b'\x01\x00\x00\x00\x00\x00\x00\x00\x01',
           -1: b'\x01\xff\xff\xff\xff\xff\xff\xff\xff',
           256: b'\x01\x00\x00\x00\x00\x00\x00\x01\x00',
           MIN_DAY: b'\x01\x80\x00\x00\x00\x00\x00\x00\x00',
           MAX_DAY: b'\x01\x7f\xff\xff\xff\xff\xff\xff\xff'}

    def test_day2bytes(self):
        for day, data in self.CVT.items():
            assert codec.day2bytes(day) == data

    def test_bytes2day(self):
        for day, data in self.CVT.items():
            assert codec.bytes2day(data) == day
            assert codec.bytes2day(bytearray(data)) == day
            assert codec.bytes2day(memoryview(data)) == day

    def test_length(self):
        for year, month, day, _ in ISO_CASES:
            data = codec.day2bytes(ymd2day(year, month, day))
            assert len(data) == protocol.VERSION_LENGTHS[protocol.VERSION1]
            assert data[0] == protocol.VERSION1

    def test_out_of_range(self):
        with pytest.raises(RangeError):
            codec.day2bytes(MAX_DAY + 1)
        with pytest.raises(RangeError):
            codec.day2bytes(MIN_DAY - 1)

    def test_unknown_version(self):
        with pytest.raises(DataError) as exc:
            codec.day2bytes(0, version=2)
        assert 'version 2' in str(exc.value)

    def test_empty(self):
        with pytest.raises(EmptyInput) as exc:
            codec.bytes2day(b'')
        assert str(exc.value) == "Date.FromBinary: cannot parse b'': no data"

    def test_wrong_length(self):
        with pytest.raises(BadLength) as exc:
            codec.bytes2day(b'12345')
        assert exc.value.value == b'12345'
        assert str(exc.value) == "Date.FromBinary: cannot parse b'12345': invalid length"

        with pytest.raises(BadLength):
            codec.bytes2day(b'\x01')
        with pytest.raises(BadLength):
            codec.bytes2day(b'\x01' + b'\x00' * 9)

    def test_bad_version(self):
        for tag in (0, 2, 255):
            with pytest.raises(BadVersion) as exc:
                codec.bytes2day(bytes([tag]) + b'\x00' * 8)
            assert exc.value.code == protocol.BAD_VERSION
            assert exc.value.operation == protocol.OP_FROM_BINARY

    def test_errors_are_decode_errors(self):
        for data in (b'', b'12345', b'\x02' + b'\x00' * 8):
            with pytest.raises(DecodeError):
                codec.bytes2day(data)


class TestISOFormat(object):
    """day2iso year width rules."""

    def test_table(self):
        for year, month, day, text in ISO_CASES:
            assert codec.day2iso(ymd2day(year, month, day)) == text

    @pytest.mark.parametrize('ymd,text', [
        ((9999, 12, 31), '9999-12-31'),
        ((10000, 1, 1), '+10000-01-01'),
        ((-9999, 1, 1), '-9999-01-01'),
        ((-10000, 1, 1), '-10000-01-01'),
        ((-12, 3, 4), '-0012-03-04'),
        ((215, 8, 15), '0215-08-15'),
    ])
    def test_boundaries(self, ymd, text):
        assert codec.day2iso(ymd2day(*ymd)) == text

    def test_year_digits(self):
        day = ymd2day(2012, 6, 25)
        assert codec.day2iso(day, 4) == '2012-06-25'
        assert codec.day2iso(day, 2) == '2012-06-25'
        assert codec.day2iso(day, 5) == '+02012-06-25'
        assert codec.day2iso(day, 6) == '+002012-06-25'
        assert codec.day2iso(ymd2day(-1, 12, 31), 6) == '-000001-12-31'
        assert codec.day2iso(ymd2day(0, 1, 1), 5) == '+00000-01-01'
        assert codec.day2iso(ymd2day(123456, 1, 1), 5) == '+123456-01-01'


class TestISOParse(object):
    """iso2day, parsing anchored at the right hand end."""

    def test_table(self):
        for year, month, day, text in ISO_CASES:
            assert codec.iso2day(text) == ymd2day(year, month, day)
            assert codec.iso2day(text.encode('ascii')) == ymd2day(year, month, day)

    def test_wide_years(self):
        assert codec.iso2day('+02012-06-25') == ymd2day(2012, 6, 25)
        assert codec.iso2day('-000001-12-31') == ymd2day(-1, 12, 31)
        assert codec.iso2day('+10000-01-01') == ymd2day(10000, 1, 1)
        assert codec.iso2day('12345-06-07') == ymd2day(12345, 6, 7)
        assert codec.iso2day('-0000-01-01') == ymd2day(0, 1, 1)

    def test_extremes(self):
        for day in (MIN_DAY, MAX_DAY):
            assert codec.iso2day(codec.day2iso(day)) == day
            assert codec.iso2day(codec.day2iso(day, 30)) == day

    def test_beyond_extremes(self):
        beyond = codec.day2iso(MAX_DAY + 1)
        with pytest.raises(RangeError):
            codec.iso2day(beyond)

    def test_very_long_years(self):
        """Years far too long for the day range fail before int conversion."""
        for text in ('+' + '9' * 5000 + '-01-01',
                     '-' + '9' * 5000 + '-01-01',
                     '9' * 21 + '-01-01'):
            with pytest.raises(RangeError) as exc:
                codec.iso2day(text)
            assert str(exc.value).startswith('Date.ParseISO: ')

        padded = '+' + '0' * 5000 + '2012-06-25'
        assert codec.iso2day(padded) == ymd2day(2012, 6, 25)
        assert codec.iso2day('-' + '0' * 5000 + '-01-01') == ymd2day(0, 1, 1)

    def test_messages(self):
        """Error messages name the operation and repeat the input."""
        with pytest.raises(DateSyntaxError) as exc:
            codec.iso2day('not-a-date')
        assert str(exc.value) == 'Date.ParseISO: cannot parse not-a-date: incorrect syntax'

        with pytest.raises(YearError) as exc:
            codec.iso2day('215-08-15')
        assert str(exc.value) == 'Date.ParseISO: cannot parse 215-08-15: invalid year'

    @pytest.mark.parametrize('text', [
        '', '-', '2012', '2012-06', '2012-6-25', '2012-06-5', '2012/06/25',
        '2012-06-25T00:00', ' 2012-06-25', '2012-06-25 ', '2012-06-25\n',
        '+-2012-06-25', '++2012-06-25', '20x2-06-25', '2012-0a-25',
        '2012-06-2a', '-06-25', '+-06-25', '2012--06-25', '2012-006-25',
        '٢٠١٢-06-25'])
    def test_syntax_errors(self, text):
        with pytest.raises(DateSyntaxError) as exc:
            codec.iso2day(text)
        assert exc.value.value == text
        assert exc.value.code == protocol.BAD_SYNTAX

    def test_undecodable_bytes(self):
        with pytest.raises(DateSyntaxError):
            codec.iso2day(b'\xff2012-06-25')

    @pytest.mark.parametrize('text', [
        '215-08-15', '0-01-01', '-1-01-01', '+999-01-01', '-001-12-31'])
    def test_year_errors(self, text):
        with pytest.raises(YearError):
            codec.iso2day(text)

    @pytest.mark.parametrize('text', ['2012-00-01', '2012-13-01', '-0001-99-01'])
    def test_month_errors(self, text):
        with pytest.raises(MonthError) as exc:
            codec.iso2day(text)
        assert str(exc.value).endswith(': invalid month')

    @pytest.mark.parametrize('text', [
        '2012-06-00', '2012-06-31', '2013-02-29', '1900-02-29', '2012-01-32'])
    def test_day_errors(self, text):
        with pytest.raises(DayError):
            codec.iso2day(text)

    def test_leap_days(self):
        assert codec.iso2day('2012-02-29') == ymd2day(2012, 2, 29)
        assert codec.iso2day('0000-02-29') == ymd2day(0, 2, 29)
        assert codec.iso2day('-0004-02-29') == ymd2day(-4, 2, 29)
        assert codec.iso2day('2000-02-29') == ymd2day(2000, 2, 29)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='pycaldate'):
            with pytest.raises(YearError):
                codec.iso2day('215-08-15')
        assert 'Date.ParseISO failed with BAD_YEAR' in caplog.text
