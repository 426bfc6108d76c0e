from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from venmo_quicken.dates import format_datetime, parse_datetime
from venmo_quicken.errors import DateParseError
from venmo_quicken.models import ConversionConfig


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2023-05-01 10:15:00", datetime(2023, 5, 1, 10, 15)),
        ("2025-08-07T01:44:44", datetime(2025, 8, 7, 1, 44, 44)),
        ("2025-08-07T01:44:44Z", datetime(2025, 8, 7, 1, 44, 44)),
        ("2025-08-07T01:44:44-07:00", datetime(2025, 8, 7, 1, 44, 44)),
        ("2023-05-01", datetime(2023, 5, 1)),
        ("05/01/2023 10:15:00", datetime(2023, 5, 1, 10, 15)),
        ("5/1/2023 3:07 PM", datetime(2023, 5, 1, 15, 7)),
        ("5/1/2023", datetime(2023, 5, 1)),
    ],
)
def test_parse_datetime(raw: str, expected: datetime):
    assert parse_datetime(raw) == expected


@pytest.mark.parametrize("raw", ["", "yesterday", "2023-13-01", "01.05.2023"])
def test_parse_datetime_rejects(raw: str):
    with pytest.raises(DateParseError):
        parse_datetime(raw)


_DT = datetime(2023, 5, 1, 14, 5, 9, 120000)


@pytest.mark.parametrize(
    ("pattern", "expected"),
    [
        ("MM/dd/yyyy", "05/01/2023"),
        ("M/d/yy", "5/1/23"),
        ("yyyy-MM-dd", "2023-05-01"),
        ("dd.MM.yyyy", "01.05.2023"),
        ("ddd, MMM d yyyy", "Mon, May 1 2023"),
        ("dddd, dd MMMM yyyy", "Monday, 01 May 2023"),
        ("h:mm tt", "2:05 PM"),
        ("HH:mm:ss.fff", "14:05:09.120"),
        ("ss.FFFF", "09.12"),
        ("yyyy'T'HH", "2023T14"),
        ("\\d d", "d 1"),
        ("%d", "1"),
        ("d", "05/01/2023"),
        ("s", "2023-05-01T14:05:09"),
    ],
)
def test_format_datetime(pattern: str, expected: str):
    assert format_datetime(_DT, pattern) == expected


@pytest.mark.parametrize("pattern", ["", "Q", "yyyy'MM", "dd\\"])
def test_format_datetime_rejects(pattern: str):
    with pytest.raises(ValueError):
        format_datetime(_DT, pattern)


def test_config_validates_date_format_up_front():
    with pytest.raises(ValidationError):
        ConversionConfig(date_format="yyyy'oops")


def test_config_rejects_blank_account():
    with pytest.raises(ValidationError):
        ConversionConfig(account="   ")
