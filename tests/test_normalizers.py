from __future__ import annotations

from decimal import Decimal

import pytest

from venmo_quicken.errors import AmountParseError, DateParseError, MissingFieldError
from venmo_quicken.models import ConversionConfig, ParsedHeader, VenmoRow
from venmo_quicken.normalizers import (
    choose_payee,
    compose_memo,
    format_amount,
    parse_amount,
    to_quicken_record,
)

_COLUMNS = (
    "ID",
    "Datetime",
    "Type",
    "Status",
    "Note",
    "From",
    "To",
    "Amount (total)",
    "Amount (fee)",
    "Funding Source",
    "Destination",
)
_HEADER = ParsedHeader(columns=_COLUMNS, placeholders=frozenset())


def _row(**values: str) -> VenmoRow:
    cells = {c: "" for c in _COLUMNS}
    cells.update(values)
    return VenmoRow.bind(4, cells, _HEADER)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("-$1,234.50", "-1234.50"),
        ("- $20.00", "-20.00"),
        ("+ $375.00", "375.00"),
        ("$0.5", "0.50"),
        ("12", "12.00"),
        ("  -€7.125 ", "-7.13"),
        ("-0.00", "0.00"),
        ("$1,000,000.00", "1000000.00"),
    ],
)
def test_amount_parse_and_format(raw: str, expected: str):
    assert format_amount(parse_amount(raw)) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "$", "abc", "1.2.3", "NaN", "Infinity", "1e5", "$(5.00)", "1" * 30, "-$" + "9" * 27],
)
def test_amount_rejects_non_decimals(raw: str):
    with pytest.raises(AmountParseError):
        parse_amount(raw)


def test_amount_sign_only_from_leading_minus():
    assert parse_amount("$-5.00") == Decimal("5.00")


@pytest.mark.parametrize(
    ("amount", "from_", "to", "note", "expected"),
    [
        ("-12.50", "", "Alice", "", "Alice"),
        ("12.50", "Bob", "", "", "Bob"),
        ("-5.00", "Carl", "", "", "Carl"),
        ("5.00", "", "Dana", "", "Dana"),
        ("0.00", "Erin", "Frank", "", "Erin"),
        ("-1.00", "", "", "Standard Transfer", "Standard Transfer"),
        ("-1.00", "", "", "", "Venmo"),
    ],
)
def test_choose_payee(amount: str, from_: str, to: str, note: str, expected: str):
    assert choose_payee(Decimal(amount), from_=from_, to=to, note=note) == expected


def test_memo_omits_empty_fields():
    row = _row(Note="Dinner", Type="Payment")
    assert compose_memo(row) == "Note: Dinner | Type: Payment"


def test_memo_field_order():
    row = _row(
        Destination="Bank",
        **{"Funding Source": "Visa", "Amount (fee)": "$0.25"},
        To="Alice",
        From="Bob",
        Status="Complete",
        Type="Payment",
        Note="Gift",
    )
    assert compose_memo(row) == (
        "Note: Gift | Type: Payment | Status: Complete | From: Bob | To: Alice"
        " | Amount (fee): $0.25 | Funding Source: Visa | Destination: Bank"
    )


def test_memo_empty_when_nothing_to_say():
    assert compose_memo(_row()) == ""


def test_to_quicken_record():
    row = _row(
        Datetime="2023-05-01 10:15:00",
        Type="Payment",
        Note="Rent",
        From="Adam",
        To="Alice",
        **{"Amount (total)": "- $1,234.50"},
    )

    rec = to_quicken_record(row, ConversionConfig(account="Joint"))

    assert rec.as_row() == (
        "05/01/2023",
        "Alice",
        "",
        "-1234.50",
        "",
        "",
        "Joint",
        "",
        "Note: Rent | Type: Payment | From: Adam | To: Alice",
        "",
    )


def test_missing_amount_raises():
    row = _row(Datetime="2023-05-01 10:15:00")
    with pytest.raises(MissingFieldError, match="Amount \\(total\\)"):
        to_quicken_record(row, ConversionConfig())


def test_missing_datetime_raises():
    row = _row(**{"Amount (total)": "$1.00"})
    with pytest.raises(MissingFieldError) as exc:
        to_quicken_record(row, ConversionConfig())
    assert exc.value.field == "Datetime"
    assert exc.value.row == 4


def test_bad_datetime_reports_row():
    row = _row(Datetime="yesterday", **{"Amount (total)": "$1.00"})
    with pytest.raises(DateParseError, match="data row 4"):
        to_quicken_record(row, ConversionConfig())


def test_bad_amount_reports_row():
    row = _row(Datetime="2023-05-01", **{"Amount (total)": "twelve"})
    with pytest.raises(AmountParseError, match="data row 4"):
        to_quicken_record(row, ConversionConfig())


def test_oversized_amount_reports_row():
    row = _row(Datetime="2023-05-01", **{"Amount (total)": "$" + "1" * 30})
    with pytest.raises(AmountParseError, match="out of range.*data row 4"):
        to_quicken_record(row, ConversionConfig())
