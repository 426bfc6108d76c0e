"""Venmo row → Quicken record normalization.

Field rules
-----------
- ``date``: ``Datetime`` parsed invariantly, rendered with the configured
  pattern.
- ``amount``: ``Amount (total)`` such as ``"- $20.00"`` or ``"+ $1,375.00"``
  as a signed 2-decimal string (``"-20.00"``, ``"1375.00"``).
- ``payee``: the counterparty. Outflows go to ``To``, inflows come from
  ``From``; otherwise the first non-empty of ``From``, ``To``, ``Note``,
  then ``"Venmo"``.
- ``memo``: ``Label: value`` fragments joined with ``" | "``, skipping empty
  fields.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .dates import format_datetime, parse_datetime
from .errors import AmountParseError, DateParseError, MissingFieldError
from .models import (
    COL_AMOUNT_FEE,
    COL_AMOUNT_TOTAL,
    COL_DATETIME,
    COL_DESTINATION,
    COL_FROM,
    COL_FUNDING_SOURCE,
    COL_NOTE,
    COL_STATUS,
    COL_TO,
    COL_TYPE,
    ConversionConfig,
    QuickenRecord,
    VenmoRow,
)

DEFAULT_PAYEE = "Venmo"
MEMO_SEPARATOR = " | "

_MAGNITUDE_RE = re.compile(r"[0-9]+(\.[0-9]*)?|\.[0-9]+")
_CENTS = Decimal("0.01")

# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------


def parse_amount(raw: str) -> Decimal:
    """Parse a Venmo amount into a signed ``Decimal``.

    The sign comes from a leading ``-``; then signs, currency symbols,
    whitespace and thousands separators are removed and what remains must be
    a plain decimal magnitude.
    """

    s = raw.strip()
    if not s:
        raise AmountParseError("amount is empty")
    negative = s.startswith("-")

    cleaned = "".join(
        ch
        for ch in s
        if ch not in "+-," and not ch.isspace() and unicodedata.category(ch) != "Sc"
    )
    if not _MAGNITUDE_RE.fullmatch(cleaned):
        raise AmountParseError(f"invalid amount: {raw!r}")

    d = Decimal(cleaned)
    try:
        # Magnitudes beyond the context precision cannot be rounded to cents.
        d.quantize(_CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise AmountParseError(f"amount out of range: {raw!r}") from exc
    return -d if negative else d


def format_amount(d: Decimal) -> str:
    # Exactly two decimals, ASCII dot, no grouping; zero never carries a sign.
    q = d.quantize(_CENTS, rounding=ROUND_HALF_UP)
    if q == 0:
        q = abs(q)
    return f"{q:.2f}"


# ---------------------------------------------------------------------------
# Payee / memo
# ---------------------------------------------------------------------------


def _first_non_empty(values: Sequence[str | None]) -> str | None:
    for v in values:
        if v:
            return v
    return None


def choose_payee(amount: Decimal, *, from_: str, to: str, note: str) -> str:
    """Pick the counterparty for a transfer of ``amount``."""

    if amount < 0 and to:
        return to
    if amount >= 0 and from_:
        return from_
    return _first_non_empty([from_, to, note]) or DEFAULT_PAYEE


def compose_memo(row: VenmoRow) -> str:
    fragments = (
        (COL_NOTE, row.note),
        (COL_TYPE, row.type),
        (COL_STATUS, row.status),
        (COL_FROM, row.from_),
        (COL_TO, row.to),
        (COL_AMOUNT_FEE, row.amount_fee),
        (COL_FUNDING_SOURCE, row.funding_source),
        (COL_DESTINATION, row.destination),
    )
    return MEMO_SEPARATOR.join(f"{label}: {value}" for label, value in fragments if value)


# ---------------------------------------------------------------------------
# Row transform
# ---------------------------------------------------------------------------


def to_quicken_record(row: VenmoRow, config: ConversionConfig) -> QuickenRecord:
    """Derive the output record for a row that passed classification.

    Raises ``MissingFieldError``, ``DateParseError`` or ``AmountParseError``;
    callers abort the run on any of them.
    """

    if not row.datetime:
        raise MissingFieldError(COL_DATETIME, row=row.line)
    try:
        when = parse_datetime(row.datetime)
    except DateParseError as e:
        raise DateParseError(f"{e} (data row {row.line})") from e

    if not row.amount_total:
        raise MissingFieldError(COL_AMOUNT_TOTAL, row=row.line)
    try:
        amount = parse_amount(row.amount_total)
    except AmountParseError as e:
        raise AmountParseError(f"{e} (data row {row.line})") from e

    return QuickenRecord(
        date=format_datetime(when, config.date_format),
        payee=choose_payee(amount, from_=row.from_, to=row.to, note=row.note),
        fi_payee="",
        amount=format_amount(amount),
        debit_credit="",
        category="",
        account=config.account,
        tag="",
        memo=compose_memo(row),
        chknum="",
    )


__all__ = [
    "DEFAULT_PAYEE",
    "MEMO_SEPARATOR",
    "choose_payee",
    "compose_memo",
    "format_amount",
    "parse_amount",
    "to_quicken_record",
]
