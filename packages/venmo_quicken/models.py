"""Data models for the Venmo → Quicken conversion.

Rows move through the converter in three shapes:

- :class:`VenmoRow`: one CSV data line bound to the located header, with a
  named attribute per recognized column.
- :class:`QuickenRecord`: one output line in Quicken's fixed 10-column
  import layout.
- :class:`RunSummary`: counts threaded back to the caller instead of being
  kept in module state.

:class:`ConversionConfig` holds the per-run settings (account name and
output date pattern) and validates them up front.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import astuple, dataclass, field

from pydantic import BaseModel, ConfigDict, field_validator

from .dates import validate_pattern

# ---------------------------------------------------------------------------
# Column names
# ---------------------------------------------------------------------------

COL_ID = "ID"
COL_DATETIME = "Datetime"
COL_TYPE = "Type"
COL_STATUS = "Status"
COL_NOTE = "Note"
COL_FROM = "From"
COL_TO = "To"
COL_AMOUNT_TOTAL = "Amount (total)"
COL_AMOUNT_FEE = "Amount (fee)"
COL_FUNDING_SOURCE = "Funding Source"
COL_DESTINATION = "Destination"

# The header line must start with these, in order.
REQUIRED_COLUMNS: tuple[str, ...] = (
    COL_ID,
    COL_DATETIME,
    COL_TYPE,
    COL_STATUS,
    COL_NOTE,
    COL_FROM,
    COL_TO,
    COL_AMOUNT_TOTAL,
)

PLACEHOLDER_PREFIX = "Ignore"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConversionConfig(BaseModel):
    """Settings held for the duration of one conversion run."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    account: str = "Venmo"
    date_format: str = "MM/dd/yyyy"

    @field_validator("account")
    @classmethod
    def _account_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("account must be non-empty")
        return v

    @field_validator("date_format")
    @classmethod
    def _date_format_renderable(cls, v: str) -> str:
        return validate_pattern(v)


# ---------------------------------------------------------------------------
# Input side
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParsedHeader:
    """The corrected header: ordered column names plus placeholder names."""

    columns: tuple[str, ...]
    placeholders: frozenset[str]

    def has(self, column: str) -> bool:
        return column in self.columns


@dataclass(frozen=True, slots=True)
class VenmoRow:
    """A single data line of a Venmo statement export.

    Values are trimmed strings; ``""`` marks an empty cell. The optional
    columns are ``None`` when the export's header does not carry them.
    ``cells`` keeps every column of the line (including placeholders and
    columns we do not map) in header order for classification;
    ``placeholders`` names the columns synthesized for blank header cells.
    """

    line: int
    id: str
    datetime: str
    type: str
    status: str
    note: str
    from_: str
    to: str
    amount_total: str
    amount_fee: str | None
    funding_source: str | None
    destination: str | None
    cells: Mapping[str, str] = field(repr=False, compare=False)
    placeholders: frozenset[str] = field(default=frozenset(), repr=False, compare=False)

    @classmethod
    def bind(cls, line: int, raw: Mapping[str, str], header: ParsedHeader) -> VenmoRow:
        def opt(column: str) -> str | None:
            return raw.get(column, "") if header.has(column) else None

        return cls(
            line=line,
            id=raw.get(COL_ID, ""),
            datetime=raw.get(COL_DATETIME, ""),
            type=raw.get(COL_TYPE, ""),
            status=raw.get(COL_STATUS, ""),
            note=raw.get(COL_NOTE, ""),
            from_=raw.get(COL_FROM, ""),
            to=raw.get(COL_TO, ""),
            amount_total=raw.get(COL_AMOUNT_TOTAL, ""),
            amount_fee=opt(COL_AMOUNT_FEE),
            funding_source=opt(COL_FUNDING_SOURCE),
            destination=opt(COL_DESTINATION),
            cells=dict(raw),
            placeholders=header.placeholders,
        )

    def non_empty(self) -> list[str]:
        """Column names whose value is non-empty, in header order."""

        return [name for name, value in self.cells.items() if value]


# ---------------------------------------------------------------------------
# Output side
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class QuickenRecord:
    """One row of the Quicken import CSV.

    Field order is the output column order. Columns Quicken fills in itself
    (FI Payee, Debit/Credit, Category, Tag, Chknum) are always empty.
    """

    date: str
    payee: str
    fi_payee: str
    amount: str
    debit_credit: str
    category: str
    account: str
    tag: str
    memo: str
    chknum: str

    def as_row(self) -> tuple[str, ...]:
        return astuple(self)


QUICKEN_HEADER: tuple[str, ...] = (
    "Date",
    "Payee",
    "FI Payee",
    "Amount",
    "Debit/Credit",
    "Category",
    "Account",
    "Tag",
    "Memo",
    "Chknum",
)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Counts reported to the caller after a run.

    ``written + skipped_balance + discarded == total_rows`` always holds.
    """

    written: int = 0
    skipped_balance: int = 0
    discarded: int = 0

    @property
    def total_rows(self) -> int:
        return self.written + self.skipped_balance + self.discarded


@dataclass(frozen=True, slots=True)
class ConversionResult:
    records: tuple[QuickenRecord, ...]
    summary: RunSummary


__all__ = [
    "COL_AMOUNT_FEE",
    "COL_AMOUNT_TOTAL",
    "COL_DATETIME",
    "COL_DESTINATION",
    "COL_FROM",
    "COL_FUNDING_SOURCE",
    "COL_ID",
    "COL_NOTE",
    "COL_STATUS",
    "COL_TO",
    "COL_TYPE",
    "PLACEHOLDER_PREFIX",
    "QUICKEN_HEADER",
    "REQUIRED_COLUMNS",
    "ConversionConfig",
    "ConversionResult",
    "ParsedHeader",
    "QuickenRecord",
    "RunSummary",
    "VenmoRow",
]
