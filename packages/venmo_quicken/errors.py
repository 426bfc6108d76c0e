"""Error taxonomy for the Venmo → Quicken conversion.

Every failure the converter raises derives from :class:`ConversionError` so
the CLI can report them uniformly. Row-level value problems additionally
derive from ``ValueError`` and structural problems with the export from
``csv.Error``, matching how the stdlib signals the same kinds of failure.

Classification outcomes (blank lines, balance summaries, rows without a
``Datetime``) are not errors and never raise.
"""

from __future__ import annotations

import csv


class ConversionError(Exception):
    """Base class for all conversion failures."""


class InputNotFoundError(ConversionError, FileNotFoundError):
    """The input path does not exist or is not a regular file."""


class HeaderNotFoundError(ConversionError, csv.Error):
    """No line in the input matches the Venmo transaction header."""


class EmptyPayloadError(ConversionError, csv.Error):
    """The header was found but no data rows follow it."""


class MissingFieldError(ConversionError, ValueError):
    """A required field is blank on a row that passed classification."""

    def __init__(self, field: str, *, row: int | None = None) -> None:
        self.field = field
        self.row = row
        where = f" (data row {row})" if row is not None else ""
        super().__init__(f"required field {field!r} is empty{where}")


class DateParseError(ConversionError, ValueError):
    """A ``Datetime`` value could not be parsed."""


class AmountParseError(ConversionError, ValueError):
    """An ``Amount (total)`` value is not a valid decimal."""


__all__ = [
    "AmountParseError",
    "ConversionError",
    "DateParseError",
    "EmptyPayloadError",
    "HeaderNotFoundError",
    "InputNotFoundError",
    "MissingFieldError",
]
