"""Locate the transaction header inside a Venmo statement export.

Venmo statements open with a few human-readable lines (account holder,
statement period) before the real column header, and the header itself has
unlabeled cells: a leading empty column in newer exports and blank trailing
columns in older ones. This module finds the header, gives each blank cell a
unique placeholder name and parses everything from the header onward.

Contract
--------
- The header line's cells must begin with (optionally after one empty cell)
  ``ID, Datetime, Type, Status, Note, From, To, Amount (total)``; any number
  of further columns may follow.
- Blank header cells become ``Ignore<N>`` where ``N`` is the 1-based column
  index, so ``csv.DictReader`` keeps every column distinct.
- Lines before the header are discarded.

Failure mode
------------
``HeaderNotFoundError`` when no line matches; ``EmptyPayloadError`` when the
header is followed by no data rows.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence
from dataclasses import dataclass

from ..errors import EmptyPayloadError, HeaderNotFoundError
from ..logging_setup import get_logger
from ..models import PLACEHOLDER_PREFIX, REQUIRED_COLUMNS, ParsedHeader, VenmoRow

logger = get_logger("venmo_quicken.ingest.header")


@dataclass(frozen=True, slots=True)
class HeaderLocation:
    """Zero-based line index of the header, its corrected text and the
    names synthesized for blank cells."""

    index: int
    line: str
    placeholders: frozenset[str] = frozenset()


def _split_cells(line: str) -> list[str]:
    rows = list(csv.reader([line.rstrip("\r\n")]))
    return rows[0] if rows else []


def _is_header(cells: Sequence[str]) -> bool:
    stripped = [c.strip() for c in cells]
    if stripped and stripped[0] == "":
        stripped = stripped[1:]
    return tuple(stripped[: len(REQUIRED_COLUMNS)]) == REQUIRED_COLUMNS


def fix_header_cells(cells: Sequence[str]) -> list[str]:
    """Replace blank cells with ``Ignore<1-based column index>``."""

    return [
        c.strip() if c.strip() else f"{PLACEHOLDER_PREFIX}{i}" for i, c in enumerate(cells, start=1)
    ]


def _join_cells(cells: Sequence[str]) -> str:
    buf = io.StringIO()
    csv.writer(buf, lineterminator="").writerow(cells)
    return buf.getvalue()


def locate_header(lines: Sequence[str]) -> HeaderLocation:
    """Find the first header line and return it with blank cells renamed."""

    for idx, line in enumerate(lines):
        cells = _split_cells(line)
        if _is_header(cells):
            fixed = fix_header_cells(cells)
            return HeaderLocation(
                index=idx,
                line=_join_cells(fixed),
                placeholders=frozenset(
                    name for name, c in zip(fixed, cells, strict=True) if not c.strip()
                ),
            )

    raise HeaderNotFoundError(
        "Venmo export: could not locate the transaction header. Expected a line starting "
        "with: " + ", ".join(REQUIRED_COLUMNS)
    )


def _line_ending(line: str) -> str:
    # csv only ends records on CR/LF; other separators str.splitlines honors
    # (NEL, U+2028, form feed) are swapped for CRLF so the header stays its
    # own record.
    if line.endswith("\r\n"):
        return "\r\n"
    if line.endswith(("\n", "\r")):
        return line[-1]
    return "\r\n"


def read_rows(text: str) -> tuple[ParsedHeader, list[VenmoRow]]:
    """Parse ``text`` from the located header and bind each data line.

    Original line endings are preserved when the payload is rejoined so that
    quoted cells spanning several lines stay intact.
    """

    lines = text.splitlines(keepends=True)
    loc = locate_header(lines)
    payload = [loc.line + _line_ending(lines[loc.index]), *lines[loc.index + 1 :]]

    reader = csv.DictReader(io.StringIO("".join(payload)), restval="")
    columns = tuple(reader.fieldnames or ())
    header = ParsedHeader(
        columns=columns,
        placeholders=loc.placeholders,
    )
    logger.debug(
        "header at line %d with %d columns; placeholders: %s",
        loc.index,
        len(columns),
        sorted(header.placeholders) or "none",
    )

    rows: list[VenmoRow] = []
    for n, raw in enumerate(reader, start=1):
        # DictReader gathers surplus cells under a None key; drop them.
        cells = {k: (v or "").strip() for k, v in raw.items() if k is not None}
        rows.append(VenmoRow.bind(n, cells, header))

    if not rows:
        raise EmptyPayloadError(
            f"Venmo export: header found at line {loc.index + 1} but no data rows follow it."
        )
    return header, rows


__all__ = ["HeaderLocation", "fix_header_cells", "locate_header", "read_rows"]
