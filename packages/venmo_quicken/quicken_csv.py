"""Serialize Quicken records as an importable CSV.

Quicken's CSV import expects the fixed header in :data:`QUICKEN_HEADER`,
CRLF line endings and UTF-8 with a byte-order mark. Fields are quoted only
when they contain a comma, a quote or a line break.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

from .models import QUICKEN_HEADER, QuickenRecord

OUTPUT_ENCODING = "utf-8-sig"


def render_csv(records: Iterable[QuickenRecord]) -> str:
    buf = io.StringIO(newline="")
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(QUICKEN_HEADER)
    for rec in records:
        writer.writerow(rec.as_row())
    return buf.getvalue()


def encode_csv(records: Iterable[QuickenRecord]) -> bytes:
    """Return the complete output file contents, BOM included."""

    return render_csv(records).encode(OUTPUT_ENCODING)


__all__ = ["OUTPUT_ENCODING", "encode_csv", "render_csv"]
