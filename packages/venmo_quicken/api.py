"""Public conversion entry points for the ``venmo_quicken`` package.

The whole run happens in memory: read the export, locate the header, parse
and classify every row, transform the survivors and encode the output once.
Any row-level parse failure aborts the run; nothing is written in that case.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from .classify import RowAction, classify_row
from .errors import InputNotFoundError
from .ingest.header import read_rows
from .logging_setup import get_logger
from .models import ConversionConfig, ConversionResult, QuickenRecord, RunSummary
from .normalizers import to_quicken_record
from .quicken_csv import encode_csv

logger = get_logger("venmo_quicken.api")

INPUT_ENCODING = "utf-8-sig"
OUTPUT_SUFFIX = "_for_Quicken.csv"


def convert_text(text: str, config: ConversionConfig | None = None) -> ConversionResult:
    """Convert decoded export text into Quicken records plus run counts."""

    cfg = config or ConversionConfig()
    _header, rows = read_rows(text)

    records: list[QuickenRecord] = []
    skipped_balance = 0
    discarded = 0
    for row in rows:
        action, rule = classify_row(row)
        if action is RowAction.DISCARD_BALANCE:
            skipped_balance += 1
            logger.debug("data row %d: skipped balance line (%s)", row.line, rule)
            continue
        if action is RowAction.DISCARD_SILENT:
            discarded += 1
            logger.debug("data row %d: discarded (%s)", row.line, rule)
            continue
        records.append(to_quicken_record(row, cfg))

    summary = RunSummary(
        written=len(records), skipped_balance=skipped_balance, discarded=discarded
    )
    logger.info(
        "converted %d rows: %d written, %d balance lines skipped, %d discarded",
        summary.total_rows,
        summary.written,
        summary.skipped_balance,
        summary.discarded,
    )
    return ConversionResult(records=tuple(records), summary=summary)


def convert_bytes(
    data: bytes, config: ConversionConfig | None = None
) -> tuple[bytes, RunSummary]:
    """Convert raw export bytes into the encoded Quicken CSV."""

    result = convert_text(data.decode(INPUT_ENCODING), config)
    return encode_csv(result.records), result.summary


def default_output_path(input_path: str | PathLike[str]) -> Path:
    """``<dir>/<stem>_for_Quicken.csv`` beside the input file."""

    p = Path(input_path)
    return p.with_name(p.stem + OUTPUT_SUFFIX)


def convert_file(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str] | None = None,
    config: ConversionConfig | None = None,
) -> RunSummary:
    """Convert ``input_path`` and write the result to ``output_path``.

    The input must exist before anything else happens; the output is written
    in one operation only after every row converted successfully.
    """

    src = Path(input_path)
    if not src.is_file():
        raise InputNotFoundError(f"input file not found: {src}")
    dest = Path(output_path) if output_path is not None else default_output_path(src)

    payload, summary = convert_bytes(src.read_bytes(), config)
    dest.write_bytes(payload)
    logger.debug("wrote %d bytes to %s", len(payload), dest)
    return summary


__all__ = [
    "convert_bytes",
    "convert_file",
    "convert_text",
    "default_output_path",
]
