"""CLI for the ``venmo_quicken`` package.

Exposes :func:`cmd_convert` (plain callable returning an exit status) and a
Typer-based console interface around it. Defaults for the account name and
the output date pattern can come from the environment
(``VENMO_QUICKEN_ACCOUNT``, ``VENMO_QUICKEN_DATE_FORMAT``), including a local
``.env`` loaded with ``python-dotenv``. Conversion logic lives in
``venmo_quicken.api``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer.models import OptionInfo

from .logging_setup import configure_logging

ACCOUNT_ENV = "VENMO_QUICKEN_ACCOUNT"
DATE_FORMAT_ENV = "VENMO_QUICKEN_DATE_FORMAT"


def cmd_convert(
    input_path: str,
    *,
    output_path: str | None = None,
    account: str | None = None,
    date_format: str | None = None,
) -> int:
    """Convert a Venmo statement CSV into a Quicken import CSV.

    Options left as ``None`` fall back to the environment and then to the
    built-in defaults (``Venmo`` and ``MM/dd/yyyy``). Errors are written to
    stderr and a non-zero status is returned; on success a one-line summary
    is printed and ``0`` is returned.
    """

    from .api import convert_file, default_output_path
    from .errors import ConversionError
    from .models import ConversionConfig

    settings: dict[str, str] = {}
    account = account if account is not None else os.getenv(ACCOUNT_ENV)
    date_format = date_format if date_format is not None else os.getenv(DATE_FORMAT_ENV)
    if account is not None:
        settings["account"] = account
    if date_format is not None:
        settings["date_format"] = date_format

    try:
        config = ConversionConfig(**settings)
    except ValidationError as e:
        errs = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        print(f"Error: invalid configuration: {errs}", file=sys.stderr)
        return 2

    dest = Path(output_path) if output_path else default_output_path(input_path)

    try:
        summary = convert_file(input_path, dest, config)
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: input is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(
        f"Wrote {summary.written} transactions to {dest} "
        f"(skipped {summary.skipped_balance} balance lines)."
    )
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Convert a Venmo statement CSV into a CSV Quicken can import. "
        "Loads VENMO_QUICKEN_* defaults from a local .env before running."
    ),
)


# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
INPUT_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--input",
    "-i",
    help="Path to the Venmo statement CSV",
    dir_okay=False,
    file_okay=True,
    exists=False,  # missing files are reported by the handler
)
OUTPUT_OPTION: OptionInfo = typer.Option(
    "--output",
    "-o",
    help="Destination CSV (default: <input>_for_Quicken.csv beside the input)",
    dir_okay=False,
)


@app.command("convert")
def convert_cmd(
    input_path: Annotated[Path, INPUT_OPTION],
    output_path: Annotated[Path | None, OUTPUT_OPTION] = None,
    *,
    account: str | None = typer.Option(
        None, help=f"Quicken account name (env {ACCOUNT_ENV}, default 'Venmo')."
    ),
    date_format: str | None = typer.Option(
        None,
        help=f"Output date pattern, e.g. MM/dd/yyyy (env {DATE_FORMAT_ENV}).",
    ),
) -> None:
    """Convert one Venmo export and report how many rows were written."""

    code = cmd_convert(
        str(input_path),
        output_path=str(output_path) if output_path is not None else None,
        account=account,
        date_format=date_format,
    )
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    *,
    log_level: str | None = typer.Option(
        None, help="Log level name or number (env VENMO_QUICKEN_LOG_LEVEL, default INFO)."
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding
    variables already set) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    try:
        configure_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
