"""Public interface for the ``venmo_quicken`` package.

Converts a Venmo statement CSV into a CSV that Quicken can import. This module
only re-exports the stable API and models.
"""

from .api import convert_bytes, convert_file, convert_text, default_output_path
from .errors import (
    AmountParseError,
    ConversionError,
    DateParseError,
    EmptyPayloadError,
    HeaderNotFoundError,
    InputNotFoundError,
    MissingFieldError,
)
from .models import ConversionConfig, ConversionResult, QuickenRecord, RunSummary, VenmoRow

__all__ = [
    # API
    "convert_bytes",
    "convert_file",
    "convert_text",
    "default_output_path",
    # Models
    "ConversionConfig",
    "ConversionResult",
    "QuickenRecord",
    "RunSummary",
    "VenmoRow",
    # Errors
    "AmountParseError",
    "ConversionError",
    "DateParseError",
    "EmptyPayloadError",
    "HeaderNotFoundError",
    "InputNotFoundError",
    "MissingFieldError",
]
