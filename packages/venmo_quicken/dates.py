"""Locale-independent datetime parsing and pattern-based formatting.

Venmo exports timestamps as ISO-8601 (``2025-08-07T01:44:44``); older
statements used ``2023-05-01 10:15:00`` or US-style ``05/01/2023 10:15:00``.
:func:`parse_datetime` accepts all of these without consulting the host
locale.

Output dates are rendered from a .NET-style custom pattern such as
``MM/dd/yyyy``, the notation Quicken users already know from its import
dialogs. :func:`format_datetime` implements the custom specifiers with
invariant English month/day names; ``/`` and ``:`` are emitted literally.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

from .errors import DateParseError

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Invariant-culture equivalents of the single-letter standard patterns we honor.
_STANDARD_PATTERNS = {
    "d": "MM/dd/yyyy",
    "D": "dddd, dd MMMM yyyy",
    "s": "yyyy'-'MM'-'dd'T'HH':'mm':'ss",
}

_US_FORMATS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y",
)

_SPECIFIERS = frozenset("yMdHhmsfFt")


def parse_datetime(value: str) -> datetime:
    """Parse ``value`` with fixed, locale-independent rules.

    Timezone designators are accepted but not converted: the wall-clock time
    as written in the export is what gets formatted.
    """

    s = value.strip()
    if not s:
        raise DateParseError("empty datetime")

    iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
    try:
        return datetime.fromisoformat(iso).replace(tzinfo=None)
    except ValueError:
        pass

    for fmt in _US_FORMATS:
        try:
            return datetime.strptime(s, fmt)
        except ValueError:
            continue
    raise DateParseError(f"unrecognized datetime: {value!r}")


def _tokens(pattern: str) -> Iterator[tuple[str, int] | str]:
    """Yield ``(specifier, run_length)`` pairs and literal strings."""

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch in ("'", '"'):
            end = pattern.find(ch, i + 1)
            if end < 0:
                raise ValueError(f"unterminated quoted literal in date pattern {pattern!r}")
            yield pattern[i + 1 : end]
            i = end + 1
        elif ch == "\\":
            if i + 1 >= n:
                raise ValueError(f"dangling escape in date pattern {pattern!r}")
            yield pattern[i + 1]
            i += 2
        elif ch == "%":
            # "%d" means the single custom specifier "d", not the standard pattern.
            i += 1
        elif ch in _SPECIFIERS:
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            yield ch, j - i
            i = j
        else:
            yield ch
            i += 1


def _render(spec: str, count: int, dt: datetime) -> str:
    if spec == "y":
        if count == 1:
            return str(dt.year % 100)
        if count == 2:
            return f"{dt.year % 100:02d}"
        return f"{dt.year:0{count}d}"
    if spec == "M":
        if count >= 4:
            return _MONTHS[dt.month - 1]
        if count == 3:
            return _MONTHS[dt.month - 1][:3]
        return f"{dt.month:0{count}d}"
    if spec == "d":
        if count >= 4:
            return _DAYS[dt.weekday()]
        if count == 3:
            return _DAYS[dt.weekday()][:3]
        return f"{dt.day:0{count}d}"
    if spec == "H":
        return f"{dt.hour:0{min(count, 2)}d}"
    if spec == "h":
        return f"{(dt.hour % 12) or 12:0{min(count, 2)}d}"
    if spec == "m":
        return f"{dt.minute:0{min(count, 2)}d}"
    if spec == "s":
        return f"{dt.second:0{min(count, 2)}d}"
    if spec in ("f", "F"):
        if count > 7:
            raise ValueError("at most 7 fractional-second digits are supported")
        digits = f"{dt.microsecond:06d}0"[:count]
        return digits if spec == "f" else digits.rstrip("0")
    # "t"
    designator = "AM" if dt.hour < 12 else "PM"
    return designator[:1] if count == 1 else designator


def format_datetime(dt: datetime, pattern: str) -> str:
    """Render ``dt`` using a .NET-style custom (or ``d``/``D``/``s``) pattern."""

    if not pattern:
        raise ValueError("date pattern must not be empty")
    if len(pattern) == 1:
        if pattern not in _STANDARD_PATTERNS:
            raise ValueError(f"unsupported standard date pattern: {pattern!r}")
        pattern = _STANDARD_PATTERNS[pattern]

    parts: list[str] = []
    for tok in _tokens(pattern):
        if isinstance(tok, tuple):
            parts.append(_render(tok[0], tok[1], dt))
        else:
            parts.append(tok)
    return "".join(parts)


def validate_pattern(pattern: str) -> str:
    """Raise ``ValueError`` when ``pattern`` cannot be rendered; else return it."""

    format_datetime(datetime(2000, 1, 1, 13, 5, 9, 120000), pattern)
    return pattern


__all__ = ["format_datetime", "parse_datetime", "validate_pattern"]
