"""Row classification: decide whether a Venmo row becomes a transaction.

Statements interleave real transfers with blank lines and running-balance
snapshots. Rules are evaluated in order and the first match wins; the order
is part of the contract because balance lines may or may not carry a
``Datetime``, so both balance signatures must be checked before the
"no Datetime" rule.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .models import COL_AMOUNT_TOTAL, VenmoRow


class RowAction(Enum):
    DISCARD_SILENT = "discard"
    DISCARD_BALANCE = "balance"
    PROCEED = "proceed"


@dataclass(frozen=True, slots=True)
class Rule:
    name: str
    predicate: Callable[[VenmoRow], bool]
    action: RowAction


def _is_blank(row: VenmoRow) -> bool:
    return not row.non_empty()


def _lone_placeholder(row: VenmoRow) -> bool:
    populated = row.non_empty()
    return len(populated) == 1 and populated[0] in row.placeholders


def _lone_amount(row: VenmoRow) -> bool:
    return row.non_empty() == [COL_AMOUNT_TOTAL]


def _no_datetime(row: VenmoRow) -> bool:
    return not row.datetime


RULES: tuple[Rule, ...] = (
    Rule("blank", _is_blank, RowAction.DISCARD_SILENT),
    Rule("balance-placeholder", _lone_placeholder, RowAction.DISCARD_BALANCE),
    Rule("balance-amount", _lone_amount, RowAction.DISCARD_BALANCE),
    Rule("no-datetime", _no_datetime, RowAction.DISCARD_SILENT),
)


def classify_row(row: VenmoRow, rules: tuple[Rule, ...] = RULES) -> tuple[RowAction, str | None]:
    """Return the action for ``row`` and the name of the rule that fired.

    Rows no rule claims proceed to field derivation with a ``None`` rule name.
    """

    for rule in rules:
        if rule.predicate(row):
            return rule.action, rule.name
    return RowAction.PROCEED, None


__all__ = ["RULES", "RowAction", "Rule", "classify_row"]
