"""Domain models package."""

from .ledger import (
    AffiliateLedgerStatement,
    AffiliateLedgerTotals,
    AnnotatedEntry,
    LedgerEntry,
    LedgerStatement,
    LedgerTotals,
)
from .rollup import PendingAccount, PendingRollup, PendingRollupRow

__all__ = [
    "LedgerEntry",
    "AnnotatedEntry",
    "LedgerTotals",
    "LedgerStatement",
    "AffiliateLedgerTotals",
    "AffiliateLedgerStatement",
    "PendingAccount",
    "PendingRollupRow",
    "PendingRollup",
]
