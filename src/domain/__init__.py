"""Domain package for ledger reconciliation rules and core models."""

from .constants import DEFAULT_AGENCY_NAME, DEFAULT_PENDING_EPSILON
from .models import (
    AffiliateLedgerStatement,
    AffiliateLedgerTotals,
    AnnotatedEntry,
    LedgerEntry,
    LedgerStatement,
    LedgerTotals,
    PendingAccount,
    PendingRollup,
    PendingRollupRow,
)
from .policies import is_business_counterparty
from .services import (
    build_affiliate_statement,
    build_statement,
    compute_pending_rollup,
    compute_running_balances,
    merge_entries,
    normalize_affiliate_records,
    normalize_invoice_records,
    normalize_residence_records,
    normalize_wallet_records,
    summarize,
    summarize_affiliate,
    validate_statement,
)

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
    "DEFAULT_AGENCY_NAME",
    "DEFAULT_PENDING_EPSILON",
    "is_business_counterparty",
    "normalize_invoice_records",
    "normalize_wallet_records",
    "normalize_residence_records",
    "normalize_affiliate_records",
    "merge_entries",
    "compute_running_balances",
    "summarize",
    "summarize_affiliate",
    "build_statement",
    "build_affiliate_statement",
    "validate_statement",
    "compute_pending_rollup",
]
