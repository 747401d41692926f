"""Domain services package."""

from .balance import compute_running_balances, signed_effect
from .merge import merge_entries
from .parsing import parse_amount, parse_occurred_at
from .rollup import compute_pending_rollup, reconcile_pending_account
from .source_adapters import (
    normalize_affiliate_records,
    normalize_invoice_records,
    normalize_residence_records,
    normalize_wallet_records,
)
from .statement import build_affiliate_statement, build_statement
from .totals import summarize, summarize_affiliate
from .validation import validate_statement

__all__ = [
    "normalize_invoice_records",
    "normalize_wallet_records",
    "normalize_residence_records",
    "normalize_affiliate_records",
    "parse_amount",
    "parse_occurred_at",
    "merge_entries",
    "compute_running_balances",
    "signed_effect",
    "summarize",
    "summarize_affiliate",
    "build_statement",
    "build_affiliate_statement",
    "validate_statement",
    "reconcile_pending_account",
    "compute_pending_rollup",
]
