"""Assemble ledger statements from normalized sources."""

from collections.abc import Iterable

from src.domain.models.ledger import (
    AffiliateLedgerStatement,
    LedgerEntry,
    LedgerStatement,
)
from src.domain.services.balance import compute_running_balances
from src.domain.services.merge import merge_entries
from src.domain.services.totals import summarize, summarize_affiliate


def build_statement(
    *sources: Iterable[LedgerEntry],
    currency_code: str = "",
    wallet_unavailable: bool = False,
) -> LedgerStatement:
    """Merge sources, compute running balances and totals.

    Args:
        *sources: Normalized entries from each active ledger source.
        currency_code: Display code of the statement currency.
        wallet_unavailable: Marks a statement built without wallet data.

    Returns:
        LedgerStatement: Empty with zero totals when no source has entries.
    """
    merged = merge_entries(*sources)
    return LedgerStatement(
        entries=tuple(compute_running_balances(merged)),
        totals=summarize(merged),
        currency_code=currency_code,
        wallet_unavailable=wallet_unavailable,
    )


def build_affiliate_statement(
    *sources: Iterable[LedgerEntry],
    currency_code: str = "",
) -> AffiliateLedgerStatement:
    """Build a statement whose totals are split by counterparty."""
    merged = merge_entries(*sources)
    return AffiliateLedgerStatement(
        entries=tuple(compute_running_balances(merged)),
        totals=summarize_affiliate(merged),
        currency_code=currency_code,
    )


__all__ = ["build_statement", "build_affiliate_statement"]
