"""Aggregation of ledger entries into statement totals.

Totals are reduced directly from entry categories and never from running
balances, so the two computations can be checked against each other.
"""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    CHARGE,
    COUNTERPARTY_BUSINESS,
    FINE,
    FINE_PAYMENT,
    PAYMENT,
    REFUND,
    WALLET_PAYMENT,
)
from src.domain.models.ledger import (
    AffiliateLedgerTotals,
    LedgerEntry,
    LedgerTotals,
)


def summarize(entries: Iterable[LedgerEntry]) -> LedgerTotals:
    """Sum entry amounts per category.

    Args:
        entries: Entries of a single currency.

    Returns:
        LedgerTotals: Category totals and the outstanding balance.
    """
    sums = {
        CHARGE: Decimal("0"),
        PAYMENT: Decimal("0"),
        REFUND: Decimal("0"),
        FINE: Decimal("0"),
        FINE_PAYMENT: Decimal("0"),
        WALLET_PAYMENT: Decimal("0"),
    }
    for entry in entries:
        sums[entry.category] += entry.amount

    total_paid = sums[PAYMENT] + sums[WALLET_PAYMENT]
    outstanding = (
        sums[CHARGE]
        - total_paid
        - sums[REFUND]
        + sums[FINE]
        - sums[FINE_PAYMENT]
    )
    return LedgerTotals(
        total_charges=sums[CHARGE],
        total_paid=total_paid,
        total_refund=sums[REFUND],
        total_fine_charges=sums[FINE],
        total_fine_paid=sums[FINE_PAYMENT],
        outstanding_balance=outstanding,
        total_wallet_paid=sums[WALLET_PAYMENT],
    )


def summarize_affiliate(
    entries: Iterable[LedgerEntry],
) -> AffiliateLedgerTotals:
    """Split affiliate entries by counterparty and total each side.

    Args:
        entries: Affiliate ledger entries tagged with a counterparty.

    Returns:
        AffiliateLedgerTotals: Per-side totals and the combined outstanding.
    """
    customer_side = []
    business_side = []
    for entry in entries:
        if entry.counterparty == COUNTERPARTY_BUSINESS:
            business_side.append(entry)
        else:
            customer_side.append(entry)

    customer = summarize(customer_side)
    business = summarize(business_side)
    affiliate_subtotal = customer.outstanding_balance
    business_subtotal = business.outstanding_balance
    return AffiliateLedgerTotals(
        customer=customer,
        business=business,
        affiliate_subtotal=affiliate_subtotal,
        business_subtotal=business_subtotal,
        outstanding_balance=affiliate_subtotal - business_subtotal,
    )


__all__ = ["summarize", "summarize_affiliate"]
