"""Pending payments roll-up across many customers of one currency."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEFAULT_PENDING_EPSILON
from src.domain.models.rollup import (
    PendingAccount,
    PendingRollup,
    PendingRollupRow,
)


def reconcile_pending_account(
    account: PendingAccount,
    logger: Logger | None = None,
) -> PendingRollupRow:
    """Subtract wallet payments from the invoice-side outstanding.

    A wallet-funded settlement shows up as a wallet debit while the invoice
    charge still looks unpaid, so the wallet payment total for the same
    customer and currency is removed from the invoice outstanding. Wallet
    totals larger than the invoice outstanding are flagged, not clamped.

    Args:
        account: Inputs for one (customer, currency) pair.
        logger: Optional logger for discrepancy warnings.

    Returns:
        PendingRollupRow: Row with the reconciled outstanding.
    """
    outstanding = account.invoice_outstanding - account.wallet_paid
    exceeds = account.wallet_paid > 0 and outstanding < 0
    if exceeds and logger is not None:
        logger.warning(
            f"Wallet payments exceed invoice outstanding for "
            f"customer={account.customer_id} currency={account.currency_id}: "
            f"invoice={account.invoice_outstanding}, "
            f"wallet={account.wallet_paid}"
        )
    return PendingRollupRow(
        account=account,
        outstanding=outstanding,
        wallet_exceeds_invoice=exceeds,
    )


def compute_pending_rollup(
    accounts: Iterable[PendingAccount],
    epsilon: Decimal = DEFAULT_PENDING_EPSILON,
    logger: Logger | None = None,
) -> PendingRollup:
    """Reconcile accounts and keep those with a real balance.

    Args:
        accounts: Per-customer inputs, in display order.
        epsilon: Outstanding amounts within this distance of zero are
            discarded.
        logger: Optional logger for discrepancy warnings.

    Returns:
        PendingRollup: Kept rows in input order and their grand total.
    """
    rows = []
    discarded = 0
    grand_total = Decimal("0")
    for account in accounts:
        row = reconcile_pending_account(account, logger)
        if abs(row.outstanding) <= epsilon:
            discarded += 1
            continue
        rows.append(row)
        grand_total += row.outstanding
    return PendingRollup(
        rows=tuple(rows),
        grand_total=grand_total,
        discarded_count=discarded,
    )


__all__ = ["reconcile_pending_account", "compute_pending_rollup"]
