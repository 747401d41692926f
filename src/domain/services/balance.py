"""Running balance computation over merged ledger entries."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import COUNTERPARTY_BUSINESS, INCREASING_CATEGORIES
from src.domain.models.ledger import AnnotatedEntry, LedgerEntry


def signed_effect(entry: LedgerEntry) -> Decimal:
    """Return the change an entry applies to the balance.

    Charges and fines add to the balance; payments, refunds, fine payments
    and wallet payments subtract. Business-side affiliate entries apply the
    mirrored effect.
    """
    if entry.category in INCREASING_CATEGORIES:
        effect = entry.amount
    else:
        effect = -entry.amount
    if entry.counterparty == COUNTERPARTY_BUSINESS:
        return -effect
    return effect


def compute_running_balances(
    entries: Iterable[LedgerEntry],
) -> list[AnnotatedEntry]:
    """Annotate each entry with the balance after it is applied.

    Args:
        entries: Entries in statement order.

    Returns:
        list[AnnotatedEntry]: New annotated entries in the same order.
    """
    balance = Decimal("0")
    annotated = []
    for entry in entries:
        balance += signed_effect(entry)
        annotated.append(AnnotatedEntry(entry=entry, running_balance=balance))
    return annotated


__all__ = ["signed_effect", "compute_running_balances"]
