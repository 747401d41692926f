"""Tests for running balances and signed effects."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.models.ledger import LedgerEntry
from src.domain.services.balance import compute_running_balances, signed_effect


def _entry(category: str, amount: str, counterparty: str = "customer") -> LedgerEntry:
    return LedgerEntry(
        category=category,
        occurred_at=datetime(2024, 1, 1),
        amount=Decimal(amount),
        counterparty=counterparty,
    )


@pytest.mark.parametrize(
    ("category", "expected"),
    [
        ("charge", Decimal("10")),
        ("fine", Decimal("10")),
        ("payment", Decimal("-10")),
        ("refund", Decimal("-10")),
        ("fine_payment", Decimal("-10")),
        ("wallet_payment", Decimal("-10")),
    ],
)
def test_signed_effect_follows_category(category, expected) -> None:
    """Charges and fines increase the balance, everything else decreases it."""
    assert signed_effect(_entry(category, "10")) == expected


def test_signed_effect_is_mirrored_for_business_side() -> None:
    """Business-side affiliate entries apply the opposite effect."""
    assert signed_effect(_entry("payment", "40", "business")) == Decimal("40")
    assert signed_effect(_entry("charge", "40", "business")) == Decimal("-40")


def test_running_balance_accumulates_in_order() -> None:
    """Charge 100, payment 40, payment 30 gives 100, 60, 30."""
    entries = [
        _entry("charge", "100"),
        _entry("payment", "40"),
        _entry("payment", "30"),
    ]

    annotated = compute_running_balances(entries)

    assert [item.running_balance for item in annotated] == [
        Decimal("100"),
        Decimal("60"),
        Decimal("30"),
    ]
    assert [item.entry for item in annotated] == entries


def test_running_balance_can_go_negative() -> None:
    """Overpayments produce a negative balance."""
    annotated = compute_running_balances(
        [_entry("charge", "50"), _entry("payment", "80")]
    )

    assert annotated[-1].running_balance == Decimal("-30")


def test_running_balance_of_empty_sequence() -> None:
    """No entries means no annotated entries."""
    assert compute_running_balances([]) == []
