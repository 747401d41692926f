"""Domain models for the pending payments roll-up."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PendingAccount:
    """Inputs for one (customer, currency) pair of the roll-up.

    Attributes:
        customer_id: Customer identifier in the agency API.
        customer_name: Display name.
        currency_id: Currency identifier of the pair.
        invoice_outstanding: Outstanding amount from invoice-side entries.
        wallet_paid: Wallet payments of the same currency.
        customer_email: Optional contact email.
        customer_phone: Optional contact phone.
        wallet_unavailable: True when wallet data could not be fetched.
        ledger_unavailable: True when the invoice ledger could not be
            fetched and the API-reported pending total was used instead.
    """

    customer_id: int
    customer_name: str
    currency_id: int
    invoice_outstanding: Decimal
    wallet_paid: Decimal = Decimal("0")
    customer_email: str = ""
    customer_phone: str = ""
    wallet_unavailable: bool = False
    ledger_unavailable: bool = False


@dataclass(frozen=True)
class PendingRollupRow:
    """Customer kept in the roll-up with its reconciled outstanding."""

    account: PendingAccount
    outstanding: Decimal
    wallet_exceeds_invoice: bool = False

    @property
    def degraded(self) -> bool:
        """Return True when part of the source data was missing."""
        return self.account.wallet_unavailable or self.account.ledger_unavailable


@dataclass(frozen=True)
class PendingRollup:
    """Customers with a real balance for one currency."""

    rows: tuple[PendingRollupRow, ...]
    grand_total: Decimal
    discarded_count: int = 0


__all__ = ["PendingAccount", "PendingRollupRow", "PendingRollup"]
