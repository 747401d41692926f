"""Domain models for reconciled ledger statements."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Literal

LedgerCategory = Literal[
    "charge",
    "payment",
    "refund",
    "fine",
    "fine_payment",
    "wallet_payment",
]
SourceOrigin = Literal["invoice", "wallet"]
Counterparty = Literal["customer", "business"]


@dataclass(frozen=True)
class LedgerEntry:
    """Normalized transaction shared by every ledger source.

    Attributes:
        category: Drives the balance sign; the free-text label never does.
        occurred_at: Transaction time, or None when the source date could
            not be parsed (such entries sort last).
        amount: Non-negative magnitude in the statement currency.
        label: Transaction type exactly as the source reported it.
        subject_name: Passenger or customer shown on the row.
        source_origin: Ledger the entry was read from.
        identification: Free-text reference (passport, ticket, id).
        origin: Free-text origin shown on the row.
        destination: Free-text destination shown on the row.
        counterparty: Side of an affiliate ledger the entry belongs to.
    """

    category: LedgerCategory
    occurred_at: datetime | None
    amount: Decimal
    label: str = ""
    subject_name: str = ""
    source_origin: SourceOrigin = "invoice"
    identification: str = ""
    origin: str = ""
    destination: str = ""
    counterparty: Counterparty = "customer"


@dataclass(frozen=True)
class AnnotatedEntry:
    """Ledger entry with the account balance right after it is applied."""

    entry: LedgerEntry
    running_balance: Decimal


@dataclass(frozen=True)
class LedgerTotals:
    """Per-category sums of a ledger.

    Attributes:
        total_charges: Sum of charge amounts.
        total_paid: Sum of payment and wallet payment amounts.
        total_refund: Sum of refund amounts.
        total_fine_charges: Sum of fine amounts.
        total_fine_paid: Sum of fine payment amounts.
        outstanding_balance: Net amount still owed.
        total_wallet_paid: Wallet payments, already included in total_paid.
    """

    total_charges: Decimal
    total_paid: Decimal
    total_refund: Decimal
    total_fine_charges: Decimal
    total_fine_paid: Decimal
    outstanding_balance: Decimal
    total_wallet_paid: Decimal = Decimal("0")

    @classmethod
    def zero(cls) -> "LedgerTotals":
        """Return totals for a ledger without activity."""
        return cls(
            total_charges=Decimal("0"),
            total_paid=Decimal("0"),
            total_refund=Decimal("0"),
            total_fine_charges=Decimal("0"),
            total_fine_paid=Decimal("0"),
            outstanding_balance=Decimal("0"),
        )


@dataclass(frozen=True)
class LedgerStatement:
    """Chronological entries with running balances and their totals.

    Attributes:
        entries: Annotated entries in statement order.
        totals: Totals reduced from the same entries.
        currency_code: Display code of the statement currency.
        wallet_unavailable: True when wallet payments could not be fetched
            and the statement only covers the invoice ledger.
    """

    entries: tuple[AnnotatedEntry, ...]
    totals: LedgerTotals
    currency_code: str = ""
    wallet_unavailable: bool = False

    @property
    def closing_balance(self) -> Decimal:
        """Return the running balance of the last entry, or zero."""
        if not self.entries:
            return Decimal("0")
        return self.entries[-1].running_balance


@dataclass(frozen=True)
class AffiliateLedgerTotals:
    """Totals of an affiliate ledger split by counterparty.

    Attributes:
        customer: Totals of rows where the affiliate's customer owes.
        business: Totals of rows where the agency itself is the party.
        affiliate_subtotal: Customer-side outstanding.
        business_subtotal: Business-side outstanding.
        outstanding_balance: affiliate_subtotal minus business_subtotal.
    """

    customer: LedgerTotals
    business: LedgerTotals
    affiliate_subtotal: Decimal
    business_subtotal: Decimal
    outstanding_balance: Decimal


@dataclass(frozen=True)
class AffiliateLedgerStatement:
    """Affiliate ledger entries with split totals."""

    entries: tuple[AnnotatedEntry, ...]
    totals: AffiliateLedgerTotals
    currency_code: str = ""

    @property
    def closing_balance(self) -> Decimal:
        """Return the running balance of the last entry, or zero."""
        if not self.entries:
            return Decimal("0")
        return self.entries[-1].running_balance


__all__ = [
    "LedgerCategory",
    "SourceOrigin",
    "Counterparty",
    "LedgerEntry",
    "AnnotatedEntry",
    "LedgerTotals",
    "LedgerStatement",
    "AffiliateLedgerTotals",
    "AffiliateLedgerStatement",
]
