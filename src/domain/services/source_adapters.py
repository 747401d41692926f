"""Adapters turning raw API ledger records into LedgerEntry values.

Every adapter is total: a malformed record is kept with a zero amount or an
unparseable date rather than dropped, so the row stays visible on the
statement.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from src.domain.constants import (
    CHARGE,
    COUNTERPARTY_BUSINESS,
    COUNTERPARTY_CUSTOMER,
    DEFAULT_AGENCY_NAME,
    INCREASING_CATEGORIES,
    INVOICE_CATEGORY_BY_TYPE,
    RESIDENCE_CATEGORY_BY_TYPE,
    SOURCE_INVOICE,
    SOURCE_WALLET,
    WALLET_PAYMENT,
    WALLET_PAYMENT_LABEL,
    WALLET_PAYMENT_TYPE,
    WALLET_REFERENCE_LABELS,
)
from src.domain.models.ledger import LedgerEntry
from src.domain.policies.counterparty import is_business_counterparty
from src.domain.services.parsing import (
    parse_amount,
    parse_occurred_at,
    text_field,
)

Record = Mapping[str, Any]


def normalize_invoice_records(records: Iterable[Record]) -> list[LedgerEntry]:
    """Normalize customer invoice ledger rows.

    Args:
        records: Rows shaped like ``{TRANSACTION_Type, Passenger_Name, date,
            Identification, Orgin, Destination, Debit, Credit}``.

    Returns:
        list[LedgerEntry]: One entry per record, in input order.
    """
    entries = []
    for record in records:
        label = text_field(record.get("TRANSACTION_Type"))
        category = INVOICE_CATEGORY_BY_TYPE.get(label, CHARGE)
        entries.append(
            LedgerEntry(
                category=category,
                occurred_at=parse_occurred_at(record.get("date")),
                amount=_directional_amount(
                    category,
                    increase=record.get("Debit"),
                    decrease=record.get("Credit"),
                ),
                label=label,
                subject_name=text_field(record.get("Passenger_Name")),
                source_origin=SOURCE_INVOICE,
                identification=text_field(record.get("Identification")),
                origin=text_field(record.get("Orgin")),
                destination=text_field(record.get("Destination")),
            )
        )
    return entries


def normalize_wallet_records(
    records: Iterable[Record],
    currency_id: int | None = None,
) -> list[LedgerEntry]:
    """Normalize wallet transactions that settled ledger charges.

    Deposits, refunds and withdrawals only move the wallet balance, so only
    ``payment`` transactions are kept.

    Args:
        records: Wallet transaction rows.
        currency_id: When given, rows of any other currency are skipped.

    Returns:
        list[LedgerEntry]: ``wallet_payment`` entries, in input order.
    """
    entries = []
    for record in records:
        if text_field(record.get("transaction_type")).lower() != WALLET_PAYMENT_TYPE:
            continue
        if currency_id is not None and not _same_id(
            record.get("currency_id"),
            currency_id,
        ):
            continue
        reference_id = text_field(record.get("reference_id"))
        entries.append(
            LedgerEntry(
                category=WALLET_PAYMENT,
                occurred_at=parse_occurred_at(record.get("datetime")),
                amount=parse_amount(record.get("amount")),
                label=WALLET_PAYMENT_LABEL,
                subject_name=wallet_reference_label(
                    record.get("reference_type"),
                    reference_id,
                ),
                source_origin=SOURCE_WALLET,
                identification=reference_id,
            )
        )
    return entries


def normalize_residence_records(
    records: Iterable[Record],
) -> list[LedgerEntry]:
    """Normalize residence ledger rows, including fines."""
    entries = []
    for record in records:
        label = text_field(record.get("transactionType"))
        category = RESIDENCE_CATEGORY_BY_TYPE.get(label, CHARGE)
        entries.append(
            LedgerEntry(
                category=category,
                occurred_at=parse_occurred_at(record.get("dt")),
                amount=_directional_amount(
                    category,
                    increase=record.get("debit"),
                    decrease=record.get("credit"),
                ),
                label=label,
                subject_name=text_field(record.get("passenger_name")),
                source_origin=SOURCE_INVOICE,
                identification=text_field(record.get("visaType")),
            )
        )
    return entries


def normalize_affiliate_records(
    records: Iterable[Record],
    agency_name: str = DEFAULT_AGENCY_NAME,
) -> list[LedgerEntry]:
    """Normalize affiliate ledger rows and tag their counterparty.

    Rows whose ``customer_name`` is the agency's own name are business-side.
    Their columns are mirrored: the agency's charges arrive as credits and
    its payments and refunds as debits.

    Args:
        records: Affiliate ledger rows.
        agency_name: Name identifying the agency's own rows.

    Returns:
        list[LedgerEntry]: Entries carrying a ``counterparty`` tag.
    """
    entries = []
    for record in records:
        label = text_field(record.get("TRANSACTION_Type"))
        category = INVOICE_CATEGORY_BY_TYPE.get(label, CHARGE)
        customer_name = text_field(record.get("customer_name"))
        is_business = is_business_counterparty(customer_name, agency_name)
        debit = record.get("Debit")
        credit = record.get("Credit")
        if is_business:
            amount = _directional_amount(category, increase=credit, decrease=debit)
        else:
            amount = _directional_amount(category, increase=debit, decrease=credit)
        occurred_at = parse_occurred_at(record.get("datetime"))
        if occurred_at is None:
            occurred_at = parse_occurred_at(record.get("date"))
        entries.append(
            LedgerEntry(
                category=category,
                occurred_at=occurred_at,
                amount=amount,
                label=label,
                subject_name=text_field(record.get("Passenger_Name"))
                or customer_name,
                source_origin=SOURCE_INVOICE,
                identification=text_field(record.get("Identification")),
                origin=text_field(record.get("Orgin")),
                destination=text_field(record.get("Destination")),
                counterparty=(
                    COUNTERPARTY_BUSINESS if is_business else COUNTERPARTY_CUSTOMER
                ),
            )
        )
    return entries


def wallet_reference_label(reference_type, reference_id: str) -> str:
    """Return the display label for a wallet payment's reference.

    Args:
        reference_type: Raw reference type (residence, visa, ticket...).
        reference_id: Reference identifier as text.

    Returns:
        str: Label such as ``"Residence #12"``, or ``"Payment"``.
    """
    kind = WALLET_REFERENCE_LABELS.get(text_field(reference_type).lower())
    if kind is None:
        return "Payment"
    return f"{kind} #{reference_id}"


def _directional_amount(category: str, *, increase, decrease) -> Decimal:
    # The category decides direction; fall back to the other column when
    # the expected one is empty.
    if category in INCREASING_CATEGORIES:
        primary, secondary = increase, decrease
    else:
        primary, secondary = decrease, increase
    amount = parse_amount(primary)
    if amount == 0:
        amount = parse_amount(secondary)
    return amount


def _same_id(raw, expected: int) -> bool:
    try:
        return int(str(raw).strip()) == int(expected)
    except (TypeError, ValueError):
        return False


__all__ = [
    "normalize_invoice_records",
    "normalize_wallet_records",
    "normalize_residence_records",
    "normalize_affiliate_records",
    "wallet_reference_label",
]
