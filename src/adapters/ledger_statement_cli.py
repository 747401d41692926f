"""CLI adapter printing a customer, residence, or affiliate ledger."""

import os

from src.domain.models.ledger import (
    AffiliateLedgerStatement,
    AnnotatedEntry,
    LedgerStatement,
)
from src.infrastructure.container import (
    build_affiliate_ledger_use_case,
    build_customer_ledger_use_case,
    build_residence_ledger_use_case,
)
from src.infrastructure.logging.logger import get_app_logger

VIEWS = ("customer", "residence", "affiliate")


def _parse_int(name: str, logger) -> int | None:
    """Read a positive integer environment variable.

    Args:
        name: Environment variable name.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed value or None when missing or invalid.
    """
    value = os.getenv(name)
    if not value:
        logger.warning(f"{name} is required.")
        return None
    try:
        parsed = int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None
    if parsed <= 0:
        logger.warning(f"Invalid {name} '{value}'. Expected a positive id.")
        return None
    return parsed


def _format_row(index: int, annotated: AnnotatedEntry) -> str:
    entry = annotated.entry
    when = entry.occurred_at.strftime("%d %b %Y") if entry.occurred_at else "?"
    return (
        f"{index:>4}  {when:<11}  {entry.label[:28]:<28}  "
        f"{entry.subject_name[:24]:<24}  {entry.amount:>12,.2f}  "
        f"{annotated.running_balance:>14,.2f}"
    )


def _print_entries(statement: LedgerStatement | AffiliateLedgerStatement) -> None:
    print(
        f"{'#':>4}  {'Date':<11}  {'Type':<28}  {'Passenger':<24}  "
        f"{'Amount':>12}  {'Balance':>14}"
    )
    for index, annotated in enumerate(statement.entries, start=1):
        print(_format_row(index, annotated))


def _print_totals(statement: LedgerStatement) -> None:
    totals = statement.totals
    currency = statement.currency_code
    print(f"Total charges: {totals.total_charges:,.2f} {currency}")
    print(
        f"Total paid: {totals.total_paid:,.2f} {currency} "
        f"(wallet {totals.total_wallet_paid:,.2f})"
    )
    print(f"Total refund: {totals.total_refund:,.2f} {currency}")
    if totals.total_fine_charges or totals.total_fine_paid:
        print(f"Total fines: {totals.total_fine_charges:,.2f} {currency}")
        print(f"Fines paid: {totals.total_fine_paid:,.2f} {currency}")
    print(f"Outstanding balance: {totals.outstanding_balance:,.2f} {currency}")
    if statement.wallet_unavailable:
        print("Wallet payments unavailable: totals cover the invoice ledger only.")


def _print_affiliate_totals(statement: AffiliateLedgerStatement) -> None:
    totals = statement.totals
    currency = statement.currency_code
    print(f"Affiliate subtotal: {totals.affiliate_subtotal:,.2f} {currency}")
    print(f"Business subtotal: {totals.business_subtotal:,.2f} {currency}")
    print(f"Outstanding balance: {totals.outstanding_balance:,.2f} {currency}")


def main() -> None:
    """Build the requested ledger statement and print it."""
    logger = get_app_logger()
    view = os.getenv("LEDGER_VIEW", "customer").strip().lower()
    if view not in VIEWS:
        logger.warning(
            f"Unknown LEDGER_VIEW '{view}'. Expected one of {', '.join(VIEWS)}."
        )
        return
    customer_id = _parse_int("LEDGER_CUSTOMER_ID", logger)
    currency_id = _parse_int("LEDGER_CURRENCY_ID", logger)
    if customer_id is None or currency_id is None:
        return

    if view == "affiliate":
        affiliate_id = _parse_int("LEDGER_AFFILIATE_ID", logger)
        if affiliate_id is None:
            return
        try:
            affiliate_statement = build_affiliate_ledger_use_case().execute(
                customer_id,
                currency_id,
                affiliate_id,
            )
        except RuntimeError as exc:
            logger.error(str(exc))
            return
        print(
            f"Affiliate ledger (customer={customer_id}, "
            f"affiliate={affiliate_id}, currency={affiliate_statement.currency_code})"
        )
        _print_entries(affiliate_statement)
        _print_affiliate_totals(affiliate_statement)
        return

    try:
        if view == "residence":
            passenger_name = os.getenv("LEDGER_PASSENGER_NAME") or None
            statement = build_residence_ledger_use_case().execute(
                customer_id,
                currency_id,
                passenger_name,
            )
            title = "Residence ledger"
        else:
            statement = build_customer_ledger_use_case().execute(
                customer_id,
                currency_id,
            )
            title = "Customer ledger"
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(
        f"{title} (customer={customer_id}, currency={statement.currency_code})"
    )
    _print_entries(statement)
    _print_totals(statement)


if __name__ == "__main__":  # pragma: no cover
    main()
