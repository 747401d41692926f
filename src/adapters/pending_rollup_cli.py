"""CLI adapter printing customers with a pending balance in a currency."""

import os

from src.infrastructure.container import build_pending_rollup_use_case
from src.infrastructure.logging.logger import get_app_logger


def _parse_optional_int(name: str, logger) -> int | None:
    """Parse an optional integer environment variable.

    Args:
        name: Environment variable name.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed value or None when missing or invalid.
    """
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None


def main() -> None:
    """Run the pending payments roll-up and print the kept customers."""
    logger = get_app_logger()
    currency_id = _parse_optional_int("PENDING_CURRENCY_ID", logger)
    if currency_id is None:
        logger.warning("PENDING_CURRENCY_ID is required for the roll-up.")
        return
    customer_id = _parse_optional_int("PENDING_CUSTOMER_ID", logger)

    try:
        rollup = build_pending_rollup_use_case().execute(
            currency_id,
            customer_id=customer_id,
        )
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    print(f"Pending payments (currency={currency_id})")
    for index, row in enumerate(rollup.rows, start=1):
        account = row.account
        flags = []
        if account.wallet_unavailable:
            flags.append("wallet unavailable")
        if account.ledger_unavailable:
            flags.append("ledger unavailable")
        if row.wallet_exceeds_invoice:
            flags.append("wallet exceeds invoice")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        print(
            f"{index:>4}  {account.customer_name:<32}  "
            f"{row.outstanding:>14,.2f}{suffix}"
        )
    print(
        f"Total: {rollup.grand_total:,.2f} "
        f"({len(rollup.rows)} customers, {rollup.discarded_count} settled)"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
