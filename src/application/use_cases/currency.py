"""Shared currency lookup for ledger use cases."""

from src.application.ports.ledger_api import LedgerApiError, LedgerApiPort


def resolve_currency_code(
    ledger_api: LedgerApiPort,
    currency_id: int,
    logger,
) -> str:
    """Return the currency display name, or the id when the lookup fails.

    Args:
        ledger_api: Port used for the lookup.
        currency_id: Currency identifier.
        logger: Logger used for warnings.

    Returns:
        str: Display name used as the statement currency code.
    """
    try:
        name = ledger_api.fetch_currency_name(currency_id)
    except LedgerApiError as exc:
        logger.warning(f"Currency lookup failed for id={currency_id}: {exc}")
        return str(currency_id)
    return name or str(currency_id)


__all__ = ["resolve_currency_code"]
