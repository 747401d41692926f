"""Policy deciding which affiliate ledger rows belong to the agency."""


def is_business_counterparty(customer_name: str | None, agency_name: str) -> bool:
    """Return True when a row's party is the agency itself.

    Args:
        customer_name: Party name reported on the affiliate ledger row.
        agency_name: The agency's own display name.

    Returns:
        bool: True for a case-insensitive match on non-empty names.
    """
    if not customer_name or not agency_name:
        return False
    return customer_name.strip().casefold() == agency_name.strip().casefold()


__all__ = ["is_business_counterparty"]
