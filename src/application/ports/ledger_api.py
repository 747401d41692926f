"""Application port for the agency's remote ledger API."""

from collections.abc import Mapping
from typing import Any, Protocol

RawRecord = Mapping[str, Any]


class LedgerApiError(RuntimeError):
    """Raised when the ledger API cannot serve a request."""


class LedgerApiPort(Protocol):
    """Port exposing the ledger data sources of the agency API.

    Implementations return raw JSON records and raise ``LedgerApiError``
    (a ``RuntimeError``) when a request fails.
    """

    def fetch_customer_ledger(
        self,
        customer_id: int,
        currency_id: int,
    ) -> list[RawRecord]:
        """Return invoice ledger rows for a customer and currency."""

    def fetch_wallet_transactions(
        self,
        customer_id: int,
        page: int = 1,
        limit: int = 1000,
    ) -> list[RawRecord]:
        """Return wallet transactions of a customer, all currencies."""

    def fetch_residence_ledger(
        self,
        customer_id: int,
        currency_id: int,
        passenger_name: str | None = None,
    ) -> list[RawRecord]:
        """Return residence ledger rows, optionally for one passenger."""

    def fetch_affiliate_ledger(
        self,
        customer_id: int,
        currency_id: int,
        affiliate_id: int,
    ) -> list[RawRecord]:
        """Return affiliate ledger rows."""

    def fetch_pending_customers(
        self,
        currency_id: int,
        customer_id: int | None = None,
    ) -> list[RawRecord]:
        """Return customers with a pending balance in a currency."""

    def fetch_currency_name(self, currency_id: int) -> str:
        """Return the display name of a currency."""


__all__ = ["LedgerApiError", "LedgerApiPort", "RawRecord"]
