"""HTTP adapter for the agency ledger API.

Every endpoint is a PHP script receiving a JSON POST body and answering with
a ``{"success": bool, "data": ..., "message": str}`` envelope.
"""

from collections.abc import Mapping
import threading
from typing import Any

import requests

from src.application.ports.ledger_api import (
    LedgerApiError,
    LedgerApiPort,
    RawRecord,
)
from src.infrastructure.logging.logger import get_app_logger

CUSTOMER_LEDGER_PATH = "/customer/ledger.php"
PENDING_PAYMENTS_PATH = "/customer/pendingPayments.php"
WALLET_TRANSACTIONS_PATH = "/wallet/get-transactions.php"
RESIDENCE_LEDGER_PATH = "/residence/ledger.php"
AFFILIATE_LEDGER_PATH = "/affiliate/affiliateLedgerView.php"


class RequestsLedgerApi(LedgerApiPort):
    """LedgerApiPort implementation backed by ``requests``."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        session: requests.Session | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the agency API.
            token: Optional bearer token.
            timeout: Request timeout in seconds.
            session: Optional session shared by every call. Without one,
                each calling thread gets its own session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._session = session
        self._local = threading.local()
        self._logger = logger or get_app_logger()

    def fetch_customer_ledger(
        self,
        customer_id: int,
        currency_id: int,
    ) -> list[RawRecord]:
        data = self._post(
            CUSTOMER_LEDGER_PATH,
            {
                "action": "getLedger",
                "customer_id": customer_id,
                "currency_id": currency_id,
            },
        )
        return _as_records(data, CUSTOMER_LEDGER_PATH)

    def fetch_wallet_transactions(
        self,
        customer_id: int,
        page: int = 1,
        limit: int = 1000,
    ) -> list[RawRecord]:
        data = self._post(
            WALLET_TRANSACTIONS_PATH,
            {"customerID": customer_id, "page": page, "limit": limit},
        )
        # Paginated shape: {"data": [...], "pagination": {...}}.
        if isinstance(data, Mapping):
            data = data.get("data") or []
        return _as_records(data, WALLET_TRANSACTIONS_PATH)

    def fetch_residence_ledger(
        self,
        customer_id: int,
        currency_id: int,
        passenger_name: str | None = None,
    ) -> list[RawRecord]:
        payload: dict[str, Any] = {
            "action": "getLedger",
            "customer_id": customer_id,
            "currency_id": currency_id,
        }
        if passenger_name:
            payload["passenger_name"] = passenger_name
        data = self._post(RESIDENCE_LEDGER_PATH, payload)
        return _as_records(data, RESIDENCE_LEDGER_PATH)

    def fetch_affiliate_ledger(
        self,
        customer_id: int,
        currency_id: int,
        affiliate_id: int,
    ) -> list[RawRecord]:
        data = self._post(
            AFFILIATE_LEDGER_PATH,
            {
                "action": "getLedger",
                "customer_id": customer_id,
                "currency_id": currency_id,
                "affiliate_id": affiliate_id,
            },
        )
        return _as_records(data, AFFILIATE_LEDGER_PATH)

    def fetch_pending_customers(
        self,
        currency_id: int,
        customer_id: int | None = None,
    ) -> list[RawRecord]:
        data = self._post(
            PENDING_PAYMENTS_PATH,
            {
                "action": "getPendingCustomers",
                "customer_id": "" if customer_id is None else customer_id,
                "currency_id": currency_id,
            },
        )
        return _as_records(data, PENDING_PAYMENTS_PATH)

    def fetch_currency_name(self, currency_id: int) -> str:
        data = self._post(
            CUSTOMER_LEDGER_PATH,
            {"action": "getCurrencyName", "currency_id": currency_id},
        )
        if not isinstance(data, Mapping) or not data.get("currencyName"):
            raise LedgerApiError(f"Currency not found: {currency_id}")
        return str(data["currencyName"])

    def _get_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
        return session

    def _post(self, path: str, payload: dict[str, Any]) -> Any:
        """POST a JSON payload and unwrap the response envelope.

        Args:
            path: Endpoint path relative to the base URL.
            payload: JSON body.

        Returns:
            Any: The envelope's ``data`` member.

        Raises:
            LedgerApiError: On transport errors, HTTP errors, invalid JSON,
                or ``success: false`` responses.
        """
        url = f"{self._base_url}/{path.lstrip('/')}"
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            response = self._get_session().post(
                url,
                json=payload,
                headers=headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            raise LedgerApiError(f"Request to {path} failed: {exc}") from exc
        except ValueError as exc:
            raise LedgerApiError(f"Invalid JSON from {path}: {exc}") from exc

        if not isinstance(body, Mapping):
            raise LedgerApiError(f"Unexpected response shape from {path}")
        if body.get("success") is False:
            message = body.get("message") or "request was not successful"
            raise LedgerApiError(f"{path}: {message}")
        if "data" not in body:
            self._logger.warning(f"Response from {path} has no data member")
        return body.get("data")


def _as_records(data: Any, path: str) -> list[RawRecord]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise LedgerApiError(f"Expected a list of records from {path}")
    return [record for record in data if isinstance(record, Mapping)]


__all__ = ["RequestsLedgerApi"]
