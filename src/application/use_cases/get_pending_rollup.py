"""Use case listing customers with a real pending balance in a currency.

For every pending customer reported by the API the use case fetches the
invoice ledger and the wallet transactions concurrently, then hands the
per-customer figures to the domain roll-up. A failing fetch only degrades
that customer's row:

* wallet unavailable: no wallet payments are subtracted;
* invoice ledger unavailable: the pending total reported by the API is used.
"""

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from decimal import Decimal
from typing import Any

from src.application.ports.ledger_api import LedgerApiError, LedgerApiPort
from src.domain.constants import DEFAULT_PENDING_EPSILON
from src.domain.models.rollup import PendingAccount, PendingRollup
from src.domain.services.parsing import parse_amount, text_field
from src.domain.services.rollup import compute_pending_rollup
from src.domain.services.source_adapters import (
    normalize_invoice_records,
    normalize_wallet_records,
)
from src.domain.services.totals import summarize
from src.infrastructure.logging.logger import get_app_logger


class GetPendingRollupUseCase:
    """Reconcile pending customers of a currency against wallet payments."""

    def __init__(
        self,
        ledger_api: LedgerApiPort,
        logger=None,
        max_concurrency: int = 4,
        epsilon: Decimal = DEFAULT_PENDING_EPSILON,
        wallet_page_size: int = 1000,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_api: Port providing the agency ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            max_concurrency: Maximum customers fetched at the same time.
            epsilon: Outstanding amounts this close to zero are dropped.
            wallet_page_size: Number of wallet transactions requested.
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be a positive integer")
        self._ledger_api = ledger_api
        self._logger = logger or get_app_logger()
        self._max_concurrency = max_concurrency
        self._epsilon = epsilon
        self._wallet_page_size = wallet_page_size

    def execute(
        self,
        currency_id: int,
        customer_id: int | None = None,
    ) -> PendingRollup:
        """Return the roll-up for a currency.

        Args:
            currency_id: Currency of every (customer, currency) pair.
            customer_id: Optional filter passed to the pending list.

        Returns:
            PendingRollup: Customers with a non-zero balance, API order.
        """
        pending = self._ledger_api.fetch_pending_customers(
            currency_id,
            customer_id,
        )
        self._logger.info(
            f"Fetched {len(pending)} pending customers for currency={currency_id}"
        )
        if not pending:
            return compute_pending_rollup([], self._epsilon, self._logger)

        accounts: dict[int, PendingAccount] = {}
        with ThreadPoolExecutor(max_workers=self._max_concurrency) as pool:
            futures = {
                pool.submit(self._load_account, record, currency_id): index
                for index, record in enumerate(pending)
            }
            for future in as_completed(futures):
                accounts[futures[future]] = future.result()

        rollup = compute_pending_rollup(
            [accounts[index] for index in sorted(accounts)],
            self._epsilon,
            self._logger,
        )
        degraded = sum(1 for row in rollup.rows if row.degraded)
        self._logger.info(
            f"Pending roll-up computed: currency={currency_id}, "
            f"kept={len(rollup.rows)}, discarded={rollup.discarded_count}, "
            f"degraded={degraded}, total={rollup.grand_total}"
        )
        return rollup

    def _load_account(
        self,
        record: Mapping[str, Any],
        currency_id: int,
    ) -> PendingAccount:
        customer_id = _as_int(record.get("main_customer"))
        reported_total = parse_amount(record.get("total"))

        ledger_unavailable = False
        try:
            rows = self._ledger_api.fetch_customer_ledger(
                customer_id,
                currency_id,
            )
            invoice_outstanding = summarize(
                normalize_invoice_records(rows)
            ).outstanding_balance
        except LedgerApiError as exc:
            self._logger.warning(
                f"Invoice ledger unavailable for customer={customer_id}, "
                f"using reported total {reported_total}: {exc}"
            )
            invoice_outstanding = reported_total
            ledger_unavailable = True

        wallet_unavailable = False
        try:
            wallet_rows = self._ledger_api.fetch_wallet_transactions(
                customer_id,
                page=1,
                limit=self._wallet_page_size,
            )
            wallet_paid = summarize(
                normalize_wallet_records(wallet_rows, currency_id=currency_id)
            ).total_wallet_paid
        except LedgerApiError as exc:
            self._logger.warning(
                f"Wallet payments unavailable for customer={customer_id}: {exc}"
            )
            wallet_paid = Decimal("0")
            wallet_unavailable = True

        return PendingAccount(
            customer_id=customer_id,
            customer_name=text_field(record.get("customer_name")),
            currency_id=currency_id,
            invoice_outstanding=invoice_outstanding,
            wallet_paid=wallet_paid,
            customer_email=text_field(record.get("customer_email")),
            customer_phone=text_field(record.get("customer_phone")),
            wallet_unavailable=wallet_unavailable,
            ledger_unavailable=ledger_unavailable,
        )


def _as_int(value) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


__all__ = ["GetPendingRollupUseCase", "PendingRollup"]
