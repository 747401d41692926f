"""Use case building a customer's invoice and wallet ledger statement."""

from src.application.ports.ledger_api import LedgerApiError, LedgerApiPort
from src.application.use_cases.currency import resolve_currency_code
from src.domain.models.ledger import LedgerEntry, LedgerStatement
from src.domain.services.source_adapters import (
    normalize_invoice_records,
    normalize_wallet_records,
)
from src.domain.services.statement import build_statement
from src.domain.services.validation import validate_statement
from src.infrastructure.logging.logger import get_app_logger


class GetCustomerLedgerUseCase:
    """Merge a customer's invoice ledger with wallet-funded payments."""

    def __init__(
        self,
        ledger_api: LedgerApiPort,
        logger=None,
        wallet_page_size: int = 1000,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_api: Port providing the agency ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            wallet_page_size: Number of wallet transactions requested.
        """
        self._ledger_api = ledger_api
        self._logger = logger or get_app_logger()
        self._wallet_page_size = wallet_page_size

    def execute(self, customer_id: int, currency_id: int) -> LedgerStatement:
        """Return the chronological statement with running balances.

        A wallet fetch failure degrades to an invoice-only statement flagged
        with ``wallet_unavailable``.

        Args:
            customer_id: Customer identifier.
            currency_id: Statement currency identifier.

        Returns:
            LedgerStatement: Entries and totals for the pair.
        """
        invoice_rows = self._ledger_api.fetch_customer_ledger(
            customer_id,
            currency_id,
        )
        invoice_entries = normalize_invoice_records(invoice_rows)
        wallet_entries = self._load_wallet_entries(customer_id, currency_id)
        wallet_unavailable = wallet_entries is None
        currency_code = resolve_currency_code(
            self._ledger_api,
            currency_id,
            self._logger,
        )

        statement = build_statement(
            invoice_entries,
            wallet_entries or [],
            currency_code=currency_code,
            wallet_unavailable=wallet_unavailable,
        )
        validate_statement(statement, self._logger)
        self._logger.info(
            f"Customer ledger built: customer={customer_id}, "
            f"currency={currency_code}, invoice_rows={len(invoice_entries)}, "
            f"wallet_payments={len(wallet_entries or [])}, "
            f"wallet_unavailable={wallet_unavailable}, "
            f"outstanding={statement.totals.outstanding_balance}"
        )
        return statement

    def _load_wallet_entries(
        self,
        customer_id: int,
        currency_id: int,
    ) -> list[LedgerEntry] | None:
        # None marks an unavailable wallet, distinct from an empty one.
        try:
            rows = self._ledger_api.fetch_wallet_transactions(
                customer_id,
                page=1,
                limit=self._wallet_page_size,
            )
        except LedgerApiError as exc:
            self._logger.warning(
                f"Wallet payments unavailable for customer={customer_id}: {exc}"
            )
            return None
        return normalize_wallet_records(rows, currency_id=currency_id)


__all__ = ["GetCustomerLedgerUseCase", "LedgerStatement"]
