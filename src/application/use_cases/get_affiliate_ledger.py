"""Use case building an affiliate ledger split by counterparty."""

from src.application.ports.ledger_api import LedgerApiPort
from src.application.use_cases.currency import resolve_currency_code
from src.domain.constants import DEFAULT_AGENCY_NAME
from src.domain.models.ledger import AffiliateLedgerStatement
from src.domain.services.source_adapters import normalize_affiliate_records
from src.domain.services.statement import build_affiliate_statement
from src.domain.services.validation import validate_statement
from src.infrastructure.logging.logger import get_app_logger


class GetAffiliateLedgerUseCase:
    """Compute an affiliate ledger with customer and business subtotals."""

    def __init__(
        self,
        ledger_api: LedgerApiPort,
        logger=None,
        agency_name: str = DEFAULT_AGENCY_NAME,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_api: Port providing the agency ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
            agency_name: Name marking the agency's own ledger rows.
        """
        self._ledger_api = ledger_api
        self._logger = logger or get_app_logger()
        self._agency_name = agency_name

    def execute(
        self,
        customer_id: int,
        currency_id: int,
        affiliate_id: int,
    ) -> AffiliateLedgerStatement:
        """Return the affiliate statement.

        Args:
            customer_id: Customer identifier.
            currency_id: Statement currency identifier.
            affiliate_id: Affiliate identifier.

        Returns:
            AffiliateLedgerStatement: Entries and split totals.
        """
        rows = self._ledger_api.fetch_affiliate_ledger(
            customer_id,
            currency_id,
            affiliate_id,
        )
        statement = build_affiliate_statement(
            normalize_affiliate_records(rows, agency_name=self._agency_name),
            currency_code=resolve_currency_code(
                self._ledger_api,
                currency_id,
                self._logger,
            ),
        )
        validate_statement(statement, self._logger)
        totals = statement.totals
        self._logger.info(
            f"Affiliate ledger built: customer={customer_id}, "
            f"affiliate={affiliate_id}, "
            f"affiliate_subtotal={totals.affiliate_subtotal}, "
            f"business_subtotal={totals.business_subtotal}, "
            f"outstanding={totals.outstanding_balance}"
        )
        return statement


__all__ = ["GetAffiliateLedgerUseCase"]
