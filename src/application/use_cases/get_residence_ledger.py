"""Use case building a residence ledger statement with fines."""

from src.application.ports.ledger_api import LedgerApiPort
from src.application.use_cases.currency import resolve_currency_code
from src.domain.models.ledger import LedgerStatement
from src.domain.services.source_adapters import normalize_residence_records
from src.domain.services.statement import build_statement
from src.domain.services.validation import validate_statement
from src.infrastructure.logging.logger import get_app_logger


class GetResidenceLedgerUseCase:
    """Compute the residence ledger of a customer, optionally per passenger."""

    def __init__(self, ledger_api: LedgerApiPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            ledger_api: Port providing the agency ledger data.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_api = ledger_api
        self._logger = logger or get_app_logger()

    def execute(
        self,
        customer_id: int,
        currency_id: int,
        passenger_name: str | None = None,
    ) -> LedgerStatement:
        """Return the residence statement.

        Args:
            customer_id: Customer identifier.
            currency_id: Statement currency identifier.
            passenger_name: Optional passenger filter applied by the API.

        Returns:
            LedgerStatement: Entries with fine and fine payment totals.
        """
        rows = self._ledger_api.fetch_residence_ledger(
            customer_id,
            currency_id,
            passenger_name,
        )
        statement = build_statement(
            normalize_residence_records(rows),
            currency_code=resolve_currency_code(
                self._ledger_api,
                currency_id,
                self._logger,
            ),
        )
        validate_statement(statement, self._logger)
        self._logger.info(
            f"Residence ledger built: customer={customer_id}, "
            f"passenger={passenger_name or '-'}, rows={len(rows)}, "
            f"outstanding={statement.totals.outstanding_balance}"
        )
        return statement


__all__ = ["GetResidenceLedgerUseCase"]
