"""Composition root for wiring infrastructure adapters."""

from src.application.ports.ledger_api import LedgerApiPort
from src.application.use_cases.get_affiliate_ledger import (
    GetAffiliateLedgerUseCase,
)
from src.application.use_cases.get_customer_ledger import (
    GetCustomerLedgerUseCase,
)
from src.application.use_cases.get_pending_rollup import (
    GetPendingRollupUseCase,
)
from src.application.use_cases.get_residence_ledger import (
    GetResidenceLedgerUseCase,
)
from src.infrastructure.ledger_api import RequestsLedgerApi
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerApiSettings


def build_ledger_api(
    settings: LedgerApiSettings | None = None,
) -> LedgerApiPort:
    """Return the HTTP ledger API adapter."""
    resolved = settings or LedgerApiSettings.from_env()
    return RequestsLedgerApi(
        resolved.base_url,
        token=resolved.token,
        timeout=resolved.timeout,
        logger=get_app_logger(),
    )


def build_customer_ledger_use_case(
    ledger_api: LedgerApiPort | None = None,
) -> GetCustomerLedgerUseCase:
    """Return the customer ledger use case."""
    return GetCustomerLedgerUseCase(
        ledger_api or build_ledger_api(),
        logger=get_app_logger(),
    )


def build_residence_ledger_use_case(
    ledger_api: LedgerApiPort | None = None,
) -> GetResidenceLedgerUseCase:
    """Return the residence ledger use case."""
    return GetResidenceLedgerUseCase(
        ledger_api or build_ledger_api(),
        logger=get_app_logger(),
    )


def build_affiliate_ledger_use_case(
    ledger_api: LedgerApiPort | None = None,
    settings: LedgerApiSettings | None = None,
) -> GetAffiliateLedgerUseCase:
    """Return the affiliate ledger use case configured with the agency name."""
    resolved = settings or LedgerApiSettings.from_env()
    return GetAffiliateLedgerUseCase(
        ledger_api or build_ledger_api(resolved),
        logger=get_app_logger(),
        agency_name=resolved.agency_name,
    )


def build_pending_rollup_use_case(
    ledger_api: LedgerApiPort | None = None,
    settings: LedgerApiSettings | None = None,
) -> GetPendingRollupUseCase:
    """Return the pending roll-up use case with configured limits."""
    resolved = settings or LedgerApiSettings.from_env()
    return GetPendingRollupUseCase(
        ledger_api or build_ledger_api(resolved),
        logger=get_app_logger(),
        max_concurrency=resolved.max_concurrency,
        epsilon=resolved.pending_epsilon,
    )


__all__ = [
    "build_ledger_api",
    "build_customer_ledger_use_case",
    "build_residence_ledger_use_case",
    "build_affiliate_ledger_use_case",
    "build_pending_rollup_use_case",
]
