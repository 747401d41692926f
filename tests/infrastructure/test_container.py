"""Tests for the composition root."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_affiliate_ledger import GetAffiliateLedgerUseCase
from src.application.use_cases.get_customer_ledger import GetCustomerLedgerUseCase
from src.application.use_cases.get_pending_rollup import GetPendingRollupUseCase
from src.application.use_cases.get_residence_ledger import GetResidenceLedgerUseCase
from src.infrastructure import container
from src.infrastructure.ledger_api import RequestsLedgerApi
from src.infrastructure.settings import LedgerApiSettings

SETTINGS = LedgerApiSettings(
    base_url="https://agency.example.com",
    token="abc",
    timeout=7.0,
    max_concurrency=6,
    agency_name="Desert Tours",
    pending_epsilon=Decimal("0.5"),
)


def test_build_ledger_api_uses_settings(monkeypatch) -> None:
    """The HTTP adapter is configured from settings."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    ledger_api = container.build_ledger_api(SETTINGS)

    assert isinstance(ledger_api, RequestsLedgerApi)
    assert ledger_api._base_url == "https://agency.example.com"
    assert ledger_api._token == "abc"
    assert ledger_api._timeout == 7.0


def test_build_use_cases_with_injected_api(monkeypatch) -> None:
    """Use cases are wired to the injected port and settings."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    ledger_api = MagicMock()

    customer = container.build_customer_ledger_use_case(ledger_api)
    residence = container.build_residence_ledger_use_case(ledger_api)
    affiliate = container.build_affiliate_ledger_use_case(ledger_api, SETTINGS)
    rollup = container.build_pending_rollup_use_case(ledger_api, SETTINGS)

    assert isinstance(customer, GetCustomerLedgerUseCase)
    assert isinstance(residence, GetResidenceLedgerUseCase)
    assert isinstance(affiliate, GetAffiliateLedgerUseCase)
    assert isinstance(rollup, GetPendingRollupUseCase)
    assert customer._ledger_api is ledger_api
    assert affiliate._agency_name == "Desert Tours"
    assert rollup._max_concurrency == 6
    assert rollup._epsilon == Decimal("0.5")


def test_build_pending_rollup_reads_env_when_no_settings(monkeypatch) -> None:
    """Settings are loaded from the environment by default."""
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setattr(
        container.LedgerApiSettings,
        "from_env",
        classmethod(lambda cls: SETTINGS),
    )

    rollup = container.build_pending_rollup_use_case()

    assert isinstance(rollup._ledger_api, RequestsLedgerApi)
    assert rollup._max_concurrency == 6
