"""Tests for the customer ledger use case."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.ledger_api import LedgerApiError
from src.application.use_cases.get_customer_ledger import GetCustomerLedgerUseCase

INVOICE_ROWS = [
    {
        "TRANSACTION_Type": "Ticket",
        "Passenger_Name": "Sara Ahmed",
        "date": "01 Jan 2024",
        "Identification": "TK-1",
        "Orgin": "DXB",
        "Destination": "CAI",
        "Debit": 200,
        "Credit": 0,
    },
    {
        "TRANSACTION_Type": "Payment",
        "Passenger_Name": "",
        "date": "05 Jan 2024",
        "Debit": 0,
        "Credit": 50,
    },
]

WALLET_ROWS = [
    {
        "transaction_type": "deposit",
        "amount": 500,
        "currency_id": 1,
        "datetime": "2024-01-02 08:00:00",
    },
    {
        "transaction_type": "payment",
        "amount": 100,
        "currency_id": 1,
        "reference_type": "ticket",
        "reference_id": 8,
        "datetime": "2024-01-03 09:00:00",
    },
    {
        "transaction_type": "payment",
        "amount": 999,
        "currency_id": 2,
        "reference_type": "visa",
        "reference_id": 9,
        "datetime": "2024-01-04 09:00:00",
    },
]


def _ledger_api() -> MagicMock:
    ledger_api = MagicMock()
    ledger_api.fetch_customer_ledger.return_value = INVOICE_ROWS
    ledger_api.fetch_wallet_transactions.return_value = WALLET_ROWS
    ledger_api.fetch_currency_name.return_value = "AED"
    return ledger_api


def test_execute_merges_invoice_and_wallet_payments() -> None:
    """Wallet payments of the currency are merged chronologically."""
    ledger_api = _ledger_api()
    use_case = GetCustomerLedgerUseCase(ledger_api, logger=MagicMock())

    statement = use_case.execute(42, 1)

    ledger_api.fetch_customer_ledger.assert_called_once_with(42, 1)
    ledger_api.fetch_wallet_transactions.assert_called_once_with(
        42,
        page=1,
        limit=1000,
    )
    assert statement.currency_code == "AED"
    assert [item.entry.label for item in statement.entries] == [
        "Ticket",
        "Payment (from Wallet)",
        "Payment",
    ]
    assert [item.running_balance for item in statement.entries] == [
        Decimal("200"),
        Decimal("100"),
        Decimal("50"),
    ]
    assert statement.entries[1].entry.occurred_at == datetime(2024, 1, 3, 9, 0)
    assert statement.totals.total_paid == Decimal("150")
    assert statement.totals.total_wallet_paid == Decimal("100")
    assert statement.totals.outstanding_balance == Decimal("50")
    assert statement.closing_balance == Decimal("50")
    assert statement.wallet_unavailable is False


def test_execute_degrades_when_wallet_is_unavailable() -> None:
    """A wallet failure yields an invoice-only statement and a warning."""
    ledger_api = _ledger_api()
    ledger_api.fetch_wallet_transactions.side_effect = LedgerApiError("timeout")
    logger = MagicMock()
    use_case = GetCustomerLedgerUseCase(ledger_api, logger=logger)

    statement = use_case.execute(42, 1)

    assert len(statement.entries) == 2
    assert statement.totals.outstanding_balance == Decimal("150")
    assert statement.totals.total_wallet_paid == Decimal("0")
    assert statement.wallet_unavailable is True
    logger.warning.assert_called_once()


def test_execute_propagates_invoice_ledger_failure() -> None:
    """Without the invoice ledger there is no statement to show."""
    ledger_api = _ledger_api()
    ledger_api.fetch_customer_ledger.side_effect = LedgerApiError("down")
    use_case = GetCustomerLedgerUseCase(ledger_api, logger=MagicMock())

    with pytest.raises(LedgerApiError):
        use_case.execute(42, 1)


def test_execute_falls_back_to_currency_id() -> None:
    """A failed currency lookup uses the id as the display code."""
    ledger_api = _ledger_api()
    ledger_api.fetch_currency_name.side_effect = LedgerApiError("unknown")
    logger = MagicMock()
    use_case = GetCustomerLedgerUseCase(ledger_api, logger=logger)

    statement = use_case.execute(42, 3)

    assert statement.currency_code == "3"
    logger.warning.assert_called_once()


def test_execute_for_customer_without_activity() -> None:
    """Empty sources give an empty statement with zero totals."""
    ledger_api = _ledger_api()
    ledger_api.fetch_customer_ledger.return_value = []
    ledger_api.fetch_wallet_transactions.return_value = []
    use_case = GetCustomerLedgerUseCase(ledger_api, logger=MagicMock())

    statement = use_case.execute(1, 1)

    assert statement.entries == ()
    assert statement.totals.outstanding_balance == Decimal("0")


def test_execute_uses_configured_wallet_page_size() -> None:
    """The wallet page size is passed to the API."""
    ledger_api = _ledger_api()
    use_case = GetCustomerLedgerUseCase(
        ledger_api,
        logger=MagicMock(),
        wallet_page_size=250,
    )

    use_case.execute(42, 1)

    ledger_api.fetch_wallet_transactions.assert_called_once_with(
        42,
        page=1,
        limit=250,
    )


def test_unavailable_wallet_differs_from_empty_wallet() -> None:
    """A failed wallet fetch is distinguishable from a wallet without payments."""
    empty_api = _ledger_api()
    empty_api.fetch_wallet_transactions.return_value = []
    failing_api = _ledger_api()
    failing_api.fetch_wallet_transactions.side_effect = LedgerApiError("down")

    empty = GetCustomerLedgerUseCase(empty_api, logger=MagicMock()).execute(42, 1)
    failed = GetCustomerLedgerUseCase(failing_api, logger=MagicMock()).execute(42, 1)

    assert empty.totals == failed.totals
    assert empty != failed
    assert empty.wallet_unavailable is False
    assert failed.wallet_unavailable is True
