"""Tests for the residence and affiliate ledger use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_affiliate_ledger import GetAffiliateLedgerUseCase
from src.application.use_cases.get_residence_ledger import GetResidenceLedgerUseCase

RESIDENCE_ROWS = [
    {"transactionType": "Residence", "passenger_name": "Omar", "dt": "2024-03-01", "visaType": "2 Years", "debit": 1000, "credit": 0},
    {"transactionType": "Residence Fine", "passenger_name": "Omar", "dt": "2024-03-02", "debit": 200, "credit": 0},
    {"transactionType": "Residence Payment", "passenger_name": "Omar", "dt": "2024-03-03", "debit": 0, "credit": 500},
    {"transactionType": "Residence Fine Payment", "passenger_name": "Omar", "dt": "2024-03-04", "debit": 0, "credit": 200},
]

AFFILIATE_ROWS = [
    {"TRANSACTION_Type": "Ticket", "customer_name": "Blue Sky", "datetime": "2024-05-01 10:00:00", "Debit": 50, "Credit": 0},
    {"TRANSACTION_Type": "Ticket", "customer_name": "Blue Sky", "datetime": "2024-05-02 10:00:00", "Debit": 50, "Credit": 0},
    {"TRANSACTION_Type": "Ticket", "customer_name": "Blue Sky", "datetime": "2024-05-03 10:00:00", "Debit": 50, "Credit": 0},
    {"TRANSACTION_Type": "Payment", "customer_name": "SN Trips", "datetime": "2024-05-04 10:00:00", "Debit": 40, "Credit": 0},
    {"TRANSACTION_Type": "Payment", "customer_name": "SN Trips", "datetime": "2024-05-05 10:00:00", "Debit": 40, "Credit": 0},
]


def test_residence_ledger_tracks_fines() -> None:
    """Fines and fine payments get their own totals."""
    ledger_api = MagicMock()
    ledger_api.fetch_residence_ledger.return_value = RESIDENCE_ROWS
    ledger_api.fetch_currency_name.return_value = "AED"
    use_case = GetResidenceLedgerUseCase(ledger_api, logger=MagicMock())

    statement = use_case.execute(42, 1, "Omar")

    ledger_api.fetch_residence_ledger.assert_called_once_with(42, 1, "Omar")
    totals = statement.totals
    assert totals.total_charges == Decimal("1000")
    assert totals.total_paid == Decimal("500")
    assert totals.total_fine_charges == Decimal("200")
    assert totals.total_fine_paid == Decimal("200")
    assert totals.outstanding_balance == Decimal("500")
    assert statement.closing_balance == Decimal("500")


def test_affiliate_ledger_splits_by_counterparty() -> None:
    """Customer charges and agency payments both add to what is owed."""
    ledger_api = MagicMock()
    ledger_api.fetch_affiliate_ledger.return_value = AFFILIATE_ROWS
    ledger_api.fetch_currency_name.return_value = "AED"
    logger = MagicMock()
    use_case = GetAffiliateLedgerUseCase(ledger_api, logger=logger)

    statement = use_case.execute(42, 1, 7)

    ledger_api.fetch_affiliate_ledger.assert_called_once_with(42, 1, 7)
    assert statement.totals.affiliate_subtotal == Decimal("150")
    assert statement.totals.business_subtotal == Decimal("-80")
    assert statement.totals.outstanding_balance == Decimal("230")
    assert statement.closing_balance == Decimal("230")
    logger.error.assert_not_called()


def test_affiliate_ledger_uses_configured_agency_name() -> None:
    """Rows are split on the configured agency name."""
    ledger_api = MagicMock()
    ledger_api.fetch_affiliate_ledger.return_value = AFFILIATE_ROWS
    ledger_api.fetch_currency_name.return_value = "AED"
    use_case = GetAffiliateLedgerUseCase(
        ledger_api,
        logger=MagicMock(),
        agency_name="Blue Sky",
    )

    statement = use_case.execute(42, 1, 7)

    assert statement.totals.business.total_charges == Decimal("150")
    assert statement.totals.customer.total_paid == Decimal("80")
