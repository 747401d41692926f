"""Application use cases package."""

from .get_affiliate_ledger import GetAffiliateLedgerUseCase
from .get_customer_ledger import GetCustomerLedgerUseCase, LedgerStatement
from .get_pending_rollup import GetPendingRollupUseCase, PendingRollup
from .get_residence_ledger import GetResidenceLedgerUseCase

__all__ = [
    "GetCustomerLedgerUseCase",
    "GetResidenceLedgerUseCase",
    "GetAffiliateLedgerUseCase",
    "GetPendingRollupUseCase",
    "LedgerStatement",
    "PendingRollup",
]
