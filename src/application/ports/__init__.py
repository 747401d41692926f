"""Application ports package."""

from .ledger_api import LedgerApiError, LedgerApiPort, RawRecord

__all__ = ["LedgerApiError", "LedgerApiPort", "RawRecord"]
