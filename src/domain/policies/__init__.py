"""Domain policies package."""

from .counterparty import is_business_counterparty

__all__ = ["is_business_counterparty"]
