"""Merge ledger sources into one chronological sequence."""

from collections.abc import Iterable
from datetime import datetime

from src.domain.models.ledger import LedgerEntry


def merge_entries(*sources: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    """Concatenate sources and order them by occurrence time.

    The sort is stable: entries sharing a timestamp keep the order in which
    they were passed in, source by source. Entries without a parseable date
    are placed after every dated entry.

    Args:
        *sources: Entry sequences, each already normalized.

    Returns:
        list[LedgerEntry]: New list; empty when no source has entries.
    """
    combined = [entry for source in sources for entry in source]
    return sorted(combined, key=_sort_key)


def _sort_key(entry: LedgerEntry) -> tuple[bool, datetime]:
    if entry.occurred_at is None:
        return (True, datetime.min)
    return (False, entry.occurred_at)


__all__ = ["merge_entries"]
