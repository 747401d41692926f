"""Lenient parsing of amounts and dates coming from the agency API."""

from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
import warnings

import pandas as pd


def parse_amount(value) -> Decimal:
    """Return a non-negative Decimal magnitude, or zero when unusable.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.

    Args:
        value: Raw amount (number, numeric string, or None).

    Returns:
        Decimal: Absolute value of the amount; 0 for missing, empty,
        non-numeric, NaN or infinite input.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return Decimal("0")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return abs(amount)


def parse_occurred_at(value) -> datetime | None:
    """Parse a display or ISO formatted date into a naive datetime.

    ISO strings are read as ISO. Anything else goes through
    ``pandas.to_datetime`` with day-first precedence, as the agency shows
    dates like ``15/01/2024``. Date-only values map to midnight and
    timezone-aware values are converted to UTC and made naive.

    Args:
        value: Raw date string, date or datetime.

    Returns:
        datetime | None: Parsed value, or None when it cannot be parsed.
    """
    if isinstance(value, datetime):
        return _to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        return _to_naive_utc(
            datetime.fromisoformat(text.replace("Z", "+00:00"))
        )
    except ValueError:
        pass
    try:
        with warnings.catch_warnings():
            # Format inference warnings are noise for one-off scalars.
            warnings.simplefilter("ignore", UserWarning)
            parsed = pd.to_datetime(text, errors="coerce", dayfirst=True)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return _to_naive_utc(parsed.to_pydatetime())


def text_field(value) -> str:
    """Return a stripped string, or an empty string for missing values."""
    if value is None:
        return ""
    return str(value).strip()


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


__all__ = ["parse_amount", "parse_occurred_at", "text_field"]
