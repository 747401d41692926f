"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from urllib.parse import urlparse

import dotenv

from src.domain.constants import DEFAULT_AGENCY_NAME, DEFAULT_PENDING_EPSILON
from src.infrastructure.logging.logger import get_app_logger


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


@dataclass(frozen=True)
class LedgerApiSettings:
    """Settings for the agency ledger API client.

    Attributes:
        base_url: Root URL of the agency API.
        token: Optional bearer token sent with every request.
        timeout: Request timeout in seconds.
        max_concurrency: Maximum concurrent customer fetches in roll-ups.
        agency_name: Name marking the agency's own affiliate ledger rows.
        pending_epsilon: Roll-up balances within this amount of zero are
            dropped.
    """

    base_url: str
    token: str | None = None
    timeout: float = 30.0
    max_concurrency: int = 4
    agency_name: str = DEFAULT_AGENCY_NAME
    pending_epsilon: Decimal = DEFAULT_PENDING_EPSILON

    @classmethod
    def from_env(cls) -> "LedgerApiSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            LedgerApiSettings: Settings sourced from environment variables.
        """
        base_url = cls._normalize_base_url(_get_env_var("LEDGER_API_BASE_URL"))
        logger = get_app_logger()
        return cls(
            base_url=base_url,
            token=os.getenv("LEDGER_API_TOKEN") or None,
            timeout=cls._parse_float(
                os.getenv("LEDGER_API_TIMEOUT"),
                30.0,
                "LEDGER_API_TIMEOUT",
                logger,
            ),
            max_concurrency=max(
                1,
                int(
                    cls._parse_float(
                        os.getenv("LEDGER_MAX_CONCURRENCY"),
                        4,
                        "LEDGER_MAX_CONCURRENCY",
                        logger,
                    )
                ),
            ),
            agency_name=(
                os.getenv("LEDGER_AGENCY_NAME", "").strip()
                or DEFAULT_AGENCY_NAME
            ),
            pending_epsilon=cls._parse_decimal(
                os.getenv("LEDGER_PENDING_EPSILON"),
                DEFAULT_PENDING_EPSILON,
                logger,
            ),
        )

    @staticmethod
    def _normalize_base_url(raw_url: str) -> str:
        """Validate and strip the API base URL.

        Args:
            raw_url: Raw URL string.

        Returns:
            str: URL without a trailing slash.

        Raises:
            RuntimeError: If the URL has no http(s) scheme or host.
        """
        cleaned = raw_url.strip().rstrip("/")
        parsed = urlparse(cleaned)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise RuntimeError(f"Invalid LEDGER_API_BASE_URL: {raw_url}")
        return cleaned

    @staticmethod
    def _parse_float(raw: str | None, default: float, name: str, logger) -> float:
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}', using {default}")
            return default
        if value <= 0:
            logger.warning(f"Non-positive {name} '{raw}', using {default}")
            return default
        return value

    @staticmethod
    def _parse_decimal(raw: str | None, default: Decimal, logger) -> Decimal:
        if not raw:
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid LEDGER_PENDING_EPSILON '{raw}', using {default}"
            )
            return default
        if not value.is_finite() or value < 0:
            logger.warning(
                f"Invalid LEDGER_PENDING_EPSILON '{raw}', using {default}"
            )
            return default
        return value


__all__ = ["LedgerApiSettings"]
