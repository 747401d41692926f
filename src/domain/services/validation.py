"""Domain validation helpers."""

from logging import Logger

from src.domain.models.ledger import AffiliateLedgerStatement, LedgerStatement


def validate_statement(
    statement: LedgerStatement | AffiliateLedgerStatement,
    logger: Logger,
) -> bool:
    """Check that the closing balance matches the aggregated outstanding.

    Args:
        statement: Statement to verify.
        logger: Logger used for errors.

    Returns:
        bool: True when both computations agree.
    """
    closing = statement.closing_balance
    outstanding = statement.totals.outstanding_balance
    if closing != outstanding:
        logger.error(
            f"Ledger does not reconcile: closing balance={closing}, "
            f"outstanding={outstanding}, entries={len(statement.entries)}"
        )
        return False
    return True


__all__ = ["validate_statement"]
