"""Streamlit ledger dashboard entry point."""

from datetime import datetime
from decimal import Decimal
import sys

import streamlit as st
import altair as alt

from src.domain.models.ledger import (
    AffiliateLedgerStatement,
    LedgerStatement,
)
from src.domain.models.rollup import PendingRollup
from src.infrastructure.container import (
    build_affiliate_ledger_use_case,
    build_customer_ledger_use_case,
    build_pending_rollup_use_case,
    build_residence_ledger_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger

PAGES = (
    "Customer Ledger",
    "Residence Ledger",
    "Affiliate Ledger",
    "Pending Payments",
)


def _fetch_customer_statement(
    customer_id: int,
    currency_id: int,
) -> LedgerStatement:
    """Fetch a customer ledger through the configured API."""
    use_case = build_customer_ledger_use_case()
    return use_case.execute(customer_id, currency_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_customer_statement(
    customer_id: int,
    currency_id: int,
) -> LedgerStatement:
    """Cached wrapper around _fetch_customer_statement."""
    return _fetch_customer_statement(customer_id, currency_id)


def _fetch_residence_statement(
    customer_id: int,
    currency_id: int,
    passenger_name: str | None,
) -> LedgerStatement:
    """Fetch a residence ledger through the configured API."""
    use_case = build_residence_ledger_use_case()
    return use_case.execute(customer_id, currency_id, passenger_name)


@st.cache_data(show_spinner=False, ttl=60)
def _load_residence_statement(
    customer_id: int,
    currency_id: int,
    passenger_name: str | None,
) -> LedgerStatement:
    """Cached wrapper around _fetch_residence_statement."""
    return _fetch_residence_statement(customer_id, currency_id, passenger_name)


def _fetch_affiliate_statement(
    customer_id: int,
    currency_id: int,
    affiliate_id: int,
) -> AffiliateLedgerStatement:
    """Fetch an affiliate ledger through the configured API."""
    use_case = build_affiliate_ledger_use_case()
    return use_case.execute(customer_id, currency_id, affiliate_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_affiliate_statement(
    customer_id: int,
    currency_id: int,
    affiliate_id: int,
) -> AffiliateLedgerStatement:
    """Cached wrapper around _fetch_affiliate_statement."""
    return _fetch_affiliate_statement(customer_id, currency_id, affiliate_id)


def _fetch_pending_rollup(currency_id: int) -> PendingRollup:
    """Fetch the pending payments roll-up for a currency."""
    use_case = build_pending_rollup_use_case()
    return use_case.execute(currency_id)


@st.cache_data(show_spinner=False, ttl=30)
def _load_pending_rollup(currency_id: int) -> PendingRollup:
    """Cached wrapper around _fetch_pending_rollup."""
    return _fetch_pending_rollup(currency_id)


def _format_amount(value: Decimal, currency_code: str = "") -> str:
    """Format amounts for display."""
    formatted = f"{value:,.2f}"
    return f"{formatted} {currency_code}" if currency_code else formatted


def _format_date(value: datetime | None) -> str:
    """Format entry dates, flagging unparseable ones."""
    if value is None:
        return "Invalid date"
    return value.strftime("%d %b %Y")


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Verify numpy and pandas are usable before drawing Altair charts.

    Returns:
        tuple[bool, str | None]: Ok flag and an error message when not ok.
    """
    numpy = sys.modules.get("numpy")
    if numpy is None:
        try:
            import numpy
        except ImportError as exc:
            return False, f"numpy is unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."
    pandas = sys.modules.get("pandas")
    if pandas is None:
        try:
            import pandas
        except ImportError as exc:
            return False, f"pandas is unavailable: {exc}"
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


def _statement_rows(
    statement: LedgerStatement | AffiliateLedgerStatement,
) -> list[dict[str, str]]:
    """Return table rows for a statement."""
    rows = []
    for index, annotated in enumerate(statement.entries, start=1):
        entry = annotated.entry
        rows.append(
            {
                "#": str(index),
                "Date": _format_date(entry.occurred_at),
                "Type": entry.label,
                "Passenger": entry.subject_name,
                "Identification": entry.identification,
                "Route": " → ".join(
                    part for part in (entry.origin, entry.destination) if part
                ),
                "Party": entry.counterparty,
                "Amount": _format_amount(entry.amount),
                "Balance": _format_amount(annotated.running_balance),
            }
        )
    return rows


def _balance_chart_data(
    statement: LedgerStatement | AffiliateLedgerStatement,
) -> list[dict[str, str | float]]:
    """Return Altair-ready points for the running balance chart."""
    return [
        {
            "date": annotated.entry.occurred_at.isoformat(),
            "balance": float(annotated.running_balance),
            "label": annotated.entry.label,
        }
        for annotated in statement.entries
        if annotated.entry.occurred_at is not None
    ]


def _render_balance_chart(
    statement: LedgerStatement | AffiliateLedgerStatement,
) -> None:
    """Render the running balance as a step line."""
    data = _balance_chart_data(statement)
    if not data:
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(f"Balance chart unavailable: {message}")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        interpolate="step-after",
        point=True,
    ).encode(
        x=alt.X("date:T", title=None),
        y=alt.Y("balance:Q", title="Running balance"),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("label:N"),
            alt.Tooltip("balance:Q", format=",.2f"),
        ],
    ).properties(height=260)
    st.altair_chart(chart, width="stretch")


def _render_statement(statement: LedgerStatement) -> None:
    """Render summary cards, table and chart for a statement."""
    totals = statement.totals
    currency = statement.currency_code
    charges_col, paid_col, refund_col, outstanding_col = st.columns(4)
    charges_col.metric(
        "Total Charges",
        _format_amount(totals.total_charges, currency),
    )
    paid_col.metric("Total Paid", _format_amount(totals.total_paid, currency))
    refund_col.metric(
        "Total Refund",
        _format_amount(totals.total_refund, currency),
    )
    outstanding_col.metric(
        "Outstanding Balance",
        _format_amount(totals.outstanding_balance, currency),
    )
    if totals.total_fine_charges or totals.total_fine_paid:
        fines_col, fines_paid_col = st.columns(2)
        fines_col.metric(
            "Fines",
            _format_amount(totals.total_fine_charges, currency),
        )
        fines_paid_col.metric(
            "Fines Paid",
            _format_amount(totals.total_fine_paid, currency),
        )
    if statement.wallet_unavailable:
        st.warning(
            "Wallet payments could not be loaded. "
            "Totals cover the invoice ledger only."
        )
    if totals.total_wallet_paid:
        st.caption(
            "Includes "
            f"{_format_amount(totals.total_wallet_paid, currency)} "
            "paid from the customer wallet."
        )
    if not statement.entries:
        st.info("No transactions for this customer and currency.")
        return
    st.dataframe(_statement_rows(statement), width="stretch", hide_index=True)
    _render_balance_chart(statement)


def _render_affiliate_statement(statement: AffiliateLedgerStatement) -> None:
    """Render split subtotals, table and chart for an affiliate ledger."""
    totals = statement.totals
    currency = statement.currency_code
    affiliate_col, business_col, outstanding_col = st.columns(3)
    affiliate_col.metric(
        "Affiliate Subtotal",
        _format_amount(totals.affiliate_subtotal, currency),
    )
    business_col.metric(
        "Business Subtotal",
        _format_amount(totals.business_subtotal, currency),
    )
    outstanding_col.metric(
        "Outstanding Balance",
        _format_amount(totals.outstanding_balance, currency),
    )
    if not statement.entries:
        st.info("No transactions for this affiliate ledger.")
        return
    st.dataframe(_statement_rows(statement), width="stretch", hide_index=True)
    _render_balance_chart(statement)


def _rollup_rows(rollup: PendingRollup) -> list[dict[str, str]]:
    """Return table rows for the pending payments roll-up."""
    rows = []
    for index, row in enumerate(rollup.rows, start=1):
        account = row.account
        notes = []
        if account.wallet_unavailable:
            notes.append("wallet unavailable")
        if account.ledger_unavailable:
            notes.append("ledger unavailable, API total used")
        if row.wallet_exceeds_invoice:
            notes.append("wallet exceeds invoice")
        rows.append(
            {
                "#": str(index),
                "Customer": account.customer_name,
                "Email": account.customer_email,
                "Phone": account.customer_phone,
                "Wallet Paid": _format_amount(account.wallet_paid),
                "Pending": _format_amount(row.outstanding),
                "Notes": ", ".join(notes),
            }
        )
    return rows


def _render_rollup(rollup: PendingRollup) -> None:
    """Render the pending payments roll-up."""
    st.metric("Total Pending", _format_amount(rollup.grand_total))
    st.caption(
        f"{len(rollup.rows)} customers with a balance, "
        f"{rollup.discarded_count} settled"
    )
    if not rollup.rows:
        st.info("No pending payments for this currency.")
        return
    st.dataframe(_rollup_rows(rollup), width="stretch", hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Agency Ledger", layout="wide")
    st.title("Agency Ledger")
    usage_logger = get_usage_logger()

    page = st.sidebar.selectbox("Page", list(PAGES))
    currency_id = int(st.sidebar.number_input("Currency ID", min_value=1, step=1))

    if page == "Pending Payments":
        usage_logger.info(f"page={page} currency={currency_id}")
        _render_rollup(_load_pending_rollup(currency_id))
        return

    customer_id = int(st.sidebar.number_input("Customer ID", min_value=1, step=1))
    usage_logger.info(
        f"page={page} customer={customer_id} currency={currency_id}"
    )
    if page == "Residence Ledger":
        passenger_name = st.sidebar.text_input("Passenger name").strip() or None
        _render_statement(
            _load_residence_statement(customer_id, currency_id, passenger_name)
        )
    elif page == "Affiliate Ledger":
        affiliate_id = int(
            st.sidebar.number_input("Affiliate ID", min_value=1, step=1)
        )
        _render_affiliate_statement(
            _load_affiliate_statement(customer_id, currency_id, affiliate_id)
        )
    else:
        _render_statement(_load_customer_statement(customer_id, currency_id))


if __name__ == "__main__":  # pragma: no cover
    main()
