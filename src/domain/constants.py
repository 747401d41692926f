"""Domain constants for ledger reconciliation."""

from decimal import Decimal

CHARGE = "charge"
PAYMENT = "payment"
REFUND = "refund"
FINE = "fine"
FINE_PAYMENT = "fine_payment"
WALLET_PAYMENT = "wallet_payment"

LEDGER_CATEGORIES = (
    CHARGE,
    PAYMENT,
    REFUND,
    FINE,
    FINE_PAYMENT,
    WALLET_PAYMENT,
)

# Categories that increase what the customer owes.
INCREASING_CATEGORIES = (CHARGE, FINE)
DECREASING_CATEGORIES = (PAYMENT, REFUND, FINE_PAYMENT, WALLET_PAYMENT)

SOURCE_INVOICE = "invoice"
SOURCE_WALLET = "wallet"

COUNTERPARTY_CUSTOMER = "customer"
COUNTERPARTY_BUSINESS = "business"

INVOICE_CATEGORY_BY_TYPE = {
    "Payment": PAYMENT,
    "Refund": REFUND,
    "Residence Payment": PAYMENT,
    "Residence Fine Payment": FINE_PAYMENT,
}

RESIDENCE_CATEGORY_BY_TYPE = {
    "Residence Payment": PAYMENT,
    "Residence Fine": FINE,
    "Residence Fine Payment": FINE_PAYMENT,
}

WALLET_PAYMENT_TYPE = "payment"
WALLET_PAYMENT_LABEL = "Payment (from Wallet)"

WALLET_REFERENCE_LABELS = {
    "residence": "Residence",
    "family_residence": "Residence",
    "visa": "Visa",
    "ticket": "Ticket",
}

DEFAULT_AGENCY_NAME = "SN Trips"
DEFAULT_PENDING_EPSILON = Decimal("0.01")


__all__ = [
    "CHARGE",
    "PAYMENT",
    "REFUND",
    "FINE",
    "FINE_PAYMENT",
    "WALLET_PAYMENT",
    "LEDGER_CATEGORIES",
    "INCREASING_CATEGORIES",
    "DECREASING_CATEGORIES",
    "SOURCE_INVOICE",
    "SOURCE_WALLET",
    "COUNTERPARTY_CUSTOMER",
    "COUNTERPARTY_BUSINESS",
    "INVOICE_CATEGORY_BY_TYPE",
    "RESIDENCE_CATEGORY_BY_TYPE",
    "WALLET_PAYMENT_TYPE",
    "WALLET_PAYMENT_LABEL",
    "WALLET_REFERENCE_LABELS",
    "DEFAULT_AGENCY_NAME",
    "DEFAULT_PENDING_EPSILON",
]
