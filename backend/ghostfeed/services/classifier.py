"""Derives display categories from raw transaction fields."""
from typing import Optional
from ghostfeed.models.feed import Classification, StatusBadge
from ghostfeed.models.transaction import (
    ACCOUNT_TRANSFER,
    COMPLETED,
    CURRENCY_EXCHANGE,
    FAILED,
    FLAGGED,
    GHOST_CARD_CREATION,
    GHOST_CARD_PAYMENT,
    GHOST_CARD_REFUND,
    PENDING,
    Transaction,
)

CREDIT = "credit"
NEUTRAL = "neutral"

OTHER_ICON = "other"
UNKNOWN_STATUS = "unknown"

TYPE_ICONS = {
    GHOST_CARD_CREATION: "card",
    GHOST_CARD_PAYMENT: "outgoing",
    GHOST_CARD_REFUND: "incoming",
    ACCOUNT_TRANSFER: "transfer",
    CURRENCY_EXCHANGE: "exchange",
}

STATUS_LABELS = {
    COMPLETED: "Completed",
    PENDING: "Pending",
    FAILED: "Failed",
    FLAGGED: "Flagged",
}

# Upper bounds (inclusive) of the low and medium risk tiers
LOW_RISK_MAX = 30
MEDIUM_RISK_MAX = 70


def format_type_label(type_token: str) -> str:
    """``account_transfer`` -> ``Account Transfer``."""
    return " ".join(word[:1].upper() + word[1:] for word in type_token.split("_"))


def icon_for_type(type_token: str) -> str:
    return TYPE_ICONS.get(type_token, OTHER_ICON)


def status_badge(status: str) -> StatusBadge:
    """Badge for a status token; unrecognised tokens keep their raw text as label."""
    if status in STATUS_LABELS:
        return StatusBadge(category=status, label=STATUS_LABELS[status])
    return StatusBadge(category=UNKNOWN_STATUS, label=status)


def risk_tier(score: Optional[int]) -> Optional[str]:
    if score is None:
        return None
    if score <= LOW_RISK_MAX:
        return "low"
    if score <= MEDIUM_RISK_MAX:
        return "medium"
    return "high"


def sign_for(transaction: Transaction) -> str:
    """
    Whether the amount is shown as a credit.

    Refunds are always credits. Transfers share one type token for both legs,
    so a transfer is a credit exactly when it carries a destination account,
    whether or not it also has a source account. Everything else is neutral.
    """
    if transaction.type == GHOST_CARD_REFUND:
        return CREDIT
    if transaction.type == ACCOUNT_TRANSFER and transaction.to_account_id:
        return CREDIT
    return NEUTRAL


def classify(transaction: Transaction) -> Classification:
    return Classification(
        icon=icon_for_type(transaction.type),
        status_badge=status_badge(transaction.status),
        risk_tier=risk_tier(transaction.risk_score),
        type_label=format_type_label(transaction.type),
        sign=sign_for(transaction),
    )
