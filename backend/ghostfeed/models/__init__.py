from .transaction import (
    Transaction,
    TRANSACTION_TYPES,
    TRANSACTION_STATUSES,
)
from .records import Account, GhostCard, Currency
from .feed import (
    ALL,
    Enrichment,
    StatusBadge,
    Classification,
    DecoratedTransaction,
    FilterCriteria,
    FilterOption,
    FilterOptions,
    Feed,
    SessionStatus,
)

__all__ = [
    "Transaction",
    "TRANSACTION_TYPES",
    "TRANSACTION_STATUSES",
    "Account",
    "GhostCard",
    "Currency",
    "ALL",
    "Enrichment",
    "StatusBadge",
    "Classification",
    "DecoratedTransaction",
    "FilterCriteria",
    "FilterOption",
    "FilterOptions",
    "Feed",
    "SessionStatus",
]
