"""Base record source interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence, Type
from pydantic import BaseModel
from ghostfeed.models.records import Account, Currency, GhostCard
from ghostfeed.models.transaction import Transaction

TRANSACTIONS = "transactions"
ACCOUNTS = "accounts"
CARDS = "cards"
CURRENCIES = "currencies"

RECORD_MODELS: Dict[str, Type[BaseModel]] = {
    TRANSACTIONS: Transaction,
    ACCOUNTS: Account,
    CARDS: GhostCard,
    CURRENCIES: Currency,
}

# Ordering requested from the transaction source: newest first
TRANSACTION_ORDER_HINT = "createdAt:desc"

_ORDER_FIELDS = {"createdAt": "created_at"}


def apply_order_hint(records: Sequence[BaseModel], order_hint: Optional[str]) -> List[BaseModel]:
    """
    Sort records according to a ``field:direction`` hint.

    Only ``createdAt`` is supported; ``direction`` is ``asc`` or ``desc``.
    Sorting is stable, so records with equal timestamps keep their order.
    """
    if not order_hint:
        return list(records)
    field, _, direction = order_hint.partition(":")
    attr = _ORDER_FIELDS.get(field)
    if attr is None:
        raise ValueError(f"Unsupported order field: {field}")
    if direction not in ("", "asc", "desc"):
        raise ValueError(f"Unsupported order direction: {direction}")
    return sorted(records, key=lambda r: getattr(r, attr), reverse=direction == "desc")


class RecordSource(ABC):
    """Abstract "list all records" capability for one collection kind."""

    def __init__(self, kind: str, **kwargs):
        """
        Initialize the source.

        Args:
            kind: One of "transactions", "accounts", "cards", "currencies"
            **kwargs: Additional source-specific configuration
        """
        if kind not in RECORD_MODELS:
            raise ValueError(f"Unknown record kind: {kind}")
        self.kind = kind
        self.model = RECORD_MODELS[kind]
        self.config = kwargs

    def parse(self, items: Iterable[Any]) -> List[BaseModel]:
        """Validate raw items into this kind's record model."""
        return [
            item if isinstance(item, self.model) else self.model.model_validate(item)
            for item in items
        ]

    @abstractmethod
    async def list_all(self, order_hint: Optional[str] = None) -> List[BaseModel]:
        """
        Return every record of this kind.

        Args:
            order_hint: Optional ordering request such as "createdAt:desc";
                the source is responsible for satisfying it.

        Returns:
            Validated records
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"
