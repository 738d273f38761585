"""Session record store: an immutable snapshot of the four collections."""
import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, Mapping, Optional, Tuple
from ghostfeed.adapters.base import (
    ACCOUNTS,
    CARDS,
    CURRENCIES,
    RECORD_MODELS,
    TRANSACTION_ORDER_HINT,
    TRANSACTIONS,
    RecordSource,
)
from ghostfeed.errors import RecordLoadError
from ghostfeed.models.records import Account, Currency, GhostCard
from ghostfeed.models.transaction import Transaction

logger = logging.getLogger(__name__)

LOAD_ORDER = (TRANSACTIONS, ACCOUNTS, CARDS, CURRENCIES)


def _index(records, key: str) -> Dict[str, object]:
    """Map key -> record; the first record wins on duplicate keys."""
    index: Dict[str, object] = {}
    for record in records:
        index.setdefault(getattr(record, key), record)
    return index


@dataclass(frozen=True)
class Snapshot:
    """One consistent, read-only view of the four collections plus lookup indices."""

    transactions: Tuple[Transaction, ...] = ()
    accounts: Tuple[Account, ...] = ()
    cards: Tuple[GhostCard, ...] = ()
    currencies: Tuple[Currency, ...] = ()
    accounts_by_id: Mapping[str, Account] = field(default_factory=dict)
    cards_by_id: Mapping[str, GhostCard] = field(default_factory=dict)
    currencies_by_code: Mapping[str, Currency] = field(default_factory=dict)

    @classmethod
    def build(cls, transactions, accounts, cards, currencies) -> "Snapshot":
        accounts = tuple(accounts)
        cards = tuple(cards)
        currencies = tuple(currencies)
        return cls(
            transactions=tuple(transactions),
            accounts=accounts,
            cards=cards,
            currencies=currencies,
            accounts_by_id=_index(accounts, "id"),
            cards_by_id=_index(cards, "id"),
            currencies_by_code=_index(currencies, "code"),
        )

    def get(self, kind: str) -> tuple:
        if kind not in RECORD_MODELS:
            raise ValueError(f"Unknown record kind: {kind}")
        return getattr(self, kind)

    def counts(self) -> Dict[str, int]:
        return {kind: len(self.get(kind)) for kind in LOAD_ORDER}


class RecordStore:
    """Holds the fetched collections for one session.

    ``load()`` replaces the snapshot wholesale; readers take ``snapshot``
    once per pass and never observe a half-applied load.
    """

    def __init__(self, sources: Mapping[str, RecordSource]):
        missing = [kind for kind in LOAD_ORDER if kind not in sources]
        if missing:
            raise ValueError(f"Missing record sources: {', '.join(missing)}")
        self.sources = dict(sources)
        self._snapshot = Snapshot()
        self.status = "idle"
        self.last_error: Optional[RecordLoadError] = None
        self.loaded_at: Optional[datetime] = None
        self._generation = 0

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        return self.status == "loading"

    def get(self, kind: str) -> tuple:
        """Return the current collection for ``kind`` as a read-only sequence."""
        return self._snapshot.get(kind)

    async def _fetch(self, kind: str):
        order_hint = TRANSACTION_ORDER_HINT if kind == TRANSACTIONS else None
        try:
            return await self.sources[kind].list_all(order_hint)
        except Exception as e:
            raise RecordLoadError(kind, e) from e

    async def load(self) -> Snapshot:
        """
        Fetch all four collections concurrently and swap in the new snapshot.

        Overlapping loads are applied in the order they were started: a load
        that finishes after a newer one began leaves the store untouched.

        Raises:
            RecordLoadError: If any fetch fails. The previous snapshot is kept.
        """
        self._generation += 1
        generation = self._generation
        self.status = "loading"
        logger.info("Loading record collections", extra={"kinds": list(LOAD_ORDER)})
        try:
            results = await asyncio.gather(*(self._fetch(kind) for kind in LOAD_ORDER))
        except RecordLoadError as e:
            logger.error("Record load failed: %s", e, extra={"kind": e.kind})
            if generation == self._generation:
                self.status = "error"
                self.last_error = e
            raise

        if generation != self._generation:
            logger.info("Discarding superseded record load", extra={"generation": generation})
            return self._snapshot

        self._snapshot = Snapshot.build(*results)
        self.status = "ready"
        self.last_error = None
        self.loaded_at = datetime.now(timezone.utc)
        logger.info("Record collections loaded", extra={"counts": self._snapshot.counts()})
        return self._snapshot
