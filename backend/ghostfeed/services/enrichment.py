"""Resolves a transaction's account, card and currency lookups."""
from typing import Optional, Union
from ghostfeed.config import settings
from ghostfeed.models.feed import Enrichment
from ghostfeed.models.transaction import Transaction
from ghostfeed.storage.record_store import RecordStore, Snapshot


class EnrichmentResolver:
    """Key lookups against a record store snapshot. No side effects."""

    def __init__(self, default_currency_symbol: Optional[str] = None):
        self.default_currency_symbol = default_currency_symbol or settings.default_currency_symbol

    def resolve(self, transaction: Transaction, source: Union[RecordStore, Snapshot]) -> Enrichment:
        """
        Resolve lookups for one transaction.

        Args:
            transaction: The raw transaction
            source: A RecordStore (its current snapshot is used) or a Snapshot

        Returns:
            Enrichment; unmatched references resolve to None and an unknown
            currency to the default symbol.
        """
        snapshot = source.snapshot if isinstance(source, RecordStore) else source

        source_account = None
        if transaction.from_account_id is not None:
            source_account = snapshot.accounts_by_id.get(transaction.from_account_id)

        destination_account = None
        if transaction.to_account_id is not None:
            destination_account = snapshot.accounts_by_id.get(transaction.to_account_id)

        card = None
        if transaction.ghost_card_id is not None:
            card = snapshot.cards_by_id.get(transaction.ghost_card_id)

        currency = snapshot.currencies_by_code.get(transaction.currency)
        symbol = currency.symbol if currency is not None and currency.symbol else self.default_currency_symbol

        return Enrichment(
            source_account=source_account,
            destination_account=destination_account,
            card=card,
            currency_symbol=symbol,
        )
