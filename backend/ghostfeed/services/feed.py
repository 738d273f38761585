"""Feed assembly: decorate, filter and package transactions for display."""
import logging
from typing import List, Optional
from ghostfeed.models.feed import (
    ALL,
    DecoratedTransaction,
    Feed,
    FilterCriteria,
    FilterOption,
    FilterOptions,
)
from ghostfeed.models.transaction import TRANSACTION_STATUSES, TRANSACTION_TYPES, Transaction
from ghostfeed.services.classifier import CREDIT, STATUS_LABELS, classify, format_type_label
from ghostfeed.services.enrichment import EnrichmentResolver
from ghostfeed.services.filtering import filter_transactions
from ghostfeed.storage.record_store import RecordStore, Snapshot
from ghostfeed.utils.privacy import mask_card_number
from ghostfeed.utils.timestamp import format_timestamp

logger = logging.getLogger(__name__)

EMPTY_FILTERED = "Try adjusting your search criteria"
EMPTY_HISTORY = "Your transaction history will appear here"


def format_amount(amount: float, symbol: str, sign: str) -> str:
    """
    Render an amount with its currency symbol and thousands separators.

    Up to three fraction digits are kept, trailing zeros dropped;
    credits get a leading ``+``.
    """
    text = f"{amount:,.3f}".rstrip("0").rstrip(".")
    prefix = "+" if sign == CREDIT else ""
    return f"{prefix}{symbol}{text}"


def filter_options() -> FilterOptions:
    """Choices offered by the status and type filters."""
    statuses = [FilterOption(value=ALL, label="All Statuses")]
    statuses += [FilterOption(value=s, label=STATUS_LABELS[s]) for s in TRANSACTION_STATUSES]
    types = [FilterOption(value=ALL, label="All Types")]
    # "ghost_card_payment" is offered as "Card Payment"
    types += [
        FilterOption(value=t, label=format_type_label(t.replace("ghost_", "", 1)))
        for t in TRANSACTION_TYPES
    ]
    return FilterOptions(statuses=statuses, types=types)


class FeedAssembler:
    """Builds the decorated, filtered feed for one record store."""

    def __init__(self, resolver: Optional[EnrichmentResolver] = None):
        self.resolver = resolver or EnrichmentResolver()

    def decorate(self, transaction: Transaction, snapshot: Snapshot) -> DecoratedTransaction:
        enrichment = self.resolver.resolve(transaction, snapshot)
        classification = classify(transaction)

        show_destination = (
            enrichment.destination_account is not None
            and transaction.from_account_id != transaction.to_account_id
        )
        card = enrichment.card

        return DecoratedTransaction(
            transaction=transaction,
            source_account=enrichment.source_account,
            destination_account=enrichment.destination_account,
            card_id=card.id if card is not None else None,
            masked_card=mask_card_number(card.card_number) if card is not None else None,
            currency_symbol=enrichment.currency_symbol,
            classification=classification,
            title=transaction.description or classification.type_label,
            show_source_account=enrichment.source_account is not None,
            show_destination_account=show_destination,
            formatted_amount=format_amount(transaction.amount, enrichment.currency_symbol, classification.sign),
            formatted_timestamp=format_timestamp(transaction.created_at),
            risk_display=f"{transaction.risk_score}/100" if transaction.risk_score is not None else None,
        )

    def decorate_all(self, snapshot: Snapshot, criteria: FilterCriteria) -> List[DecoratedTransaction]:
        """Filter the snapshot's transactions and decorate the matches, in order."""
        matched = filter_transactions(snapshot.transactions, criteria)
        return [self.decorate(tx, snapshot) for tx in matched]

    def assemble(self, store: RecordStore, criteria: FilterCriteria) -> Feed:
        """
        Produce the feed for the store's current state.

        While loading or after a failed load no items are returned; the
        status flag tells the caller which state applies.
        """
        if store.is_loading:
            return Feed(status="loading")
        if store.status == "idle":
            return Feed(status="idle")
        if store.status == "error":
            return Feed(status="error", error=str(store.last_error))

        snapshot = store.snapshot
        items = self.decorate_all(snapshot, criteria)
        empty_state = None
        if not items:
            empty_state = EMPTY_FILTERED if criteria.is_active else EMPTY_HISTORY

        logger.debug(
            "Feed assembled",
            extra={"total": len(snapshot.transactions), "matched": len(items)},
        )
        return Feed(
            items=items,
            status="ready",
            total_count=len(snapshot.transactions),
            matched_count=len(items),
            empty_state=empty_state,
        )
