"""Tests for feed assembly and presentation facts."""
import asyncio
from datetime import datetime, timezone
import pytest
import pytest_asyncio
from ghostfeed.adapters.mock import InMemoryRecordSource
from ghostfeed.errors import RecordLoadError
from ghostfeed.models.feed import FilterCriteria
from ghostfeed.services.feed import (
    EMPTY_FILTERED,
    EMPTY_HISTORY,
    FeedAssembler,
    filter_options,
    format_amount,
)
from ghostfeed.storage.record_store import RecordStore
from ghostfeed.utils.privacy import mask_card_number
from ghostfeed.utils.timestamp import format_timestamp


@pytest_asyncio.fixture
async def store(sources):
    store = RecordStore(sources)
    await store.load()
    return store


@pytest.mark.asyncio
async def test_transfer_scenario():
    """Inbound transfer to a known account with no currency record for USD."""
    sources = {
        "transactions": InMemoryRecordSource("transactions", [{
            "id": "T1",
            "type": "account_transfer",
            "status": "completed",
            "amount": 150,
            "currency": "USD",
            "toAccountId": "A2",
            "createdAt": "2026-02-01T12:00:00Z",
        }]),
        "accounts": InMemoryRecordSource("accounts", [{"id": "A2", "accountName": "Savings"}]),
        "cards": InMemoryRecordSource("cards", []),
        "currencies": InMemoryRecordSource("currencies", []),
    }
    store = RecordStore(sources)
    await store.load()

    feed = FeedAssembler().assemble(store, FilterCriteria())
    item = feed.items[0]

    assert item.classification.sign == "credit"
    assert item.currency_symbol == "$"
    assert item.destination_account.account_name == "Savings"
    assert item.show_destination_account
    assert not item.show_source_account
    assert item.classification.type_label == "Account Transfer"
    assert item.title == "Account Transfer"
    assert item.formatted_amount == "+$150"


@pytest.mark.asyncio
async def test_full_feed_in_store_order(store):
    feed = FeedAssembler().assemble(store, FilterCriteria())

    assert feed.status == "ready"
    assert [item.transaction.id for item in feed.items] == ["tx_3", "tx_2", "tx_1"]
    assert feed.total_count == 3
    assert feed.matched_count == 3
    assert feed.empty_state is None


@pytest.mark.asyncio
async def test_decorated_fields(store):
    items = {item.transaction.id: item for item in FeedAssembler().assemble(store, FilterCriteria()).items}

    payment = items["tx_3"]
    assert payment.title == "Ghost Card Payment"
    assert payment.masked_card == "•••• 9876"
    assert payment.card_id == "C1"
    assert payment.formatted_amount == "€42.5"
    assert payment.risk_display == "12/100"
    assert payment.classification.risk_tier == "low"

    refund = items["tx_1"]
    assert refund.title == "Refund for order 77"
    assert refund.formatted_amount == "+£1,234.5"
    assert refund.classification.risk_tier == "high"
    assert refund.classification.status_badge.label == "Flagged"
    assert refund.transaction.fraud_flags == ["velocity"]


@pytest.mark.asyncio
async def test_same_account_transfer_hides_destination():
    sources = {
        "transactions": InMemoryRecordSource("transactions", [{
            "id": "T1",
            "type": "account_transfer",
            "status": "completed",
            "amount": 5,
            "currency": "USD",
            "fromAccountId": "A1",
            "toAccountId": "A1",
            "createdAt": "2026-02-01T12:00:00Z",
        }]),
        "accounts": InMemoryRecordSource("accounts", [{"id": "A1", "accountName": "Checking"}]),
        "cards": InMemoryRecordSource("cards", []),
        "currencies": InMemoryRecordSource("currencies", []),
    }
    store = RecordStore(sources)
    await store.load()

    item = FeedAssembler().assemble(store, FilterCriteria()).items[0]
    assert item.source_account.account_name == "Checking"
    assert item.destination_account is not None
    assert not item.show_destination_account
    assert item.show_source_account


@pytest.mark.asyncio
async def test_empty_state_messages(store):
    assembler = FeedAssembler()

    filtered = assembler.assemble(store, FilterCriteria(search_term="no such thing"))
    assert filtered.items == []
    assert filtered.empty_state == EMPTY_FILTERED

    empty_store = RecordStore({kind: InMemoryRecordSource(kind, []) for kind in store.sources})
    await empty_store.load()
    assert assembler.assemble(empty_store, FilterCriteria()).empty_state == EMPTY_HISTORY


@pytest.mark.asyncio
async def test_feed_reports_load_error(sources):
    sources["transactions"].fail_with = RuntimeError("upstream down")
    store = RecordStore(sources)
    with pytest.raises(RecordLoadError):
        await store.load()

    feed = FeedAssembler().assemble(store, FilterCriteria())
    assert feed.status == "error"
    assert feed.items == []
    assert "upstream down" in feed.error


def test_feed_before_load_is_idle(sources):
    feed = FeedAssembler().assemble(RecordStore(sources), FilterCriteria())
    assert feed.status == "idle"
    assert feed.items == []
    assert feed.empty_state is None


@pytest.mark.asyncio
async def test_assembly_is_repeatable(store):
    assembler = FeedAssembler()
    criteria = FilterCriteria(status_filter="pending")
    assert assembler.assemble(store, criteria) == assembler.assemble(store, criteria)


def test_format_amount():
    assert format_amount(1234567.891, "$", "neutral") == "$1,234,567.891"
    assert format_amount(0, "$", "neutral") == "$0"
    assert format_amount(100, "€", "credit") == "+€100"
    assert format_amount(2.5, "£", "neutral") == "£2.5"


def test_format_timestamp():
    assert format_timestamp(datetime(2026, 1, 5, 15, 7, tzinfo=timezone.utc)) == "Jan 5, 2026 at 3:07 PM"
    assert format_timestamp(datetime(2026, 12, 25, 0, 30)) == "Dec 25, 2026 at 12:30 AM"


def test_mask_card_number():
    assert mask_card_number("4111-1111-1111-1234") == "•••• 1234"
    assert mask_card_number("") is None


def test_filter_options():
    options = filter_options()
    assert [o.value for o in options.statuses] == ["all", "completed", "pending", "failed", "flagged"]
    assert [o.label for o in options.types] == [
        "All Types",
        "Card Creation",
        "Card Payment",
        "Card Refund",
        "Account Transfer",
        "Currency Exchange",
    ]


@pytest.mark.asyncio
async def test_feed_while_loading_has_no_items(sources):
    gate = asyncio.Event()
    original = sources["currencies"].list_all

    async def held(order_hint=None):
        await gate.wait()
        return await original(order_hint)

    sources["currencies"].list_all = held
    store = RecordStore(sources)
    pending = asyncio.create_task(store.load())
    await asyncio.sleep(0)

    feed = FeedAssembler().assemble(store, FilterCriteria())
    assert feed.status == "loading"
    assert feed.items == []

    gate.set()
    await pending
    assert FeedAssembler().assemble(store, FilterCriteria()).status == "ready"
