"""Shared fixtures for feed tests."""
import pytest
from ghostfeed.adapters.mock import InMemoryRecordSource
from ghostfeed.models.transaction import Transaction


def make_transaction(**overrides) -> Transaction:
    """Build a transaction with sensible defaults; camelCase keys are accepted."""
    data = {
        "id": "tx_1",
        "type": "ghost_card_payment",
        "status": "completed",
        "amount": 10.0,
        "currency": "USD",
        "createdAt": "2026-01-05T15:07:00Z",
    }
    data.update(overrides)
    return Transaction.model_validate(data)


@pytest.fixture
def accounts():
    return [
        {"id": "A1", "accountName": "Checking"},
        {"id": "A2", "accountName": "Savings"},
    ]


@pytest.fixture
def cards():
    return [{"id": "C1", "cardNumber": "4111 1111 1111 9876"}]


@pytest.fixture
def currencies():
    return [{"code": "EUR", "symbol": "€"}, {"code": "GBP", "symbol": "£"}]


@pytest.fixture
def transactions():
    """Newest first, as the transaction source delivers them."""
    return [
        {
            "id": "tx_3",
            "type": "ghost_card_payment",
            "status": "completed",
            "amount": 42.5,
            "currency": "EUR",
            "merchantName": "ACME Corp",
            "ghostCardId": "C1",
            "riskScore": 12,
            "createdAt": "2026-03-03T10:00:00Z",
        },
        {
            "id": "tx_2",
            "type": "account_transfer",
            "status": "pending",
            "amount": 150,
            "currency": "USD",
            "toAccountId": "A2",
            "createdAt": "2026-03-02T10:00:00Z",
        },
        {
            "id": "tx_1",
            "type": "ghost_card_refund",
            "status": "flagged",
            "amount": 1234.5,
            "currency": "GBP",
            "description": "Refund for order 77",
            "riskScore": 75,
            "fraudFlags": ["velocity"],
            "createdAt": "2026-03-01T10:00:00Z",
        },
    ]


@pytest.fixture
def sources(transactions, accounts, cards, currencies):
    """In-memory sources for all four collections."""
    return {
        "transactions": InMemoryRecordSource("transactions", transactions),
        "accounts": InMemoryRecordSource("accounts", accounts),
        "cards": InMemoryRecordSource("cards", cards),
        "currencies": InMemoryRecordSource("currencies", currencies),
    }
