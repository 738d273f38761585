"""In-memory record source for tests and demo sessions."""
from typing import Any, Dict, List, Optional, Sequence
from pydantic import BaseModel
from ghostfeed.adapters.base import RecordSource, apply_order_hint


class InMemoryRecordSource(RecordSource):
    """Record source serving a fixed list of records.

    ``fail_with`` makes every call raise the given exception, which is how
    tests exercise the all-or-nothing load.
    """

    def __init__(
        self,
        kind: str,
        records: Optional[Sequence[Any]] = None,
        fail_with: Optional[BaseException] = None,
        **kwargs,
    ):
        super().__init__(kind, **kwargs)
        self.records = self.parse(records or [])
        self.fail_with = fail_with
        self.calls = 0

    async def list_all(self, order_hint: Optional[str] = None) -> List[BaseModel]:
        self.calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        return apply_order_hint(self.records, order_hint)


# Demo dataset served by the "mock" backend
DEMO_RECORDS: Dict[str, List[Dict[str, Any]]] = {
    "accounts": [
        {"id": "acc_main", "accountName": "Main Checking"},
        {"id": "acc_savings", "accountName": "Savings"},
        {"id": "acc_travel", "accountName": "Travel Fund"},
    ],
    "cards": [
        {"id": "card_shop", "cardNumber": "4111 1111 1111 4821"},
        {"id": "card_subs", "cardNumber": "5500 0000 0000 0917"},
    ],
    "currencies": [
        {"code": "USD", "symbol": "$"},
        {"code": "EUR", "symbol": "€"},
        {"code": "GBP", "symbol": "£"},
    ],
    "transactions": [
        {
            "id": "tx_001",
            "type": "ghost_card_payment",
            "status": "completed",
            "amount": 42.5,
            "currency": "USD",
            "merchantName": "ACME Corp",
            "location": "Austin, TX",
            "ghostCardId": "card_shop",
            "riskScore": 12,
            "createdAt": "2026-03-14T18:22:00Z",
        },
        {
            "id": "tx_002",
            "type": "account_transfer",
            "status": "completed",
            "amount": 1500,
            "currency": "USD",
            "description": "Monthly savings",
            "fromAccountId": "acc_main",
            "toAccountId": "acc_savings",
            "createdAt": "2026-03-13T09:00:00Z",
        },
        {
            "id": "tx_003",
            "type": "ghost_card_refund",
            "status": "completed",
            "amount": 19.99,
            "currency": "EUR",
            "merchantName": "Streamly",
            "ghostCardId": "card_subs",
            "createdAt": "2026-03-12T11:45:00Z",
        },
        {
            "id": "tx_004",
            "type": "ghost_card_payment",
            "status": "flagged",
            "amount": 980,
            "currency": "GBP",
            "merchantName": "Unknown Electronics Ltd",
            "location": "Lagos, NG",
            "ghostCardId": "card_shop",
            "riskScore": 86,
            "fraudFlags": ["velocity", "geo_mismatch"],
            "createdAt": "2026-03-11T02:13:00Z",
        },
        {
            "id": "tx_005",
            "type": "currency_exchange",
            "status": "pending",
            "amount": 250,
            "currency": "EUR",
            "fromAccountId": "acc_main",
            "riskScore": 45,
            "createdAt": "2026-03-10T15:30:00Z",
        },
        {
            "id": "tx_006",
            "type": "ghost_card_creation",
            "status": "completed",
            "amount": 0,
            "currency": "USD",
            "ghostCardId": "card_subs",
            "createdAt": "2026-03-09T08:05:00Z",
        },
        {
            "id": "tx_007",
            "type": "account_transfer",
            "status": "failed",
            "amount": 300,
            "currency": "USD",
            "fromAccountId": "acc_travel",
            "createdAt": "2026-03-08T20:40:00Z",
        },
    ],
}
