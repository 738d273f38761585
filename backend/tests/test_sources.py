"""Tests for record sources."""
import json
import httpx
import pytest
from pydantic import ValidationError
from ghostfeed.adapters.base import apply_order_hint
from ghostfeed.adapters.factory import get_record_sources
from ghostfeed.adapters.http import HttpRecordSource
from ghostfeed.adapters.json_file import JsonFileRecordSource
from ghostfeed.adapters.mock import InMemoryRecordSource
from ghostfeed.errors import RecordSourceError
from ghostfeed.models.records import GhostCard


@pytest.fixture
def export_file(tmp_path, transactions, accounts, cards, currencies):
    """JSON export with transactions stored oldest first."""
    path = tmp_path / "export.json"
    with open(path, "w") as f:
        json.dump(
            {
                "transactions": list(reversed(transactions)),
                "accounts": accounts,
                "ghostCards": cards,
                "currencies": currencies,
            },
            f,
        )
    return path


@pytest.mark.asyncio
async def test_json_file_source_reads_each_kind(export_file):
    accounts = await JsonFileRecordSource("accounts", str(export_file)).list_all()
    cards = await JsonFileRecordSource("cards", str(export_file)).list_all()

    assert [a.account_name for a in accounts] == ["Checking", "Savings"]
    assert isinstance(cards[0], GhostCard)


@pytest.mark.asyncio
async def test_json_file_source_honours_order_hint(export_file):
    source = JsonFileRecordSource("transactions", str(export_file))

    newest_first = await source.list_all("createdAt:desc")
    as_stored = await source.list_all()

    assert [tx.id for tx in newest_first] == ["tx_3", "tx_2", "tx_1"]
    assert [tx.id for tx in as_stored] == ["tx_1", "tx_2", "tx_3"]


@pytest.mark.asyncio
async def test_json_file_source_missing_file(tmp_path):
    source = JsonFileRecordSource("accounts", str(tmp_path / "missing.json"))
    with pytest.raises(RecordSourceError):
        await source.list_all()


@pytest.mark.asyncio
async def test_json_file_source_missing_section_is_empty(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"accounts": []}))
    assert await JsonFileRecordSource("currencies", str(path)).list_all() == []


@pytest.mark.asyncio
async def test_http_source_fetches_results():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["sort"] = request.url.params.get("sort")
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(200, json={"results": [{"id": "C1", "cardNumber": "5500000000001111"}]})

    source = HttpRecordSource(
        "cards",
        "https://records.example/api/",
        token="secret",
        transport=httpx.MockTransport(handler),
    )
    cards = await source.list_all("createdAt:desc")

    assert cards[0].id == "C1"
    assert seen == {"path": "/api/ghost-cards", "sort": "createdAt:desc", "auth": "Bearer secret"}


@pytest.mark.asyncio
async def test_http_source_accepts_plain_list():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[{"code": "USD", "symbol": "$"}]))
    source = HttpRecordSource("currencies", "https://records.example", token="", transport=transport)

    currencies = await source.list_all()
    assert currencies[0].code == "USD"


@pytest.mark.asyncio
async def test_http_source_error_status():
    transport = httpx.MockTransport(lambda request: httpx.Response(503, text="unavailable"))
    source = HttpRecordSource("accounts", "https://records.example", token="", transport=transport)

    with pytest.raises(RecordSourceError) as exc_info:
        await source.list_all()
    assert exc_info.value.status_code == 503


def test_invalid_record_rejected():
    with pytest.raises(ValidationError):
        InMemoryRecordSource(
            "transactions",
            [{"id": "x", "type": "t", "status": "s", "amount": 1, "currency": "USD",
              "riskScore": 101, "createdAt": "2026-01-01T00:00:00Z"}],
        )


def test_order_hint_rejects_unknown_field():
    with pytest.raises(ValueError):
        apply_order_hint([], "amount:desc")


def test_factory_backends(tmp_path):
    mock_sources = get_record_sources("mock")
    assert set(mock_sources) == {"transactions", "accounts", "cards", "currencies"}
    assert len(mock_sources["transactions"].records) > 0

    assert isinstance(get_record_sources(f"file:{tmp_path / 'x.json'}")["accounts"], JsonFileRecordSource)
    assert isinstance(get_record_sources("https://records.example")["cards"], HttpRecordSource)
    assert get_record_sources("mock:empty")["accounts"].records == []

    with pytest.raises(ValueError):
        get_record_sources("ftp://nope")
