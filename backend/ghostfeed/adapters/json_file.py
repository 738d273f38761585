"""Record source backed by a JSON export file."""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import BaseModel
from ghostfeed.adapters.base import ACCOUNTS, CARDS, CURRENCIES, TRANSACTIONS, RecordSource, apply_order_hint
from ghostfeed.errors import RecordSourceError

logger = logging.getLogger(__name__)

# Keys tried in the export document for each kind
FILE_KEYS = {
    TRANSACTIONS: ("transactions",),
    ACCOUNTS: ("accounts",),
    CARDS: ("ghostCards", "cards"),
    CURRENCIES: ("currencies",),
}


def _read_document(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class JsonFileRecordSource(RecordSource):
    """
    Reads one collection out of an export document of the form::

        {"transactions": [...], "accounts": [...], "ghostCards": [...], "currencies": [...]}

    The file is re-read on every call so a reload picks up changes.
    """

    def __init__(self, kind: str, path: str, **kwargs):
        super().__init__(kind, **kwargs)
        self.path = Path(path)

    async def list_all(self, order_hint: Optional[str] = None) -> List[BaseModel]:
        try:
            document = await asyncio.to_thread(_read_document, self.path)
        except FileNotFoundError as e:
            raise RecordSourceError(self.kind, f"export file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise RecordSourceError(self.kind, f"invalid JSON in {self.path}: {e}") from e

        if not isinstance(document, dict):
            raise RecordSourceError(self.kind, "export document must be a JSON object")

        items = None
        for key in FILE_KEYS[self.kind]:
            if key in document:
                items = document[key]
                break
        if items is None:
            logger.warning("Export file %s has no %s section", self.path, self.kind)
            items = []
        if not isinstance(items, list):
            raise RecordSourceError(self.kind, f"'{self.kind}' section must be a list")

        return apply_order_hint(self.parse(items), order_hint)
