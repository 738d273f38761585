"""Record source fetching collections from a REST endpoint."""
import logging
from typing import Any, Dict, List, Optional
import httpx
from pydantic import BaseModel
from ghostfeed.adapters.base import RecordSource
from ghostfeed.config import settings
from ghostfeed.errors import RecordSourceError

logger = logging.getLogger(__name__)

COLLECTION_PATHS = {
    "transactions": "/transactions",
    "accounts": "/accounts",
    "cards": "/ghost-cards",
    "currencies": "/currencies",
}


class HttpRecordSource(RecordSource):
    """REST-backed source: ``GET {base_url}{path}?sort=<order_hint>``.

    The response body is either a JSON list or an object with a
    ``results`` list.
    """

    def __init__(
        self,
        kind: str,
        base_url: str,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ):
        super().__init__(kind, **kwargs)
        self.base_url = base_url.rstrip("/")
        self.token = token if token is not None else settings.api_token
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {"accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def list_all(self, order_hint: Optional[str] = None) -> List[BaseModel]:
        url = f"{self.base_url}{COLLECTION_PATHS[self.kind]}"
        params = {"sort": order_hint} if order_hint else None
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.get(url, headers=self._headers(), params=params)
        if resp.status_code != 200:
            logger.error("Record API error %s for %s: %s", resp.status_code, self.kind, (resp.text or "")[:200])
            raise RecordSourceError(self.kind, f"API returned {resp.status_code}", status_code=resp.status_code)

        payload: Any = resp.json()
        if isinstance(payload, dict):
            payload = payload.get("results", [])
        if not isinstance(payload, list):
            raise RecordSourceError(self.kind, "unexpected response shape")
        return self.parse(payload)
