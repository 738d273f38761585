"""Session registry: one record store per authenticated session."""
import logging
from typing import Callable, Dict, Mapping, Optional
from ghostfeed.adapters.base import RecordSource
from ghostfeed.adapters.factory import get_record_sources
from ghostfeed.config import settings
from ghostfeed.errors import SessionNotActiveError
from ghostfeed.storage.record_store import RecordStore

logger = logging.getLogger(__name__)

SourcesFactory = Callable[[], Mapping[str, RecordSource]]


class SessionRegistry:
    """Creates a RecordStore on activation and drops it on teardown.

    Activation is the authenticated-session signal: nothing is served for a
    session id that has not been activated.
    """

    def __init__(self, sources_factory: Optional[SourcesFactory] = None):
        self.sources_factory = sources_factory or (lambda: get_record_sources(settings.record_backend))
        self._stores: Dict[str, RecordStore] = {}

    def is_active(self, session_id: str) -> bool:
        return session_id in self._stores

    def get(self, session_id: str) -> Optional[RecordStore]:
        return self._stores.get(session_id)

    def require(self, session_id: str) -> RecordStore:
        store = self._stores.get(session_id)
        if store is None:
            raise SessionNotActiveError(session_id)
        return store

    async def activate(self, session_id: str) -> RecordStore:
        """
        Register the session and load its records.

        The store is registered before loading, so a failed load leaves an
        active session in ``error`` state that can be reloaded.

        Raises:
            RecordLoadError: If the initial load fails
        """
        store = self._stores.get(session_id)
        if store is None:
            store = RecordStore(self.sources_factory())
            self._stores[session_id] = store
            logger.info("Session activated", extra={"session_id": session_id})
        await store.load()
        return store

    async def reload(self, session_id: str) -> RecordStore:
        store = self.require(session_id)
        await store.load()
        return store

    def deactivate(self, session_id: str) -> bool:
        """Tear down a session's store. Returns False if it was not active."""
        store = self._stores.pop(session_id, None)
        if store is None:
            return False
        logger.info("Session deactivated", extra={"session_id": session_id})
        return True

    def clear(self) -> None:
        self._stores.clear()


# Global instance
_registry = None


def get_registry() -> SessionRegistry:
    """Get the process-wide session registry."""
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
    return _registry
