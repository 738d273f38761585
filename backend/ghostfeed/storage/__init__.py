from .record_store import RecordStore, Snapshot
from .sessions import SessionRegistry, get_registry

__all__ = ["RecordStore", "Snapshot", "SessionRegistry", "get_registry"]
