"""Factory for creating record sources."""
from typing import Dict
from ghostfeed.adapters.base import RECORD_MODELS, RecordSource
from ghostfeed.adapters.http import HttpRecordSource
from ghostfeed.adapters.json_file import JsonFileRecordSource
from ghostfeed.adapters.mock import DEMO_RECORDS, InMemoryRecordSource


def get_record_sources(backend: str, **kwargs) -> Dict[str, RecordSource]:
    """
    Create one source per collection kind for a backend string.

    Args:
        backend: "mock", "mock:empty", "file:<path>" or an http(s) base URL
        **kwargs: Additional configuration passed to each source

    Returns:
        Mapping of kind -> RecordSource
    """
    if backend == "mock":
        return {kind: InMemoryRecordSource(kind, DEMO_RECORDS[kind], **kwargs) for kind in RECORD_MODELS}
    elif backend == "mock:empty":
        return {kind: InMemoryRecordSource(kind, [], **kwargs) for kind in RECORD_MODELS}
    elif backend.startswith("file:"):
        path = backend[len("file:"):]
        return {kind: JsonFileRecordSource(kind, path, **kwargs) for kind in RECORD_MODELS}
    elif backend.startswith("http://") or backend.startswith("https://"):
        return {kind: HttpRecordSource(kind, backend, **kwargs) for kind in RECORD_MODELS}
    else:
        raise ValueError(f"Unknown record backend: {backend}")
