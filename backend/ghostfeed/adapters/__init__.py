from .base import RecordSource, TRANSACTION_ORDER_HINT
from .mock import InMemoryRecordSource
from .json_file import JsonFileRecordSource
from .http import HttpRecordSource
from .factory import get_record_sources

__all__ = [
    "RecordSource",
    "TRANSACTION_ORDER_HINT",
    "InMemoryRecordSource",
    "JsonFileRecordSource",
    "HttpRecordSource",
    "get_record_sources",
]
