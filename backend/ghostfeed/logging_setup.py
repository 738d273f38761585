"""Logging configuration: pipe-separated lines with structured extras."""
import json
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRS = frozenset(logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Appends fields passed via ``extra={...}`` (session ids, counts) as JSON."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if not extra:
            return base
        return f"{base} | {json.dumps(extra, default=str, sort_keys=True)}"


def configure_logging(level: str = "INFO") -> None:
    """Install the ExtraFormatter on the root logger once."""
    if logging.root.handlers:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for h in logging.root.handlers:
        h.setFormatter(ExtraFormatter(LOG_FORMAT))
