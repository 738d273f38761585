from .privacy import last_four, mask_card_number
from .timestamp import format_timestamp, parse_timestamp

__all__ = ["last_four", "mask_card_number", "format_timestamp", "parse_timestamp"]
