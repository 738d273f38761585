"""Privacy utilities for card numbers and log output."""
import re
from typing import Optional

MASK = "••••"


def last_four(card_number: Optional[str]) -> str:
    """Return the last four characters of a card number, ignoring spaces and dashes."""
    if not card_number:
        return ""
    digits = re.sub(r"[\s-]", "", card_number)
    return digits[-4:]


def mask_card_number(card_number: Optional[str]) -> Optional[str]:
    """
    Mask a card number down to its last four digits.

    "4111 1111 1111 1234" -> "•••• 1234". Returns None for an empty number.
    """
    tail = last_four(card_number)
    if not tail:
        return None
    return f"{MASK} {tail}"
