# parsing.py
# Raw text -> card values, random values, and the text input source

from __future__ import annotations

import random
import re
from typing import List, Optional

SEPARATORS = re.compile(r"[ ,;\t]+")
INTEGER = re.compile(r"^[+-]?\d+$")

# Tokens must fit a signed 32-bit int, anything wider is skipped
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def parse_int32(token: str) -> Optional[int]:
    if not INTEGER.match(token):
        return None
    # Longer digit strings cannot be in range (and int() refuses huge ones)
    if len(token.lstrip("+-").lstrip("0")) > 10:
        return None
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def parse_sequence(raw: Optional[str], low: int = 1, high: int = 13) -> Optional[List[int]]:
    """
    Parse free text like "6 7 1 0 2 1" into card values.

    Tokens are split on spaces, commas, semicolons and tabs. Tokens that are
    not 32-bit integers are skipped; integers outside [low, high] are clamped.
    Returns None when nothing usable remains, so the caller generates values.
    """
    if raw is None or not raw.strip():
        return None

    values: List[int] = []
    for token in SEPARATORS.split(raw.strip()):
        value = parse_int32(token)
        if value is None:
            continue
        values.append(clamp(value, low, high))

    return values if values else None


def random_sequence(
    count: int,
    rng: Optional[random.Random] = None,
    low: int = 1,
    high: int = 13,
) -> List[int]:
    rng = rng or random.Random()
    count = max(1, count)
    return [rng.randint(low, high) for _ in range(count)]


class TextInput:
    """Input source backed by the text box contents."""

    def __init__(self, text: str = "", low: int = 1, high: int = 13):
        self.text = text
        self.low = low
        self.high = high

    def read_sequence(self) -> Optional[List[int]]:
        return parse_sequence(self.text, self.low, self.high)
