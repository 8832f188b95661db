# sort_state.py
# Logical insertion-sort state: values, tokens, outer index, direction

from __future__ import annotations

from enum import Enum, auto
from itertools import count
from typing import Any, Callable, List, Optional, Sequence, Tuple

Token = Any


class Direction(Enum):
    ASCENDING = auto()
    DESCENDING = auto()

    @property
    def label(self) -> str:
        return "Ascending" if self is Direction.ASCENDING else "Descending"


class InvalidInputError(ValueError):
    pass


class SortState:
    def __init__(self, direction: Direction = Direction.ASCENDING, low: int = 1, high: int = 13):
        self.direction = direction
        self.low = low
        self.high = high

        self.values: List[int] = []
        self.token_order: List[Token] = []
        self.tokens: Tuple[Token, ...] = ()

        self.outer_index = 1
        self.inner_index: Optional[int] = None
        self.key: Optional[int] = None

    def initialize(
        self,
        values: Sequence[int],
        direction: Optional[Direction] = None,
        make_token: Optional[Callable[[int, int], Token]] = None,
    ) -> None:
        """
        Replace the row with `values` and create one token per value, in order.

        `make_token(value, slot)` is normally the visual layer's create_token.
        Validation happens before any token is created.
        """
        values = list(values)
        if not values:
            raise InvalidInputError("no values to sort")
        for v in values:
            if not self.low <= v <= self.high:
                raise InvalidInputError(f"value {v} outside [{self.low}, {self.high}]")

        if direction is not None:
            self.direction = direction

        if make_token is None:
            counter = count(1)
            make_token = lambda value, slot: next(counter)

        self.values = values
        self.token_order = [make_token(v, slot) for slot, v in enumerate(values)]
        self.tokens = tuple(self.token_order)
        self.outer_index = 1
        self.inner_index = None
        self.key = None

    def __len__(self) -> int:
        return len(self.values)

    def is_complete(self) -> bool:
        return self.outer_index >= len(self.values)

    def compare(self, a: int, b: int) -> bool:
        """True if `a` belongs to the right of `b`. Equal values never shift."""
        if self.direction is Direction.ASCENDING:
            return a > b
        return a < b

    def shift(self, j: int) -> Token:
        # Slot j moves one to the right, slot j stays a stale copy until overwritten
        self.values[j + 1] = self.values[j]
        self.token_order[j + 1] = self.token_order[j]
        self.inner_index = j
        return self.token_order[j + 1]

    def insert(self, slot: int, key: int, token: Token) -> None:
        self.values[slot] = key
        self.token_order[slot] = token

    def advance(self) -> int:
        self.outer_index += 1
        self.inner_index = None
        self.key = None
        return self.outer_index

    def is_sorted_prefix(self, end: Optional[int] = None) -> bool:
        end = self.outer_index if end is None else end
        prefix = self.values[:end]
        return not any(self.compare(a, b) for a, b in zip(prefix, prefix[1:]))
