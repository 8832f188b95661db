# visual.py
# Visual layer: card tokens and their movements along the row

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Protocol

from board import slot_position, slot_x
from cards import Card
from config import SortConfig


class MissingTokenError(KeyError):
    pass


def smoothstep(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


@dataclass
class Motion:
    """A movement from `start` to `end`; yield it from a coroutine to wait for it."""

    start: tuple[float, float]
    end: tuple[float, float]
    duration: float
    elapsed: float = 0.0
    cancelled: bool = False

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)

    @property
    def done(self) -> bool:
        return self.cancelled or self.progress >= 1.0

    def position(self) -> tuple[float, float]:
        t = smoothstep(self.progress)
        (x0, y0), (x1, y1) = self.start, self.end
        return x0 + (x1 - x0) * t, y0 + (y1 - y0) * t

    def cancel(self) -> None:
        self.cancelled = True


class VisualLayer(Protocol):
    def set_slot_count(self, count: int) -> None: ...

    def create_token(self, value: int, slot: int) -> int: ...

    def destroy_token(self, token: int) -> None: ...

    def move_vertical(self, token: int, delta: float) -> Motion: ...

    def move_to_slot(self, token: int, slot: int) -> Motion: ...


class CardRow:
    """Cards laid out in a single centred row. Positive vertical deltas move up."""

    def __init__(self, config: SortConfig):
        self.config = config
        self.cards: Dict[int, Card] = {}
        self.slot_count = 0
        self._next_token = 1

    def set_slot_count(self, count: int) -> None:
        self.slot_count = count

    def create_token(self, value: int, slot: int) -> int:
        token = self._next_token
        self._next_token += 1
        x, y = slot_position(slot, self.slot_count, self.config)
        self.cards[token] = Card(token=token, value=value, x=x, y=y)
        return token

    def destroy_token(self, token: int) -> None:
        card = self.cards.pop(token, None)
        if card is None:
            return
        # Anything still waiting on this card's motion is released
        if card.motion is not None:
            card.motion.cancel()

    def _card(self, token: int) -> Card:
        try:
            return self.cards[token]
        except KeyError:
            raise MissingTokenError(token) from None

    def _start(self, card: Card, end: tuple[float, float]) -> Motion:
        # A new movement takes over from wherever the card is now
        if card.motion is not None and not card.motion.done:
            card.motion.cancel()
        card.motion = Motion(start=(card.x, card.y), end=end, duration=self.config.move_duration)
        if card.motion.done:
            card.x, card.y = end
        return card.motion

    def move_vertical(self, token: int, delta: float) -> Motion:
        card = self._card(token)
        return self._start(card, (card.x, card.y - delta))

    def move_to_slot(self, token: int, slot: int) -> Motion:
        card = self._card(token)
        return self._start(card, (slot_x(slot, self.slot_count, self.config), card.y))

    def update(self, dt: float) -> None:
        for card in self.cards.values():
            motion = card.motion
            if motion is None or motion.cancelled:
                continue
            motion.elapsed += dt
            card.x, card.y = motion.position()
            if motion.done:
                card.motion = None

    def draw_order(self) -> List[Card]:
        # Lifted cards are drawn last so they pass over the row
        return sorted(self.cards.values(), key=lambda c: (c.y < self.config.row_center_y, c.moving))
