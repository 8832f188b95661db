# cards.py
# Card faces (value -> label/colour) and the per-card visual record

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from visual import Motion

# Face labels for values 1..13
CARD_LABELS: dict[int, str] = {
    1: "A",
    2: "2",
    3: "3",
    4: "4",
    5: "5",
    6: "6",
    7: "7",
    8: "8",
    9: "9",
    10: "10",
    11: "J",
    12: "Q",
    13: "K",
}

# Number cards share one colour, court cards and the ace stand out
CARD_COLORS: dict[str, tuple[int, int, int]] = {
    "ace": (250, 80, 80),
    "number": (45, 140, 255),
    "court": (190, 70, 210),
}


def card_label(value: int) -> str:
    # Values outside the deck still render, as their number
    return CARD_LABELS.get(value, str(value))


def card_color(value: int) -> tuple[int, int, int]:
    if value == 1:
        return CARD_COLORS["ace"]
    if value >= 11:
        return CARD_COLORS["court"]
    return CARD_COLORS["number"]


@dataclass
class Card:
    token: int
    value: int
    x: float
    y: float
    motion: Optional["Motion"] = None

    @property
    def label(self) -> str:
        return card_label(self.value)

    @property
    def moving(self) -> bool:
        return self.motion is not None and not self.motion.done
