# board.py
# Row geometry: slot index -> screen coordinates

from __future__ import annotations

from config import SortConfig


def row_center_x(config: SortConfig) -> float:
    return config.window_width / 2


def slot_x(index: int, count: int, config: SortConfig) -> float:
    """Centre x of slot `index` in a row of `count` cards, row centred on screen."""
    return row_center_x(config) + (index - (count - 1) / 2) * config.card_spacing


def slot_position(index: int, count: int, config: SortConfig) -> tuple[float, float]:
    return slot_x(index, count, config), config.row_center_y


def row_span(count: int, config: SortConfig) -> tuple[float, float]:
    """Left and right pixel edges of a row of `count` cards."""
    if count <= 0:
        center = row_center_x(config)
        return center, center
    half_card = config.card_width / 2
    return slot_x(0, count, config) - half_card, slot_x(count - 1, count, config) + half_card
