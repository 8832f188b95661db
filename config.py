# config.py
# Tunables for the card row, animation timing and random generation

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class SortConfig:
    # Data
    num_cards: int = 5
    min_value: int = 1
    max_value: int = 13  # one card face per value (A..K)
    seed: Optional[int] = None

    # Layout (pixels)
    window_width: int = 960
    window_height: int = 600
    card_width: int = 96
    card_height: int = 136
    card_spacing: float = 140.0
    row_center_y: float = 330.0
    lift_height: float = 40.0

    # Timing (seconds)
    move_duration: float = 0.25
    auto_delay: float = 0.3
    fps: int = 60


def build_config_from_args(args: argparse.Namespace) -> SortConfig:
    cfg = SortConfig()
    updates = {}
    for key, attr in [
        ("cards", "num_cards"),
        ("duration", "move_duration"),
        ("delay", "auto_delay"),
        ("seed", "seed"),
    ]:
        value = getattr(args, key, None)
        if value is not None:
            updates[attr] = value
    if "num_cards" in updates:
        updates["num_cards"] = max(1, updates["num_cards"])
    return replace(cfg, **updates) if updates else cfg
