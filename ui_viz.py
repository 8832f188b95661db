import random
from typing import Any, Dict, List

import pygame

from board import row_span
from cards import Card, card_color, card_label
from engine import StepEngine
from gui import (
    TOP_BAR_HEIGHT, BG, CARD_BG, GRID, TEXT_MAIN, TEXT_SECONDARY,
    draw_top_bar, draw_controls, draw_input_box,
)
from sort_state import Direction
from ui_state import AppState
from visual import CardRow

# Card colors
CARD_FACE = (245, 245, 240)
CARD_EDGE = (60, 60, 65)
SORTED_TINT = (60, 200, 80)
KEY_GLOW = (255, 190, 60)
SLOT_OUTLINE = (40, 40, 45)


def get_narrative_text(event_type: str, data: Dict[str, Any]) -> List[str]:
    """Generates short human-like narration for the step that is playing."""

    # Deterministic per event so the text does not flicker between frames
    rng = random.Random(f"{event_type}:{sorted(data.items(), key=lambda kv: kv[0])}")
    lines: List[str] = []

    if event_type == "RESET":
        direction = data.get("direction", Direction.ASCENDING)
        order = "smallest to largest" if direction is Direction.ASCENDING else "largest to smallest"
        count = len(data.get("values", []))
        variations = [
            ["DEALT", f"{count} fresh cards on the table.", f"Let's order them {order}."],
            ["READY", "The first card is sorted by itself.", f"Everything else goes {order}."],
        ]
        lines = rng.choice(variations)

    elif event_type == "LIFT":
        label = card_label(data["value"])
        variations = [
            ["LIFTING", f"Picking up the {label} at slot {data['index']}.", "Where does it belong?"],
            ["NEXT CARD", f"The {label} is next.", "Let's compare it with the sorted cards."],
        ]
        lines = rng.choice(variations)

    elif event_type == "SHIFT":
        label = card_label(data["value"])
        key = card_label(data["key"])
        variations = [
            ["SHIFTING", f"The {label} belongs after the {key}.", "It slides one slot to the right."],
            ["MAKING ROOM", f"{label} moves right to make room for {key}."],
        ]
        lines = rng.choice(variations)

    elif event_type == "INSERT":
        label = card_label(data["value"])
        shifted = data.get("shifted", 0)
        if shifted == 0:
            lines = ["STAYING", f"The {label} is already in place.", "Nothing had to move."]
        else:
            moved = "card" if shifted == 1 else "cards"
            lines = ["INSERTING", f"The {label} goes into slot {data['index']}.", f"{shifted} {moved} moved over for it."]

    elif event_type == "DROP":
        lines = ["DROPPING", f"The {card_label(data['value'])} settles back into the row."]

    elif event_type == "COMPLETE":
        variations = [
            ["SORTED", "Every card is in order.", "Sorting complete!"],
            ["DONE", "Nothing left to insert.", "The row is sorted."],
        ]
        lines = rng.choice(variations)

    return lines


def draw_card(screen: pygame.Surface, font: pygame.font.Font, card: Card, width: int, height: int,
              highlight: tuple | None = None):
    rect = pygame.Rect(0, 0, width, height)
    rect.center = (int(card.x), int(card.y))

    # Shadow
    shadow = rect.move(4, 6)
    pygame.draw.rect(screen, (5, 5, 6), shadow, border_radius=12)

    pygame.draw.rect(screen, CARD_FACE, rect, border_radius=12)
    pygame.draw.rect(screen, highlight or CARD_EDGE, rect, width=3 if highlight else 1, border_radius=12)

    # Corner index + centre value
    color = card_color(card.value)
    corner = font.render(card.label, True, color)
    screen.blit(corner, (rect.x + 8, rect.y + 6))
    big = font.render(card.label, True, color)
    big = pygame.transform.smoothscale(big, (big.get_width() * 2, big.get_height() * 2))
    screen.blit(big, big.get_rect(center=rect.center))


def draw_row(screen: pygame.Surface, font: pygame.font.Font, row: CardRow, engine: StepEngine):
    config = row.config
    state = engine.state

    # Empty slot outlines
    left, right = row_span(row.slot_count, config)
    outline = pygame.Rect(int(left) - 12, int(config.row_center_y - config.card_height / 2) - 12,
                          int(right - left) + 24, config.card_height + 24)
    pygame.draw.rect(screen, SLOT_OUTLINE, outline, width=1, border_radius=16)

    # token_order is only consistent between steps
    sorted_tokens = set(state.token_order[:state.outer_index]) if state.key is None else set()
    for card in row.draw_order():
        highlight = None
        if card.y < config.row_center_y - 1:
            highlight = KEY_GLOW
        elif state.is_complete() or card.token in sorted_tokens:
            highlight = SORTED_TINT
        draw_card(screen, font, card, config.card_width, config.card_height, highlight)


def draw_narrative(screen: pygame.Surface, font_title: pygame.font.Font, font_body: pygame.font.Font,
                   lines: List[str]):
    w = screen.get_width()
    panel = pygame.Rect(16, TOP_BAR_HEIGHT + 4, w - 32, 96)
    pygame.draw.rect(screen, CARD_BG, panel, border_radius=12)
    pygame.draw.rect(screen, GRID, panel, width=1, border_radius=12)

    if not lines:
        return
    header = font_title.render(lines[0], True, KEY_GLOW)
    screen.blit(header, (panel.x + 16, panel.y + 10))
    y = panel.y + 16 + header.get_height()
    for line in lines[1:]:
        surf = font_body.render(line, True, TEXT_SECONDARY)
        screen.blit(surf, (panel.x + 16, y))
        y += surf.get_height() + 2


def draw_viz(screen: pygame.Surface, fonts: Dict[str, pygame.font.Font], engine: StepEngine,
             row: CardRow, app_state: AppState):
    screen.fill(BG)
    ascending = engine.direction is Direction.ASCENDING
    draw_top_bar(screen, fonts["title"], fonts["label"], engine.status.text, engine.direction.label)
    draw_narrative(screen, fonts["button"], fonts["body"], app_state.narrative)
    draw_row(screen, fonts["card"], row, engine)
    draw_input_box(screen, fonts["body"], app_state.input_text, app_state.input_active)
    draw_controls(screen, fonts["button"], engine.busy, ascending)

    if engine.auto_running:
        surf = fonts["body"].render("AUTO", True, TEXT_MAIN)
        screen.blit(surf, (screen.get_width() - surf.get_width() - 24, TOP_BAR_HEIGHT + 110))
