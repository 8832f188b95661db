# gui.py

from __future__ import annotations

from typing import List, Tuple

import pygame

from config import SortConfig

TOP_BAR_HEIGHT = 120
CONTROLS_HEIGHT = 130

_DEFAULTS = SortConfig()
WINDOW_WIDTH = _DEFAULTS.window_width
WINDOW_HEIGHT = _DEFAULTS.window_height

# Colors – higher contrast, refined dark mode
BG = (15, 15, 17)
CARD_BG = (30, 30, 34)
GRID = (90, 90, 95)
TEXT_MAIN = (245, 245, 250)
TEXT_SECONDARY = (230, 230, 235)
BUTTON_HOVER = (50, 50, 55)
BUTTON_ACTIVE = (40, 70, 45)
INPUT_BORDER_ACTIVE = (45, 140, 255)

# (label, action) in left-to-right order
BUTTONS: List[Tuple[str, str]] = [
    ("Next", "next"),
    ("Auto", "auto"),
    ("Reset", "reset"),
    ("Asc", "ascending"),
    ("Desc", "descending"),
    ("Use Input", "use_input"),
]

BUTTON_WIDTH = 110
BUTTON_HEIGHT = 44
BUTTON_SPACING = 14


def draw_top_bar(
    screen: pygame.Surface,
    title_font: pygame.font.Font,
    label_font: pygame.font.Font,
    status: str,
    direction_label: str,
):
    w = screen.get_width()
    pygame.draw.rect(screen, BG, (0, 0, w, TOP_BAR_HEIGHT))

    card_rect = pygame.Rect(16, 16, w - 32, TOP_BAR_HEIGHT - 32)
    pygame.draw.rect(screen, CARD_BG, card_rect, border_radius=16)

    title_surf = title_font.render("Insertion Sort", True, TEXT_MAIN)
    screen.blit(title_surf, (card_rect.x + 20, card_rect.y + 12))

    dir_surf = label_font.render(direction_label, True, TEXT_MAIN)
    dir_x = card_rect.right - dir_surf.get_width() - 20
    screen.blit(dir_surf, (dir_x, card_rect.y + 12))

    status_surf = label_font.render(status, True, TEXT_SECONDARY)
    screen.blit(status_surf, (card_rect.x + 20, card_rect.y + 48))


def _button_rects(screen_size: Tuple[int, int]) -> List[Tuple[pygame.Rect, str, str]]:
    w, h = screen_size
    total_w = len(BUTTONS) * BUTTON_WIDTH + (len(BUTTONS) - 1) * BUTTON_SPACING
    start_x = (w - total_w) // 2
    y = h - BUTTON_HEIGHT - 24

    rects = []
    for i, (text, action) in enumerate(BUTTONS):
        rect = pygame.Rect(start_x + i * (BUTTON_WIDTH + BUTTON_SPACING), y, BUTTON_WIDTH, BUTTON_HEIGHT)
        rects.append((rect, text, action))
    return rects


def input_box_rect(screen_size: Tuple[int, int]) -> pygame.Rect:
    w, h = screen_size
    box_w = min(520, w - 80)
    return pygame.Rect((w - box_w) // 2, h - CONTROLS_HEIGHT, box_w, 40)


def draw_controls(
    screen: pygame.Surface,
    button_font: pygame.font.Font,
    busy: bool,
    ascending: bool,
):
    mouse_pos = pygame.mouse.get_pos()

    for rect, text, action in _button_rects(screen.get_size()):
        color = CARD_BG
        if rect.collidepoint(mouse_pos):
            color = BUTTON_HOVER
        # Highlight the current direction
        if (action == "ascending" and ascending) or (action == "descending" and not ascending):
            color = BUTTON_ACTIVE

        pygame.draw.rect(screen, color, rect, border_radius=12)
        pygame.draw.rect(screen, GRID, rect, width=1, border_radius=12)

        text_color = TEXT_MAIN
        if busy and action in ("next", "auto"):
            text_color = GRID
        label = button_font.render(text, True, text_color)
        screen.blit(label, label.get_rect(center=rect.center))


def draw_input_box(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    active: bool,
):
    rect = input_box_rect(screen.get_size())
    pygame.draw.rect(screen, CARD_BG, rect, border_radius=8)
    border = INPUT_BORDER_ACTIVE if active else GRID
    pygame.draw.rect(screen, border, rect, width=2 if active else 1, border_radius=8)

    if text:
        surf = font.render(text, True, TEXT_MAIN)
    else:
        surf = font.render("Type values, e.g. 6 7 1 0 2 1", True, GRID)
    screen.blit(surf, (rect.x + 12, rect.y + (rect.height - surf.get_height()) // 2))


def get_control_action(mouse_pos: Tuple[int, int], screen_size: Tuple[int, int] = (WINDOW_WIDTH, WINDOW_HEIGHT)) -> str | None:
    for rect, _, action in _button_rects(screen_size):
        if rect.collidepoint(mouse_pos):
            return action
    if input_box_rect(screen_size).collidepoint(mouse_pos):
        return "focus_input"
    return None
