#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging

import pygame

from config import SortConfig, build_config_from_args
from coroutines import Scheduler
from engine import StepEngine
from gui import get_control_action
from parsing import TextInput
from sort_state import Direction
from ui_intro import draw_intro, get_intro_action
from ui_state import AppState, UIState
from ui_viz import draw_viz, get_narrative_text
from visual import CardRow

LOG = logging.getLogger("insertion_sort")

ALLOWED_INPUT = set("0123456789 ,;-+")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Animated insertion sort over a row of cards")
    p.add_argument("--cards", type=int, default=None, help="number of random cards")
    p.add_argument("--values", type=str, default=None, help='initial values, e.g. "6 7 1 0 2 1"')
    p.add_argument("--descending", action="store_true")
    p.add_argument("--duration", type=float, default=None, help="seconds per card movement")
    p.add_argument("--delay", type=float, default=None, help="seconds between auto-run steps")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", type=str, default="INFO")
    return p.parse_args()


def handle_command(action: str | None, engine: StepEngine, app_state: AppState):
    # Every reset reads whatever is in the box, like the Use Input button
    if action in ("reset", "ascending", "descending"):
        engine.input.text = app_state.input_text

    if action == "next":
        engine.next()
    elif action == "auto":
        engine.auto_run()
    elif action == "reset":
        engine.reset()
    elif action == "ascending":
        engine.set_direction(Direction.ASCENDING)
    elif action == "descending":
        engine.set_direction(Direction.DESCENDING)
    elif action == "use_input":
        app_state.input_active = False
        engine.submit_input(app_state.input_text)


def handle_text_input(event: pygame.event.Event, engine: StepEngine, app_state: AppState) -> bool:
    """Edits the input box. Returns True when the key was consumed."""
    if not app_state.input_active or event.type != pygame.KEYDOWN:
        return False
    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        handle_command("use_input", engine, app_state)
    elif event.key == pygame.K_ESCAPE:
        app_state.input_active = False
    elif event.key == pygame.K_BACKSPACE:
        app_state.input_text = app_state.input_text[:-1]
    elif event.unicode and event.unicode in ALLOWED_INPUT:
        app_state.input_text += event.unicode
    return True


KEY_ACTIONS = {
    pygame.K_RIGHT: "next",
    pygame.K_SPACE: "next",
    pygame.K_a: "auto",
    pygame.K_r: "reset",
    pygame.K_UP: "ascending",
    pygame.K_DOWN: "descending",
}


def main():
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config: SortConfig = build_config_from_args(args)

    pygame.init()
    screen = pygame.display.set_mode((config.window_width, config.window_height), pygame.RESIZABLE)
    pygame.display.set_caption("Insertion Sort")

    # Fonts
    fonts = {
        "title": pygame.font.SysFont("SF Pro Display", 32, bold=True),
        "label": pygame.font.SysFont("SF Pro Text", 24),
        "card": pygame.font.SysFont("SF Pro Text", 24, bold=True),
        "button": pygame.font.SysFont("SF Pro Text", 20),
        "body": pygame.font.SysFont("SF Pro Text", 18),
    }

    clock = pygame.time.Clock()
    app_state = AppState()
    app_state.input_text = args.values or ""

    row = CardRow(config)
    scheduler = Scheduler()
    direction = Direction.DESCENDING if args.descending else Direction.ASCENDING
    engine = StepEngine(
        row,
        scheduler,
        config,
        input_source=TextInput(app_state.input_text, config.min_value, config.max_value),
        direction=direction,
    )

    def on_engine_event(event_type, data):
        app_state.narrative = get_narrative_text(event_type, data)
        if event_type == "COMPLETE":
            LOG.info("Sorted: %s", data["values"])

    engine.listeners.append(on_engine_event)

    print("Dealing cards...")
    engine.reset()
    print(f"Cards: {engine.state.values} ({engine.direction.label})")

    running = True
    while running:
        dt = clock.tick(config.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)

            if app_state.current_state == UIState.INTRO:
                if event.type == pygame.MOUSEBUTTONDOWN:
                    if get_intro_action(event.pos, screen.get_size()) == "start":
                        app_state.current_state = UIState.SORTING
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_RETURN:
                    app_state.current_state = UIState.SORTING

            elif app_state.current_state == UIState.SORTING:
                if handle_text_input(event, engine, app_state):
                    continue

                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        engine.reset()
                        app_state.current_state = UIState.INTRO
                    else:
                        handle_command(KEY_ACTIONS.get(event.key), engine, app_state)

                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    action = get_control_action(event.pos, screen.get_size())
                    app_state.input_active = action == "focus_input"
                    handle_command(action, engine, app_state)

        # Update: movements first, so a finished movement resumes its step this frame
        row.update(dt)
        scheduler.update(dt)

        # Draw
        if app_state.current_state == UIState.INTRO:
            draw_intro(screen, fonts["title"], fonts["body"])
        else:
            draw_viz(screen, fonts, engine, row, app_state)

        pygame.display.flip()

    if not scheduler.idle:
        scheduler.stop_all()
    pygame.quit()

if __name__ == "__main__":
    main()
