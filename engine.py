# engine.py
# Step-driven insertion sort: one cancelable step, auto-run, reset/direction

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional, Sequence

from config import SortConfig
from coroutines import Coroutine, Scheduler, Task, Wait
from parsing import TextInput, random_sequence
from sort_state import Direction, InvalidInputError, SortState
from visual import MissingTokenError, VisualLayer

LOG = logging.getLogger(__name__)

COMPLETE_TEXT = "Sorting complete!"


class StepResult(Enum):
    ADVANCED = auto()
    COMPLETE = auto()
    NO_OP = auto()


@dataclass(frozen=True)
class StepOutcome:
    result: StepResult
    next_index: int


class StatusLine:
    def __init__(self, text: str = ""):
        self.text = text

    def set_text(self, message: str) -> None:
        self.text = message


class StepEngine:
    def __init__(
        self,
        visual: VisualLayer,
        scheduler: Optional[Scheduler] = None,
        config: Optional[SortConfig] = None,
        status: Optional[StatusLine] = None,
        input_source: Optional[TextInput] = None,
        rng: Optional[random.Random] = None,
        direction: Direction = Direction.ASCENDING,
    ):
        self.config = config or SortConfig()
        self.visual = visual
        self.scheduler = scheduler or Scheduler()
        self.status = status or StatusLine()
        self.input = input_source or TextInput("", self.config.min_value, self.config.max_value)
        self.rng = rng or random.Random(self.config.seed)
        self.num_cards = max(1, self.config.num_cards)

        self.state = SortState(direction, self.config.min_value, self.config.max_value)
        self.busy = False
        self.auto_running = False
        self._task: Optional[Task] = None

        self.listeners: List[Callable[[str, Dict[str, Any]], None]] = []

    @property
    def direction(self) -> Direction:
        return self.state.direction

    def _emit(self, event_type: str, **data: Any) -> None:
        for listener in self.listeners:
            listener(event_type, data)

    # ------------------------------------------------------------------
    # Movements
    # ------------------------------------------------------------------

    def _animate(self, move: Callable[..., Any], token: Any, *args: Any) -> Coroutine:
        # A missing card counts as already moved; values stay authoritative
        try:
            motion = move(token, *args)
        except MissingTokenError:
            LOG.warning("Card %r is missing; skipping %s", token, move.__name__)
            return
        yield motion

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------

    def step(self, from_auto: bool = False) -> Coroutine:
        """
        One outer-loop iteration: lift the key, shift larger cards right,
        insert the key, drop it back into the row.

        Every positional change waits for its movement before the next
        comparison is made. Returns a StepOutcome.
        """
        state = self.state
        if self.busy and not from_auto:
            return StepOutcome(StepResult.NO_OP, state.outer_index)
        if state.is_complete():
            self.status.set_text(COMPLETE_TEXT)
            self._emit("COMPLETE", values=list(state.values))
            return StepOutcome(StepResult.COMPLETE, state.outer_index)

        self.busy = True
        i = state.outer_index
        key = state.values[i]
        key_token = state.token_order[i]
        state.key = key

        self._emit("LIFT", index=i, value=key)
        yield from self._animate(self.visual.move_vertical, key_token, self.config.lift_height)

        j = i - 1
        while j >= 0 and state.compare(state.values[j], key):
            moved = state.shift(j)
            self._emit("SHIFT", index=j, value=state.values[j + 1], key=key)
            yield from self._animate(self.visual.move_to_slot, moved, j + 1)
            j -= 1

        state.insert(j + 1, key, key_token)
        self._emit("INSERT", index=j + 1, value=key, shifted=i - (j + 1))
        yield from self._animate(self.visual.move_to_slot, key_token, j + 1)

        self._emit("DROP", index=j + 1, value=key)
        yield from self._animate(self.visual.move_vertical, key_token, -self.config.lift_height)

        next_index = state.advance()
        if state.is_complete():
            outcome = StepOutcome(StepResult.COMPLETE, next_index)
            self.status.set_text(COMPLETE_TEXT)
            self._emit("COMPLETE", values=list(state.values))
        else:
            outcome = StepOutcome(StepResult.ADVANCED, next_index)
            self.status.set_text(f"Step i = {next_index}")

        if not from_auto:
            self.busy = False  # run_auto clears it when the whole run ends
        return outcome

    def run_auto(self) -> Coroutine:
        self.auto_running = True
        self.busy = True
        try:
            while not self.state.is_complete():
                yield from self.step(from_auto=True)
                yield Wait(self.config.auto_delay)
        finally:
            self.auto_running = False
            self.busy = False

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def next(self) -> Optional[Task]:
        if self.busy:
            return None
        self._task = self.scheduler.start(self.step(), "step")
        return self._task

    def auto_run(self) -> Optional[Task]:
        if self.busy or self.auto_running:
            return None
        self._task = self.scheduler.start(self.run_auto(), "auto-run")
        return self._task

    def cancel(self) -> None:
        self.scheduler.stop(self._task)
        self._task = None
        self.busy = False
        self.auto_running = False

    def reset(self, values: Optional[Sequence[int]] = None) -> None:
        """Stop whatever is running and rebuild the row. Always succeeds."""
        # Read the input before anything is torn down
        if values is None:
            values = self.input.read_sequence()
        dealt = values is None
        if dealt:
            values = self._random_values()

        self.cancel()
        for token in self.state.tokens:
            self.visual.destroy_token(token)

        try:
            self._rebuild(values)
            if not dealt:
                # Later random deals keep the length of the typed row
                self.num_cards = len(values)
        except InvalidInputError as exc:
            LOG.info("Falling back to random values: %s", exc)
            self._rebuild(self._random_values())

        self.status.set_text(f"Status: Ready ({self.direction.label})")
        self._emit("RESET", values=list(self.state.values), direction=self.direction)

    def set_direction(self, direction: Direction) -> None:
        self.state.direction = direction
        self.reset()

    def submit_input(self, raw_text: str) -> None:
        self.input.text = raw_text
        self.reset()

    def _random_values(self) -> List[int]:
        return random_sequence(
            self.num_cards, self.rng, self.config.min_value, self.config.max_value
        )

    def _rebuild(self, values: Sequence[int]) -> None:
        self.visual.set_slot_count(len(values))
        self.state.initialize(values, make_token=self.visual.create_token)
