# coroutines.py
# Frame-driven coroutine runner
#
# A task wraps a generator. The generator yields what it is waiting for:
#   None      -> resume next frame
#   Wait(s)   -> resume after s seconds of frame time
#   anything with a `done` attribute (e.g. visual.Motion) -> resume once done
# Sub-coroutines are composed with `yield from`.

from __future__ import annotations

import logging
from typing import Any, Generator, List, Optional

LOG = logging.getLogger(__name__)

Coroutine = Generator[Any, None, Any]


class Wait:
    def __init__(self, seconds: float):
        self.remaining = seconds

    @property
    def done(self) -> bool:
        return self.remaining <= 0


class Task:
    def __init__(self, gen: Coroutine, name: str = "task"):
        self.name = name
        self._gen = gen
        self._waiting: Any = None
        self.done = False
        self.cancelled = False
        self.result: Any = None

    def _ready(self) -> bool:
        return self._waiting is None or self._waiting.done

    def tick(self, dt: float) -> None:
        if self.done:
            return
        if isinstance(self._waiting, Wait):
            self._waiting.remaining -= dt

        # Run through every suspension point that is already satisfied
        while self._ready():
            try:
                self._waiting = next(self._gen)
            except StopIteration as stop:
                self.done = True
                self.result = stop.value
                return
            if self._waiting is None:
                break

    def cancel(self) -> None:
        """Stop at the current suspension point. The generator's finally blocks run."""
        if self.done:
            return
        self.done = True
        self.cancelled = True
        self._gen.close()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "done" if self.done else "running"
        return f"Task({self.name!r}, {state})"


class Scheduler:
    def __init__(self):
        self.tasks: List[Task] = []

    def start(self, gen: Coroutine, name: str = "task") -> Task:
        """Run `gen` up to its first suspension point now, then once per update()."""
        task = Task(gen, name)
        task.tick(0.0)
        if not task.done:
            self.tasks.append(task)
        return task

    def stop(self, task: Optional[Task]) -> None:
        if task is None:
            return
        if not task.done:
            LOG.debug("Cancelling %s", task)
        task.cancel()
        if task in self.tasks:
            self.tasks.remove(task)

    def stop_all(self) -> None:
        for task in list(self.tasks):
            self.stop(task)

    def update(self, dt: float) -> None:
        for task in list(self.tasks):
            task.tick(dt)
        self.tasks = [t for t in self.tasks if not t.done]

    @property
    def idle(self) -> bool:
        return not self.tasks
