import pytest

from config import SortConfig
from coroutines import Scheduler
from engine import StepEngine
from visual import CardRow, MissingTokenError, Motion

FRAME = 1 / 60


class RecordingVisual:
    """Visual layer whose movements finish instantly and are recorded in order."""

    def __init__(self):
        self.slot_count = 0
        self.live = {}
        self.destroyed = []
        self.moves = []
        self.missing = set()
        self._next = 1

    def set_slot_count(self, count):
        self.slot_count = count

    def create_token(self, value, slot):
        token = self._next
        self._next += 1
        self.live[token] = (value, slot)
        return token

    def destroy_token(self, token):
        self.live.pop(token, None)
        self.destroyed.append(token)

    def _move(self, kind, token, arg):
        if token in self.missing or token not in self.live:
            raise MissingTokenError(token)
        self.moves.append((kind, token, arg))
        return Motion(start=(0.0, 0.0), end=(0.0, 0.0), duration=0.0)

    def move_vertical(self, token, delta):
        return self._move("vertical", token, delta)

    def move_to_slot(self, token, slot):
        return self._move("slot", token, slot)


def pump(scheduler, seconds, row=None, dt=FRAME):
    """Advance movements and coroutines by `seconds` of frame time."""
    frames = int(round(seconds / dt))
    for _ in range(frames):
        if row is not None:
            row.update(dt)
        scheduler.update(dt)


def run_to_completion(engine, limit=1000):
    """Press Next until sorted; returns how many presses it took."""
    presses = 0
    while not engine.state.is_complete():
        task = engine.next()
        assert task is not None and task.done
        presses += 1
        assert presses <= limit
    return presses


@pytest.fixture
def config():
    return SortConfig(seed=1234)


@pytest.fixture
def recording():
    return RecordingVisual()


@pytest.fixture
def engine(recording, config):
    return StepEngine(recording, Scheduler(), config)


@pytest.fixture
def row(config):
    return CardRow(config)


@pytest.fixture
def animated_engine(row, config):
    return StepEngine(row, Scheduler(), config)
