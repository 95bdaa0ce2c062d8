import random

import pytest

from snake_arcade.controller import GameController, GameSink
from snake_arcade.food import FoodSpawner
from snake_arcade.game import GameState
from snake_arcade.grid import Grid
from snake_arcade.models import Settings


class ManualHandle:
    def __init__(self, when, callback):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualClock:
    """Stand-in for the event loop's call_later, driven by advance()."""

    def __init__(self):
        self.now = 0.0
        self.handles: list[ManualHandle] = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def pending(self):
        return [h for h in self.handles if not h.cancelled]

    def advance(self, seconds):
        target = self.now + seconds
        while True:
            due = [h for h in self.pending if h.when <= target + 1e-9]
            if not due:
                break
            handle = min(due, key=lambda h: h.when)
            self.handles.remove(handle)
            self.now = handle.when
            handle.callback()
        self.now = target


class RecordingSink(GameSink):
    def __init__(self):
        self.themes = []
        self.scores = []
        self.frames = []
        self.game_overs = []

    def show_theme(self, settings):
        self.themes.append(settings)

    def show_score(self, score):
        self.scores.append(score)

    def render(self, state, settings):
        self.frames.append(list(state.snake))

    def game_over(self, score):
        self.game_overs.append(score)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def grid():
    return Grid(side=400, tile=20)


@pytest.fixture
def state(grid):
    s = GameState(grid)
    s.reset()
    s.food = (0, 0)
    return s


@pytest.fixture
def spawner(clock, rng):
    return FoodSpawner(clock, rng=rng)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def slow_settings():
    # Ticks far enough apart that timer tests never see the snake move
    return Settings(tick_ms=60_000)


@pytest.fixture
def controller(clock, sink, rng):
    game = GameController(clock, sink=sink, rng=rng)
    game.start(400, 400)
    return game
