"""Fixed-tick game loop driving a single game."""

import logging
import random
from typing import Optional

from .constants import DEFAULT_VIEWPORT, MIN_SIDE, TILE_SIZE
from .controls import InputMapper
from .food import FoodSpawner
from .game import GameState
from .grid import Grid
from .models import Phase, Settings

logger = logging.getLogger(__name__)


class GameSink:
    """Receives everything the game publishes. The default drops it all."""

    def show_theme(self, settings: Settings):
        pass

    def show_score(self, score: int):
        """Current score, after a food event and on every new game."""
        pass

    def render(self, state: GameState, settings: Settings):
        """Draw ``state`` with the colors in ``settings``."""
        pass

    def game_over(self, score: int):
        """Sent once when the snake runs into itself, with the final score."""
        pass


class GameController:
    def __init__(
        self,
        scheduler,
        sink: Optional[GameSink] = None,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        tile: int = TILE_SIZE,
        min_side: int = MIN_SIDE,
    ):
        self.scheduler = scheduler
        self.sink = sink or GameSink()
        self.settings = settings or Settings()
        self.tile = tile
        self.min_side = min_side
        self.grid = Grid.from_viewport(*DEFAULT_VIEWPORT, tile=tile, min_side=min_side)
        self.state = GameState(self.grid)
        self.spawner = FoodSpawner(scheduler, on_bonus_expired=self.redraw, rng=rng)
        self.settings_open = False
        self.settings_owner = None
        self.input = InputMapper(on_restart=self.restart, menu_open=lambda: self.settings_open)
        self.started = False
        self._tick_handle = None

    @property
    def running(self) -> bool:
        return self.started and self.state.phase is Phase.RUNNING

    @property
    def ticking(self) -> bool:
        return self._tick_handle is not None

    def start(self, width, height):
        logger.info("starting game on a %sx%s viewport", width, height)
        self.resize(width, height)

    def stop(self):
        self._cancel_tick()
        self.spawner.cancel()
        self.input.pending.clear()
        self.set_settings_open(False)
        self.started = False
        logger.info("game stopped")

    def resize(self, width, height):
        self.grid = Grid.from_viewport(width, height, tile=self.tile, min_side=self.min_side)
        self.reinit()

    def apply_settings(self, settings: Settings):
        self.settings = settings
        if self.started:
            self.reinit()

    def restart(self):
        self.reinit()

    def reinit(self):
        self._cancel_tick()
        self.spawner.cancel()
        self.input.pending.clear()

        self.state.reset(self.grid)
        self.spawner.spawn_food(self.state)
        self.started = True
        self._schedule_tick()
        logger.info(
            "new game: %dx%d grid, %d ms ticks",
            self.grid.dimension, self.grid.dimension, self.settings.tick_ms,
        )
        self.publish()

    def publish(self):
        self.sink.show_theme(self.settings)
        self.sink.show_score(self.state.score)
        self.redraw()

    def redraw(self):
        self.sink.render(self.state, self.settings)

    def set_settings_open(self, is_open: bool, owner=None):
        self.settings_open = is_open
        self.settings_owner = owner if is_open else None

    def release_settings(self, owner):
        """Close the menu if ``owner`` opened it and has gone away."""
        if self.settings_open and self.settings_owner is owner:
            self.set_settings_open(False)

    def handle_key(self, key: str):
        if not self.started:
            return
        self.input.press(key, self.state.direction, self.state.phase)

    def tick(self):
        state = self.state
        if state.phase is Phase.GAME_OVER:
            return

        direction = self.input.pending.take()
        if direction is not None:
            state.turn(direction)

        if not state.advance():
            self._cancel_tick()
            logger.info("game over with score %d", state.score)
            self.sink.game_over(state.score)
            return

        if state.eat(self.spawner):
            self.sink.show_score(state.score)
        else:
            state.trim()
        self.redraw()

    def _on_tick(self):
        self._schedule_tick()
        self.tick()

    def _schedule_tick(self):
        self._tick_handle = self.scheduler.call_later(self.settings.tick_seconds, self._on_tick)

    def _cancel_tick(self):
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None
