"""Food placement and the bonus food expiry timer."""

import logging
import random
from typing import Callable, Optional

from .constants import BIG_FOOD_DURATION_MS, PLACEMENT_ATTEMPTS
from .grid import Grid
from .models import Cell

logger = logging.getLogger(__name__)


class GridFullError(RuntimeError):
    """Raised when food has to be placed but every cell is taken."""


class ExpiryTimer:
    """One-shot timer that can be cancelled while pending.

    ``scheduler`` is anything with ``call_later(delay, callback)`` returning a
    handle with ``cancel()``, normally the running asyncio loop.
    """

    def __init__(self, scheduler):
        self.scheduler = scheduler
        self._handle = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self, delay: float, callback: Callable[[], None]):
        self.cancel()

        def fire():
            self._handle = None
            callback()

        self._handle = self.scheduler.call_later(delay, fire)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class FoodSpawner:
    def __init__(
        self,
        scheduler,
        on_bonus_expired: Optional[Callable[[], None]] = None,
        rng: Optional[random.Random] = None,
        bonus_duration_ms: int = BIG_FOOD_DURATION_MS,
        attempts: int = PLACEMENT_ATTEMPTS,
    ):
        self.rng = rng or random.Random()
        self.bonus_timer = ExpiryTimer(scheduler)
        self.on_bonus_expired = on_bonus_expired
        self.bonus_duration_ms = bonus_duration_ms
        self.attempts = attempts

    def place(self, grid: Grid, is_occupied: Callable[[Cell], bool]) -> Cell:
        last = grid.dimension - 1
        for _ in range(self.attempts):
            cell = grid.to_pixel(self.rng.randint(0, last), self.rng.randint(0, last))
            if not is_occupied(cell):
                return cell

        free = [cell for cell in grid.cells() if not is_occupied(cell)]
        if not free:
            raise GridFullError(f"no free cell left on a {grid.dimension}x{grid.dimension} grid")
        logger.debug("random placement gave up after %d attempts, %d free cells", self.attempts, len(free))
        return self.rng.choice(free)

    def spawn_food(self, state):
        state.food = None
        state.food = self.place(state.grid, state.is_occupied)

    def spawn_bonus(self, state):
        state.bonus_food = self.place(state.grid, state.is_occupied)
        logger.debug("bonus food at %s for %d ms", state.bonus_food, self.bonus_duration_ms)

        def expire():
            state.bonus_food = None
            logger.debug("bonus food expired")
            if self.on_bonus_expired:
                self.on_bonus_expired()

        self.bonus_timer.start(self.bonus_duration_ms / 1000, expire)

    def clear_bonus(self, state):
        state.bonus_food = None
        self.bonus_timer.cancel()

    def cancel(self):
        self.bonus_timer.cancel()
