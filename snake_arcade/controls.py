"""Keyboard input mapping."""

import logging
from typing import Callable, Optional

from .constants import KEY_DIRECTIONS, OPPOSITES, RESTART_KEY
from .models import Phase

logger = logging.getLogger(__name__)


class PendingDirection:
    """Single-slot buffer holding at most one direction change per tick."""

    def __init__(self):
        self._value: Optional[str] = None

    @property
    def empty(self) -> bool:
        return self._value is None

    def offer(self, direction: str) -> bool:
        if self._value is not None:
            return False
        self._value = direction
        return True

    def take(self) -> Optional[str]:
        value, self._value = self._value, None
        return value

    def clear(self):
        self._value = None


def direction_for_key(key: str) -> Optional[str]:
    return KEY_DIRECTIONS.get(key.lower())


class InputMapper:
    def __init__(self, on_restart: Callable[[], None], menu_open: Callable[[], bool] = lambda: False):
        self.pending = PendingDirection()
        self.on_restart = on_restart
        self.menu_open = menu_open

    def press(self, key: str, direction: str, phase: Phase):
        """Handle one key press given the snake's current direction and the game phase."""
        if self.menu_open():
            return
        key = key.lower()
        if phase is Phase.GAME_OVER:
            if key == RESTART_KEY:
                self.on_restart()
            return

        new_direction = direction_for_key(key)
        if new_direction is None:
            return
        if new_direction == OPPOSITES[direction]:
            return
        if not self.pending.offer(new_direction):
            logger.debug("dropped %s, a turn is already queued for this tick", new_direction)
