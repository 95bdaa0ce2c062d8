"""Data models."""

import re
from dataclasses import dataclass, replace
from enum import Enum

from .constants import ACCENT_COLOR, FOOD_COLOR, GAME_SPEED_MS, SNAKE_BODY_COLOR

Cell = tuple[int, int]

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Settings:
    tick_ms: int = GAME_SPEED_MS
    accent_color: str = ACCENT_COLOR
    body_color: str = SNAKE_BODY_COLOR
    food_color: str = FOOD_COLOR

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000

    def merge(self, msg: dict) -> "Settings":
        """Return a copy updated with the valid fields of a settings message.

        Fields that are missing or fail validation keep their current value.
        """
        changes = {}
        tick_ms = msg.get("tick_ms")
        if isinstance(tick_ms, int) and not isinstance(tick_ms, bool) and tick_ms > 0:
            changes["tick_ms"] = tick_ms
        for name in ("accent_color", "body_color", "food_color"):
            value = msg.get(name)
            if is_hex_color(value):
                changes[name] = value.lower()
        return replace(self, **changes)


def is_hex_color(value) -> bool:
    return isinstance(value, str) and HEX_COLOR.match(value) is not None
