"""Display list for the canvas client."""

from .constants import BACKGROUND_COLOR, BIG_FOOD_COLOR, BIG_FOOD_GLOW, BIG_FOOD_GLOW_RADIUS
from .game import GameState
from .models import Cell, Settings


def rect(cell: Cell, size: int, color: str) -> dict:
    return {"op": "rect", "x": cell[0], "y": cell[1], "w": size, "h": size, "color": color}


def draw_state(state: GameState, settings: Settings) -> list[dict]:
    side = state.grid.side
    tile = state.grid.tile
    ops = [{"op": "rect", "x": 0, "y": 0, "w": side, "h": side, "color": BACKGROUND_COLOR}]

    if state.food is not None:
        ops.append(rect(state.food, tile, settings.food_color))

    if state.bonus_food is not None:
        bx, by = state.bonus_food
        ops.append(rect(state.bonus_food, tile, BIG_FOOD_COLOR))
        ops.append({
            "op": "circle",
            "x": bx + tile / 2,
            "y": by + tile / 2,
            "r": tile * BIG_FOOD_GLOW_RADIUS,
            "color": BIG_FOOD_GLOW,
        })

    for i, segment in enumerate(state.snake):
        color = settings.accent_color if i == 0 else settings.body_color
        ops.append(rect(segment, tile, color))
    return ops
