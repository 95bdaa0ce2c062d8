"""Core game state and logic."""

from typing import Optional

from .constants import (
    BIG_FOOD_SCORE, DIRECTIONS, FIRST_SCORE_TARGET, FOOD_SCORE, OPPOSITES,
    SCORE_TARGET_STEP, START_LENGTH,
)
from .food import FoodSpawner
from .grid import Grid
from .models import Cell, Phase


class GameState:
    def __init__(self, grid: Grid):
        self.grid = grid
        self.snake: list[Cell] = []
        self.direction = "right"
        self.food: Optional[Cell] = None
        self.bonus_food: Optional[Cell] = None
        self.score = 0
        self.score_target = FIRST_SCORE_TARGET
        self.phase = Phase.RUNNING

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def velocity(self) -> tuple[int, int]:
        dx, dy = DIRECTIONS[self.direction]
        return (dx * self.grid.tile, dy * self.grid.tile)

    def reset(self, grid: Optional[Grid] = None):
        """Put a fresh 3-segment snake on the grid center, heading right.

        Food is left to the spawner.
        """
        if grid is not None:
            self.grid = grid
        x, y = self.grid.center()
        tile = self.grid.tile
        self.snake = [(x - i * tile, y) for i in range(START_LENGTH)]
        self.direction = "right"
        self.food = None
        self.bonus_food = None
        self.score = 0
        self.score_target = FIRST_SCORE_TARGET
        self.phase = Phase.RUNNING

    def is_occupied(self, cell: Cell) -> bool:
        return cell in self.snake or cell == self.food or cell == self.bonus_food

    def turn(self, direction: str) -> bool:
        if direction == OPPOSITES[self.direction]:
            return False
        self.direction = direction
        return True

    def advance(self) -> bool:
        """Push a new head one tile ahead, wrapping at the edges.

        The tail is not removed here. Returns False and ends the game when the
        new head lands on any segment the snake had before this move.
        """
        new_head = self.grid.step(self.head, self.direction)
        collided = new_head in self.snake
        self.snake.insert(0, new_head)
        if collided:
            self.phase = Phase.GAME_OVER
            return False
        return True

    def eat(self, spawner: FoodSpawner) -> int:
        """Score whatever food the head is on. Returns the points gained."""
        head = self.head
        if self.bonus_food is not None and head == self.bonus_food:
            points = BIG_FOOD_SCORE
            spawner.clear_bonus(self)
        elif head == self.food:
            points = FOOD_SCORE
            spawner.spawn_food(self)
        else:
            return 0

        self.score += points
        # One threshold step per tick, even if the score skipped past several.
        if self.score >= self.score_target:
            spawner.spawn_bonus(self)
            self.score_target += SCORE_TARGET_STEP
        return points

    def trim(self):
        self.snake.pop()
