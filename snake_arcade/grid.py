"""Square tile grid derived from the viewport."""

from dataclasses import dataclass
from typing import Iterator

from .constants import DIRECTIONS, MIN_SIDE, TILE_SIZE
from .models import Cell


@dataclass(frozen=True)
class Grid:
    side: int
    tile: int = TILE_SIZE

    @classmethod
    def from_viewport(cls, width, height, tile: int = TILE_SIZE, min_side: int = MIN_SIDE) -> "Grid":
        side = int(min(width, height) // tile) * tile
        return cls(side=max(min_side, side), tile=tile)

    @property
    def dimension(self) -> int:
        return self.side // self.tile

    def to_pixel(self, col: int, row: int) -> Cell:
        return (col * self.tile, row * self.tile)

    def to_index(self, cell: Cell) -> tuple[int, int]:
        return (cell[0] // self.tile, cell[1] // self.tile)

    def center(self) -> Cell:
        mid = self.dimension // 2
        return self.to_pixel(mid, mid)

    def cells(self) -> Iterator[Cell]:
        for row in range(self.dimension):
            for col in range(self.dimension):
                yield self.to_pixel(col, row)

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.side and 0 <= y < self.side

    def step(self, cell: Cell, direction: str) -> Cell:
        """Move one tile in ``direction``, re-entering from the opposite edge."""
        dx, dy = DIRECTIONS[direction]
        return self.wrap((cell[0] + dx * self.tile, cell[1] + dy * self.tile))

    def wrap(self, cell: Cell) -> Cell:
        x, y = cell
        if x < 0:
            x = self.side - self.tile
        elif x >= self.side:
            x = 0
        if y < 0:
            y = self.side - self.tile
        elif y >= self.side:
            y = 0
        return (x, y)
