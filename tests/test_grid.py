import pytest

from snake_arcade.grid import Grid


@pytest.mark.parametrize("width, height, side", [
    (800, 600, 600),
    (1023, 999, 980),
    (419, 2000, 400),
    (200, 200, 300),
    (0, 0, 300),
])
def test_side_from_viewport(width, height, side):
    grid = Grid.from_viewport(width, height)
    assert grid.side == side
    assert grid.side % grid.tile == 0
    assert grid.dimension == side // 20


def test_float_viewport():
    assert Grid.from_viewport(640.5, 480.9).side == 480


def test_index_pixel_conversion(grid):
    assert grid.to_pixel(3, 7) == (60, 140)
    assert grid.to_index((60, 140)) == (3, 7)


def test_center(grid):
    assert grid.center() == (200, 200)
    assert Grid(side=300).center() == (140, 140)


def test_cells_cover_grid(grid):
    cells = list(grid.cells())
    assert len(cells) == 400
    assert len(set(cells)) == 400
    assert all(grid.contains(c) for c in cells)


def test_wrap_right_edge(grid):
    assert grid.step((380, 200), "right") == (0, 200)


def test_wrap_left_edge(grid):
    assert grid.step((0, 200), "left") == (380, 200)


def test_wrap_top_and_bottom(grid):
    assert grid.step((100, 0), "up") == (100, 380)
    assert grid.step((100, 380), "down") == (100, 0)


@pytest.mark.parametrize("direction", ["up", "down", "left", "right"])
def test_every_step_stays_on_grid(grid, direction):
    for cell in grid.cells():
        assert grid.contains(grid.step(cell, direction))
