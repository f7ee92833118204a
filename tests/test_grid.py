import math

import pytest

from mosaic.grid import CELLS_ACROSS, GridConfig, Viewport, compute_grid


def test_small_window_uses_base_cell_size():
    grid = compute_grid(Viewport(100, 100), 20)

    assert grid == GridConfig(cols=5, rows=5, cell_size=20)


def test_wide_window_grows_cell_size():
    grid = compute_grid(Viewport(2000, 1000), 20)

    assert grid.cell_size == 2000 / CELLS_ACROSS
    assert grid.cols == 50
    assert grid.rows == 25


@pytest.mark.parametrize("width,height", [
    (0, 0), (1, 1), (19, 500), (333, 77), (1280, 720), (1920, 1080), (4097, 13),
])
def test_grid_invariants(width, height):
    base = 20
    grid = compute_grid((width, height), base)

    assert grid.cell_size >= base
    assert grid.cell_size == max(base, width / CELLS_ACROSS)
    assert grid.cols == math.floor(width / grid.cell_size)
    assert grid.rows == math.floor(height / grid.cell_size)
    assert grid.cols >= 0 and grid.rows >= 0


def test_empty_viewport_gives_empty_grid():
    grid = compute_grid(Viewport(0, 0), 20)

    assert grid.cols == 0
    assert grid.rows == 0
    assert grid.cell_size == 20


def test_negative_viewport_treated_as_empty():
    grid = compute_grid(Viewport(-50, -10), 20)

    assert (grid.cols, grid.rows) == (0, 0)


def test_compute_grid_is_pure():
    viewport = Viewport(1234, 567)

    assert compute_grid(viewport, 20) == compute_grid(viewport, 20)


@pytest.mark.parametrize("base", [0, -5])
def test_non_positive_base_cell_size_rejected(base):
    with pytest.raises(ValueError):
        compute_grid(Viewport(100, 100), base)
