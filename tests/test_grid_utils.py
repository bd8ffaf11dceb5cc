# tests/test_grid_utils.py
"""
Unit tests for the generic grid helpers in gridsearch.grid.
"""

from __future__ import annotations

from gridsearch.grid import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    create_grid,
    grid_get,
    grid_set,
    grid_size,
    in_bounds,
    is_adjacent,
    is_rectangular,
    neighbors,
    render_grid,
)


def test_create_grid_dimensions_and_fill() -> None:
    grid = create_grid(4, 2, 7)

    assert grid == [[7, 7, 7, 7], [7, 7, 7, 7]]
    assert grid_size(grid) == (4, 2)


def test_create_grid_rows_are_independent() -> None:
    grid = create_grid(2, 2, 0)
    grid[0][0] = 5

    assert grid[1][0] == 0


def test_grid_size_of_empty_grid() -> None:
    assert grid_size([]) == (0, 0)


def test_get_and_set_use_x_column_y_row() -> None:
    grid = create_grid(3, 2, 0)

    assert grid_set(grid, (2, 1), 9) is True
    assert grid[1][2] == 9
    assert grid_get(grid, (2, 1)) == 9


def test_out_of_bounds_access_does_not_raise() -> None:
    grid = create_grid(3, 2, 0)

    for coord in [(-1, 0), (3, 0), (0, -1), (0, 2)]:
        assert grid_get(grid, coord) is None
        assert grid_set(grid, coord, 1) is False
        assert in_bounds(grid, coord) is False

    assert grid == create_grid(3, 2, 0)


def test_is_adjacent_only_for_orthogonal_unit_distance() -> None:
    assert is_adjacent((1, 1), (1, 2))
    assert is_adjacent((1, 1), (0, 1))
    assert not is_adjacent((1, 1), (1, 1))
    assert not is_adjacent((1, 1), (2, 2))
    assert not is_adjacent((1, 1), (3, 1))


def test_is_rectangular() -> None:
    assert is_rectangular([[1, 2], [3, 4]])
    assert is_rectangular([])
    assert not is_rectangular([[1, 2], [3]])


def test_neighbors_scan_order_and_clipping() -> None:
    grid = create_grid(3, 3, 0)

    assert list(neighbors(grid, (1, 1))) == [
        (LEFT, (0, 1)),
        (RIGHT, (2, 1)),
        (UP, (1, 0)),
        (DOWN, (1, 2)),
    ]
    assert list(neighbors(grid, (0, 0))) == [(RIGHT, (1, 0)), (DOWN, (0, 1))]


def test_render_grid_fixed_width_with_placeholder() -> None:
    grid = [[0, 12, -1], [3, -1, 4]]

    text = render_grid(grid, placeholder=".", sentinel=-1)

    assert text.splitlines() == [
        " 0 12  .",
        " 3  .  4",
    ]


def test_render_grid_explicit_width() -> None:
    text = render_grid([[1, 2]], width=3)

    assert text == "  1   2"
