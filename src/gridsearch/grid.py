# src/gridsearch/grid.py
"""
Generic 2D grid helpers.

A grid is a plain list of rows: grid[y][x]. Coordinates are (x, y) tuples,
x being the column and y the row. Nothing here keeps state; the search code
and callers pass grids around explicitly.

Out-of-bounds access never raises:
- grid_get  -> None
- grid_set  -> False
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

# (x, y) integer coordinates
Coord = Tuple[int, int]

# list of rows, grid[y][x]
Grid = List[List[T]]

# Unit step vectors, (dx, dy). y grows downward.
LEFT: Coord = (-1, 0)
RIGHT: Coord = (1, 0)
UP: Coord = (0, -1)
DOWN: Coord = (0, 1)

# Neighbor scan order; path tie-breaks depend on it.
DIRECTIONS: Tuple[Coord, ...] = (LEFT, RIGHT, UP, DOWN)

DIRECTION_NAMES = {
    LEFT: "LEFT",
    RIGHT: "RIGHT",
    UP: "UP",
    DOWN: "DOWN",
}


# ---------------------------------------------------------------------------
# Construction / shape
# ---------------------------------------------------------------------------


def create_grid(width: int, height: int, fill: T) -> Grid[T]:
    """Build a height x width grid with every cell set to `fill`."""
    return [[fill for _ in range(width)] for _ in range(height)]


def copy_grid(grid: Grid[T]) -> Grid[T]:
    return [list(row) for row in grid]


def grid_size(grid: Grid[Any]) -> Tuple[int, int]:
    """Return (width, height); (0, 0) for a grid with no rows."""
    if not grid:
        return 0, 0
    return len(grid[0]), len(grid)


def is_rectangular(grid: Grid[Any]) -> bool:
    """True if every row has the same length as the first one."""
    if not grid:
        return True
    width = len(grid[0])
    return all(len(row) == width for row in grid)


# ---------------------------------------------------------------------------
# Cell access
# ---------------------------------------------------------------------------


def in_bounds(grid: Grid[Any], coord: Coord) -> bool:
    x, y = coord
    width, height = grid_size(grid)
    return 0 <= x < width and 0 <= y < height


def grid_get(grid: Grid[T], coord: Coord) -> Optional[T]:
    """Value at coord, or None when coord lies outside the grid."""
    if not in_bounds(grid, coord):
        return None
    x, y = coord
    return grid[y][x]


def grid_set(grid: Grid[T], coord: Coord, value: T) -> bool:
    """Write value at coord. Returns False (and writes nothing) when out of bounds."""
    if not in_bounds(grid, coord):
        return False
    x, y = coord
    grid[y][x] = value
    return True


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


def step(coord: Coord, direction: Coord) -> Coord:
    return coord[0] + direction[0], coord[1] + direction[1]


def negate(direction: Coord) -> Coord:
    return -direction[0], -direction[1]


def is_adjacent(a: Coord, b: Coord) -> bool:
    """Orthogonal adjacency: Manhattan distance exactly 1."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def neighbors(grid: Grid[Any], coord: Coord) -> Iterator[Tuple[Coord, Coord]]:
    """
    Yield (direction, neighbor) for each in-bounds orthogonal neighbor,
    in DIRECTIONS order (left, right, up, down).
    """
    for direction in DIRECTIONS:
        nb = step(coord, direction)
        if in_bounds(grid, nb):
            yield direction, nb


# ---------------------------------------------------------------------------
# Debug rendering
# ---------------------------------------------------------------------------


def render_grid(
    grid: Grid[Any],
    *,
    placeholder: str = ".",
    sentinel: Any = None,
    width: Optional[int] = None,
) -> str:
    """
    Render a grid as a fixed-width text block, one line per row.

    Cells equal to `sentinel` are drawn as `placeholder`. When `width` is not
    given, columns are sized to the widest rendered cell.
    """
    cells = [
        [placeholder if (sentinel is not None and v == sentinel) else str(v) for v in row]
        for row in grid
    ]
    if width is None:
        width = max((len(c) for row in cells for c in row), default=1)
    return "\n".join(" ".join(c.rjust(width) for c in row) for row in cells)
