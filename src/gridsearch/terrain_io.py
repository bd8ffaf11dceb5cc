# src/gridsearch/terrain_io.py
"""
Terrain validation and loading.

Terrain files are YAML. Two shapes are accepted:

    terrain:            # mapping with a `terrain` key
      - [1, 1, 5]
      - [1, 2, 1]

    - "115"             # or a bare list of rows; digit strings are fine
    - "121"

Every cell must be a positive int. Anything else raises InvalidTerrainError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Sequence

import yaml

from .errors import InvalidTerrainError
from .grid import Grid, is_rectangular


def validate_terrain(grid: Any) -> Grid[int]:
    """
    Check that `grid` is a non-empty rectangular grid of positive ints and
    return a row-level copy of it.
    """
    if not isinstance(grid, (list, tuple)) or not grid:
        raise InvalidTerrainError("terrain must have at least one row")

    for y, row in enumerate(grid):
        if not isinstance(row, (list, tuple)):
            raise InvalidTerrainError("row is not a sequence", row=y)

    width = len(grid[0])
    if width == 0:
        raise InvalidTerrainError("terrain must have at least one column")
    if not is_rectangular(grid):
        y = next(y for y, row in enumerate(grid) if len(row) != width)
        raise InvalidTerrainError(
            "terrain is not rectangular", row=y, expected=width, got=len(grid[y])
        )

    rows: Grid[int] = []
    for y, row in enumerate(grid):
        for x, cost in enumerate(row):
            # bool is an int subclass; True is not a cost.
            if isinstance(cost, bool) or not isinstance(cost, int):
                raise InvalidTerrainError("cost is not an int", x=x, y=y, value=cost)
            if cost < 1:
                raise InvalidTerrainError("cost must be positive", x=x, y=y, value=cost)
        rows.append(list(row))
    return rows


def parse_terrain_rows(rows: Sequence[Any]) -> Grid[int]:
    """
    Normalise raw rows into an int grid.

    Rows may be lists of ints or strings of digits ("11151"). Whitespace
    inside digit strings is ignored.
    """
    parsed: List[Any] = []
    for y, row in enumerate(rows):
        if isinstance(row, str):
            chars = [c for c in row if not c.isspace()]
            if not all(c.isdecimal() for c in chars):
                raise InvalidTerrainError("row string holds non-digit characters", row=y)
            parsed.append([int(c) for c in chars])
        else:
            parsed.append(row)
    return validate_terrain(parsed)


def load_terrain(path: Path | str) -> Grid[int]:
    """Load and validate a terrain grid from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Missing terrain file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise InvalidTerrainError(
            "terrain file is not valid YAML", path=str(path), error=str(exc)
        ) from exc

    if isinstance(data, dict):
        data = data.get("terrain")
    if not isinstance(data, list):
        raise InvalidTerrainError("terrain file holds no list of rows", path=str(path))
    return parse_terrain_rows(data)
