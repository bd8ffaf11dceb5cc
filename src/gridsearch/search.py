# src/gridsearch/search.py
"""
Movement-range search over a terrain cost grid.

Two layers:

- Pure functions:
    compute_cost_map(terrain, start, budget) -> CostMap
    reconstruct_path(cost_map, destination)  -> list of unit steps

  Each call returns an independently owned result, so several callers can
  query the same terrain without stepping on each other.

- GridSearch: a single-owner container bundling one terrain with the last
  computed cost map. It is not safe for concurrent mutation.

Cost propagation is a FIFO relaxation: a tile is re-queued every time its
cost strictly improves, so the final costs are the true minimum entry-cost
sums regardless of queue order. A tile whose cost equals the budget is
recorded but not expanded further.
"""

from __future__ import annotations

import logging
import sys
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, Dict, List, Optional, Sequence

from .errors import EmptyTerrainError, PathReconstructionError
from .grid import (
    Coord,
    Grid,
    copy_grid,
    create_grid,
    grid_get,
    grid_set,
    grid_size,
    in_bounds,
    negate,
    neighbors,
    render_grid,
    step,
)
from .terrain_io import validate_terrain

log = logging.getLogger(__name__)

# Marks tiles that are not reachable within the budget. Budgets are kept
# strictly below it, so no recorded cost can ever equal it.
UNREACHABLE: int = sys.maxsize


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass
class CostMap:
    """Minimum entry costs from `start`, computed under `budget`."""

    costs: Grid[int]
    start: Coord
    budget: int

    def cost_at(self, coord: Coord) -> Optional[int]:
        """Recorded cost, or None when coord is out of bounds or unreachable."""
        cost = grid_get(self.costs, coord)
        if cost is None or cost == UNREACHABLE:
            return None
        return cost

    def is_reachable(self, coord: Coord) -> bool:
        return self.cost_at(coord) is not None

    def reachable(self) -> Dict[Coord, int]:
        """All reachable tiles and their costs, start included."""
        return {
            (x, y): cost
            for y, row in enumerate(self.costs)
            for x, cost in enumerate(row)
            if cost != UNREACHABLE
        }

    def path_to(self, destination: Coord) -> List[Coord]:
        return reconstruct_path(self, destination)

    def copy(self) -> "CostMap":
        return CostMap(costs=copy_grid(self.costs), start=self.start, budget=self.budget)

    def render(self, *, placeholder: str = ".", width: Optional[int] = None) -> str:
        return render_grid(self.costs, placeholder=placeholder, sentinel=UNREACHABLE, width=width)


@dataclass
class SearchResult:
    """
    Outcome of GridSearch.compute_cost_map.

    success is False only when there was no terrain to search; reason then
    holds the error code.
    """

    success: bool
    cost_map: Optional[CostMap] = None
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.success


# ---------------------------------------------------------------------------
# Pure search functions
# ---------------------------------------------------------------------------


def compute_cost_map(terrain: Grid[int], start: Coord, budget: int) -> CostMap:
    """
    Propagate movement costs outward from `start` up to `budget`.

    Raises EmptyTerrainError when `terrain` has no cells, InvalidTerrainError
    when it is ragged or holds non-positive costs, and ValueError when the
    budget would collide with the UNREACHABLE sentinel. An out-of-bounds
    start yields a map where every tile is unreachable.
    """
    width, height = grid_size(terrain)
    if width == 0 or height == 0:
        raise EmptyTerrainError(start=start, budget=budget)
    terrain = validate_terrain(terrain)
    if budget >= UNREACHABLE:
        raise ValueError(f"budget must be below {UNREACHABLE}, got {budget}")

    costs = create_grid(width, height, UNREACHABLE)
    if not grid_set(costs, start, 0):
        log.debug("Start %s outside %dx%d terrain; nothing reachable", start, width, height)
        return CostMap(costs=costs, start=start, budget=budget)

    queue: Deque[Coord] = deque([start])
    while queue:
        current = queue.popleft()
        base = costs[current[1]][current[0]]

        for _, (nx, ny) in neighbors(terrain, current):
            candidate = base + terrain[ny][nx]
            if candidate > budget or candidate >= costs[ny][nx]:
                continue
            costs[ny][nx] = candidate
            # A tile at exactly the budget has no movement left to spend.
            if candidate < budget:
                queue.append((nx, ny))

    return CostMap(costs=costs, start=start, budget=budget)


def reconstruct_path(cost_map: CostMap, destination: Coord) -> List[Coord]:
    """
    Walk downhill from `destination` to the start and return the forward
    list of unit steps (start -> destination).

    Returns [] when the destination is out of bounds or unreachable, and
    when it is the start itself. Ties between equally cheap neighbors go to
    the first one in left, right, up, down order.
    """
    costs = cost_map.costs
    dest_cost = grid_get(costs, destination)
    if dest_cost is None or dest_cost == UNREACHABLE:
        return []

    width, height = grid_size(costs)
    limit = width * height

    backward: List[Coord] = []
    current = destination
    while current != cost_map.start:
        if len(backward) >= limit:
            raise PathReconstructionError(
                destination=destination, start=cost_map.start, steps=len(backward)
            )

        best_dir: Optional[Coord] = None
        best_cost = UNREACHABLE
        for direction, (nx, ny) in neighbors(costs, current):
            if costs[ny][nx] < best_cost:
                best_dir, best_cost = direction, costs[ny][nx]

        if best_dir is None:
            # Reachable tile with no reachable neighbor: the map was tampered with.
            raise PathReconstructionError(
                destination=destination, start=cost_map.start, stuck_at=current
            )

        backward.append(best_dir)
        current = step(current, best_dir)

    return [negate(d) for d in reversed(backward)]


def apply_path(start: Coord, path: Sequence[Coord]) -> Coord:
    """Replay unit steps from start and return where they end."""
    current = start
    for direction in path:
        current = step(current, direction)
    return current


def path_cost(terrain: Grid[int], start: Coord, path: Sequence[Coord]) -> int:
    """Sum of entry costs of every tile the path moves into."""
    total = 0
    current = start
    for direction in path:
        current = step(current, direction)
        cost = grid_get(terrain, current)
        if cost is None:
            raise ValueError(f"path leaves the terrain at {current}")
        total += cost
    return total


# ---------------------------------------------------------------------------
# Stateful container
# ---------------------------------------------------------------------------


class GridSearch:
    """
    Terrain plus the last cost map computed on it.

    Usage:
        search = GridSearch()
        search.set_terrain(terrain)
        if search.compute_cost_map((2, 2), budget=4):
            path = search.compute_path((4, 1))

    The cost map is only meaningful for the start that produced it; setting
    new terrain discards it.
    """

    def __init__(self, terrain: Optional[Grid[int]] = None) -> None:
        self._terrain: Grid[int] = []
        self._width = 0
        self._height = 0
        self._cost_map: Optional[CostMap] = None

        if terrain is not None:
            self.set_terrain(terrain)

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def terrain(self) -> Grid[int]:
        return self._terrain

    @property
    def size(self) -> tuple[int, int]:
        return self._width, self._height

    @property
    def cost_map(self) -> Optional[CostMap]:
        return self._cost_map

    @property
    def start(self) -> Optional[Coord]:
        return self._cost_map.start if self._cost_map is not None else None

    @property
    def budget(self) -> Optional[int]:
        return self._cost_map.budget if self._cost_map is not None else None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_terrain(self, grid: Any) -> None:
        """
        Replace the terrain. Raises InvalidTerrainError for empty, ragged or
        non-positive grids; on failure the previous state is left untouched.
        """
        terrain = validate_terrain(grid)
        self._terrain = terrain
        self._width, self._height = grid_size(terrain)
        self._cost_map = None
        log.debug("Terrain set (%dx%d)", self._width, self._height)

    def compute_cost_map(self, start: Coord, budget: int) -> SearchResult:
        """
        Compute and store the cost map for `start` / `budget`.

        Returns a failed SearchResult (reason "empty_terrain") when no
        terrain has been set; otherwise always succeeds.
        """
        try:
            cost_map = compute_cost_map(self._terrain, start, budget)
        except EmptyTerrainError as exc:
            log.warning("Cost map requested without terrain (start=%s)", start)
            return SearchResult(success=False, reason=exc.code)

        self._cost_map = cost_map
        log.debug(
            "Cost map from %s, budget %d: %d tiles reachable",
            start,
            budget,
            len(cost_map.reachable()),
        )
        return SearchResult(success=True, cost_map=cost_map)

    def compute_path(self, destination: Coord) -> List[Coord]:
        """Unit steps from the stored start to `destination`; [] if none."""
        if self._cost_map is None:
            return []
        try:
            return reconstruct_path(self._cost_map, destination)
        except PathReconstructionError:
            log.warning("Path reconstruction to %s did not reach the start", destination)
            raise

    def is_reachable(self, coord: Coord) -> bool:
        return self._cost_map is not None and self._cost_map.is_reachable(coord)

    def in_bounds(self, coord: Coord) -> bool:
        return in_bounds(self._terrain, coord)

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------

    def copy_from(self, other: Any) -> bool:
        """
        Take over another GridSearch's terrain and cost map without
        recomputing. Returns False and changes nothing if `other` is not a
        GridSearch.
        """
        if not isinstance(other, GridSearch):
            return False
        self._terrain = copy_grid(other._terrain)
        self._width, self._height = other._width, other._height
        self._cost_map = other._cost_map.copy() if other._cost_map is not None else None
        return True

    def clone(self) -> "GridSearch":
        twin = GridSearch()
        twin.copy_from(self)
        return twin

    # ------------------------------------------------------------------
    # Debug rendering
    # ------------------------------------------------------------------

    def render_terrain(self, *, placeholder: str = ".", width: Optional[int] = None) -> str:
        return render_grid(self._terrain, placeholder=placeholder, width=width)

    def render_cost_map(self, *, placeholder: str = ".", width: Optional[int] = None) -> str:
        """Rendered cost map, or "" when none has been computed."""
        if self._cost_map is None:
            return ""
        return self._cost_map.render(placeholder=placeholder, width=width)
