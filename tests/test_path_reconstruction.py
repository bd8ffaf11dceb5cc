# tests/test_path_reconstruction.py
"""
Unit tests for backward path reconstruction.
"""

from __future__ import annotations

import random

import pytest

from gridsearch.errors import PathReconstructionError
from gridsearch.grid import DOWN, LEFT, RIGHT, UP, create_grid
from gridsearch.search import (
    UNREACHABLE,
    CostMap,
    apply_path,
    compute_cost_map,
    path_cost,
    reconstruct_path,
)


def test_straight_path_up() -> None:
    cost_map = compute_cost_map(create_grid(5, 5, 1), (2, 2), 2)

    assert reconstruct_path(cost_map, (2, 0)) == [UP, UP]


def test_tie_break_prefers_left_then_up_when_walking_back() -> None:
    cost_map = compute_cost_map(create_grid(3, 3, 1), (0, 0), 4)

    # Backward from (1, 1): left (0, 1) wins over up (1, 0).
    assert reconstruct_path(cost_map, (1, 1)) == [DOWN, RIGHT]


def test_path_goes_around_expensive_tile() -> None:
    terrain = [
        [1, 9, 1],
        [1, 1, 1],
    ]
    cost_map = compute_cost_map(terrain, (0, 0), 10)

    path = reconstruct_path(cost_map, (2, 0))

    assert path == [DOWN, RIGHT, RIGHT, UP]
    assert path_cost(terrain, (0, 0), path) == 4


def test_unreachable_and_out_of_bounds_destination_give_empty_path() -> None:
    cost_map = compute_cost_map(create_grid(5, 5, 1), (0, 0), 1)

    assert reconstruct_path(cost_map, (4, 4)) == []
    assert reconstruct_path(cost_map, (-1, 0)) == []
    assert reconstruct_path(cost_map, (9, 9)) == []


def test_destination_equal_to_start_gives_empty_path() -> None:
    cost_map = compute_cost_map(create_grid(3, 3, 1), (1, 1), 3)

    assert reconstruct_path(cost_map, (1, 1)) == []


def test_reconstruction_is_deterministic() -> None:
    cost_map = compute_cost_map(create_grid(6, 6, 1), (0, 0), 10)

    assert reconstruct_path(cost_map, (5, 4)) == reconstruct_path(cost_map, (5, 4))


@pytest.mark.parametrize("seed", range(10))
def test_replayed_path_lands_on_destination_with_recorded_cost(seed: int) -> None:
    rng = random.Random(seed)
    width, height = rng.randint(2, 8), rng.randint(2, 8)
    terrain = [[rng.randint(1, 4) for _ in range(width)] for _ in range(height)]
    start = (rng.randrange(width), rng.randrange(height))
    cost_map = compute_cost_map(terrain, start, rng.randint(3, 20))

    for dest, cost in cost_map.reachable().items():
        path = reconstruct_path(cost_map, dest)
        assert apply_path(start, path) == dest
        assert path_cost(terrain, start, path) == cost
        assert len(path) <= cost


def test_looping_cost_map_raises() -> None:
    # Tampered map: (1, 0) and (2, 0) point at each other, never at the start.
    cost_map = CostMap(costs=[[UNREACHABLE, 1, 1]], start=(0, 0), budget=5)

    with pytest.raises(PathReconstructionError) as excinfo:
        reconstruct_path(cost_map, (2, 0))

    assert excinfo.value.code == "path_reconstruction_failed"


def test_isolated_reachable_tile_raises() -> None:
    cost_map = CostMap(costs=[[0, UNREACHABLE, 4]], start=(0, 0), budget=5)

    with pytest.raises(PathReconstructionError):
        reconstruct_path(cost_map, (2, 0))


def test_cost_map_path_to_delegates() -> None:
    cost_map = compute_cost_map(create_grid(3, 1, 1), (2, 0), 2)

    assert cost_map.path_to((0, 0)) == [LEFT, LEFT]
