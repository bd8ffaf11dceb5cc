# src/gridsearch/__init__.py
"""
gridsearch package.

Movement range and shortest paths on a 2D orthogonal terrain grid.

Exports:
    - GridSearch: terrain + last cost map, single-owner container
    - compute_cost_map / reconstruct_path: pure search functions
    - CostMap, SearchResult: result types
    - UNREACHABLE: sentinel cost for tiles out of range
    - LEFT, RIGHT, UP, DOWN: unit step vectors
    - GridSearchError and subclasses
"""

from __future__ import annotations

from .errors import (
    EmptyTerrainError,
    GridSearchError,
    InvalidTerrainError,
    PathReconstructionError,
)
from .grid import DOWN, LEFT, RIGHT, UP, Coord
from .search import (
    UNREACHABLE,
    CostMap,
    GridSearch,
    SearchResult,
    apply_path,
    compute_cost_map,
    path_cost,
    reconstruct_path,
)
from .terrain_io import load_terrain

__all__ = [
    "GridSearch",
    "CostMap",
    "SearchResult",
    "UNREACHABLE",
    "compute_cost_map",
    "reconstruct_path",
    "apply_path",
    "path_cost",
    "load_terrain",
    "Coord",
    "LEFT",
    "RIGHT",
    "UP",
    "DOWN",
    "GridSearchError",
    "InvalidTerrainError",
    "EmptyTerrainError",
    "PathReconstructionError",
]
