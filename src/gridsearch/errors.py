# src/gridsearch/errors.py
"""
Domain errors for gridsearch.

All errors carry a short machine-readable `code` plus a `details` mapping,
so callers (and the CLI) can report failures without parsing messages.

Not everything is an error:
    - out-of-bounds grid reads/writes return None / False
    - "no path" is an empty list
    - copying from an incompatible object returns False
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(eq=False)
class GridSearchError(RuntimeError):
    """Base class for every failure raised by gridsearch."""

    code: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, details={self.details!r})"


class InvalidTerrainError(GridSearchError):
    """Terrain grid is empty, ragged, or holds non-positive / non-int costs."""

    def __init__(self, reason: str, **details: Any) -> None:
        super().__init__(code="invalid_terrain", details={"reason": reason, **details})


class EmptyTerrainError(GridSearchError):
    """A cost map was requested before any terrain was set."""

    def __init__(self, **details: Any) -> None:
        super().__init__(code="empty_terrain", details=details)


class PathReconstructionError(GridSearchError):
    """Backward walk did not reach the start within the grid area."""

    def __init__(self, **details: Any) -> None:
        super().__init__(code="path_reconstruction_failed", details=details)
