# src/gridsearch/config.py
"""
YAML configuration for gridsearch.

Default location: <project root>/config/gridsearch.yaml

    default_budget: 8     # budget used when the CLI gets no --budget
    placeholder: "."      # glyph drawn for unreachable tiles
    cell_width: null      # fixed render column width, null = auto
    log_level: INFO
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "gridsearch.yaml"


@dataclass
class SearchConfig:
    default_budget: int = 8
    placeholder: str = "."
    cell_width: Optional[int] = None
    log_level: str = "INFO"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping; an empty file gives an empty dict."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def load_search_config(path: Path | str | None = None) -> SearchConfig:
    """Read and validate the search config. Unknown keys are ignored."""
    raw = _load_yaml(Path(path) if path is not None else DEFAULT_CONFIG_PATH)
    defaults = SearchConfig()

    cfg = SearchConfig(
        default_budget=raw.get("default_budget", defaults.default_budget),
        placeholder=raw.get("placeholder", defaults.placeholder),
        cell_width=raw.get("cell_width", defaults.cell_width),
        log_level=str(raw.get("log_level", defaults.log_level)).upper(),
    )
    _validate_config(cfg)
    return cfg


def _validate_config(cfg: SearchConfig) -> None:
    """Fail fast on obviously bad values."""
    if isinstance(cfg.default_budget, bool) or not isinstance(cfg.default_budget, int):
        raise ValueError(f"default_budget must be an int, got {cfg.default_budget!r}")
    if cfg.default_budget < 0:
        raise ValueError(f"default_budget must be >= 0, got {cfg.default_budget}")

    if not isinstance(cfg.placeholder, str) or len(cfg.placeholder) != 1:
        raise ValueError(f"placeholder must be a single character, got {cfg.placeholder!r}")

    if cfg.cell_width is not None:
        if isinstance(cfg.cell_width, bool) or not isinstance(cfg.cell_width, int) or cfg.cell_width < 1:
            raise ValueError(f"cell_width must be a positive int or null, got {cfg.cell_width!r}")

    if not isinstance(cfg.log_level_value, int):
        raise ValueError(f"Unknown log_level: {cfg.log_level}")
