# src/gridsearch/cli.py
"""
Command-line front end: load a terrain file, compute the movement range from
a start tile and optionally a path to a destination.

    gridsearch --terrain config/examples/river.yaml --start 0,0 --budget 6 --dest 6,4
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from .config import DEFAULT_CONFIG_PATH, SearchConfig, load_search_config
from .errors import GridSearchError
from .grid import DIRECTION_NAMES, Coord
from .logging_config import configure_logging
from .search import CostMap, GridSearch, UNREACHABLE, path_cost
from .terrain_io import load_terrain

log = logging.getLogger(__name__)


def parse_coord(text: str) -> Coord:
    """Parse "X,Y" into an (x, y) tuple."""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integer X,Y, got {text!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridsearch",
        description="Movement range and shortest path on a terrain cost grid.",
    )
    parser.add_argument("--terrain", required=True, type=Path, help="Terrain YAML file")
    parser.add_argument("--start", required=True, type=parse_coord, help="Start tile as X,Y")
    parser.add_argument("--budget", type=int, default=None, help="Movement budget (default from config)")
    parser.add_argument("--dest", type=parse_coord, default=None, help="Destination tile as X,Y")
    parser.add_argument("--config", type=Path, default=None, help="Config YAML (default config/gridsearch.yaml)")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of text")
    return parser


def _load_config(path: Optional[Path]) -> SearchConfig:
    # Explicit --config must exist; the bundled default is optional.
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        return SearchConfig()
    return load_search_config(path)


def _json_summary(cost_map: CostMap, dest: Optional[Coord], path: List[Coord]) -> Dict[str, Any]:
    summary: Dict[str, Any] = {
        "start": list(cost_map.start),
        "budget": cost_map.budget,
        "reachable": len(cost_map.reachable()),
        "cost_map": [[None if c == UNREACHABLE else c for c in row] for row in cost_map.costs],
    }
    if dest is not None:
        summary["destination"] = list(dest)
        summary["path"] = [DIRECTION_NAMES[d] for d in path]
        summary["path_cost"] = cost_map.cost_at(dest)
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    err = Console(stderr=True)

    try:
        cfg = _load_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        err.print(f"[red]config error:[/red] {escape(str(exc))}")
        return 1
    configure_logging(cfg.log_level_value)

    try:
        search = GridSearch(load_terrain(args.terrain))
    except FileNotFoundError as exc:
        err.print(f"[red]terrain error:[/red] {escape(str(exc))}")
        return 1
    except GridSearchError as exc:
        err.print(f"[red]terrain error:[/red] {exc.details.get('reason', exc.code)}")
        return 1

    if not search.in_bounds(args.start):
        err.print(f"[red]start {args.start} is outside the {search.size[0]}x{search.size[1]} terrain[/red]")
        return 1

    budget = args.budget if args.budget is not None else cfg.default_budget
    try:
        result = search.compute_cost_map(args.start, budget)
    except ValueError as exc:
        err.print(f"[red]budget error:[/red] {escape(str(exc))}")
        return 1
    if not result or result.cost_map is None:
        err.print(f"[red]search failed:[/red] {result.reason}")
        return 1

    path: List[Coord] = []
    if args.dest is not None:
        path = search.compute_path(args.dest)
        log.info("Path to %s: %d steps", args.dest, len(path))

    if args.json:
        print(json.dumps(_json_summary(result.cost_map, args.dest, path), indent=2, sort_keys=True))
        return 0

    out = Console()
    render_opts = {"placeholder": cfg.placeholder, "width": cfg.cell_width}
    out.print(Panel(Text(search.render_terrain(**render_opts)), title="terrain", expand=False))
    out.print(
        Panel(
            Text(search.render_cost_map(**render_opts)),
            title=f"cost map from {args.start}, budget {budget}",
            expand=False,
        )
    )

    if args.dest is not None:
        if path:
            names = " ".join(DIRECTION_NAMES[d] for d in path)
            total = path_cost(search.terrain, args.start, path)
            out.print(Text(f"path to {args.dest} (cost {total}): {names}"))
        elif args.dest == args.start:
            out.print(Text(f"{args.dest} is the start tile"))
        else:
            out.print(Text(f"no path to {args.dest} within budget {budget}"))

    return 0


if __name__ == "__main__":
    sys.exit(main())
