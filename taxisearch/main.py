"""Entry-point: pick a strategy by code, run it on a grid, log the result."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from taxisearch.env import Environment, Grid
from taxisearch.search import (
    BreadthFirstConfig,
    BreadthFirstSearch,
    DepthFirstConfig,
    DepthFirstSearch,
    SearchStrategy,
    UniformCostConfig,
    UniformCostSearch,
)
from taxisearch.types import SearchResult
from taxisearch.utils.grid_io import load_grid
from taxisearch.utils.maps import ascii_path_map, summarize_result

LOGGER = logging.getLogger("taxisearch")
GRID_ENV_VAR = "TAXISEARCH_GRID"
DEFAULT_CONFIG = Path("configs/default.yaml")


def build_bfs(cfg: dict[str, Any]) -> BreadthFirstSearch:
    bfs_cfg = (cfg.get("search") or {}).get("bfs") or {}
    cap = bfs_cfg.get("max_expansions")
    return BreadthFirstSearch(
        BreadthFirstConfig(max_expansions=int(cap) if cap is not None else None)
    )


def build_ucs(cfg: dict[str, Any]) -> UniformCostSearch:
    ucs_cfg = (cfg.get("search") or {}).get("ucs") or {}
    costs = ucs_cfg.get("cell_costs") or {}
    config = UniformCostConfig(
        single_iteration=bool(ucs_cfg.get("single_iteration", True)),
        cell_costs={int(code): float(cost) for code, cost in costs.items()},
    )
    return UniformCostSearch(config)


def build_dfs(cfg: dict[str, Any]) -> DepthFirstSearch:
    dfs_cfg = (cfg.get("search") or {}).get("dfs") or {}
    limit = dfs_cfg.get("depth_limit")
    config = DepthFirstConfig(
        placeholder=bool(dfs_cfg.get("placeholder", True)),
        depth_limit=int(limit) if limit is not None else None,
    )
    return DepthFirstSearch(config)


StrategyBuilder = Callable[[dict[str, Any]], SearchStrategy]

# Menu codes. 3 has no entry: depth-first is only reachable by name.
STRATEGY_CODES: Dict[int, StrategyBuilder] = {
    1: build_bfs,
    2: build_ucs,
    4: build_bfs,
}
STRATEGY_NAMES: Dict[str, StrategyBuilder] = {
    "bfs": build_bfs,
    "ucs": build_ucs,
    "dfs": build_dfs,
}


def build_strategy(
    selector: Union[int, str], cfg: Optional[dict[str, Any]] = None
) -> Optional[SearchStrategy]:
    """Resolve a menu code (or a strategy name) to a configured strategy."""
    builder: Optional[StrategyBuilder] = None
    if isinstance(selector, str):
        token = selector.strip()
        if token.isdigit():
            builder = STRATEGY_CODES.get(int(token))
        else:
            builder = STRATEGY_NAMES.get(token.lower())
    elif isinstance(selector, int) and not isinstance(selector, bool):
        builder = STRATEGY_CODES.get(selector)
    if builder is None:
        LOGGER.error("Unknown strategy: %s", selector)
        return None
    return builder(cfg or {})


def run_search(
    selector: Union[int, str], grid: Grid, cfg: Optional[dict[str, Any]] = None
) -> Optional[SearchResult]:
    """Run the selected strategy on ``grid``; ``None`` means nothing ran."""
    strategy = build_strategy(selector, cfg)
    if strategy is None:
        return None
    start = grid.landmark("init")
    if start is None:
        LOGGER.error("Grid has no 'init' landmark; search not attempted")
        return None
    environment = Environment.from_start(grid, start)
    LOGGER.info("Running %s from %s on %s", strategy.name, start, grid)
    result = strategy.look_for_goal(environment)
    LOGGER.info("%s: %s", strategy.name, summarize_result(result))
    if result.solution_found:
        LOGGER.debug("Path overlay:\n%s", ascii_path_map(grid, result.path))
    return result


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Passenger/goal grid search")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG,
        help="Path to YAML config",
    )
    parser.add_argument(
        "--grid",
        type=Path,
        default=None,
        help=f"Override grid file from config (or ${GRID_ENV_VAR})",
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=None,
        help="Strategy code (1/4 breadth-first, 2 uniform-cost) or name (bfs/ucs/dfs)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Python logging level",
    )
    return parser.parse_args(argv)


def load_config(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def resolve_grid_path(cfg: dict[str, Any], args: argparse.Namespace) -> Optional[Path]:
    if args.grid:
        return Path(args.grid)
    env_grid = os.environ.get(GRID_ENV_VAR)
    if env_grid:
        return Path(env_grid)
    if cfg.get("grid"):
        return Path(cfg["grid"])
    return None


def main(argv: Optional[list[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    load_dotenv()
    try:
        cfg = load_config(args.config) if args.config.exists() else {}
    except yaml.YAMLError as exc:
        LOGGER.error("Failed to parse config %s: %s", args.config, exc)
        return 1
    if not cfg:
        LOGGER.info("No config at %s; using defaults", args.config)

    grid_path = resolve_grid_path(cfg, args)
    if grid_path is None:
        LOGGER.error("No grid file given (--grid, $%s or config 'grid')", GRID_ENV_VAR)
        return 1
    try:
        grid = load_grid(grid_path)
    except (OSError, ValueError) as exc:
        LOGGER.error("Failed to load grid %s: %s", grid_path, exc)
        return 1

    selector = args.strategy if args.strategy is not None else cfg.get("strategy", 1)
    result = run_search(selector, grid, cfg)
    return 0 if result is not None and result.solution_found else 1


if __name__ == "__main__":
    raise SystemExit(main())
