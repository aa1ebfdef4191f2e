"""Plain-text grid loader.

One grid row per line, cells separated by whitespace. Blank lines and lines
starting with ``#`` are skipped. Landmarks are taken from the first cell
holding the start, passenger and goal codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from taxisearch.env import CellCode, Grid
from taxisearch.types import Coord

LANDMARK_CODES: Dict[str, CellCode] = {
    "init": CellCode.START,
    "passenger": CellCode.PASSENGER,
    "goal": CellCode.GOAL,
}


def _parse_row(line: str, lineno: int) -> List[int]:
    try:
        return [int(token) for token in line.split()]
    except ValueError as exc:
        raise ValueError(f"line {lineno}: non-integer cell in {line!r}") from exc


def parse_grid(text: str) -> Grid:
    rows: List[List[int]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        rows.append(_parse_row(line, lineno))
    if not rows:
        raise ValueError("grid file holds no rows")
    grid = Grid.from_rows(rows)
    landmarks: Dict[str, Coord] = {}
    for name, code in LANDMARK_CODES.items():
        coord = grid.find(code)
        if coord is not None:
            landmarks[name] = coord
    return Grid(grid.cells, landmarks)


def load_grid(path: Path) -> Grid:
    with Path(path).open("r", encoding="utf-8") as handle:
        return parse_grid(handle.read())


__all__ = ["LANDMARK_CODES", "parse_grid", "load_grid"]
