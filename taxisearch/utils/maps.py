"""Helpers for lightweight ASCII maps written to the debug log."""

from __future__ import annotations

from typing import Dict, List, Sequence

from taxisearch.env import CellCode, Grid
from taxisearch.search.paths import remove_duplicates
from taxisearch.types import Coord, SearchResult

_CELL_GLYPHS: Dict[int, str] = {
    CellCode.FREE: ".",
    CellCode.WALL: "#",
    CellCode.START: "S",
    CellCode.PASSENGER: "P",
    CellCode.GOAL: "G",
}
_LANDMARK_CODES = {CellCode.START, CellCode.PASSENGER, CellCode.GOAL}


def ascii_path_map(grid: Grid, path: Sequence[Coord]) -> str:
    """Return the grid as text with path cells marked ``*``.

    Landmark cells keep their glyph so the route's endpoints stay visible;
    reserved codes print as their digit.
    """
    on_path = set(path)
    lines: List[str] = []
    for y in range(grid.height):
        cells: List[str] = []
        for x in range(grid.width):
            code = grid.cell((x, y))
            glyph = _CELL_GLYPHS.get(code, str(code)[-1])
            if (x, y) in on_path and code not in _LANDMARK_CODES:
                glyph = "*"
            cells.append(glyph)
        lines.append(" ".join(cells))
    return "\n".join(lines)


def summarize_result(result: SearchResult) -> str:
    distinct = len(remove_duplicates(result.path))
    return (
        f"solution={result.solution_found} steps={max(len(result.path) - 1, 0)} "
        f"cells={distinct} expanded={result.expanded_nodes} depth={result.tree_depth} "
        f"cost={result.cost:.3f} elapsed={result.elapsed * 1000:.3f}ms"
    )


__all__ = ["ascii_path_map", "summarize_result"]
