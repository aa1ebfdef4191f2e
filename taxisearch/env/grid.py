"""Read-only grid of integer cell codes plus named landmarks."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from taxisearch.types import Coord


class CellCode(IntEnum):
    FREE = 0
    WALL = 1
    START = 2
    # 3 and 4 are reserved; passable, priced through UniformCostConfig.cell_costs.
    PASSENGER = 5
    GOAL = 6


class Grid:
    """Rectangular cell-code array indexed ``cells[row, column]``.

    Coordinates handed to and returned by the grid are ``(column, row)``.
    The backing array is flagged read-only; searches never mutate it.
    """

    def __init__(
        self,
        cells: Sequence[Sequence[int]] | np.ndarray,
        landmarks: Optional[Mapping[str, Coord]] = None,
    ):
        array = np.array(cells, dtype=np.int64, copy=True)
        if array.ndim != 2 or array.size == 0:
            raise ValueError("grid must be a non-empty rectangular 2D array")
        array.setflags(write=False)
        self.cells = array
        self.landmarks: Dict[str, Coord] = {}
        for name, coord in (landmarks or {}).items():
            coord = (int(coord[0]), int(coord[1]))
            if not self.in_bounds(coord):
                raise ValueError(f"landmark {name!r} at {coord} is outside the grid")
            self.landmarks[name] = coord

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]], landmarks: Optional[Mapping[str, Coord]] = None) -> "Grid":
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            raise ValueError(f"ragged grid rows: lengths {sorted(lengths)}")
        return cls(rows, landmarks)

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def in_bounds(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, coord: Coord) -> int:
        x, y = coord
        return int(self.cells[y, x])

    def is_wall(self, coord: Coord) -> bool:
        return self.cell(coord) == CellCode.WALL

    def landmark(self, name: str) -> Optional[Coord]:
        return self.landmarks.get(name)

    def find(self, code: int) -> Optional[Coord]:
        """First coordinate holding ``code`` in row-major order."""
        hits = np.argwhere(self.cells == int(code))
        if hits.size == 0:
            return None
        row, col = hits[0]
        return (int(col), int(row))

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, landmarks={self.landmarks})"


__all__ = ["CellCode", "Grid"]
