"""Core data contracts shared across the search stack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

Coord = Tuple[int, int]  # (column, row)


class Direction(Enum):
    UP = auto()
    RIGHT = auto()
    DOWN = auto()
    LEFT = auto()


@dataclass(frozen=True, slots=True)
class DirectionalMove:
    """A direction paired with a coordinate (a delta or a target cell)."""

    direction: Direction
    coordinate: Coord


@dataclass(frozen=True, slots=True)
class AgentStep:
    """Search-tree node. ``previous_position`` is ``None`` for the root."""

    current_position: Coord
    previous_position: Optional[Coord] = None
    action: Optional[Direction] = None
    depth: int = 0
    path_cost: float = 0.0

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError("depth must be non-negative")

    @property
    def is_root(self) -> bool:
        return self.previous_position is None

    def child(self, move: DirectionalMove, step_cost: float = 1.0) -> "AgentStep":
        return AgentStep(
            current_position=move.coordinate,
            previous_position=self.current_position,
            action=move.direction,
            depth=self.depth + 1,
            path_cost=self.path_cost + step_cost,
        )


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one strategy invocation; ``elapsed`` is in seconds.

    ``tree_depth`` counts moves: on success it is ``len(path) - 1``, on
    failure the depth of the deepest dequeued node.
    """

    path: Tuple[Coord, ...] = ()
    solution_found: bool = False
    expanded_nodes: int = 0
    tree_depth: int = 0
    cost: float = 0.0
    elapsed: float = 0.0

    @classmethod
    def empty(cls) -> "SearchResult":
        return cls()


__all__ = [
    "Coord",
    "Direction",
    "DirectionalMove",
    "AgentStep",
    "SearchResult",
]
