"""Movement table and four-neighbour perception."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from taxisearch.env import Agent, Grid
from taxisearch.types import Coord, Direction, DirectionalMove

LOGGER = logging.getLogger(__name__)

MOVEMENTS: Tuple[DirectionalMove, ...] = (
    DirectionalMove(Direction.UP, (0, -1)),
    DirectionalMove(Direction.RIGHT, (1, 0)),
    DirectionalMove(Direction.DOWN, (0, 1)),
    DirectionalMove(Direction.LEFT, (-1, 0)),
)


def coordinate_add(first: Coord, second: Coord) -> Coord:
    return (first[0] + second[0], first[1] + second[1])


def perceive(agent: Agent, grid: Grid) -> List[DirectionalMove]:
    """Return in-bounds, non-wall neighbours of the agent in table order."""
    origin = agent.position.current_position
    can_move: List[DirectionalMove] = []
    for movement in MOVEMENTS:
        candidate = coordinate_add(origin, movement.coordinate)
        if grid.in_bounds(candidate) and not grid.is_wall(candidate):
            can_move.append(DirectionalMove(movement.direction, candidate))
    LOGGER.debug("Can move from %s: %s", origin, [m.coordinate for m in can_move])
    return can_move


def expandable(moves: List[DirectionalMove], previous: Optional[Coord]) -> List[DirectionalMove]:
    """Drop the move that would step straight back onto ``previous``."""
    return [move for move in moves if move.coordinate != previous]


__all__ = ["MOVEMENTS", "coordinate_add", "perceive", "expandable"]
