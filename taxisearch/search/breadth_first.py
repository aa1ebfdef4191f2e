"""Two-phase breadth-first search (passenger first, then goal)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from taxisearch.env import Grid
from taxisearch.types import AgentStep

from .base import PhasedSearch
from .frontier import FifoFrontier

PLACEHOLDER_COST = 1.333


@dataclass(slots=True)
class BreadthFirstConfig:
    """Configuration for the breadth-first strategy."""

    max_expansions: Optional[int] = None  # Optional cap on BFS expansions.


def reachable_depth_bound(grid: Grid) -> int:
    """Number of distinct (cell, previous cell) states on ``grid``.

    A walk that only forbids immediate reversal is determined by these
    states, so a target within reach is found at or below this many moves
    from the phase seed.
    """
    return 4 * grid.width * grid.height + 1


class BreadthFirstSearch(PhasedSearch):
    """FIFO search guarded only against immediate reversal.

    Without a visited set the frontier keeps cycling on grids with loops when
    a phase target is unreachable. A phase therefore gives up once a dequeued
    node lies deeper than ``reachable_depth_bound`` below the phase seed.
    ``max_expansions`` is an additional, tighter cap.
    The reported cost is a fixed placeholder, not the path cost.
    """

    name = "bfs"

    def __init__(self, config: BreadthFirstConfig | None = None):
        self.config = config or BreadthFirstConfig()
        self.max_expansions = self.config.max_expansions

    def _new_frontier(self) -> FifoFrontier[AgentStep]:
        return FifoFrontier()

    def _beyond_reach(self, step: AgentStep, seed: AgentStep, grid: Grid) -> bool:
        return step.depth - seed.depth > reachable_depth_bound(grid)

    def _result_cost(self, goal_step: AgentStep) -> float:
        return PLACEHOLDER_COST
