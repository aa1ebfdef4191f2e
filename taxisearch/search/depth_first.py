"""Depth-first search: placeholder by default, stack-based when enabled."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from taxisearch.env import Environment
from taxisearch.types import AgentStep, DirectionalMove, SearchResult

from .base import PhasedSearch
from .frontier import LifoFrontier


@dataclass(slots=True)
class DepthFirstConfig:
    placeholder: bool = True
    depth_limit: Optional[int] = None  # Children deeper than this are not pushed.


class DepthFirstSearch(PhasedSearch):
    """Stack search with a per-phase visited map.

    With a ``depth_limit`` a cell reached again by a shallower route is
    explored again, so a cell first met at the limit does not hide targets
    that the shorter route can still reach.
    """

    name = "dfs"
    track_visited = True

    def __init__(self, config: DepthFirstConfig | None = None):
        self.config = config or DepthFirstConfig()

    def look_for_goal(self, environment: Environment) -> SearchResult:
        if self.config.placeholder:
            return SearchResult.empty()
        return super().look_for_goal(environment)

    def _new_frontier(self) -> LifoFrontier[AgentStep]:
        return LifoFrontier()

    def _order(self, moves: List[DirectionalMove]) -> Iterable[DirectionalMove]:
        # Reversed so the first perceived direction is popped first.
        return reversed(moves)

    def _admit(self, child: AgentStep) -> bool:
        limit = self.config.depth_limit
        return limit is None or child.depth <= limit

    def _revisit(self, step: AgentStep, seen_depth: int) -> bool:
        return self.config.depth_limit is not None and step.depth < seen_depth
