"""Strategy interface and the shared passenger-then-goal search loop."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from taxisearch.env import CellCode, Environment, Grid
from taxisearch.types import AgentStep, Coord, DirectionalMove, SearchResult

from .paths import join_paths, reconstruct_path
from .perception import expandable, perceive

LOGGER = logging.getLogger(__name__)


class SearchStrategy(ABC):
    """A blind search strategy: one environment in, one result out."""

    name: str = "search"

    @abstractmethod
    def look_for_goal(self, environment: Environment) -> SearchResult:
        raise NotImplementedError


@dataclass(slots=True)
class _PhaseState:
    expanded: int = 0
    max_depth: int = 0
    parent_nodes: Dict[Coord, AgentStep] = field(default_factory=dict)
    visited: Dict[Coord, int] = field(default_factory=dict)  # coord -> shallowest depth popped


class _ExpansionCapReached(Exception):
    pass


class PhasedSearch(SearchStrategy):
    """Locate the passenger, then the goal, over a subclass-provided frontier.

    Subclasses pick the frontier, the child ordering and whether coordinates
    are deduplicated with a visited set. The frontier is cleared and reseeded
    with the passenger node when phase one succeeds.
    """

    track_visited: bool = False
    max_expansions: Optional[int] = None

    # ----------------------------------------------------------------- hooks
    @abstractmethod
    def _new_frontier(self):
        raise NotImplementedError

    def _push(self, frontier, step: AgentStep) -> None:
        frontier.push(step)

    def _order(self, moves: List[DirectionalMove]) -> Iterable[DirectionalMove]:
        return moves

    def _admit(self, child: AgentStep) -> bool:
        return True

    def _revisit(self, step: AgentStep, seen_depth: int) -> bool:
        """Whether a visited coordinate may be entered again by ``step``."""
        return False

    def _beyond_reach(self, step: AgentStep, seed: AgentStep, grid: Grid) -> bool:
        """Whether ``step`` is too deep for the phase target to still be found."""
        return False

    def _step_cost(self, environment: Environment, coord: Coord) -> float:
        return 1.0

    def _result_cost(self, goal_step: AgentStep) -> float:
        return goal_step.path_cost

    # ------------------------------------------------------------------- API
    def look_for_goal(self, environment: Environment) -> SearchResult:
        start = time.perf_counter()
        state = _PhaseState()
        frontier = self._new_frontier()
        root = environment.agent.position

        try:
            passenger_step = self._run_phase(environment, frontier, root, CellCode.PASSENGER, state)
            if passenger_step is None:
                return self._failure(state, start)
            environment.pick_up(passenger_step.current_position)
            path_to_passenger = reconstruct_path(state.parent_nodes, passenger_step)
            LOGGER.info(
                "%s: passenger at %s (depth=%d, expanded=%d)",
                self.name,
                passenger_step.current_position,
                passenger_step.depth,
                state.expanded,
            )

            frontier.clear()
            state.parent_nodes = {}
            state.visited = {}
            goal_step = self._run_phase(environment, frontier, passenger_step, CellCode.GOAL, state)
            if goal_step is None:
                return self._failure(state, start)
        except _ExpansionCapReached:
            LOGGER.warning("%s: stopped after %d expansions", self.name, state.expanded)
            return self._failure(state, start)

        environment.total_goal += 1
        path_to_goal = reconstruct_path(
            state.parent_nodes, goal_step, origin=passenger_step.current_position
        )
        combined = join_paths(path_to_passenger, path_to_goal)
        return SearchResult(
            path=tuple(combined),
            solution_found=True,
            expanded_nodes=state.expanded,
            tree_depth=goal_step.depth,
            cost=self._result_cost(goal_step),
            elapsed=time.perf_counter() - start,
        )

    # --------------------------------------------------------------- helpers
    def _run_phase(
        self,
        environment: Environment,
        frontier,
        seed: AgentStep,
        target: CellCode,
        state: _PhaseState,
    ) -> Optional[AgentStep]:
        grid = environment.grid
        self._push(frontier, seed)
        while frontier:
            step = frontier.pop()
            coord = step.current_position
            if self.track_visited:
                seen_depth = state.visited.get(coord)
                if seen_depth is not None and not self._revisit(step, seen_depth):
                    continue
                state.visited[coord] = step.depth
                if seen_depth is not None:
                    state.parent_nodes[coord] = step
            state.parent_nodes.setdefault(coord, step)
            state.max_depth = max(state.max_depth, step.depth)

            if grid.cell(coord) == target:
                return step
            if self._beyond_reach(step, seed, grid):
                LOGGER.info(
                    "%s: %s unreachable from %s (depth bound passed)",
                    self.name,
                    target.name.lower(),
                    seed.current_position,
                )
                return None

            if self.max_expansions is not None and state.expanded >= self.max_expansions:
                raise _ExpansionCapReached()
            environment.agent.position = step
            moves = expandable(perceive(environment.agent, grid), step.previous_position)
            state.expanded += 1
            for move in self._order(moves):
                child = step.child(move, self._step_cost(environment, move.coordinate))
                if self.track_visited:
                    seen_depth = state.visited.get(move.coordinate)
                    if seen_depth is not None and not self._revisit(child, seen_depth):
                        continue
                if self._admit(child):
                    self._push(frontier, child)
        return None

    def _failure(self, state: _PhaseState, start: float) -> SearchResult:
        LOGGER.info("%s: no solution found (expanded=%d)", self.name, state.expanded)
        return SearchResult(
            path=(),
            solution_found=False,
            expanded_nodes=state.expanded,
            tree_depth=state.max_depth,
            cost=0.0,
            elapsed=time.perf_counter() - start,
        )


__all__ = ["SearchStrategy", "PhasedSearch"]
