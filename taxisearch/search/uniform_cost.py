"""Cost-ordered search over a priority frontier."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Set

from taxisearch.env import Environment
from taxisearch.types import AgentStep, Coord, SearchResult

from .base import PhasedSearch
from .frontier import PriorityFrontier
from .perception import perceive

LOGGER = logging.getLogger(__name__)

_ROOT_PRIORITY = 1.0
_NEIGHBOUR_PRIORITY = 2.0


@dataclass(slots=True)
class UniformCostConfig:
    """Configuration for the uniform-cost strategy.

    ``single_iteration`` keeps the historical behaviour: one pop, one
    expansion with constant priorities, then an empty unsuccessful result.
    Turning it off runs a full two-phase search ordered by accumulated cost.
    """

    single_iteration: bool = True
    cell_costs: Dict[int, float] = field(default_factory=dict)  # cell code -> cost of entering


class UniformCostSearch(PhasedSearch):
    name = "ucs"
    track_visited = True

    def __init__(self, config: UniformCostConfig | None = None):
        self.config = config or UniformCostConfig()

    def look_for_goal(self, environment: Environment) -> SearchResult:
        if self.config.single_iteration:
            return self._single_iteration(environment)
        return super().look_for_goal(environment)

    # --------------------------------------------------------------- hooks
    def _new_frontier(self) -> PriorityFrontier[AgentStep]:
        return PriorityFrontier()

    def _push(self, frontier: PriorityFrontier[AgentStep], step: AgentStep) -> None:
        frontier.push(step, step.path_cost)

    def _step_cost(self, environment: Environment, coord: Coord) -> float:
        code = environment.grid.cell(coord)
        return float(self.config.cell_costs.get(code, 1.0))

    # ------------------------------------------------------------- helpers
    def _single_iteration(self, environment: Environment) -> SearchResult:
        LOGGER.warning("%s: single_iteration mode stops after the first pop", self.name)
        start = time.perf_counter()
        parent_nodes: Set[AgentStep] = set()
        frontier: PriorityFrontier[AgentStep] = PriorityFrontier()
        frontier.push(environment.agent.position, _ROOT_PRIORITY)

        current = frontier.pop()
        parent_nodes.add(current)
        environment.agent.position = current
        for move in perceive(environment.agent, environment.grid):
            child = AgentStep(
                current_position=move.coordinate,
                previous_position=current.current_position,
            )
            if child not in parent_nodes:
                frontier.push(child, _NEIGHBOUR_PRIORITY)
        LOGGER.debug(
            "%s: expanded %s, %d nodes queued in %.6fs",
            self.name,
            current.current_position,
            len(frontier),
            time.perf_counter() - start,
        )
        return SearchResult.empty()
