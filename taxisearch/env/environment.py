"""Per-invocation search environment: grid, agent and passenger state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from taxisearch.types import AgentStep, Coord

from .grid import Grid


@dataclass(slots=True)
class Agent:
    position: AgentStep
    has_passenger: bool = False


@dataclass(slots=True)
class Environment:
    """One search run's mutable state. Build a fresh one per invocation."""

    agent: Agent
    grid: Grid
    passenger_position: Optional[Coord] = None
    total_goal: int = 0

    @classmethod
    def from_start(cls, grid: Grid, start: Coord) -> "Environment":
        if not grid.in_bounds(start):
            raise ValueError(f"start {start} is outside the grid")
        return cls(agent=Agent(position=AgentStep(current_position=start)), grid=grid)

    def pick_up(self, coord: Coord) -> None:
        """Record the passenger cell the first time it is dequeued."""
        if self.passenger_position is None:
            self.passenger_position = coord
        self.agent.has_passenger = True
        self.total_goal += 1
