"""Search strategy exports."""

from .base import PhasedSearch, SearchStrategy
from .breadth_first import (
    PLACEHOLDER_COST,
    BreadthFirstConfig,
    BreadthFirstSearch,
    reachable_depth_bound,
)
from .depth_first import DepthFirstConfig, DepthFirstSearch
from .frontier import FifoFrontier, LifoFrontier, PriorityFrontier
from .paths import is_contiguous, join_paths, reconstruct_path, remove_duplicates
from .perception import MOVEMENTS, coordinate_add, expandable, perceive
from .uniform_cost import UniformCostConfig, UniformCostSearch

__all__ = [
    "BreadthFirstConfig",
    "BreadthFirstSearch",
    "DepthFirstConfig",
    "DepthFirstSearch",
    "FifoFrontier",
    "LifoFrontier",
    "MOVEMENTS",
    "PLACEHOLDER_COST",
    "PhasedSearch",
    "PriorityFrontier",
    "SearchStrategy",
    "UniformCostConfig",
    "UniformCostSearch",
    "coordinate_add",
    "expandable",
    "is_contiguous",
    "join_paths",
    "perceive",
    "reachable_depth_bound",
    "reconstruct_path",
    "remove_duplicates",
]
