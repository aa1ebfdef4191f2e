"""Environment exports."""

from .environment import Agent, Environment
from .grid import CellCode, Grid

__all__ = [
    "Agent",
    "CellCode",
    "Environment",
    "Grid",
]
