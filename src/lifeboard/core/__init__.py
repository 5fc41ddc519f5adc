"""Core Game of Life logic."""

from .board import Board
from .engine import Evolution, evolve, next_generation
from .simulation import Simulation, SimulationState
from .patterns import Pattern, PatternLibrary, default_board

__all__ = [
    "Board",
    "Evolution",
    "evolve",
    "next_generation",
    "Simulation",
    "SimulationState",
    "Pattern",
    "PatternLibrary",
    "default_board",
]
