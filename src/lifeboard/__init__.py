"""Conway's Game of Life on a bounded board, printed until every cell is dead."""

__version__ = "0.1.0"

from .core.board import Board
from .core.engine import Evolution, evolve
from .core.simulation import Simulation, SimulationState
from .core.patterns import Pattern, PatternLibrary, default_board

__all__ = [
    "Board",
    "Evolution",
    "evolve",
    "Simulation",
    "SimulationState",
    "Pattern",
    "PatternLibrary",
    "default_board",
]
