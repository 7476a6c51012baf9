"""Terminal Game of Life on a bounded board."""

__version__ = "0.1.0"

from .core.board import Board, CellState
from .core.simulation import Simulation

__all__ = ["Board", "CellState", "Simulation"]
