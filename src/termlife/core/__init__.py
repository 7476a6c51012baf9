"""Core board logic."""

from .board import Board, CellState
from .simulation import Simulation

__all__ = ["Board", "CellState", "Simulation"]
