"""Frontend interfaces for the Game of Life."""

from .cli import TerminalLife

__all__ = ["TerminalLife"]
