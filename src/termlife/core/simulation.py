"""Driving state for a running Game of Life."""

from typing import Iterator, Optional

from .board import Board


class Simulation:
    """Owns the current generation and replaces it on each step.

    Only the current board is kept; earlier generations are dropped as
    soon as their successor has been computed.
    """

    def __init__(self, board: Board) -> None:
        """Initialize the simulation with a starting board.

        Args:
            board: Generation 0
        """
        self._board = board
        self._generation = 0

    @property
    def board(self) -> Board:
        """The current generation."""
        return self._board

    @property
    def generation(self) -> int:
        """Number of steps taken so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population

    def step(self) -> Board:
        """Advance the simulation by one generation.

        Returns:
            The new current board
        """
        self._board = self._board.next()
        self._generation += 1
        return self._board

    def frames(self, limit: Optional[int] = None) -> Iterator[Board]:
        """Yield the current board, then each following generation.

        Args:
            limit: Total number of boards to yield, or None to run forever
        """
        if limit is not None and limit <= 0:
            return

        yielded = 0
        while True:
            yield self._board
            yielded += 1
            if limit is not None and yielded >= limit:
                return
            self.step()
