"""Immutable board state and the Game of Life generation transition."""

from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F


# A cell is born alive when its uniform draw exceeds this value (p = 0.15)
ALIVE_THRESHOLD = 0.85

# Two glyphs per cell so each cell renders roughly square in a terminal
ALIVE_GLYPH = "██"
DEAD_GLYPH = "  "

# Single-threaded convolution
torch.set_num_threads(1)

# Ring kernel: the eight surrounding cells, centre excluded
_NEIGHBOUR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


class CellState(Enum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


def _is_alive(value) -> bool:
    if isinstance(value, CellState):
        return value is CellState.ALIVE
    return bool(value)


class Board:
    """A fixed-size generation of a bounded Game of Life grid.

    Cells are stored row-major in an ``(height, width)`` array where 1 is
    alive and 0 is dead. A board never changes after construction: the
    backing array is read-only and :meth:`next` always returns a new board.
    Edges do not wrap, so corner cells have three neighbours and edge
    cells five.
    """

    def __init__(self, cells: np.ndarray) -> None:
        """Wrap a 2D cell array.

        Args:
            cells: Array of shape (height, width); nonzero entries are alive

        Raises:
            ValueError: If the array is not two-dimensional
        """
        cells = np.asarray(cells)
        if cells.ndim != 2:
            raise ValueError(f"Board cells must be two-dimensional, got {cells.ndim} dimension(s)")

        self._cells = (cells != 0).astype(np.int8)
        self._cells.flags.writeable = False

    @classmethod
    def empty(cls, width: int, height: int) -> "Board":
        """Create a board with every cell dead.

        Args:
            width: Number of columns (may be 0)
            height: Number of rows (may be 0)

        Raises:
            ValueError: If either dimension is negative
        """
        _check_size(width, height)
        return cls(np.zeros((height, width), dtype=np.int8))

    @classmethod
    def random(cls, width: int, height: int, rng: Optional[np.random.Generator] = None) -> "Board":
        """Create a randomly seeded board.

        Each cell is independently alive when its uniform draw on [0, 1)
        exceeds ``ALIVE_THRESHOLD``.

        Args:
            width: Number of columns (may be 0)
            height: Number of rows (may be 0)
            rng: Random source; a fresh unseeded generator when omitted

        Raises:
            ValueError: If either dimension is negative
        """
        _check_size(width, height)
        if rng is None:
            rng = np.random.default_rng()

        return cls(rng.random((height, width)) > ALIVE_THRESHOLD)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence]) -> "Board":
        """Create a board from explicit rows.

        Args:
            rows: Equal-length rows of CellState values or truthy/falsy values

        Raises:
            ValueError: If the rows are not all the same length
        """
        data = [[1 if _is_alive(value) else 0 for value in row] for row in rows]
        if not data:
            return cls.empty(0, 0)

        width = len(data[0])
        for index, row in enumerate(data):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} cells, expected {width}")

        return cls(np.array(data, dtype=np.int8).reshape(len(data), width))

    @classmethod
    def parse(cls, text: str, alive: str = "#", dead: str = ".") -> "Board":
        """Create a board from a text picture such as ``"..#\\n.##\\n..."``.

        Whitespace between glyphs is ignored and blank lines are skipped.

        Raises:
            ValueError: On an unknown glyph or rows of differing length
        """
        rows = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            glyphs = "".join(line.split())
            if not glyphs:
                continue

            row = []
            for glyph in glyphs:
                if glyph == alive:
                    row.append(True)
                elif glyph == dead:
                    row.append(False)
                else:
                    raise ValueError(f"Unknown glyph {glyph!r} on line {line_number}")
            rows.append(row)

        return cls.from_rows(rows)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only (height, width) cell array."""
        return self._cells

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def _check_position(self, row: int, column: int) -> None:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(f"Position ({row}, {column}) out of bounds for {self.width}x{self.height} board")

    def get_cell(self, row: int, column: int) -> CellState:
        """Get the state of a cell.

        Raises:
            IndexError: If the position is outside the board
        """
        self._check_position(row, column)
        return CellState.ALIVE if self._cells[row, column] else CellState.DEAD

    def is_alive(self, row: int, column: int) -> bool:
        return self.get_cell(row, column) is CellState.ALIVE

    def live_neighbours(self, row: int, column: int) -> int:
        """Count living neighbours of one cell.

        Positions outside the board are skipped rather than wrapped.

        Returns:
            Number of living neighbours (0-8)

        Raises:
            IndexError: If the position is outside the board
        """
        self._check_position(row, column)

        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue

                nr, nc = row + dr, column + dc
                if 0 <= nr < self.height and 0 <= nc < self.width:
                    count += int(self._cells[nr, nc])

        return count

    def neighbour_counts(self) -> np.ndarray:
        """Count living neighbours for every cell at once.

        Zero padding around the convolution input stands in for the
        missing cells beyond each edge.

        Returns:
            (height, width) array of neighbour counts
        """
        if self._cells.size == 0:
            return np.zeros(self._cells.shape, dtype=np.int8)

        source = torch.from_numpy(self._cells.astype(np.float32)).reshape(1, 1, self.height, self.width)
        neighbours = F.conv2d(source, _NEIGHBOUR_KERNEL, padding=1)
        return neighbours[0, 0].numpy().astype(np.int8)

    def next(self) -> "Board":
        """Compute the following generation.

        Every cell is judged against this board only:
        - live cell with 2-3 neighbours survives
        - dead cell with exactly 3 neighbours becomes alive
        - all other cells die or stay dead

        Returns:
            A new board of the same size
        """
        counts = self.neighbour_counts()
        alive = self._cells > 0

        survive = alive & ((counts == 2) | (counts == 3))
        birth = ~alive & (counts == 3)

        return Board(survive | birth)

    def render(self) -> str:
        """Render the board as one text line per row, two glyphs per cell."""
        return "\n".join(
            "".join(ALIVE_GLYPH if value else DEAD_GLYPH for value in row) for row in self._cells
        )

    def to_list(self) -> list:
        """Convert to nested row lists of 0/1 values."""
        return self._cells.tolist()

    def __eq__(self, other: object) -> bool:
        """Check if two boards hold the same cells."""
        if not isinstance(other, Board):
            return False
        return self._cells.shape == other._cells.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self._cells.shape, self._cells.tobytes()))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, population={self.population})"


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"Board size must be non-negative, got {width}x{height}")
