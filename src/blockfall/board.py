"""Board representation for the playfield grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

import numpy as np
from numpy.typing import NDArray

from .shapes import Shape

if TYPE_CHECKING:
    from .piece import Piece


# Dimensions of the playfield.
WIDTH = 10
HEIGHT = 22

# Rows above the spawn box which line elimination never rewrites.
BUFFER_ROWS = 3

Grid = NDArray[np.uint8]

EMPTY = 0

# Mapping from ``Shape`` to the integer stored in the grid.  ``0`` is reserved
# for an empty cell.
PIECE_VALUES: Dict[Shape, int] = {s: i + 1 for i, s in enumerate(Shape)}
VALUE_SHAPES: Dict[int, Shape] = {v: s for s, v in PIECE_VALUES.items()}


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Static playfield holding the locked cells."""

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def get_cell(self, row: int, col: int) -> Optional[Shape]:
        """Return the shape locked at ``(row, col)`` or ``None`` when empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            value = int(self.grid[row, col])
            return VALUE_SHAPES[value] if value else None
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, shape: Optional[Shape]) -> None:
        """Set ``(row, col)`` to ``shape``; ``None`` empties the cell.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(PIECE_VALUES[shape] if shape else EMPTY)
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, row: int, col: int) -> bool:
        """Return ``True`` if the cell at ``(row, col)`` is empty.

        Any coordinates outside the board are treated as occupied so that
        off-board positions are rejected by collision checks.
        """

        if 0 <= row < self.height and 0 <= col < self.width:
            return bool(self.grid[row, col] == EMPTY)
        return False

    def lock_piece(self, piece: "Piece") -> None:
        """Stamp the piece's cells into the grid as its shape value."""

        coordinates = np.asarray(piece.blocks(), dtype=np.int16)
        rows, cols = coordinates.T
        if (
            np.any(rows < 0)
            or np.any(rows >= self.height)
            or np.any(cols < 0)
            or np.any(cols >= self.width)
        ):
            raise IndexError("Block out of bounds")

        self.grid[rows, cols] = np.uint8(PIECE_VALUES[piece.shape])

    def clear_full_rows(self) -> int:
        """Eliminate completed rows and return how many qualified.

        Rows are scanned top to bottom.  For each full row every row from it
        up to ``BUFFER_ROWS`` is overwritten with the row above, sliding the
        stack down by one.  The buffer rows themselves are never rewritten, so
        a full row inside the buffer is counted but stays in place.
        """

        cleared = 0
        for row in range(self.height):
            if not np.all(self.grid[row] != EMPTY):
                continue
            cleared += 1
            for target in range(row, BUFFER_ROWS - 1, -1):
                self.grid[target] = self.grid[target - 1]
        return cleared
