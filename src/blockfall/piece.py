"""The active falling piece and its geometric transforms.

A :class:`Piece` is an immutable value.  Every transform returns a new piece,
so callers can build a candidate placement, test it with :meth:`Piece.fits`
and simply drop it when the move is illegal.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Tuple

from .board import HEIGHT, WIDTH, Board
from .shapes import BOX_SIZE, Rotation, Shape, is_occupied, shape_blocks


# Top row, with the 4-wide bounding box centred horizontally.  (row, col)
SPAWN_POSITION: Tuple[int, int] = (0, WIDTH // 2 - 2)


class Direction(Enum):
    """Unit translations as ``(row, col)`` offsets."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


@dataclass(frozen=True)
class Piece:
    """Shape, rotation state and bounding-box position of a piece."""

    shape: Shape
    rotation: Rotation = Rotation.SPAWN
    position: Tuple[int, int] = SPAWN_POSITION  # (row, col)

    @classmethod
    def spawn(cls, shape: Shape) -> "Piece":
        """Return ``shape`` in its initial rotation at the spawn point."""

        return cls(Shape(shape), Rotation.SPAWN, SPAWN_POSITION)

    def translate(self, direction: Direction) -> "Piece":
        """Return a copy shifted one cell towards ``direction``."""

        dr, dc = direction.value
        row, col = self.position
        return replace(self, position=(row + dr, col + dc))

    def rotate_clockwise(self) -> "Piece":
        return replace(self, rotation=self.rotation.clockwise())

    def occupies(self, row: int, col: int) -> bool:
        """Return ``True`` if relative box cell ``(row, col)`` is filled."""

        return is_occupied(self.shape, self.rotation, row, col)

    def within_bounds(self) -> bool:
        """Coarse check that the box origin lies on the board."""

        row, col = self.position
        return 0 <= row < HEIGHT and 0 <= col < WIDTH

    def fits(self, board: Board) -> bool:
        """Return ``True`` if the piece can legally occupy its position.

        Every filled cell of the bounding box must land inside the grid on an
        empty cell.  No alternative offsets are tried.
        """

        if not self.within_bounds():
            return False
        row, col = self.position
        for dr in range(BOX_SIZE):
            for dc in range(BOX_SIZE):
                if self.occupies(dr, dc) and not board.is_empty(row + dr, col + dc):
                    return False
        return True

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the absolute board coordinates covered by this piece."""

        row, col = self.position
        return [(row + dr, col + dc) for dr, dc in shape_blocks(self.shape, self.rotation)]
