"""Shape library: occupancy tables for every tetromino rotation.

Each of the seven shapes is stored in all four rotation states inside a fixed
4x4 bounding box.  Tabulating every state up front (instead of rotating a base
matrix) keeps the rotation centre implicit in the data and turns occupancy
tests into a plain table lookup.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray


BOX_SIZE = 4

Occupancy = NDArray[np.bool_]


class Shape(str, Enum):
    """Enumeration of the seven tetromino shapes."""

    I = "I"
    O = "O"
    L = "L"
    J = "J"
    T = "T"
    S = "S"
    Z = "Z"


class Rotation(IntEnum):
    """Rotation states, numbered in clockwise order."""

    SPAWN = 0
    RIGHT = 1
    REVERSE = 2
    LEFT = 3

    def clockwise(self) -> "Rotation":
        return Rotation((self + 1) % len(Rotation))


# Rows of each 4x4 box, listed per shape in ``Rotation`` order.
_TABLE: Dict[Shape, Tuple[Tuple[str, str, str, str], ...]] = {
    Shape.I: (
        ("X...", "X...", "X...", "X..."),
        ("XXXX", "....", "....", "...."),
        ("X...", "X...", "X...", "X..."),
        ("XXXX", "....", "....", "...."),
    ),
    Shape.O: (
        ("XX..", "XX..", "....", "...."),
        ("XX..", "XX..", "....", "...."),
        ("XX..", "XX..", "....", "...."),
        ("XX..", "XX..", "....", "...."),
    ),
    Shape.L: (
        ("XX..", "X...", "X...", "...."),
        ("X...", "XXX.", "....", "...."),
        (".X..", ".X..", "XX..", "...."),
        ("XXX.", "..X.", "....", "...."),
    ),
    Shape.J: (
        ("XX..", ".X..", ".X..", "...."),
        ("XXX.", "X...", "....", "...."),
        ("X...", "X...", "XX..", "...."),
        ("..X.", "XXX.", "....", "...."),
    ),
    Shape.T: (
        (".X..", "XXX.", "....", "...."),
        (".X..", "XX..", ".X..", "...."),
        ("XXX.", ".X..", "....", "...."),
        ("X...", "XX..", "X...", "...."),
    ),
    Shape.S: (
        (".X..", "XX..", "X...", "...."),
        ("XX..", ".XX.", "....", "...."),
        (".X..", "XX..", "X...", "...."),
        ("XX..", ".XX.", "....", "...."),
    ),
    Shape.Z: (
        ("X...", "XX..", ".X..", "...."),
        (".XX.", "XX..", "....", "...."),
        ("X...", "XX..", ".X..", "...."),
        (".XX.", "XX..", "....", "...."),
    ),
}


def _parse(rows: Tuple[str, ...]) -> Occupancy:
    matrix = np.array([[ch == "X" for ch in row] for row in rows], dtype=np.bool_)
    if matrix.shape != (BOX_SIZE, BOX_SIZE):
        raise ValueError(f"Shape rows must form a {BOX_SIZE}x{BOX_SIZE} box")
    matrix.setflags(write=False)
    return matrix


SHAPE_TABLE: Dict[Tuple[Shape, Rotation], Occupancy] = {
    (shape, rotation): _parse(states[rotation])
    for shape, states in _TABLE.items()
    for rotation in Rotation
}


def occupancy(shape: Shape, rotation: Rotation) -> Occupancy:
    """Return the read-only 4x4 occupancy matrix for ``shape`` at ``rotation``.

    Both keys are validated through their enumeration, so unknown values
    raise :class:`ValueError` instead of indexing outside the table.
    """

    return SHAPE_TABLE[(Shape(shape), Rotation(rotation))]


def is_occupied(shape: Shape, rotation: Rotation, row: int, col: int) -> bool:
    """Return ``True`` if the box cell ``(row, col)`` is filled.

    Raises:
        IndexError: If ``row`` or ``col`` falls outside the 4x4 box.
    """

    if not (0 <= row < BOX_SIZE and 0 <= col < BOX_SIZE):
        raise IndexError("Cell outside the bounding box")
    return bool(occupancy(shape, rotation)[row, col])


def shape_blocks(shape: Shape, rotation: Rotation) -> List[Tuple[int, int]]:
    """Return the ``(row, col)`` offsets of the filled cells."""

    rows, cols = np.nonzero(occupancy(shape, rotation))
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


__all__ = [
    "BOX_SIZE",
    "Rotation",
    "SHAPE_TABLE",
    "Shape",
    "is_occupied",
    "occupancy",
    "shape_blocks",
]
