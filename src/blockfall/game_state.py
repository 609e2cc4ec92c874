"""High level game session: the rules engine's read and command surface."""

from __future__ import annotations

import logging
from typing import Optional

from .board import HEIGHT, WIDTH, Board
from .piece import Direction, Piece
from .randomizer import ShapeSelector, UniformSelector
from .shapes import BOX_SIZE, Shape
from .utils import gravity_delay_ms, level_for_score, line_clear_points


LOGGER = logging.getLogger(__name__)


class GameState:
    """Mutable state for one game session.

    The session owns the static :class:`Board`, the active :class:`Piece`,
    the score, the level, the forced-descent timer and the terminal flag.  It
    is the only thing allowed to mutate them.  Illegal commands are silently
    ignored; losing is recorded in :attr:`is_over` and never cleared, so a new
    session needs a new ``GameState``.
    """

    def __init__(self, selector: Optional[ShapeSelector] = None) -> None:
        self._selector: ShapeSelector = selector if selector is not None else UniformSelector()
        self._board = Board()
        self._score = 0
        self._level = 1
        self._pieces = 0
        self._lines = 0
        self._last_cleared = 0
        self._over = False
        self._piece = Piece.spawn(self._selector.next_shape())
        self._delay = 0
        self._timer_reset()

    # ------------------------------------------------------------------
    # Read surface
    # ------------------------------------------------------------------
    @property
    def board(self) -> Board:
        return self._board

    @property
    def piece(self) -> Piece:
        return self._piece

    @property
    def score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        return self._level

    @property
    def delay(self) -> int:
        """Milliseconds left before the next forced descent."""

        return self._delay

    @property
    def is_over(self) -> bool:
        return self._over

    @property
    def pieces(self) -> int:
        """Number of pieces locked so far."""

        return self._pieces

    @property
    def lines(self) -> int:
        return self._lines

    @property
    def last_cleared(self) -> int:
        return self._last_cleared

    def cell_at(self, row: int, col: int) -> Optional[Shape]:
        """Return the shape shown at ``(row, col)`` or ``None`` when empty.

        Cells covered by the active piece report the piece's shape, so
        renderers can draw the falling piece as part of the board.

        Raises:
            IndexError: If the coordinates are outside the board.
        """

        if not (0 <= row < HEIGHT and 0 <= col < WIDTH):
            raise IndexError("Cell out of bounds")
        top, left = self._piece.position
        dr, dc = row - top, col - left
        if 0 <= dr < BOX_SIZE and 0 <= dc < BOX_SIZE and self._piece.occupies(dr, dc):
            return self._piece.shape
        return self._board.get_cell(row, col)

    # ------------------------------------------------------------------
    # Command surface
    # ------------------------------------------------------------------
    def move_left(self) -> None:
        self._try_move(self._piece.translate(Direction.LEFT))

    def move_right(self) -> None:
        self._try_move(self._piece.translate(Direction.RIGHT))

    def rotate_clockwise(self) -> None:
        """Rotate one step clockwise; rejected outright when blocked."""

        self._try_move(self._piece.rotate_clockwise())

    def soft_drop(self) -> None:
        """Move the piece down one row, locking it if the row is blocked."""

        if self._over:
            return
        if not self._step_down():
            self._lock()

    def hard_drop(self) -> None:
        """Drop the piece to its resting row and lock it."""

        if self._over:
            return
        while self._step_down():
            pass
        self._lock()

    def tick(self, quantum: int) -> None:
        """Advance the forced-descent timer by ``quantum`` milliseconds.

        The descent fires only when the delay reaches exactly zero.  A quantum
        that does not evenly divide the pending delay steps over zero and the
        descent is skipped; the counter then keeps decreasing and never fires
        again.  Drivers that cannot guarantee exact division should use
        :func:`blockfall.utils.advance`.

        Raises:
            ValueError: If ``quantum`` is not positive.
        """

        if quantum <= 0:
            raise ValueError("Tick quantum must be positive")
        if self._over:
            return
        self._delay -= quantum
        if self._delay == 0:
            self._timer_reset()
            self.soft_drop()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _try_move(self, candidate: Piece) -> None:
        if self._over:
            return
        if candidate.fits(self._board):
            self._piece = candidate

    def _step_down(self) -> bool:
        moved = self._piece.translate(Direction.DOWN)
        if moved.fits(self._board):
            self._piece = moved
            return True
        return False

    def _timer_reset(self) -> None:
        self._delay = gravity_delay_ms(self._level)

    def _lock(self) -> None:
        """Stamp the piece, eliminate rows, score and spawn the next piece."""

        self._board.lock_piece(self._piece)
        self._pieces += 1
        LOGGER.debug("Locked %s at %s", self._piece.shape.value, self._piece.position)

        cleared = self._board.clear_full_rows()
        self._last_cleared = cleared
        self._lines += cleared
        self._score += line_clear_points(cleared)
        level = level_for_score(self._score)
        if cleared:
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self._score)
        if level != self._level:
            LOGGER.debug("Level %d -> %d", self._level, level)
        self._level = level

        self._piece = Piece.spawn(self._selector.next_shape())
        if not self._piece.fits(self._board):
            self._over = True
            LOGGER.info("Game over. Score: %d", self._score)


__all__ = ["GameState"]
