from __future__ import annotations

import logging

import numpy as np

from blockfall.game_state import GameState
from blockfall.piece import SPAWN_POSITION
from blockfall.randomizer import SequenceSelector
from blockfall.shapes import Shape


def _state(*shapes: Shape) -> GameState:
    return GameState(SequenceSelector(shapes))


def test_spawn_collision_ends_session() -> None:
    state = _state(Shape.O)
    state.board.set_cell(2, 3, Shape.I)
    state.soft_drop()

    assert state.is_over is True
    assert state.pieces == 1
    assert state.score == 1
    # The overlapping spawn is left as-is.
    assert state.piece.position == SPAWN_POSITION
    assert not state.piece.fits(state.board)


def test_commands_after_game_over_change_nothing(caplog) -> None:
    state = _state(Shape.O, Shape.I)
    state.board.set_cell(2, 3, Shape.I)
    with caplog.at_level(logging.INFO, logger="blockfall.game_state"):
        state.hard_drop()
    assert state.is_over
    assert "Game over" in "".join(caplog.messages)

    grid = state.board.grid.copy()
    piece = state.piece
    score, delay = state.score, state.delay
    state.move_left()
    state.move_right()
    state.rotate_clockwise()
    state.soft_drop()
    state.hard_drop()
    state.tick(delay)

    assert state.is_over
    assert np.array_equal(state.board.grid, grid)
    assert state.piece is piece
    assert state.score == score
    assert state.delay == delay



def test_stack_reaching_spawn_box_ends_session() -> None:
    state = _state(Shape.O)
    for _ in range(11):
        assert not state.is_over
        state.hard_drop()
    # Eleven O pieces fill rows 0-21 of columns 3-4.
    assert state.is_over
    assert state.pieces == 11
    assert state.board.grid[:, 3:5].all()
