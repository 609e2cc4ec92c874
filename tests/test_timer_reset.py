import pytest

from blockfall.game_state import GameState
from blockfall.randomizer import SequenceSelector
from blockfall.shapes import Shape
from blockfall.utils import gravity_delay_ms


def _state() -> GameState:
    return GameState(SequenceSelector([Shape.T]))


def test_tick_exact_zero_forces_descent_and_resets_timer():
    state = _state()
    state.tick(720)
    assert state.piece.position == (1, 3)
    assert state.delay == 720


def test_tick_accumulates_until_zero():
    state = _state()
    state.tick(700)
    assert state.piece.position == (0, 3)
    assert state.delay == 20
    state.tick(20)
    assert state.piece.position == (1, 3)


def test_quantum_not_dividing_delay_skips_descent():
    state = _state()
    for _ in range(15):
        state.tick(50)
    # 720 is not a multiple of 50: the counter steps over zero.
    assert state.delay == -30
    assert state.piece.position == (0, 3)
    for _ in range(100):
        state.tick(50)
    assert state.piece.position == (0, 3)


def test_forced_descent_locks_blocked_piece():
    state = GameState(SequenceSelector([Shape.O, Shape.I]))
    state.board.set_cell(21, 0, Shape.J)
    for _ in range(20):
        state.soft_drop()
    assert state.piece.position == (20, 3)
    state.tick(state.delay)
    assert state.pieces == 1
    assert state.piece.shape is Shape.I


def test_timer_reset_uses_level_at_expiry():
    state = _state()
    state._score = 699
    state.hard_drop()
    assert state.level == 2
    # The running countdown is not shortened by the level change.
    assert state.delay == 720
    state.tick(720)
    assert state.delay == gravity_delay_ms(2) == 648


@pytest.mark.parametrize("quantum", [0, -50])
def test_non_positive_quantum_rejected(quantum):
    state = _state()
    with pytest.raises(ValueError):
        state.tick(quantum)
    assert state.delay == 720
