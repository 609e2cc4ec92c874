"""Utility helpers for the rules engine and its drivers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

import numpy as np

from .board import EMPTY, HEIGHT, PIECE_VALUES, WIDTH, Grid

if TYPE_CHECKING:
    from .game_state import GameState


BASE_DELAY_MS = 800
DELAY_DECAY = 0.9
POINTS_PER_LEVEL = 700
# Milliseconds per clock tick used by the bundled drivers.
DEFAULT_TICK_MS = 50

# Bonus indexed by the number of rows eliminated in a single lock.  Locking
# without clearing anything still scores a point.
LINE_CLEAR_POINTS: Dict[int, int] = {0: 1, 1: 40, 2: 100, 3: 300, 4: 1200}


def gravity_delay_ms(level: int) -> int:
    """Return the forced-descent delay in milliseconds for ``level``.

    The delay shrinks geometrically as the level rises, speeding up the
    falling pieces.
    """

    return int(round(BASE_DELAY_MS * DELAY_DECAY ** level))


def level_for_score(score: int) -> int:
    return 1 + score // POINTS_PER_LEVEL


def line_clear_points(cleared: int) -> int:
    """Return the bonus for eliminating ``cleared`` rows in one lock.

    Counts above four (only possible when full rows linger in the spawn
    buffer) score as a four-row clear.
    """

    if cleared < 0:
        raise ValueError("Cleared row count cannot be negative")
    return LINE_CLEAR_POINTS[min(cleared, max(LINE_CLEAR_POINTS))]


def advance(state: "GameState", elapsed_ms: int) -> None:
    """Feed ``elapsed_ms`` of simulated time into ``state.tick``.

    ``GameState.tick`` only forces a descent when the delay lands exactly on
    zero.  This helper slices the elapsed time so that no single quantum
    overshoots the pending delay, which makes every timer expiry observable
    regardless of the frame length used by the driver.
    """

    remaining = elapsed_ms
    while remaining > 0 and not state.is_over:
        step = min(remaining, state.delay) if state.delay > 0 else remaining
        state.tick(step)
        remaining -= step


def render_grid(state: "GameState") -> Grid:
    """Return a copy of the grid with the active piece overlaid.

    Renderers get a single array to draw without the piece ever being
    written into the session's grid before it locks.
    """

    grid = np.zeros((HEIGHT, WIDTH), dtype=np.uint8)
    for row in range(HEIGHT):
        for col in range(WIDTH):
            shape = state.cell_at(row, col)
            grid[row, col] = PIECE_VALUES[shape] if shape else EMPTY
    return grid


def render_ascii(state: "GameState") -> str:
    """Return the board as text, one letter per occupied cell."""

    lines = []
    for row in range(HEIGHT):
        cells = (state.cell_at(row, col) for col in range(WIDTH))
        lines.append("".join(shape.value if shape else "." for shape in cells))
    return "\n".join(lines)
