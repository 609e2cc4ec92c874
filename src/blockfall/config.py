"""Session configuration for the bundled drivers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .game_state import GameState
from .randomizer import UniformSelector
from .utils import DEFAULT_TICK_MS


@dataclass
class SessionConfig:
    """Knobs a driving loop needs to run a session.

    The rules themselves (board size, piece set, scoring) are fixed; only the
    piece sequence seed and the simulated clock are adjustable.
    """

    seed: Optional[int] = None
    tick_ms: int = DEFAULT_TICK_MS
    max_pieces: Optional[int] = None

    def __post_init__(self) -> None:
        if self.tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if self.max_pieces is not None and self.max_pieces < 0:
            raise ValueError("max_pieces cannot be negative")

    def new_state(self) -> GameState:
        """Return a fresh session whose piece sequence follows ``seed``."""

        return GameState(UniformSelector(self.seed))
