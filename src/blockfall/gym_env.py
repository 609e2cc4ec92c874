"""Gymnasium-compatible wrapper around the command surface.

Each action is one player command.  After applying it the environment
advances the simulated clock by ``tick_ms`` so gravity keeps working even when
the agent only sends no-ops.

Observation is the ``(22, 10)`` grid with the active piece overlaid, each
cell holding ``0`` for empty or the shape value ``1..7``.  The reward is the
score gained during the step.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .board import HEIGHT, PIECE_VALUES, WIDTH
from .game_state import GameState
from .randomizer import UniformSelector
from .utils import DEFAULT_TICK_MS, advance, render_ascii, render_grid


class Action(IntEnum):
    NOOP = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5


class BlockfallEnv(gym.Env):
    metadata = {
        "render_modes": ["ansi"],
        "render_fps": 20,
    }

    def __init__(
        self,
        *,
        tick_ms: int = DEFAULT_TICK_MS,
        max_steps: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self.tick_ms = tick_ms
        self.render_mode = render_mode
        self.action_space = spaces.Discrete(len(Action))
        self.observation_space = spaces.Box(
            low=0, high=max(PIECE_VALUES.values()), shape=(HEIGHT, WIDTH), dtype=np.uint8
        )
        self._state: Optional[GameState] = None
        self._steps = 0
        self._max_steps = max_steps

    @property
    def state(self) -> GameState:
        if self._state is None:
            raise RuntimeError("Call reset() before using the environment")
        return self._state

    # ----------------------- Env API -----------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        # Derive the piece sequence from gymnasium's seeded generator.
        piece_seed = int(self.np_random.integers(0, 2**31 - 1))
        self._state = GameState(UniformSelector(piece_seed))
        self._steps = 0
        return render_grid(self._state), self._info()

    def step(self, action: int):
        state = self.state
        before = state.score
        command = Action(int(action))
        if command is Action.LEFT:
            state.move_left()
        elif command is Action.RIGHT:
            state.move_right()
        elif command is Action.ROTATE:
            state.rotate_clockwise()
        elif command is Action.SOFT_DROP:
            state.soft_drop()
        elif command is Action.HARD_DROP:
            state.hard_drop()
        advance(state, self.tick_ms)

        self._steps += 1
        terminated = state.is_over
        truncated = self._max_steps is not None and self._steps >= self._max_steps
        reward = float(state.score - before)
        return render_grid(state), reward, terminated, bool(truncated), self._info()

    def render(self):
        return render_ascii(self.state)

    def close(self):
        return None

    # -------------------- Helpers -------------------------
    def _info(self) -> Dict[str, int]:
        state = self.state
        return {
            "score": state.score,
            "level": state.level,
            "lines": state.lines,
            "pieces": state.pieces,
            "delay": state.delay,
        }
