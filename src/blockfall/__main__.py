"""Headless ASCII demo for the rules engine.

Run with: `python -m blockfall`

A scripted player spreads pieces across the board and hard-drops them until
the session is lost (or ``--pieces`` have been placed), then prints the final
board and score.  Useful as a smoke test of the command surface.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import SessionConfig
from .game_state import GameState
from .utils import advance, render_ascii


LOGGER = logging.getLogger(__name__)

# Column shifts applied to successive pieces, relative to the spawn column.
_SHIFTS = (-3, 3, -1, 1, 0, -2, 2, 4)


def play(config: SessionConfig) -> GameState:
    """Run one scripted session and return its final state."""

    state = config.new_state()
    while not state.is_over:
        if config.max_pieces is not None and state.pieces >= config.max_pieces:
            break
        shift = _SHIFTS[state.pieces % len(_SHIFTS)]
        if state.pieces % 3 == 1:
            state.rotate_clockwise()
        for _ in range(abs(shift)):
            if shift < 0:
                state.move_left()
            else:
                state.move_right()
            advance(state, config.tick_ms)
        state.hard_drop()
    LOGGER.info(
        "Session finished: %d pieces, %d lines, score %d, level %d",
        state.pieces,
        state.lines,
        state.score,
        state.level,
    )
    return state


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument(
        "--pieces", type=int, default=None, help="Stop after this many pieces have locked."
    )
    parser.add_argument(
        "--tick-ms", type=int, default=SessionConfig.tick_ms, help="Simulated milliseconds per move."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    config = SessionConfig(seed=args.seed, tick_ms=args.tick_ms, max_pieces=args.pieces)
    state = play(config)
    print(render_ascii(state))
    print(f"Score: {state.score}  Level: {state.level}  Lines: {state.lines}")
    if state.is_over:
        print("Game over")


if __name__ == "__main__":
    main()
