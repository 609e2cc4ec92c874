"""Rules engine for a falling-block puzzle game."""

from .board import Board, HEIGHT, WIDTH
from .shapes import Rotation, Shape, occupancy, shape_blocks
from .piece import Direction, Piece, SPAWN_POSITION
from .randomizer import SequenceSelector, ShapeSelector, UniformSelector
from .game_state import GameState
from .config import SessionConfig
from .utils import advance, gravity_delay_ms, level_for_score, render_ascii, render_grid

__all__ = [
    "Board",
    "Direction",
    "GameState",
    "HEIGHT",
    "Piece",
    "Rotation",
    "SPAWN_POSITION",
    "SequenceSelector",
    "SessionConfig",
    "Shape",
    "ShapeSelector",
    "UniformSelector",
    "WIDTH",
    "advance",
    "gravity_delay_ms",
    "level_for_score",
    "occupancy",
    "render_ascii",
    "render_grid",
    "shape_blocks",
]
