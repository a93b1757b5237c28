"""
Ludo rules core.
Move legality, blockades, captures and victory over a shared 52 tile ring.
"""

from .board import Board
from .capture import capture_at
from .config import config
from .coordinates import CoordinateMapper
from .errors import LudoError, LudoRuleError
from .game import Game
from .moves import resolve_move
from .render import render_board
from .types import Color, Knockout, MoveResult, Result

__all__ = [
    "Board",
    "Color",
    "config",
    "CoordinateMapper",
    "Game",
    "Knockout",
    "LudoError",
    "LudoRuleError",
    "MoveResult",
    "Result",
    "capture_at",
    "render_board",
    "resolve_move",
]
