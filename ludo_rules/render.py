from __future__ import annotations

from .board import Board
from .config import config


def describe_token(board: Board, token_index: int) -> str:
    """One cell of the debug line.

    ``B`` base, ``H`` home, ``S<n>`` n-th home stretch tile, otherwise
    ``<relative>@<absolute>``; a trailing ``*`` marks a safe tile.
    """
    if board.is_at_base(token_index):
        return "B"
    if board.is_home(token_index):
        return "H"
    safe = "*" if board.is_on_safe_tile(token_index) else ""
    if board.is_on_home_stretch(token_index):
        step = board.position(token_index) - config.HOME_STRETCH_START + 1
        return f"S{step}{safe}"
    return f"{board.position(token_index)}@{board.absolute_position(token_index)}{safe}"


def render_board(board: Board) -> str:
    """Human readable summary, e.g. ``P2 | p0:B,1@1*,B,H || p1:S3*,B,B,B``."""
    players = []
    for player in range(board.player_count):
        cells = ",".join(describe_token(board, idx) for idx in board.player_tokens(player))
        players.append(f"p{player}:{cells}")
    return f"P{board.player_count} | " + " || ".join(players)
