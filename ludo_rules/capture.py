from __future__ import annotations

from typing import List

from loguru import logger

from .board import Board
from .config import config
from .types import Knockout


def capture_at(board: Board, mover_index: int) -> List[Knockout]:
    """Send opponents sharing the mover's tile back to base.

    Only applies when the mover stands on the main track on an unsafe tile.
    The mover's own teammates are never touched.
    """
    if not board.is_on_main_track(mover_index) or board.is_on_safe_tile(mover_index):
        return []

    mover_player = board.player_of(mover_index)
    abs_pos = board.absolute_position(mover_index)
    knockouts: List[Knockout] = []
    for idx in list(board.tokens_at_absolute(abs_pos)):
        victim_player = board.player_of(idx)
        if victim_player == mover_player:
            continue
        knockouts.append(
            Knockout(
                token_index=idx,
                player=victim_player,
                from_position=board.position(idx),
                abs_pos=abs_pos,
            )
        )
        board.place(idx, config.BASE_POSITION)
        logger.debug(
            f"Token {mover_index} captured token {idx} (player {victim_player}) on tile {abs_pos}"
        )
    return knockouts
