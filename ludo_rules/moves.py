from __future__ import annotations

from .board import Board
from .config import config
from .errors import LudoError
from .types import Result


def _path_blocked(board: Board, player: int, current: int, steps: int) -> bool:
    """Check every ring tile crossed from ``current`` (exclusive), up to tile 52."""
    steps_on_track = min(steps, config.MAIN_TRACK_TILES - current)
    for i in range(1, steps_on_track + 1):
        abs_pos = board.mapper.to_absolute(player, current + i)
        if board.is_tile_blocked(abs_pos):
            return True
    return False


def resolve_move(board: Board, token_index: int, steps: int) -> Result[int]:
    """Compute where a token would land after ``steps``, without moving it.

    The caller validates the token index and the step count. Failure reasons
    are reported in priority order: already home, base exit rules, blockade on
    the path, overshooting home.
    """
    current = board.position(token_index)
    player = board.player_of(token_index)

    if board.is_home(token_index):
        return Result.failure(LudoError.TOKEN_ALREADY_HOME)

    if board.is_at_base(token_index):
        if steps != config.EXIT_ROLL:
            return Result.failure(LudoError.TOKEN_NOT_MOVABLE)
        if board.is_tile_blocked(board.mapper.entry_tile(player)):
            return Result.failure(LudoError.PATH_BLOCKED)
        return Result.success(config.START_POSITION)

    # Tile 52 is the first home stretch tile as well as the last ring tile; a
    # token standing on it only moves up the stretch.
    if config.START_POSITION <= current < config.HOME_STRETCH_START:
        if _path_blocked(board, player, current, steps):
            return Result.failure(LudoError.PATH_BLOCKED)
        relative_target = current + steps
        if relative_target <= config.MAIN_TRACK_TILES:
            return Result.success(relative_target)
        # First step past the ring lands on 52, the stretch entry
        steps_into_home = relative_target - config.MAIN_TRACK_TILES
        target = config.HOME_STRETCH_START + steps_into_home - 1
        if target > config.HOME_POSITION:
            return Result.failure(LudoError.WOULD_OVERSHOOT_HOME)
        return Result.success(target)

    if board.is_on_home_stretch(token_index):
        target = current + steps
        if target > config.HOME_POSITION:
            return Result.failure(LudoError.WOULD_OVERSHOOT_HOME)
        return Result.success(target)

    return Result.failure(LudoError.TOKEN_NOT_MOVABLE)
