from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from loguru import logger

from .board import Board
from .capture import capture_at
from .config import config
from .errors import LudoError
from .moves import resolve_move
from .render import render_board
from .types import MoveResult, Result


@dataclass(slots=True)
class Game:
    """Rules facade over a single board.

    Every operation returns a ``Result``; a failed operation leaves the board
    untouched. Not thread safe: callers serialize moves on one instance.
    """

    player_count: int = field(default_factory=lambda: config.NUM_PLAYERS)
    board: Board = field(init=False)

    def __post_init__(self) -> None:
        self.board = Board(player_count=self.player_count)

    @classmethod
    def from_board(cls, board: Board) -> "Game":
        game = cls(player_count=board.player_count)
        game.board = board.clone()
        return game

    def clone(self) -> "Game":
        return Game.from_board(self.board)

    # --- Position access ---
    def get_position(self, token_index: int) -> Result[int]:
        if not self.board.is_valid_token(token_index):
            return Result.failure(LudoError.INVALID_TOKEN_INDEX)
        return Result.success(self.board.position(token_index))

    def set_position(self, token_index: int, position: int) -> Result[None]:
        """Place a token directly (tests and debugging). Captures are not applied."""
        if not self.board.is_valid_token(token_index):
            return Result.failure(LudoError.INVALID_TOKEN_INDEX)
        if not config.BASE_POSITION <= position <= config.HOME_POSITION:
            return Result.failure(LudoError.INVALID_POSITION)
        self.board.place(token_index, position)
        return Result.success()

    # --- Queries ---
    def _all_home(self, player: int) -> bool:
        return all(self.board.is_home(idx) for idx in self.board.player_tokens(player))

    def has_won(self, player: int) -> Result[bool]:
        if not self.board.is_valid_player(player):
            return Result.failure(LudoError.INVALID_PLAYER_INDEX)
        return Result.success(self._all_home(player))

    def movable_tokens(self, player: int, dice: int) -> Result[List[int]]:
        if not self.board.is_valid_player(player):
            return Result.failure(LudoError.INVALID_PLAYER_INDEX)
        if not config.DICE_MIN <= dice <= config.DICE_MAX:
            return Result.failure(LudoError.INVALID_DICE_ROLL)
        movable = [
            idx
            for idx in self.board.player_tokens(player)
            if resolve_move(self.board, idx, dice).ok
        ]
        return Result.success(movable)

    def home_entry_tile(self, player: int) -> Result[int]:
        if not self.board.is_valid_player(player):
            return Result.failure(LudoError.INVALID_PLAYER_INDEX)
        return Result.success(self.board.mapper.home_entry_tile(player))

    # --- Mutations ---
    def exit_base(self, token_index: int) -> Result[None]:
        """Bring a token onto its entry tile, without consuming a roll."""
        if not self.board.is_valid_token(token_index):
            return Result.failure(LudoError.INVALID_TOKEN_INDEX)
        if not self.board.is_at_base(token_index):
            return Result.failure(LudoError.TOKEN_NOT_AT_BASE)
        player = self.board.player_of(token_index)
        if self.board.is_tile_blocked(self.board.mapper.entry_tile(player)):
            logger.debug(f"Token {token_index} cannot leave base: entry tile blocked")
            return Result.failure(LudoError.PATH_BLOCKED)
        self.board.place(token_index, config.START_POSITION)
        logger.debug(f"Token {token_index} left base")
        return Result.success()

    def apply_move(self, token_index: int, steps: int) -> Result[MoveResult]:
        """Move a token forward, then resolve captures and victory."""
        if not self.board.is_valid_token(token_index):
            return Result.failure(LudoError.INVALID_TOKEN_INDEX)
        if steps <= 0:
            return Result.failure(LudoError.INVALID_DICE_ROLL)
        if self.board.is_home(token_index):
            return Result.failure(LudoError.TOKEN_ALREADY_HOME)

        resolved = resolve_move(self.board, token_index, steps)
        if not resolved.ok:
            logger.debug(
                f"Move of token {token_index} by {steps} rejected: {resolved.error.value}"
            )
            return Result.failure(resolved.error)

        old = self.board.position(token_index)
        target = resolved.value
        self.board.place(token_index, target)
        result = MoveResult(
            token_index=token_index,
            old_position=old,
            new_position=target,
            exited_base=old == config.BASE_POSITION,
            finished=target == config.HOME_POSITION,
        )
        logger.debug(f"Token {token_index} moved {old} -> {target}")

        # Safe tiles and the home stretch are filtered inside capture_at
        result.knockouts = capture_at(self.board, token_index)

        player = self.board.player_of(token_index)
        if result.finished and self._all_home(player):
            result.won = True
            logger.info(f"Player {player} has brought every token home")
        return Result.success(result)

    def move_token(self, token_index: int, steps: int) -> Result[int]:
        outcome = self.apply_move(token_index, steps)
        if not outcome.ok:
            return Result.failure(outcome.error)
        return Result.success(outcome.value.new_position)

    def render(self) -> str:
        return render_board(self.board)

    def __str__(self) -> str:
        return self.render()
