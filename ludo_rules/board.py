from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

from .config import config
from .coordinates import CoordinateMapper


@dataclass(slots=True, eq=False)
class Board:
    """Owns the token position buffer and the board geometry (no move rules).

    Token ``i`` belongs to player ``i // 4`` (slot ``i % 4``). Positions are
    relative to the owning player: 0 base, 1..52 main track, 52..57 home
    stretch, 58 home. Tile 52 deliberately belongs to both the main track and
    the home stretch.
    """

    player_count: int = 4
    mapper: CoordinateMapper = field(init=False, repr=False)
    _positions: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.mapper = CoordinateMapper(self.player_count)
        self._positions = np.full(
            self.player_count * config.TOKENS_PER_PLAYER,
            config.BASE_POSITION,
            dtype=np.uint8,
        )

    @classmethod
    def from_positions(cls, player_count: int, positions: Sequence[int]) -> "Board":
        board = cls(player_count=player_count)
        if len(positions) != len(board):
            raise ValueError(
                f"Expected {len(board)} positions for {player_count} players, got {len(positions)}"
            )
        for pos in positions:
            if not config.BASE_POSITION <= int(pos) <= config.HOME_POSITION:
                raise ValueError(f"Position {pos} outside 0..{config.HOME_POSITION}")
        board._positions[:] = np.asarray(positions, dtype=np.uint8)
        return board

    # --- Ownership ---
    def clone(self) -> "Board":
        """Deep copy: the clone never shares its buffer with this board."""
        other = Board(player_count=self.player_count)
        other._positions = self._positions.copy()
        return other

    def __copy__(self) -> "Board":
        return self.clone()

    def __deepcopy__(self, memo) -> "Board":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.player_count == other.player_count and bool(
            np.array_equal(self._positions, other._positions)
        )

    def __len__(self) -> int:
        return int(self._positions.shape[0])

    def snapshot(self) -> dict:
        return {
            "player_count": self.player_count,
            "positions": [int(p) for p in self._positions],
        }

    # --- Raw access ---
    def is_valid_token(self, token_index: int) -> bool:
        return 0 <= token_index < len(self)

    def is_valid_player(self, player: int) -> bool:
        return 0 <= player < self.player_count

    def position(self, token_index: int) -> int:
        return int(self._positions[token_index])

    def place(self, token_index: int, position: int) -> None:
        self._positions[token_index] = position

    @staticmethod
    def player_of(token_index: int) -> int:
        return token_index // config.TOKENS_PER_PLAYER

    def player_tokens(self, player: int) -> range:
        start = player * config.TOKENS_PER_PLAYER
        return range(start, start + config.TOKENS_PER_PLAYER)

    # --- Region predicates ---
    def is_at_base(self, token_index: int) -> bool:
        return self.position(token_index) == config.BASE_POSITION

    def is_on_main_track(self, token_index: int) -> bool:
        return (
            config.START_POSITION
            <= self.position(token_index)
            <= config.MAIN_TRACK_TILES
        )

    def is_on_home_stretch(self, token_index: int) -> bool:
        return (
            config.HOME_STRETCH_START
            <= self.position(token_index)
            < config.HOME_POSITION
        )

    def is_home(self, token_index: int) -> bool:
        return self.position(token_index) == config.HOME_POSITION

    def absolute_position(self, token_index: int) -> int | None:
        """Shared ring tile of a token, or None when it is off the main track."""
        if not self.is_on_main_track(token_index):
            return None
        return self.mapper.to_absolute(
            self.player_of(token_index), self.position(token_index)
        )

    @staticmethod
    def is_safe_square(abs_pos: int) -> bool:
        return abs_pos in config.SAFE_SQUARES_ABS

    def is_on_safe_tile(self, token_index: int) -> bool:
        if self.is_on_home_stretch(token_index):
            return True
        abs_pos = self.absolute_position(token_index)
        if abs_pos is None:
            return False
        return self.is_safe_square(abs_pos)

    # --- Occupancy / blockades ---
    def tokens_at_absolute(self, abs_pos: int) -> Iterator[int]:
        for idx in range(len(self)):
            if self.absolute_position(idx) == abs_pos:
                yield idx

    def is_tile_blocked(self, abs_pos: int) -> bool:
        """Two or more tokens of any color on a ring tile form a blockade."""
        count = 0
        for _ in self.tokens_at_absolute(abs_pos):
            count += 1
            if count >= 2:
                return True
        return False
