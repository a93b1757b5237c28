from __future__ import annotations

from dataclasses import dataclass

from .config import config


@dataclass(frozen=True, slots=True)
class CoordinateMapper:
    """Maps a player's relative main track tiles onto the shared ring.

    Both frames number the ring 1..52. Player 0 enters at absolute 1; with four
    players the entries are a quarter ring apart, with two players they sit on
    opposite sides of the board.
    """

    player_count: int

    def __post_init__(self) -> None:
        if self.player_count not in config.SUPPORTED_PLAYER_COUNTS:
            raise ValueError(
                f"player_count must be one of {config.SUPPORTED_PLAYER_COUNTS}, got {self.player_count}"
            )

    def player_offset(self, player: int) -> int:
        if self.player_count == 2:
            return player * 2 * config.PLAYER_TRACK_OFFSET
        return player * config.PLAYER_TRACK_OFFSET

    def to_absolute(self, player: int, relative_pos: int) -> int:
        """Map a relative tile (1..52) to the absolute tile (1..52)."""
        if not config.START_POSITION <= relative_pos <= config.MAIN_TRACK_TILES:
            raise ValueError(f"relative position {relative_pos} is not on the main track")
        offset = self.player_offset(player)
        return (relative_pos - 1 + offset) % config.MAIN_TRACK_TILES + 1

    def to_relative(self, player: int, abs_pos: int) -> int:
        """Inverse of ``to_absolute`` for the same player."""
        if not 1 <= abs_pos <= config.MAIN_TRACK_TILES:
            raise ValueError(f"absolute position {abs_pos} is not on the main track")
        offset = self.player_offset(player)
        return (abs_pos - 1 - offset) % config.MAIN_TRACK_TILES + 1

    def entry_tile(self, player: int) -> int:
        return self.to_absolute(player, config.START_POSITION)

    def home_entry_tile(self, player: int) -> int:
        """Absolute tile a player's tokens cross last before the home stretch."""
        offset = self.player_offset(player)
        if offset == 0:
            return config.MAIN_TRACK_TILES
        return offset
