import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    NUM_PLAYERS: int = int(os.getenv("LUDO_NUM_PLAYERS", 4))
    SUPPORTED_PLAYER_COUNTS: tuple[int, ...] = (2, 4)
    TOKENS_PER_PLAYER: int = 4

    # --- Relative positions ---
    BASE_POSITION: int = 0  # 0=base, 1-52=track, 52-57=home stretch, 58=home
    START_POSITION: int = 1
    MAIN_TRACK_TILES: int = 52
    HOME_STRETCH_START: int = 52  # also the last main track tile
    STEPS_TO_HOME: int = 6

    # --- Dice ---
    DICE_MIN: int = 1
    DICE_MAX: int = 6
    EXIT_ROLL: int = 6

    # Absolute tiles (1..52) where nobody can be captured: every entry tile
    SAFE_SQUARES_ABS: list[int] = field(
        default_factory=lambda: [1, 14, 27, 40]
    )  # Red, Green, Yellow, Blue

    # Derived (populated in __post_init__ due to slots)
    HOME_POSITION: int = 0
    PLAYER_TRACK_OFFSET: int = 0

    def __post_init__(self):
        # Home is the last home stretch tile: 52 + 6
        self.HOME_POSITION = self.HOME_STRETCH_START + self.STEPS_TO_HOME
        # A quarter of the ring between consecutive entry tiles
        self.PLAYER_TRACK_OFFSET = self.MAIN_TRACK_TILES // 4

        if self.NUM_PLAYERS not in self.SUPPORTED_PLAYER_COUNTS:
            raise ValueError(
                f"NUM_PLAYERS must be one of {self.SUPPORTED_PLAYER_COUNTS}, got {self.NUM_PLAYERS}"
            )


config = Config()
