from enum import Enum


class LudoError(str, Enum):
    """Reasons a rules operation can be refused.

    None of these is a program fault: most of them are ordinary outcomes of a
    turn (a roll that cannot bring a token out of base, a blockade ahead, ...).
    """

    INVALID_TOKEN_INDEX = "invalid_token_index"
    INVALID_PLAYER_INDEX = "invalid_player_index"
    INVALID_DICE_ROLL = "invalid_dice_roll"
    INVALID_POSITION = "invalid_position"
    TOKEN_NOT_MOVABLE = "token_not_movable"
    TOKEN_ALREADY_HOME = "token_already_home"
    TOKEN_NOT_AT_BASE = "token_not_at_base"
    PATH_BLOCKED = "path_blocked"
    WOULD_OVERSHOOT_HOME = "would_overshoot_home"


class LudoRuleError(Exception):
    """Raised when a failed result is unwrapped."""

    def __init__(self, error: LudoError):
        super().__init__(f"Ludo rule violation: {error.value}")
        self.error = error
