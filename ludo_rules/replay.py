import argparse
import os
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from .game import Game

EXIT = "exit"


def parse_action(text: str) -> Tuple[int, Optional[int]]:
    """Parse ``TOKEN:STEPS`` or ``TOKEN:exit`` (steps None means exit base)."""
    token, sep, arg = text.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected TOKEN:STEPS or TOKEN:exit, got '{text}'")
    try:
        token_index = int(token)
        steps = None if arg.strip().lower() == EXIT else int(arg)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Malformed action '{text}': {e}") from e
    return token_index, steps


def parse_placement(text: str) -> Tuple[int, int]:
    """Parse ``TOKEN=POSITION``."""
    token, sep, pos = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected TOKEN=POSITION, got '{text}'")
    try:
        return int(token), int(pos)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Malformed placement '{text}': {e}") from e


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Replay a scripted list of Ludo moves and print the board after each"
    )
    parser.add_argument(
        "--num-players",
        type=int,
        choices=(2, 4),
        default=int(os.getenv("LUDO_NUM_PLAYERS", 4)),
        help="Number of players in the game",
    )
    parser.add_argument(
        "--set",
        dest="placements",
        type=parse_placement,
        action="append",
        default=[],
        metavar="TOKEN=POSITION",
        help="Place a token before replaying (repeatable)",
    )
    parser.add_argument(
        "actions",
        type=parse_action,
        nargs="*",
        metavar="TOKEN:STEPS",
        help="Move TOKEN by STEPS, or TOKEN:exit to leave base",
    )
    return parser.parse_args(argv)


def replay(
    game: Game, actions: Sequence[Tuple[int, Optional[int]]]
) -> List[str]:
    """Apply actions in order; failures are reported and skipped, never raised."""
    lines: List[str] = []
    for token_index, steps in actions:
        if steps is None:
            res = game.exit_base(token_index)
            label = f"{token_index}:exit"
        else:
            res = game.move_token(token_index, steps)
            label = f"{token_index}:{steps}"
        status = "ok" if res.ok else res.error.value
        lines.append(f"{label} -> {status} | {game.render()}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    game = Game(player_count=args.num_players)
    for token_index, position in args.placements:
        res = game.set_position(token_index, position)
        if not res.ok:
            logger.warning(f"Ignoring placement {token_index}={position}: {res.error.value}")

    print(game.render())
    for line in replay(game, args.actions):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
