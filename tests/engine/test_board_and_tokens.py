from __future__ import annotations

import copy
import unittest

from ludo_rules.board import Board
from ludo_rules.config import Config, config
from ludo_rules.errors import LudoError, LudoRuleError
from ludo_rules.game import Game
from ludo_rules.types import Result


class TestBoardAndTokens(unittest.TestCase):
    def setUp(self) -> None:
        self.game = Game(player_count=4)
        self.board: Board = self.game.board

    def test_initial_tokens_at_base(self) -> None:
        for player_count in (2, 4):
            game = Game(player_count=player_count)
            self.assertEqual(len(game.board), player_count * 4)
            for idx in range(len(game.board)):
                self.assertEqual(game.get_position(idx).value, 0)
                self.assertTrue(game.board.is_at_base(idx))

    def test_default_player_count_from_config(self) -> None:
        self.assertEqual(len(Game().board), config.NUM_PLAYERS * 4)

    def test_derived_constants(self) -> None:
        self.assertEqual(config.HOME_POSITION, 58)
        self.assertEqual(config.PLAYER_TRACK_OFFSET, 13)

    def test_unsupported_player_count_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Board(player_count=3)
        with self.assertRaises(ValueError):
            Config(NUM_PLAYERS=3)

    def test_set_then_get_round_trip(self) -> None:
        for pos in (0, 1, 26, 52, 57, 58):
            self.assertTrue(self.game.set_position(5, pos).ok)
            self.assertEqual(self.game.get_position(5).value, pos)

    def test_invalid_token_index_fails_both_ways(self) -> None:
        for idx in (-1, len(self.board)):
            got = self.game.get_position(idx)
            put = self.game.set_position(idx, 1)
            self.assertEqual(got.error, LudoError.INVALID_TOKEN_INDEX)
            self.assertEqual(put.error, LudoError.INVALID_TOKEN_INDEX)
            self.assertIsNone(got.value)

    def test_set_position_out_of_range(self) -> None:
        for pos in (-1, 59):
            res = self.game.set_position(0, pos)
            self.assertEqual(res.error, LudoError.INVALID_POSITION)
        self.assertEqual(self.game.get_position(0).value, 0)

    def test_tile_52_is_main_track_and_home_stretch(self) -> None:
        self.game.set_position(0, 52)
        self.assertTrue(self.board.is_on_main_track(0))
        self.assertTrue(self.board.is_on_home_stretch(0))
        self.assertTrue(self.board.is_on_safe_tile(0))
        self.assertEqual(self.board.absolute_position(0), 52)

    def test_region_predicates(self) -> None:
        self.game.set_position(0, 51)
        self.assertTrue(self.board.is_on_main_track(0))
        self.assertFalse(self.board.is_on_home_stretch(0))
        self.game.set_position(0, 58)
        self.assertTrue(self.board.is_home(0))
        self.assertFalse(self.board.is_on_home_stretch(0))
        self.assertFalse(self.board.is_on_main_track(0))
        self.assertIsNone(self.board.absolute_position(0))

    def test_absolute_position_is_derived_after_direct_set(self) -> None:
        # player 1, relative 1 -> absolute 14
        self.game.set_position(4, 1)
        self.assertEqual(self.board.absolute_position(4), 14)
        self.game.set_position(4, 2)
        self.assertEqual(self.board.absolute_position(4), 15)

    def test_clone_does_not_alias(self) -> None:
        self.game.set_position(0, 10)
        other = self.game.clone()
        other.set_position(0, 20)
        self.assertEqual(self.game.get_position(0).value, 10)
        self.assertEqual(other.get_position(0).value, 20)

        shallow = copy.copy(self.board)
        shallow.place(1, 30)
        self.assertEqual(self.board.position(1), 0)
        deep = copy.deepcopy(self.board)
        self.assertEqual(deep, self.board)
        self.assertIsNot(deep, self.board)

    def test_snapshot_and_from_positions(self) -> None:
        self.game.set_position(3, 44)
        snap = self.board.snapshot()
        self.assertEqual(snap["player_count"], 4)
        self.assertEqual(snap["positions"][3], 44)
        rebuilt = Board.from_positions(snap["player_count"], snap["positions"])
        self.assertEqual(rebuilt, self.board)

    def test_home_entry_tile(self) -> None:
        self.assertEqual(self.game.home_entry_tile(0).value, 52)
        self.assertEqual(self.game.home_entry_tile(3).value, 39)
        self.assertEqual(
            self.game.home_entry_tile(4).error, LudoError.INVALID_PLAYER_INDEX
        )

    def test_from_positions_validation(self) -> None:
        with self.assertRaises(ValueError):
            Board.from_positions(2, [0] * 7)
        with self.assertRaises(ValueError):
            Board.from_positions(2, [0] * 7 + [59])


class TestResult(unittest.TestCase):
    def test_success_and_failure(self) -> None:
        ok = Result.success(3)
        self.assertTrue(ok.ok)
        self.assertEqual(ok.unwrap(), 3)
        bad = Result.failure(LudoError.PATH_BLOCKED)
        self.assertFalse(bad.ok)
        with self.assertRaises(LudoRuleError) as ctx:
            bad.unwrap()
        self.assertEqual(ctx.exception.error, LudoError.PATH_BLOCKED)

    def test_value_and_error_are_exclusive(self) -> None:
        with self.assertRaises(ValueError):
            Result(value=1, error=LudoError.PATH_BLOCKED)

    def test_payloadless_success(self) -> None:
        res = Result.success()
        self.assertTrue(res.ok)
        self.assertIsNone(res.unwrap())


if __name__ == "__main__":
    unittest.main()
