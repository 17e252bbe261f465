import unittest

from cellblock.errors import (
    CellBlocked,
    CellOccupiedByOpponent,
    CellOccupiedBySelf,
    GameAlreadyFinished,
    MalformedInput,
    OutOfBounds,
    RowOutOfRange,
    UnknownColumn,
)
from cellblock.grid import CellState, PlayerId, Position
from cellblock.referee import Referee
from cellblock.state import Outcome, Phase


class RefereeTests(unittest.TestCase):
    def test_initial_state(self):
        ref = Referee(8)
        self.assertIs(ref.phase, Phase.AWAITING_PLAYER_ONE)
        self.assertIsNone(ref.position_of(PlayerId.PLAYER_ONE))
        self.assertIsNone(ref.position_of(PlayerId.PLAYER_TWO))
        self.assertEqual(ref.grid.count(CellState.EMPTY), 64)
        self.assertEqual(ref.status(), "*")

    def test_first_move_blocks_nothing(self):
        ref = Referee(8)
        rec = ref.submit("A1")
        self.assertIsNone(rec.blocked)
        self.assertEqual(ref.grid.count(CellState.BLOCKED), 0)
        self.assertIs(ref.grid.get(Position(0, 0)), CellState.PLAYER_ONE)
        self.assertIs(ref.phase, Phase.AWAITING_PLAYER_TWO)

    def test_moving_away_blocks_previous_cell(self):
        ref = Referee(8)
        ref.submit("A1")
        ref.submit("B1")
        rec = ref.submit("C1")
        self.assertEqual(rec.blocked, Position(0, 0))
        self.assertIs(ref.grid.get(Position(0, 0)), CellState.BLOCKED)
        self.assertEqual(ref.position_of(PlayerId.PLAYER_ONE), Position(0, 2))

    def test_one_occupied_cell_per_player_and_blocks_only_grow(self):
        ref = Referee(8)
        blocked_before = set()
        for n in range(20):
            player = ref.current_player
            target = ref.validator.legal_moves(ref.state)[n % 3]
            ref.apply(target)
            self.assertEqual(ref.grid.count(CellState.occupied_by(player)), 1)
            blocked_now = ref.blocked_positions()
            self.assertTrue(blocked_before <= blocked_now)
            # first move of each player blocks nothing, later ones exactly one
            self.assertEqual(len(blocked_now - blocked_before), 0 if n < 2 else 1)
            blocked_before = blocked_now

    def test_turn_alternation(self):
        ref = Referee(8)
        for n in range(1, 31):
            ref.apply(ref.validator.legal_moves(ref.state)[-1])
            expected = PlayerId.PLAYER_ONE if n % 2 == 0 else PlayerId.PLAYER_TWO
            self.assertIs(ref.current_player, expected, n)
        self.assertEqual(ref.move_count, 30)

    def test_rejections_do_not_consume_turn(self):
        ref = Referee(8)
        ref.submit("A1")
        ref.submit("B1")
        ref.submit("C1")  # player one leaves A1
        before = ref.grid.rows()
        cases = [
            ("A", MalformedInput),
            ("Z1", UnknownColumn),
            ("A9", RowOutOfRange),
            ("A1", CellBlocked),
            ("B1", CellOccupiedBySelf),
            ("C1", CellOccupiedByOpponent),
        ]
        for token, err in cases:
            with self.assertRaises(err, msg=token):
                ref.submit(token)
        with self.assertRaises(OutOfBounds):
            ref.apply(Position(9, 9))
        self.assertEqual(ref.grid.rows(), before)
        self.assertIs(ref.current_player, PlayerId.PLAYER_TWO)
        self.assertEqual(ref.move_count, 3)

    def test_two_by_two_game_ends_when_opponent_has_no_destination(self):
        ref = Referee(2)
        ref.apply(Position(0, 0))  # P1
        ref.apply(Position(1, 1))  # P2
        ref.apply(Position(0, 1))  # P1, blocks (0,0)
        self.assertIs(ref.grid.get(Position(0, 0)), CellState.BLOCKED)
        self.assertIs(ref.phase, Phase.AWAITING_PLAYER_TWO)
        ref.apply(Position(1, 0))  # P2, blocks (1,1)
        self.assertEqual(ref.grid.count(CellState.EMPTY), 0)
        self.assertEqual(ref.grid.count(CellState.BLOCKED), 2)
        self.assertIs(ref.phase, Phase.FINISHED)
        self.assertIs(ref.outcome, Outcome.PLAYER_TWO_WINS)
        self.assertEqual(ref.status(), "player_two_wins")
        # four moves applied: turn parity still points at player one
        self.assertIs(ref.current_player, PlayerId.PLAYER_ONE)

    def test_odd_board_is_won_by_player_one(self):
        ref = Referee(3)
        while ref.outcome is None:
            ref.apply(ref.validator.legal_moves(ref.state)[0])
        self.assertIs(ref.outcome, Outcome.PLAYER_ONE_WINS)
        self.assertEqual(ref.move_count, 9)
        self.assertIs(ref.current_player, PlayerId.PLAYER_TWO)

    def test_turn_parity_holds_through_the_final_move(self):
        for size in (2, 3, 4):
            ref = Referee(size)
            while ref.outcome is None:
                ref.apply(ref.validator.legal_moves(ref.state)[-1])
                expected = PlayerId.PLAYER_ONE if ref.move_count % 2 == 0 else PlayerId.PLAYER_TWO
                self.assertIs(ref.current_player, expected, (size, ref.move_count))
            self.assertEqual(ref.move_count, size * size)

    def test_single_cell_board_is_a_draw(self):
        ref = Referee(1)
        ref.submit("A1")
        self.assertIs(ref.outcome, Outcome.DRAW)

    def test_finished_game_rejects_moves_unchanged(self):
        ref = Referee(1)
        ref.submit("A1")
        snapshot = ref.state.copy()
        with self.assertRaises(GameAlreadyFinished):
            ref.submit("A1")
        with self.assertRaises(GameAlreadyFinished):
            ref.submit("garbage")
        with self.assertRaises(GameAlreadyFinished):
            ref.apply(Position(0, 0))
        self.assertEqual(ref.grid.rows(), snapshot.grid.rows())
        self.assertEqual(ref.state.moves, snapshot.moves)
        self.assertIs(ref.outcome, Outcome.DRAW)
        self.assertFalse(GameAlreadyFinished().recoverable)


if __name__ == "__main__":
    unittest.main()
