import unittest

from ludo_mini.dice import ScriptedDice
from ludo_mini.events import RecordingSink
from ludo_mini.game import GameState, initialize, next_turn, step
from ludo_mini.types import Color, EventKind, Phase, RuleViolation


class TestInitialize(unittest.TestCase):
    def test_roster_and_state(self):
        state, roster = initialize()
        self.assertEqual(
            [p.color for p in roster],
            [Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE],
        )
        self.assertEqual(state.player_index, 0)
        self.assertIs(state.phase, Phase.WAITING)
        self.assertEqual(state.dice_roll, 0)
        self.assertFalse(state.is_over)
        for player in roster:
            self.assertTrue(all(p.at_home for p in player.pieces))


class TestNextTurn(unittest.TestCase):
    def test_wraps_and_resets(self):
        state, roster = initialize()
        for phase in Phase:
            state.player_index = 3
            state.phase = phase
            state.dice_roll = 5
            next_turn(state, roster)
            self.assertEqual(state.player_index, 0)
            self.assertIs(state.phase, Phase.WAITING)
            self.assertEqual(state.dice_roll, 0)

    def test_increments(self):
        state, roster = initialize()
        next_turn(state, roster)
        self.assertEqual(state.player_index, 1)


class TestStep(unittest.TestCase):
    def setUp(self):
        self.state, self.roster = initialize()
        self.sink = RecordingSink()

    def run_steps(self, dice, count):
        terminated = False
        for _ in range(count):
            _, _, terminated = step(self.state, self.roster, dice, self.sink)
        return terminated

    def test_waiting_announces_and_rolls_next(self):
        self.state.dice_roll = 4
        _, _, terminated = step(self.state, self.roster, ScriptedDice([]), self.sink)
        self.assertFalse(terminated)
        self.assertIs(self.state.phase, Phase.ROLLING)
        self.assertEqual(self.state.dice_roll, 0)
        self.assertEqual(self.sink.messages(), ["Player RED's turn"])

    def test_roll_without_move_passes_turn(self):
        dice = ScriptedDice([3, 6, 1])
        self.run_steps(dice, 2)
        self.assertEqual(self.state.player_index, 1)
        self.assertIs(self.state.phase, Phase.WAITING)
        self.assertEqual(self.state.dice_roll, 0)
        self.assertEqual(
            self.sink.kinds(),
            [EventKind.TURN_STARTED, EventKind.DICE_ROLLED, EventKind.NO_MOVES],
        )
        self.assertEqual(dice.remaining, 2)

    def test_six_enters_piece_without_extra_turn(self):
        dice = ScriptedDice([6])
        self.run_steps(dice, 2)
        self.assertIs(self.state.phase, Phase.MOVING)
        self.assertEqual(self.state.dice_roll, 6)
        self.run_steps(dice, 1)
        piece = self.roster[0].pieces[0]
        self.assertEqual((piece.position, piece.at_home, piece.at_end), (0, False, False))
        self.assertEqual(self.state.player_index, 1)
        self.assertIs(self.state.phase, Phase.WAITING)
        self.assertEqual(self.sink.kinds()[-1], EventKind.PIECE_MOVED)

    def test_roll_is_called_once_per_rolling_phase(self):
        dice = ScriptedDice([1, 1, 1, 1])
        self.run_steps(dice, 8)
        self.assertEqual(dice.remaining, 0)
        self.assertEqual(self.state.player_index, 0)
        turns = [e.color for e in self.sink.events if e.kind is EventKind.TURN_STARTED]
        self.assertEqual(turns, [Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE])

    def test_last_piece_finishing_wins(self):
        red = self.roster[0]
        for piece in red.pieces[:3]:
            piece.position, piece.at_home, piece.at_end = 0, False, True
        last = red.pieces[3]
        last.position, last.at_home = 7, False

        dice = ScriptedDice([3])
        self.assertFalse(self.run_steps(dice, 2))
        _, _, terminated = step(self.state, self.roster, dice, self.sink)
        self.assertTrue(terminated)
        self.assertEqual(last.position, 0)
        self.assertTrue(last.at_end)
        self.assertIs(self.state.winner, Color.RED)
        self.assertEqual(self.state.player_index, 0)
        self.assertEqual(
            self.sink.kinds()[-3:],
            [EventKind.PIECE_FINISHED, EventKind.PIECE_MOVED, EventKind.PLAYER_WON],
        )
        self.assertEqual(self.sink.messages()[-1], "Player RED wins!")
        with self.assertRaises(RuleViolation):
            step(self.state, self.roster, dice, self.sink)

    def test_finishing_a_piece_without_winning_advances(self):
        red = self.roster[0]
        red.pieces[0].position, red.pieces[0].at_home = 4, False
        self.run_steps(ScriptedDice([6]), 3)
        self.assertTrue(red.pieces[0].at_end)
        self.assertFalse(self.state.is_over)
        self.assertEqual(self.state.player_index, 1)

    def test_moving_without_eligible_piece_still_advances(self):
        self.state.phase = Phase.MOVING
        self.state.dice_roll = 3
        _, _, terminated = step(self.state, self.roster, ScriptedDice([]), self.sink)
        self.assertFalse(terminated)
        self.assertEqual(self.state.player_index, 1)
        self.assertIs(self.state.phase, Phase.WAITING)
        self.assertEqual(self.sink.events, [])

    def test_sink_is_optional(self):
        dice = ScriptedDice([6])
        for _ in range(3):
            step(self.state, self.roster, dice)
        self.assertEqual(self.roster[0].pieces[0].position, 0)

    def test_bad_roll_from_dice(self):
        self.state.phase = Phase.ROLLING
        with self.assertRaises(RuleViolation):
            step(self.state, self.roster, ScriptedDice([7]), self.sink)

    def test_bad_player_index(self):
        bad = GameState(player_index=4)
        with self.assertRaises(RuleViolation):
            step(bad, self.roster, ScriptedDice([]), self.sink)

    def test_roster_size_is_fixed(self):
        with self.assertRaises(RuleViolation):
            step(self.state, self.roster[:3], ScriptedDice([]), self.sink)

    def test_state_to_dict(self):
        self.assertEqual(
            self.state.to_dict(),
            {"player_index": 0, "phase": "waiting", "dice_roll": 0, "winner": None},
        )


if __name__ == "__main__":
    unittest.main()
