"""
Tests for GameResult and the lowest-score-wins outcome rule.
"""

import unittest

from engine.game import BlokusGame, GameResult, compute_game_result


class TestGameResult(unittest.TestCase):
    """Test the GameResult dataclass and compute_game_result()."""

    def test_game_result_dataclass(self):
        result = GameResult(scores={0: 10, 1: 15, 2: 8, 3: 12}, winner_ids=[2], is_tie=False)
        self.assertEqual(result.winner, 2)

    def test_sole_minimum_wins(self):
        result = compute_game_result([10, 15, 8, 12])
        self.assertEqual(result.scores, {0: 10, 1: 15, 2: 8, 3: 12})
        self.assertEqual(result.winner_ids, [2])
        self.assertFalse(result.is_tie)
        self.assertEqual(result.winner, 2)

    def test_two_way_tie_is_draw(self):
        result = compute_game_result([30, 12, 40, 12])
        self.assertEqual(result.winner_ids, [1, 3])
        self.assertTrue(result.is_tie)
        self.assertIsNone(result.winner)

    def test_tie_above_minimum_does_not_matter(self):
        result = compute_game_result([20, 20, 5, 30])
        self.assertFalse(result.is_tie)
        self.assertEqual(result.winner, 2)

    def test_four_way_tie(self):
        result = compute_game_result([89, 89, 89, 89])
        self.assertEqual(result.winner_ids, [0, 1, 2, 3])
        self.assertTrue(result.is_tie)

    def test_state_result_during_play(self):
        state = BlokusGame().new_initial_state()
        state.apply_action(state.legal_actions()[0])
        result = state.get_game_result()
        self.assertEqual(result.scores[0], 88)
        self.assertEqual(result.winner_ids, [0])
        self.assertIsNone(state.outcome())
        self.assertEqual(state.returns(), [0.0, 0.0, 0.0, 0.0])


if __name__ == "__main__":
    unittest.main()
