"""
Property checks over complete random games.
"""

import random
import unittest

from engine.game import BlokusGame
from tests.utils_game_states import available_piece_cells, play_random_game


class TestRandomPlay(unittest.TestCase):

    def test_score_matches_unplaced_pieces_after_every_action(self):
        game = BlokusGame({"rows": 10, "cols": 10})
        rng = random.Random(5)
        state = game.new_initial_state()
        while not state.is_terminal():
            state.apply_action(rng.choice(state.legal_actions()))
            for player in range(4):
                progress = state.player_progress(player)
                self.assertEqual(progress.score, available_piece_cells(state, player))
                self.assertEqual(progress.remaining, len(progress.available_pieces()))

    def test_board_cells_match_placed_pieces(self):
        game = BlokusGame({"rows": 12, "cols": 12})
        state = play_random_game(game, seed=3)
        for player in range(4):
            placed = game.total_cells - state.player_progress(player).score
            self.assertEqual(state.board.count_cells(player), placed)

    def test_returns_at_terminal(self):
        for seed in range(5):
            game = BlokusGame({"rows": 9, "cols": 9})
            state = play_random_game(game, seed=seed)
            self.assertTrue(state.is_terminal())
            returns = state.returns()
            self.assertEqual(sum(returns), game.utility_sum())
            result = state.get_game_result()
            if result.is_tie:
                self.assertEqual(returns, [0.0] * 4)
            else:
                self.assertEqual(returns[result.winner], 1.0)
                self.assertEqual(returns.count(-1.0), 3)

    def test_full_board_game(self):
        game = BlokusGame()
        state = play_random_game(game, seed=2024)
        self.assertTrue(state.is_terminal())
        self.assertEqual(state.num_done(), 4)
        for player in range(4):
            self.assertTrue(state.player_progress(player).done)
            self.assertFalse(state.player_progress(player).first_move)


if __name__ == "__main__":
    unittest.main()
