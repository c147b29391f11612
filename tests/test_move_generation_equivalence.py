"""
Tests to verify that frontier-pruned move generation produces the same
results as the naive scan over every available piece's placements.
"""

import random
import unittest

from engine.game import BlokusGame
from tests.utils_game_states import generate_random_state


class TestMoveGenerationEquivalence(unittest.TestCase):
    """Compare the two generators on the same states."""

    def assert_generators_agree(self, state):
        if state.is_terminal():
            return
        player = state.current_player()
        if state.player_progress(player).done:
            return
        naive = state._legal_actions_naive(player)
        frontier = state._legal_actions_frontier(player)
        self.assertEqual(naive, frontier, f"Mismatch after {state.history_str()}")
        self.assertEqual(naive, sorted(naive))

    def test_initial_state(self):
        state = BlokusGame().new_initial_state()
        self.assertEqual(state._legal_actions_naive(0), state._legal_actions_frontier(0))

    def test_small_board_random_states(self):
        game = BlokusGame({"rows": 8, "cols": 8})
        for seed in range(10):
            rng = random.Random(seed)
            state = game.new_initial_state()
            while not state.is_terminal():
                self.assert_generators_agree(state)
                state.apply_action(rng.choice(state.legal_actions()))

    def test_full_board_midgame(self):
        game = BlokusGame()
        for seed, num_actions in ((1, 12), (2, 30), (3, 50)):
            state = generate_random_state(game, num_actions, seed=seed)
            self.assert_generators_agree(state)

    def test_configured_generators_play_identical_games(self):
        frontier_game = BlokusGame({"rows": 10, "cols": 10, "use_frontier_movegen": True})
        naive_game = BlokusGame({"rows": 10, "cols": 10, "use_frontier_movegen": False})
        self.assertIs(frontier_game.catalog, naive_game.catalog)

        rng = random.Random(11)
        frontier_state = frontier_game.new_initial_state()
        naive_state = naive_game.new_initial_state()
        while not frontier_state.is_terminal():
            legal = frontier_state.legal_actions()
            self.assertEqual(legal, naive_state.legal_actions())
            action = rng.choice(legal)
            frontier_state.apply_action(action)
            naive_state.apply_action(action)
        self.assertTrue(naive_state.is_terminal())
        self.assertEqual(frontier_state.returns(), naive_state.returns())


if __name__ == "__main__":
    unittest.main()
