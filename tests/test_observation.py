"""
Tests for observation tensors and strings.
"""

import unittest

import numpy as np

from engine.game import BlokusGame
from tests.utils_game_states import first_move_action


class TestObservation(unittest.TestCase):

    def setUp(self):
        self.game = BlokusGame()
        self.state = self.game.new_initial_state()

    def test_initial_tensor_is_empty(self):
        tensor = self.state.observation_tensor(0)
        self.assertEqual(tensor.dtype, np.float32)
        self.assertEqual(tensor.shape, (self.game.observation_tensor_size(),))
        self.assertFalse(tensor.any())

    def test_tensor_marks_player_cells(self):
        self.state.apply_action(first_move_action(self.game, "i1", [(19, 19)]))
        self.state.apply_action(first_move_action(self.game, "i2", [(18, 0), (19, 0)]))

        tensor = self.state.observation_tensor(2).reshape(self.game.observation_tensor_shape())
        self.assertEqual(tensor[19, 19], 1.0)
        self.assertEqual(tensor[18, 0], 2.0)
        self.assertEqual(tensor[19, 0], 2.0)
        self.assertEqual(np.count_nonzero(tensor), 3)

    def test_same_observation_for_every_player(self):
        self.state.apply_action(self.state.legal_actions()[3])
        tensors = [self.state.observation_tensor(p) for p in range(4)]
        strings = [self.state.observation_string(p) for p in range(4)]
        for tensor in tensors[1:]:
            np.testing.assert_array_equal(tensor, tensors[0])
        self.assertEqual(len(set(strings)), 1)

    def test_tensor_is_a_copy(self):
        tensor = self.state.observation_tensor(0)
        tensor[:] = 7
        self.assertFalse(self.state.observation_tensor(0).any())

    def test_observation_string(self):
        self.state.apply_action(first_move_action(self.game, "i1", [(19, 19)]))
        lines = self.state.observation_string(0).split("\n")
        self.assertEqual(len(lines), 20)
        self.assertEqual(lines[0], "." * 20)
        self.assertEqual(lines[19], "." * 19 + "1")
        self.assertEqual(str(self.state), self.state.observation_string(1))

    def test_small_board(self):
        game = BlokusGame({"rows": 3, "cols": 4})
        state = game.new_initial_state()
        state.apply_action(first_move_action(game, "i1", [(2, 3)]))
        state.apply_action(first_move_action(game, "i1", [(2, 0)]))
        self.assertEqual(state.to_string(), "....\n....\n2..1")


if __name__ == "__main__":
    unittest.main()
