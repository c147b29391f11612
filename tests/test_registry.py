"""
Tests for the explicit game registry.
"""

import unittest

import pytest

from engine.game import BLOKUS_GAME_TYPE, BlokusGame, register_blokus
from spiel.errors import GameConfigurationError
from spiel.game_type import Dynamics, Information, Utility
from spiel.registry import GameRegistry, build_default_registry


class TestGameRegistry(unittest.TestCase):

    def setUp(self):
        self.registry = build_default_registry()

    def test_default_registry_has_blokus(self):
        self.assertEqual(self.registry.registered_names(), ["blokus"])
        self.assertTrue(self.registry.is_registered("blokus"))
        self.assertFalse(self.registry.is_registered("go"))

    def test_game_type(self):
        game_type = self.registry.game_type("blokus")
        self.assertIs(game_type, BLOKUS_GAME_TYPE)
        self.assertEqual(game_type.dynamics, Dynamics.SEQUENTIAL)
        self.assertEqual(game_type.information, Information.PERFECT_INFORMATION)
        self.assertEqual(game_type.utility, Utility.ZERO_SUM)
        self.assertEqual(game_type.max_num_players, 4)
        self.assertEqual(
            game_type.parameter_specification,
            {"rows": 20, "cols": 20, "use_frontier_movegen": True},
        )

    def test_load_game(self):
        game = self.registry.load_game("blokus")
        self.assertIsInstance(game, BlokusGame)
        self.assertEqual(game.observation_tensor_shape(), [20, 20])

        small = self.registry.load_game("blokus", rows=6, cols=11, use_frontier_movegen=False)
        self.assertEqual(small.observation_tensor_shape(), [6, 11])
        self.assertFalse(small.config.use_frontier_movegen)

    def test_unknown_game(self):
        with pytest.raises(GameConfigurationError):
            self.registry.load_game("go")

    def test_unknown_parameter(self):
        with pytest.raises(GameConfigurationError):
            self.registry.load_game("blokus", players=2)

    def test_invalid_parameter_value(self):
        with pytest.raises(GameConfigurationError):
            self.registry.load_game("blokus", rows=1)
        with pytest.raises(GameConfigurationError):
            self.registry.load_game("blokus", cols=51)

    def test_duplicate_registration(self):
        with pytest.raises(GameConfigurationError):
            register_blokus(self.registry)

    def test_registries_are_independent(self):
        empty = GameRegistry()
        self.assertEqual(empty.registered_names(), [])
        register_blokus(empty)
        self.assertTrue(empty.is_registered("blokus"))


if __name__ == "__main__":
    unittest.main()
