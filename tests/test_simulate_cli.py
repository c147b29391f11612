"""
Smoke test for the random self-play CLI.
"""

import logging
import tempfile
import unittest
from pathlib import Path

from schemas.game_record import GameRecord
from scripts.simulate import main
from spiel.registry import build_default_registry
from spiel.serialization import deserialize_game_and_state


class TestSimulateCli(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = Path(self.temp_dir.name)

    def tearDown(self):
        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        self.temp_dir.cleanup()

    def test_plays_games_and_writes_record(self):
        record_path = self.dir / "records" / "last.json"
        results = main([
            "--games", "2", "--seed", "3", "--rows", "8", "--cols", "8",
            "--log-level", "WARNING", "--log-dir", str(self.dir / "logs"),
            "--record-out", str(record_path),
        ])

        self.assertEqual(len(results), 2)
        for result in results:
            self.assertTrue(result["state"].is_terminal())
            self.assertEqual(sum(result["returns"]), 0.0)
            self.assertGreater(result["num_actions"], 0)

        self.assertTrue((self.dir / "logs" / "simulate.log").exists())
        record = GameRecord.model_validate_json(record_path.read_text())
        self.assertEqual(record.game, "blokus")
        self.assertEqual(record.parameters["rows"], 8)
        self.assertEqual(record.returns, results[-1]["returns"])

        _, state = deserialize_game_and_state(record_path.read_text(), build_default_registry())
        self.assertEqual(state.returns(), results[-1]["returns"])

    def test_config_file_and_naive_movegen(self):
        config_path = self.dir / "game.yaml"
        config_path.write_text("rows: 6\ncols: 7\n")
        results = main(["--config", str(config_path), "--naive-movegen", "--seed", "1", "--log-level", "ERROR"])
        game = results[0]["state"].get_game()
        self.assertEqual(game.get_parameters(), {"rows": 6, "cols": 7, "use_frontier_movegen": False})

    def test_seed_is_reproducible(self):
        first = main(["--seed", "42", "--rows", "7", "--cols", "7", "--log-level", "ERROR"])
        second = main(["--seed", "42", "--rows", "7", "--cols", "7", "--log-level", "ERROR"])
        self.assertEqual(first[0]["state"].history(), second[0]["state"].history())


if __name__ == "__main__":
    unittest.main()
