import os
import unittest
from unittest import mock

from fenster_core import config


class TestConfig(unittest.TestCase):
    def test_given_env_values_when_parsing_then_defaults_on_garbage(self):
        with mock.patch.dict(os.environ, {"FENSTER_PENALTY_DELAY": "0.5"}):
            self.assertEqual(config._env_float("FENSTER_PENALTY_DELAY", 2.0), 0.5)
        with mock.patch.dict(os.environ, {"FENSTER_PENALTY_DELAY": "soon"}):
            self.assertEqual(config._env_float("FENSTER_PENALTY_DELAY", 2.0), 2.0)
        with mock.patch.dict(os.environ, {"FENSTER_PENALTY_DELAY": "-3"}):
            self.assertEqual(config._env_float("FENSTER_PENALTY_DELAY", 2.0), 0.0)
        with mock.patch.dict(os.environ, {"FENSTER_PENALTY_DELAY": ""}):
            self.assertEqual(config._env_float("FENSTER_PENALTY_DELAY", 2.0), 2.0)

    def test_given_non_finite_delay_when_parsing_then_default(self):
        for raw in ("inf", "-inf", "nan", "Infinity"):
            with mock.patch.dict(os.environ, {"FENSTER_PENALTY_DELAY": raw}):
                self.assertEqual(config._env_float("FENSTER_PENALTY_DELAY", 2.0), 2.0, raw)

    def test_given_game_cap_when_parsing_then_at_least_one(self):
        with mock.patch.dict(os.environ, {"FENSTER_MAX_GAMES": "10"}):
            self.assertEqual(config._env_int("FENSTER_MAX_GAMES", 256), 10)
        with mock.patch.dict(os.environ, {"FENSTER_MAX_GAMES": "0"}):
            self.assertEqual(config._env_int("FENSTER_MAX_GAMES", 256), 1)
        with mock.patch.dict(os.environ, {"FENSTER_MAX_GAMES": "many"}):
            self.assertEqual(config._env_int("FENSTER_MAX_GAMES", 256), 256)

    def test_given_truthy_strings_when_parsing_flag_then_on(self):
        for raw in ("1", "true", "YES", "on"):
            with mock.patch.dict(os.environ, {"FENSTER_STRICT_START": raw}):
                self.assertTrue(config._env_flag("FENSTER_STRICT_START"))
        with mock.patch.dict(os.environ, {"FENSTER_STRICT_START": "off"}):
            self.assertFalse(config._env_flag("FENSTER_STRICT_START"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
