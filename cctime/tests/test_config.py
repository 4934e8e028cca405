import importlib
import os
import unittest
from unittest.mock import patch

from cctime import config


class ConfigTests(unittest.TestCase):
    def tearDown(self) -> None:
        importlib.reload(config)

    def test_env_helpers_fall_back_on_missing_or_bad_values(self) -> None:
        with patch.dict(os.environ, {"CCTIME_X": "nope"}, clear=False):
            self.assertEqual(config._env_int("CCTIME_X", 7), 7)
            self.assertFalse(config._env_bool("CCTIME_X", True))
        self.assertEqual(config._env_int("CCTIME_UNSET_SETTING", 7), 7)
        self.assertTrue(config._env_bool("CCTIME_UNSET_SETTING", True))

    def test_settings_are_read_from_environment(self) -> None:
        env = {"CCTIME_MAX_DAYS": "90", "CCTIME_DEBUG": "yes", "CCTIME_TIMEZONE": " Europe/Paris "}
        with patch.dict(os.environ, env, clear=False):
            importlib.reload(config)
            self.assertEqual(config.MAX_DAYS, 90)
            self.assertTrue(config.DEBUG)
            self.assertEqual(config.TIMEZONE, "Europe/Paris")

    def test_only_cli_and_loader_settings_are_exposed(self) -> None:
        for name in ("HOST", "PORT", "CLAUDE_PROJECTS_DIR_NAME"):
            self.assertFalse(hasattr(config, name), name)


if __name__ == "__main__":
    unittest.main()
