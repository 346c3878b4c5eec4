"""
Tests for the Environment Manager.

This module tests the centralized environment configuration system including
precedence handling, validation, and error conditions.
"""

import os
import unittest
from argparse import Namespace
from unittest.mock import patch

from genius_client.config.env import Env, ConfigError


class TestEnvFromMapping(unittest.TestCase):
    """Test cases for building Env from plain mappings."""

    def test_defaults(self):
        env = Env.from_mapping({})

        self.assertIsNone(env.GENIUS_API_TOKEN)
        self.assertEqual(env.GENIUS_API_BASE_URL, "https://api.genius.com")
        self.assertEqual(env.GENIUS_TEXT_FORMAT, "dom")
        self.assertEqual(env.GENIUS_PER_PAGE, 20)
        self.assertEqual(env.page_delay_range, (1.0, 3.0))

    def test_from_mapping_success(self):
        mapping = {
            "GENIUS_API_TOKEN": "abc",
            "GENIUS_API_BASE_URL": "https://api.genius.test/",
            "GENIUS_TEXT_FORMAT": " PLAIN ",
            "GENIUS_PER_PAGE": "50",
            "GENIUS_MIN_PAGE_DELAY": "0",
            "GENIUS_MAX_PAGE_DELAY": "0.5",
            "UNRELATED": "ignored",
        }

        env = Env.from_mapping(mapping)

        self.assertEqual(env.GENIUS_API_TOKEN, "abc")
        self.assertEqual(env.GENIUS_API_BASE_URL, "https://api.genius.test")
        self.assertEqual(env.GENIUS_TEXT_FORMAT, "plain")
        self.assertEqual(env.GENIUS_PER_PAGE, 50)
        self.assertEqual(env.page_delay_range, (0.0, 0.5))

    def test_invalid_values(self):
        cases = [
            {"GENIUS_PER_PAGE": "0"},
            {"GENIUS_PER_PAGE": "51"},
            {"GENIUS_PER_PAGE": "many"},
            {"GENIUS_TEXT_FORMAT": "markdown"},
            {"GENIUS_MIN_PAGE_DELAY": "-1"},
            {"GENIUS_MIN_PAGE_DELAY": "5", "GENIUS_MAX_PAGE_DELAY": "2"},
        ]
        for mapping in cases:
            with self.subTest(mapping=mapping):
                with self.assertRaises(ConfigError):
                    Env.from_mapping(mapping)

    def test_to_dict(self):
        env = Env.from_mapping({"GENIUS_API_TOKEN": "abc"})
        data = env.to_dict()

        self.assertEqual(data["GENIUS_API_TOKEN"], "abc")
        self.assertEqual(
            set(data),
            {
                "GENIUS_API_TOKEN",
                "GENIUS_API_BASE_URL",
                "GENIUS_TEXT_FORMAT",
                "GENIUS_PER_PAGE",
                "GENIUS_MIN_PAGE_DELAY",
                "GENIUS_MAX_PAGE_DELAY",
            },
        )

    def test_mask(self):
        masked = Env.from_mapping({"GENIUS_API_TOKEN": "secret-token"}).mask()
        self.assertEqual(masked["GENIUS_API_TOKEN"], "***")
        self.assertNotIn("secret-token", str(masked))

    def test_mask_with_none_values(self):
        self.assertIsNone(Env().mask()["GENIUS_API_TOKEN"])


EMPTY_GENIUS_ENV = {
    "GENIUS_API_TOKEN": "",
    "GENIUS_API_BASE_URL": "",
    "GENIUS_TEXT_FORMAT": "",
    "GENIUS_PER_PAGE": "",
    "GENIUS_MIN_PAGE_DELAY": "",
    "GENIUS_MAX_PAGE_DELAY": "",
}


class TestEnvLoad(unittest.TestCase):
    """Test cases for loading Env from the process environment and CLI."""

    def setUp(self):
        # Clear any existing singleton
        Env.reset()

    def tearDown(self):
        Env.reset()

    def test_current_before_load_raises_error(self):
        with self.assertRaises(ConfigError) as cm:
            Env.current()
        self.assertIn("Env.load()", str(cm.exception))

    @patch.dict(os.environ, EMPTY_GENIUS_ENV)
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_empty_environment_uses_defaults(self, mock_dotenv):
        env = Env.load()

        self.assertIsNone(env.GENIUS_API_TOKEN)
        self.assertEqual(env.GENIUS_PER_PAGE, 20)
        self.assertIs(Env.current(), env)
        mock_dotenv.assert_called_once()

    @patch.dict(os.environ, {**EMPTY_GENIUS_ENV, "GENIUS_API_TOKEN": " env-token ", "GENIUS_PER_PAGE": "5"})
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_load_from_environment(self, mock_dotenv):
        env = Env.load()

        self.assertEqual(env.GENIUS_API_TOKEN, "env-token")
        self.assertEqual(env.GENIUS_PER_PAGE, 5)

    @patch.dict(os.environ, {**EMPTY_GENIUS_ENV, "GENIUS_API_TOKEN": "env-token", "GENIUS_TEXT_FORMAT": "html"})
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_cli_args_override_environment(self, mock_dotenv):
        args = Namespace(token="cli-token", text_format=None, per_page=10)

        env = Env.load(cli_args=args)

        self.assertEqual(env.GENIUS_API_TOKEN, "cli-token")
        self.assertEqual(env.GENIUS_TEXT_FORMAT, "html")
        self.assertEqual(env.GENIUS_PER_PAGE, 10)

    @patch.dict(os.environ, {**EMPTY_GENIUS_ENV, "GENIUS_API_TOKEN": "env-token"})
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_overrides_win_over_cli_args(self, mock_dotenv):
        env = Env.load(
            cli_overrides={"GENIUS_API_TOKEN": "override"},
            cli_args=Namespace(token="cli-token"),
        )
        self.assertEqual(env.GENIUS_API_TOKEN, "override")

    @patch.dict(os.environ, {**EMPTY_GENIUS_ENV, "GENIUS_PER_PAGE": "500"})
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_invalid_environment_value(self, mock_dotenv):
        with self.assertRaises(ConfigError) as cm:
            Env.load()
        self.assertIn("GENIUS_PER_PAGE", str(cm.exception))
        with self.assertRaises(ConfigError):
            Env.current()

    @patch.dict(os.environ, {**EMPTY_GENIUS_ENV, "GENIUS_MIN_PAGE_DELAY": "4"})
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_unordered_delay_range(self, mock_dotenv):
        with self.assertRaises(ConfigError) as cm:
            Env.load()
        self.assertIn("min_page_delay", str(cm.exception))

    @patch.dict(os.environ, EMPTY_GENIUS_ENV)
    @patch('genius_client.config.loader._load_from_dotenv_file')
    def test_subsequent_load_updates_singleton(self, mock_dotenv):
        first = Env.load(cli_overrides={"GENIUS_API_TOKEN": "one"})
        second = Env.load(cli_overrides={"GENIUS_API_TOKEN": "two"})

        self.assertEqual(first.GENIUS_API_TOKEN, "one")
        self.assertIs(Env.current(), second)
        self.assertEqual(Env.current().GENIUS_API_TOKEN, "two")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
