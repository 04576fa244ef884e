"""Tests for the julian logging setup."""

import logging
import os
import unittest
from unittest.mock import patch

from julian.logging import DEFAULT_LOG_LEVEL, _get_log_level, get_logger, set_log_level


class TestLogging(unittest.TestCase):
    def tearDown(self) -> None:
        set_log_level(DEFAULT_LOG_LEVEL)
        logging.getLogger("julian").setLevel(logging.NOTSET)

    def test_log_level_from_environment(self):
        with patch.dict(os.environ, {"JULIAN_LOG_LEVEL": "debug"}):
            self.assertEqual(_get_log_level(), logging.DEBUG)
        with patch.dict(os.environ, {"JULIAN_LOG_LEVEL": "ERROR"}):
            self.assertEqual(_get_log_level(), logging.ERROR)
        with patch.dict(os.environ, {"JULIAN_LOG_LEVEL": "chatty"}):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(_get_log_level(), DEFAULT_LOG_LEVEL)

    def test_get_logger_configures_once(self):
        logger = get_logger("julian.tests.example")
        self.assertEqual(len(logger.handlers), 1)
        self.assertIs(get_logger("julian.tests.example"), logger)
        self.assertEqual(len(logger.handlers), 1)

    def test_set_log_level_updates_children(self):
        logger = get_logger("julian.tests.child")
        set_log_level(logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(logging.getLogger("julian").level, logging.DEBUG)

        set_log_level(logging.ERROR)
        self.assertEqual(logger.level, logging.ERROR)


if __name__ == "__main__":
    unittest.main()
