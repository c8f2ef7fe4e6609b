import os
import unittest
from pathlib import Path
from unittest.mock import patch

from pydantic import ValidationError

from itercharge.config import Settings, log_file_path


class SettingsTest(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            current = Settings(_env_file=None)

        self.assertEqual(current.log_level, "INFO")
        self.assertIsNone(current.log_directory)
        self.assertIsNone(current.json_indent)
        self.assertIsNone(current.log_file())

    def test_reads_environment(self) -> None:
        env = {
            "ITERCHARGE_LOG_LEVEL": "debug",
            "ITERCHARGE_LOG_DIRECTORY": "/tmp/itercharge-logs",
            "ITERCHARGE_JSON_INDENT": "2",
        }
        with patch.dict(os.environ, env, clear=True):
            current = Settings(_env_file=None)

        self.assertEqual(current.log_level, "debug")
        self.assertEqual(current.json_indent, 2)
        self.assertEqual(current.log_file(), Path("/tmp/itercharge-logs/itercharge.log"))

    def test_log_file_path_joins_file_name(self) -> None:
        self.assertEqual(log_file_path("/var/log/app"), Path("/var/log/app/itercharge.log"))

    def test_rejects_negative_indent(self) -> None:
        with patch.dict(os.environ, {"ITERCHARGE_JSON_INDENT": "-1"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)


if __name__ == "__main__":
    unittest.main()
