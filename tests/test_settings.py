import os
import unittest
from unittest import mock

from pydantic import ValidationError

from jqlens.core.config import Settings


class SettingsTests(unittest.TestCase):
    def test_port_defaults_to_3000(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.port, 3000)
        self.assertEqual(settings.upload_field, "jsonFile")
        self.assertIsNone(settings.jq_timeout_seconds)

    def test_port_read_from_environment(self) -> None:
        with mock.patch.dict(os.environ, {"PORT": "8080"}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.port, 8080)

    def test_invalid_port_is_rejected(self) -> None:
        with mock.patch.dict(os.environ, {"PORT": "not-a-port"}, clear=True):
            with self.assertRaises(ValidationError):
                Settings(_env_file=None)

    def test_jq_settings_from_environment(self) -> None:
        env = {"JQ_BINARY": "/usr/local/bin/jq", "JQ_TIMEOUT_SECONDS": "2.5"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.jq_binary, "/usr/local/bin/jq")
        self.assertEqual(settings.jq_timeout_seconds, 2.5)


if __name__ == "__main__":
    unittest.main()
