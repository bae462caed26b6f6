import os
import unittest
from unittest import mock

import pydantic

from sanitizer.core.domain import CleaningOptions, VarianceSettings
from sanitizer.service.config import Settings


class SettingsTests(unittest.TestCase):
    def test_defaults_match_application_defaults(self) -> None:
        settings = Settings(_env_file=None)
        self.assertEqual(settings.log_level, "INFO")
        self.assertIsNone(settings.patterns_file)
        self.assertEqual(settings.cleaning_options(), CleaningOptions.defaults())
        self.assertEqual(settings.variance_settings(), VarianceSettings())

    def test_environment_overrides(self) -> None:
        env = {
            "SANITIZER_LOG_LEVEL": "debug",
            "SANITIZER_VARIANCE_ENABLED": "true",
            "SANITIZER_PLURAL_VARIATION": "false",
            "SANITIZER_DEFAULT_OPTIONS": '{"markdownBold": true, "invisibleChars": false}',
        }
        with mock.patch.dict(os.environ, env):
            settings = Settings(_env_file=None)

        self.assertEqual(settings.log_level, "DEBUG")
        self.assertEqual(
            settings.variance_settings(),
            VarianceSettings(enabled=True, plural_variation=False),
        )
        options = settings.cleaning_options()
        self.assertTrue(options.markdown_bold)
        self.assertFalse(options.invisible_chars)

    def test_rejects_unknown_log_level(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            Settings(_env_file=None, log_level="LOUD")

    def test_rejects_unknown_option_names(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            Settings(_env_file=None, default_options={"emoji": True})


if __name__ == "__main__":
    unittest.main()
