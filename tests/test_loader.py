import tempfile
import unittest
from pathlib import Path

import yaml

from sanitizer.core.definitions import InvisibleCategory, PatternName
from sanitizer.core.exceptions import ConfigurationError, InitializationError
from sanitizer.core.loader import DEFAULT_PATTERNS_PATH, PatternLoader
from sanitizer.engine.patterns import PatternRegistry
from sanitizer.engine.text_engine import SanitizationEngine


def _bundled_table() -> dict:
    with open(DEFAULT_PATTERNS_PATH, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


class BundledTableTests(unittest.TestCase):
    def test_shared_instance(self) -> None:
        self.assertIs(PatternLoader.get_instance(), PatternLoader.get_instance())

    def test_exact_code_point_table(self) -> None:
        sets = PatternLoader.get_instance().get_category_sets()
        self.assertEqual(
            sets[InvisibleCategory.ZERO_WIDTH], {0x200B, 0x200C, 0x200D, 0x2060, 0xFEFF}
        )
        self.assertEqual(
            sets[InvisibleCategory.BIDI_CONTROLS],
            {0x200E, 0x200F, 0x061C} | set(range(0x202A, 0x202F)) | set(range(0x2066, 0x206A)),
        )
        self.assertEqual(sets[InvisibleCategory.MATH_OPERATORS], set(range(0x2061, 0x2065)))
        self.assertEqual(sets[InvisibleCategory.HYPHENATION], {0x00AD})
        self.assertEqual(
            sets[InvisibleCategory.VARIATION_SELECTORS],
            set(range(0x180B, 0x180F)) | set(range(0xFE00, 0xFE10)),
        )
        self.assertEqual(sets[InvisibleCategory.FORMAT_CONTROLS], {0x034F, 0xFFF9, 0xFFFA, 0xFFFB})
        self.assertEqual(sets[InvisibleCategory.SHORTHAND], set(range(0x1BCA0, 0x1BCA4)))

    def test_ranges(self) -> None:
        ranges = PatternLoader.get_instance().get_ranges()
        self.assertEqual(ranges[InvisibleCategory.TAG_CHARACTERS], (0xE0000, 0xE007F))
        self.assertEqual(ranges[InvisibleCategory.IVS_CHARACTERS], (0xE0100, 0xE01EF))

    def test_pattern_definitions(self) -> None:
        loader = PatternLoader.get_instance()
        for name in PatternName.REQUIRED:
            self.assertIn("regex", loader.get_pattern(name))
        self.assertEqual(loader.get_pattern(PatternName.MARKDOWN_HEADERS)["regex"], r"^#{1,6}\s+")
        self.assertEqual(loader.get_pattern(PatternName.EXCESS_NEWLINES)["replacement"], "\n\n")
        with self.assertRaises(ConfigurationError):
            loader.get_pattern("unknown")


class InvalidTableTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "patterns.yaml"

    def write(self, table) -> Path:
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(table, f)
        return self.path

    def test_missing_file(self) -> None:
        with self.assertRaises(ConfigurationError):
            PatternLoader(Path(self._tmp.name) / "missing.yaml")

    def test_empty_file(self) -> None:
        self.path.write_text("", encoding="utf-8")
        with self.assertRaises(ConfigurationError):
            PatternLoader(self.path)

    def test_invalid_yaml(self) -> None:
        self.path.write_text("invisible_characters: [unclosed", encoding="utf-8")
        with self.assertRaises(ConfigurationError):
            PatternLoader(self.path)

    def test_missing_section(self) -> None:
        table = _bundled_table()
        del table["invisible_ranges"]
        with self.assertRaises(ConfigurationError):
            PatternLoader(self.write(table))

    def test_overlapping_categories(self) -> None:
        table = _bundled_table()
        table["invisible_characters"]["HYPHENATION"].append(0x200B)
        with self.assertRaises(ConfigurationError):
            PatternLoader(self.write(table))

    def test_reversed_range(self) -> None:
        table = _bundled_table()
        table["invisible_ranges"]["TAG_CHARACTERS"] = [0xE007F, 0xE0000]
        with self.assertRaises(ConfigurationError):
            PatternLoader(self.write(table))

    def test_missing_pattern(self) -> None:
        table = _bundled_table()
        del table["cleaning_patterns"]["excessNewlines"]
        with self.assertRaises(ConfigurationError):
            PatternLoader(self.write(table))

    def test_invalid_regex_fails_compilation(self) -> None:
        table = _bundled_table()
        table["cleaning_patterns"]["markdownBold"]["regex"] = "(unclosed"
        loader = PatternLoader(self.write(table))
        with self.assertRaises(ConfigurationError):
            PatternRegistry(loader)
        with self.assertRaises(InitializationError):
            SanitizationEngine(loader)

    def test_unknown_flag(self) -> None:
        table = _bundled_table()
        table["cleaning_patterns"]["markdownBold"]["flags"] = ["NOT_A_FLAG"]
        with self.assertRaises(ConfigurationError):
            PatternRegistry(PatternLoader(self.write(table)))

    def test_custom_table_is_used(self) -> None:
        table = _bundled_table()
        table["invisible_characters"]["HYPHENATION"].append(ord("~"))
        engine = SanitizationEngine(PatternLoader(self.write(table)))
        self.assertEqual(engine.strip_invisible("a~b"), "ab")


if __name__ == "__main__":
    unittest.main()
