import unittest

from sanitizer.core.domain import VarianceSettings, WordExchange
from sanitizer.engine.exchanges import WordExchangeEngine, active_exchanges
from sanitizer.logic.variants import generate_word_variations


class VariationTests(unittest.TestCase):
    def test_disabled_returns_literal_only(self) -> None:
        settings = VarianceSettings(enabled=False, case_variation=True, plural_variation=True)
        self.assertEqual(generate_word_variations("Bad", settings), ["Bad"])

    def test_case_and_plural_forms_deduplicated(self) -> None:
        settings = VarianceSettings(enabled=True)
        self.assertEqual(generate_word_variations("bad", settings), ["bad", "BAD", "Bad", "bads"])

    def test_case_forms(self) -> None:
        settings = VarianceSettings(enabled=True, plural_variation=False)
        self.assertEqual(
            generate_word_variations("hELLO", settings),
            ["hELLO", "hello", "HELLO", "Hello"],
        )

    def test_plural_forms(self) -> None:
        settings = VarianceSettings(enabled=True, case_variation=False)
        self.assertEqual(generate_word_variations("bus", settings), ["bus", "bu"])
        self.assertEqual(generate_word_variations("party", settings), ["party", "partys", "parties"])
        self.assertEqual(generate_word_variations("s", settings), ["s"])
        self.assertEqual(generate_word_variations("y", settings), ["y", "ys"])

    def test_plural_suffix_check_is_case_sensitive(self) -> None:
        settings = VarianceSettings(enabled=True, case_variation=False)
        self.assertEqual(generate_word_variations("BUS", settings), ["BUS", "BUSs"])

    def test_synonym_flag_adds_nothing(self) -> None:
        settings = VarianceSettings(
            enabled=True, synonym_variation=True, case_variation=False, plural_variation=False
        )
        self.assertEqual(generate_word_variations("big", settings), ["big"])


class WordExchangeEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = WordExchangeEngine()

    def test_active_exchanges_keeps_order(self) -> None:
        exchanges = [
            WordExchange(id="1", bad_word="a", good_word="b"),
            WordExchange(id="2", bad_word="a", good_word="", enabled=True),
            WordExchange(id="3", bad_word="c", good_word="d", enabled=False),
            WordExchange(id="4", bad_word="e", good_word="f"),
        ]
        self.assertEqual([ex.id for ex in active_exchanges(exchanges)], ["1", "4"])
        self.assertEqual(active_exchanges(None), [])

    def test_matcher_is_literal_whole_word(self) -> None:
        matcher = self.engine.build_matcher("a.b")
        self.assertEqual(matcher.findall("A.B axb a.bc a.b"), ["A.B", "a.b"])

    def test_count_is_case_insensitive_whole_word(self) -> None:
        exchanges = [WordExchange(id="1", bad_word="Cat", good_word="dog")]
        self.assertEqual(self.engine.count("cat CAT cats bobcat", exchanges), 2)

    def test_apply_inserts_good_word_verbatim(self) -> None:
        exchanges = [WordExchange(id="1", bad_word="cat", good_word="Dog")]
        self.assertEqual(self.engine.apply("CAT cat", exchanges), "Dog Dog")

    def test_apply_runs_one_pass_per_form(self) -> None:
        exchanges = [WordExchange(id="1", bad_word="cat", good_word="cats x")]
        variance = VarianceSettings(enabled=True)
        # The "cats" pass sees the text inserted by the "cat" pass
        self.assertEqual(self.engine.apply("cat", exchanges, variance), "cats x x")

    def test_apply_variants_in_order(self) -> None:
        exchanges = [WordExchange(id="1", bad_word="bad", good_word="good")]
        variance = VarianceSettings(enabled=True)
        self.assertEqual(self.engine.apply("Bad bads BAD", exchanges, variance), "good good good")

    def test_unicode_word_boundaries(self) -> None:
        exchanges = [WordExchange(id="1", bad_word="caf", good_word="bar")]
        # "é" is a word character, so "café" is not a whole-word "caf"
        self.assertEqual(self.engine.apply("caf caf" + chr(0xE9), exchanges), "bar caf" + chr(0xE9))


if __name__ == "__main__":
    unittest.main()
