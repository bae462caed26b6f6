# sanitizer/engine/exchanges.py

"""Whole-word, case-insensitive word exchange engine."""

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Optional, Pattern

from sanitizer.core.domain import VarianceSettings, WordExchange
from sanitizer.logic.variants import generate_word_variations

logger = logging.getLogger(__name__)

_LITERAL = VarianceSettings(enabled=False)


@lru_cache(maxsize=256)
def _compile_word(word: str) -> Pattern[str]:
    """Builds a whole-word, case-insensitive matcher for one escaped literal."""
    return re.compile(r"\b" + re.escape(word) + r"\b", re.IGNORECASE)


def active_exchanges(exchanges: Optional[Iterable[WordExchange]]) -> List[WordExchange]:
    """Filters to exchanges that are enabled with non-blank words, keeping order."""
    if not exchanges:
        return []
    return [ex for ex in exchanges if ex.is_active]


class WordExchangeEngine:
    """Counts and applies word exchanges.

    Word boundaries follow Python's ``re`` definition: ``\\b`` is Unicode
    aware, so accented Latin letters and other scripts' word characters
    count as part of a word. Scripts without spaces between words (e.g. CJK)
    form a single run of word characters; no segmentation is attempted.
    """

    def build_matcher(self, word: str) -> Pattern[str]:
        """Returns the compiled whole-word matcher for ``word``."""
        return _compile_word(word)

    def count(self, text: str, exchanges: Optional[Iterable[WordExchange]]) -> int:
        """Sums literal bad-word matches across all active exchanges.

        Counting never expands variants; only ``apply`` does.
        """
        total = 0
        for exchange in active_exchanges(exchanges):
            matcher = self.build_matcher(exchange.bad_word)
            total += sum(1 for _ in matcher.finditer(text))
        return total

    def apply(
        self,
        text: str,
        exchanges: Optional[Iterable[WordExchange]],
        variance: Optional[VarianceSettings] = None,
    ) -> str:
        """Rewrites ``text`` with each active exchange in order.

        Each exchange sees the output of the previous one, and each surface
        form of an exchange runs as its own pass over the previous form's
        output. The good word is inserted literally, never interpreted as a
        replacement template.
        """
        result = text
        for exchange in active_exchanges(exchanges):
            good_word = exchange.good_word
            replaced = 0
            for form in generate_word_variations(exchange.bad_word, variance or _LITERAL):
                result, hits = self.build_matcher(form).subn(lambda _m: good_word, result)
                replaced += hits
            if replaced:
                logger.debug(
                    "Word exchange applied",
                    extra={"exchange_id": exchange.id, "replacements": replaced},
                )
        return result
