# sanitizer/engine/cleaner.py

"""Cleaning pass: applies the enabled transformations in a fixed order."""

import logging
import re
from typing import Iterable, Optional

from sanitizer.core.definitions import PatternName
from sanitizer.core.domain import CleaningOptions, VarianceSettings, WordExchange
from sanitizer.engine.codepoints import (
    HIGH_SURROGATE_START,
    LOW_SURROGATE_END,
    iter_code_points,
)
from sanitizer.engine.exchanges import WordExchangeEngine
from sanitizer.engine.patterns import PatternRegistry
from sanitizer.engine.registry import InvisibleCharacterRegistry

logger = logging.getLogger(__name__)

# Whitespace plus U+FEFF, trimmed from both ends after cleaning
_EDGE_WHITESPACE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")


def _has_surrogates(text: str) -> bool:
    return any(HIGH_SURROGATE_START <= ord(ch) <= LOW_SURROGATE_END for ch in text)


class Cleaner:
    """Rewrites text according to ``CleaningOptions``.

    Order of application:
        1. invisible characters
        2. markdown headers
        3. markdown bold
        4. repeating characters
        5. formatting lines
        6. extra whitespace
        7. word exchanges
        8. excess newlines and surrounding whitespace (always)
    """

    def __init__(
        self,
        registry: InvisibleCharacterRegistry,
        patterns: PatternRegistry,
        exchanges: WordExchangeEngine,
    ) -> None:
        self._registry = registry
        self._patterns = patterns
        self._exchanges = exchanges

    def _strip_once(self, text: str) -> str:
        return "".join(
            unit.chars
            for unit in iter_code_points(text)
            if not self._registry.is_invisible(unit.code_point)
        )

    def strip_invisible(self, text: str) -> str:
        """Removes every invisible code point.

        Surrogate pairs are kept or dropped as a whole.
        """
        stripped = self._strip_once(text)
        # Dropping a character can join two lone surrogate halves into a pair
        while stripped != text and _has_surrogates(stripped):
            text, stripped = stripped, self._strip_once(stripped)
        return stripped

    def clean(
        self,
        text: str,
        options: CleaningOptions,
        word_exchanges: Optional[Iterable[WordExchange]] = None,
        variance: Optional[VarianceSettings] = None,
    ) -> str:
        result = text

        if options.invisible_chars:
            result = self.strip_invisible(result)

        for name in options.enabled_patterns():
            result = self._patterns.apply(name, result)

        if options.word_exchanges and word_exchanges:
            result = self._exchanges.apply(result, word_exchanges, variance)

        result = self._patterns.apply(PatternName.EXCESS_NEWLINES, result)
        result = _EDGE_WHITESPACE.sub("", result)

        logger.debug(
            "Cleaning completed",
            extra={"text_length": len(text), "cleaned_length": len(result)},
        )
        return result
