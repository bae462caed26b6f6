# sanitizer/engine/detector.py

"""Detection pass: what a cleaning run would remove or rewrite."""

import logging
from typing import Iterable, Optional

from sanitizer.core.definitions import PatternName
from sanitizer.core.domain import CleaningOptions, DetectionResult, WordExchange
from sanitizer.engine.codepoints import iter_code_points
from sanitizer.engine.exchanges import WordExchangeEngine
from sanitizer.engine.patterns import PatternRegistry
from sanitizer.engine.registry import InvisibleCharacterRegistry

logger = logging.getLogger(__name__)


class Detector:
    """Scans text against the invisible registry and formatting patterns."""

    def __init__(
        self,
        registry: InvisibleCharacterRegistry,
        patterns: PatternRegistry,
        exchanges: WordExchangeEngine,
    ) -> None:
        self._registry = registry
        self._patterns = patterns
        self._exchanges = exchanges

    def scan_invisible(self, text: str, result: DetectionResult) -> None:
        """Counts invisible characters into ``result`` by code point."""
        for unit in iter_code_points(text):
            category = self._registry.category_of(unit.code_point)
            if category is None:
                continue
            result.total_count += 1
            result.positions.append(unit.offset)
            result.categories[category] += 1

    def detect(
        self,
        text: str,
        options: CleaningOptions,
        word_exchanges: Optional[Iterable[WordExchange]] = None,
    ) -> DetectionResult:
        """Builds a detection breakdown for ``text``.

        Args:
            text: Input text
            options: Which checks to run
            word_exchanges: Exchanges counted when ``options.word_exchanges``

        Returns:
            DetectionResult; ``additional_cleaning`` is None unless a
            formatting or word exchange option is enabled
        """
        result = DetectionResult()

        if options.invisible_chars:
            self.scan_invisible(text, result)

        enabled = options.enabled_patterns()
        if enabled or options.word_exchanges:
            additional = {name: 0 for name in PatternName.COUNTERS}
            for name in enabled:
                additional[name] = self._patterns.count(name, text)

            if options.word_exchanges and word_exchanges:
                additional[PatternName.WORD_EXCHANGES] = self._exchanges.count(
                    text, word_exchanges
                )
            result.additional_cleaning = additional

        logger.debug(
            "Detection completed",
            extra={
                "text_length": len(text),
                "invisible_count": result.total_count,
                "additional_total": result.additional_total,
            },
        )
        return result
