# sanitizer/engine/text_engine.py

"""Sanitization engine composing the registries, detector and cleaner."""

import logging
from typing import Iterable, List, Optional

from sanitizer.core.domain import (
    CleaningOptions,
    DetectionResult,
    IssueStat,
    ProcessingResult,
    VarianceSettings,
    WordExchange,
)
from sanitizer.core.exceptions import (
    ConfigurationError,
    InitializationError,
    PipelineError,
    ValidationError,
)
from sanitizer.core.loader import PatternLoader
from sanitizer.engine.cleaner import Cleaner
from sanitizer.engine.codepoints import utf16_length
from sanitizer.engine.detector import Detector
from sanitizer.engine.exchanges import WordExchangeEngine
from sanitizer.engine.patterns import PatternRegistry
from sanitizer.engine.registry import InvisibleCharacterRegistry

logger = logging.getLogger(__name__)


def _require_text(text: object) -> None:
    if not isinstance(text, str):
        raise ValidationError(f"Text must be a str, got {type(text).__name__}")


def build_stats(detection: DetectionResult) -> List[IssueStat]:
    """Flattens non-zero counts into stats, largest count first.

    Ties keep invisible categories before additional cleaning entries.
    """
    stats = [
        IssueStat(category=category, count=count, kind="invisible")
        for category, count in detection.categories.items()
        if count > 0
    ]
    if detection.additional_cleaning:
        stats.extend(
            IssueStat(category=name, count=count, kind="additional")
            for name, count in detection.additional_cleaning.items()
            if count > 0
        )
    return sorted(stats, key=lambda s: s.count, reverse=True)


class SanitizationEngine:
    """Owns the immutable registries and exposes detect/clean.

    All state is built in ``__init__`` and read-only afterwards, so one
    instance can serve concurrent callers.
    """

    def __init__(self, loader: Optional[PatternLoader] = None) -> None:
        """Initialize the engine.

        Args:
            loader: Pattern table source; defaults to the bundled table

        Raises:
            InitializationError: If the table cannot be loaded or compiled.
        """
        try:
            loader = loader or PatternLoader.get_instance()
            self.registry = InvisibleCharacterRegistry.from_loader(loader)
            self.patterns = PatternRegistry(loader)
        except ConfigurationError as e:
            logger.error("Engine initialization failed", exc_info=True)
            raise InitializationError(f"Failed to initialize sanitization engine: {e}") from e

        self.exchanges = WordExchangeEngine()
        self.detector = Detector(self.registry, self.patterns, self.exchanges)
        self.cleaner = Cleaner(self.registry, self.patterns, self.exchanges)

        logger.info("Sanitization engine initialized", extra={"registry": repr(self.registry)})

    def detect(
        self,
        text: str,
        options: CleaningOptions,
        word_exchanges: Optional[Iterable[WordExchange]] = None,
    ) -> DetectionResult:
        _require_text(text)
        return self.detector.detect(text, options, word_exchanges)

    def clean(
        self,
        text: str,
        options: CleaningOptions,
        word_exchanges: Optional[Iterable[WordExchange]] = None,
        variance: Optional[VarianceSettings] = None,
    ) -> str:
        _require_text(text)
        return self.cleaner.clean(text, options, word_exchanges, variance)

    def strip_invisible(self, text: str) -> str:
        _require_text(text)
        return self.cleaner.strip_invisible(text)

    def process(
        self,
        text: str,
        options: CleaningOptions,
        word_exchanges: Optional[Iterable[WordExchange]] = None,
        variance: Optional[VarianceSettings] = None,
    ) -> ProcessingResult:
        """Runs detection and cleaning over the same inputs.

        Args:
            text: Raw input text
            options: Enabled transformations
            word_exchanges: Substitution rules
            variance: Surface-form settings for the rewrite step

        Returns:
            ProcessingResult with cleaned text, breakdown and stats

        Raises:
            ValidationError: If ``text`` is not a str.
            PipelineError: If processing fails unexpectedly.
        """
        _require_text(text)
        exchanges = list(word_exchanges) if word_exchanges is not None else None

        try:
            detection = self.detector.detect(text, options, exchanges)
            cleaned = self.cleaner.clean(text, options, exchanges, variance)
        except Exception as e:
            logger.error(
                "Sanitization processing failed",
                exc_info=True,
                extra={"text_length": len(text)},
            )
            raise PipelineError(f"Failed to process text: {e}") from e

        result = ProcessingResult(
            original_text=text,
            cleaned_text=cleaned,
            detection=detection,
            stats=build_stats(detection),
            total_issues=detection.total_issues,
            character_difference=utf16_length(text) - utf16_length(cleaned),
            metadata={
                "options": options.to_dict(),
                "active_exchanges": sum(1 for ex in exchanges or () if ex.is_active),
            },
        )

        logger.info(
            "Sanitization completed",
            extra={
                "text_length": len(text),
                "total_issues": result.total_issues,
                "character_difference": result.character_difference,
            },
        )
        return result
