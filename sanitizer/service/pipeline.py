# sanitizer/service/pipeline.py

"""Main sanitization service pipeline."""

import logging
import threading
from typing import Iterable, Optional

from sanitizer.service.config import settings
from sanitizer.engine.text_engine import SanitizationEngine
from sanitizer.core.loader import PatternLoader
from sanitizer.core.domain import (
    CleaningOptions,
    DetectionResult,
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

logger = logging.getLogger(__name__)


class SanitizerService:
    """Singleton service wrapper for the sanitization engine.

    Builds the engine (and its registries) once per process and provides
    thread-safe access to it.
    """

    _instance: Optional[SanitizationEngine] = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> SanitizationEngine:
        """Returns singleton sanitization engine instance.

        Returns:
            Initialized SanitizationEngine

        Raises:
            InitializationError: If engine initialization fails
        """
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    try:
                        logger.info("Initializing sanitization engine")
                        if settings.patterns_file:
                            loader = PatternLoader(settings.patterns_file)
                        else:
                            loader = PatternLoader.get_instance()
                        cls._instance = SanitizationEngine(loader)

                    except Exception as e:
                        logger.error(
                            "Failed to initialize sanitization engine", exc_info=True
                        )
                        if isinstance(e, InitializationError):
                            raise
                        raise InitializationError(
                            "Sanitization engine initialization failed"
                        ) from e

        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drops the cached engine so the next call rebuilds it."""
        with cls._lock:
            cls._instance = None


def detect(
    text: str,
    options: CleaningOptions,
    word_exchanges: Optional[Iterable[WordExchange]] = None,
) -> DetectionResult:
    """Reports invisible characters and formatting artifacts in ``text``."""
    return SanitizerService.get_instance().detect(text, options, word_exchanges)


def clean(
    text: str,
    options: CleaningOptions,
    word_exchanges: Optional[Iterable[WordExchange]] = None,
    variance: Optional[VarianceSettings] = None,
) -> str:
    """Returns ``text`` with the enabled transformations applied."""
    return SanitizerService.get_instance().clean(text, options, word_exchanges, variance)


def strip_invisible(text: str) -> str:
    """Removes invisible characters only."""
    return SanitizerService.get_instance().strip_invisible(text)


def process_text(
    text: str,
    options: Optional[CleaningOptions] = None,
    word_exchanges: Optional[Iterable[WordExchange]] = None,
    variance: Optional[VarianceSettings] = None,
) -> ProcessingResult:
    """Main entry point for text sanitization.

    Args:
        text: Input text to sanitize
        options: Enabled transformations; settings defaults when None
        word_exchanges: Substitution rules
        variance: Surface-form settings; settings defaults when None

    Returns:
        ProcessingResult with cleaned text and detection breakdown.
        On failure, returns a result indicating the error safely.
    """
    if not isinstance(text, str):
        logger.error(f"Invalid input type received: {type(text)}")
        return ProcessingResult(
            original_text=str(text),
            cleaned_text=str(text),
            metadata={
                "error": "Invalid input format",
                "status": "failed",
                "error_type": ValidationError.__name__,
            },
        )

    if not text:
        logger.warning("Empty text provided for sanitization")
        return ProcessingResult(original_text="", cleaned_text="")

    try:
        options = options or settings.cleaning_options()
        variance = variance or settings.variance_settings()
        engine = SanitizerService.get_instance()

        logger.info(
            "Starting sanitization request",
            extra={"text_length": len(text), "options": options.to_dict()},
        )

        return engine.process(text, options, word_exchanges, variance)

    except (ConfigurationError, InitializationError, PipelineError, ValidationError) as e:
        # Known errors: log with context, hide internal details in the result
        logger.error(
            f"Known error during sanitization: {type(e).__name__}",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return ProcessingResult(
            original_text=text,
            cleaned_text=text,
            metadata={
                "error": "The sanitization service encountered a processing error.",
                "status": "failed",
                "error_type": type(e).__name__,
            },
        )

    except Exception:
        # Catch-all for unexpected bugs
        logger.error(
            "Unexpected critical error in sanitization pipeline",
            exc_info=True,
            extra={"text_length": len(text)},
        )
        return ProcessingResult(
            original_text=text,
            cleaned_text=text,
            metadata={
                "error": "An unexpected system error occurred.",
                "status": "failed",
            },
        )
