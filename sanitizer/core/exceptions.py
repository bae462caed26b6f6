# sanitizer/core/exceptions.py

"""Custom exception hierarchy for the text sanitizer.

The engine itself is total over ``str`` input. These types cover the
surrounding concerns: loading the pattern table, building the engine,
unexpected processing failures and malformed caller input.
"""


class SanitizerError(Exception):
    """Base exception for all application-specific errors."""

    pass


class ConfigurationError(SanitizerError):
    """Raised when the pattern table or settings fail to load or validate."""

    pass


class InitializationError(SanitizerError):
    """Raised when the sanitization engine fails to initialize."""

    pass


class PipelineError(SanitizerError):
    """Raised when a processing step fails unexpectedly."""

    pass


class ValidationError(SanitizerError):
    """Raised when caller input is malformed (e.g., text that is not a str)."""

    pass
