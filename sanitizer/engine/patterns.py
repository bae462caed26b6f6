# sanitizer/engine/patterns.py

"""Compiled formatting patterns used for detection and cleaning."""

import logging
import re
from typing import Dict, NamedTuple, Optional, Pattern

from sanitizer.core.exceptions import ConfigurationError
from sanitizer.core.loader import PatternLoader

logger = logging.getLogger(__name__)


class CleaningPattern(NamedTuple):
    """A compiled pattern with its replacement template."""

    name: str
    regex: Pattern[str]
    replacement: str


def _compile_flags(name: str, flag_names) -> int:
    flags = 0
    for flag_name in flag_names:
        flag = getattr(re.RegexFlag, str(flag_name).upper(), None)
        if flag is None:
            raise ConfigurationError(f"Unknown regex flag {flag_name!r} in pattern {name}")
        flags |= flag
    return flags


class PatternRegistry:
    """Compiles every pattern in the table once and serves them by name."""

    def __init__(self, loader: Optional[PatternLoader] = None) -> None:
        loader = loader or PatternLoader.get_instance()
        self._patterns: Dict[str, CleaningPattern] = {}

        for name in loader.get_pattern_names():
            definition = loader.get_pattern(name)
            flags = _compile_flags(name, definition["flags"])
            try:
                regex = re.compile(definition["regex"], flags)
            except re.error as e:
                logger.error(f"Failed to compile pattern {name}: {e}")
                raise ConfigurationError(f"Invalid regex for pattern {name}: {e}") from e

            self._patterns[name] = CleaningPattern(
                name=name, regex=regex, replacement=definition["replacement"]
            )

        logger.debug("Pattern registry compiled", extra={"pattern_count": len(self._patterns)})

    def get(self, name: str) -> CleaningPattern:
        try:
            return self._patterns[name]
        except KeyError:
            raise ConfigurationError(f"Pattern not defined: {name}") from None

    def count(self, name: str, text: str) -> int:
        """Counts non-overlapping matches of pattern ``name`` in ``text``."""
        return sum(1 for _ in self.get(name).regex.finditer(text))

    def apply(self, name: str, text: str) -> str:
        """Replaces every match of pattern ``name`` with its template."""
        pattern = self.get(name)
        return pattern.regex.sub(pattern.replacement, text)
