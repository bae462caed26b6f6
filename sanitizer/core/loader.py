# sanitizer/core/loader.py

"""Loader for the invisible character table and cleaning patterns."""

import yaml
import logging
import threading
from pathlib import Path
from typing import Dict, List, Any, Optional, FrozenSet, Tuple, Union

from sanitizer.core.definitions import InvisibleCategory, PatternName
from sanitizer.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS_PATH = Path(__file__).parent / "patterns.yaml"

MAX_CODE_POINT = 0x10FFFF


def _is_code_point(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= MAX_CODE_POINT
    )


class PatternLoader:
    """Loads and validates the pattern table.

    The bundled table is loaded once and shared for the process lifetime via
    ``get_instance()``. Other tables can be loaded by constructing a loader
    with an explicit path. Loaded data is never mutated.
    """

    _instance: Optional["PatternLoader"] = None
    _lock = threading.Lock()

    def __init__(self, config_path: Union[str, Path, None] = None) -> None:
        self.config_path = Path(config_path) if config_path else DEFAULT_PATTERNS_PATH
        self._config: Dict[str, Any] = {}
        self._category_sets: Dict[str, FrozenSet[int]] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Loads the YAML table from ``self.config_path``.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        config_path = self.config_path
        try:
            if not config_path.exists():
                error_msg = f"Configuration file not found: {config_path}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            with open(config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f)

            if not self._config or not isinstance(self._config, dict):
                raise ConfigurationError("Configuration file is empty or invalid")

            self._validate_config()

            self._category_sets = {
                category: frozenset(points)
                for category, points in self._config["invisible_characters"].items()
            }

            logger.info(
                "Pattern table loaded successfully",
                extra={
                    "config_path": str(config_path),
                    "category_count": len(self._category_sets),
                    "pattern_count": len(self._config["cleaning_patterns"]),
                },
            )

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse {config_path.name}: {e}") from e
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error(f"Configuration loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def _validate_config(self) -> None:
        """Validates sections, category disjointness, ranges and patterns.

        Raises:
            ConfigurationError: If the table is malformed.
        """
        required_sections = [
            "invisible_characters",
            "invisible_ranges",
            "cleaning_patterns",
        ]
        missing = [s for s in required_sections if s not in self._config]

        if missing:
            error_msg = f"Missing required configuration sections: {missing}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        self._validate_categories(self._config["invisible_characters"])
        self._validate_ranges(self._config["invisible_ranges"])
        self._validate_patterns(self._config["cleaning_patterns"])

    @staticmethod
    def _validate_categories(categories: Any) -> None:
        if not isinstance(categories, dict):
            raise ConfigurationError("invisible_characters must be a mapping")

        missing = [c for c in InvisibleCategory.EXPLICIT if c not in categories]
        if missing:
            raise ConfigurationError(f"Missing invisible character categories: {missing}")

        owner: Dict[int, str] = {}
        for category, points in categories.items():
            if category not in InvisibleCategory.EXPLICIT:
                raise ConfigurationError(f"Unknown invisible category: {category}")
            if not isinstance(points, list):
                raise ConfigurationError(f"Category {category} must be a list")

            for point in points:
                if not _is_code_point(point):
                    raise ConfigurationError(
                        f"Invalid code point {point!r} in category {category}"
                    )
                # A code point may belong to one category only
                if owner.get(point, category) != category:
                    raise ConfigurationError(
                        f"Code point U+{point:04X} listed in both "
                        f"{owner[point]} and {category}"
                    )
                owner[point] = category

    @staticmethod
    def _validate_ranges(ranges: Any) -> None:
        if not isinstance(ranges, dict):
            raise ConfigurationError("invisible_ranges must be a mapping")

        for category in InvisibleCategory.RANGES:
            bounds = ranges.get(category)
            if (
                not isinstance(bounds, list)
                or len(bounds) != 2
                or not all(_is_code_point(b) for b in bounds)
                or bounds[0] > bounds[1]
            ):
                raise ConfigurationError(
                    f"Range {category} must be [start, end] code points, got {bounds!r}"
                )

    @staticmethod
    def _validate_patterns(patterns: Any) -> None:
        if not isinstance(patterns, dict):
            raise ConfigurationError("cleaning_patterns must be a mapping")

        missing = [p for p in PatternName.REQUIRED if p not in patterns]
        if missing:
            raise ConfigurationError(f"Missing cleaning patterns: {missing}")

        for name, definition in patterns.items():
            if not isinstance(definition, dict) or not isinstance(
                definition.get("regex"), str
            ):
                raise ConfigurationError(f"Pattern {name} must define a 'regex' string")
            if not isinstance(definition.get("replacement", ""), str):
                raise ConfigurationError(f"Pattern {name} replacement must be a string")
            if not isinstance(definition.get("flags", []), list):
                raise ConfigurationError(f"Pattern {name} flags must be a list")

    @classmethod
    def get_instance(cls) -> "PatternLoader":
        """Returns the shared loader for the bundled pattern table."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def get_category_sets(self) -> Dict[str, FrozenSet[int]]:
        """Returns the explicit code point set for each category."""
        return dict(self._category_sets)

    def get_ranges(self) -> Dict[str, Tuple[int, int]]:
        """Returns inclusive (start, end) bounds for each range category."""
        return {
            category: (bounds[0], bounds[1])
            for category, bounds in self._config["invisible_ranges"].items()
            if category in InvisibleCategory.RANGES
        }

    def get_pattern(self, name: str) -> Dict[str, Any]:
        """Returns a pattern definition with 'regex', 'flags', 'replacement'.

        Args:
            name: Pattern name constant (e.g., PatternName.MARKDOWN_BOLD)

        Raises:
            ConfigurationError: If the pattern is not defined.
        """
        definition = self._config["cleaning_patterns"].get(name)
        if definition is None:
            raise ConfigurationError(f"Pattern not defined: {name}")
        return {
            "regex": definition["regex"],
            "flags": list(definition.get("flags", [])),
            "replacement": definition.get("replacement", ""),
        }

    def get_pattern_names(self) -> List[str]:
        return list(self._config["cleaning_patterns"])
