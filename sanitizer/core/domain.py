# sanitizer/core/domain.py

"""Domain models for sanitizer configuration and results."""

import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sanitizer.core.definitions import InvisibleCategory, PatternName
from sanitizer.core.exceptions import ValidationError

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _normalize_keys(cls: type, data: Mapping[str, Any]) -> Dict[str, Any]:
    """Maps camelCase or snake_case keys onto the dataclass field names.

    Raises:
        ValidationError: If the mapping is not a mapping or holds unknown keys.
    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"{cls.__name__} expects a mapping, got {type(data).__name__}"
        )

    known = {f.name for f in fields(cls)}
    normalized: Dict[str, Any] = {}

    for key, value in data.items():
        name = _to_snake(str(key))
        if name not in known:
            raise ValidationError(f"Unknown {cls.__name__} field: {key!r}")
        normalized[name] = value

    return normalized


def _require_bools(cls: type, values: Dict[str, Any]) -> None:
    for name, value in values.items():
        if not isinstance(value, bool):
            raise ValidationError(
                f"{cls.__name__}.{name} must be a boolean, got {type(value).__name__}"
            )


@dataclass(frozen=True)
class CleaningOptions:
    """Boolean switches, one per cleaning transformation.

    Detection order is irrelevant; cleaning applies the enabled steps in a
    fixed order (see ``sanitizer.engine.cleaner``).
    """

    invisible_chars: bool = True
    markdown_headers: bool = False
    markdown_bold: bool = False
    repeating_chars: bool = False
    formatting_lines: bool = False
    extra_whitespace: bool = False
    word_exchanges: bool = False

    @classmethod
    def defaults(cls) -> "CleaningOptions":
        """Only invisible character removal enabled."""
        return cls()

    @classmethod
    def all_enabled(cls) -> "CleaningOptions":
        return cls(**{f.name: True for f in fields(cls)})

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CleaningOptions":
        """Builds options from a mapping with camelCase or snake_case keys.

        Missing keys take the dataclass defaults.

        Raises:
            ValidationError: On unknown keys or non-boolean values.
        """
        values = _normalize_keys(cls, data)
        _require_bools(cls, values)
        return cls(**values)

    def enabled_patterns(self) -> Tuple[str, ...]:
        """Returns the enabled optional pattern names, in application order."""
        return tuple(
            name
            for name in PatternName.OPTIONAL
            if getattr(self, _to_snake(name))
        )

    def to_dict(self) -> Dict[str, bool]:
        return {_to_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class WordExchange:
    """A single bad-word to good-word substitution rule.

    Attributes:
        id: Caller-assigned unique identifier
        bad_word: Word to find (whole-word, case-insensitive)
        good_word: Literal replacement
        enabled: Whether the rule participates at all
    """

    id: str
    bad_word: str
    good_word: str
    enabled: bool = True

    @property
    def is_active(self) -> bool:
        """Enabled, with non-blank source and target words."""
        return (
            self.enabled
            and bool(self.bad_word.strip())
            and bool(self.good_word.strip())
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WordExchange":
        """Builds an exchange from ``{id, badWord, goodWord, enabled}``.

        Raises:
            ValidationError: On unknown keys or wrongly typed values.
        """
        values = _normalize_keys(cls, data)

        for name in ("bad_word", "good_word"):
            if not isinstance(values.get(name), str):
                raise ValidationError(f"WordExchange.{name} must be a string")

        values.setdefault("id", "")
        if not isinstance(values["id"], str):
            raise ValidationError("WordExchange.id must be a string")
        if not isinstance(values.get("enabled", True), bool):
            raise ValidationError("WordExchange.enabled must be a boolean")

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {_to_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class VarianceSettings:
    """Controls which surface forms of a bad word are generated.

    Attributes:
        enabled: Master switch; when off only the literal word is matched
        synonym_variation: Accepted for compatibility, generates no forms
        case_variation: Adds lower, upper and capitalized forms
        plural_variation: Adds naive English singular/plural forms
    """

    enabled: bool = False
    synonym_variation: bool = False
    case_variation: bool = True
    plural_variation: bool = True

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VarianceSettings":
        values = _normalize_keys(cls, data)
        _require_bools(cls, values)
        return cls(**values)

    def to_dict(self) -> Dict[str, bool]:
        return {_to_camel(f.name): getattr(self, f.name) for f in fields(self)}


def _empty_categories() -> Dict[str, int]:
    return {category: 0 for category in InvisibleCategory.ALL}


@dataclass
class DetectionResult:
    """Categorized breakdown of what a cleaning pass would touch.

    Attributes:
        total_count: Number of invisible characters found
        categories: Count per invisible category (always holds every category)
        positions: UTF-16 code-unit offset of each invisible character
        additional_cleaning: Count per formatting pattern and word exchange;
            None when no additional cleaning option was requested
    """

    total_count: int = 0
    categories: Dict[str, int] = field(default_factory=_empty_categories)
    positions: List[int] = field(default_factory=list)
    additional_cleaning: Optional[Dict[str, int]] = None

    @property
    def additional_total(self) -> int:
        if not self.additional_cleaning:
            return 0
        return sum(self.additional_cleaning.values())

    @property
    def total_issues(self) -> int:
        return self.total_count + self.additional_total

    def to_dict(self) -> Dict[str, Any]:
        """Returns the camelCase wire shape consumed by the UI layer."""
        data: Dict[str, Any] = {
            "totalCount": self.total_count,
            "categories": dict(self.categories),
            "positions": list(self.positions),
        }
        if self.additional_cleaning is not None:
            data["additionalCleaning"] = dict(self.additional_cleaning)
        return data


@dataclass(frozen=True)
class IssueStat:
    """One non-zero entry of a detection breakdown."""

    category: str
    count: int
    kind: str  # "invisible" or "additional"


@dataclass
class ProcessingResult:
    """Result object returned by the processing service.

    Attributes:
        original_text: Input text
        cleaned_text: Text after all enabled transformations
        detection: Detection breakdown of the input text
        stats: Non-zero breakdown entries, largest count first
        total_issues: Invisible characters plus additional cleaning matches
        character_difference: UTF-16 length removed by cleaning
        metadata: Additional processing information
    """

    original_text: str
    cleaned_text: str
    detection: DetectionResult = field(default_factory=DetectionResult)
    stats: List[IssueStat] = field(default_factory=list)
    total_issues: int = 0
    character_difference: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cleanedText": self.cleaned_text,
            "detection": self.detection.to_dict(),
            "stats": [
                {"category": s.category, "count": s.count, "type": s.kind}
                for s in self.stats
            ],
            "totalIssues": self.total_issues,
            "characterDifference": self.character_difference,
            "metadata": dict(self.metadata),
        }
