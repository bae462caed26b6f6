# sanitizer/engine/registry.py

"""Registry of invisible code points and their categories."""

import logging
from typing import Dict, FrozenSet, Optional, Tuple

from sanitizer.core.definitions import InvisibleCategory
from sanitizer.core.loader import PatternLoader

logger = logging.getLogger(__name__)


class InvisibleCharacterRegistry:
    """Immutable lookup of invisible code points.

    Explicit categories are merged into one frozen set for membership and an
    index for category resolution. The TAG and IVS blocks are checked by
    range comparison instead of being expanded into the set.
    """

    def __init__(
        self,
        category_sets: Dict[str, FrozenSet[int]],
        ranges: Dict[str, Tuple[int, int]],
    ) -> None:
        self._category_sets = {
            category: frozenset(points) for category, points in category_sets.items()
        }
        self._ranges: Tuple[Tuple[str, int, int], ...] = tuple(
            (category, ranges[category][0], ranges[category][1])
            for category in InvisibleCategory.RANGES
            if category in ranges
        )

        self._category_index: Dict[int, str] = {}
        for category in InvisibleCategory.EXPLICIT:
            for point in self._category_sets.get(category, ()):
                self._category_index.setdefault(point, category)

        self._members: FrozenSet[int] = frozenset(self._category_index)

        logger.debug(
            "Invisible character registry built",
            extra={
                "explicit_count": len(self._members),
                "range_count": len(self._ranges),
            },
        )

    @classmethod
    def from_loader(cls, loader: Optional[PatternLoader] = None) -> "InvisibleCharacterRegistry":
        loader = loader or PatternLoader.get_instance()
        return cls(loader.get_category_sets(), loader.get_ranges())

    def _range_category(self, code_point: int) -> Optional[str]:
        for category, start, end in self._ranges:
            if start <= code_point <= end:
                return category
        return None

    def is_invisible(self, code_point: int) -> bool:
        """Returns True if ``code_point`` belongs to any category."""
        if code_point in self._members:
            return True
        return self._range_category(code_point) is not None

    def category_of(self, code_point: int) -> Optional[str]:
        """Returns the category of ``code_point``, or None if it is visible.

        Ranges are checked first since their members are not indexed.
        """
        category = self._range_category(code_point)
        if category is not None:
            return category
        return self._category_index.get(code_point)

    def code_points(self, category: str) -> FrozenSet[int]:
        """Returns the explicit members of ``category`` (empty for ranges)."""
        return self._category_sets.get(category, frozenset())

    def __contains__(self, code_point: object) -> bool:
        return isinstance(code_point, int) and self.is_invisible(code_point)

    def __repr__(self):
        return (
            f"<InvisibleCharacterRegistry "
            f"explicit={len(self._members)} "
            f"ranges={[c for c, _, _ in self._ranges]}>"
        )
