# sanitizer/logic/variants.py

"""Surface-form generation strategies for word exchanges."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple, Type

from sanitizer.core.domain import VarianceSettings

logger = logging.getLogger(__name__)


class VariantStrategy(ABC):
    """Base class for a family of surface forms."""

    @abstractmethod
    def expand(self, word: str) -> List[str]:
        """Returns the extra forms of ``word`` this strategy contributes.

        Args:
            word: The literal bad word

        Returns:
            Forms to match in addition to ``word`` itself (may repeat it)
        """
        pass


class CaseVariants(VariantStrategy):
    """Lowercase, uppercase and capitalized forms."""

    def expand(self, word: str) -> List[str]:
        return [word.lower(), word.upper(), word[:1].upper() + word[1:].lower()]


class PluralVariants(VariantStrategy):
    """Naive English plural/singular forms.

    Suffix checks are case-sensitive: ``"BUS"`` does not end in ``"s"``.
    """

    def expand(self, word: str) -> List[str]:
        forms = []
        if not word.endswith("s"):
            forms.append(word + "s")
        if word.endswith("s") and len(word) > 1:
            forms.append(word[:-1])
        if word.endswith("y") and len(word) > 1:
            forms.append(word[:-1] + "ies")
        return forms


# Settings flag -> strategy, in the order forms are appended
_STRATEGIES: Tuple[Tuple[str, Type[VariantStrategy]], ...] = (
    ("case_variation", CaseVariants),
    ("plural_variation", PluralVariants),
)

_strategy_cache: Dict[Type[VariantStrategy], VariantStrategy] = {}


def _get_strategy(strategy_class: Type[VariantStrategy]) -> VariantStrategy:
    if strategy_class not in _strategy_cache:
        _strategy_cache[strategy_class] = strategy_class()
    return _strategy_cache[strategy_class]


def generate_word_variations(word: str, settings: VarianceSettings) -> List[str]:
    """Expands ``word`` into its deduplicated surface forms.

    The literal word always comes first. With variance disabled it is the
    only form.

    Args:
        word: Literal bad word
        settings: Which variant families to include

    Returns:
        Ordered, duplicate-free list of forms
    """
    variations = [word]

    if not settings.enabled:
        return variations

    for flag, strategy_class in _STRATEGIES:
        if getattr(settings, flag):
            variations.extend(_get_strategy(strategy_class).expand(word))

    if settings.synonym_variation:
        logger.debug("Synonym variation requested; no synonym forms are generated")

    return list(dict.fromkeys(variations))
