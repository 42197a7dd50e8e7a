"""Ingredient categorizer: keyword rules evaluated in a fixed order."""
from typing import Iterable, List, Sequence, Tuple

from grocery.utilities.constants import CATEGORY_KEYWORDS

__all__ = ["CategoryRules", "FALLBACK_CATEGORY"]

FALLBACK_CATEGORY = "other"


class CategoryRules:
    """Ordered ``(category, keywords)`` rules; the first rule with a substring hit wins.

    An ingredient matching keywords of two categories lands in whichever rule
    comes first, so the order of ``rules`` is part of the output contract.
    """

    def __init__(self, rules: Iterable[Tuple[str, Sequence[str]]]):
        self.rules: List[Tuple[str, Tuple[str, ...]]] = [
            (category, tuple(k.lower() for k in keywords)) for category, keywords in rules
        ]

    @classmethod
    def default(cls) -> "CategoryRules":
        return cls(CATEGORY_KEYWORDS)

    def categorize(self, ingredient_name: str) -> str:
        name = (ingredient_name or "").lower()
        for category, keywords in self.rules:
            if any(k in name for k in keywords):
                return category
        return FALLBACK_CATEGORY
