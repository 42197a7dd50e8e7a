"""Cuisine staples: pantry basics common to the cuisines a household cooks."""
from typing import Dict, Iterable, List, Sequence

from grocery.domain.GroceryItem import GroceryItem
from grocery.logic.pricing.catalog import PriceCatalog, normalize_key
from grocery.logic.shopping.categorizer import CategoryRules
from grocery.utilities.constants import CUISINE_STAPLES

__all__ = ["CuisineStapleTable", "display_name"]


def display_name(key: str) -> str:
    """'olive_oil' -> 'Olive Oil'"""
    return " ".join(word.capitalize() for word in key.replace("_", " ").split())


class CuisineStapleTable:
    def __init__(self, table: Dict[str, Sequence[str]]):
        self.table = {normalize_key(cuisine): [normalize_key(s) for s in staples]
                      for cuisine, staples in table.items()}

    @classmethod
    def default(cls) -> "CuisineStapleTable":
        return cls(CUISINE_STAPLES)

    def staple_keys(self, cuisine_preferences: Iterable[str]) -> List[str]:
        '''Deduplicated staple keys in first-seen order; unknown cuisines add nothing.'''
        seen: Dict[str, None] = {}
        for cuisine in cuisine_preferences or []:
            for staple in self.table.get(normalize_key(cuisine), []):
                seen.setdefault(staple, None)
        return list(seen)

    def staples(self, cuisine_preferences: Iterable[str], catalog: PriceCatalog,
                rules: CategoryRules) -> List[GroceryItem]:
        items = []
        for key in self.staple_keys(cuisine_preferences):
            priced = catalog.price_of(key)
            items.append(GroceryItem(
                id=f"staple_{key}",
                name=display_name(key),
                quantity=1,
                unit=priced["unit"],
                category=rules.categorize(key),
                estimated_price=round(priced["price"], 2),
                priority="staple",
                for_meals=[],
            ))
        return items
