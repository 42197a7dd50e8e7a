"""Item assembler.

Turns favourite-ingredient preferences into priced, quantified candidate
items scaled to the household, then appends cuisine staples. This is the
only place where raw preference strings become ``GroceryItem`` objects.
"""
from __future__ import annotations

import logging
import math
from typing import Dict, List

from grocery.domain.DietaryProfile import DietaryProfile
from grocery.domain.GroceryItem import GroceryItem
from grocery.logic.pricing.catalog import PriceCatalog, normalize_key
from grocery.logic.shopping.categorizer import FALLBACK_CATEGORY, CategoryRules
from grocery.logic.shopping.staples import CuisineStapleTable
from grocery.utilities.constants import FAVORITE_BUCKETS, FLAT_QUANTITY_BUCKETS

logger = logging.getLogger(__name__)

__all__ = ["ItemAssembler", "round_half_up"]


def round_half_up(value: float) -> int:
    # round() would send 2.5 to 2
    return int(math.floor(value + 0.5))


class ItemAssembler:
    def __init__(self, catalog: PriceCatalog, rules: CategoryRules, staples: CuisineStapleTable):
        self.catalog = catalog
        self.rules = rules
        self.staple_table = staples

    def _category(self, name: str, fallback: str) -> str:
        category = self.rules.categorize(name)
        return fallback if category == FALLBACK_CATEGORY else category

    def favorite_items(self, dietary: DietaryProfile, scaling_factor: float) -> List[GroceryItem]:
        items: List[GroceryItem] = []
        prefer = dietary.prefer_preferred_variant
        for bucket, cap, base_qty, unit, fallback_category, meals, prefix in FAVORITE_BUCKETS:
            for raw in dietary.favorites(bucket)[:cap]:
                price = self.catalog.price_of(raw, prefer)["price"]
                if bucket in FLAT_QUANTITY_BUCKETS:
                    quantity = base_qty
                    estimated = price
                else:
                    quantity = round_half_up(base_qty * scaling_factor)
                    estimated = price * base_qty * scaling_factor
                items.append(GroceryItem(
                    id=f"{prefix}_{normalize_key(raw)}",
                    name=raw[:1].upper() + raw[1:],
                    quantity=quantity,
                    unit=unit,
                    category=self._category(raw, fallback_category),
                    estimated_price=round(estimated, 2),
                    priority="essential",
                    for_meals=meals,
                ))
        return items

    def assemble(self, dietary: DietaryProfile, scaling_factor: float) -> List[GroceryItem]:
        candidates = self.favorite_items(dietary, scaling_factor)
        candidates += self.staple_table.staples(dietary.cuisine_preferences, self.catalog, self.rules)
        unique: Dict[str, GroceryItem] = {}
        for item in candidates:
            if item.id in unique:
                logger.debug("Dropping duplicate candidate %s", item.id)
                continue
            unique[item.id] = item
        logger.debug("Assembled %d candidate items (scaling %.2f)", len(unique), scaling_factor)
        return list(unique.values())
