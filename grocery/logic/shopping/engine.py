"""Grocery list engine: the synchronous, side-effect-free generation pipeline.

    profile -> household scaling + cuisine staples
            -> item assembly (priced, quantified candidates)
            -> dietary/allergy filter
            -> budget resolution
            -> sorted GroceryList

The price, category and cuisine tables are injected so tests and regional
deployments can swap them without touching the pipeline.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from grocery.domain.GroceryList import GroceryList
from grocery.domain.UserProfile import UserProfile
from grocery.logic.pricing.catalog import PriceCatalog
from grocery.logic.shopping.assembler import ItemAssembler
from grocery.logic.shopping.budget import resolve_budget
from grocery.logic.shopping.categorizer import CategoryRules
from grocery.logic.shopping.dietary_filter import filter_items
from grocery.logic.shopping.list_builder import assemble_list
from grocery.logic.shopping.scaling import household_scaling
from grocery.logic.shopping.staples import CuisineStapleTable
from grocery.utilities.config import PRICE_CATALOG_FILE
from grocery.utilities.errors import ProfileError

logger = logging.getLogger(__name__)

__all__ = ["GroceryListEngine", "default_engine"]


class GroceryListEngine:
    def __init__(self, catalog: Optional[PriceCatalog] = None, rules: Optional[CategoryRules] = None,
                 staples: Optional[CuisineStapleTable] = None):
        self.catalog = catalog or PriceCatalog.default()
        self.rules = rules or CategoryRules.default()
        self.staples = staples or CuisineStapleTable.default()
        self.assembler = ItemAssembler(self.catalog, self.rules, self.staples)

    def generate(self, user_id: str, profile, *, today: Optional[date] = None) -> GroceryList:
        """Run the full pipeline for one user.

        Raises ProfileError when the profile is missing or the household
        scales to zero while there are preferences to quantify.
        """
        profile = UserProfile.from_dict(profile)
        dietary = profile.dietary

        scaling = household_scaling(profile.household)
        has_favorites = any(dietary.favorite_ingredients.values())
        if scaling <= 0 and has_favorites:
            raise ProfileError(
                "Household has no members to shop for; set totalMembers, adultCount or childrenAges"
            )

        candidates = self.assembler.assemble(dietary, scaling)
        allowed = filter_items(candidates, dietary.restrictions, dietary.allergies, dietary.disliked_foods)
        resolution = resolve_budget(allowed, profile.budget.weekly_limit, profile.budget.strictness,
                                    profile.budget.currency)
        grocery_list = assemble_list(resolution, profile.household, profile.budget, user_id, today=today)
        logger.info(
            "Generated grocery list for user=%s: %d candidates, %d kept, status=%s, total=%.2f",
            user_id, len(candidates), len(grocery_list.items), resolution.budget_status, resolution.total_cost,
        )
        return grocery_list


_default_engine: Optional[GroceryListEngine] = None


def default_engine() -> GroceryListEngine:
    """Engine built from the bundled tables, or PRICE_CATALOG_FILE when configured."""
    global _default_engine
    if _default_engine is None:
        catalog = PriceCatalog.from_json(PRICE_CATALOG_FILE) if PRICE_CATALOG_FILE else PriceCatalog.default()
        _default_engine = GroceryListEngine(catalog=catalog)
    return _default_engine
