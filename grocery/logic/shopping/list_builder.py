"""Grocery list builder.

Provides sort_items(items) and assemble_list(...): the final stage that orders
resolved items by store category then priority and packages the metadata.
"""
from datetime import date, timedelta
from typing import List, Optional, Sequence
from uuid import uuid4

from grocery.domain.Budget import BudgetPolicy
from grocery.domain.GroceryItem import GroceryItem
from grocery.domain.GroceryList import GroceryList
from grocery.domain.Household import HouseholdComposition
from grocery.logic.shopping.budget import BudgetResolution
from grocery.utilities.constants import CATEGORY_ORDER, LIST_DURATION_DAYS, PRIORITY_ORDER

_CATEGORY_RANK = {c: i for i, c in enumerate(CATEGORY_ORDER)}
_PRIORITY_RANK = {p: i for i, p in enumerate(PRIORITY_ORDER)}


def _sort_key(item: GroceryItem):
    # Unknown categories/priorities sort after the known ones
    return (_CATEGORY_RANK.get(item.category, len(CATEGORY_ORDER)),
            _PRIORITY_RANK.get(item.priority, len(PRIORITY_ORDER)))


def sort_items(items: Sequence[GroceryItem]) -> List[GroceryItem]:
    """Category order first, then priority; sorted() keeps equal items in input order."""
    return sorted(items, key=_sort_key)


def assemble_list(resolution: BudgetResolution, household: HouseholdComposition, budget: BudgetPolicy,
                  user_id: str, *, today: Optional[date] = None) -> GroceryList:
    """Build the GroceryList for one generation call.

    Args:
        resolution: Budget resolver output (items, status, notices, total).
        household: Household the list was scaled for.
        budget: Budget policy the list was checked against.
        user_id: Owner of the list.
        today: First day of the shopping week (defaults to today).

    Returns:
        GroceryList with sorted items and populated metadata.
    """
    start = today or date.today()
    items = sort_items(resolution.items)
    return GroceryList(
        id=uuid4().hex,
        user_id=user_id,
        week_starting=start,
        week_ending=start + timedelta(days=LIST_DURATION_DAYS),
        metadata={
            "householdSize": household.total_members,
            "totalEstimatedCost": resolution.total_cost,
            "budgetLimit": budget.weekly_limit,
            "budgetStatus": resolution.budget_status,
            "itemCount": len(items),
            "currency": budget.currency,
        },
        items=items,
        warnings=resolution.warnings,
        suggestions=resolution.suggestions,
    )


__all__ = ["assemble_list", "sort_items"]
