"""Budget resolution for a candidate grocery list.

Status rules:
  - total > limit, strict:   'over'; warn with the overage, drop optional
    items and attach a cheaper-alternative hint to expensive ones.
  - total > limit, flexible: 'over' with a softer warning only when the
    overage exceeds the tolerance (15% by default); below that the list
    passes unchanged with status 'at'.
  - total < 90% of limit:    'under' with a savings suggestion.
  - otherwise:               'at'.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from grocery.domain.GroceryItem import GroceryItem
from grocery.domain.Notice import Notice
from grocery.utilities.config import ALTERNATIVE_PRICE_THRESHOLD, FLEXIBLE_TOLERANCE, UNDER_BUDGET_RATIO
from grocery.utilities.constants import ALTERNATIVE_SUGGESTION_TEXT, DEFAULT_CURRENCY

logger = logging.getLogger(__name__)

__all__ = ["BudgetResolution", "format_money", "resolve_budget", "total_cost"]


def format_money(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    if currency == "USD":
        return f"${amount:.2f}"
    return f"{amount:.2f} {currency}"


def total_cost(items: Sequence[GroceryItem]) -> float:
    return round(sum(item.estimated_price or 0.0 for item in items), 2)


class BudgetResolution:
    def __init__(self, items: List[GroceryItem], budget_status: str, total_cost: float,
                 warnings: List[Notice] = None, suggestions: List[Notice] = None):
        self.items = items
        self.budget_status = budget_status
        self.total_cost = total_cost
        self.warnings = warnings if warnings is not None else []
        self.suggestions = suggestions if suggestions is not None else []

    def __repr__(self) -> str:
        return (f"BudgetResolution(status={self.budget_status!r}, total={self.total_cost}, "
                f"items={len(self.items)}, warnings={len(self.warnings)}, suggestions={len(self.suggestions)})")


def resolve_budget(items: Sequence[GroceryItem], weekly_limit: float, strictness: str,
                   currency: str = DEFAULT_CURRENCY, *,
                   alternative_threshold: float = ALTERNATIVE_PRICE_THRESHOLD,
                   flexible_tolerance: float = FLEXIBLE_TOLERANCE,
                   under_ratio: float = UNDER_BUDGET_RATIO) -> BudgetResolution:
    """Compare the candidate total against the weekly limit.

    Returns a new item list; input items are never modified. ``total_cost``
    is the sum over the items passed in, before any strict trimming.
    """
    items = list(items)
    total = total_cost(items)
    warnings: List[Notice] = []
    suggestions: List[Notice] = []

    if total > weekly_limit:
        overage = round(total - weekly_limit, 2)
        if strictness == "strict":
            warnings.append(Notice(
                "over_budget",
                f"Total cost {format_money(total, currency)} exceeds budget by {format_money(overage, currency)}",
                overage=overage,
            ))
            kept = [item for item in items if item.priority != "optional"]
            logger.info("Strict budget exceeded by %.2f; removed %d optional items",
                        overage, len(items) - len(kept))
            items = [item.copy(alternative_suggestion=ALTERNATIVE_SUGGESTION_TEXT)
                     if item.estimated_price > alternative_threshold else item
                     for item in kept]
            status = "over"
        else:
            overage_ratio = overage / weekly_limit if weekly_limit > 0 else float("inf")
            if overage_ratio > flexible_tolerance:
                percent = "unbounded" if weekly_limit <= 0 else f"{overage_ratio * 100:.0f}%"
                warnings.append(Notice(
                    "over_budget_flexible",
                    f"Total cost {format_money(total, currency)} is {percent} over budget",
                    overage=overage,
                ))
                status = "over"
            else:
                status = "at"
    elif total < weekly_limit * under_ratio:
        savings = round(weekly_limit - total, 2)
        suggestions.append(Notice(
            "under_budget",
            f"You're under budget by {format_money(savings, currency)}! "
            f"Consider adding healthy snacks or premium items.",
            savings=savings,
        ))
        status = "under"
    else:
        status = "at"

    return BudgetResolution(items, status, total, warnings, suggestions)
