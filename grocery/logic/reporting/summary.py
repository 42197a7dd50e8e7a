"""Grocery list summary: shopping progress and per-category subtotals."""
from collections import OrderedDict
from typing import Any, Dict

from grocery.domain.GroceryList import GroceryList
from grocery.utilities.constants import CATEGORY_ORDER


def compute_list_progress(grocery_list: GroceryList) -> Dict[str, Any]:
    """Checked / purchased counts and the checked percentage (0 for an empty list)."""
    items = grocery_list.items if grocery_list else []
    total = len(items)
    checked = sum(1 for i in items if i.checked)
    purchased = sum(1 for i in items if i.purchased)
    return {
        'total': total,
        'checked': checked,
        'purchased': purchased,
        'percent_checked': round(checked / total * 100, 1) if total else 0.0,
    }


def compute_category_summary(grocery_list: GroceryList):
    """Group items by category in store order.

    Returns structure:
    {
      'produce': {'count': int, 'checked': int, 'subtotal': float, 'items': [item ids]},
      ...
    }
    Only categories that have items are present.
    """
    groups: Dict[str, Dict[str, Any]] = OrderedDict()
    if not grocery_list:
        return groups
    ranked = sorted({i.category or 'other' for i in grocery_list.items},
                    key=lambda c: CATEGORY_ORDER.index(c) if c in CATEGORY_ORDER else len(CATEGORY_ORDER))
    for category in ranked:
        groups[category] = {'count': 0, 'checked': 0, 'subtotal': 0.0, 'items': []}
    for item in grocery_list.items:
        g = groups[item.category or 'other']
        g['count'] += 1
        g['checked'] += 1 if item.checked else 0
        g['subtotal'] += item.estimated_price or 0.0
        g['items'].append(item.id)
    for g in groups.values():
        g['subtotal'] = round(g['subtotal'], 2)
    return groups


def compute_list_summary(grocery_list: GroceryList) -> Dict[str, Any]:
    return {
        'id': grocery_list.id,
        'budget_status': grocery_list.metadata.get('budgetStatus'),
        'total_estimated_cost': grocery_list.metadata.get('totalEstimatedCost'),
        'progress': compute_list_progress(grocery_list),
        'categories': compute_category_summary(grocery_list),
    }


__all__ = ["compute_list_progress", "compute_category_summary", "compute_list_summary"]
