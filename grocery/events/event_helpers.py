"""Event helper utilities.

Helpers publishing grocery list events on the global event bus.

Quick import:
    from grocery.events.event_helpers import (
        publish_list_generated, publish_over_budget, publish_item_updated
    )
"""
from __future__ import annotations
from typing import Any, Dict

from grocery.domain.GroceryList import GroceryList
from .Event_Bus import (
    publish_event,
    GROCERY_LIST_GENERATED, GROCERY_OVER_BUDGET, GROCERY_ITEM_UPDATED,
)

__all__ = [
    'publish_list_generated', 'publish_over_budget', 'publish_item_updated',
    'GROCERY_LIST_GENERATED', 'GROCERY_OVER_BUDGET', 'GROCERY_ITEM_UPDATED',
]


def publish_list_generated(grocery_list: GroceryList):
    """Publish a grocery.list_generated event, plus grocery.over_budget when warnings exist."""
    publish_event(GROCERY_LIST_GENERATED, {
        'list_id': grocery_list.id,
        'user_id': grocery_list.user_id,
        'item_count': grocery_list.metadata.get('itemCount', len(grocery_list.items)),
        'budget_status': grocery_list.metadata.get('budgetStatus'),
    })
    if grocery_list.warnings:
        publish_over_budget(grocery_list)


def publish_over_budget(grocery_list: GroceryList):
    publish_event(GROCERY_OVER_BUDGET, {
        'list_id': grocery_list.id,
        'user_id': grocery_list.user_id,
        'warnings': [w.to_dict() for w in grocery_list.warnings],
    })


def publish_item_updated(list_id: str, item_id: str, fields: Dict[str, Any]):
    publish_event(GROCERY_ITEM_UPDATED, {
        'list_id': list_id,
        'item_id': item_id,
        'fields': dict(fields),
    })
