"""Grocery list service: store-backed entry points with structured results.

Every function returns ``{"success": True, ...}`` or
``{"success": False, "error": <message>}`` and never raises for expected
conditions. Store failures are passed through unchanged (no retry).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from grocery.events.event_helpers import publish_item_updated, publish_list_generated
from grocery.infra.GroceryList_Repository import GroceryListStore, JsonGroceryListRepository
from grocery.logic.shopping.engine import GroceryListEngine, default_engine
from grocery.utilities.errors import ERROR_NOT_FOUND, GroceryError, ProfileError, error_code

logger = logging.getLogger(__name__)

__all__ = ["default_store", "generate_grocery_list", "get_grocery_list", "get_user_grocery_lists",
           "update_grocery_item"]

_default_store: Optional[GroceryListStore] = None


def default_store() -> GroceryListStore:
    global _default_store
    if _default_store is None:
        _default_store = JsonGroceryListRepository()
    return _default_store


def generate_grocery_list(user_id: str, user_profile, *, store: Optional[GroceryListStore] = None,
                          engine: Optional[GroceryListEngine] = None) -> Dict[str, Any]:
    """Generate, persist and return a grocery list for ``user_id``.

    Returns {"success": True, "data": GroceryList} on success. The returned
    list carries the id assigned by the store.
    """
    try:
        engine = engine or default_engine()
    except (GroceryError, OSError) as e:
        logger.error("Cannot load the price catalog: %s", e)
        return {"success": False, "error": str(e), "code": error_code(e)}
    try:
        grocery_list = engine.generate(user_id, user_profile)
    except ProfileError as e:
        logger.warning("Cannot generate grocery list for user %s: %s", user_id, e)
        return {"success": False, "error": str(e), "code": error_code(e)}

    try:
        store = store or default_store()
        grocery_list.id = store.save_list(user_id, grocery_list)
    except (GroceryError, OSError) as e:
        logger.error("Error saving grocery list for user %s: %s", user_id, e)
        return {"success": False, "error": str(e), "code": error_code(e)}

    publish_list_generated(grocery_list)
    return {"success": True, "data": grocery_list}


def get_user_grocery_lists(user_id: str, *, store: Optional[GroceryListStore] = None) -> Dict[str, Any]:
    store = store or default_store()
    try:
        lists = store.lists_for_user(user_id)
    except (GroceryError, OSError) as e:
        logger.error("Error getting grocery lists for user %s: %s", user_id, e)
        return {"success": False, "error": str(e), "code": error_code(e)}
    return {"success": True, "data": lists}


def get_grocery_list(list_id: str, *, store: Optional[GroceryListStore] = None) -> Dict[str, Any]:
    store = store or default_store()
    try:
        grocery_list = store.get_list(list_id)
    except (GroceryError, OSError) as e:
        logger.error("Error reading grocery list %s: %s", list_id, e)
        return {"success": False, "error": str(e), "code": error_code(e)}
    if grocery_list is None:
        return {"success": False, "error": f"Grocery list not found: {list_id}", "code": ERROR_NOT_FOUND}
    return {"success": True, "data": grocery_list}


def update_grocery_item(list_id: str, item_id: str, updates: Dict[str, Any], *,
                        store: Optional[GroceryListStore] = None) -> Dict[str, Any]:
    """Toggle checked / purchased on one item of a stored list."""
    store = store or default_store()
    try:
        updated = store.update_item(list_id, item_id, updates)
    except (GroceryError, OSError) as e:
        logger.error("Error updating grocery item %s in list %s: %s", item_id, list_id, e)
        return {"success": False, "error": str(e), "code": error_code(e)}
    if not updated:
        return {"success": False, "error": f"Item {item_id} not found in grocery list {list_id}", "code": ERROR_NOT_FOUND}
    publish_item_updated(list_id, item_id, updates)
    return {"success": True}
