"""Grocery list stores.

The engine only talks to the ``GroceryListStore`` interface. Lists are
append-only snapshots: two generations for the same user produce two lists.
Item toggles (checked / purchased) are last-write-wins.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

from grocery.domain.GroceryList import GroceryList
from grocery.infra.paths import GROCERY_LISTS_FILE
from grocery.utilities.errors import ListNotFoundError, StoreError

logger = logging.getLogger(__name__)

UPDATABLE_ITEM_FIELDS = frozenset({"checked", "purchased"})


class GroceryListStore:
    """Persistence interface for generated grocery lists."""

    def save_list(self, user_id: str, grocery_list: GroceryList) -> str:
        raise NotImplementedError

    def lists_for_user(self, user_id: str) -> List[GroceryList]:
        """Return the user's lists, most recent first."""
        raise NotImplementedError

    def get_list(self, list_id: str) -> Optional[GroceryList]:
        raise NotImplementedError

    def update_item(self, list_id: str, item_id: str, fields: Dict[str, Any]) -> bool:
        """Merge ``fields`` into one item. False when the item does not exist.

        Raises ListNotFoundError for an unknown list.
        """
        raise NotImplementedError


def _clean_fields(fields: Dict[str, Any]) -> Dict[str, bool]:
    unknown = set(fields) - UPDATABLE_ITEM_FIELDS
    if unknown:
        raise StoreError(f"Only {sorted(UPDATABLE_ITEM_FIELDS)} can be updated, got {sorted(unknown)}")
    not_bool = sorted(k for k, v in fields.items() if not isinstance(v, bool))
    if not_bool:
        raise StoreError(f"Item fields {not_bool} must be true or false")
    return dict(fields)


def _apply_item_update(record: Dict[str, Any], item_id: str, fields: Dict[str, bool]) -> bool:
    for item in record.get("items", []):
        if item.get("id") == item_id:
            item.update(fields)
            return True
    return False


def _newest_first(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    # Stored in insertion order; reverse keeps same-timestamp lists newest first
    return sorted(reversed(records), key=lambda r: r.get("createdAt", ""), reverse=True)


class InMemoryGroceryListRepository(GroceryListStore):
    def __init__(self):
        self._records: List[Dict[str, Any]] = []
        self._lock = Lock()

    def save_list(self, user_id: str, grocery_list: GroceryList) -> str:
        record = grocery_list.to_dict()
        record["userId"] = user_id
        with self._lock:
            self._records.append(record)
        return record["id"]

    def lists_for_user(self, user_id: str) -> List[GroceryList]:
        with self._lock:
            mine = [r for r in self._records if r.get("userId") == user_id]
        return [GroceryList.from_dict(r) for r in _newest_first(mine)]

    def get_list(self, list_id: str) -> Optional[GroceryList]:
        with self._lock:
            for r in self._records:
                if r.get("id") == list_id:
                    return GroceryList.from_dict(r)
        return None

    def update_item(self, list_id: str, item_id: str, fields: Dict[str, Any]) -> bool:
        clean = _clean_fields(fields)
        with self._lock:
            for r in self._records:
                if r.get("id") == list_id:
                    return _apply_item_update(r, item_id, clean)
        raise ListNotFoundError(list_id)


class JsonGroceryListRepository(GroceryListStore):
    """Stores every list in one JSON file (a list of list records)."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else GROCERY_LISTS_FILE
        self._lock = Lock()

    def _load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Invalid JSON in grocery list file {self.path}: {e}") from e
        except OSError as e:
            raise StoreError(f"Cannot read grocery list file {self.path}: {e}") from e
        if not isinstance(data, list):
            raise StoreError(f"Grocery list file {self.path} must contain a JSON list")
        return data

    def _atomic_write(self, records: List[Dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".grocery_lists_", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(records, tmp, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            finally:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
        except OSError as e:
            raise StoreError(f"Cannot write grocery list file {self.path}: {e}") from e

    def save_list(self, user_id: str, grocery_list: GroceryList) -> str:
        record = grocery_list.to_dict()
        record["userId"] = user_id
        with self._lock:
            records = self._load()
            records.append(record)
            self._atomic_write(records)
        logger.info("Saved grocery list %s for user %s (%d items)", record["id"], user_id, len(record["items"]))
        return record["id"]

    def lists_for_user(self, user_id: str) -> List[GroceryList]:
        with self._lock:
            records = self._load()
        mine = [r for r in records if r.get("userId") == user_id]
        return [GroceryList.from_dict(r) for r in _newest_first(mine)]

    def get_list(self, list_id: str) -> Optional[GroceryList]:
        with self._lock:
            records = self._load()
        for r in records:
            if r.get("id") == list_id:
                return GroceryList.from_dict(r)
        return None

    def update_item(self, list_id: str, item_id: str, fields: Dict[str, Any]) -> bool:
        clean = _clean_fields(fields)
        with self._lock:
            records = self._load()
            record = next((r for r in records if r.get("id") == list_id), None)
            if record is None:
                raise ListNotFoundError(list_id)
            if not _apply_item_update(record, item_id, clean):
                logger.warning("Item %s not found in grocery list %s", item_id, list_id)
                return False
            self._atomic_write(records)
        return True


__all__ = [
    'GroceryListStore', 'InMemoryGroceryListRepository', 'JsonGroceryListRepository', 'UPDATABLE_ITEM_FIELDS'
]
