"""Ingredient price catalog.

Lookup of standard and preferred-variant (e.g. organic) unit prices keyed by
normalized ingredient name. Unknown ingredients are not an error: they are
priced at the configured default price with unit ``"item"`` so every
candidate item carries *some* price and budget totals never skip an item.
Testers should expect that fallback rather than an exception.
"""
from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Optional

from grocery.utilities.config import DEFAULT_PRICE
from grocery.utilities.constants import DEFAULT_UNIT, INGREDIENT_PRICES
from grocery.utilities.errors import CatalogError

logger = logging.getLogger(__name__)

__all__ = ["IngredientPriceEntry", "PriceCatalog", "normalize_key"]

_WHITESPACE = re.compile(r"\s+")


def normalize_key(name: str) -> str:
    """Lowercase and join words with underscores: 'Olive Oil' -> 'olive_oil'."""
    return _WHITESPACE.sub("_", (name or "").strip().lower())


class IngredientPriceEntry:
    __slots__ = ("key", "unit_price", "preferred_unit_price", "unit")

    def __init__(self, key: str, unit_price: float, preferred_unit_price: Optional[float] = None,
                 unit: str = DEFAULT_UNIT):
        object.__setattr__(self, "key", normalize_key(key))
        object.__setattr__(self, "unit_price", float(unit_price))
        object.__setattr__(self, "preferred_unit_price",
                           float(preferred_unit_price) if preferred_unit_price is not None else None)
        object.__setattr__(self, "unit", unit)

    def __setattr__(self, name, value):
        raise AttributeError("IngredientPriceEntry is immutable")

    def __repr__(self) -> str:
        return f"IngredientPriceEntry({self.key!r}, {self.unit_price}, {self.preferred_unit_price}, {self.unit!r})"

    @staticmethod
    def from_dict(key: str, data) -> "IngredientPriceEntry":
        d = dict(data) if isinstance(data, dict) else {}
        if "price" not in d:
            raise CatalogError(f"Price entry for {key!r} has no 'price'")
        return IngredientPriceEntry(key, d["price"], d.get("organic", d.get("preferred")), d.get("unit", DEFAULT_UNIT))


class PriceCatalog:
    """Read-only price table; built once and shared between engine calls."""

    def __init__(self, entries: Iterable[IngredientPriceEntry], default_price: float = DEFAULT_PRICE,
                 default_unit: str = DEFAULT_UNIT):
        self._entries: Dict[str, IngredientPriceEntry] = {e.key: e for e in entries}
        self.default_price = default_price
        self.default_unit = default_unit

    @classmethod
    def default(cls) -> "PriceCatalog":
        return cls(IngredientPriceEntry(key, price, preferred, unit)
                   for key, (price, preferred, unit) in INGREDIENT_PRICES.items())

    @classmethod
    def from_json(cls, path: Path, default_price: float = DEFAULT_PRICE) -> "PriceCatalog":
        """Load a catalog from ``{"key": {"price": 1.0, "organic": 2.0, "unit": "lb"}, ...}``."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"Invalid JSON in price catalog {path}: {e}") from e
        except OSError as e:
            raise CatalogError(f"Cannot read price catalog {path}: {e}") from e
        if not isinstance(raw, dict):
            raise CatalogError(f"Price catalog {path} must be a JSON object")
        catalog = cls((IngredientPriceEntry.from_dict(k, v) for k, v in raw.items()), default_price)
        logger.info("Loaded %d price entries from %s", len(catalog), path)
        return catalog

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ingredient_key: str) -> bool:
        return normalize_key(ingredient_key) in self._entries

    def entry(self, ingredient_key: str) -> Optional[IngredientPriceEntry]:
        return self._entries.get(normalize_key(ingredient_key))

    def price_of(self, ingredient_key: str, prefer_preferred_variant: bool = False) -> Dict[str, object]:
        entry = self.entry(ingredient_key)
        if entry is None:
            logger.debug("No price for %r, using default %.2f", ingredient_key, self.default_price)
            return {"price": self.default_price, "unit": self.default_unit}
        if prefer_preferred_variant and entry.preferred_unit_price:
            return {"price": entry.preferred_unit_price, "unit": entry.unit}
        return {"price": entry.unit_price, "unit": entry.unit}
