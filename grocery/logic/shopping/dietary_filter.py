"""Dietary and allergy filtering of candidate grocery items.

Allergies are a hard filter: a matching item is dropped whatever its
priority. Restrictions and disliked foods are rule-based soft filters.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from grocery.domain.GroceryItem import GroceryItem
from grocery.utilities.constants import (
    ALLERGEN_KEYWORDS,
    CUSTOM_ALLERGY_PREFIX,
    NO_ALLERGY,
    RESTRICTION_KEYWORDS,
)

logger = logging.getLogger(__name__)

__all__ = ["allergen_terms", "filter_items", "restriction_terms"]


def allergen_terms(allergies: Iterable[str],
                   known: Dict[str, Sequence[str]] = ALLERGEN_KEYWORDS) -> Tuple[str, ...]:
    """Substrings that exclude an item for the given allergy entries.

    The allergen text itself is always included, so an item whose name
    contains the configured allergen can never pass.
    """
    terms: List[str] = []
    for allergy in allergies or []:
        if not allergy or allergy.strip().lower() == NO_ALLERGY:
            continue
        name = allergy.strip()
        if name.lower().startswith(CUSTOM_ALLERGY_PREFIX):
            name = name[len(CUSTOM_ALLERGY_PREFIX):]
        name = name.strip().lower()
        if not name:
            continue
        terms.append(name)
        if "_" in name:
            terms.append(name.replace("_", " "))
        terms.extend(known.get(name, ()))
    return tuple(dict.fromkeys(terms))


def restriction_terms(restrictions: Iterable[str],
                      rules: Dict[str, Sequence[str]] = RESTRICTION_KEYWORDS) -> Tuple[str, ...]:
    terms: List[str] = []
    for restriction in restrictions or []:
        terms.extend(rules.get((restriction or "").strip().lower(), ()))
    return tuple(dict.fromkeys(terms))


def filter_items(items: Sequence[GroceryItem], restrictions: Iterable[str], allergies: Iterable[str],
                 disliked_foods: Iterable[str] = ()) -> List[GroceryItem]:
    """Return the items that pass every allergy, restriction and dislike rule.

    Returns a new list; order is preserved and nothing is added.
    """
    allergy_hits = allergen_terms(allergies)
    restricted = restriction_terms(restrictions)
    disliked = tuple(d.strip().lower() for d in disliked_foods or [] if d and d.strip())

    kept: List[GroceryItem] = []
    for item in items:
        name = (item.name or "").lower()
        hit = next((t for t in allergy_hits if t in name), None)
        if hit:
            logger.info("Excluded %s: allergen %r", item.name, hit)
            continue
        hit = next((t for t in restricted if t in name), None)
        if hit:
            logger.debug("Excluded %s: dietary restriction keyword %r", item.name, hit)
            continue
        if item.priority != "essential" and any(d in name for d in disliked):
            logger.debug("Excluded %s: disliked food", item.name)
            continue
        kept.append(item)
    return kept
