"""Dietary profile: restrictions, allergies, cuisines and favourite ingredients."""
from typing import Dict, List, Optional

FAVORITE_KEYS = ("proteins", "vegetables", "fruits", "grains")


def _str_list(value) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v).strip() for v in value if v is not None and str(v).strip()]


class DietaryProfile:
    def __init__(self, restrictions: Optional[List[str]] = None, allergies: Optional[List[str]] = None,
                 cuisine_preferences: Optional[List[str]] = None,
                 favorite_ingredients: Optional[Dict[str, List[str]]] = None,
                 prefer_preferred_variant: bool = False, disliked_foods: Optional[List[str]] = None):
        self.restrictions = restrictions[:] if restrictions else []
        self.allergies = allergies[:] if allergies else []
        self.cuisine_preferences = cuisine_preferences[:] if cuisine_preferences else []
        fav = favorite_ingredients or {}
        self.favorite_ingredients = {k: list(fav.get(k) or []) for k in FAVORITE_KEYS}
        self.prefer_preferred_variant = prefer_preferred_variant
        self.disliked_foods = disliked_foods[:] if disliked_foods else []

    def favorites(self, bucket: str) -> List[str]:
        return self.favorite_ingredients.get(bucket, [])

    def __str__(self) -> str:
        return (f"Restrictions: {', '.join(self.restrictions) or '-'} - Allergies: {', '.join(self.allergies) or '-'}"
                f" - Cuisines: {', '.join(self.cuisine_preferences) or '-'}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data, prefer_preferred_variant: bool = False):
        d = dict(data) if isinstance(data, dict) else {}
        fav_raw = d.get("favoriteIngredients") if isinstance(d.get("favoriteIngredients"), dict) else {}
        return DietaryProfile(
            restrictions=[r.lower() for r in _str_list(d.get("restrictions"))],
            allergies=_str_list(d.get("allergies")),
            cuisine_preferences=_str_list(d.get("cuisinePreferences")),
            favorite_ingredients={k: _str_list(fav_raw.get(k)) for k in FAVORITE_KEYS},
            prefer_preferred_variant=prefer_preferred_variant,
            disliked_foods=_str_list(d.get("dislikedFoods")),
        )
