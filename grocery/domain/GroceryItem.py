"""GroceryItem domain entity: one priced, quantified line of a grocery list."""
from typing import List, Optional


class GroceryItem:
    def __init__(self, id: str = "", name: str = "", quantity: float = 0, unit: str = "item",
                 category: str = "other", estimated_price: float = 0.0, priority: str = "essential",
                 for_meals: Optional[List[str]] = None, checked: bool = False, purchased: bool = False,
                 alternative_suggestion: Optional[str] = None):
        self.id = id
        self.name = name
        self.quantity = quantity
        self.unit = unit
        self.category = category
        self.estimated_price = estimated_price
        self.priority = priority
        self.for_meals = for_meals[:] if for_meals else []
        self.checked = checked
        self.purchased = purchased
        self.alternative_suggestion = alternative_suggestion

    def copy(self, **changes) -> "GroceryItem":
        '''Returns a new item with the given attributes replaced.'''
        data = self.__dict__.copy()
        data["for_meals"] = list(self.for_meals)
        data.update(changes)
        return GroceryItem(**data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GroceryItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"{self.name} - {self.quantity} {self.unit} - ${self.estimated_price:.2f} ({self.category}, {self.priority})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a GroceryItem from a stored dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return GroceryItem(
            id=d.get("id", ""),
            name=d.get("name", ""),
            quantity=d.get("quantity", 0),
            unit=d.get("unit", "item"),
            category=d.get("category", "other"),
            estimated_price=float(d.get("estimatedPrice", 0.0) or 0.0),
            priority=d.get("priority", "essential"),
            for_meals=d.get("forMeals") or [],
            checked=bool(d.get("checked", False)),
            purchased=bool(d.get("purchased", False)),
            alternative_suggestion=d.get("alternativeSuggestion"),
        )

    def to_dict(self):
        '''Converts the item to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "category": self.category,
            "estimatedPrice": self.estimated_price,
            "priority": self.priority,
            "forMeals": list(self.for_meals),
            "checked": self.checked,
            "purchased": self.purchased,
            "alternativeSuggestion": self.alternative_suggestion,
        }
