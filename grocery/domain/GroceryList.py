"""GroceryList aggregate: the generated, sorted list for one household week."""
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from grocery.domain.GroceryItem import GroceryItem
from grocery.domain.Notice import Notice
from grocery.utilities.constants import DATE_FORMAT


def _parse_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.strptime(value[:10], DATE_FORMAT).date()
        except ValueError:
            return None
    return None


class GroceryList:
    def __init__(self, id: str = "", user_id: str = "", week_starting: Optional[date] = None,
                 week_ending: Optional[date] = None, metadata: Optional[Dict[str, Any]] = None,
                 items: Optional[List[GroceryItem]] = None, warnings: Optional[List[Notice]] = None,
                 suggestions: Optional[List[Notice]] = None, created_at: Optional[datetime] = None):
        self.id = id
        self.user_id = user_id
        self.week_starting = week_starting
        self.week_ending = week_ending
        self.metadata = dict(metadata) if metadata else {}
        self.items = items[:] if items else []
        self.warnings = warnings[:] if warnings else []
        self.suggestions = suggestions[:] if suggestions else []
        self.created_at = created_at or datetime.now()

    def get_item(self, item_id: str) -> Optional[GroceryItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def __str__(self) -> str:
        items_str = ",\n\t".join(str(item) for item in self.items)
        return f"Grocery List {self.id} ({self.metadata.get('budgetStatus', '-')}):\n\t{items_str}"

    def __repr__(self) -> str:
        return self.__str__()

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        created = d.get("createdAt")
        if isinstance(created, str):
            try:
                created = datetime.fromisoformat(created)
            except ValueError:
                created = None
        return GroceryList(
            id=d.get("id", ""),
            user_id=d.get("userId", ""),
            week_starting=_parse_date(d.get("weekStarting")),
            week_ending=_parse_date(d.get("weekEnding")),
            metadata=d.get("metadata") or {},
            items=[GroceryItem.from_dict(i) for i in d.get("items", [])],
            warnings=[Notice.from_dict(w) for w in d.get("warnings", [])],
            suggestions=[Notice.from_dict(s) for s in d.get("suggestions", [])],
            created_at=created if isinstance(created, datetime) else None,
        )

    def to_dict(self):
        '''Converts the list to a dictionary for JSON persistence.'''
        return {
            "id": self.id,
            "userId": self.user_id,
            "createdAt": self.created_at.isoformat(),
            "weekStarting": self.week_starting.strftime(DATE_FORMAT) if self.week_starting else "",
            "weekEnding": self.week_ending.strftime(DATE_FORMAT) if self.week_ending else "",
            "metadata": dict(self.metadata),
            "items": [item.to_dict() for item in self.items],
            "warnings": [w.to_dict() for w in self.warnings],
            "suggestions": [s.to_dict() for s in self.suggestions],
        }
