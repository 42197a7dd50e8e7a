"""Household composition: who the groceries are bought for."""
from typing import List, Optional

from grocery.utilities.errors import ProfileError


def _as_int(value, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ProfileError(f"household.{field} must be an integer, got {value!r}")


class HouseholdComposition:
    def __init__(self, total_members: int = 1, adult_count: Optional[int] = None,
                 has_children: Optional[bool] = None, children_ages: Optional[List[int]] = None):
        self.total_members = total_members
        self.children_ages = children_ages[:] if children_ages else []
        self.has_children = bool(self.children_ages) if has_children is None else has_children
        self.adult_count = adult_count
        if adult_count is not None and adult_count < 0:
            raise ProfileError(f"household.adultCount cannot be negative: {adult_count}")
        if any(age < 0 for age in self.children_ages):
            raise ProfileError(f"household.childrenAges cannot contain negative ages: {self.children_ages}")

    @property
    def adults(self) -> int:
        '''Adult count, derived from total members minus children when not supplied.'''
        if self.adult_count is not None:
            return self.adult_count
        return max(self.total_members - len(self.children_ages), 0)

    def __str__(self) -> str:
        return f"Household of {self.total_members} ({self.adults} adults, children: {self.children_ages or 'none'})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        ages = [_as_int(a, "childrenAges") for a in (d.get("childrenAges") or [])]
        adult_count = d.get("adultCount")
        if adult_count is not None:
            adult_count = _as_int(adult_count, "adultCount")
        total = d.get("totalMembers")
        if total is None:
            total = (adult_count if adult_count is not None else 1) + len(ages)
        return HouseholdComposition(
            total_members=_as_int(total, "totalMembers"),
            adult_count=adult_count,
            has_children=d.get("hasChildren"),
            children_ages=ages,
        )
