"""Weekly budget policy for a household."""
from grocery.utilities.constants import DEFAULT_CURRENCY, STRICTNESS_LEVELS
from grocery.utilities.errors import ProfileError


class BudgetPolicy:
    def __init__(self, weekly_limit: float = 0.0, currency: str = DEFAULT_CURRENCY,
                 strictness: str = "flexible"):
        if weekly_limit < 0:
            raise ProfileError(f"budget.weekly cannot be negative: {weekly_limit}")
        if strictness not in STRICTNESS_LEVELS:
            raise ProfileError(f"budget.priority must be one of {STRICTNESS_LEVELS}, got {strictness!r}")
        self.weekly_limit = weekly_limit
        self.currency = currency
        self.strictness = strictness

    def __str__(self) -> str:
        return f"{self.weekly_limit:.2f} {self.currency}/week ({self.strictness})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Accepts both the profile field names (weekly, priority) and the long ones.'''
        d = dict(data) if isinstance(data, dict) else {}
        raw_limit = d.get("weekly", d.get("weeklyLimit", 0))
        try:
            limit = float(raw_limit or 0)
        except (TypeError, ValueError):
            raise ProfileError(f"budget.weekly must be a number, got {raw_limit!r}")
        strictness = str(d.get("priority", d.get("strictness")) or "flexible").lower()
        if strictness not in STRICTNESS_LEVELS:
            strictness = "flexible"
        return BudgetPolicy(limit, d.get("currency") or DEFAULT_CURRENCY, strictness)
