"""Notice: a budget warning or suggestion attached to a grocery list."""
from typing import Optional


class Notice:
    def __init__(self, type: str, message: str, savings: Optional[float] = None,
                 overage: Optional[float] = None):
        self.type = type
        self.message = message
        self.savings = savings
        self.overage = overage

    def __eq__(self, other) -> bool:
        if not isinstance(other, Notice):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self) -> str:
        return f"[{self.type}] {self.message}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        return Notice(d.get("type", ""), d.get("message", ""), d.get("savings"), d.get("overage"))

    def to_dict(self):
        out = {"type": self.type, "message": self.message}
        if self.savings is not None:
            out["savings"] = self.savings
        if self.overage is not None:
            out["overage"] = self.overage
        return out
