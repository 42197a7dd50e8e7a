"""Simple Event Bus / Observer implementation for grocery list notifications.

Event names used so far:
  grocery.list_generated -> payload {"list_id": str, "user_id": str, "item_count": int, "budget_status": str}
  grocery.over_budget    -> payload {"list_id": str, "user_id": str, "warnings": [dict]}
  grocery.item_updated   -> payload {"list_id": str, "item_id": str, "fields": dict}

Subscribers are callables taking (event_name, payload). Notification
scheduling lives outside this package and subscribes here.
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
GROCERY_LIST_GENERATED = "grocery.list_generated"
GROCERY_OVER_BUDGET = "grocery.over_budget"
GROCERY_ITEM_UPDATED = "grocery.item_updated"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				# a failing subscriber must not fail list generation
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish_event(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus (sugar function)."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish_event',
	'GROCERY_LIST_GENERATED', 'GROCERY_OVER_BUDGET', 'GROCERY_ITEM_UPDATED'
]
