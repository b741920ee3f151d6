"""Simple Event Bus / Observer implementation between the chat core and its renderers.

Event names used so far:
  conversation.turn_appended   -> payload {"turn": ConversationTurn}
  conversation.cleared         -> payload {"turns": [ConversationTurn]}
  conversation.pending_shown   -> payload {"id": str, "text": str}
  conversation.pending_removed -> payload {"id": str}
  plan.replaced                -> payload {"plan": Plan | None}
  suggestions.updated          -> payload {"partial": str, "suggestions": [str]}
  input.prefilled              -> payload {"text": str}
  theme.changed                -> payload {"theme": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
TURN_APPENDED = "conversation.turn_appended"
CONVERSATION_CLEARED = "conversation.cleared"
PENDING_SHOWN = "conversation.pending_shown"
PENDING_REMOVED = "conversation.pending_removed"
PLAN_REPLACED = "plan.replaced"
SUGGESTIONS_UPDATED = "suggestions.updated"
INPUT_PREFILLED = "input.prefilled"
THEME_CHANGED = "theme.changed"

ALL_EVENTS = (
	TURN_APPENDED, CONVERSATION_CLEARED, PENDING_SHOWN, PENDING_REMOVED,
	PLAN_REPLACED, SUGGESTIONS_UPDATED, INPUT_PREFILLED, THEME_CHANGED,
)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def subscribe_all(self, callback: Callable[[str, Any], None]):
		for event_name in ALL_EVENTS:
			self.subscribe(event_name, callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any = None):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception(f"Error delivering {event_name} to {cb}")


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'ALL_EVENTS',
	'TURN_APPENDED', 'CONVERSATION_CLEARED', 'PENDING_SHOWN', 'PENDING_REMOVED',
	'PLAN_REPLACED', 'SUGGESTIONS_UPDATED', 'INPUT_PREFILLED', 'THEME_CHANGED',
]
