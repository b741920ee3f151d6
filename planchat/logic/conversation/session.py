"""Chat session: owns the stores for one run and feeds discrete UI actions to the controller.

Renderers never call into the core directly; they subscribe to the session's
event bus and send actions through ``dispatch``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

from planchat.events.Event_Bus import EventBus, INPUT_PREFILLED, SUGGESTIONS_UPDATED
from planchat.infra.Conversation_Log import ConversationLog
from planchat.infra.Plan_Store import PlanStore
from planchat.infra.Theme_Store import ThemeStore
from planchat.logic.conversation.controller import ConversationController
from planchat.logic.suggestions.engine import suggest
from planchat.utilities.constants import WELCOME_MESSAGE

logger = logging.getLogger(__name__)


# --- Actions ---------------------------------------------------------------
@dataclass(frozen=True)
class SubmitCommand:
    text: str


@dataclass(frozen=True)
class InputChanged:
    text: str


@dataclass(frozen=True)
class SelectSuggestion:
    text: str


@dataclass(frozen=True)
class ClearConversation:
    pass


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class ShowSchedule:
    pass


@dataclass(frozen=True)
class ShowSavedSchedules:
    pass


@dataclass(frozen=True)
class LoadSchedule:
    filepath: str


@dataclass(frozen=True)
class RefreshPlan:
    pass


class ChatSession:
    def __init__(self, gateway, event_bus: Optional[EventBus] = None, theme_store: Optional[ThemeStore] = None,
                 greeting: Optional[str] = WELCOME_MESSAGE):
        self.event_bus = event_bus or EventBus()
        self.plan_store = PlanStore(event_bus=self.event_bus)
        self.log = ConversationLog(greeting, event_bus=self.event_bus)
        self.theme_store = theme_store or ThemeStore(event_bus=self.event_bus)
        self.controller = ConversationController(gateway, self.plan_store, self.log)
        self.input_text = ""
        self.suggestions: List[str] = []

    async def start(self) -> None:
        """Apply the saved theme and load the current plan once."""
        self.theme_store.load()
        await self.controller.sync_plan()

    def _set_suggestions(self, partial: str, suggestions: List[str]) -> None:
        self.suggestions = suggestions
        self.event_bus.publish(SUGGESTIONS_UPDATED, {"partial": partial, "suggestions": list(suggestions)})

    async def dispatch(self, action):
        if isinstance(action, SubmitCommand):
            self.input_text = ""
            self._set_suggestions("", [])
            return await self.controller.submit(action.text)
        if isinstance(action, InputChanged):
            self.input_text = action.text
            self._set_suggestions(action.text, suggest(action.text))
            return self.suggestions
        if isinstance(action, SelectSuggestion):
            self.input_text = action.text
            self.event_bus.publish(INPUT_PREFILLED, {"text": action.text})
            self._set_suggestions("", [])
            return action.text
        if isinstance(action, ClearConversation):
            return self.controller.clear_conversation()
        if isinstance(action, ToggleTheme):
            return self.theme_store.toggle()
        if isinstance(action, ShowSchedule):
            return await self.controller.show_schedule()
        if isinstance(action, ShowSavedSchedules):
            return await self.controller.show_saved_schedules()
        if isinstance(action, LoadSchedule):
            return await self.controller.load_saved_schedule(action.filepath)
        if isinstance(action, RefreshPlan):
            return await self.controller.sync_plan()
        raise TypeError(f"Unknown session action: {action!r}")


__all__ = [
    'ChatSession', 'SubmitCommand', 'InputChanged', 'SelectSuggestion', 'ClearConversation',
    'ToggleTheme', 'ShowSchedule', 'ShowSavedSchedules', 'LoadSchedule', 'RefreshPlan',
]
