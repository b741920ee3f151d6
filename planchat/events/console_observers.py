"""Terminal-facing observers for chat events.

ConsoleRenderer subscribes to a session's EventBus and prints:
  - chat turns (one line per non-blank line, or verbatim for formatted turns)
  - pending indicators while a round-trip is in flight
  - the plan sidebar whenever the Plan Store is replaced
  - command suggestions as the input changes

It never calls back into the core; it only reads event payloads.
"""
from __future__ import annotations
import sys
from typing import Any, Dict, TextIO

from planchat.events.Event_Bus import (
    EventBus, TURN_APPENDED, CONVERSATION_CLEARED, PENDING_SHOWN, PENDING_REMOVED,
    PLAN_REPLACED, SUGGESTIONS_UPDATED, INPUT_PREFILLED, THEME_CHANGED
)
from planchat.infra.Conversation_Log import render_blocks
from planchat.logic.summary.plan_summary import summarize_plan
from planchat.utilities.constants import DEFAULT_THEME

RESET = "\033[0m"
PALETTES: Dict[str, Dict[str, str]] = {
    "light": {"user": "\033[34m", "bot": "\033[30m", "muted": "\033[90m"},
    "dark": {"user": "\033[96m", "bot": "\033[97m", "muted": "\033[37m"},
}


class ConsoleRenderer:
    def __init__(self, stream: TextIO = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color
        self.theme = DEFAULT_THEME
        self.pending: Dict[str, str] = {}

    def attach(self, bus: EventBus):
        bus.subscribe_all(self.handle_event)
        return self

    def _paint(self, role: str, text: str) -> str:
        if not self.color:
            return text
        return f"{PALETTES[self.theme][role]}{text}{RESET}"

    def _write(self, text: str = ""):
        self.stream.write(text + "\n")
        self.stream.flush()

    def _render_turn(self, turn):
        label = "you" if turn.role == "user" else "bot"
        blocks = render_blocks(turn)
        if turn.formatted:
            self._write(self._paint(turn.role, f"{label}>"))
            self._write(self._paint(turn.role, blocks[0]))
            return
        for i, block in enumerate(blocks):
            prefix = f"{label}> " if i == 0 else " " * (len(label) + 2)
            self._write(self._paint(turn.role, prefix + block))

    def handle_event(self, event_name: str, payload: Any):
        payload = payload or {}
        if event_name == TURN_APPENDED:
            self._render_turn(payload["turn"])
        elif event_name == CONVERSATION_CLEARED:
            self.pending.clear()
            self._write(self._paint("muted", "-" * 40))
            for turn in payload.get("turns", ()):
                self._render_turn(turn)
        elif event_name == PENDING_SHOWN:
            self.pending[payload["id"]] = payload.get("text", "")
            self._write(self._paint("muted", f"... {payload.get('text', '')}"))
        elif event_name == PENDING_REMOVED:
            self.pending.pop(payload["id"], None)
        elif event_name == PLAN_REPLACED:
            self._write(self._paint("muted", "[plan] " + " | ".join(summarize_plan(payload.get("plan")))))
        elif event_name == SUGGESTIONS_UPDATED:
            suggestions = payload.get("suggestions") or []
            if suggestions:
                listed = "  ".join(f"{i}) {s}" for i, s in enumerate(suggestions, start=1))
                self._write(self._paint("muted", f"suggestions: {listed}"))
        elif event_name == INPUT_PREFILLED:
            self._write(self._paint("muted", f"input: {payload.get('text', '')}"))
        elif event_name == THEME_CHANGED:
            self.theme = payload.get("theme", DEFAULT_THEME)
            self._write(self._paint("muted", f"[theme] {self.theme}"))


__all__ = ['ConsoleRenderer']
