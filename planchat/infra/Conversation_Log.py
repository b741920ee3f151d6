"""Conversation log: ordered, append-only record of chat turns plus transient pending indicators.

Pending ("thinking") indicators are tracked beside the log, keyed by a uuid per
round-trip, so overlapping round-trips each remove only their own indicator.
They never appear in ``all()``.
"""
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple
from uuid import uuid4

from planchat.domain.ConversationTurn import ConversationTurn
from planchat.events.Event_Bus import (
    GLOBAL_EVENT_BUS, TURN_APPENDED, CONVERSATION_CLEARED, PENDING_SHOWN, PENDING_REMOVED
)
from planchat.utilities.constants import CLEARED_GREETING, PENDING_TEXT

logger = logging.getLogger(__name__)


class ConversationLog:
    def __init__(self, greeting: Optional[str] = None, event_bus=None):
        self._turns: List[ConversationTurn] = []
        self._pending: Dict[str, str] = {}
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        if greeting:
            self.append(ConversationTurn.bot(greeting))

    # --- Permanent turns ---------------------------------------------------
    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)
        self._event_bus.publish(TURN_APPENDED, {"turn": turn})

    def clear(self) -> None:
        '''Full reset: the log is emptied and re-seeded with a single greeting turn.'''
        self._turns = [ConversationTurn.bot(CLEARED_GREETING)]
        logger.info("Conversation cleared")
        self._event_bus.publish(CONVERSATION_CLEARED, {"turns": self.all()})

    def all(self) -> Tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    # --- Pending indicators ------------------------------------------------
    def show_pending(self, text: str = PENDING_TEXT) -> str:
        indicator_id = f"pending-{uuid4().hex}"
        self._pending[indicator_id] = text
        self._event_bus.publish(PENDING_SHOWN, {"id": indicator_id, "text": text})
        return indicator_id

    def remove_pending(self, indicator_id: str) -> bool:
        if self._pending.pop(indicator_id, None) is None:
            logger.warning(f"Pending indicator {indicator_id} already removed")
            return False
        self._event_bus.publish(PENDING_REMOVED, {"id": indicator_id})
        return True

    def pending_ids(self) -> Tuple[str, ...]:
        return tuple(self._pending)


def render_blocks(turn: ConversationTurn) -> List[str]:
    """Split a turn into display blocks.

    Formatted turns stay one preformatted block, whitespace and line breaks
    untouched. Other turns give one block per non-blank line.
    """
    if turn.formatted:
        return [turn.content]
    return [line for line in turn.content.split("\n") if line.strip()]


__all__ = ['ConversationLog', 'render_blocks']
