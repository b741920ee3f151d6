"""Conversation Controller: drives one command round-trip.

State per round-trip:
    Idle -> Submitting -> (Success | ApplicationFailure | TransportFailure) -> Idle

The user turn and a pending indicator are shown before the first await. The
indicator is removed exactly once, before the terminal bot turn is appended,
whatever the outcome. A success reporting that the plan was cleared empties
the Plan Store before that turn is shown. Afterwards the plan is always
re-fetched from the service (best effort).

Round-trips are not serialized: two submits may be in flight at once, each
with its own indicator. The Plan Store is last-writer-wins.
"""
from __future__ import annotations
import logging
from contextlib import contextmanager
from enum import Enum
from typing import Optional

from planchat.api.errors import ApplicationError, GatewayError, TransportError
from planchat.domain.CommandResult import CommandResult
from planchat.domain.ConversationTurn import ConversationTurn
from planchat.infra.Conversation_Log import ConversationLog
from planchat.infra.Plan_Store import PlanStore
from planchat.logic.conversation.formatting import (
    compose_connection_error, compose_error_message, compose_success_message, is_clear_acknowledgement
)
from planchat.utilities.constants import (
    NO_SAVED_SCHEDULES_MESSAGE, SCHEDULE_FETCH_ERROR_PREFIX, SUCCESS_PREFIX
)

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    SUCCESS = "success"
    APPLICATION_FAILURE = "application_failure"
    TRANSPORT_FAILURE = "transport_failure"


class RoundTrip:
    """What one submit() did; returned for callers and tests."""

    def __init__(self, command: str, outcome: Outcome, turn: ConversationTurn,
                 result: Optional[CommandResult] = None, plan_synced: bool = False):
        self.command = command
        self.outcome = outcome
        self.turn = turn
        self.result = result
        self.plan_synced = plan_synced

    def __repr__(self) -> str:
        return f"RoundTrip({self.command!r}, {self.outcome.value}, plan_synced={self.plan_synced})"


class ConversationController:
    def __init__(self, gateway, plan_store: PlanStore, conversation_log: ConversationLog):
        self.gateway = gateway
        self.plan_store = plan_store
        self.log = conversation_log

    @contextmanager
    def _pending_indicator(self):
        indicator_id = self.log.show_pending()
        try:
            yield indicator_id
        finally:
            self.log.remove_pending(indicator_id)

    # --- Command round-trip -----------------------------------------------
    async def submit(self, command: str) -> Optional[RoundTrip]:
        command = (command or "").strip()
        if not command:
            return None

        self.log.append(ConversationTurn.user(command))
        with self._pending_indicator():
            outcome, text, result = await self._execute(command)

        cleared = outcome is Outcome.SUCCESS and is_clear_acknowledgement(result)
        if cleared:
            self.plan_store.clear()

        turn = ConversationTurn.bot(text)
        self.log.append(turn)
        logger.info(f"Command {command!r} finished: {outcome.value}")

        plan_synced = await self.sync_plan()
        return RoundTrip(command, outcome, turn, result, plan_synced)

    async def _execute(self, command: str):
        try:
            result = await self.gateway.send(command)
        except ApplicationError as e:
            return Outcome.APPLICATION_FAILURE, compose_error_message(e.message), None
        except TransportError as e:
            logger.warning(f"Transport failure for {command!r}: {e.reason}")
            return Outcome.TRANSPORT_FAILURE, compose_connection_error(e.reason), None
        return Outcome.SUCCESS, compose_success_message(result), result

    async def sync_plan(self) -> bool:
        """Best-effort re-fetch of the authoritative plan.

        On failure the cached plan is left as it was and the error is only
        logged; it never becomes a chat turn.
        """
        try:
            plan = await self.gateway.fetch_plan()
        except GatewayError as e:
            logger.warning(f"Plan sync failed, keeping cached plan: {e}")
            return False
        self.plan_store.replace(plan)
        return True

    # --- Read-only views ---------------------------------------------------
    async def show_schedule(self) -> ConversationTurn:
        with self._pending_indicator():
            try:
                text = await self.gateway.fetch_schedule_text()
            except GatewayError as e:
                turn = ConversationTurn.bot(f"{SCHEDULE_FETCH_ERROR_PREFIX}{e}")
            else:
                turn = ConversationTurn.bot(text, formatted=True)
        self.log.append(turn)
        return turn

    async def show_saved_schedules(self) -> ConversationTurn:
        with self._pending_indicator():
            try:
                saved = await self.gateway.list_saved_schedules()
            except GatewayError as e:
                text = compose_connection_error(str(e))
            else:
                if saved:
                    lines = ["📂 Saved schedules:"]
                    lines += [f"{i}. {entry}" for i, entry in enumerate(saved, start=1)]
                    text = "\n".join(lines)
                else:
                    text = NO_SAVED_SCHEDULES_MESSAGE
        turn = ConversationTurn.bot(text)
        self.log.append(turn)
        return turn

    async def load_saved_schedule(self, filepath: str) -> Optional[ConversationTurn]:
        filepath = (filepath or "").strip()
        if not filepath:
            return None
        with self._pending_indicator():
            try:
                result = await self.gateway.load_schedule(filepath)
            except ApplicationError as e:
                text = compose_error_message(e.message)
            except TransportError as e:
                text = compose_connection_error(e.reason)
            else:
                text = f"{SUCCESS_PREFIX}{result.message}"
        turn = ConversationTurn.bot(text)
        self.log.append(turn)
        return turn

    # --- Local actions -----------------------------------------------------
    def clear_conversation(self) -> None:
        """Reset the chat; the Plan Store is not touched."""
        self.log.clear()
