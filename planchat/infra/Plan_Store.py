"""In-memory cache of the last authoritative plan snapshot fetched from the service."""
import logging
from typing import Optional

from planchat.domain.Plan import Plan
from planchat.events.Event_Bus import GLOBAL_EVENT_BUS, PLAN_REPLACED

logger = logging.getLogger(__name__)


class PlanStore:
    def __init__(self, event_bus=None):
        self._plan: Optional[Plan] = None
        self._event_bus = event_bus or GLOBAL_EVENT_BUS

    def get(self) -> Optional[Plan]:
        return self._plan

    def replace(self, plan: Optional[Plan]) -> None:
        '''
        Swaps the whole snapshot in one assignment; readers see either the old or the new plan.
        '''
        if plan is not None and not isinstance(plan, Plan):
            raise TypeError(f"PlanStore only holds Plan snapshots, got {type(plan).__name__}")
        self._plan = plan
        logger.debug(f"Plan store replaced ({'empty' if plan is None else f'{len(plan)} courses'})")
        self._event_bus.publish(PLAN_REPLACED, {"plan": plan})

    def clear(self) -> None:
        self.replace(None)
