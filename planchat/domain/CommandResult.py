"""Wire results returned by the command service (consumed once, never stored)."""
from typing import Any, List, Optional
from planchat.domain.Plan import Plan


class HistoryEntry:
    def __init__(self, command: str = "", formatted_timestamp: str = ""):
        self.command = command
        self.formatted_timestamp = formatted_timestamp

    def __str__(self) -> str:
        return f"[{self.formatted_timestamp}] {self.command}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return HistoryEntry(d.get("command") or "", d.get("formattedTimestamp") or "")


class CommandResult:
    def __init__(self, success: bool, message: str = "", command_history: Optional[List[HistoryEntry]] = None,
                 schedule: Any = None, updated_plan: Optional[Plan] = None):
        self.success = success
        self.message = message
        # None means "absent"; an empty list still counts as present
        self.command_history = command_history
        self.schedule = schedule
        self.updated_plan = updated_plan

    def __str__(self) -> str:
        return f"CommandResult(success={self.success}, message={self.message!r})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Creates a CommandResult from the wire dictionary.

        An ``updatedPlan`` without a ``courses`` list counts as absent.
        '''
        d = data if isinstance(data, dict) else {}
        history = d.get("commandHistory")
        plan = d.get("updatedPlan")
        if not isinstance(plan, dict) or plan.get("courses") is None:
            plan = None
        return CommandResult(
            success=bool(d.get("success")),
            message=d.get("message") or "",
            command_history=[HistoryEntry.from_dict(h) for h in history] if history is not None else None,
            schedule=d.get("schedule"),
            updated_plan=Plan.from_dict(plan) if plan is not None else None,
        )


class SavedSchedule:
    def __init__(self, path: str, filename: str = "", timestamp: int = 0, formatted_date: str = ""):
        self.path = path
        self.filename = filename
        self.timestamp = timestamp
        self.formatted_date = formatted_date

    def __str__(self) -> str:
        return f"{self.filename or self.path} ({self.formatted_date})" if self.formatted_date else (self.filename or self.path)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return SavedSchedule(
            path=d.get("path") or "",
            filename=d.get("filename") or "",
            timestamp=d.get("timestamp") or 0,
            formatted_date=d.get("formattedDate") or "",
        )


class LoadResult:
    def __init__(self, success: bool, message: str = "", schedule: Any = None):
        self.success = success
        self.message = message
        self.schedule = schedule

    @staticmethod
    def from_dict(data):
        d = data if isinstance(data, dict) else {}
        return LoadResult(bool(d.get("success")), d.get("message") or "", d.get("schedule"))
