"""Local stand-in for the remote command service.

Speaks the same wire format under /api/chatbot with in-memory state, so the
chat client can be run and integration-tested without the real service. It
understands only a handful of literal command shapes and does no real
scheduling: "generate schedule" lists the subjects in priority order.
"""
import re
import logging
from datetime import datetime
from typing import Dict, List, Optional

from fastapi import APIRouter, FastAPI, Response
from fastapi.responses import PlainTextResponse

from planchat.utilities.validators import CommandRequest, LoadScheduleRequest

logger = logging.getLogger(__name__)

API_PREFIX = "/api/chatbot"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

ADD_SUBJECT = re.compile(r'^add subject\s+"([^"]+)"\s+hours\s+(\d+(?:\.\d+)?)\s+priority\s+(HIGH|MEDIUM|LOW)$', re.I)
SET_AVAILABILITY = re.compile(r'^set availability on\s+(\d{4}-\d{2}-\d{2})\s+capacity\s+(\d+(?:\.\d+)?)\s+hours$', re.I)
PRIORITY_ORDER = {"HIGH": 0, "MEDIUM": 1, "LOW": 2}


class StubState:
    def __init__(self):
        self.courses: Optional[List[dict]] = None
        self.availability: Dict[str, float] = {}
        self.history: List[dict] = []
        self.schedule_text: Optional[str] = None
        self.saved: List[dict] = []

    def plan(self) -> Optional[dict]:
        return None if self.courses is None else {"courses": list(self.courses)}

    def record(self, command: str) -> None:
        self.history.append({"command": command, "formattedTimestamp": datetime.now().strftime(TIMESTAMP_FORMAT)})

    def execute(self, command: str) -> dict:
        text = command.strip()
        lowered = text.lower()
        if lowered == "show history":
            return {"success": True, "message": "Command history retrieved", "commandHistory": list(self.history)}
        self.record(text)

        match = ADD_SUBJECT.match(text)
        if match:
            name, hours, priority = match.group(1), float(match.group(2)), match.group(3).upper()
            self.courses = [c for c in (self.courses or []) if c["id"] != name]
            self.courses.append({"id": name, "workloadHours": hours, "priority": priority})
            return {"success": True, "message": f"Added {name}", "updatedPlan": self.plan()}

        match = SET_AVAILABILITY.match(text)
        if match:
            self.availability[match.group(1)] = float(match.group(2))
            return {"success": True, "message": f"Availability set for {match.group(1)}"}

        if lowered == "list subjects":
            names = ", ".join(c["id"] for c in (self.courses or [])) or "none"
            return {"success": True, "message": f"Subjects: {names}", "updatedPlan": self.plan() or {"courses": []}}

        if lowered == "generate schedule":
            if not self.courses:
                return {"success": False, "message": "No plan specified"}
            ordered = sorted(self.courses, key=lambda c: PRIORITY_ORDER.get(c["priority"], 3))
            lines = ["=== STUDY SCHEDULE ==="]
            lines += [f"  {c['id']:<20} {c['workloadHours']:>6g}h  {c['priority']}" for c in ordered]
            self.schedule_text = "\n".join(lines)
            filename = f"schedule_{len(self.saved) + 1}.json"
            self.saved.insert(0, {
                "path": f"stub/{filename}",
                "filename": filename,
                "timestamp": int(datetime.now().timestamp() * 1000),
                "formattedDate": datetime.now().strftime(TIMESTAMP_FORMAT),
                "text": self.schedule_text,
            })
            return {"success": True, "message": "Schedule generated",
                    "schedule": {"subjects": [c["id"] for c in ordered]}}

        if lowered == "show schedule":
            return {"success": True, "message": self.schedule_text or "No schedule generated yet."}

        if lowered == "clear all":
            self.courses = None
            self.availability.clear()
            self.schedule_text = None
            return {"success": True, "message": "All data cleared", "updatedPlan": {"courses": []}}

        return {"success": False, "message": f"Error: Unknown command: {text}"}


def create_app() -> FastAPI:
    """Build a fresh stub app with its own in-memory state."""
    state = StubState()
    router = APIRouter(prefix=API_PREFIX)

    @router.post("/command")
    def execute_command(request: CommandRequest):
        result = state.execute(request.command)
        logger.info(f"stub command {request.command!r} -> {result['success']}")
        return result

    @router.get("/plan")
    def get_plan():
        plan = state.plan()
        if plan is None:
            return Response(content="", media_type="application/json")
        return plan

    @router.get("/schedule", response_class=PlainTextResponse)
    def get_schedule():
        return state.schedule_text or "No schedule generated yet."

    @router.get("/schedules/history")
    def list_schedule_history():
        return [{k: v for k, v in entry.items() if k != "text"} for entry in state.saved]

    @router.post("/schedules/load")
    def load_schedule(request: LoadScheduleRequest):
        for entry in state.saved:
            if request.filepath in (entry["path"], entry["filename"]):
                state.schedule_text = entry["text"]
                return {"success": True, "message": "Schedule loaded successfully", "schedule": None}
        return {"success": False, "message": f"Failed to load schedule: {request.filepath} not found",
                "schedule": None}

    app = FastAPI(title="Plan Chat Stub Service")
    app.state.stub = state
    app.include_router(router)
    return app


app = create_app()
