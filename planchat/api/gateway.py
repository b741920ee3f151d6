"""Command Gateway: async HTTP client for the remote command service.

One call, one request; nothing is retried, since a command such as
``add subject`` is not idempotent. Failures come back as the exceptions in
``planchat.api.errors``.
"""
from __future__ import annotations
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from planchat.api.errors import ApplicationError, PlanSyncError, TransportError
from planchat.domain.CommandResult import CommandResult, LoadResult, SavedSchedule
from planchat.domain.Plan import Plan
from planchat.utilities.config import API_BASE, TIMEOUT_SECONDS
from planchat.utilities.validators import (
    CommandResultInput, LoadResultInput, PlanInput, SavedScheduleInput
)

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


class CommandGateway:
    def __init__(self, base_url: str = API_BASE, timeout: float = TIMEOUT_SECONDS,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- Low-level helpers -------------------------------------------------
    async def _request(self, method: str, path: str, error_cls=TransportError, **kwargs) -> httpx.Response:
        logger.debug(f"{method} {self.base_url}{path}")
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {_describe(e)}")
            raise error_cls(_describe(e)) from e

    @staticmethod
    def _json(response: httpx.Response, error_cls=TransportError):
        try:
            return response.json()
        except ValueError as e:
            if response.is_success:
                raise error_cls(f"Malformed JSON from server: {e}", response.status_code) from e
            raise error_cls(f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                            response.status_code) from e

    @staticmethod
    def _require_success(response: httpx.Response, error_cls=TransportError) -> None:
        if not response.is_success:
            raise error_cls(f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                            response.status_code)

    # --- Operations --------------------------------------------------------
    async def send(self, command: str) -> CommandResult:
        """POST /command. The caller has already trimmed and rejected empty text.

        Returns the CommandResult on ``success: true``; raises ApplicationError
        on ``success: false`` and TransportError when no result could be read.
        """
        response = await self._request("POST", "/command", json={"command": command})
        data = self._json(response)
        try:
            validated = CommandResultInput.model_validate(data)
        except ValidationError as e:
            if response.is_success:
                raise TransportError(f"Malformed command result: {e.error_count()} invalid field(s)",
                                     response.status_code) from e
            raise TransportError(f"HTTP {response.status_code} {response.reason_phrase}".strip(),
                                 response.status_code) from e
        result = CommandResult.from_dict(validated.model_dump())
        if not result.success:
            logger.info(f"Command rejected by service: {result.message}")
            raise ApplicationError(result.message)
        return result

    async def fetch_plan(self) -> Optional[Plan]:
        """GET /plan. An empty body means there is no plan yet and returns None."""
        response = await self._request("GET", "/plan", error_cls=PlanSyncError)
        self._require_success(response, error_cls=PlanSyncError)
        if not response.text.strip():
            return None
        data = self._json(response, error_cls=PlanSyncError)
        if data is None:
            return None
        try:
            validated = PlanInput.model_validate(data)
        except ValidationError as e:
            raise PlanSyncError(f"Malformed plan: {e.error_count()} invalid field(s)", response.status_code) from e
        return Plan.from_dict(validated.model_dump())

    async def fetch_schedule_text(self) -> str:
        """GET /schedule. Opaque preformatted text, returned verbatim."""
        response = await self._request("GET", "/schedule")
        self._require_success(response)
        return response.text

    async def list_saved_schedules(self) -> List[SavedSchedule]:
        """GET /schedules/history (newest first, as the service orders them)."""
        response = await self._request("GET", "/schedules/history")
        self._require_success(response)
        data = self._json(response)
        if not isinstance(data, list):
            raise TransportError("Malformed schedule history: expected a list", response.status_code)
        try:
            entries = [SavedScheduleInput.model_validate(item) for item in data]
        except ValidationError as e:
            raise TransportError(f"Malformed schedule history: {e.error_count()} invalid field(s)",
                                 response.status_code) from e
        return [SavedSchedule.from_dict(entry.model_dump()) for entry in entries]

    async def load_schedule(self, filepath: str) -> LoadResult:
        """POST /schedules/load. ``success: false`` raises ApplicationError."""
        response = await self._request("POST", "/schedules/load", json={"filepath": filepath})
        data = self._json(response)
        try:
            validated = LoadResultInput.model_validate(data)
        except ValidationError as e:
            raise TransportError(f"Malformed load result: {e.error_count()} invalid field(s)",
                                 response.status_code) from e
        result = LoadResult.from_dict(validated.model_dump())
        if not result.success:
            raise ApplicationError(result.message)
        return result


__all__ = ['CommandGateway']
