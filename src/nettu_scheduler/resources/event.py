"""Calendar event endpoints."""

from typing import Any

from nettu_scheduler.client import BaseClient
from nettu_scheduler.resources._query import with_query
from nettu_scheduler.response import APIResponse


class _EventEndpoints(BaseClient):
    _prefix = ""

    async def find_by_id(self, event_id: str) -> APIResponse[dict]:
        return await self.get(f"{self._prefix}/events/{event_id}")

    async def get_instances(self, event_id: str, start_ts: int, end_ts: int) -> APIResponse[dict]:
        """Occurrences of a (possibly recurring) event in ``[start_ts, end_ts]`` (ms)."""
        path = with_query(f"{self._prefix}/events/{event_id}/instances", startTs=start_ts, endTs=end_ts)
        return await self.get(path)

    async def update(self, event_id: str, changes: dict[str, Any]) -> APIResponse[dict]:
        return await self.put(f"{self._prefix}/events/{event_id}", changes)

    async def remove(self, event_id: str) -> APIResponse[dict]:
        return await self.delete(f"{self._prefix}/events/{event_id}")


class EventClient(_EventEndpoints):
    """Events of any user in the account."""

    _prefix = "/user"

    async def create(self, user_id: str, event: dict[str, Any]) -> APIResponse[dict]:
        """Create an event. ``event`` needs at least ``calendarId``, ``startTs`` and ``duration``."""
        return await self.post(f"/user/{user_id}/events", event)


class EventUserClient(_EventEndpoints):
    """Events of the authenticated user."""

    async def create(self, event: dict[str, Any]) -> APIResponse[dict]:
        return await self.post("/events", event)
