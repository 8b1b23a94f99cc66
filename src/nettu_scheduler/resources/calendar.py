"""Calendar endpoints."""

from nettu_scheduler.client import BaseClient
from nettu_scheduler.resources._query import with_query
from nettu_scheduler.response import APIResponse


class _CalendarEndpoints(BaseClient):
    _prefix = ""

    async def find_by_id(self, calendar_id: str) -> APIResponse[dict]:
        return await self.get(f"{self._prefix}/calendar/{calendar_id}")

    async def find_events(self, calendar_id: str, start_ts: int, end_ts: int) -> APIResponse[dict]:
        """Expand every event of the calendar within ``[start_ts, end_ts]`` (ms)."""
        path = with_query(f"{self._prefix}/calendar/{calendar_id}/events", startTs=start_ts, endTs=end_ts)
        return await self.get(path)

    async def update(
        self,
        calendar_id: str,
        *,
        timezone: str | None = None,
        week_start: int | None = None,
    ) -> APIResponse[dict]:
        settings = {}
        if timezone is not None:
            settings["timezone"] = timezone
        if week_start is not None:
            settings["weekStart"] = week_start
        return await self.put(f"{self._prefix}/calendar/{calendar_id}", {"settings": settings})

    async def remove(self, calendar_id: str) -> APIResponse[dict]:
        return await self.delete(f"{self._prefix}/calendar/{calendar_id}")


def _create_body(timezone: str | None, week_start: int | None) -> dict:
    body = {}
    if timezone is not None:
        body["timezone"] = timezone
    if week_start is not None:
        body["weekStart"] = week_start
    return body


class CalendarClient(_CalendarEndpoints):
    """Calendars of any user in the account."""

    _prefix = "/user"

    async def create(
        self,
        user_id: str,
        *,
        timezone: str | None = None,
        week_start: int | None = None,
    ) -> APIResponse[dict]:
        return await self.post(f"/user/{user_id}/calendar", _create_body(timezone, week_start))


class CalendarUserClient(_CalendarEndpoints):
    """Calendars of the authenticated user."""

    async def create(
        self,
        *,
        timezone: str | None = None,
        week_start: int | None = None,
    ) -> APIResponse[dict]:
        return await self.post("/calendar", _create_body(timezone, week_start))
