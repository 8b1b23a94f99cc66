"""Schedule (recurring availability) endpoints."""

from typing import Any

from nettu_scheduler.client import BaseClient
from nettu_scheduler.response import APIResponse


def _schedule_body(timezone: str | None, rules: list[dict[str, Any]] | None) -> dict:
    body = {}
    if timezone is not None:
        body["timezone"] = timezone
    if rules is not None:
        body["rules"] = rules
    return body


class _ScheduleEndpoints(BaseClient):
    _prefix = ""

    async def find(self, schedule_id: str) -> APIResponse[dict]:
        return await self.get(f"{self._prefix}/schedule/{schedule_id}")

    async def update(
        self,
        schedule_id: str,
        *,
        timezone: str | None = None,
        rules: list[dict[str, Any]] | None = None,
    ) -> APIResponse[dict]:
        return await self.put(f"{self._prefix}/schedule/{schedule_id}", _schedule_body(timezone, rules))

    async def remove(self, schedule_id: str) -> APIResponse[dict]:
        return await self.delete(f"{self._prefix}/schedule/{schedule_id}")


class ScheduleClient(_ScheduleEndpoints):
    """Schedules of any user in the account."""

    _prefix = "/user"

    async def create(
        self,
        user_id: str,
        timezone: str,
        rules: list[dict[str, Any]] | None = None,
    ) -> APIResponse[dict]:
        return await self.post(f"/user/{user_id}/schedule", _schedule_body(timezone, rules))


class ScheduleUserClient(_ScheduleEndpoints):
    """Schedules of the authenticated user."""

    async def create(self, timezone: str, rules: list[dict[str, Any]] | None = None) -> APIResponse[dict]:
        return await self.post("/schedule", _schedule_body(timezone, rules))
