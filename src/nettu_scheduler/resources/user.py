"""User endpoints."""

from collections.abc import Sequence

from nettu_scheduler.client import BaseClient
from nettu_scheduler.resources._query import with_query
from nettu_scheduler.response import APIResponse


class _FreeBusyEndpoint(BaseClient):
    async def free_busy(
        self,
        user_id: str,
        start_ts: int,
        end_ts: int,
        calendar_ids: Sequence[str] | None = None,
    ) -> APIResponse[dict]:
        """Busy periods of a user in ``[start_ts, end_ts]`` (ms).

        Limited to ``calendar_ids`` when given, otherwise all calendars.
        """
        path = with_query(
            f"/user/{user_id}/freebusy",
            startTs=start_ts,
            endTs=end_ts,
            calendarIds=list(calendar_ids) if calendar_ids else None,
        )
        return await self.get(path)


class UserClient(_FreeBusyEndpoint):
    """Users of the account."""

    async def create(self, metadata: dict[str, str] | None = None) -> APIResponse[dict]:
        body = {} if metadata is None else {"metadata": metadata}
        return await self.post("/user", body)

    async def find(self, user_id: str) -> APIResponse[dict]:
        return await self.get(f"/user/{user_id}")

    async def remove(self, user_id: str) -> APIResponse[dict]:
        return await self.delete(f"/user/{user_id}")


class UserUserClient(_FreeBusyEndpoint):
    """The authenticated user."""

    async def me(self) -> APIResponse[dict]:
        return await self.get("/me")
