"""Bookable service endpoints."""

from typing import Any

from nettu_scheduler.client import BaseClient
from nettu_scheduler.resources._query import with_query
from nettu_scheduler.response import APIResponse


class ServiceUserClient(BaseClient):
    """Booking slot lookups, the only service endpoint open to end users."""

    async def get_bookingslots(
        self,
        service_id: str,
        *,
        start_date: str,
        end_date: str,
        duration: int,
        interval: int,
        iana_tz: str | None = None,
    ) -> APIResponse[dict]:
        """Free slots of the service between two ``YYYY-MM-DD`` dates.

        ``duration`` and ``interval`` are in milliseconds.
        """
        path = with_query(
            f"/service/{service_id}/booking",
            startDate=start_date,
            endDate=end_date,
            ianaTz=iana_tz,
            duration=duration,
            interval=interval,
        )
        return await self.get(path)


class ServiceClient(ServiceUserClient):
    """Create services and manage which users take part in them."""

    async def create(self, metadata: dict[str, str] | None = None) -> APIResponse[dict]:
        body = {} if metadata is None else {"metadata": metadata}
        return await self.post("/service", body)

    async def find(self, service_id: str) -> APIResponse[dict]:
        return await self.get(f"/service/{service_id}")

    async def remove(self, service_id: str) -> APIResponse[dict]:
        return await self.delete(f"/service/{service_id}")

    async def add_user(self, service_id: str, user_id: str, **options: Any) -> APIResponse[dict]:
        """Add a user to the service.

        ``options`` are sent as-is, e.g. ``availability``, ``buffer``,
        ``closestBookingTime`` or ``furthestBookingTime``.
        """
        return await self.post(f"/service/{service_id}/users", {"userId": user_id, **options})

    async def update_user(self, service_id: str, user_id: str, **options: Any) -> APIResponse[dict]:
        return await self.put(f"/service/{service_id}/users/{user_id}", options)

    async def remove_user(self, service_id: str, user_id: str) -> APIResponse[dict]:
        return await self.delete(f"/service/{service_id}/users/{user_id}")
