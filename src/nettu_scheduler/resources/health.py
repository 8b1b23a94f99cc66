"""Health check endpoint."""

from nettu_scheduler.client import BaseClient
from nettu_scheduler.response import APIResponse


class HealthClient(BaseClient):
    async def check_status(self) -> APIResponse[dict]:
        """Ping the scheduler. A 200 status means it is up."""
        return await self.get("/healthcheck")
