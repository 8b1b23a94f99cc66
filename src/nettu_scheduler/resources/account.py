"""Account endpoints (admin only)."""

from nettu_scheduler.client import BaseClient
from nettu_scheduler.response import APIResponse


class AccountClient(BaseClient):
    """Manage the account that owns the API key."""

    async def create(self, code: str) -> APIResponse[dict]:
        """Create a new account. ``code`` is the server's account creation secret."""
        return await self.post("/account", {"code": code})

    async def me(self) -> APIResponse[dict]:
        return await self.get("/account")

    async def set_public_signing_key(self, public_signing_key: str) -> APIResponse[dict]:
        """Register the PEM key used to verify user JWTs."""
        return await self.put("/account/pubkey", {"publicJwtKey": public_signing_key})

    async def remove_public_signing_key(self) -> APIResponse[dict]:
        return await self.delete("/account/pubkey")

    async def set_webhook(self, url: str) -> APIResponse[dict]:
        return await self.put("/account/webhook", {"webhookUrl": url})

    async def remove_webhook(self) -> APIResponse[dict]:
        return await self.delete("/account/webhook")
