"""Thin async client for Discord's REST API.

Adds the bot authorization, JSON encoding, and user agent Discord expects,
and turns non-2xx responses into ``DiscordAPIError``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from toonscout.config import DISCORD_API_BASE

if TYPE_CHECKING:
    from toonscout.config import Settings

logger = logging.getLogger(__name__)

USER_AGENT = "DiscordBot (https://github.com/discord/discord-example-app, 1.0.0)"


class DiscordAPIError(Exception):
    """Raised when Discord answers with a non-2xx status.

    ``payload`` is the parsed error body Discord returned.
    """

    def __init__(self, status_code: int, payload: dict[str, Any]) -> None:
        self.status_code = status_code
        self.payload = payload
        super().__init__(json.dumps(payload))


class DiscordClient:
    """Outbound Discord REST calls.

    Usage:
        client = DiscordClient(settings.discord_token)
        await client.request("channels/123/messages", method="POST", body={"content": "hi"})
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = DISCORD_API_BASE,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.token = token
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> DiscordClient:
        return cls(settings.discord_token, base_url=settings.discord_api_base, transport=transport)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bot {self.token}",
            "Content-Type": "application/json; charset=UTF-8",
            "User-Agent": USER_AGENT,
        }

    async def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        body: Any = None,
    ) -> httpx.Response:
        """Send *method* to ``base_url + endpoint`` and return the response.

        Raises DiscordAPIError on a non-2xx status.
        """
        url = self.base_url + endpoint
        content = json.dumps(body) if body is not None else None
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(method, url, headers=self.headers, content=content)

        if not response.is_success:
            try:
                payload = response.json()
            except ValueError:
                payload = {"message": response.text}
            logger.error("discord_api_error %s %s status=%d", method, endpoint, response.status_code)
            raise DiscordAPIError(response.status_code, payload)
        return response

    async def install_global_commands(
        self,
        app_id: str,
        commands: list[dict[str, Any]],
    ) -> bool:
        """Bulk-overwrite the application's global slash commands.

        Failures are logged, not raised. Returns True when Discord accepted
        the new command list.
        """
        endpoint = f"applications/{app_id}/commands"
        try:
            await self.request(endpoint, method="PUT", body=commands)
        except (DiscordAPIError, httpx.HTTPError):
            logger.exception("Failed to install global commands for app %s", app_id)
            return False
        logger.info("installed %d global commands for app %s", len(commands), app_id)
        return True
