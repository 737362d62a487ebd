"""Discovery of the local companion service.

The game client exposes its status document on the first free port in a
small fixed range, so the port is unknown up front. ``ToonLocator`` probes
the candidates one at a time, in ascending order, and returns the first
successful response. Per-port failures are logged and skipped; only running
out of ports is an error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from toonscout.core.session import SessionToken
from toonscout.models.constants import (
    DEFAULT_PORT,
    ENDPOINT,
    MAX_PORT,
    PROBE_TIMEOUT,
    USER_AGENT,
)
from toonscout.models.toon import Toon

if TYPE_CHECKING:
    from toonscout.config import Settings

logger = logging.getLogger(__name__)


class LocalServiceNotFound(Exception):
    """Raised when no candidate port answered with a successful response."""

    def __init__(self, ports: list[int]) -> None:
        self.ports = ports
        if ports:
            msg = f"Failed to connect to API server on any port ({ports[0]}-{ports[-1]})"
        else:
            msg = "Failed to connect to API server on any port"
        super().__init__(msg)


class ToonLocator:
    """Finds the local companion service and fetches its status document.

    Usage:
        locator = ToonLocator(SessionToken())
        toon = await locator.fetch_toon()

    ``transport`` is passed straight to ``httpx.AsyncClient``; tests use it
    to swap in an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        session: SessionToken,
        *,
        start_port: int = DEFAULT_PORT,
        max_port: int = MAX_PORT,
        endpoint: str = ENDPOINT,
        timeout: float = PROBE_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.session = session
        self.start_port = start_port
        self.max_port = max_port
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        session: SessionToken,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> ToonLocator:
        return cls(
            session,
            start_port=settings.toonscout_port_start,
            max_port=settings.toonscout_port_end,
            endpoint=settings.toonscout_endpoint,
            timeout=settings.toonscout_probe_timeout,
            transport=transport,
        )

    def candidate_ports(self) -> range:
        return range(self.start_port, self.max_port + 1)

    def url_for(self, port: int) -> str:
        return f"http://localhost:{port}/{self.endpoint}"

    def headers_for(self, port: int) -> dict[str, str]:
        return {
            "Host": f"localhost:{port}",
            "User-Agent": USER_AGENT,
            "Authorization": self.session.get(),
            "Connection": "close",
        }

    async def locate(self) -> dict[str, Any]:
        """Return the parsed status document from the first port that answers 2xx.

        Raises LocalServiceNotFound once every candidate port has failed.
        """
        self.session.get()
        attempted: list[int] = []

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for port in self.candidate_ports():
                attempted.append(port)
                try:
                    response = await client.get(self.url_for(port), headers=self.headers_for(port))
                except httpx.TransportError as exc:
                    logger.warning("Error making request on port %d: %r", port, exc)
                    continue

                if response.is_success:
                    try:
                        result: dict[str, Any] = response.json()
                    except ValueError as exc:
                        logger.warning("Invalid JSON on port %d: %s", port, exc)
                        continue
                    logger.debug("local service found on port %d", port)
                    return result

                logger.warning(
                    "Error on port %d: %d %s %s",
                    port,
                    response.status_code,
                    response.reason_phrase,
                    response.text,
                )

        raise LocalServiceNotFound(attempted)

    async def fetch_toon(self) -> Toon:
        """Locate the service and validate its document into a ``Toon``."""
        return Toon.model_validate(await self.locate())
