"""Session token shared with the local companion service.

The token is an opaque rendezvous string: the companion service shows it to
the player for approval and remembers it, so ToonScout must keep presenting
the same value for as long as the process lives.
"""

from __future__ import annotations

import logging
import secrets
import threading

logger = logging.getLogger(__name__)


class SessionToken:
    """Lazily generated, process-lifetime bearer token.

    Create one per process (the app factory does) and hand it to every
    ``ToonLocator``. The first ``get()`` generates the token; later calls
    return the same value, even under concurrent first use.
    """

    def __init__(self, value: str | None = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def get(self) -> str:
        """Return the token, generating it on first use."""
        if self._value is None:
            with self._lock:
                if self._value is None:
                    self._value = secrets.token_urlsafe(16)
                    logger.info("New session token generated.")
        return self._value
