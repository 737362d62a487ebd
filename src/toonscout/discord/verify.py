"""Ed25519 verification of inbound Discord interactions.

Discord signs ``timestamp + raw_body`` with the application's private key
and sends the signature and timestamp as headers. Requests that fail the
check are rejected with 401 before any handler runs.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import HTTPException, Request
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

from toonscout.config import Settings

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def verify_key(body: bytes, signature: str, timestamp: str, public_key: str) -> bool:
    """Return True if *signature* is a valid signature of ``timestamp + body``.

    Malformed hex in the key or signature counts as invalid.
    """
    if not (signature and timestamp and public_key):
        return False
    try:
        key = VerifyKey(bytes.fromhex(public_key))
        key.verify(timestamp.encode() + body, bytes.fromhex(signature))
    except (BadSignatureError, ValueError, TypeError):
        return False
    return True


async def verify_discord_request(request: Request) -> dict[str, Any]:
    """FastAPI dependency: verify the interaction signature and return its payload.

    Raises HTTPException(401) on a missing or bad signature.
    """
    settings: Settings = request.app.state.settings
    signature = request.headers.get(SIGNATURE_HEADER, "")
    timestamp = request.headers.get(TIMESTAMP_HEADER, "")
    body = await request.body()

    if not verify_key(body, signature, timestamp, settings.discord_public_key):
        logger.warning("Rejected interaction with bad request signature")
        raise HTTPException(status_code=401, detail="Bad request signature")

    try:
        payload: dict[str, Any] = json.loads(body)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Interaction body is not JSON") from exc
    return payload
