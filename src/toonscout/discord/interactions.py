"""Discord interactions endpoint.

Discord POSTs every interaction here. PINGs are answered with a PONG;
slash commands fetch the toon from the local companion service and reply
with formatted text.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Annotated, Any

from discord import InteractionResponseType, InteractionType
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from toonscout.core.formatting import (
    format_gag_info,
    format_laff,
    format_location,
    format_tasks,
)
from toonscout.core.locator import LocalServiceNotFound, ToonLocator
from toonscout.discord.verify import verify_discord_request
from toonscout.models.toon import Toon

logger = logging.getLogger(__name__)

router = APIRouter(tags=["discord"])

SERVICE_UNAVAILABLE_MESSAGE = (
    "Couldn't reach Toontown Rewritten. Make sure the game is running "
    "and ToonScout has been allowed access."
)

INVALID_DOCUMENT_MESSAGE = (
    "Toontown Rewritten answered, but its toon data could not be read. "
    "Try again once your toon has fully loaded."
)

Interaction = Annotated[dict[str, Any], Depends(verify_discord_request)]


def _options(data: dict[str, Any]) -> dict[str, Any]:
    """Flatten the interaction's option list into name -> value."""
    return {opt["name"]: opt.get("value") for opt in data.get("options", [])}


def _laff(toon: Toon, options: dict[str, Any]) -> str:
    return f"**{toon.name}** has {format_laff(toon)} laff."


def _location(toon: Toon, options: dict[str, Any]) -> str:
    return f"**{toon.name}** is in {format_location(toon)}."


def _gags(toon: Toon, options: dict[str, Any]) -> str:
    return format_gag_info(toon, options.get("track"))


def _tasks(toon: Toon, options: dict[str, Any]) -> str:
    slot = options.get("slot")
    return format_tasks(toon, int(slot) if slot is not None else None)


COMMAND_HANDLERS: dict[str, Callable[[Toon, dict[str, Any]], str]] = {
    "laff": _laff,
    "location": _location,
    "gags": _gags,
    "tasks": _tasks,
}


def _message(content: str) -> dict[str, Any]:
    return {
        "type": InteractionResponseType.channel_message.value,
        "data": {"content": content},
    }


async def handle_command(locator: ToonLocator, data: dict[str, Any]) -> str:
    """Run one slash command and return the reply text."""
    name = data.get("name", "")
    handler = COMMAND_HANDLERS.get(name)
    if handler is None:
        logger.warning("unknown_command name=%s", name)
        return f"Unknown command: {name}"

    try:
        toon = await locator.fetch_toon()
    except LocalServiceNotFound as exc:
        logger.warning("command %s failed: %s", name, exc)
        return SERVICE_UNAVAILABLE_MESSAGE
    except ValidationError as exc:
        logger.warning("command %s got an unreadable status document: %s", name, exc)
        return INVALID_DOCUMENT_MESSAGE

    return handler(toon, _options(data))


@router.post("/interactions")
async def interactions(request: Request, interaction: Interaction) -> dict[str, Any]:
    """Answer a verified Discord interaction."""
    interaction_type = interaction.get("type")

    if interaction_type == InteractionType.ping.value:
        return {"type": InteractionResponseType.pong.value}

    if interaction_type == InteractionType.application_command.value:
        locator: ToonLocator = request.app.state.locator
        content = await handle_command(locator, interaction.get("data", {}))
        return _message(content)

    logger.warning("unhandled interaction type=%s", interaction_type)
    raise HTTPException(status_code=400, detail="Unsupported interaction type")
