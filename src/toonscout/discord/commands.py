"""Slash command definitions, in the JSON shape Discord's bulk-overwrite endpoint takes."""

from __future__ import annotations

from typing import Any

from discord import AppCommandOptionType, AppCommandType

from toonscout.models.constants import GAG_TRACKS

LAFF_COMMAND: dict[str, Any] = {
    "name": "laff",
    "description": "Show your toon's current laff",
    "type": AppCommandType.chat_input.value,
}

LOCATION_COMMAND: dict[str, Any] = {
    "name": "location",
    "description": "Show where your toon is",
    "type": AppCommandType.chat_input.value,
}

GAGS_COMMAND: dict[str, Any] = {
    "name": "gags",
    "description": "Show your toon's gags, or progress in one track",
    "type": AppCommandType.chat_input.value,
    "options": [
        {
            "type": AppCommandOptionType.string.value,
            "name": "track",
            "description": "Gag track to check",
            "required": False,
            "choices": [{"name": track, "value": track} for track in GAG_TRACKS],
        }
    ],
}

TASKS_COMMAND: dict[str, Any] = {
    "name": "tasks",
    "description": "Show your toon's tasks, or one task in detail",
    "type": AppCommandType.chat_input.value,
    "options": [
        {
            "type": AppCommandOptionType.integer.value,
            "name": "slot",
            "description": "Task slot to show (1 is the first)",
            "required": False,
            "min_value": 1,
        }
    ],
}

ALL_COMMANDS: list[dict[str, Any]] = [
    LAFF_COMMAND,
    LOCATION_COMMAND,
    GAGS_COMMAND,
    TASKS_COMMAND,
]
