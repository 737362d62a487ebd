"""Shared constants for ToonScout models.

Placed here so the formatter, the locator, and the slash-command
definitions can all import them without depending on each other.
"""

from __future__ import annotations

# Canonical track order, as the game lays out the gag page.
GAG_TRACKS: list[str] = [
    "Toon-Up",
    "Trap",
    "Lure",
    "Sound",
    "Throw",
    "Squirt",
    "Drop",
]

HIGHEST_GAG = 7

# Continuation indent for multi-line Discord replies.
INDENT = " " * 8

# Local companion service
DEFAULT_PORT = 1547
MAX_PORT = 1552
ENDPOINT = "info.json"
USER_AGENT = "ToonScout"

# Seconds per port. A scan of the whole default range must finish inside
# Discord's 3 second window for the initial interaction response.
PROBE_TIMEOUT = 0.4
