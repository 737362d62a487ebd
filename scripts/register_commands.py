"""Overwrite ToonScout's global slash commands on Discord.

Reads DISCORD_TOKEN and DISCORD_APP_ID from the environment (or .env).

Usage:
    # Show the commands that would be registered:
    python scripts/register_commands.py

    # Register them:
    python scripts/register_commands.py --apply
"""

from __future__ import annotations

import asyncio
import json
import sys

from toonscout.config import Settings
from toonscout.discord.client import DiscordClient
from toonscout.discord.commands import ALL_COMMANDS


async def register(apply: bool = False) -> int:
    settings = Settings()
    print(f"{len(ALL_COMMANDS)} commands: {', '.join(c['name'] for c in ALL_COMMANDS)}")

    if not apply:
        print(json.dumps(ALL_COMMANDS, indent=2))
        print("\nRun with --apply to register these commands.")
        return 0

    if not settings.discord_token or not settings.discord_app_id:
        print("DISCORD_TOKEN and DISCORD_APP_ID must be set.")
        return 1

    client = DiscordClient.from_settings(settings)
    ok = await client.install_global_commands(settings.discord_app_id, ALL_COMMANDS)
    print("Registered." if ok else "Registration failed, see log output.")
    return 0 if ok else 1


def main() -> None:
    apply = "--apply" in sys.argv
    sys.exit(asyncio.run(register(apply=apply)))


if __name__ == "__main__":
    main()
