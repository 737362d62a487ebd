"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from toonscout.config import Settings
from toonscout.core.locator import ToonLocator
from toonscout.core.session import SessionToken
from toonscout.discord.client import DiscordClient
from toonscout.discord.commands import ALL_COMMANDS
from toonscout.discord.interactions import router as interactions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: optionally overwrite the global slash commands."""
    settings: Settings = app.state.settings

    if settings.discord_register_commands:
        if settings.discord_token and settings.discord_app_id:
            discord_client: DiscordClient = app.state.discord_client
            await discord_client.install_global_commands(settings.discord_app_id, ALL_COMMANDS)
        else:
            logger.warning("command_registration_skipped: DISCORD_TOKEN or DISCORD_APP_ID unset")
    else:
        logger.info("command_registration_disabled")

    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the ToonScout FastAPI application."""
    settings = settings or Settings()

    logging.basicConfig(
        level=getattr(logging, settings.toonscout_log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="ToonScout",
        version="0.1.0",
        description="Discord interactions for the Toontown Rewritten local companion API",
        docs_url="/docs" if settings.toonscout_env != "production" else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session_token = SessionToken()
    app.state.locator = ToonLocator.from_settings(settings, app.state.session_token)
    app.state.discord_client = DiscordClient.from_settings(settings)

    app.include_router(interactions_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.toonscout_env}

    return app


app = create_app()
