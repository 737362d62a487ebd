"""Application settings via pydantic-settings. Loads from environment and .env file."""

from __future__ import annotations

from pydantic import model_validator
from pydantic_settings import BaseSettings

from toonscout.models.constants import DEFAULT_PORT, ENDPOINT, MAX_PORT, PROBE_TIMEOUT

DISCORD_API_BASE = "https://discord.com/api/v10/"


class Settings(BaseSettings):
    """ToonScout configuration.

    All values can be overridden via environment variables or .env file.
    """

    # Discord
    discord_token: str = ""
    discord_app_id: str = ""
    discord_public_key: str = ""
    discord_api_base: str = DISCORD_API_BASE
    discord_register_commands: bool = False

    # Environment
    toonscout_env: str = "development"

    # Local companion service
    toonscout_port_start: int = DEFAULT_PORT
    toonscout_port_end: int = MAX_PORT  # inclusive
    toonscout_endpoint: str = ENDPOINT
    toonscout_probe_timeout: float = PROBE_TIMEOUT  # seconds per port

    # Logging
    toonscout_log_level: str = "INFO"

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _check_port_range(self) -> Settings:
        if self.toonscout_port_end < self.toonscout_port_start:
            msg = (
                f"TOONSCOUT_PORT_END ({self.toonscout_port_end}) must not be below "
                f"TOONSCOUT_PORT_START ({self.toonscout_port_start})"
            )
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _require_public_key_in_production(self) -> Settings:
        """Interactions cannot be verified without a key, so production refuses to start."""
        if self.toonscout_env == "production" and not self.discord_public_key:
            msg = "DISCORD_PUBLIC_KEY must be set in production."
            raise ValueError(msg)
        return self
