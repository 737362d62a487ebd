"""Tests for application configuration."""

import pytest
from pydantic import ValidationError

from toonscout.config import DISCORD_API_BASE, Settings


class TestDefaults:
    def test_port_range(self) -> None:
        settings = Settings()
        assert settings.toonscout_port_start == 1547
        assert settings.toonscout_port_end == 1552
        assert settings.toonscout_endpoint == "info.json"

    def test_discord_base(self, settings: Settings) -> None:
        assert settings.discord_api_base == DISCORD_API_BASE
        assert settings.discord_register_commands is False


class TestPortRange:
    def test_single_port_range(self) -> None:
        settings = Settings(toonscout_port_start=1547, toonscout_port_end=1547)
        assert settings.toonscout_port_start == settings.toonscout_port_end == 1547

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(toonscout_port_start=1552, toonscout_port_end=1547)


class TestProductionPublicKey:
    def test_production_requires_public_key(self) -> None:
        with pytest.raises(ValidationError):
            Settings(toonscout_env="production", discord_public_key="")

    def test_production_with_public_key(self) -> None:
        settings = Settings(toonscout_env="production", discord_public_key="ab" * 32)
        assert settings.toonscout_env == "production"

    def test_development_allows_missing_key(self) -> None:
        settings = Settings(toonscout_env="development", discord_public_key="")
        assert settings.discord_public_key == ""


class TestEnvironment:
    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_TOKEN", "from-env")
        monkeypatch.setenv("TOONSCOUT_PORT_END", "1560")
        settings = Settings()
        assert settings.discord_token == "from-env"
        assert settings.toonscout_port_end == 1560
