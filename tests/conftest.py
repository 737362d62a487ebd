"""Shared test fixtures."""

from typing import Any

import pytest

from toonscout.config import Settings
from toonscout.models.toon import Toon


@pytest.fixture
def settings() -> Settings:
    """Test settings with defaults."""
    return Settings(toonscout_env="development", discord_token="test-token-not-real")


def make_toon_data(**overrides: Any) -> dict[str, Any]:
    """Build a status document shaped like the local companion service's ``info.json``."""
    data: dict[str, Any] = {
        "toon": {"name": "Flippy", "id": "abc123"},
        "laff": {"current": 80, "max": 120},
        "location": {
            "district": "Kaboom Cliffs",
            "zone": "Loopy Lane",
            "neighborhood": "Toontown Central",
            "instanceId": 12,
        },
        "gags": {
            "Toon-Up": None,
            "Trap": None,
            "Lure": {
                "gag": {"name": "Hypno Goggles", "level": 6},
                "experience": {"current": 4200, "next": 6000},
                "organic": False,
            },
            "Sound": {
                "gag": {"name": "Opera Singer", "level": 7},
                "experience": {"current": 10000, "next": 10000},
                "organic": False,
            },
            "Throw": {
                "gag": {"name": "Wedding Cake", "level": 7},
                "experience": {"current": 10000, "next": 10000},
                "organic": True,
            },
            "Squirt": {
                "gag": {"name": "Storm Cloud", "level": 6},
                "experience": {"current": 3100, "next": 5000},
                "organic": False,
            },
            "Drop": {
                "gag": {"name": "Safe", "level": 5},
                "experience": {"current": 1500, "next": 2500},
                "organic": False,
            },
        },
        "tasks": [
            {
                "objective": {"text": "Deliver pies", "progress": {"text": "3/5"}},
                "reward": "50 jellybeans",
                "deletable": False,
            },
            {
                "objective": {"text": "Visit Flippy", "progress": {"text": "Complete"}},
                "to": {
                    "name": "Flippy",
                    "building": "Toon Hall",
                    "zone": "Playground",
                    "neighborhood": "Toontown Central",
                },
                "reward": "+1 laff",
                "deletable": True,
            },
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture
def toon_data() -> dict[str, Any]:
    return make_toon_data()


@pytest.fixture
def toon(toon_data: dict[str, Any]) -> Toon:
    return Toon.model_validate(toon_data)
