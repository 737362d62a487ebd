"""Tests for slash command definitions."""

from toonscout.discord.commands import ALL_COMMANDS, GAGS_COMMAND, TASKS_COMMAND
from toonscout.models.constants import GAG_TRACKS


class TestCommandDefinitions:
    def test_names(self) -> None:
        assert [c["name"] for c in ALL_COMMANDS] == ["laff", "location", "gags", "tasks"]

    def test_all_chat_input(self) -> None:
        assert all(c["type"] == 1 for c in ALL_COMMANDS)

    def test_gag_track_choices_follow_canonical_order(self) -> None:
        (option,) = GAGS_COMMAND["options"]
        assert option["type"] == 3  # string
        assert [choice["value"] for choice in option["choices"]] == GAG_TRACKS

    def test_task_slot_is_optional_integer(self) -> None:
        (option,) = TASKS_COMMAND["options"]
        assert option["type"] == 4  # integer
        assert option["required"] is False
        assert option["min_value"] == 1
