"""Tests for PjlinkCommand encoding."""

import pytest

from pjlink_projector.exceptions import PjlinkProjectorError
from pjlink_projector.protocol import CommandClass, PjlinkCommand


class TestPjlinkCommand:
    """Tests for PjlinkCommand."""

    def test_query_text(self):
        """Test query rendering."""
        command = PjlinkCommand.query(CommandClass.POWER)
        assert command.text == "POWR ?"
        assert command.is_query

    @pytest.mark.parametrize("command_class,parameter,text", [
        (CommandClass.POWER, "1", "POWR 1"),
        (CommandClass.INPUT, "31", "INPT 31"),
        (CommandClass.AVMUTE, "11", "AVMT 11"),
    ])
    def test_set_text(self, command_class, parameter, text):
        """Test set command rendering."""
        command = PjlinkCommand(command_class, parameter)
        assert command.text == text
        assert not command.is_query

    def test_every_class_has_four_character_verb(self):
        """Test that every sendable class renders a 4-character verb."""
        for command_class in CommandClass:
            if command_class == CommandClass.GENERIC:
                continue
            assert len(PjlinkCommand.query(command_class).verb) == 4

    def test_generic_cannot_be_sent(self):
        """Test that a generic command is rejected."""
        with pytest.raises(PjlinkProjectorError):
            PjlinkCommand.query(CommandClass.GENERIC)

    @pytest.mark.parametrize("parameter", ["", "1\r"])
    def test_invalid_parameter(self, parameter):
        """Test that empty or terminator-bearing parameters are rejected."""
        with pytest.raises(PjlinkProjectorError):
            PjlinkCommand(CommandClass.POWER, parameter)

    def test_create_from_text(self):
        """Test parsing command text back into a command."""
        assert PjlinkCommand.create_from_text("INPT 32") == PjlinkCommand(CommandClass.INPUT, "32")

    @pytest.mark.parametrize("text", ["XXXX ?", "POWR", ""])
    def test_create_from_text_invalid(self, text):
        """Test that unknown verbs and missing parameters are rejected."""
        with pytest.raises(PjlinkProjectorError):
            PjlinkCommand.create_from_text(text)

    def test_settable_classes(self):
        """Test which classes accept set parameters."""
        assert CommandClass.POWER.is_settable
        assert CommandClass.INPUT.is_settable
        assert CommandClass.AVMUTE.is_settable
        assert not CommandClass.LAMP.is_settable

    @pytest.mark.parametrize("command_class", [
        CommandClass.LAMP,
        CommandClass.NAME,
        CommandClass.ERROR_STATUS,
        CommandClass.CLASS,
    ])
    def test_query_only_classes_reject_set(self, command_class):
        """Test that only settable classes accept a parameter other than "?"."""
        assert PjlinkCommand.query(command_class).is_query
        with pytest.raises(PjlinkProjectorError):
            PjlinkCommand(command_class, "1")

    def test_create_from_text_rejects_query_only_set(self):
        """Test that parsed command text obeys the same rule."""
        with pytest.raises(PjlinkProjectorError):
            PjlinkCommand.create_from_text("LAMP 1")
