# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PjlinkProjectorError
from .command_meta import CommandClass, verb_to_command_meta
from .constants import QUERY_PARAMETER, TERMINATOR

class PjlinkCommand:
    """A command to a PJLink device: a 4-character verb and a parameter.

    The command text is rendered as "<VERB> <PARAMETER>", e.g. "POWR ?" or "INPT 31".
    Framing ("%1" prefix, terminator) and authentication are added at send time.
    """
    command_class: CommandClass
    parameter: str

    def __init__(self, command_class: CommandClass, parameter: str=QUERY_PARAMETER):
        if command_class.verb is None:
            raise PjlinkProjectorError(f"Cannot send a command of class {command_class.name}")
        if parameter == '':
            raise PjlinkProjectorError(f"Empty parameter for command {command_class.verb}")
        if TERMINATOR in parameter:
            raise PjlinkProjectorError(f"Command parameter may not contain a terminator: {parameter!r}")
        if parameter != QUERY_PARAMETER and not command_class.is_settable:
            raise PjlinkProjectorError(f"{command_class.verb} is query-only; cannot set it to {parameter!r}")
        self.command_class = command_class
        self.parameter = parameter

    @property
    def verb(self) -> str:
        """Returns the 4-character verb of the command"""
        verb = self.command_class.verb
        assert verb is not None
        return verb

    @property
    def name(self) -> str:
        return self.command_class.name

    @property
    def is_query(self) -> bool:
        """Returns True iff the command queries rather than sets"""
        return self.parameter == QUERY_PARAMETER

    @property
    def text(self) -> str:
        """Returns the command text, without framing"""
        return self.verb + " " + self.parameter

    @classmethod
    def query(cls, command_class: CommandClass) -> Self:
        """Creates a query ("?") command for a command class"""
        return cls(command_class, QUERY_PARAMETER)

    @classmethod
    def create_from_text(cls, text: str) -> Self:
        """Parses command text of the form "<VERB> <PARAMETER>"."""
        verb, sep, parameter = text.partition(" ")
        command_class = verb_to_command_meta(verb)
        if command_class is None or sep == '':
            raise PjlinkProjectorError(f"Unrecognized command: {text!r}")
        return cls(command_class, parameter)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PjlinkCommand):
            return NotImplemented
        return self.command_class == other.command_class and self.parameter == other.parameter

    def __hash__(self) -> int:
        return hash((self.command_class, self.parameter))

    def __str__(self) -> str:
        return f"PjlinkCommand({self.text})"

    def __repr__(self) -> str:
        return str(self)
