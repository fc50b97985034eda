# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PjlinkProtocolError
from .command_meta import CommandClass, verb_to_command_meta
from .constants import (
    PROTOCOL_PREFIX,
    PREFIX_LENGTH,
    REPLY_MARKER,
    SEPARATORS,
    TERMINATOR,
    ACK_VALUE,
  )
from .device_errors import is_error_code, classify_error_code

def _find_separator(raw: str) -> int:
    """Returns the index of the first separator in raw, or -1 if there is none"""
    for i, c in enumerate(raw):
        if c in SEPARATORS:
            return i
    return -1

class PjlinkResponse:
    """A response from a PJLink device.

    Framed responses are of the form:

        %1<VERB>=<VALUE>

    (a space is also accepted in place of '='), with the terminating carriage
    return already stripped. Lines that do not begin with '%' (e.g. "PJLINK ERRA",
    sent on authentication failure) are generic replies.

    A value that is a device error code ("ERR1".."ERR4", "ERRA") is never
    represented as a PjlinkResponse; parse() raises the classified
    PjlinkDeviceError instead.
    """
    command_class: CommandClass
    value: str

    def __init__(self, command_class: CommandClass, value: str):
        self.command_class = command_class
        self.value = value

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Parses a raw response line.

        Raises PjlinkProtocolError if the line is malformed or its class is not
        recognized, and PjlinkDeviceError if the value is a device error code.
        """
        if raw.endswith(TERMINATOR):
            raw = raw[:-len(TERMINATOR)]
        sep_index = _find_separator(raw)
        if raw.startswith(REPLY_MARKER):
            if sep_index < 0:
                raise PjlinkProtocolError(f"Response has no separator between class and value: {raw!r}")
            token = raw[PREFIX_LENGTH:sep_index]
            command_class = verb_to_command_meta(token)
            if command_class is None:
                raise PjlinkProtocolError(f"Unrecognized response class {token!r}: {raw!r}")
        else:
            command_class = CommandClass.GENERIC
        value = raw if sep_index < 0 else raw[sep_index+1:]
        if is_error_code(value):
            raise classify_error_code(value)
        return cls(command_class, value)

    @classmethod
    def encode_reply(cls, command_class: CommandClass, value: str) -> str:
        """Renders the framed reply line (without terminator) that a device would send
           for a command class and value."""
        if command_class.verb is None:
            return value
        return PROTOCOL_PREFIX + command_class.verb + SEPARATORS[0] + value

    @property
    def name(self) -> str:
        return f"Response<{self.command_class.name}>"

    @property
    def is_ack(self) -> bool:
        """Returns True iff the response acknowledges a successful set command"""
        return self.value == ACK_VALUE

    def verify_class(self, expected: CommandClass) -> None:
        """Raises PjlinkProtocolError if this response is not of the expected class"""
        if self.command_class != expected:
            raise PjlinkProtocolError(
                f"Response class {self.command_class.name} does not match command class {expected.name}: {self}")

    def verify_ack(self) -> None:
        """Raises PjlinkProtocolError if this response is not an "OK" acknowledgement"""
        if not self.is_ack:
            raise PjlinkProtocolError(f"Expected {ACK_VALUE!r} acknowledgement, got: {self}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PjlinkResponse):
            return NotImplemented
        return self.command_class == other.command_class and self.value == other.value

    def __str__(self) -> str:
        return f"PjlinkResponse({self.command_class.name}: {self.value!r})"

    def __repr__(self) -> str:
        return str(self)
