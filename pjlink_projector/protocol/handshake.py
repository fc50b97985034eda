# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Connection greeting and challenge-response authentication.

Connection handshake:
  Device: "PJLINK 0\\r" if no authentication is required, or
          "PJLINK 1 <seed>\\r" if it is, where <seed> is an 8-character one-time token
  Client: "%1<command>\\r" without authentication, or
          "<md5hex(seed + password)>%1<command>\\r" with authentication
  Device: a single response line, after which the device closes the connection.
  If the digest is wrong, the device answers "PJLINK ERRA\\r".
"""

from __future__ import annotations

import hashlib

from ..internal_types import *
from ..exceptions import PjlinkProtocolError, PjlinkAuthError
from ..pkg_logging import logger
from .constants import PROTOCOL_PREFIX, TERMINATOR

GREETING_AUTH_FLAG_OFFSET = 7
"""Offset of the authentication flag character in the greeting"""

GREETING_SEED_OFFSET = 9
"""Offset of the seed token in the greeting, when authentication is required"""

SEED_LENGTH = 8

AUTH = "1"
NOAUTH = "0"

GREETING_ENCODING = "latin-1"
"""Greeting bytes are decoded one byte per character so that offsets count bytes"""

class Greeting:
    """The greeting sent by a PJLink device immediately after connecting."""
    auth_required: bool
    seed: Optional[str]

    def __init__(self, auth_required: bool, seed: Optional[str]=None):
        if auth_required and (seed is None or len(seed) != SEED_LENGTH):
            raise PjlinkProtocolError(f"Greeting requiring authentication must carry a {SEED_LENGTH}-character seed: {seed!r}")
        self.auth_required = auth_required
        self.seed = seed if auth_required else None

    @classmethod
    def parse(cls, data: Union[bytes, str]) -> Self:
        """Parses the greeting (terminator optional). Offsets are byte offsets into
           the greeting as received; the seed keeps one character per byte.

        Raises PjlinkProtocolError if the text is too short or the auth flag is
        not recognized.
        """
        text = data.decode(GREETING_ENCODING) if isinstance(data, bytes) else data
        if len(text) <= GREETING_AUTH_FLAG_OFFSET:
            raise PjlinkProtocolError(f"Truncated greeting; not a recognized PJLink device: {text!r}")
        flag = text[GREETING_AUTH_FLAG_OFFSET]
        if flag == NOAUTH:
            return cls(False)
        if flag != AUTH:
            raise PjlinkProtocolError(f"Invalid greeting auth flag {flag!r}; not a recognized PJLink device: {text!r}")
        seed_end = GREETING_SEED_OFFSET + SEED_LENGTH
        if len(text) < seed_end:
            raise PjlinkProtocolError(f"Greeting requires authentication but seed is truncated: {text!r}")
        return cls(True, text[GREETING_SEED_OFFSET:seed_end])

    def __str__(self) -> str:
        if self.auth_required:
            return f"Greeting(auth_required=True, seed={self.seed!r})"
        return "Greeting(auth_required=False)"

    def __repr__(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Greeting):
            return NotImplemented
        return self.auth_required == other.auth_required and self.seed == other.seed

def compute_digest(seed: str, password: str) -> str:
    """Returns the lowercase hex MD5 digest of seed + password. The seed is
       encoded back to the bytes it was received as."""
    return hashlib.md5(seed.encode(GREETING_ENCODING) + password.encode('utf-8')).hexdigest()

def build_command_line(greeting: Greeting, password: Optional[str], command_text: str) -> str:
    """Builds the complete line to send for a command, including the
       authentication digest when the greeting requires one.

    Raises PjlinkAuthError if authentication is required and no password
    is available.
    """
    if not greeting.auth_required:
        logger.debug("Handshake: device does not require authentication")
        return PROTOCOL_PREFIX + command_text + TERMINATOR
    if password is None or password == '':
        raise PjlinkAuthError("Device requires authentication, but no password was supplied")
    assert greeting.seed is not None
    digest = compute_digest(greeting.seed, password)
    logger.debug("Handshake: device requires authentication; prefixing digest")
    return digest + PROTOCOL_PREFIX + command_text + TERMINATOR
