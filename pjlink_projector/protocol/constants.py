# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Wire-level constants for the PJLink protocol"""

from __future__ import annotations

PROTOCOL_PREFIX = "%1"
"""Prefix of every class 1 command and response line. The '1' is the protocol class."""

REPLY_MARKER = "%"
"""First character of a framed reply. Replies that do not start with it are generic."""

PREFIX_LENGTH = len(PROTOCOL_PREFIX)

TERMINATOR = "\r"
"""Terminates every greeting, command and response line."""

TERMINATOR_BYTE = b"\r"

SEPARATORS = ("=", " ")
"""Characters that may separate the class code from the value in a response."""

QUERY_PARAMETER = "?"

ACK_VALUE = "OK"
"""Value returned by the device when a set command succeeds."""

ERROR_MARKER = "ERR"
"""First three characters of a device error code."""

ERROR_CODE_LENGTH = 4
"""Total length of a device error code, e.g. "ERR3"."""

DIGEST_LENGTH = 32
"""Length of the hex MD5 digest that prefixes an authenticated command."""
