# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Constants used by pjlink_projector"""

from __future__ import annotations

from typing import Optional

DEFAULT_PORT = 4352
"""The listen port number used by PJLink devices for TCP/IP control."""

DEFAULT_TIMEOUT: Optional[float] = 5.0
"""The default timeout for connecting and for each read/write on a connection, in seconds.
   None means block indefinitely."""

GREETING_BUFFER_SIZE = 256
"""Upper bound on the number of bytes read for the greeting sent by the device on connect."""

MAX_RESPONSE_LENGTH = 256
"""Upper bound on the number of bytes in a single response line, including the terminator."""

ENV_HOST = 'PJLINK_PROJECTOR_HOST'
ENV_PORT = 'PJLINK_PROJECTOR_PORT'
ENV_PASSWORD = 'PJLINK_PROJECTOR_PASSWORD'
ENV_TIMEOUT = 'PJLINK_PROJECTOR_TIMEOUT'
ENV_CONFIG = 'PJLINK_PROJECTOR_CONFIG'

DEFAULT_CONFIG_FILENAME = 'pjlink_projector_config.json'
"""Config file read by the REST server from the current directory if ENV_CONFIG is not set."""
