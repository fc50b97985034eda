# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector host IP/Port resolver.

Provides a method that can resolve various host specifiers and environment
variables into a projector host and port.
"""

from __future__ import annotations

import os

from ..internal_types import *
from ..exceptions import PjlinkProjectorError
from ..constants import DEFAULT_PORT, ENV_HOST, ENV_PORT

def resolve_projector_tcp_host(
        host: Optional[str]=None,
        default_port: Optional[int]=None,
      ) -> Tuple[str, int]:
    """Resolves a projector host string into a hostname and port.

        Args:
            host: The hostname or IP address of the projector.
                    may optionally be prefixed with "tcp://".
                    May be suffixed with ":<port>" to specify a
                    non-default port, which will override the default_port argument.
                    IPv6 addresses with a port must be bracketed, e.g. "[::1]:4352".
                    If None, the host will be taken from the
                    PJLINK_PROJECTOR_HOST environment variable.
            default_port: The default TCP/IP port number to use. If None, the port
                    will be taken from PJLINK_PROJECTOR_PORT. If that
                    environment variable is not found, the default PJLink
                    port (4352) will be used.

        Returns:
            A tuple of (hostname: str, port: int)
    """
    if host is None or host == '':
        host = os.environ.get(ENV_HOST)
        if host is None or host == '':
            raise PjlinkProjectorError(f"No projector host specified, and {ENV_HOST} is not set")

    if default_port is None or default_port <= 0:
        default_port_str = os.environ.get(ENV_PORT)
        if default_port_str is None or default_port_str == '':
            default_port = DEFAULT_PORT
        else:
            default_port = int(default_port_str)

    if '://' in host:
        if not host.startswith('tcp://'):
            raise PjlinkProjectorError(f"Invalid host protocol specifier for TCP transport: '{host}'")
        host = host[6:]

    port: int = default_port
    port_str: Optional[str] = None
    if host.startswith('['):
        addr, sep, rest = host[1:].partition(']')
        if sep == '':
            raise PjlinkProjectorError(f"Unterminated IPv6 address in host specifier: '{host}'")
        if rest.startswith(':'):
            port_str = rest[1:]
        elif rest != '':
            raise PjlinkProjectorError(f"Invalid host specifier: '{host}'")
        host = addr
    elif host.count(':') == 1:
        host, port_str = host.rsplit(':', 1)

    if not port_str is None:
        try:
            port = int(port_str)
        except ValueError as e:
            raise PjlinkProjectorError(f"Invalid port number in host specifier: '{port_str}'") from e

    if host == '':
        raise PjlinkProjectorError("Empty projector host")

    return (host, port)
