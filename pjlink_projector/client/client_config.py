# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client configuration.

Provides general config object for a PjlinkProjectorClient and its
transport connectors.
"""

from __future__ import annotations

import os

from ..internal_types import *
from ..exceptions import PjlinkProjectorError
from ..constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_PORT,
    ENV_HOST,
    ENV_PORT,
    ENV_PASSWORD,
    ENV_TIMEOUT,
  )

def _parse_timeout(timeout_str: str) -> Optional[float]:
    if timeout_str.lower() == 'none':
        return None
    try:
        result = float(timeout_str)
    except ValueError as e:
        raise PjlinkProjectorError(f"Invalid timeout value: {timeout_str!r}") from e
    return None if result <= 0 else result

def _parse_port(port_str: str) -> int:
    try:
        return int(port_str)
    except ValueError as e:
        raise PjlinkProjectorError(f"Invalid port number: {port_str!r}") from e

class PjlinkProjectorClientConfig:
    """PJLink Projector client configuration."""
    default_host: Optional[str]
    default_port: int
    password: Optional[str]
    timeout_secs: Optional[float]

    def __init__(
            self,
            default_host: Optional[str]=None,
            password: Optional[str]=None,
            *,
            default_port: Optional[int]=None,
            timeout_secs: Optional[float]=None,
            base_config: Optional[PjlinkProjectorClientConfig]=None
          ) -> None:
        """Creates a configuration for a PJLink Projector client.

           Args:
             default_host: The default hostname or IP address of the projector.
                   may optionally be prefixed with "tcp://".
                   May be suffixed with ":<port>" to specify a
                   non-default port, which will override the default_port argument.
                   If None, the default host will be taken from the
                     PJLINK_PROJECTOR_HOST environment variable.
             password:
                   The projector password. If None, the password
                   will be taken from the PJLINK_PROJECTOR_PASSWORD
                   environment variable. If an empty string or the
                   environment variable is not found, no password
                   will be used.
             default_port: The default TCP/IP port number to use.
                    If None, the default port will be taken from PJLINK_PROJECTOR_PORT.
                    If that environment variable is not found, the default PJLink
                    port (4352) will be used.
             timeout_secs:
                   The timeout for connecting and for each read or write, in seconds.
                   If None, the timeout will be taken from the
                   PJLINK_PROJECTOR_TIMEOUT environment variable ("none" disables
                   the timeout). If the environment variable is not found, the
                   default timeout will be used.
             base_config:
                     An optional base configuration to use.
        """
        if base_config is None:
            self.init_from_defaults()
        else:
            self.init_from_base_config(base_config)

        if default_host is not None and default_host != '':
            self.default_host = default_host

        if default_port is not None and default_port > 0:
            self.default_port = default_port

        if password is not None:
            self.password = password

        if timeout_secs is not None:
            self.timeout_secs = None if timeout_secs <= 0 else timeout_secs

    def init_from_defaults(self) -> None:
        """Initializes the configuration from defaults."""
        default_host: Optional[str] = os.environ.get(ENV_HOST)
        if default_host == '':
            default_host = None
        self.default_host = default_host
        default_port_str = os.environ.get(ENV_PORT)
        if default_port_str is None or default_port_str == '':
            self.default_port = DEFAULT_PORT
        else:
            self.default_port = _parse_port(default_port_str)
        password = os.environ.get(ENV_PASSWORD)
        if password == '':
            password = None
        self.password = password
        timeout_str = os.environ.get(ENV_TIMEOUT)
        if timeout_str is None or timeout_str == '':
            self.timeout_secs = DEFAULT_TIMEOUT
        else:
            self.timeout_secs = _parse_timeout(timeout_str)

    def init_from_base_config(self, base_config: PjlinkProjectorClientConfig) -> None:
        """Initializes the configuration from a base configuration."""
        self.default_host = base_config.default_host
        self.default_port = base_config.default_port
        self.password = base_config.password
        self.timeout_secs = base_config.timeout_secs

    @classmethod
    def from_jsonable(
            cls,
            data: JsonableDict,
            base_config: Optional[PjlinkProjectorClientConfig]=None
          ) -> Self:
        """Creates a configuration from a JSON-compatible dict. Missing keys
           fall back to base_config, or to the environment and defaults."""
        host = data.get('default_host', data.get('host'))
        port = data.get('default_port', data.get('port'))
        password = data.get('password')
        timeout_secs = data.get('timeout_secs')
        if not host is None and not isinstance(host, str):
            raise PjlinkProjectorError(f"Invalid host in config: {host!r}")
        if isinstance(port, str):
            port = _parse_port(port)
        if not port is None and not isinstance(port, int):
            raise PjlinkProjectorError(f"Invalid port in config: {port!r}")
        if not password is None and not isinstance(password, str):
            raise PjlinkProjectorError("Invalid password in config")
        if isinstance(timeout_secs, str):
            timeout_secs = _parse_timeout(timeout_secs)
            if timeout_secs is None:
                timeout_secs = 0.0
        if not timeout_secs is None and not isinstance(timeout_secs, (int, float)):
            raise PjlinkProjectorError(f"Invalid timeout_secs in config: {timeout_secs!r}")
        return cls(
            default_host=host,
            password=password,
            default_port=port,
            timeout_secs=None if timeout_secs is None else float(timeout_secs),
            base_config=base_config,
          )

    def to_jsonable(self) -> JsonableDict:
        """Returns a JSON-compatible dict. The password is not included."""
        return dict(
            default_host=self.default_host,
            default_port=self.default_port,
            timeout_secs=self.timeout_secs,
          )

    def __str__(self) -> str:
        return (
            f"PjlinkProjectorClientConfig("
            f"default_host={self.default_host}, "
            f"default_port={self.default_port}, "
            f"timeout_secs={self.timeout_secs!r})"
          )

    def __repr__(self) -> str:
        return str(self)
