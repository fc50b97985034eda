# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector TCP/IP client connector.

Provides a connector for a PjlinkProjectorClientTransport over a TCP/IP
socket.
"""

from __future__ import annotations

from ..internal_types import *
from .connector import PjlinkProjectorConnector
from .client_transport import PjlinkProjectorClientTransport
from .client_config import PjlinkProjectorClientConfig
from .resolve_host import resolve_projector_tcp_host
from .tcp_client_transport import TcpPjlinkProjectorClientTransport

class TcpPjlinkProjectorConnector(PjlinkProjectorConnector):
    """PJLink Projector TCP/IP client transport connector."""

    config: PjlinkProjectorClientConfig
    host: str
    port: int

    def __init__(
            self,
            host: Optional[str]=None,
            port: Optional[int]=None,
            timeout_secs: Optional[float]=None,
            config: Optional[PjlinkProjectorClientConfig]=None,
          ) -> None:
        """Creates a connector that can create transports to
           a PJLink device that is reachable over TCP/IP.

              Args:
                host: The hostname or IP address of the projector.
                      may optionally be prefixed with "tcp://".
                      May be suffixed with ":<port>" to specify a
                      non-default port, which will override the port argument.
                      If None, the host will be taken from the config.
                port: The default TCP/IP port number to use. If None, the port
                      will be taken from the config.
                timeout_secs: The timeout for connecting and for each read or
                        write. If None, the timeout will be taken from the config.
                config: A PjlinkProjectorClientConfig object that specifies
                        the default host, port, etc to use.
                        If None, a default config will be created.
        """
        super().__init__()
        self.config = PjlinkProjectorClientConfig(
            default_host=host,
            default_port=port,
            timeout_secs=timeout_secs,
            base_config=config
          )
        self.host, self.port = resolve_projector_tcp_host(
            self.config.default_host,
            self.config.default_port
          )

    def connect(self) -> PjlinkProjectorClientTransport:
        """Create a new TCP/IP client transport connected to the projector
           associated with this connector.
        """
        return TcpPjlinkProjectorClientTransport.create(
            self.host,
            port=self.port,
            timeout_secs=self.config.timeout_secs
          )

    def __str__(self) -> str:
        return f"TcpPjlinkProjectorConnector(host='{self.host}', port={self.port})"

    def __repr__(self) -> str:
        return str(self)
