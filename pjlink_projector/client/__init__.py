# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client.

Provides a blocking client for PJLink devices on TCP/IP.
"""

from .resolve_host import resolve_projector_tcp_host
from .client_transport import PjlinkProjectorClientTransport
from .tcp_client_transport import TcpPjlinkProjectorClientTransport
from .connector import PjlinkProjectorConnector
from .tcp_connector import TcpPjlinkProjectorConnector
from .client_config import PjlinkProjectorClientConfig
from .client_impl import (
    PjlinkProjectorClient,
  )
