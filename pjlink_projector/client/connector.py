# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client abstract transport connector interface.

Provides a low-level abstract interface for objects that can create
connected, single-use transports to a PJLink device.
This abstraction allows for the implementation of proxies and alternate network
transports.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from .client_transport import PjlinkProjectorClientTransport

class PjlinkProjectorConnector(ABC):
    """Abstract base class for PJLink Projector client transport connectors."""

    @abstractmethod
    def connect(self) -> PjlinkProjectorClientTransport:
        """Create a new, connected client transport for the projector
           associated with this connector. The greeting has not yet been read.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()
