# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client abstract transport interface.

Provides a low-level abstract interface for a single-use connection to a
PJLink device: read the greeting, write one command line, read one response
line, close. Does not provide authentication or any higher-level abstractions
such as semantic commands or responses.

This abstraction allows for the implementation of proxies, alternate network
transports, and scripted transports for testing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..internal_types import *
from ..protocol import Greeting

class PjlinkProjectorClientTransport(ABC):
    @abstractmethod
    def read_greeting(self) -> Greeting:
        """Reads and parses the greeting sent by the device on connect.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Writes a complete, terminated command line to the device.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    @abstractmethod
    def read_line(self) -> str:
        """Reads one response line from the device, with the terminator stripped.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    @abstractmethod
    def close(self) -> None:
        """Closes the connection. Has no effect if it is already closed.

        Must be implemented by subclasses.
        """
        raise NotImplementedError()

    def __enter__(self) -> PjlinkProjectorClientTransport:
        """Enters a context that will close the transport on exit."""
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
          ) -> None:
        self.close()
