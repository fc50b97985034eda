# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector TCP/IP client transport.

Provides an implementation of PjlinkProjectorClientTransport over a blocking
TCP/IP socket. Each transport services exactly one command.
"""

from __future__ import annotations

import socket

from ..internal_types import *
from ..exceptions import (
    PjlinkProtocolError,
    PjlinkTransportError,
    PjlinkTimeoutError,
  )
from ..constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_PORT,
    GREETING_BUFFER_SIZE,
    MAX_RESPONSE_LENGTH,
  )
from ..pkg_logging import logger
from ..protocol import Greeting
from ..protocol.constants import TERMINATOR_BYTE, DIGEST_LENGTH

from .client_transport import PjlinkProjectorClientTransport

class TcpPjlinkProjectorClientTransport(PjlinkProjectorClientTransport):
    """PJLink Projector TCP/IP client transport."""

    sock: Optional[socket.socket] = None
    host: str
    port: int
    timeout_secs: Optional[float]
    lines_written: int = 0

    def __init__(
            self,
            host: str,
            port: int=DEFAULT_PORT,
            timeout_secs: Optional[float]=DEFAULT_TIMEOUT
          ) -> None:
        """Initializes the transport. Does not connect.
        """
        super().__init__()
        self.host = host
        self.port = port
        self.timeout_secs = timeout_secs

    def connect(self) -> None:
        """Connects to the device, with timeout.

        On error, the transport is closed, and no further interaction is possible.
        """
        assert self.sock is None
        logger.debug(f"Connecting to projector at {self.host}:{self.port}")
        try:
            self.sock = socket.create_connection((self.host, self.port), timeout=self.timeout_secs)
        except socket.timeout as e:
            raise PjlinkTimeoutError(
                f"Timed out connecting to {self.host}:{self.port}", timeout_secs=self.timeout_secs) from e
        except OSError as e:
            raise PjlinkTransportError(f"Unable to connect to {self.host}:{self.port}: {e}") from e
        logger.debug(f"{self}: connected")

    def _read_until_terminator(self, max_length: int) -> bytes:
        """Reads bytes up to and including the terminator, or until max_length bytes
           have been read, or until the device closes the connection.

        On error, the transport is closed, and no further interaction is possible.
        """
        if self.sock is None:
            raise PjlinkTransportError(f"{self}: not connected")
        data = b''
        try:
            while len(data) < max_length and not data.endswith(TERMINATOR_BYTE):
                # one byte at a time so that nothing after the terminator is consumed
                chunk = self.sock.recv(1)
                if len(chunk) == 0:
                    break
                data += chunk
        except socket.timeout as e:
            self.close()
            raise PjlinkTimeoutError(
                f"{self}: Timed out waiting for data from projector", timeout_secs=self.timeout_secs) from e
        except OSError as e:
            self.close()
            raise PjlinkTransportError(f"{self}: Error reading from projector: {e}") from e
        return data

    def read_greeting(self) -> Greeting:
        """Reads the greeting, bounded by GREETING_BUFFER_SIZE bytes, and parses it."""
        data = self._read_until_terminator(GREETING_BUFFER_SIZE)
        logger.debug(f"{self}: Read greeting: {data!r}")
        if len(data) == 0:
            self.close()
            raise PjlinkTransportError(f"{self}: Connection closed by projector before greeting")
        return Greeting.parse(data)

    def write_line(self, line: str) -> None:
        """Writes a complete command line.

        On error, the transport is closed, and no further interaction is possible.
        """
        if self.sock is None:
            raise PjlinkTransportError(f"{self}: not connected")
        if self.lines_written > 0:
            raise PjlinkTransportError(f"{self}: connection has already been used for a command")
        data = line.encode('utf-8')
        logger.debug(f"{self}: Writing line: {_redact(line)!r}")
        try:
            self.sock.sendall(data)
        except socket.timeout as e:
            self.close()
            raise PjlinkTimeoutError(
                f"{self}: Timed out writing to projector", timeout_secs=self.timeout_secs) from e
        except OSError as e:
            self.close()
            raise PjlinkTransportError(f"{self}: Error writing to projector: {e}") from e
        self.lines_written += 1

    def read_line(self) -> str:
        """Reads one response line and strips its terminator."""
        data = self._read_until_terminator(MAX_RESPONSE_LENGTH)
        logger.debug(f"{self}: Read response: {data!r}")
        if len(data) == 0:
            self.close()
            raise PjlinkTransportError(f"{self}: Connection closed by projector while waiting for response")
        if not data.endswith(TERMINATOR_BYTE):
            self.close()
            raise PjlinkProtocolError(f"{self}: Unterminated response from projector: {data!r}")
        return data[:-len(TERMINATOR_BYTE)].decode('utf-8', errors='replace')

    def close(self) -> None:
        """Closes the socket. Has no effect if it is already closed."""
        sock = self.sock
        self.sock = None
        if sock is not None:
            logger.debug(f"{self}: closing")
            try:
                sock.close()
            except OSError:
                logger.debug("Exception while closing socket", exc_info=True)

    @classmethod
    def create(
            cls,
            host: str,
            port: int=DEFAULT_PORT,
            timeout_secs: Optional[float]=DEFAULT_TIMEOUT
          ) -> Self:
        """Creates and connects a transport to a PJLink device that is reachable
           over TCP/IP.
        """
        transport = cls(host, port=port, timeout_secs=timeout_secs)
        transport.connect()
        return transport

    def __str__(self) -> str:
        return f"TcpPjlinkProjectorClientTransport({self.host}:{self.port})"

    def __repr__(self) -> str:
        return str(self)

def _redact(line: str) -> str:
    """Replaces an authentication digest at the start of a command line with '*'s"""
    prefix_end = line.find('%')
    if prefix_end == DIGEST_LENGTH:
        return '*' * DIGEST_LENGTH + line[prefix_end:]
    return line
