# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Scripted in-memory transport and connector for testing.

Each call to MockPjlinkProjectorConnector.connect() consumes the next queued
response (or asks the response callback) and returns a transport that
presents the configured greeting, records the command line written to it,
and answers with that response.

Example:
    >>> connector = MockPjlinkProjectorConnector()
    >>> connector.add_response("%1POWR=1")
    >>> client = PjlinkProjectorClient(connector=connector)
    >>> client.get_power_status()
    <PowerStatus.ON: '1'>
    >>> connector.written_lines
    ['%1POWR ?\\r']
"""

from __future__ import annotations

from collections import deque

from ..internal_types import *
from ..exceptions import PjlinkTransportError
from ..protocol import Greeting
from .client_transport import PjlinkProjectorClientTransport
from .connector import PjlinkProjectorConnector

MockResponse = Union[str, BaseException]
"""A reply line (without terminator), or an exception to raise when the reply is read"""

class MockPjlinkProjectorClientTransport(PjlinkProjectorClientTransport):
    """Single-use scripted transport."""

    greeting: str
    response: Optional[MockResponse]
    response_callback: Optional[Callable[[str], MockResponse]]
    written_lines: List[str]
    greeting_read: bool = False
    closed: bool = False

    def __init__(
            self,
            greeting: str,
            response: Optional[MockResponse]=None,
            response_callback: Optional[Callable[[str], MockResponse]]=None,
          ) -> None:
        super().__init__()
        self.greeting = greeting
        self.response = response
        self.response_callback = response_callback
        self.written_lines = []

    def read_greeting(self) -> Greeting:
        if self.closed:
            raise PjlinkTransportError("Mock transport closed")
        self.greeting_read = True
        return Greeting.parse(self.greeting)

    def write_line(self, line: str) -> None:
        if self.closed:
            raise PjlinkTransportError("Mock transport closed")
        if len(self.written_lines) > 0:
            raise PjlinkTransportError("Mock transport has already been used for a command")
        self.written_lines.append(line)
        if self.response_callback is not None:
            self.response = self.response_callback(line)

    def read_line(self) -> str:
        if self.closed:
            raise PjlinkTransportError("Mock transport closed")
        response = self.response
        if response is None:
            raise PjlinkTransportError("Mock transport has no response")
        if isinstance(response, BaseException):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    def __str__(self) -> str:
        return f"MockPjlinkProjectorClientTransport(greeting={self.greeting!r})"

    def __repr__(self) -> str:
        return str(self)

class MockPjlinkProjectorConnector(PjlinkProjectorConnector):
    """Connector that creates scripted transports."""

    greeting: str
    transports: List[MockPjlinkProjectorClientTransport]
    _responses: deque[MockResponse]
    _response_callback: Optional[Callable[[str], MockResponse]] = None

    def __init__(self, greeting: str="PJLINK 0") -> None:
        super().__init__()
        self.greeting = greeting
        self.transports = []
        self._responses = deque()

    def add_response(self, response: MockResponse) -> None:
        """Queues the reply for the next connection. Replies are consumed in FIFO order."""
        self._responses.append(response)

    def add_responses(self, *responses: MockResponse) -> None:
        for response in responses:
            self._responses.append(response)

    def set_response_callback(self, callback: Optional[Callable[[str], MockResponse]]) -> None:
        """Sets a callback that generates the reply from the written command line.
           Used when no queued reply remains."""
        self._response_callback = callback

    @property
    def written_lines(self) -> List[str]:
        """All command lines written, across all connections, in order"""
        return [line for t in self.transports for line in t.written_lines]

    @property
    def connect_count(self) -> int:
        return len(self.transports)

    def connect(self) -> PjlinkProjectorClientTransport:
        if len(self._responses) > 0:
            transport = MockPjlinkProjectorClientTransport(self.greeting, response=self._responses.popleft())
        elif self._response_callback is not None:
            transport = MockPjlinkProjectorClientTransport(self.greeting, response_callback=self._response_callback)
        else:
            raise PjlinkTransportError("Mock connector has no responses queued")
        self.transports.append(transport)
        return transport

    def __str__(self) -> str:
        return "MockPjlinkProjectorConnector()"

    def __repr__(self) -> str:
        return str(self)
