# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector emulator.

Provides a simple emulation of a PJLink class 1 projector on TCP/IP. Each
connection is served on its own thread: greeting, one command, one response,
close.
"""

from __future__ import annotations

import secrets
import socketserver
import threading

from ..internal_types import *
from ..pkg_logging import logger
from ..exceptions import PjlinkProjectorError
from ..constants import DEFAULT_PORT, MAX_RESPONSE_LENGTH
from ..protocol import (
    CommandClass,
    PjlinkCommand,
    PjlinkResponse,
    PowerStatus,
    InputType,
    InputSource,
    AvMute,
    Lamp,
    ErrorStatus,
    compute_digest,
    encode_input,
    decode_input,
    decode_avmute,
    encode_avmute,
    encode_lamps,
    encode_error_status,
    ACK_VALUE,
    PROTOCOL_PREFIX,
    TERMINATOR,
  )
from ..protocol.constants import DIGEST_LENGTH, TERMINATOR_BYTE
from ..protocol.handshake import GREETING_ENCODING

AUTH_FAILURE_REPLY = "PJLINK ERRA"

ERR_UNDEFINED_COMMAND = "ERR1"
ERR_INVALID_PARAMETER = "ERR2"

class PjlinkProjectorEmulatorSession(socketserver.BaseRequestHandler):
    """Serves a single connection."""

    server: _EmulatorServer

    def _read_line(self) -> Optional[str]:
        data = b''
        while len(data) < DIGEST_LENGTH + MAX_RESPONSE_LENGTH and not data.endswith(TERMINATOR_BYTE):
            chunk = self.request.recv(1)
            if len(chunk) == 0:
                return None
            data += chunk
        return data.decode('utf-8', errors='replace')

    def handle(self) -> None:
        emulator = self.server.emulator
        seed = emulator.new_seed()
        greeting = emulator.greeting_text(seed)
        logger.debug(f"Emulator: {self.client_address}: sending greeting {greeting!r}")
        self.request.sendall((greeting + TERMINATOR).encode(GREETING_ENCODING))
        line = self._read_line()
        if line is None:
            logger.debug(f"Emulator: {self.client_address}: closed before command")
            return
        reply = emulator.handle_line(line, seed)
        logger.debug(f"Emulator: {self.client_address}: {line!r} -> {reply!r}")
        self.request.sendall((reply + TERMINATOR).encode('utf-8'))

class _EmulatorServer(socketserver.ThreadingTCPServer):
    allow_reuse_address = True
    daemon_threads = True
    emulator: PjlinkProjectorEmulator

class PjlinkProjectorEmulator:
    """An emulated PJLink projector.

    Device state is held in plain attributes and may be modified by the owner at
    any time. Setting overrides[command_class] causes every command of that class
    to be answered with the given value (e.g. "ERR3") instead of being executed.
    """
    password: Optional[str]
    bind_addr: str
    requested_port: int
    seed: Optional[str]
    transition_power: bool

    power_status: PowerStatus
    input_source: InputSource
    inputs: List[InputSource]
    avmute: AvMute
    lamps: List[Lamp]
    error_status: ErrorStatus
    name: str
    manufacturer: str
    product_name: str
    info: str
    pjlink_class: str

    overrides: Dict[CommandClass, str]
    received_lines: List[str]

    server: Optional[_EmulatorServer] = None
    server_thread: Optional[threading.Thread] = None

    def __init__(
            self,
            password: Optional[str]=None,
            bind_addr: Optional[str]=None,
            port: int=DEFAULT_PORT,
            seed: Optional[str]=None,
            transition_power: bool=False,
          ):
        """Creates an emulator. Does not start listening.

              Args:
                password: If not None or empty, connections require authentication.
                bind_addr: Address to listen on. Defaults to '0.0.0.0'.
                port: Port to listen on. 0 picks a free port; see port property.
                seed: Fixed seed to use in every greeting. If None, a random seed
                      is generated per connection.
                transition_power: If True, power on/off commands move to WARMUP/COOLING
                      rather than straight to ON/OFF.
        """
        self.password = password
        self.bind_addr = '0.0.0.0' if bind_addr is None else bind_addr
        self.requested_port = port
        self.seed = seed
        self.transition_power = transition_power
        self.power_status = PowerStatus.OFF
        self.inputs = [
            InputSource(InputType.RGB, 1),
            InputSource(InputType.VIDEO, 1),
            InputSource(InputType.DIGITAL, 1),
            InputSource(InputType.DIGITAL, 2),
            InputSource(InputType.NETWORK, 1),
          ]
        self.input_source = self.inputs[0]
        self.avmute = AvMute(video=False, audio=False)
        self.lamps = [Lamp(hours=1234, on=False)]
        self.error_status = ErrorStatus()
        self.name = "Emulated Projector"
        self.manufacturer = "PJLink Emulator"
        self.product_name = "EMU-1"
        self.info = "pjlink_projector emulator"
        self.pjlink_class = "1"
        self.overrides = {}
        self.received_lines = []
        self._lock = threading.Lock()

    @property
    def auth_required(self) -> bool:
        return self.password is not None and self.password != ''

    @property
    def port(self) -> int:
        """The port actually being listened on, once started"""
        if self.server is None:
            return self.requested_port
        return self.server.server_address[1]

    def new_seed(self) -> str:
        if self.seed is not None:
            return self.seed
        return secrets.token_hex(4)

    def greeting_text(self, seed: str) -> str:
        if self.auth_required:
            return f"PJLINK 1 {seed}"
        return "PJLINK 0"

    def handle_line(self, line: str, seed: str) -> str:
        """Handles one terminated command line and returns the reply line (without terminator)."""
        with self._lock:
            self.received_lines.append(line)
            if line.endswith(TERMINATOR):
                line = line[:-len(TERMINATOR)]
            if self.auth_required:
                assert self.password is not None
                if line[:DIGEST_LENGTH] != compute_digest(seed, self.password):
                    return AUTH_FAILURE_REPLY
                line = line[DIGEST_LENGTH:]
            if not line.startswith(PROTOCOL_PREFIX):
                return AUTH_FAILURE_REPLY if self.auth_required else PROTOCOL_PREFIX + line[:4] + "=" + ERR_UNDEFINED_COMMAND
            text = line[len(PROTOCOL_PREFIX):]
            try:
                command = PjlinkCommand.create_from_text(text)
            except PjlinkProjectorError:
                return PROTOCOL_PREFIX + text[:4] + "=" + ERR_UNDEFINED_COMMAND
            override = self.overrides.get(command.command_class)
            if override is not None:
                value = override
            elif command.is_query:
                value = self.query_value(command.command_class)
            else:
                value = self.handle_set(command)
            return PjlinkResponse.encode_reply(command.command_class, value)

    def query_value(self, command_class: CommandClass) -> str:
        """Returns the reply value for a query of a command class"""
        if command_class == CommandClass.POWER:
            return self.power_status.value
        if command_class == CommandClass.INPUT:
            return encode_input(self.input_source)
        if command_class == CommandClass.INPUT_LIST:
            return " ".join(encode_input(source) for source in self.inputs)
        if command_class == CommandClass.AVMUTE:
            return encode_avmute(self.avmute)
        if command_class == CommandClass.LAMP:
            return encode_lamps(self.lamps) if len(self.lamps) > 0 else ERR_UNDEFINED_COMMAND
        if command_class == CommandClass.ERROR_STATUS:
            return encode_error_status(self.error_status)
        if command_class == CommandClass.NAME:
            return self.name
        if command_class == CommandClass.MANUFACTURER:
            return self.manufacturer
        if command_class == CommandClass.PRODUCT_NAME:
            return self.product_name
        if command_class == CommandClass.INFORMATION:
            return self.info
        if command_class == CommandClass.CLASS:
            return self.pjlink_class
        return ERR_UNDEFINED_COMMAND

    def handle_set(self, command: PjlinkCommand) -> str:
        """Executes a set command and returns the reply value"""
        parameter = command.parameter
        if command.command_class == CommandClass.POWER:
            if parameter == PowerStatus.ON.value:
                self.power_status = PowerStatus.WARMUP if self.transition_power else PowerStatus.ON
            elif parameter == PowerStatus.OFF.value:
                self.power_status = PowerStatus.COOLING if self.transition_power else PowerStatus.OFF
            else:
                return ERR_INVALID_PARAMETER
            return ACK_VALUE
        if command.command_class == CommandClass.INPUT:
            try:
                source = decode_input(parameter)
            except PjlinkProjectorError:
                return ERR_INVALID_PARAMETER
            if not source in self.inputs:
                return ERR_INVALID_PARAMETER
            self.input_source = source
            return ACK_VALUE
        if command.command_class == CommandClass.AVMUTE:
            try:
                self.avmute = decode_avmute(parameter)
            except PjlinkProjectorError:
                return ERR_INVALID_PARAMETER
            return ACK_VALUE
        return ERR_INVALID_PARAMETER

    def start(self) -> None:
        """Starts listening and serving connections on a background thread"""
        assert self.server is None
        self.server = _EmulatorServer((self.bind_addr, self.requested_port), PjlinkProjectorEmulatorSession)
        self.server.emulator = self
        self.server_thread = threading.Thread(
            target=self.server.serve_forever, name="pjlink-emulator", daemon=True)
        self.server_thread.start()
        logger.debug(f"Emulator: Listening on {self.bind_addr}:{self.port}")

    def close(self) -> None:
        """Stops the emulator and waits for the server thread to exit"""
        server = self.server
        if server is None:
            return
        try:
            server.shutdown()
        finally:
            server.server_close()
            if self.server_thread is not None:
                self.server_thread.join()
                self.server_thread = None
            self.server = None
            logger.debug("Emulator: closed")

    def __enter__(self) -> PjlinkProjectorEmulator:
        self.start()
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
          ) -> None:
        self.close()

    def __str__(self) -> str:
        return f"PjlinkProjectorEmulator({self.bind_addr}:{self.port})"

    def __repr__(self) -> str:
        return str(self)
