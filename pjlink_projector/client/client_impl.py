# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink Projector client.

Provides one method per device capability. Every method runs a complete,
independent exchange on a fresh connection:

    connect -> read greeting -> (digest) -> write command -> read response -> close

The client holds no connection and no mutable state, so one instance may be
shared freely, including between threads.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import PjlinkProjectorError
from ..pkg_logging import logger
from ..protocol import (
    CommandClass,
    PjlinkCommand,
    PjlinkResponse,
    build_command_line,
    PowerStatus,
    InputSource,
    AvMute,
    Lamp,
    ErrorStatus,
    decode_power_status,
    encode_power,
    decode_input,
    encode_input,
    decode_input_list,
    decode_avmute,
    encode_avmute,
    decode_lamps,
    decode_error_status,
  )

from .client_config import PjlinkProjectorClientConfig
from .connector import PjlinkProjectorConnector
from .tcp_connector import TcpPjlinkProjectorConnector

class PjlinkProjectorClient:
    """PJLink Projector client."""

    config: PjlinkProjectorClientConfig
    connector: PjlinkProjectorConnector

    def __init__(
            self,
            host: Optional[str]=None,
            password: Optional[str]=None,
            *,
            port: Optional[int]=None,
            timeout_secs: Optional[float]=None,
            config: Optional[PjlinkProjectorClientConfig]=None,
            connector: Optional[PjlinkProjectorConnector]=None,
          ) -> None:
        """Creates a client for a PJLink device.

              Args:
                host: The hostname or IP address of the projector, optionally
                      prefixed with "tcp://" and suffixed with ":<port>".
                      If None, the host will be taken from the config.
                password: The projector password. Only needed if the projector
                      requires authentication. If None, the password will be
                      taken from the config.
                port: The TCP/IP port number. If None, the port will be taken
                      from the config (default 4352).
                timeout_secs: The timeout for connecting and for each read
                      or write. If None, the timeout will be taken from the config.
                config: A PjlinkProjectorClientConfig object that specifies
                      defaults for all of the above.
                connector: Creates the connection for each command. If None,
                      a TCP/IP connector is created from the configuration.
        """
        self.config = PjlinkProjectorClientConfig(
            default_host=host,
            password=password,
            default_port=port,
            timeout_secs=timeout_secs,
            base_config=config
          )
        if connector is None:
            connector = TcpPjlinkProjectorConnector(config=self.config)
        self.connector = connector

    def transact(self, command: PjlinkCommand) -> PjlinkResponse:
        """Sends a command on a new connection and returns the parsed response.

        Raises:
            PjlinkTransportError: The connection failed.
            PjlinkAuthError: The device requires a password and none is configured.
            PjlinkProtocolError: The device sent a nonconforming greeting or response,
                or a response for a different command class.
            PjlinkDeviceError: The device answered with an error code.
        """
        with self.connector.connect() as transport:
            greeting = transport.read_greeting()
            line = build_command_line(greeting, self.config.password, command.text)
            transport.write_line(line)
            raw = transport.read_line()
        logger.debug(f"{self}: {command.text!r} -> {raw!r}")
        response = PjlinkResponse.parse(raw)
        response.verify_class(command.command_class)
        return response

    def send_command(self, command_class: CommandClass, parameter: str="?") -> str:
        """Sends a command and returns the raw response value."""
        return self.transact(PjlinkCommand(command_class, parameter)).value

    def _query(self, command_class: CommandClass) -> str:
        return self.transact(PjlinkCommand.query(command_class)).value

    def _set(self, command_class: CommandClass, parameter: str) -> None:
        self.transact(PjlinkCommand(command_class, parameter)).verify_ack()

    def get_power_status(self) -> PowerStatus:
        return decode_power_status(self._query(CommandClass.POWER))

    def power_on(self) -> PowerStatus:
        """Turns the projector on and returns the power status observed immediately
           afterwards (typically WARMUP or ON). Does not wait for power to settle.
        """
        self._set(CommandClass.POWER, encode_power(True))
        return self.get_power_status()

    def power_off(self) -> PowerStatus:
        """Turns the projector off and returns the power status observed immediately
           afterwards (typically COOLING or OFF). Does not wait for power to settle.
        """
        self._set(CommandClass.POWER, encode_power(False))
        return self.get_power_status()

    def get_input(self) -> InputSource:
        return decode_input(self._query(CommandClass.INPUT))

    def set_input(self, source: InputSource) -> InputSource:
        """Selects an input and returns the input reported by the projector afterwards."""
        self._set(CommandClass.INPUT, encode_input(source))
        return self.get_input()

    def get_input_list(self) -> List[InputSource]:
        """Returns the inputs available on the projector."""
        return decode_input_list(self._query(CommandClass.INPUT_LIST))

    def get_avmute(self) -> AvMute:
        return decode_avmute(self._query(CommandClass.AVMUTE))

    def set_avmute(self, mute: AvMute) -> AvMute:
        """Sets video/audio mute and returns the mute state reported by the projector afterwards."""
        self._set(CommandClass.AVMUTE, encode_avmute(mute))
        return self.get_avmute()

    def get_lamp(self) -> List[Lamp]:
        """Returns the hours and on/off state of each lamp, in device order."""
        return decode_lamps(self._query(CommandClass.LAMP))

    def get_error_status(self) -> ErrorStatus:
        return decode_error_status(self._query(CommandClass.ERROR_STATUS))

    def get_device_name(self) -> str:
        return self._query(CommandClass.NAME)

    def get_manufacturer(self) -> str:
        return self._query(CommandClass.MANUFACTURER)

    def get_product_name(self) -> str:
        return self._query(CommandClass.PRODUCT_NAME)

    def get_info(self) -> str:
        return self._query(CommandClass.INFORMATION)

    def get_class(self) -> str:
        return self._query(CommandClass.CLASS)

    def __str__(self) -> str:
        return f"PjlinkProjectorClient(connector={self.connector})"

    def __repr__(self) -> str:
        return str(self)
