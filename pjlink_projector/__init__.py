# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Package pjlink_projector provides an API for controlling projectors and
displays via the PJLink class 1 TCP/IP protocol.
"""

from .version import __version__

from .pkg_logging import logger

from .internal_types import Jsonable, JsonableDict

from .exceptions import (
    PjlinkProjectorError,
    PjlinkTransportError,
    PjlinkTimeoutError,
    PjlinkProtocolError,
    PjlinkAuthError,
    PjlinkDeviceError,
    DeviceErrorKind,
  )

from .constants import DEFAULT_PORT, DEFAULT_TIMEOUT

from .client import (
    PjlinkProjectorClient,
    resolve_projector_tcp_host,
    PjlinkProjectorConnector,
    TcpPjlinkProjectorConnector,
    PjlinkProjectorClientTransport,
    TcpPjlinkProjectorClientTransport,
    PjlinkProjectorClientConfig,
  )

from .protocol import (
    CommandClass,
    PjlinkCommand,
    PjlinkResponse,
    Greeting,
    compute_digest,
    build_command_line,
    classify_error_code,
    PowerStatus,
    InputType,
    InputSource,
    AvMute,
    Lamp,
    ErrorType,
    ErrorStatus,
  )

from .util import (
    full_class_name,
    full_name_of_class,
)
