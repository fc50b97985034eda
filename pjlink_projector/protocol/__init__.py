# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Low-level protocol definitions for PJLink class 1 devices.

Refer to https://pjlink.jbmia.or.jp/english/
for the official protocol documentation.
"""

from .constants import (
    PROTOCOL_PREFIX,
    TERMINATOR,
    QUERY_PARAMETER,
    ACK_VALUE,
  )

from .command_meta import (
    CommandClass,
    verb_to_command_class,
    verb_to_command_meta,
  )

from .handshake import (
    Greeting,
    compute_digest,
    build_command_line,
  )

from .command import (
    PjlinkCommand,
  )

from .response import (
    PjlinkResponse,
  )

from .device_errors import (
    classify_error_code,
    is_error_code,
  )

from .domain import (
    PowerStatus,
    InputType,
    InputSource,
    AvMute,
    Lamp,
    ErrorType,
    ErrorStatus,
    decode_power_status,
    encode_power,
    decode_input,
    encode_input,
    decode_input_list,
    decode_avmute,
    encode_avmute,
    decode_lamps,
    encode_lamps,
    decode_error_status,
    encode_error_status,
  )
