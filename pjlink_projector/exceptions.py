#
# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Exceptions defined by this package"""

from __future__ import annotations

from enum import Enum
from typing import Optional

class PjlinkProjectorError(Exception):
  """Base class for all error exceptions defined by this package."""
  pass

class PjlinkTransportError(PjlinkProjectorError):
  """Connect, read or write failure at the socket layer."""
  pass

class PjlinkTimeoutError(PjlinkTransportError):
  """A connect, read or write did not complete within the configured timeout."""

  timeout_secs: Optional[float]

  def __init__(self, message: str = "Communication timeout", *, timeout_secs: Optional[float] = None) -> None:
    super().__init__(message)
    self.timeout_secs = timeout_secs

class PjlinkProtocolError(PjlinkProjectorError):
  """The device sent something that does not conform to the protocol: a malformed
     greeting, an unknown or mismatched response class, or a value outside its
     expected encoding."""
  pass

class PjlinkAuthError(PjlinkProjectorError):
  """The device requires authentication but no password was configured."""
  pass

class DeviceErrorKind(Enum):
  """Semantic kinds of errors reported by the device in place of a value."""
  UNDEFINED_COMMAND = "ERR1"
  INVALID_PARAMETER = "ERR2"
  TEMPORARILY_UNAVAILABLE = "ERR3"
  DEVICE_FAILURE = "ERR4"
  AUTHORIZATION_ERROR = "ERRA"
  UNKNOWN = None

class PjlinkDeviceError(PjlinkProjectorError):
  """The device reported an error code in place of a value."""

  kind: DeviceErrorKind
  code: str
  """The raw error code as sent by the device, e.g. "ERR3"."""

  def __init__(self, kind: DeviceErrorKind, code: str, message: Optional[str] = None) -> None:
    if message is None:
      message = f"Device reported error {code} ({kind.name.lower().replace('_', ' ')})"
    super().__init__(message)
    self.kind = kind
    self.code = code
