# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Classification of error codes reported by a PJLink device.
"""

from __future__ import annotations

from ..internal_types import *
from ..exceptions import DeviceErrorKind, PjlinkDeviceError
from .constants import ERROR_MARKER, ERROR_CODE_LENGTH

error_code_map: Dict[str, DeviceErrorKind] = dict(
    (kind.value, kind) for kind in DeviceErrorKind if kind.value is not None)
"""Map of device error codes to their semantic kinds."""

def is_error_code(value: str) -> bool:
    """Returns True iff value is a device error code such as "ERR1" or "ERRA"."""
    return len(value) == ERROR_CODE_LENGTH and value.startswith(ERROR_MARKER)

def classify_error_code(code: str) -> PjlinkDeviceError:
    """Returns the PjlinkDeviceError for a device error code. Codes that are not
       recognized are classified as UNKNOWN, with the raw code preserved."""
    kind = error_code_map.get(code, DeviceErrorKind.UNKNOWN)
    return PjlinkDeviceError(kind, code)
