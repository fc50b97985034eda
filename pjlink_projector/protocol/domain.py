# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
Domain types for PJLink response values, and the rules that translate
between them and their wire encodings.

All decoders raise PjlinkProtocolError for values outside the documented
encoding, except decode_error_status, which is lenient.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from ..internal_types import *
from ..exceptions import PjlinkProtocolError, PjlinkProjectorError

class PowerStatus(Enum):
    OFF = "0"
    ON = "1"
    COOLING = "2"
    WARMUP = "3"

class InputType(IntEnum):
    """Input families. The value is the tens digit of the wire encoding."""
    RGB = 1
    VIDEO = 2
    DIGITAL = 3
    STORAGE = 4
    NETWORK = 5

input_type_values: Set[int] = set(int(t) for t in InputType)

MIN_INPUT_CHANNEL = 1
MAX_INPUT_CHANNEL = 9

@dataclass(frozen=True)
class InputSource:
    """An input family and a 1-based channel number within the family"""
    input_type: InputType
    channel: int

    def __str__(self) -> str:
        return f"{self.input_type.name} {self.channel}"

@dataclass(frozen=True)
class AvMute:
    video: bool
    audio: bool

@dataclass(frozen=True)
class Lamp:
    hours: int
    on: bool

class ErrorType(Enum):
    NO_ERROR = "0"
    WARNING = "1"
    ERROR = "2"

@dataclass(frozen=True)
class ErrorStatus:
    """Error status of each device subsystem, in the order reported by the device"""
    fan: ErrorType = ErrorType.NO_ERROR
    lamp: ErrorType = ErrorType.NO_ERROR
    temperature: ErrorType = ErrorType.NO_ERROR
    cover_open: ErrorType = ErrorType.NO_ERROR
    filter: ErrorType = ErrorType.NO_ERROR
    other: ErrorType = ErrorType.NO_ERROR

    @property
    def has_error(self) -> bool:
        """True iff any subsystem reports something other than NO_ERROR"""
        return any(v != ErrorType.NO_ERROR for v in self.as_dict().values())

    def as_dict(self) -> Dict[str, ErrorType]:
        return dict((name, getattr(self, name)) for name in error_status_fields)

error_status_fields: Tuple[str, ...] = ("fan", "lamp", "temperature", "cover_open", "filter", "other")
"""ErrorStatus fields, in the order of the characters of an ERST value."""

avmute_code_map: Dict[int, AvMute] = {
    11: AvMute(video=True, audio=False),
    21: AvMute(video=False, audio=True),
    31: AvMute(video=True, audio=True),
    30: AvMute(video=False, audio=False),
  }
"""AVMT values and the mute states they correspond to."""

reverse_avmute_code_map: Dict[AvMute, int] = dict((v, k) for k, v in avmute_code_map.items())

AVMUTE_OFF_CODE = 30

def _parse_unsigned(value: str, what: str) -> int:
    if value == '' or not value.isascii() or not value.isdigit():
        raise PjlinkProtocolError(f"Invalid {what} value (expected unsigned integer): {value!r}")
    return int(value)

def decode_power_status(value: str) -> PowerStatus:
    if value == '':
        raise PjlinkProtocolError("Empty power status value")
    try:
        return PowerStatus(value[0])
    except ValueError as e:
        raise PjlinkProtocolError(f"Invalid power status value: {value!r}") from e

def encode_power(on: bool) -> str:
    """Returns the POWR parameter that turns the device on or off"""
    return PowerStatus.ON.value if on else PowerStatus.OFF.value

def decode_input(value: str) -> InputSource:
    n = _parse_unsigned(value, "input")
    family, channel = divmod(n, 10)
    if not family in input_type_values or not MIN_INPUT_CHANNEL <= channel <= MAX_INPUT_CHANNEL:
        raise PjlinkProtocolError(f"Input value out of range: {value!r}")
    return InputSource(InputType(family), channel)

def encode_input(source: InputSource) -> str:
    if not MIN_INPUT_CHANNEL <= source.channel <= MAX_INPUT_CHANNEL:
        raise PjlinkProjectorError(
            f"Input channel {source.channel} out of range {MIN_INPUT_CHANNEL}..{MAX_INPUT_CHANNEL}")
    return str(int(source.input_type) * 10 + source.channel)

def decode_input_list(value: str) -> List[InputSource]:
    """Decodes a whitespace-separated list of input codes, in device order"""
    return [decode_input(token) for token in value.split()]

def decode_avmute(value: str) -> AvMute:
    code = _parse_unsigned(value, "AV mute")
    result = avmute_code_map.get(code)
    if result is None:
        raise PjlinkProtocolError(f"Invalid AV mute value: {value!r}")
    return result

def encode_avmute(mute: AvMute) -> str:
    return str(reverse_avmute_code_map.get(mute, AVMUTE_OFF_CODE))

def decode_lamps(value: str) -> List[Lamp]:
    """Decodes "<hours> <on> [<hours> <on> ...]". A trailing hours token with no
       on flag is reported as off."""
    tokens = value.split()
    result: List[Lamp] = []
    for i in range(0, len(tokens), 2):
        hours = _parse_unsigned(tokens[i], "lamp hours")
        on = i + 1 < len(tokens) and tokens[i+1] == "1"
        result.append(Lamp(hours=hours, on=on))
    return result

def decode_error_status(value: str) -> ErrorStatus:
    """Decodes the six ERST positions. Unrecognized or missing positions are NO_ERROR."""
    fields: Dict[str, ErrorType] = {}
    for i, name in enumerate(error_status_fields):
        c = value[i] if i < len(value) else ErrorType.NO_ERROR.value
        try:
            fields[name] = ErrorType(c)
        except ValueError:
            fields[name] = ErrorType.NO_ERROR
    return ErrorStatus(**fields)

def encode_error_status(status: ErrorStatus) -> str:
    return "".join(getattr(status, name).value for name in error_status_fields)

def encode_lamps(lamps: Iterable[Lamp]) -> str:
    return " ".join(f"{lamp.hours} {'1' if lamp.on else '0'}" for lamp in lamps)
