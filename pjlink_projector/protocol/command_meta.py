# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""
PJLink class 1 command classes.

There is no protocol implementation here; only metadata about the protocol.
"""

from __future__ import annotations

from enum import Enum

from ..internal_types import *

class CommandClass(Enum):
    """Closed set of command/response classes. The value is the 4-character
       verb sent on the wire, or None for replies that carry no class code."""
    POWER = "POWR"
    INPUT = "INPT"
    AVMUTE = "AVMT"
    ERROR_STATUS = "ERST"
    LAMP = "LAMP"
    INPUT_LIST = "INST"
    NAME = "NAME"
    MANUFACTURER = "INF1"
    PRODUCT_NAME = "INF2"
    INFORMATION = "INFO"
    CLASS = "CLSS"
    GENERIC = None

    @property
    def verb(self) -> Optional[str]:
        return self.value

    @property
    def is_settable(self) -> bool:
        """True iff the class accepts a parameter other than "?"."""
        return self in settable_command_classes

verb_to_command_class: Dict[str, CommandClass] = dict(
    (cc.value, cc) for cc in CommandClass if cc.value is not None)
"""Map of wire verbs to their command class. GENERIC has no verb and is not included."""

settable_command_classes: Set[CommandClass] = {
    CommandClass.POWER,
    CommandClass.INPUT,
    CommandClass.AVMUTE,
  }

def verb_to_command_meta(verb: str) -> Optional[CommandClass]:
    """Returns the command class for a 4-character verb, or None if the verb is unknown"""
    return verb_to_command_class.get(verb)
