# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Type hints used internally by this package"""

from __future__ import annotations

from typing import (
    Any,
    AsyncIterator,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Self,
    Sequence,
    Set,
    Tuple,
    Type,
    Union,
    TYPE_CHECKING,
    cast,
  )

from types import TracebackType

Jsonable = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]
"""A type that can be serialized to JSON"""

JsonableDict = Dict[str, Jsonable]
"""A dictionary that can be serialized to JSON"""

__all__ = [
    "Any",
    "AsyncIterator",
    "Callable",
    "Dict",
    "Iterable",
    "Iterator",
    "List",
    "Optional",
    "Self",
    "Sequence",
    "Set",
    "Tuple",
    "Type",
    "Union",
    "TYPE_CHECKING",
    "cast",
    "TracebackType",
    "Jsonable",
    "JsonableDict",
  ]
