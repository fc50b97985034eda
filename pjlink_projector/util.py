# Copyright (c) 2023 Samuel J. McKelvie
#
# MIT License - See LICENSE file accompanying this package.
#

"""Miscellaneous utility functions"""

from __future__ import annotations

from .internal_types import *

def full_name_of_class(cls: Type[Any]) -> str:
    """Returns the fully qualified name of a class, including its module"""
    module = cls.__module__
    if module == 'builtins':
        return cls.__qualname__
    return module + '.' + cls.__qualname__

def full_class_name(o: Any) -> str:
    """Returns the fully qualified class name of an object"""
    return full_name_of_class(o.__class__)
