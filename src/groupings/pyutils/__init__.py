"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .equality_map import EqualityMap
from .frozen_error import FrozenError
from .frozen_list import FrozenList
from .identity_func import identity_func
from .inspect import inspect

__all__ = [
    "EqualityMap",
    "FrozenError",
    "FrozenList",
    "identity_func",
    "inspect",
]
