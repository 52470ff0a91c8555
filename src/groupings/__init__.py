"""groupings

The primary :mod:`groupings` package includes everything you need to partition
sequences into ordered groups of members sharing an equal key, with pluggable key
equality, and to filter, project and sort the resulting groups.

You can also import the subpackages directly:

- :mod:`groupings.grouping`: the grouping engine and the key equality strategies.
- :mod:`groupings.pyutils`: dependency-free Python utilities.
- :mod:`groupings.demos`: classic grouping examples built on the engine.
"""

from .pyutils import FrozenError, FrozenList

from .grouping import (
    KeyEquality,
    DefaultEquality,
    CanonicalEquality,
    AnagramEquality,
    CaseInsensitiveEquality,
    default_equality,
    Group,
    GroupCollection,
    group_by,
    select,
    where,
    order_by,
    nested_group_by,
    group_join,
)

from .version import version, version_info

__version__ = version
__version_info__ = version_info

__all__ = [
    "version",
    "version_info",
    "FrozenError",
    "FrozenList",
    "KeyEquality",
    "DefaultEquality",
    "CanonicalEquality",
    "AnagramEquality",
    "CaseInsensitiveEquality",
    "default_equality",
    "Group",
    "GroupCollection",
    "group_by",
    "select",
    "where",
    "order_by",
    "nested_group_by",
    "group_join",
]
