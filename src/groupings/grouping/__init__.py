"""Grouping Engine

The `groupings.grouping` package is responsible for partitioning sequences into
groups of members sharing an equal key, and for refining the resulting group
collections.
"""

from .key_equality import (
    AnagramEquality,
    CanonicalEquality,
    CaseInsensitiveEquality,
    DefaultEquality,
    KeyEquality,
    default_equality,
)
from .group import Group, GroupCollection
from .group_by import group_by
from .select import select
from .where import where
from .order_by import order_by
from .nested_group_by import nested_group_by
from .group_join import group_join

__all__ = [
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
