"""Group filter"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .group import GroupCollection

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .group import Group

__all__ = ["where"]


def where(
    groups: Iterable[Group], predicate: Callable[[Group], Any]
) -> GroupCollection:
    """Get a new collection with only the groups that satisfy the predicate.

    The surviving groups keep their relative order. The given groups are left
    unchanged.
    """
    return GroupCollection(
        [group for group in groups if predicate(group)],
        getattr(groups, "equality", None),
    )
