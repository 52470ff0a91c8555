"""Group ordering"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .group import GroupCollection

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .group import Group

__all__ = ["order_by"]


def order_by(
    groups: Iterable[Group],
    key_fn: Callable[[Group], Any],
    reverse: bool = False,
) -> GroupCollection:
    """Get a new collection with the groups sorted by a derived sort key.

    The sort is stable: groups with equal sort keys keep their previous relative
    order, also when sorting in reverse.
    """
    return GroupCollection(
        sorted(groups, key=key_fn, reverse=reverse),
        getattr(groups, "equality", None),
    )
