"""Grouping function"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, TypeVar

from ..pyutils import EqualityMap, identity_func, inspect
from .group import Group, GroupCollection
from .key_equality import default_equality

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .key_equality import KeyEquality

__all__ = ["group_by"]

logger = getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


def group_by(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    equality: KeyEquality[K] | None = default_equality,
    element_fn: Callable[[T], Any] = identity_func,
) -> GroupCollection[K, Any]:
    """Group a collection of items by a key derived via a function.

    The items are scanned exactly once. Each group keeps the key value under which
    it was first encountered, and its members in the order of the items. The
    groups are returned in the order in which their keys were first seen.

    Keys are matched with the given equality strategy, so that keys which are
    textually different but equivalent (e.g. anagrams) end up in the same group.
    Passing None as equality selects the default equality.
    If ``element_fn`` is given, it is applied to each item before it is added to
    its group.

    Exceptions raised by the key function, the element function or the equality
    strategy are not caught; no partial result is returned in that case.
    """
    if not callable(key_fn):
        raise TypeError(f"The key function must be callable, got: {inspect(key_fn)}.")
    if not callable(element_fn):
        raise TypeError(
            f"The element function must be callable, got: {inspect(element_fn)}."
        )
    if equality is None:
        equality = default_equality
    buckets: EqualityMap[K, list[Any]] = EqualityMap(equality)
    num_items = 0
    for item in items:
        key = key_fn(item)
        members = buckets.get(key)
        if members is None:
            buckets[key] = members = []
        members.append(element_fn(item))
        num_items += 1
    logger.debug("Grouped %d items into %d groups.", num_items, len(buckets))
    return GroupCollection(
        (Group(key, members) for key, members in buckets.items()), equality
    )
