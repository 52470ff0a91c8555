"""Grouped join"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any, TypeVar

from ..pyutils import EqualityMap, FrozenList, inspect
from .group import Group
from .key_equality import default_equality

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .key_equality import KeyEquality

__all__ = ["group_join"]

logger = getLogger(__name__)

K = TypeVar("K")
S = TypeVar("S")
T = TypeVar("T")


def group_join(
    outer: Iterable[S],
    inner: Iterable[T],
    outer_key_fn: Callable[[S], K],
    inner_key_fn: Callable[[T], K],
    result_fn: Callable[[S, Group[S, T]], Any] | None = None,
    equality: KeyEquality[K] | None = default_equality,
) -> FrozenList[Any]:
    """Correlate each outer item with the group of matching inner items.

    The inner items are grouped once by their keys, then every outer item is
    matched against these groups. The result has one entry per outer item, in
    outer order, even if no inner item matches. Matching inner items keep their
    order.

    Passing None as equality selects the default equality.

    Without a result function, each entry is a group keyed by the outer item.
    """
    if not callable(outer_key_fn):
        raise TypeError(
            f"The outer key function must be callable, got: {inspect(outer_key_fn)}."
        )
    if not callable(inner_key_fn):
        raise TypeError(
            f"The inner key function must be callable, got: {inspect(inner_key_fn)}."
        )
    if equality is None:
        equality = default_equality
    lookup: EqualityMap[K, list[T]] = EqualityMap(equality)
    for item in inner:
        key = inner_key_fn(item)
        matches = lookup.get(key)
        if matches is None:
            lookup[key] = matches = []
        matches.append(item)
    results = []
    for outer_item in outer:
        group = Group(outer_item, lookup.get(outer_key_fn(outer_item), ()))
        results.append(group if result_fn is None else result_fn(outer_item, group))
    logger.debug(
        "Joined %d outer items with %d inner keys.", len(results), len(lookup)
    )
    return FrozenList(results)
