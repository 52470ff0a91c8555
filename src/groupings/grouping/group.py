"""Groups and group collections"""

from __future__ import annotations

from copy import deepcopy
from typing import TYPE_CHECKING, Any, Generic, Iterable, TypeVar

from ..pyutils import FrozenError, FrozenList, inspect
from .key_equality import KeyEquality, default_equality

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["Group", "GroupCollection"]

K = TypeVar("K")
T = TypeVar("T")
R = TypeVar("R")


class Group(FrozenList[T], Generic[K, T]):
    """A key together with the members that were grouped under it.

    A group is a read-only list of its members in source order. It compares equal
    to a plain list with the same members, and to another group only if the keys
    are equal as well.
    """

    _key: K

    def __init__(self, key: K, members: Iterable[T] = ()) -> None:
        super().__init__(members)
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_key" and "_key" in self.__dict__:
            raise FrozenError
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name == "_key":
            raise FrozenError
        super().__delattr__(name)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Group):
            return self._key == other._key and list.__eq__(self, other)
        return list.__eq__(self, other)

    def __ne__(self, other: Any) -> bool:
        equal = self.__eq__(other)
        return equal if equal is NotImplemented else not equal

    def __hash__(self) -> int:
        return hash((self._key, tuple(self)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._key!r}, {list(self)!r})"

    def __inspect__(self) -> str:
        return f"<group {inspect(self._key)}: {inspect(list(self))}>"

    def __copy__(self) -> Group[K, T]:
        return self.__class__(self._key, self)

    copy = __copy__

    def __deepcopy__(self, memo: dict) -> Group[K, T]:
        return self.__class__(
            deepcopy(self._key, memo), (deepcopy(value, memo) for value in self)
        )

    def __reduce__(self):
        return self.__class__, (self._key, list(self))


class GroupCollection(FrozenList[Group[K, T]]):
    """Read-only sequence of groups.

    The groups are kept in the order in which their keys were first encountered,
    unless the collection is the result of ``order_by()``. The equality strategy
    that was used for grouping is kept for key lookups with ``get()``.
    """

    equality: KeyEquality

    def __init__(
        self,
        groups: Iterable[Group[K, T]] = (),
        equality: KeyEquality | None = None,
    ) -> None:
        super().__init__(groups)
        self.equality = default_equality if equality is None else equality

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def __inspect__(self) -> str:
        return inspect(list(self))

    def __copy__(self) -> GroupCollection[K, T]:
        return self.__class__(self, self.equality)

    copy = __copy__

    def __deepcopy__(self, memo: dict) -> GroupCollection[K, T]:
        return self.__class__(
            (deepcopy(group, memo) for group in self), self.equality
        )

    def __reduce__(self):
        return self.__class__, (list(self), self.equality)

    def keys(self) -> list[K]:
        """Get the keys of all groups in collection order."""
        return [group.key for group in self]

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the group with the given key, or the default if there is none."""
        equals = self.equality.equals
        for group in self:
            if equals(group.key, key):
                return group
        return default

    def to_dict(self) -> dict[K, list[T]]:
        """Get a dictionary mapping keys to lists of members.

        The keys must be hashable.
        """
        return {group.key: list(group) for group in self}

    def select(self, fn: Callable[[Group[K, T]], R]) -> FrozenList[R]:
        """Transform each group, keeping collection order."""
        from .select import select

        return select(self, fn)

    def where(self, predicate: Callable[[Group[K, T]], Any]) -> GroupCollection[K, T]:
        """Keep only the groups for which the predicate holds."""
        from .where import where

        return where(self, predicate)

    def order_by(
        self, key_fn: Callable[[Group[K, T]], Any], reverse: bool = False
    ) -> GroupCollection[K, T]:
        """Sort the groups stably by a derived sort key."""
        from .order_by import order_by

        return order_by(self, key_fn, reverse=reverse)

    def nested_group_by(self, key_fn: Callable[[T], Any]) -> Any:
        """Group the members of each group by a secondary key (not implemented)."""
        from .nested_group_by import nested_group_by

        return nested_group_by(self, key_fn)
