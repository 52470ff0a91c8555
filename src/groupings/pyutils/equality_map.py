"""A Map class that uses a pluggable key equality."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from itertools import count
from typing import TYPE_CHECKING, Any, Hashable, TypeVar

if TYPE_CHECKING:
    from ..grouping.key_equality import KeyEquality

__all__ = ["EqualityMap"]

K = TypeVar("K")
V = TypeVar("V")


class EqualityMap(MutableMapping[K, V]):
    """A dictionary like object that compares keys with a KeyEquality strategy.

    Keys are looked up in two steps: the hash returned by ``equality.hash_of()``
    selects a bucket, then ``equality.equals()`` confirms the match among the keys
    of that bucket. The first stored key of each equivalence class is kept when
    values are reassigned.

    This class keeps the insertion order like a normal dictionary.
    """

    _map: dict[int, tuple[K, V]]
    _buckets: dict[Hashable, list[int]]

    def __init__(
        self,
        equality: KeyEquality,
        items: Iterable[tuple[K, V]] | None = None,
    ) -> None:
        super().__init__()
        self.equality = equality
        self._map = {}
        self._buckets = {}
        self._serial = count()
        if items:
            self.update(items)

    def _find(self, key: Any) -> tuple[Hashable, int | None]:
        equality = self.equality
        hash_ = equality.hash_of(key)
        for serial in self._buckets.get(hash_, ()):
            if equality.equals(self._map[serial][0], key):
                return hash_, serial
        return hash_, None

    def __setitem__(self, key: K, value: V) -> None:
        hash_, serial = self._find(key)
        if serial is None:
            serial = next(self._serial)
            self._buckets.setdefault(hash_, []).append(serial)
            self._map[serial] = (key, value)
        else:
            self._map[serial] = (self._map[serial][0], value)

    def __getitem__(self, key: K) -> Any:
        serial = self._find(key)[1]
        if serial is None:
            raise KeyError(key)
        return self._map[serial][1]

    def __delitem__(self, key: K) -> None:
        hash_, serial = self._find(key)
        if serial is None:
            raise KeyError(key)
        bucket = self._buckets[hash_]
        bucket.remove(serial)
        if not bucket:
            del self._buckets[hash_]
        del self._map[serial]

    def __contains__(self, key: Any) -> bool:
        return self._find(key)[1] is not None

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.items())!r})"

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the mapped value for the given key."""
        serial = self._find(key)[1]
        if serial is None:
            return default
        return self._map[serial][1]

    def get_key(self, key: Any, default: Any = None) -> Any:
        """Get the stored key that is equal to the given key."""
        serial = self._find(key)[1]
        if serial is None:
            return default
        return self._map[serial][0]

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def keys(self) -> Iterator[K]:  # type: ignore
        """Return an iterator over the keys of the map."""
        return (item[0] for item in self._map.values())

    def values(self) -> Iterator[V]:  # type: ignore
        """Return an iterator over the values of the map."""
        return (item[1] for item in self._map.values())

    def items(self) -> Iterator[tuple[K, V]]:  # type: ignore
        """Return an iterator over the key/value-pairs of the map."""
        return iter(self._map.values())

    def update(self, items: Iterable[tuple[K, V]] | None = None) -> None:  # type: ignore
        """Update the map with the given key/value-pairs."""
        if items:
            for key, value in items:
                self[key] = value
