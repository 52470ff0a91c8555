"""Key equality strategies"""

from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Protocol, TypeVar

__all__ = [
    "KeyEquality",
    "DefaultEquality",
    "CanonicalEquality",
    "AnagramEquality",
    "CaseInsensitiveEquality",
    "default_equality",
]

K = TypeVar("K")
K_contra = TypeVar("K_contra", contravariant=True)

UNHASHABLE_BUCKET = object()


class KeyEquality(Protocol[K_contra]):
    """Strategy deciding whether two keys belong to the same group.

    Implementations must make ``equals`` an equivalence relation and must return
    the same ``hash_of`` value for any two keys that are equal.
    """

    def equals(self, a: K_contra, b: K_contra) -> bool: ...  # pragma: no cover

    def hash_of(self, key: K_contra) -> Hashable: ...  # pragma: no cover


class DefaultEquality:
    """Natural equality of the keys themselves."""

    def equals(self, a: Any, b: Any) -> bool:
        return a == b

    def hash_of(self, key: Any) -> Hashable:
        try:
            return hash(key)
        except TypeError:
            # unhashable keys share one bucket and are told apart by equals()
            return UNHASHABLE_BUCKET

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CanonicalEquality(Generic[K]):
    """Equality of keys after transforming them into a canonical form.

    The canonical form must be hashable. Keys keep their original value, only the
    comparison goes through ``canonical_fn``.
    """

    def __init__(self, canonical_fn: Callable[[K], Hashable]) -> None:
        self.canonical_fn = canonical_fn

    def equals(self, a: K, b: K) -> bool:
        canonical_fn = self.canonical_fn
        return canonical_fn(a) == canonical_fn(b)

    def hash_of(self, key: K) -> Hashable:
        return hash(self.canonical_fn(key))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.canonical_fn!r})"


def anagram_form(word: str) -> str:
    """Get the whitespace-free, character-sorted form of a word."""
    return "".join(sorted(c for c in word if not c.isspace()))


class AnagramEquality(CanonicalEquality[str]):
    """Two strings are equal if they are anagrams, ignoring whitespace."""

    def __init__(self) -> None:
        super().__init__(anagram_form)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CaseInsensitiveEquality(CanonicalEquality[str]):
    """Two strings are equal if they only differ in case."""

    def __init__(self) -> None:
        super().__init__(str.casefold)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


default_equality = DefaultEquality()
