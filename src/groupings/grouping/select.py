"""Group projection"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from ..pyutils import FrozenList

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .group import Group

__all__ = ["select"]

R = TypeVar("R")


def select(groups: Iterable[Group], fn: Callable[[Group], R]) -> FrozenList[R]:
    """Transform each group with the given function, keeping the order."""
    return FrozenList(fn(group) for group in groups)
