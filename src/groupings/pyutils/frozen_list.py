from __future__ import annotations

from copy import deepcopy
from typing import Any, List, NoReturn, TypeVar

from .frozen_error import FrozenError

__all__ = ["FrozenList"]


T = TypeVar("T", covariant=True)


def _refuse_change(self: Any, *_args: Any, **_kwargs: Any) -> NoReturn:
    raise FrozenError(f"{self.__class__.__name__} objects cannot be changed.")


class FrozenList(List[T]):
    """Result list of a grouping step that can only be read, but not changed.

    Grouping results are snapshots of their source. Every in-place list operation
    raises a FrozenError, while operations creating new lists (slicing,
    concatenation) return plain lists that may be changed freely.
    """

    __setitem__ = __delitem__ = __iadd__ = __imul__ = _refuse_change
    append = extend = insert = remove = pop = clear = _refuse_change
    sort = reverse = _refuse_change

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __copy__(self) -> FrozenList[T]:
        return self.__class__(self)

    copy = __copy__

    def __deepcopy__(self, memo: dict) -> FrozenList[T]:
        return self.__class__(deepcopy(list(self), memo))

    def __reduce__(self):
        return self.__class__, (list(self),)
