"""Nested grouping"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from .group import Group

__all__ = ["nested_group_by"]


def nested_group_by(
    groups: Iterable[Group], key_fn: Callable[[Any], Any], *_args: Any, **_kwargs: Any
) -> NoReturn:
    """Group the members of each group by a secondary key.

    Nested grouping has not been designed yet, so this always fails.
    """
    raise NotImplementedError("Nested grouping is not implemented.")
