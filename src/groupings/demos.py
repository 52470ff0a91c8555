"""Grouping demos

Classic examples of putting the elements of a sequence into buckets, so that the
elements in each bucket share a common attribute. The datasets are passed in by
the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from .grouping import AnagramEquality, Group, GroupCollection, group_by

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "Product",
    "group_by_property",
    "grouping",
    "group_by_category",
    "group_by_custom_comparer",
    "nested_group_by_custom",
]


class Product(NamedTuple):
    product_name: str
    category: str


def group_by_property(words: Iterable[str]) -> GroupCollection[str, str]:
    """Group words by their first letter and sort the groups by that letter."""
    return group_by(words, lambda word: word[0]).order_by(lambda group: group.key)


def grouping(numbers: Iterable[int]) -> list[tuple[int, list[int]]]:
    """Group numbers by the remainder of dividing them by 5.

    Returns pairs of the remainder and the numbers with that remainder.
    """
    return list(group_by(numbers, lambda n: n % 5).select(lambda g: (g.key, list(g))))


def group_by_category(
    products: Iterable[Product], max_count: int = 7
) -> list[tuple[str, list[str]]]:
    """Group products by category.

    Only categories with at most ``max_count`` products are returned, as pairs of
    the category and the names of its products.
    """
    return list(
        group_by(products, lambda product: product.category)
        .where(lambda group: len(group) <= max_count)
        .select(lambda group: (group.key, [p.product_name for p in group]))
    )


def strip_whitespace(word: str) -> str:
    return "".join(c for c in word if not c.isspace())


def group_by_custom_comparer(words: Iterable[str]) -> list[Group[str, str]]:
    """Group words that are anagrams of each other.

    The words may be padded with whitespace. Each group is keyed by its first
    word with the surrounding whitespace trimmed, and holds the original words.
    """
    return list(
        group_by(words, strip_whitespace, AnagramEquality()).select(
            lambda group: Group(group[0].strip(), group)
        )
    )


def nested_group_by_custom(words: Iterable[str]) -> GroupCollection:
    """Group anagrams and then group the words of each group again (not implemented)."""
    return group_by(words, strip_whitespace, AnagramEquality()).nested_group_by(
        str.upper
    )
