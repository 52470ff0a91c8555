"""Fixtures for grouping tests"""

import json
from pathlib import Path

import pytest

from groupings.demos import Product

__all__ = ["anagrams", "numbers", "products", "words"]


def read_json(name):
    path = (Path(__file__).parent / name).with_suffix(".json")
    with path.open(encoding="utf-8") as file:
        return json.load(file)


@pytest.fixture(scope="module")
def words():
    return ["blueberry", "chimpanzee", "abacus", "banana", "apple", "cheese"]


@pytest.fixture(scope="module")
def numbers():
    return [5, 4, 1, 3, 9, 8, 6, 7, 2, 0]


@pytest.fixture(scope="module")
def anagrams():
    return [
        "from   ",
        "  mane",
        " salt",
        " earn ",
        "name   ",
        "  last   ",
        " near ",
        " form  ",
        "mean",
    ]


@pytest.fixture(scope="module")
def products():
    return [Product(**product) for product in read_json("products")]
