import pickle
from copy import copy, deepcopy

from pytest import raises

from groupings import (
    CaseInsensitiveEquality,
    FrozenError,
    FrozenList,
    Group,
    GroupCollection,
    default_equality,
)


def describe_group():
    def has_key_and_members():
        group = Group("a", ["abacus", "apple"])
        assert group.key == "a"
        assert group == ["abacus", "apple"]
        assert len(group) == 2
        assert group[0] == "abacus"
        assert isinstance(group, FrozenList)

    def can_be_empty():
        group = Group("x")
        assert group.key == "x"
        assert group == []
        assert not group

    def cannot_change_members():
        group = Group("a", ["abacus", "apple"])
        with raises(FrozenError):
            group.append("avocado")
        with raises(FrozenError):
            group[0] = "avocado"
        with raises(FrozenError):
            del group[0]
        assert group == ["abacus", "apple"]

    def cannot_change_key():
        group = Group("a", ["abacus"])
        with raises(AttributeError):
            group.key = "b"  # type: ignore
        with raises(FrozenError):
            group._key = "b"
        with raises(FrozenError):
            del group._key
        assert group.key == "a"

    def compares_keys_of_groups():
        assert Group("a", [1, 2]) == Group("a", [1, 2])
        assert Group("a", [1, 2]) != Group("b", [1, 2])
        assert Group("a", [1, 2]) != Group("a", [2, 1])
        assert Group("a", [1, 2]) == [1, 2]
        assert [1, 2] == Group("a", [1, 2])
        assert Group("a", [1, 2]) != [1, 2, 3]
        assert Group("a", [1, 2]) != "a"

    def can_hash():
        assert hash(Group("a", [1, 2])) == hash(Group("a", [1, 2]))
        assert hash(Group("a", [1, 2])) != hash(Group("b", [1, 2]))
        assert len({Group("a", [1]), Group("a", [1]), Group("b", [1])}) == 2

    def can_copy():
        group = Group("a", [[1], [2]])
        copied = copy(group)
        assert isinstance(copied, Group)
        assert copied == group
        assert copied.key == "a"
        assert copied is not group
        assert copied[0] is group[0]

    def can_deep_copy():
        group = Group(("a",), [[1], [2]])
        copied = deepcopy(group)
        assert isinstance(copied, Group)
        assert copied == group
        assert copied[0] is not group[0]

    def can_pickle():
        group = Group("a", [1, 2])
        unpickled = pickle.loads(pickle.dumps(group))
        assert isinstance(unpickled, Group)
        assert unpickled == group
        assert unpickled.key == "a"

    def can_get_the_representation():
        assert repr(Group("a", ["apple"])) == "Group('a', ['apple'])"


def describe_group_collection():
    def is_read_only():
        groups = GroupCollection([Group(0, [5, 0]), Group(4, [4, 9])])
        with raises(FrozenError):
            groups.append(Group(1, [1]))
        with raises(FrozenError):
            groups.sort(key=lambda group: group.key)
        with raises(FrozenError):
            groups[0] = Group(1, [1])
        assert groups.keys() == [0, 4]

    def uses_default_equality_if_not_specified():
        assert GroupCollection().equality is default_equality
        assert GroupCollection([], None).equality is default_equality

    def can_get_keys():
        groups = GroupCollection([Group("b", [1]), Group("a", [2])])
        assert groups.keys() == ["b", "a"]
        assert GroupCollection().keys() == []

    def can_get_groups_by_key():
        groups = GroupCollection([Group("b", [1]), Group("a", [2])])
        assert groups.get("a") == Group("a", [2])
        assert groups.get("c") is None
        assert groups.get("c", Group("c")) == Group("c")

    def can_get_groups_by_key_with_the_grouping_equality():
        groups = GroupCollection(
            [Group("Apple", [1]), Group("banana", [2])], CaseInsensitiveEquality()
        )
        assert groups.get("APPLE") == Group("Apple", [1])
        assert groups.get("Banana") == Group("banana", [2])

    def can_be_converted_to_a_dict():
        groups = GroupCollection([Group("b", [1, 3]), Group("a", [2])])
        assert groups.to_dict() == {"b": [1, 3], "a": [2]}
        assert list(groups.to_dict()) == ["b", "a"]

    def can_copy():
        equality = CaseInsensitiveEquality()
        groups = GroupCollection([Group("a", [1])], equality)
        copied = copy(groups)
        assert isinstance(copied, GroupCollection)
        assert copied == groups
        assert copied.equality is equality
        deep_copied = deepcopy(groups)
        assert isinstance(deep_copied, GroupCollection)
        assert deep_copied == groups
        assert isinstance(deep_copied[0], Group)

    def can_pickle():
        groups = GroupCollection([Group("a", [1]), Group("b", [2])])
        unpickled = pickle.loads(pickle.dumps(groups))
        assert isinstance(unpickled, GroupCollection)
        assert unpickled == groups
        assert unpickled.keys() == ["a", "b"]

    def can_get_the_representation():
        groups = GroupCollection([Group("a", [1])])
        assert repr(groups) == "GroupCollection([Group('a', [1])])"
