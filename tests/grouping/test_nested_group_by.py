from pytest import raises

from groupings import group_by, nested_group_by

from ..fixtures import anagrams  # noqa: F401


def describe_nested_group_by():
    def is_not_implemented(anagrams):
        groups = group_by(anagrams, str.strip)
        with raises(NotImplementedError) as exc_info:
            nested_group_by(groups, str.upper)
        assert str(exc_info.value) == "Nested grouping is not implemented."

    def is_not_implemented_when_chained(anagrams):
        groups = group_by(anagrams, str.strip)
        with raises(NotImplementedError):
            groups.nested_group_by(str.upper)

    def is_not_implemented_for_empty_groups():
        with raises(NotImplementedError):
            group_by([], str.strip).nested_group_by(str.upper)
