"""Tests for the dict, set and object pipeline stages."""

from dataclasses import dataclass
from types import MappingProxyType

import msgspec
import pytest

from halfpipe import Nothing, Some, maps, objects, pipe, sets


@dataclass
class User:
    name: str
    email: str | None = None


class Account(msgspec.Struct):
    owner: str
    balance: int = 0


class Plain:
    def __init__(self):
        self.a = 1
        self.b = None


class TestMaps:
    """Tests for mapping stages."""

    def test_get(self):
        """get returns Some, or Nothing for missing keys and None values."""
        data = {'a': 1, 'b': None}
        assert pipe(data, maps.get('a')) == Some(1)
        assert pipe(data, maps.get('b')) is Nothing
        assert pipe(data, maps.get('z')) is Nothing

    def test_views(self):
        """keys / values / entries keep insertion order."""
        data = {'x': 1, 'y': 2}
        assert pipe(data, maps.keys()) == ['x', 'y']
        assert pipe(data, maps.values()) == [1, 2]
        assert pipe(data, maps.entries()) == [('x', 1), ('y', 2)]
        assert pipe(data, maps.size()) == 2

    def test_has(self):
        """has checks keys, also for read-only mappings."""
        assert pipe({'a': None}, maps.has('a')) is True
        assert pipe(MappingProxyType({'a': 1}), maps.has('b')) is False

    def test_for_each(self):
        """for_each calls fn(value, key)."""
        seen = []
        pipe({'a': 1, 'b': 2}, maps.for_each(lambda value, key: seen.append((key, value))))
        assert seen == [('a', 1), ('b', 2)]


class TestSets:
    """Tests for set stages."""

    def test_size_and_has(self):
        """size and has."""
        assert pipe({1, 2}, sets.size()) == 2
        assert pipe(frozenset({1}), sets.has(1)) is True
        assert pipe({1}, sets.has(2)) is False

    def test_algebra(self):
        """union / intersection / difference return new sets."""
        source = {1, 2, 3}
        assert pipe(source, sets.union({4})) == {1, 2, 3, 4}
        assert pipe(source, sets.intersection({2, 3, 4})) == {2, 3}
        assert pipe(source, sets.difference({1})) == {2, 3}
        assert source == {1, 2, 3}

    def test_subset_superset(self):
        """is_subset / is_superset."""
        assert pipe({1}, sets.is_subset({1, 2})) is True
        assert pipe({1, 2}, sets.is_superset({3})) is False

    def test_for_each(self):
        """for_each visits every member."""
        seen = []
        pipe({1, 2}, sets.for_each(seen.append))
        assert sorted(seen) == [1, 2]


class TestObjects:
    """Tests for object field stages."""

    @pytest.mark.parametrize(
        ('obj', 'expected'),
        [
            (User('ada'), ['name', 'email']),
            (Account('ada'), ['owner', 'balance']),
            (Plain(), ['a', 'b']),
            ({'k': 1}, ['k']),
        ],
    )
    def test_keys(self, obj, expected):
        """keys lists field names for every supported kind of object."""
        assert pipe(obj, objects.keys()) == expected

    def test_values_and_entries(self):
        """values / entries follow field order."""
        user = User('ada', 'ada@example.com')
        assert pipe(user, objects.values()) == ['ada', 'ada@example.com']
        assert pipe(Account('ada', 5), objects.entries()) == [('owner', 'ada'), ('balance', 5)]

    def test_get(self):
        """get returns Some, or Nothing for missing fields and None values."""
        assert pipe(User('ada'), objects.get('name')) == Some('ada')
        assert pipe(User('ada'), objects.get('email')) is Nothing
        assert pipe(Plain(), objects.get('missing')) is Nothing
        assert pipe({'k': 1}, objects.get('k')) == Some(1)

    def test_has(self):
        """has checks attributes, or keys for mappings."""
        assert pipe(Plain(), objects.has('b')) is True
        assert pipe(Plain(), objects.has('c')) is False
        assert pipe({'keys': 1}, objects.has('keys')) is True
        assert pipe({}, objects.has('keys')) is False
