"""Tests for the Maybe pipeline stages."""

import math
from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from halfpipe import IllegalStateError, Left, Nothing, Right, Some, maybes, pipe
from tests.strategies import integers, maybes as maybe_values


@dataclass
class Point:
    x: int
    y: int


class TestConstructors:
    """Tests for from_null, from_predicate and from_nan."""

    def test_from_null(self):
        """None becomes Nothing; everything else becomes Some."""
        assert maybes.from_null(None) is Nothing
        assert maybes.from_null(0) == Some(0)
        assert maybes.from_null('') == Some('')
        assert maybes.of is maybes.from_null

    def test_from_predicate(self):
        """The value is kept only when the predicate holds."""
        assert maybes.from_predicate(lambda n: n > 0, 3) == Some(3)
        assert maybes.from_predicate(lambda n: n > 0, -3) is Nothing

    def test_from_predicate_none_is_nothing(self):
        """A None value is Nothing even if the predicate holds."""
        assert maybes.from_predicate(lambda v: True, None) is Nothing

    @pytest.mark.parametrize('value', [math.nan, math.inf, -math.inf, '1', None, True, False])
    def test_from_nan_rejects(self, value):
        """NaN, infinities, bools and non-numbers are Nothing."""
        assert maybes.from_nan(value) is Nothing

    @pytest.mark.parametrize('value', [0, 1.5, -7])
    def test_from_nan_accepts(self, value):
        """Finite numbers are Some."""
        assert maybes.from_nan(value) == Some(value)


class TestCombine:
    """Tests for combine and combine_from."""

    def test_all_present(self):
        """All Somes combine into a Some of a tuple."""
        assert maybes.combine(Some(1), Some('a')) == Some((1, 'a'))

    def test_one_missing(self):
        """A single Nothing makes the whole result Nothing."""
        assert maybes.combine(Some(1), Nothing, Some(3)) is Nothing

    def test_empty(self):
        """No arguments combine into Some of an empty tuple."""
        assert maybes.combine() == Some(())

    def test_from_values(self):
        """combine_from treats None as Nothing."""
        assert maybes.combine_from(1, 2) == Some((1, 2))
        assert maybes.combine_from(1, None) is Nothing
        assert maybes.from_nulls is maybes.combine_from


class TestTransformations:
    """Tests for map, flat_map, filter, unless and tap."""

    def test_map(self):
        """map transforms the Some value."""
        assert pipe(Some(2), maybes.map(lambda n: n * 3)) == Some(6)
        assert pipe(Nothing, maybes.map(lambda n: n * 3)) is Nothing

    def test_map_to_none_is_nothing(self):
        """A mapper returning None yields Nothing."""
        assert pipe(Some({'a': 1}), maybes.map(lambda d: d.get('b'))) is Nothing

    def test_flat_map(self):
        """flat_map binds a Maybe-returning function."""
        half = lambda n: Some(n // 2) if n % 2 == 0 else Nothing  # noqa: E731
        assert pipe(Some(4), maybes.flat_map(half)) == Some(2)
        assert pipe(Some(3), maybes.flat_map(half)) is Nothing

    def test_filter_and_unless(self):
        """filter keeps matching values; unless keeps non-matching ones."""
        assert pipe(Some(4), maybes.filter(lambda n: n > 3)) == Some(4)
        assert pipe(Some(4), maybes.unless(lambda n: n > 3)) is Nothing
        assert pipe(Some(2), maybes.unless(lambda n: n > 3)) == Some(2)

    def test_tap(self):
        """tap sees the value and passes the Maybe through."""
        seen = []
        assert pipe(Some(5), maybes.tap(seen.append)) == Some(5)
        assert pipe(Nothing, maybes.tap(seen.append)) is Nothing
        assert seen == [5]

    @given(maybe_values, integers)
    def test_map_composes(self, maybe, n):
        """map(f) then map(g) equals map(g after f)."""
        f = lambda v: v + n  # noqa: E731
        g = lambda v: v * 2  # noqa: E731
        assert pipe(maybe, maybes.map(f), maybes.map(g)) == pipe(maybe, maybes.map(lambda v: g(f(v))))


class TestUnwrapping:
    """Tests for the stages that leave the Maybe world."""

    def test_or_some(self, sample_some, sample_nothing):
        """or_some returns the value or the default."""
        assert pipe(sample_some, maybes.or_some('x')) == 'hello'
        assert pipe(sample_nothing, maybes.or_some('x')) == 'x'
        assert maybes.default_to is maybes.or_some

    def test_or_some_with(self, sample_nothing):
        """or_some_with computes the default lazily."""
        calls = []

        def default():
            calls.append(1)
            return 'computed'

        assert pipe(Some('v'), maybes.or_some_with(default)) == 'v'
        assert calls == []
        assert pipe(sample_nothing, maybes.or_some_with(default)) == 'computed'
        assert calls == [1]

    def test_or_none(self, sample_some, sample_nothing):
        """or_none returns the value or None."""
        assert pipe(sample_some, maybes.or_none()) == 'hello'
        assert pipe(sample_nothing, maybes.to_value()) is None

    def test_or_else_family(self):
        """or_else / or_else_with / or_else_from replace Nothing only."""
        assert pipe(Nothing, maybes.or_else(Some(1))) == Some(1)
        assert pipe(Some(0), maybes.or_else(Some(1))) == Some(0)
        assert pipe(Nothing, maybes.or_else_with(lambda: Some(2))) == Some(2)
        assert pipe(Nothing, maybes.or_else_from(lambda: 3)) == Some(3)
        assert pipe(Nothing, maybes.or_else_from(lambda: None)) is Nothing

    def test_or_throw_instance(self):
        """or_throw raises the given exception on Nothing."""
        assert pipe(Some(1), maybes.or_throw(KeyError('id'))) == 1
        with pytest.raises(KeyError, match='id'):
            pipe(Nothing, maybes.or_throw(KeyError('id')))

    def test_or_throw_factory(self):
        """or_throw accepts an exception factory."""
        with pytest.raises(LookupError, match='missing'):
            pipe(Nothing, maybes.or_throw(lambda: LookupError('missing')))

    def test_some_on_nothing(self):
        """The some() stage raises IllegalStateError on Nothing."""
        with pytest.raises(IllegalStateError):
            pipe(Nothing, maybes.some())

    def test_cata(self):
        """cata folds through pipe."""
        assert pipe(Some(2), maybes.cata(lambda: 0, lambda n: n + 1)) == 3
        assert pipe(Nothing, maybes.cata(lambda: 0, lambda n: n + 1)) == 0

    def test_to_either(self):
        """to_either turns Nothing into Left of the given value."""
        assert pipe(Some(2), maybes.to_either('none')) == Right(2)
        assert pipe(Nothing, maybes.to_either('none')) == Left('none')


class TestPredicates:
    """Tests for boolean stages."""

    def test_is_some_is_none(self):
        """is_some / is_none / is_present report the variant."""
        assert pipe(Some(1), maybes.is_some()) is True
        assert pipe(Nothing, maybes.is_none()) is True
        assert pipe(Nothing, maybes.is_present()) is False

    def test_to_boolean(self):
        """to_boolean checks presence and optionally the value."""
        assert pipe(Some(0), maybes.to_boolean()) is True
        assert pipe(Nothing, maybes.to_boolean()) is False
        assert pipe(Some(4), maybes.to_boolean(lambda n: n > 3)) is True
        assert pipe(Some(2), maybes.to_boolean(lambda n: n > 3)) is False

    def test_is_equal(self):
        """is_equal compares two Maybes."""
        assert maybes.is_equal(Some(1), Some(1))
        assert maybes.is_equal(Nothing, Nothing)
        assert not maybes.is_equal(Some(1), Nothing)
        assert not maybes.is_equal(Some(1), Some(2))

    def test_is_equal_with(self):
        """is_equal_with uses a custom comparer."""
        same_length = lambda a, b: len(a) == len(b)  # noqa: E731
        assert maybes.is_equal_with(same_length, Some('ab'), Some('cd'))

    def test_is_equal_to(self):
        """is_equal_to checks the Some value with ==."""
        assert pipe(Some(3), maybes.is_equal_to(3)) is True
        assert pipe(Some(3), maybes.is_equal_to(4)) is False
        assert pipe(Nothing, maybes.is_equal_to(3)) is False
        assert pipe(Some(3), maybes.is_equal_to_with(lambda: 3)) is True

    def test_matches_is_structural(self):
        """matches compares normalised structures."""
        assert pipe(Some((1, 2)), maybes.matches([1, 2])) is True
        assert pipe(Some((1, 2)), maybes.is_equal_to([1, 2])) is False
        assert pipe(Some(Point(1, 2)), maybes.matches({'x': 1, 'y': 2})) is True
        assert pipe(Some({'a': [1]}), maybes.matches_with(lambda: {'a': (1,)})) is True
        assert pipe(Nothing, maybes.matches(None)) is False

    @given(st.one_of(integers, st.text(max_size=10)))
    def test_matches_agrees_with_equality_for_scalars(self, value):
        """For plain scalars matches behaves like is_equal_to."""
        assert pipe(Some(value), maybes.matches(value)) is True
