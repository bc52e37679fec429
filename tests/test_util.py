import pytest

from lazyseq import iterate, walk
from lazyseq.util import (
    compose,
    forever,
    identity,
    is_iterable,
    is_nested,
    is_primitive,
    limit,
    plus_op,
)


class TestPredicates:
    @pytest.mark.parametrize("value", [1, 1.5, "abc", b"abc", True, 1j])
    def test_primitives(self, value):
        assert is_primitive(value)
        assert not is_nested(value)

    @pytest.mark.parametrize("value", [[], (), {1}, walk(1)])
    def test_nested(self, value):
        assert is_nested(value)
        assert is_iterable(value)

    def test_mapping_is_not_nested(self):
        assert is_iterable({})
        assert not is_nested({"a": 1})

    def test_not_iterable(self):
        assert not is_iterable(None)
        assert not is_iterable(3)


class TestFunctions:
    def test_identity(self):
        value = object()
        assert identity(value) is value

    def test_compose_right_to_left(self):
        assert compose(lambda x: x + 1, lambda x: 2 * x)(3) == 7

    def test_compose_nothing_is_identity(self):
        assert compose()(3) == 3

    def test_forever(self):
        assert forever(None)
        assert forever(False)

    def test_plus_op(self):
        assert plus_op(2, 3) == 5
        assert plus_op([1], [2]) == [1, 2]


class TestLimit:
    def test_converging_sequence(self):
        halves = iterate(1.0, lambda x: x / 2)
        assert limit(0.01, halves) == pytest.approx(0.0078125)

    def test_square_root(self):
        # Newton iteration for the square root of 2
        approximations = iterate(1.0, lambda x: (x + 2 / x) / 2)
        assert limit(1e-9, approximations) == pytest.approx(2 ** 0.5)

    def test_empty(self):
        assert limit(1, []) is None
