import pytest

from lazyseq import (
    NOTHING,
    EmptySequenceError,
    Just,
    count,
    eq,
    foldl,
    foldr,
    for_each,
    head,
    is_empty,
    map_,
    max_,
    min_,
    nil,
    reduce_,
    safe_max,
    safe_min,
    seq,
    show,
    take,
    tap,
    uncons,
    walk,
)
from lazyseq.terminal import ILLEGAL_ARGUMENT_EMPTY_ITERABLE
from lazyseq.util import plus_op
from tests.testing_table import (
    TEST_IS_SEQUENCE,
    UPPER_SEQUENCE_BOUNDARY,
    SequenceTestConfig,
    new_sequence,
    table_for,
)


def same_value(expected):
    return lambda actual: actual == expected


TERMINAL = [TEST_IS_SEQUENCE]

REDUCE = SequenceTestConfig(
    name="reduce_",
    iterable=lambda: new_sequence(UPPER_SEQUENCE_BOUNDARY),
    operation=lambda func: reduce_(func, 0),
    param=plus_op,
    expected=10,
    eval_fn=same_value,
    excluded_tests=TERMINAL,
    invariants=[
        lambda it: reduce_(lambda acc, _: acc + 1, 0)(it) == count(it),
    ],
)

FOLDR = SequenceTestConfig(
    name="foldr",
    iterable=lambda: walk(1, 3),
    operation=lambda func: foldr(func, ""),
    param=lambda acc, cur: acc + str(cur),
    expected="321",
    eval_fn=same_value,
    excluded_tests=TERMINAL,
    invariants=[
        lambda it: foldr(lambda acc, cur: [cur] + acc, [])(it) == list(it),
    ],
)

COUNT = SequenceTestConfig(
    name="count",
    iterable=lambda: new_sequence(UPPER_SEQUENCE_BOUNDARY),
    operation=lambda _: count,
    expected=UPPER_SEQUENCE_BOUNDARY + 1,
    eval_fn=same_value,
    excluded_tests=TERMINAL,
    invariants=[
        lambda it: count(it) == len(list(it)),
    ],
)

MAX = SequenceTestConfig(
    name="max_",
    iterable=lambda: seq(4, 3, 2, 5, 1, 0, 9),
    operation=lambda _: max_,
    expected=9,
    eval_fn=same_value,
    excluded_tests=TERMINAL,
)

MIN = SequenceTestConfig(
    name="min_",
    iterable=lambda: seq(4, 3, 2, 5, 1, 0, 9),
    operation=lambda _: min_,
    expected=0,
    eval_fn=same_value,
    excluded_tests=TERMINAL,
)

SHOW = SequenceTestConfig(
    name="show",
    iterable=lambda: new_sequence(UPPER_SEQUENCE_BOUNDARY),
    operation=lambda _: show,
    expected="[0,1,2,3,4]",
    eval_fn=same_value,
    excluded_tests=TERMINAL,
    invariants=[
        lambda it: show(it).startswith("[") and show(it).endswith("]"),
    ],
)


@pytest.mark.parametrize("config, check", table_for(REDUCE, FOLDR, COUNT, MAX, MIN, SHOW))
def test_terminal_testing_table(config, check):
    check(config)


class TestFolds:
    def test_foldl_is_reduce(self):
        assert foldl(plus_op, 0)(walk(4)) == reduce_(plus_op, 0)(walk(4))

    def test_reduce_of_empty_is_start(self):
        assert reduce_(plus_op, 42)(nil) == 42

    def test_foldr_order(self):
        assert foldr(lambda acc, cur: acc + [cur], [])(walk(2)) == [2, 1, 0]

    def test_for_each_calls_in_order(self):
        seen = []
        assert for_each(seen.append)(walk(3)) is None
        assert seen == [0, 1, 2, 3]

    def test_reduce_on_bounded_infinite(self):
        assert reduce_(plus_op, 0)(take(4)(walk())) == 6


class TestMaxMin:
    def test_max_of_empty_raises(self):
        with pytest.raises(EmptySequenceError) as error:
            max_(nil)
        assert str(error.value) == ILLEGAL_ARGUMENT_EMPTY_ITERABLE

    def test_min_of_empty_raises_value_error(self):
        with pytest.raises(ValueError):
            min_([])

    def test_empty_raise_is_logged(self, log_capture):
        caplog = log_capture()
        with pytest.raises(EmptySequenceError):
            max_(nil)
        assert ILLEGAL_ARGUMENT_EMPTY_ITERABLE in caplog.text

    def test_safe_variants(self):
        assert safe_max(nil) is NOTHING
        assert safe_min(nil) is NOTHING
        assert safe_max(seq(1, 7, 3)) == Just(7)
        assert safe_min(seq(4, 2, 8)) == Just(2)

    def test_custom_comparator(self):
        by_length = lambda a, b: len(a) < len(b)
        words = seq("bb", "a", "cccc", "ddd")
        assert max_(words, by_length) == "cccc"
        assert min_(words, by_length) == "a"

    def test_ties_keep_the_first_element(self):
        by_first = lambda a, b: a[0] < b[0]
        pairs = seq((1, "first"), (3, "first"), (3, "second"), (1, "second"))
        assert max_(pairs, by_first) == (3, "first")
        assert min_(pairs, by_first) == (1, "first")

    def test_single_element(self):
        assert max_(seq(5)) == 5
        assert min_(seq(5)) == 5


class TestShow:
    def test_truncates_to_default(self):
        shown = show(walk())
        # brackets, 49 commas, 0..9 and 10..49
        assert len(shown) == 2 + 49 + 10 + 80
        assert shown.startswith("[0,1,2,")
        assert shown.endswith(",48,49]")

    def test_max_values(self):
        assert show(walk(), 3) == "[0,1,2]"
        assert show(walk(), 0) == "[]"

    def test_does_not_pull_more_than_shown(self):
        pulled = []
        show(tap(pulled.append)(walk()), 3)
        assert pulled == [0, 1, 2]

    def test_nested(self):
        nested = map_(walk)(walk(1, 3))
        assert show(nested) == "[[0,1],[0,1,2],[0,1,2,3]]"

    def test_empty(self):
        assert show(nil) == "[]"

    def test_strings_are_not_quoted(self):
        assert show(seq("a", "b")) == "[a,b]"


class TestAccessors:
    def test_head(self):
        assert head(walk(3)) == 0
        assert head(nil) is None

    def test_head_does_not_consume(self):
        numbers = walk(2, 4)
        assert head(numbers) == 2
        assert head(numbers) == 2

    def test_is_empty(self):
        assert is_empty(nil)
        assert not is_empty(walk())
        assert not is_empty(seq(None))

    def test_uncons(self):
        first, rest = uncons(walk(3))
        assert first == 0
        assert list(rest) == [1, 2, 3]
        assert list(rest) == [1, 2, 3]

    def test_uncons_of_empty(self):
        first, rest = uncons(nil)
        assert first is None
        assert list(rest) == []

    def test_uncons_of_infinite(self):
        first, rest = uncons(walk())
        assert first == 0
        assert list(take(2)(rest)) == [1, 2]


class TestEq:
    def test_equal(self):
        assert eq(walk(3), [0, 1, 2, 3])
        assert eq(nil, [])

    def test_different_length(self):
        assert not eq(walk(3), walk(4))
        assert not eq(walk(4), walk(3))

    def test_different_values(self):
        assert not eq(seq(1, 2), seq(1, 3))

    def test_stops_at_first_difference(self):
        pulled = []
        assert not eq(tap(pulled.append)(walk()), seq(0, 5))
        assert pulled == [0, 1]

    def test_count(self):
        assert count(nil) == 0
        assert count(walk(9)) == 10
