"""
Terminal operations force the evaluation of a sequence and reduce it to a single value.

Folds, count, eq, show and reverse based operations only finish on finite input. They do not try to
detect infinite sequences; bound the input with take() first.
"""
from itertools import islice

from lazyseq.logger import get_logger
from lazyseq.maybe import Just, NOTHING
from lazyseq.operators import drop, reverse_
from lazyseq.pipeline import SHOW_MAX_VALUES

ILLEGAL_ARGUMENT_EMPTY_ITERABLE = "Illegal argument error: iterable must not be empty!"

logger = get_logger()

_EXHAUSTED = object()


class EmptySequenceError(ValueError):
    """Raised by operations which need at least one element, e.g. max_ and min_."""

    def __init__(self, message=ILLEGAL_ARGUMENT_EMPTY_ITERABLE):
        super(EmptySequenceError, self).__init__(message)


def _less_than(a, b):
    return a < b


def reduce_(func, start):
    """
    Left fold of the elements with func(accumulator, current), starting with start.

    >>> reduce_(lambda acc, cur: acc + cur, 0)([1, 2, 3])
    6

    :param func: accumulation function
    :param start: initial accumulator
    :return: function taking the iterable to reduce
    """
    def operation(iterable):
        accumulator = start
        for current in iterable:
            accumulator = func(accumulator, current)
        return accumulator

    return operation


foldl = reduce_


def foldr(func, start):
    """
    Right fold, reducing from the last element to the first. The callback still takes the
    accumulator first. Needs O(n) memory, prefer reduce_ where the order does not matter.

    >>> foldr(lambda acc, cur: acc + str(cur), "")([1, 2, 3])
    '321'
    """
    def operation(iterable):
        return reduce_(func, start)(reverse_(iterable))

    return operation


def for_each(callback):
    """
    Calls callback for each element.

    >>> seen = []
    >>> for_each(seen.append)([1, 2])
    >>> seen
    [1, 2]
    """
    def operation(iterable):
        for current in iterable:
            callback(current)

    return operation


def count(iterable):
    """
    Number of elements. Hangs on infinite input.

    >>> count([1, 2, 3])
    3
    """
    return reduce_(lambda acc, _: acc + 1, 0)(iterable)


def head(iterable):
    """
    First element, or None when there is none. Sequences are not consumed by this.

    >>> head([1, 2]), head([])
    (1, None)
    """
    return next(iter(iterable), None)


def is_empty(iterable):
    """
    True iff the iterable produces no element at all. A sequence whose first element is None is
    not empty.

    >>> is_empty([]), is_empty([None])
    (True, False)
    """
    return next(iter(iterable), _EXHAUSTED) is _EXHAUSTED


def uncons(iterable):
    """
    Splits into the first element and the sequence of the remaining ones.

    >>> first, rest = uncons([1, 2, 3])
    >>> first, list(rest)
    (1, [2, 3])
    """
    return head(iterable), drop(1)(iterable)


def eq(first, second):
    """
    Element wise equality of two finite iterables, both are iterated from a fresh iterator.

    >>> eq([1, 2], (1, 2)), eq([1, 2], [1])
    (True, False)
    """
    first_iterator = iter(first)
    second_iterator = iter(second)
    while True:
        left = next(first_iterator, _EXHAUSTED)
        right = next(second_iterator, _EXHAUSTED)
        if left is _EXHAUSTED or right is _EXHAUSTED:
            return left is right
        if left != right:
            return False


def safe_max(iterable, comparator=None):
    """
    Largest element wrapped in Just, or NOTHING for an empty iterable. comparator(a, b) returns
    True if b is larger than a and defaults to a < b. Of equal elements the first one wins.

    >>> safe_max([1, 3, 0, 5])
    Just(5)
    >>> safe_max([])
    Nothing

    :param iterable: finite iterable
    :param comparator: optional "is greater" function
    :return: Maybe of the largest element
    """
    comparator = comparator or _less_than
    iterator = iter(iterable)
    current_max = next(iterator, _EXHAUSTED)
    if current_max is _EXHAUSTED:
        return NOTHING
    for value in iterator:
        if comparator(current_max, value):
            current_max = value
    return Just(current_max)


def safe_min(iterable, comparator=None):
    """
    Smallest element wrapped in Just, or NOTHING for an empty iterable. comparator(a, b) returns
    True if a is smaller than b and defaults to a < b. Of equal elements the first one wins.

    >>> safe_min([4, 1, 3])
    Just(1)
    """
    comparator = comparator or _less_than
    return safe_max(iterable, lambda current_min, value: comparator(value, current_min))


def max_(iterable, comparator=None):
    """
    Largest element of a non-empty finite iterable, see safe_max.

    >>> max_([4, 3, 2, 5, 1, 0, 9])
    9

    :raises EmptySequenceError: if the iterable is empty
    """
    return _get_or_raise(safe_max(iterable, comparator))


def min_(iterable, comparator=None):
    """
    Smallest element of a non-empty finite iterable, see safe_min.

    :raises EmptySequenceError: if the iterable is empty
    """
    return _get_or_raise(safe_min(iterable, comparator))


def _get_or_raise(maybe):
    def empty():
        logger.err(ILLEGAL_ARGUMENT_EMPTY_ITERABLE)
        raise EmptySequenceError()

    return maybe.fold(empty, lambda value: value)


def show(iterable, max_values=SHOW_MAX_VALUES):
    """
    Bracketed, comma separated rendering of at most max_values elements. Longer iterables are
    truncated. Nested sequences render through their own str().

    >>> show([0, 1, 2])
    '[0,1,2]'
    >>> show(range(100), 2)
    '[0,1]'
    """
    rendered = (str(value) for value in islice(iterable, max(max_values, 0)))
    return "[" + ",".join(rendered) + "]"
