"""
Functions which create new sequences from a seed and step or stop rules, from ranges, from constant
repetition, from single values or from no values at all.
"""
import sys

from lazyseq.pipeline import create_sequence
from lazyseq.util import forever, identity

# Highest reliable upper bound for a long walk over integers with integral steps.
ALL = sys.maxsize


def unfold(initial_state, step):
    """
    Creates a Sequence from a function that computes the next state and value from the current
    state. step returns None once the sequence is exhausted, otherwise a (state, value) tuple.

    Every iterator owns a private running state seeded from initial_state, which is what allows the
    step function to be pure and the sequence to be replayed.

    >>> zero_to_four = unfold(0, lambda n: (n + 1, n) if n < 5 else None)
    >>> list(zero_to_four)
    [0, 1, 2, 3, 4]

    :param initial_state: state the first step is called with
    :param step: function from state to None or (next_state, value)
    :return: Sequence of the produced values
    """
    def unfold_iterator():
        running_state = initial_state
        while True:
            result = step(running_state)
            if result is None:
                return
            running_state, value = result
            yield value

    return create_sequence(unfold_iterator)


def sequence(start, while_fn, increment_fn):
    """
    Emits start and every following value computed by increment_fn for as long as while_fn holds
    on the value about to be emitted. increment_fn is never called once the end is decided.

    while_fn and increment_fn should not refer to mutable state in their closure.

    >>> list(sequence(0, lambda x: x < 3, lambda x: x + 1))
    [0, 1, 2]

    :param start: first value of the sequence
    :param while_fn: returns False if the iteration should stop
    :param increment_fn: computes the next value from the previous one
    :return: Sequence
    """
    def sequence_iterator():
        value = start
        while while_fn(value):
            yield value
            value = increment_fn(value)

    return create_sequence(sequence_iterator)


def iterate(start, func):
    """
    Infinite sequence start, func(start), func(func(start)), ...

    >>> list(iterate(1, lambda x: 2 * x).take(4))
    [1, 2, 4, 8]
    """
    return sequence(start, forever, func)


def walk(first_boundary=ALL, second_boundary=0, step=1):
    """
    Range of numbers between two inclusive boundaries. The boundaries can be given in any order,
    the sign of step decides the direction. The end value may not be reached exactly, but is never
    exceeded. A step of zero yields an infinite sequence of the start value.

    >>> list(walk(3))
    [0, 1, 2, 3]
    >>> list(walk(1, 5, -2))
    [5, 3, 1]
    >>> list(walk(5, 3))
    [3, 4, 5]

    :param first_boundary: first boundary, defaults to ALL
    :param second_boundary: second boundary, defaults to 0
    :param step: increment applied on each iteration, defaults to 1
    :return: Sequence of numbers
    """
    step_is_negative = step < 0
    left, right = _normalize(first_boundary, second_boundary, step_is_negative)

    return sequence(
        left,
        lambda value: not _has_reached_end(step_is_negative, value, right),
        lambda value: value + step,
    )


Range = walk


def _has_reached_end(step_is_negative, value, end):
    return value < end if step_is_negative else value > end


def _normalize(left, right, step_is_negative):
    low, high = (left, right) if left < right else (right, left)
    if step_is_negative:
        return high, low
    return low, high


def repeat(value):
    """
    Infinite sequence of value.

    >>> list(repeat(7).take(3))
    [7, 7, 7]
    """
    return sequence(value, forever, identity)


def pure_sequence(value):
    """
    Sequence with exactly one element.

    >>> list(pure_sequence(42))
    [42]
    """
    def pure_iterator():
        yield value

    return create_sequence(pure_iterator)


PureSequence = pure_sequence


def replicate(n):
    """
    Curried constructor of a sequence which holds the same value n times.

    >>> list(replicate(3)(True))
    [True, True, True]
    >>> list(replicate(0)("x"))
    []

    :param n: number of elements
    :return: function from the value to the Sequence
    """
    def with_value(value):
        return unfold(n, lambda remaining: (remaining - 1, value) if remaining > 0 else None)

    return with_value


def seq(*values):
    """
    Sequence over a defensive copy of the given values.

    >>> list(seq(1, 2, 3))
    [1, 2, 3]
    >>> seq() == nil
    True
    """
    copied = tuple(values)
    return create_sequence(lambda: iter(copied))


def _nil_iterator():
    return iter(())


nil = create_sequence(_nil_iterator)
