"""
Operators transforming one sequence into another. Every operator takes its parameters first and
returns a function from an iterable to a new Sequence, e.g. map_(f)(numbers).

Operators never touch their input until the output is iterated, and every iteration of the output
asks the input for a fresh iterator. All mutable bookkeeping (counters, flags, current
sub-iterators) lives in the iterator created for one iteration, never in the closure.
"""
from itertools import chain, dropwhile, islice, takewhile

from lazyseq.pipeline import create_sequence
from lazyseq.util import compose


def map_(func):
    """
    Lazily applies func to each element. func is never called once the input is exhausted.

    >>> list(map_(lambda x: 2 * x)([1, 2, 3]))
    [2, 4, 6]

    :param func: function to apply
    :return: operator
    """
    def operator(iterable):
        return create_sequence(lambda: map(func, iterable))

    return operator


fmap = map_


def take_where(predicate):
    """
    Keeps the elements satisfying predicate.

    >>> list(take_where(lambda x: x % 2 == 0)(range(6)))
    [0, 2, 4]
    """
    def operator(iterable):
        return create_sequence(lambda: filter(predicate, iterable))

    return operator


def drop_where(predicate):
    """
    Removes the elements satisfying predicate.

    >>> list(drop_where(lambda x: x > 1)([1, 2, 0]))
    [1, 0]
    """
    return take_where(lambda value: not predicate(value))


def take_while(predicate):
    """
    Passes elements on until the first one which does not satisfy predicate. That element is
    consumed from the input but not emitted.

    >>> list(take_while(lambda x: x < 2)([0, 1, 2, 0]))
    [0, 1]
    """
    def operator(iterable):
        return create_sequence(lambda: takewhile(predicate, iterable))

    return operator


def drop_while(predicate):
    """
    Skips the prefix of elements satisfying predicate and passes on everything after it, including
    later elements which satisfy predicate again.

    >>> list(drop_while(lambda x: x < 2)([0, 1, 2, 0]))
    [2, 0]
    """
    def operator(iterable):
        return create_sequence(lambda: dropwhile(predicate, iterable))

    return operator


def take(n):
    """
    Passes on at most the first n elements. The input is never asked for the element after the
    n-th one.

    >>> list(take(2)([1, 2, 3]))
    [1, 2]
    >>> list(take(0)([1, 2, 3]))
    []
    """
    stop = max(n, 0)

    def operator(iterable):
        return create_sequence(lambda: islice(iterable, stop))

    return operator


def drop(n):
    """
    Skips the first n elements.

    >>> list(drop(2)([1, 2, 3]))
    [3]
    """
    start = max(n, 0)

    def operator(iterable):
        return create_sequence(lambda: islice(iterable, start, None))

    return operator


_EXHAUSTED = object()


def cons(element):
    """
    Prepends a single element.

    >>> list(cons(0)([1, 2]))
    [0, 1, 2]
    """
    def operator(iterable):
        def cons_iterator():
            yield element
            yield from iterable

        return create_sequence(cons_iterator)

    return operator


def snoc(element):
    """
    Appends a single element.

    >>> list(snoc(3)([1, 2]))
    [1, 2, 3]
    """
    def operator(iterable):
        def snoc_iterator():
            yield from iterable
            yield element

        return create_sequence(snoc_iterator)

    return operator


def append(first):
    """
    Concatenation: all elements of first, then all elements of second. second is not touched
    before first is exhausted, so appending to an infinite sequence never observes second.

    >>> list(append([1])([2, 3]))
    [1, 2, 3]

    :param first: iterable emitted first
    :return: operator taking the iterable emitted second
    """
    def operator(second):
        return create_sequence(lambda: chain(first, second))

    return operator


concat = append


def cycle(iterable):
    """
    Repeats a finite iterable infinitely by asking it for a fresh iterator whenever the previous
    one is exhausted. Cycling an empty iterable gives an empty sequence.

    >>> list(take(5)(cycle([1, 2])))
    [1, 2, 1, 2, 1]
    >>> list(cycle([]))
    []
    """
    def cycle_iterator():
        while True:
            produced = False
            for value in iterable:
                produced = True
                yield value
            if not produced:
                return

    return create_sequence(cycle_iterator)


def zip_with(func):
    """
    Combines two iterables pairwise with func. Stops as soon as either side is exhausted.

    >>> list(zip_with(lambda a, b: a + b)([1, 2, 3])([10, 20]))
    [11, 22]

    :param func: function of two arguments
    :return: curried operator taking both iterables
    """
    def with_first(first):
        def with_second(second):
            def zip_with_iterator():
                second_iterator = iter(second)
                for value in first:
                    other = next(second_iterator, _EXHAUSTED)
                    if other is _EXHAUSTED:
                        return
                    yield func(value, other)

            return create_sequence(zip_with_iterator)

        return with_second

    return with_first


def zip_(first):
    """
    Pairs up two iterables.

    >>> list(zip_([1, 2])("ab"))
    [(1, 'a'), (2, 'b')]
    """
    return zip_with(lambda a, b: (a, b))(first)


def mconcat(iterables):
    """
    Monoidal concatenation: flattens an iterable of iterables by appending them, starting from the
    empty sequence.

    >>> list(mconcat([[0], [0, 1], []]))
    [0, 0, 1]
    """
    return create_sequence(lambda: chain.from_iterable(iterables))


def bind(func):
    """
    Monadic bind (>>=): maps each element to an iterable and flattens the result. Only as many
    outer elements are mapped as are needed downstream.

    >>> list(bind(lambda x: [x, -x])([1, 2]))
    [1, -1, 2, -2]
    """
    def operator(iterable):
        return mconcat(map_(func)(iterable))

    return operator


def cat_maybes(iterable):
    """
    Keeps the values of the Just elements of an iterable of Maybes, in order.

    >>> from lazyseq.maybe import Just, NOTHING
    >>> list(cat_maybes([Just(5), NOTHING, Just(3)]))
    [5, 3]
    """
    def cat_maybes_iterator():
        for maybe in iterable:
            if maybe.is_just():
                yield maybe.value

    return create_sequence(cat_maybes_iterator)


def reverse_(iterable):
    """
    Emits the elements in reverse order. The input is materialized when the result is iterated,
    so it must be finite.

    >>> list(reverse_([1, 2, 3]))
    [3, 2, 1]
    """
    def reverse_iterator():
        return reversed(tuple(iterable))

    return create_sequence(reverse_iterator)


def tap(callback):
    """
    Calls callback with each element that is pulled through and passes the element on unchanged.
    Elements never requested downstream are never passed to callback.

    >>> seen = []
    >>> list(take(1)(tap(seen.append)([1, 2, 3]))), seen
    ([1], [1])
    """
    def operator(iterable):
        def tap_iterator():
            for value in iterable:
                callback(value)
                yield value

        return create_sequence(tap_iterator)

    return operator


def pipe(*transformers):
    """
    Left to right composition of operators. The last transformer may also be a terminal operation.

    >>> double = map_(lambda x: 2 * x)
    >>> list(pipe(double, double)([1, 2]))
    [4, 8]
    """
    return compose(*reversed(transformers))
