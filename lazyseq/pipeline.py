"""
The Sequence class: the iteration protocol adapter every constructor and operator builds on, plus the
fluent layer which exposes all operators as chainable methods. Every method delegates to the
function of the same name in lazyseq.operators or lazyseq.terminal, so both call styles share one
implementation.
"""

from lazyseq.logger import get_logger
from lazyseq.util import is_iterable

SHOW_MAX_VALUES = 50

logger = get_logger()


class Sequence(object):
    """
    Immutable, lazily evaluated, possibly infinite sequence of values.

    A Sequence does not hold any iteration state itself. It wraps a factory which creates a new
    iterator on each call of iter(), so the same Sequence can be iterated many times with identical
    results and iterating one iterator is never observable through another one.

    >>> numbers = Sequence(lambda: iter([1, 2, 3]))
    >>> list(numbers), list(numbers)
    ([1, 2, 3], [1, 2, 3])
    """

    __slots__ = ("_iterator_factory",)

    def __init__(self, iterator_factory):
        """
        :param iterator_factory: zero argument callable returning a fresh iterator on every call
        """
        self._iterator_factory = iterator_factory

    def __iter__(self):
        """
        Returns a new iterator over this sequence which is independent of all others
        :return: iterator over the sequence
        """
        return iter(self._iterator_factory())

    # monadic sequence operations ----------------------------------

    def bind(self, func):
        """
        Monadic bind: maps each element to an iterable and flattens the results.

        >>> constructors.walk(0, 2).bind(lambda x: constructors.walk(0, x)).to_list()
        [0, 0, 1, 0, 1, 2]

        :param func: function from an element to an iterable
        :return: flattened sequence
        """
        return operators.bind(func)(self)

    flat_map = bind
    and_ = bind

    def fmap(self, func):
        """
        Lazily applies func to each element.

        >>> constructors.walk(3).map(lambda x: 2 * x).to_list()
        [0, 2, 4, 6]

        :param func: function to apply
        :return: mapped sequence
        """
        return operators.map_(func)(self)

    map = fmap

    @staticmethod
    def pure(value):
        return constructors.pure_sequence(value)

    @staticmethod
    def empty():
        return constructors.nil

    # terminal sequence operations ----------------------------------

    def show(self, max_values=SHOW_MAX_VALUES):
        """
        Renders at most max_values elements as bracketed comma separated string.

        >>> constructors.walk(100).show(2)
        '[0,1]'

        :param max_values: number of elements to render
        :return: string representation
        """
        return terminal.show(self, max_values)

    def to_string(self, max_values=SHOW_MAX_VALUES):
        if max_values != SHOW_MAX_VALUES:
            logger.warn(
                "Sequence.to_string() with max_values might lead to type inspection issues. "
                "Use show(%s) instead.", max_values
            )
        return terminal.show(self, max_values)

    def __str__(self):
        return terminal.show(self)

    def __repr__(self):
        return "Sequence" + terminal.show(self)

    def count(self):
        return terminal.count(self)

    def eq(self, other):
        """
        Element wise equality with another iterable. Only meaningful on finite sequences.

        >>> constructors.walk(3) == [0, 1, 2, 3]
        True

        :param other: iterable to compare to
        :return: False if other is not iterable or differs, else True
        """
        if not is_iterable(other):
            return False
        return terminal.eq(self, other)

    def __eq__(self, other):
        return self.eq(other)

    def __ne__(self, other):
        return not self.eq(other)

    __hash__ = None

    def foldr(self, func, start):
        return terminal.foldr(func, start)(self)

    def foldl(self, func, start):
        return terminal.foldl(func, start)(self)

    def for_each(self, callback):
        return terminal.for_each(callback)(self)

    def head(self):
        return terminal.head(self)

    def is_empty(self):
        return terminal.is_empty(self)

    def max(self, comparator=None):
        return terminal.max_(self, comparator)

    def safe_max(self, comparator=None):
        return terminal.safe_max(self, comparator)

    def min(self, comparator=None):
        return terminal.min_(self, comparator)

    def safe_min(self, comparator=None):
        return terminal.safe_min(self, comparator)

    def reduce(self, func, start):
        return terminal.reduce_(func, start)(self)

    def uncons(self):
        return terminal.uncons(self)

    def to_list(self):
        """
        Materializes the sequence. Must not be called on infinite sequences.

        >>> constructors.seq(1, 2).to_list()
        [1, 2]
        """
        return list(self)

    # "semigroup-like" sequence operations -------------------------------------

    def append(self, other):
        return operators.append(self)(other)

    def __add__(self, other):
        return operators.append(self)(other)

    def cat_maybes(self):
        return operators.cat_maybes(self)

    def cons(self, element):
        return operators.cons(element)(self)

    def cycle(self):
        return operators.cycle(self)

    def drop(self, n):
        return operators.drop(n)(self)

    def drop_where(self, predicate):
        return operators.drop_where(predicate)(self)

    def drop_while(self, predicate):
        return operators.drop_while(predicate)(self)

    def tap(self, callback):
        return operators.tap(callback)(self)

    def mconcat(self):
        return operators.mconcat(self)

    def pipe(self, *transformers):
        """
        Applies the transformers left to right, starting with this sequence.

        >>> double = operators.map_(lambda x: 2 * x)
        >>> constructors.seq(1, 2).pipe(double, double).to_list()
        [4, 8]
        """
        return operators.pipe(*transformers)(self)

    def reverse(self):
        return operators.reverse_(self)

    def snoc(self, element):
        return operators.snoc(element)(self)

    def take(self, n):
        return operators.take(n)(self)

    def take_where(self, predicate):
        return operators.take_where(predicate)(self)

    def take_while(self, predicate):
        return operators.take_while(predicate)(self)

    def zip(self, other):
        return operators.zip_(self)(other)

    def zip_with(self, func, other):
        return operators.zip_with(func)(self)(other)


def create_sequence(iterator_factory):
    """
    Builds a Sequence from a function which returns a new iterator on each call.
    :param iterator_factory: zero argument callable, usually a generator function
    :return: Sequence
    """
    return Sequence(iterator_factory)


def iterator_of(iterable):
    return iter(iterable)


def is_sequence(candidate):
    return isinstance(candidate, Sequence)


def to_seq(iterable):
    """
    Lazily casts an iterable into a Sequence. The iterable is not touched until the result is
    iterated. Only iterables which can be iterated repeatedly give a re-iterable Sequence.

    >>> to_seq([1, 2]).to_list()
    [1, 2]

    :param iterable: iterable to wrap
    :return: Sequence over iterable
    """
    return Sequence(lambda: iter(iterable))


def ensure_sequence(iterable):
    if is_sequence(iterable):
        return iterable
    return to_seq(iterable)


# pylint: disable=wrong-import-position
from lazyseq import constructors, operators, terminal  # noqa: E402
