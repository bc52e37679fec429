"""
Query clauses over any monad offering bind, fmap, pure and empty, i.e. Sequence, JsonSequence and
Maybe. A query starts with from_(monad), chains clauses and ends with result(), which returns a
monad of the same kind.

>>> from lazyseq import ALL, walk
>>> triples = (
...     from_(walk(2, ALL))
...     .combine(lambda z: walk(2, z))
...     .combine(lambda zy: walk(2, zy[1]))
...     .where(lambda t: t[1] ** 2 + t[0][1] ** 2 == t[0][0] ** 2)
...     .result()
... )
>>> triples.take(2).to_list()
[((5, 4), 3), ((10, 8), 6)]
"""


class Jinq(object):
    """
    One step of a query. Every clause returns a new Jinq, the wrapped monad is never changed.

    >>> from lazyseq import walk
    >>> from_(walk(6)).where(lambda x: x % 2 == 0).select(lambda x: 10 * x).result().to_list()
    [0, 20, 40, 60]
    """

    def __init__(self, monad):
        self._monad = monad

    def pair_with(self, other):
        """
        Pairs every element with every element of other.

        >>> from lazyseq import walk
        >>> from_(walk(1)).pair_with(walk(1)).result().to_list()
        [(0, 0), (0, 1), (1, 0), (1, 1)]

        :param other: monad of the same kind
        :return: Jinq of (element, other element) tuples
        """
        return Jinq(self._monad.bind(lambda x: other.fmap(lambda y: (x, y))))

    def combine(self, other_for):
        """
        Like pair_with, but the second monad is created from each element, which allows nested
        comprehensions.

        :param other_for: function from an element to a monad of the same kind
        :return: Jinq of (element, other element) tuples
        """
        return Jinq(self._monad.bind(lambda x: other_for(x).fmap(lambda y: (x, y))))

    def where(self, predicate):
        """
        Keeps the elements satisfying predicate.
        """
        monad = self._monad
        return Jinq(monad.bind(lambda x: monad.pure(x) if predicate(x) else monad.empty()))

    def select(self, selector):
        return Jinq(self._monad.fmap(selector))

    map = select

    def inside(self, func):
        """
        Steps into a nested monad of each element.

        >>> from lazyseq.maybe import Just, NOTHING
        >>> ceo = {"name": "Paul", "boss": NOTHING}
        >>> cto = {"name": "Tom", "boss": Just(ceo)}
        >>> from_(Just(cto)).inside(lambda p: p["boss"]).select(lambda p: p["name"]).result()
        Just('Paul')

        :param func: function from an element to a monad of the same kind
        :return: Jinq of the flattened result
        """
        return Jinq(self._monad.bind(func))

    def result(self):
        return self._monad


def jinq(monad):
    """
    Starts a query on monad.
    :param monad: Sequence, JsonSequence or Maybe
    :return: Jinq
    """
    return Jinq(monad)


from_ = jinq
