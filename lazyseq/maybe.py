"""
Optional values: a Maybe is either Just(value) or NOTHING. Used wherever an operation may have no
result, e.g. safe_max, and as the element type of cat_maybes.
"""


class Maybe(object):
    """
    Base class of Just and the NOTHING singleton. Supports the same monadic interface as Sequence,
    so both can be queried with lazyseq.jinq.

    >>> Just(2).fmap(lambda x: x + 1)
    Just(3)
    >>> NOTHING.fmap(lambda x: x + 1)
    Nothing
    """

    __slots__ = ()

    def is_just(self):
        raise NotImplementedError

    def is_nothing(self):
        return not self.is_just()

    def fold(self, on_nothing, on_just):
        """
        Eliminates the Maybe.

        >>> Just(1).fold(lambda: "empty", str), NOTHING.fold(lambda: "empty", str)
        ('1', 'empty')

        :param on_nothing: function without arguments called for NOTHING
        :param on_just: function called with the value of a Just
        :return: result of the called function
        """
        if self.is_just():
            return on_just(self.value)
        return on_nothing()

    def fmap(self, func):
        return self.fold(lambda: NOTHING, lambda value: Just(func(value)))

    def bind(self, func):
        """
        :param func: function from the value to a Maybe
        :return: result of func for a Just, NOTHING otherwise
        """
        return self.fold(lambda: NOTHING, func)

    and_ = bind

    def get_or_else(self, default):
        return self.fold(lambda: default, lambda value: value)

    @staticmethod
    def pure(value):
        return Just(value)

    @staticmethod
    def empty():
        return NOTHING


class Just(Maybe):
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def is_just(self):
        return True

    def __eq__(self, other):
        return isinstance(other, Just) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Just, self.value))

    def __repr__(self):
        return f"Just({self.value!r})"


class _Nothing(Maybe):
    __slots__ = ()

    def is_just(self):
        return False

    def __repr__(self):
        return "Nothing"


NOTHING = _Nothing()


def from_nullable(value):
    """
    >>> from_nullable(0), from_nullable(None)
    (Just(0), Nothing)
    """
    if value is None:
        return NOTHING
    return Just(value)


def choice_maybe(first):
    """
    Curried choice between two Maybes, the first Just wins.

    >>> choice_maybe(NOTHING)(Just(2))
    Just(2)
    """
    def choose(second):
        return first if first.is_just() else second

    return choose
