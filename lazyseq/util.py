import collections.abc
from functools import reduce


def is_primitive(val):
    """
    Checks if the passed value is a primitive type.

    >>> is_primitive(1)
    True

    >>> is_primitive("abc")
    True

    >>> is_primitive(True)
    True

    >>> is_primitive({})
    False

    >>> is_primitive([])
    False

    :param val: value to check
    :return: True if value is a primitive, else False
    """
    return isinstance(val, (str, bool, float, complex, bytes, int))


def identity(arg):
    """
    Function which returns the argument. Used as a default lambda function.

    >>> obj = object()
    >>> obj is identity(obj)
    True

    :param arg: object to take identity of
    :return: return arg
    """
    return arg


def is_iterable(val):
    """
    Check if val is a collections.abc.Iterable type. None and plain objects are not.

    >>> is_iterable([1, 2])
    True
    >>> is_iterable(iter([1, 2]))
    True
    >>> is_iterable(None)
    False

    :param val: value to check
    :return: True if it is a collections.abc.Iterable
    """
    return isinstance(val, collections.abc.Iterable)


def is_nested(val):
    """
    Check if val should be flattened when it is mixed with scalars, i.e. it is iterable but
    neither a primitive nor a mapping. Strings, bytes and dicts are iterable, but they are treated
    as single values.

    >>> is_nested([1, 2])
    True
    >>> is_nested("abc")
    False

    :param val: value to check
    :return: True if val is a non primitive iterable
    """
    return (
        is_iterable(val)
        and not is_primitive(val)
        and not isinstance(val, collections.abc.Mapping)
    )


def compose(*functions):
    """
    Compose all the function arguments together, the rightmost function is applied first.

    >>> compose(lambda x: x + 1, lambda x: 2 * x)(3)
    7

    :param functions: Functions to compose
    :return: Single composed function
    """
    # pylint: disable=undefined-variable
    return reduce(lambda f, g: lambda x: f(g(x)), functions, lambda x: x)


def forever(_):
    """
    Predicate which always holds. Used as the while function of infinite sequences.

    >>> forever(None)
    True
    """
    return True


def plus_op(acc, cur):
    """
    Plus operator usable as reduction callback. Works for anything supporting +.

    >>> plus_op(1, 2)
    3
    >>> plus_op("a", "b")
    'ab'
    """
    return acc + cur


def limit(epsilon, numbers):
    """
    Calculate the limit that the number sequence approaches by comparing successive elements until
    they are less than epsilon apart. Might not finish when numbers is infinite and no limit exists.

    >>> limit(0.5, [1, 0.5, 0.25])
    0.5
    >>> limit(1, []) is None
    True

    :param epsilon: largest accepted distance between two successive elements
    :param numbers: iterable of numbers
    :return: the first element within epsilon of its predecessor, or None
    """
    iterator = iter(numbers)
    last = next(iterator, None)
    if last is None:
        return None
    for current in iterator:
        if abs(last - current) <= epsilon:
            return current
        last = current
    return None
