"""
Lazy processing of decoded JSON trees: a Maybe wrapped sequence monad for fluent deep dives and a
flattening of whole trees into (path, leaf) pairs. Decoding uses simdjson, imported on first use.
"""
import collections.abc

from lazyseq.base import LazyLib
from lazyseq.constructors import nil, pure_sequence, seq
from lazyseq.io import reusable_file
from lazyseq.maybe import Just, NOTHING
from lazyseq.operators import bind, cat_maybes, map_, mconcat
from lazyseq.terminal import is_empty
from lazyseq.util import is_nested

json = LazyLib("simdjson")


class JsonSequence(object):
    """
    Processes JSON data or plain python objects in a fluent way.

    >>> data = [{"id": 1, "tags": ["a", "b"]}, {"id": 2, "tags": []}, {"id": 3}]
    >>> list(JsonSequence(data).fmap(lambda x: x["id"]))
    [1, 2, 3]
    >>> list(JsonSequence(data).fmap(lambda x: x.get("tags")))
    ['a', 'b']
    """

    def __init__(self, json_object):
        """
        :param json_object: decoded JSON array, or any other value which is taken as one element
        """
        elements = tuple(json_object) if is_nested(json_object) else (json_object,)
        self._maybe = Just(seq(*elements))

    @classmethod
    def _from_maybe(cls, maybe):
        json_sequence = cls.__new__(cls)
        json_sequence._maybe = maybe
        return json_sequence

    def fmap(self, func):
        """
        Dives into each element with func. A list result is flattened by one level, a None result
        removes the element. If no element is left, the result is empty.

        :param func: function applied to each element
        :return: JsonSequence of the results
        """
        def dive(elements):
            mapped = bind(lambda element: _ensure_iterable(func(element)))(elements)
            return NOTHING if is_empty(mapped) else Just(mapped)

        return self._from_maybe(self._maybe.bind(dive))

    map = fmap

    def bind(self, func):
        """
        :param func: function from an element to a JsonSequence
        :return: concatenation of all non-empty JsonSequences returned by func
        """
        def flat(elements):
            return mconcat(cat_maybes(map_(lambda element: func(element).get())(elements)))

        return self._from_maybe(self._maybe.fmap(flat))

    and_then = bind
    and_ = bind

    def get(self):
        return self._maybe

    @staticmethod
    def pure(value):
        return JsonSequence([value])

    @classmethod
    def empty(cls):
        return cls._from_maybe(NOTHING)

    def __iter__(self):
        return iter(self._maybe.get_or_else(nil))


def _ensure_iterable(value):
    if value is None:
        return nil
    if isinstance(value, list):
        return seq(*value)
    return pure_sequence(value)


def loads(text):
    """
    Decodes a JSON document with simdjson.
    :param text: JSON text
    :return: JsonSequence over the decoded document
    """
    return JsonSequence(json().loads(text))


def from_file(path, encoding=None, disable_compression=False):
    """
    Reads and decodes a JSON file, which may be gzip, bz2 or xz compressed.
    :param path: path of the file
    :return: JsonSequence over the decoded document
    """
    file_content = reusable_file(path, encoding=encoding, disable_compression=disable_compression)
    return loads(file_content.read())


def flatten(json_object, path=()):
    """
    Lazy depth first sequence of (path, leaf) pairs of a decoded JSON tree. A path is the tuple of
    keys and indices leading to the leaf. Empty objects and arrays have no leaves.

    >>> list(flatten({"a": [1, {"b": None}], "c": "x"}))
    [(('a', 0), 1), (('a', 1, 'b'), None), (('c',), 'x')]

    :param json_object: decoded JSON value
    :param path: path of json_object within the whole tree
    :return: Sequence of (path, leaf) tuples
    """
    if isinstance(json_object, collections.abc.Mapping):
        children = seq(*json_object.items())
    elif isinstance(json_object, list):
        children = seq(*enumerate(json_object))
    else:
        return pure_sequence((path, json_object))
    return bind(lambda child: flatten(child[1], path + (child[0],)))(children)
