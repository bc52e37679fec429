"""
Mutable builder which collects scalars and nested iterables before turning them into one immutable
Sequence.
"""
from lazyseq.constructors import nil
from lazyseq.logger import get_logger
from lazyseq.pipeline import create_sequence
from lazyseq.util import is_nested

ALREADY_BUILT_ERROR_MESSAGE = "Unsupported operation: Sequence has already been built!"

logger = get_logger()


class SequenceBuilderError(RuntimeError):
    pass


class SequenceBuilder(object):
    """
    Builds a Sequence from elements added one by one, without the recursion overhead of chaining
    cons/snoc. A builder starts in the building phase, during which elements can be appended and
    prepended, and moves to the built phase on the first call of build().

    After build() the builder ignores further elements and a second build() returns nil. A warning
    is logged for each of these calls, or SequenceBuilderError is raised if the builder is strict.

    >>> from lazyseq import walk
    >>> builder = SequenceBuilder(walk(3))
    >>> builder.append(4).append(5, 6, 7).prepend(-1).build().to_list()
    [-1, 0, 1, 2, 3, 4, 5, 6, 7]
    """

    def __init__(self, start=nil, strict=False):
        """
        :param start: initial element or iterable of elements
        :param strict: raise SequenceBuilderError instead of ignoring calls after build()
        """
        self._elements = [start]
        self._built = False
        self._strict = strict

    @property
    def built(self):
        return self._built

    def append(self, *items):
        """
        Adds items, each a single value or an iterable of values, after everything added so far.
        :return: this builder
        """
        if self._check_building("append"):
            self._elements.extend(items)
        return self

    def prepend(self, *items):
        """
        Adds items, each a single value or an iterable of values, before everything added so far.
        The items keep their given order.
        :return: this builder
        """
        if self._check_building("prepend"):
            self._elements[0:0] = items
        return self

    def build(self):
        """
        Ends the building phase.
        :return: the built Sequence on the first call, nil afterwards
        """
        if not self._check_building("build"):
            return nil
        self._built = True
        logger.d("sequence built from %s pieces", len(self._elements))
        return _flatten_pieces(tuple(self._elements))

    def _check_building(self, operation):
        if not self._built:
            return True
        if self._strict:
            raise SequenceBuilderError(ALREADY_BUILT_ERROR_MESSAGE)
        logger.warn("%s called on a built SequenceBuilder, ignoring it", operation)
        return False


def _flatten_pieces(pieces):
    def builder_iterator():
        for piece in pieces:
            if is_nested(piece):
                yield from piece
            else:
                yield piece

    return create_sequence(builder_iterator)

