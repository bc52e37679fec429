"""
Lazy, possibly infinite and re-iterable sequences with a purely functional combinator algebra.
Imports the primary entrypoints: the Sequence type, its constructors, operators and terminal
operations.
"""

from lazyseq.pipeline import (
    Sequence,
    SHOW_MAX_VALUES,
    create_sequence,
    ensure_sequence,
    is_sequence,
    iterator_of,
    to_seq,
)
from lazyseq.constructors import (
    ALL,
    PureSequence,
    Range,
    iterate,
    nil,
    pure_sequence,
    repeat,
    replicate,
    seq,
    sequence,
    unfold,
    walk,
)
from lazyseq.operators import (
    append,
    bind,
    cat_maybes,
    concat,
    cons,
    cycle,
    drop,
    drop_where,
    drop_while,
    fmap,
    map_,
    mconcat,
    pipe,
    reverse_,
    snoc,
    take,
    take_where,
    take_while,
    tap,
    zip_,
    zip_with,
)
from lazyseq.terminal import (
    EmptySequenceError,
    count,
    eq,
    foldl,
    foldr,
    for_each,
    head,
    is_empty,
    max_,
    min_,
    reduce_,
    safe_max,
    safe_min,
    show,
    uncons,
)
from lazyseq.builder import SequenceBuilder, SequenceBuilderError
from lazyseq.maybe import Maybe, Just, NOTHING, choice_maybe, from_nullable
from lazyseq.jinq import Jinq, from_, jinq

__author__ = "Tri Songz"
__copyright__ = "Original Work by Pedro Rodriguez, Modified by Tri Songz 2021"
__license__ = "MIT"
__version__ = "0.1.0"
__maintainer__ = "Tri Songz"
__email__ = "ts@growthengineai.com"
__status__ = "Development"
