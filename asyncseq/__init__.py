"""
asyncseq - lazy combinators over asynchronous sequences.

Build pipelines (filter, map, take, fold, ...) over async iterables,
plain iterables of values or awaitables, and awaitables of either,
without materializing intermediate collections.

Architecture:
- source     - adapter (any sequence-like -> AsyncSeq) and explicit cursors
- transform  - lazy combinators returning AsyncSeq
- consume    - terminal consumers returning plain values
- compare    - lockstep comparison of two sequences
- aggregate  - numeric / boolean / extrema reducers
- keyed      - grouping into dicts
- lift       - bridge into kungfu LazyCoroResult
"""

# Core types
from ._types import (
    AsyncIterableLike,
    Comparator,
    Equality,
    IndexedPredicate,
    IndexedSelector,
    MaybeAwaitable,
    Reducer,
)

# Canonical sequence
from .seq import AsyncSeq

# Internal helpers (for custom combinators)
from . import _helpers
from ._helpers import default_compare, default_equal

# Logging
from ._logging import configure_logging, get_logger

# Result bridge (namespace import)
from . import lift

# Adapter + cursor
from .source import (
    END,
    Cursor,
    SourceKind,
    async_iterable,
    async_iterator,
    classify,
    cursor,
    is_async_iterable,
)

# Terminal consumers
from .consume import (
    contains,
    empty,
    find,
    find_index,
    first,
    fold,
    fold1,
    index,
    index_of,
    last,
    not_empty,
    only,
    to_array,
    to_list,
    to_set,
)

# Lazy combinators
from .transform import (
    append,
    concat,
    concat_map,
    drop,
    drop_until,
    drop_while,
    exclude,
    exclude_first,
    exclude_null,
    filter,
    initial,
    map,
    prepend,
    push,
    push_fn,
    remove,
    remove_first,
    scan,
    scan1,
    slice,
    tail,
    take,
    take_until,
    take_while,
    unshift,
    unshift_fn,
    zip,
)

# Comparators
from .compare import equal, not_equal, prefix_match

# Reducers
from .aggregate import (
    all,
    and_,
    any,
    average,
    maximum,
    maximum_by,
    minimum,
    minimum_by,
    none_null,
    or_,
    product,
    sum,
)

# Keyed
from .keyed import key_by, key_first_by, key_last_by, map_key_by, map_key_first_by, map_key_last_by

# Errors
from ._errors import EmptySequenceError, InvalidIndexError, SequenceError

__all__ = (
    # Types
    "AsyncIterableLike",
    "Comparator",
    "Equality",
    "IndexedPredicate",
    "IndexedSelector",
    "MaybeAwaitable",
    "Reducer",
    # Canonical sequence
    "AsyncSeq",
    # Internal helpers (for custom combinators)
    "_helpers",
    "default_compare",
    "default_equal",
    # Logging
    "configure_logging",
    "get_logger",
    # Result bridge
    "lift",
    # Source
    "END",
    "Cursor",
    "SourceKind",
    "async_iterable",
    "async_iterator",
    "classify",
    "cursor",
    "is_async_iterable",
    # Consume
    "contains",
    "empty",
    "find",
    "find_index",
    "first",
    "fold",
    "fold1",
    "index",
    "index_of",
    "last",
    "not_empty",
    "only",
    "to_array",
    "to_list",
    "to_set",
    # Transform
    "append",
    "concat",
    "concat_map",
    "drop",
    "drop_until",
    "drop_while",
    "exclude",
    "exclude_first",
    "exclude_null",
    "filter",
    "initial",
    "map",
    "prepend",
    "push",
    "push_fn",
    "remove",
    "remove_first",
    "scan",
    "scan1",
    "slice",
    "tail",
    "take",
    "take_until",
    "take_while",
    "unshift",
    "unshift_fn",
    "zip",
    # Compare
    "equal",
    "not_equal",
    "prefix_match",
    # Aggregate
    "all",
    "and_",
    "any",
    "average",
    "maximum",
    "maximum_by",
    "minimum",
    "minimum_by",
    "none_null",
    "or_",
    "product",
    "sum",
    # Keyed
    "key_by",
    "key_first_by",
    "key_last_by",
    "map_key_by",
    "map_key_first_by",
    "map_key_last_by",
    # Errors
    "EmptySequenceError",
    "InvalidIndexError",
    "SequenceError",
)
