from .collect import empty, first, last, not_empty, only, to_array, to_list, to_set
from .fold import fold, fold1
from .search import contains, find, find_index, index, index_of

__all__ = (
    # Collect
    "empty",
    "first",
    "last",
    "not_empty",
    "only",
    "to_array",
    "to_list",
    "to_set",
    # Fold
    "fold",
    "fold1",
    # Search
    "contains",
    "find",
    "find_index",
    "index",
    "index_of",
)
