from .flatten import append, concat, concat_map, prepend
from .mapping import map, scan, scan1
from .pair import zip
from .select import exclude, exclude_first, exclude_null, filter, remove, remove_first
from .shape import initial, push, push_fn, tail, unshift, unshift_fn
from .window import drop, drop_until, drop_while, slice, take, take_until, take_while

__all__ = (
    # Shape
    "initial",
    "push",
    "push_fn",
    "tail",
    "unshift",
    "unshift_fn",
    # Window
    "drop",
    "drop_until",
    "drop_while",
    "slice",
    "take",
    "take_until",
    "take_while",
    # Select
    "exclude",
    "exclude_first",
    "exclude_null",
    "filter",
    "remove",
    "remove_first",
    # Mapping
    "map",
    "scan",
    "scan1",
    # Flatten
    "append",
    "concat",
    "concat_map",
    "prepend",
    # Pair
    "zip",
)
