from .adapter import SourceKind, async_iterable, async_iterator, classify, is_async_iterable
from .cursor import END, Cursor, Pulled, cursor

__all__ = (
    # Adapter
    "SourceKind",
    "async_iterable",
    "async_iterator",
    "classify",
    "is_async_iterable",
    # Cursor
    "END",
    "Cursor",
    "Pulled",
    "cursor",
)
