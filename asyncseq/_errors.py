from __future__ import annotations

class SequenceError(Exception):
    """Base class for errors raised by asyncseq itself."""

class InvalidIndexError(SequenceError, ValueError):
    """index() called with a position that is not a non-negative integer."""

    index: object

    def __init__(self, index: object) -> None:
        self.index = index
        super().__init__(f"Invalid index: {index!r}")

class EmptySequenceError(SequenceError, ValueError):
    """Operation needs at least one element but the sequence had none."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: empty sequence")

__all__ = ("EmptySequenceError", "InvalidIndexError", "SequenceError")
