"""Error taxonomy shared by the sequence editor and console helpers."""
from __future__ import annotations


class SequenceError(Exception):
    """Base error for sequence editing failures."""


class ParseError(SequenceError, ValueError):
    """Raised when console text is not a valid non-negative integer."""


class OutOfRangeError(SequenceError, IndexError):
    """Raised when an index falls outside the bounds of a sequence."""

    def __init__(self, index: int, length: int, *, operation: str) -> None:
        self.index = index
        self.length = length
        self.operation = operation
        super().__init__(f"Index {index} out of range for {operation} on sequence of length {length}")
