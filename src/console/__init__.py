"""Console collaborators: line I/O, parsing, rendering and shuffling."""
from .formatting import format_sequence, print_sequence
from .io import (
    BufferLineSink,
    LineSink,
    LineSource,
    ScriptedLineSource,
    StdinLineSource,
    StdoutLineSink,
    parse_index,
    parse_insert_request,
)
from .randomizer import (
    FixedPermutation,
    IdentityShuffler,
    NumpyShuffler,
    Shuffler,
    build_shuffler,
)

__all__ = [
    "format_sequence",
    "print_sequence",
    "LineSource",
    "LineSink",
    "StdinLineSource",
    "StdoutLineSink",
    "ScriptedLineSource",
    "BufferLineSink",
    "parse_index",
    "parse_insert_request",
    "Shuffler",
    "NumpyShuffler",
    "FixedPermutation",
    "IdentityShuffler",
    "build_shuffler",
]
