"""Render a sequence as a comma separated transcript line."""
from __future__ import annotations

from typing import Iterable

from .io import LineSink


def format_sequence(sequence: Iterable[str], separator: str = ", ") -> str:
    """Join items with ``separator``; no trailing separator, no newline."""

    return separator.join(sequence)


def print_sequence(
    sequence: Iterable[str],
    sink: LineSink,
    *,
    header: str = "Fruit salad:",
    separator: str = ", ",
) -> str:
    """Write the header line and, when there are items, the items line.

    Returns the text that was written.
    """

    items = format_sequence(sequence, separator)
    rendered = f"{header}\n"
    if items:
        rendered += f"{items}\n"
    sink.write(rendered)
    return rendered
