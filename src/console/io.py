"""Line-oriented console input/output and index parsing."""
from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Protocol, TextIO, Tuple

from domain.errors import ParseError


class LineSource(Protocol):
    """Anything that can produce one line of text per request."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return the next line without its newline, or ``None`` at end of input."""


class LineSink(Protocol):
    """Anything that accepts rendered transcript text."""

    def write(self, text: str) -> None:
        """Emit ``text`` verbatim."""


class StdinLineSource:
    """Blocking reader backed by :func:`input`."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        try:
            return input(prompt)
        except EOFError:
            return None


class StdoutLineSink:
    """Writer backed by a text stream, ``sys.stdout`` by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.flush()


class ScriptedLineSource:
    """In-memory source replaying a fixed list of lines."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._pending: List[str] = list(lines)
        self.prompts: List[str] = []

    def read_line(self, prompt: str = "") -> Optional[str]:
        self.prompts.append(prompt)
        if not self._pending:
            return None
        return self._pending.pop(0)


class BufferLineSink:
    """In-memory sink collecting everything written to it."""

    def __init__(self) -> None:
        self._chunks: List[str] = []

    def write(self, text: str) -> None:
        self._chunks.append(text)

    def getvalue(self) -> str:
        return "".join(self._chunks)

    def lines(self) -> List[str]:
        return self.getvalue().splitlines()


def parse_index(text: Optional[str]) -> int:
    """Parse ``text`` as an unsigned decimal integer."""

    if text is None:
        raise ParseError("Expected an index but reached end of input")
    stripped = text.strip()
    if not stripped or not (stripped.isascii() and stripped.isdigit()):
        raise ParseError(f"Invalid index {text!r}: expected a non-negative integer")
    return int(stripped)


def parse_insert_request(text: Optional[str], default_value: str) -> Tuple[int, str]:
    """Split an ``"<index> [value]"`` line into its index and value."""

    if text is None:
        raise ParseError("Expected an index but reached end of input")
    parts = text.strip().split(maxsplit=1)
    if not parts:
        raise ParseError("Invalid index '': expected a non-negative integer")
    index = parse_index(parts[0])
    value = parts[1].strip() if len(parts) > 1 else default_value
    return index, value
