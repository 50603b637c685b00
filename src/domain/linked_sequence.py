"""Doubly linked sequence of strings with split and splice primitives.

The editor builds positional insert/remove on top of two operations:
:meth:`LinkedSequence.split_off`, which detaches the tail of the sequence
at an index, and :meth:`LinkedSequence.append_all`, which splices another
sequence onto the end in constant time.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .errors import OutOfRangeError

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: str) -> None:
        self.value: str = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None

    def __repr__(self) -> str:
        return f"_Node({self.value!r})"


class LinkedSequence:
    """Ordered, mutable collection of strings stored as a doubly linked list."""

    def __init__(self, items: Iterable[str] | None = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._length = 0
        if items is not None:
            for item in items:
                self.push_back(item)

    # ---- basics ----
    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[str]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkedSequence):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        if isinstance(other, (list, tuple)):
            return self.to_list() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> str:
        if index < 0:
            index += self._length
        if index < 0 or index >= self._length:
            raise OutOfRangeError(index, self._length, operation="get")
        return self._node_at(index).value

    def __repr__(self) -> str:
        return f"LinkedSequence({self.to_list()!r})"

    def is_empty(self) -> bool:
        return self._length == 0

    def front(self) -> str:
        if self._head is None:
            raise OutOfRangeError(0, 0, operation="front")
        return self._head.value

    def back(self) -> str:
        if self._tail is None:
            raise OutOfRangeError(0, 0, operation="back")
        return self._tail.value

    def clear(self) -> None:
        node = self._head
        while node is not None:
            nxt = node.next
            node.prev = node.next = None
            node = nxt
        self._head = self._tail = None
        self._length = 0

    # ---- push/pop ----
    def push_back(self, value: str) -> None:
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._length += 1

    def push_front(self, value: str) -> None:
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._length += 1

    def pop_back(self) -> str:
        node = self._tail
        if node is None:
            raise OutOfRangeError(0, 0, operation="pop_back")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        self._length -= 1
        return node.value

    def pop_front(self) -> str:
        node = self._head
        if node is None:
            raise OutOfRangeError(0, 0, operation="pop_front")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        self._length -= 1
        return node.value

    # ---- split/splice ----
    def split_off(self, index: int) -> "LinkedSequence":
        """Detach ``[index, end)`` and return it; this sequence keeps ``[0, index)``."""

        if index < 0 or index > self._length:
            raise OutOfRangeError(index, self._length, operation="split")
        back = LinkedSequence()
        if index == self._length:
            return back
        if index == 0:
            back._steal(self)
            return back

        first_back = self._node_at(index)
        last_front = first_back.prev
        assert last_front is not None
        last_front.next = None
        first_back.prev = None

        back._head, back._tail = first_back, self._tail
        back._length = self._length - index
        self._tail = last_front
        self._length = index
        logger.debug("Split sequence at %s into %s + %s", index, self._length, back._length)
        return back

    def append_all(self, other: "LinkedSequence") -> None:
        """Splice ``other`` onto the end of this sequence, leaving ``other`` empty."""

        if other is self:
            raise ValueError("Cannot splice a sequence onto itself")
        if other._head is None:
            return
        if self._tail is None:
            self._steal(other)
            return
        self._tail.next = other._head
        other._head.prev = self._tail
        self._tail = other._tail
        self._length += other._length
        logger.debug("Spliced %s items, length now %s", other._length, self._length)
        other._head = other._tail = None
        other._length = 0

    # ---- utils ----
    def to_list(self) -> List[str]:
        return list(self)

    def copy(self) -> "LinkedSequence":
        return LinkedSequence(self)

    def _steal(self, other: "LinkedSequence") -> None:
        """Move every node of ``other`` into this (empty) sequence."""

        self._head, self._tail, self._length = other._head, other._tail, other._length
        other._head = other._tail = None
        other._length = 0

    def _node_at(self, index: int) -> _Node:
        # Walk from whichever end is closer.
        if index < self._length // 2:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._length - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node
