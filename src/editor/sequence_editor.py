"""Index-addressed insert and remove on a :class:`LinkedSequence`.

Both edits split the sequence at the edit point, adjust the end of the
front part, and splice the back part on again. Indices are validated
before any split so a failed edit leaves the sequence untouched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal

from domain.errors import OutOfRangeError
from domain.linked_sequence import LinkedSequence

logger = logging.getLogger(__name__)

EditKind = Literal["insert", "remove"]


def insert_at(sequence: LinkedSequence, index: int, value: str) -> LinkedSequence:
    """Place ``value`` immediately before the element at ``index`` (or at the end)."""

    if index < 0 or index > len(sequence):
        raise OutOfRangeError(index, len(sequence), operation="insert")
    back = sequence.split_off(index)
    sequence.push_back(value)
    sequence.append_all(back)
    logger.debug("Inserted %r at %s", value, index)
    return sequence


def remove_at(sequence: LinkedSequence, index: int) -> str:
    """Remove and return the element at ``index``."""

    if index < 0 or index >= len(sequence):
        raise OutOfRangeError(index, len(sequence), operation="remove")
    back = sequence.split_off(index + 1)
    removed = sequence.pop_back()
    sequence.append_all(back)
    logger.debug("Removed %r from %s", removed, index)
    return removed


@dataclass(frozen=True)
class SequenceEdit:
    """Record describing a single applied edit for auditing or undo."""

    edit_id: str
    kind: EditKind
    index: int
    value: str


class SequenceEditor:
    """Apply positional edits to one sequence while keeping an undo history."""

    def __init__(self, sequence: LinkedSequence | None = None) -> None:
        self._sequence = sequence if sequence is not None else LinkedSequence()
        self._history: List[SequenceEdit] = []
        self._undo_stack: List[SequenceEdit] = []
        self._redo_stack: List[SequenceEdit] = []
        self._edit_counter = 0

    @property
    def sequence(self) -> LinkedSequence:
        """Return the underlying sequence reference."""

        return self._sequence

    @property
    def history(self) -> List[SequenceEdit]:
        """Return the applied edits in order of execution."""

        return list(self._history)

    @property
    def undo_stack(self) -> List[SequenceEdit]:
        return list(self._undo_stack)

    @property
    def redo_stack(self) -> List[SequenceEdit]:
        return list(self._redo_stack)

    def insert(self, index: int, value: str) -> SequenceEdit:
        insert_at(self._sequence, index, value)
        return self._record("insert", index, value)

    def remove(self, index: int) -> SequenceEdit:
        removed = remove_at(self._sequence, index)
        return self._record("remove", index, removed)

    def undo(self, steps: int = 1) -> List[SequenceEdit]:
        """Revert the most recent edits, returning the reverted records."""

        undone: List[SequenceEdit] = []
        for _ in range(min(max(steps, 0), len(self._undo_stack))):
            edit = self._undo_stack.pop()
            self._revert(edit)
            self._redo_stack.append(edit)
            undone.append(edit)
        return undone

    def redo(self, steps: int = 1) -> List[SequenceEdit]:
        """Reapply the most recently undone edits in order."""

        replayed: List[SequenceEdit] = []
        for _ in range(min(max(steps, 0), len(self._redo_stack))):
            edit = self._redo_stack.pop()
            self._apply(edit)
            self._undo_stack.append(edit)
            replayed.append(edit)
        return replayed

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _next_edit_id(self) -> str:
        self._edit_counter += 1
        return f"edit_{self._edit_counter}"

    def _record(self, kind: EditKind, index: int, value: str) -> SequenceEdit:
        edit = SequenceEdit(edit_id=self._next_edit_id(), kind=kind, index=index, value=value)
        self._history.append(edit)
        self._undo_stack.append(edit)
        self._redo_stack.clear()
        logger.debug("Recorded %s", edit)
        return edit

    def _apply(self, edit: SequenceEdit) -> None:
        if edit.kind == "insert":
            insert_at(self._sequence, edit.index, edit.value)
        else:
            remove_at(self._sequence, edit.index)

    def _revert(self, edit: SequenceEdit) -> None:
        if edit.kind == "insert":
            remove_at(self._sequence, edit.index)
        else:
            insert_at(self._sequence, edit.index, edit.value)
