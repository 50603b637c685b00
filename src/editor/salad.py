"""Build the fruit salad and drive the interactive insert/remove session."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from console.formatting import print_sequence
from console.io import LineSink, LineSource, parse_index, parse_insert_request
from console.randomizer import Shuffler, build_shuffler
from domain.linked_sequence import LinkedSequence
from domain.models import SaladSettings

from .sequence_editor import SequenceEdit, SequenceEditor

logger = logging.getLogger(__name__)

INSERT_PROMPT = "Insert at (index [fruit]): "
REMOVE_PROMPT = "Remove at (index): "


@dataclass(frozen=True)
class SaladReport:
    """Outcome of a completed session, useful for logging or tests."""

    initial: List[str]
    inserted: SequenceEdit
    removed: SequenceEdit
    final: List[str]


def build_salad(settings: SaladSettings, shuffler: Shuffler | None = None) -> LinkedSequence:
    """Return the shuffled initial fruit followed by the extra fruit."""

    shuffler = shuffler or build_shuffler(settings)
    salad = LinkedSequence(settings.initial_fruit)
    # Shufflers work on plain lists.
    salad = LinkedSequence(shuffler.shuffle(salad.to_list()))
    for fruit in settings.extra_fruit:
        salad.push_back(fruit)
    logger.info("Built salad with %s fruit", len(salad))
    return salad


def run_salad(
    settings: SaladSettings,
    source: LineSource,
    sink: LineSink,
    *,
    shuffler: Shuffler | None = None,
) -> SaladReport:
    """Print the salad, then apply one insert and one remove read from ``source``.

    Raises :class:`domain.errors.ParseError` or
    :class:`domain.errors.OutOfRangeError` on bad input; nothing is retried.
    """

    editor = SequenceEditor(build_salad(settings, shuffler))
    initial = editor.sequence.to_list()
    _render(editor.sequence, sink, settings)

    index, fruit = parse_insert_request(source.read_line(INSERT_PROMPT), settings.default_insert_value)
    inserted = editor.insert(index, fruit)
    logger.info("Inserted %r at %s", fruit, index)
    _render(editor.sequence, sink, settings)

    removed = editor.remove(parse_index(source.read_line(REMOVE_PROMPT)))
    logger.info("Removed %r from %s", removed.value, removed.index)
    sink.write(f"Removed: {removed.value}\n")
    _render(editor.sequence, sink, settings)

    return SaladReport(
        initial=initial,
        inserted=inserted,
        removed=removed,
        final=editor.sequence.to_list(),
    )


def _render(sequence: LinkedSequence, sink: LineSink, settings: SaladSettings) -> None:
    print_sequence(sequence, sink, header=settings.header, separator=settings.separator)
