"""Sequence editing helpers built on split/splice primitives."""

from .salad import SaladReport, build_salad, run_salad
from .sequence_editor import SequenceEdit, SequenceEditor, insert_at, remove_at

__all__ = [
    "SequenceEditor",
    "SequenceEdit",
    "insert_at",
    "remove_at",
    "SaladReport",
    "build_salad",
    "run_salad",
]
