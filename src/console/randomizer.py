"""Shuffle collaborators used to scramble the initial fruit."""
from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

import numpy as np

from domain.models import SaladSettings


class Shuffler(Protocol):
    """Return a permutation of ``items`` visiting each element exactly once."""

    def shuffle(self, items: Sequence[str]) -> List[str]:
        """Return a new list holding a permutation of ``items``."""


class NumpyShuffler:
    """Uniform shuffle backed by a NumPy random generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def shuffle(self, items: Sequence[str]) -> List[str]:
        order = self._rng.permutation(len(items))
        return [items[int(idx)] for idx in order]


class FixedPermutation:
    """Apply a caller-provided index permutation."""

    def __init__(self, order: Sequence[int]) -> None:
        self._order = [int(idx) for idx in order]

    def shuffle(self, items: Sequence[str]) -> List[str]:
        if sorted(self._order) != list(range(len(items))):
            raise ValueError(
                f"Order {self._order} is not a permutation of {len(items)} items"
            )
        return [items[idx] for idx in self._order]


class IdentityShuffler:
    """Leave items in their original order."""

    def shuffle(self, items: Sequence[str]) -> List[str]:
        return list(items)


def build_shuffler(settings: SaladSettings) -> Shuffler:
    """Pick the shuffler described by ``settings``."""

    if not settings.shuffle:
        return IdentityShuffler()
    return NumpyShuffler(settings.seed)
