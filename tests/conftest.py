import sys
from pathlib import Path

import pytest

from domain.linked_sequence import LinkedSequence
from domain.models import SaladSettings

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SALAD = ["Arbutus", "Loquat", "Strawberry Tree Berry", "Pomegranate", "Fig", "Cherry"]


@pytest.fixture()
def salad() -> LinkedSequence:
    return LinkedSequence(SALAD)


@pytest.fixture()
def unshuffled_settings() -> SaladSettings:
    return SaladSettings(shuffle=False)
