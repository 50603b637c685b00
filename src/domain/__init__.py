"""Domain package exposing the linked sequence, settings and error types."""
from .errors import OutOfRangeError, ParseError, SequenceError
from .linked_sequence import LinkedSequence
from .models import SaladSettings

__all__ = [
    "LinkedSequence",
    "SaladSettings",
    "SequenceError",
    "ParseError",
    "OutOfRangeError",
]
