"""
Theory module for the Camelot wheel.

Contains:
- Keys, modes and the Camelot text encoding
- Harmonic transition rules
"""

from .key import (
    InvalidScaleString,
    Key,
    Mode,
    ScaleError,
    decode,
    encode,
    make_standard_scale,
    scale,
)

from .transitions import (
    HARMONIC_TRANSITIONS,
    InvalidTransitionString,
    KeyTransition,
    TransitionKind,
    harmonic_transitions,
    make_transition,
)

__all__ = [
    "InvalidScaleString",
    "Key",
    "Mode",
    "ScaleError",
    "decode",
    "encode",
    "make_standard_scale",
    "scale",
    "HARMONIC_TRANSITIONS",
    "InvalidTransitionString",
    "KeyTransition",
    "TransitionKind",
    "harmonic_transitions",
    "make_transition",
]
