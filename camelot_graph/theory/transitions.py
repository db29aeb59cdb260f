"""
Harmonic transition rules for the Camelot wheel.

Each rule maps a key to a harmonically related key:

| Transition      | From minor (A)       | From major (B)       | Example      |
|-----------------|----------------------|----------------------|--------------|
| Vertical        | same number, B       | same number, A       | 8A <-> 8B    |
| Diagonal        | -1, B                | +1, A                | 8A <-> 7B    |
| FlatToMinor     | -4, B                | +4, A                | 8A <-> 4B    |
| MajorToMinor    | +3, B                | -3, A                | 8A <-> 11B   |
| ChangeIndex(n)  | n positions, A       | n positions, B       | 8A -> 9A     |

The mode-dependent rules are each other's inverse when applied from the
opposite mode, so every rule can be walked back.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from camelot_graph.theory.key import Key, Mode, ScaleError


class InvalidTransitionString(ScaleError):
    """Raised when a string does not name a catalog transition."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid transition string provided: {text!r}")


class TransitionKind(Enum):
    """Kinds of harmonic transition."""
    VERTICAL = "Vertical"
    DIAGONAL = "Diagonal"
    MAJOR_TO_MINOR = "MajorToMinor"
    FLAT_TO_MINOR = "FlatToMinor"
    CHANGE_INDEX = "ChangeIndex"


_CHANGE_INDEX_PATTERN = re.compile(r"ChangeIndex\(([+-]?\d+)\)")


@dataclass(frozen=True)
class KeyTransition:
    """
    A named transition rule.

    Only CHANGE_INDEX carries a payload (`amount`); it is 0 for every other kind.
    """
    kind: TransitionKind
    amount: int = 0

    @classmethod
    def change_index(cls, amount: int) -> "KeyTransition":
        return cls(TransitionKind.CHANGE_INDEX, amount)

    @classmethod
    def parse(cls, text: str) -> "KeyTransition":
        """
        Parse a transition from its display form.

        Args:
            text: e.g. "Vertical", "ChangeIndex(-7)"

        Returns:
            The matching catalog KeyTransition

        Raises:
            InvalidTransitionString: If the text names no catalog transition
        """
        if not isinstance(text, str):
            raise InvalidTransitionString(text)

        match = _CHANGE_INDEX_PATTERN.fullmatch(text)
        if match:
            transition = cls.change_index(int(match.group(1)))
            if transition in HARMONIC_TRANSITIONS:
                return transition
            raise InvalidTransitionString(text)

        for kind in TransitionKind:
            if kind is not TransitionKind.CHANGE_INDEX and kind.value == text:
                return cls(kind)

        raise InvalidTransitionString(text)

    def __str__(self) -> str:
        if self.kind is TransitionKind.CHANGE_INDEX:
            return f"ChangeIndex({self.amount:+d})"
        return self.kind.value


VERTICAL = KeyTransition(TransitionKind.VERTICAL)
DIAGONAL = KeyTransition(TransitionKind.DIAGONAL)
MAJOR_TO_MINOR = KeyTransition(TransitionKind.MAJOR_TO_MINOR)
FLAT_TO_MINOR = KeyTransition(TransitionKind.FLAT_TO_MINOR)

# Fixed catalog of compatible moves
HARMONIC_TRANSITIONS: Tuple[KeyTransition, ...] = (
    VERTICAL,
    DIAGONAL,
    MAJOR_TO_MINOR,
    FLAT_TO_MINOR,
    KeyTransition.change_index(1),
    KeyTransition.change_index(2),
    KeyTransition.change_index(7),
    KeyTransition.change_index(-1),
    KeyTransition.change_index(-2),
    KeyTransition.change_index(-7),
)


def harmonic_transitions() -> Tuple[KeyTransition, ...]:
    """Get the catalog of harmonic transitions."""
    return HARMONIC_TRANSITIONS


def make_transition(key: Key, transition: KeyTransition) -> Key:
    """
    Apply a transition rule to a key.

    Args:
        key: Source key
        transition: Rule to apply

    Returns:
        The key reached by the transition
    """
    kind = transition.kind

    if kind is TransitionKind.VERTICAL:
        return key.swap_kind()

    if kind is TransitionKind.CHANGE_INDEX:
        return key.change_index(transition.amount)

    if kind is TransitionKind.DIAGONAL:
        if key.mode is Mode.MAJOR:
            return key.swap_kind().change_index(1)
        if key.mode is Mode.MINOR:
            return key.swap_kind().change_index(-1)

    if kind is TransitionKind.FLAT_TO_MINOR:
        if key.mode is Mode.MINOR:
            return key.swap_kind().change_index(-4)
        if key.mode is Mode.MAJOR:
            return key.swap_kind().change_index(4)

    if kind is TransitionKind.MAJOR_TO_MINOR:
        if key.mode is Mode.MINOR:
            return key.swap_kind().change_index(3)
        if key.mode is Mode.MAJOR:
            return key.swap_kind().change_index(-3)

    raise AssertionError(f"Unhandled transition {transition} from {key}")
