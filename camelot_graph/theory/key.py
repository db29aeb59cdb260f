"""
Camelot Wheel - keys and modes.

The Camelot Wheel organizes the 24 musical keys in a circle for easy
harmonic mixing. Each position is a tonic number (1-12) and a letter:

Outer circle (B) = MAJOR keys
Inner circle (A) = MINOR keys

Internally the tonic is stored 0-based (0-11), so "1A" is tonic 0, Minor.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List

WHEEL_SIZE = 12

# Numeric part must be 1-12, letter must be A or B. No partial matches.
_KEY_PATTERN = re.compile(r"(1|2|3|4|5|6|7|8|9|10|11|12)([AB])")


class ScaleError(ValueError):
    """Base error for malformed Camelot text."""


class InvalidScaleString(ScaleError):
    """Raised when a string is not a valid Camelot key code."""

    def __init__(self, text):
        self.text = text
        super().__init__(f"Invalid scale string provided: {text!r}")


class Mode(str, Enum):
    """Major/minor quality of a key. The value is the wheel letter."""
    MINOR = "A"
    MAJOR = "B"

    def swap(self) -> "Mode":
        """Return the opposite mode."""
        if self is Mode.MINOR:
            return Mode.MAJOR
        return Mode.MINOR

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Key:
    """
    One of the 24 positions on the wheel.

    Ordered by tonic, then mode (minor first).
    """
    tonic: int
    mode: Mode

    def __post_init__(self):
        if (
            not isinstance(self.tonic, int)
            or isinstance(self.tonic, bool)
            or not 0 <= self.tonic < WHEEL_SIZE
        ):
            raise ValueError(f"Tonic must be in [0, {WHEEL_SIZE - 1}], got {self.tonic!r}")
        if not isinstance(self.mode, Mode):
            raise ValueError(f"Mode must be a Mode, got {self.mode!r}")

    def swap_kind(self) -> "Key":
        """Same tonic, opposite mode (relative major/minor)."""
        return Key(self.tonic, self.mode.swap())

    def change_index(self, amount: int) -> "Key":
        """
        Move around the wheel by `amount` positions.

        Args:
            amount: Number of positions, negative values move backwards

        Returns:
            Key with the shifted tonic and the same mode
        """
        # Python's % is a true modulus, negative shifts wrap correctly
        return Key((self.tonic + amount) % WHEEL_SIZE, self.mode)

    @classmethod
    def parse(cls, text: str) -> "Key":
        """
        Parse Camelot notation into a Key.

        Args:
            text: Camelot notation (e.g., "8A", "12B")

        Returns:
            The decoded Key

        Raises:
            InvalidScaleString: If notation is invalid
        """
        if not isinstance(text, str):
            raise InvalidScaleString(text)

        match = _KEY_PATTERN.fullmatch(text)
        if match is None:
            raise InvalidScaleString(text)

        number, letter = match.groups()
        return cls(int(number) - 1, Mode(letter))

    def __str__(self) -> str:
        return f"{self.tonic + 1}{self.mode.value}"


def scale(tonic: int, mode: Mode) -> Key:
    """Construct a key from a 0-based tonic and a mode."""
    return Key(tonic, mode)


def decode(text: str) -> Key:
    """Decode Camelot notation (e.g., "8B") into a Key."""
    return Key.parse(text)


def encode(key: Key) -> str:
    """Encode a Key as Camelot notation (e.g., "8B")."""
    return str(key)


def make_standard_scale() -> List[Key]:
    """
    Get all 24 wheel keys.

    Returns:
        Keys in tonic order, minor before major at each tonic
    """
    return [
        scale(tonic, mode)
        for tonic in range(WHEEL_SIZE)
        for mode in (Mode.MINOR, Mode.MAJOR)
    ]
