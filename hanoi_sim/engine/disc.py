"""
Disc Module - A single puzzle piece identified by its size.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Disc:
    """
    Immutable puzzle piece.

    Each size appears exactly once within a puzzle, so size is the
    identity of the disc: two discs are equal iff their sizes match.

    Attributes:
        size: Disc size, 1 being the smallest
    """
    size: int

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"Disc size must be at least 1, got {self.size}")

    def can_stack_on(self, other: Optional['Disc']) -> bool:
        """
        Check whether this disc may rest on top of another.

        Args:
            other: Disc currently on top of the target peg, or None if empty

        Returns:
            True if the target is empty or holds a larger disc
        """
        if other is None:
            return True
        return self.size < other.size

    def __str__(self):
        return f"Disc {self.size}"
