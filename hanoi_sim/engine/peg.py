"""
Peg Module - LIFO disc holder enforcing the size-ordering rule.
"""

from typing import List, Optional, Tuple

from .disc import Disc

# Identifiers of the three pegs, in board order
PEG_IDS: Tuple[str, str, str] = ("A", "B", "C")


class Peg:
    """
    Ordered stack of discs.

    Discs are stored bottom-first; the top disc is the last element.
    try_push() is the only way a disc gets onto a peg, so every disc is
    strictly smaller than the one below it at all times.

    Attributes:
        identifier: Peg label ("A", "B" or "C")
        capacity: Maximum number of discs the peg holds
    """

    def __init__(self, identifier: str, capacity: int):
        """
        Initialize an empty peg.

        Args:
            identifier: Peg label
            capacity: Maximum number of discs (at least the discs in play)
        """
        if capacity < 0:
            raise ValueError(f"Peg capacity must be non-negative, got {capacity}")
        self.identifier = identifier
        self.capacity = capacity
        self._discs: List[Disc] = []

    def try_push(self, disc: Optional[Disc]) -> bool:
        """
        Place a disc on top of the peg if the rules allow it.

        Args:
            disc: Disc to place

        Returns:
            True if placed, False (peg unchanged) if disc is None,
            the peg is full, or the top disc is not larger
        """
        if disc is None:
            return False
        if self.is_full():
            return False
        if not disc.can_stack_on(self.peek()):
            return False
        self._discs.append(disc)
        return True

    def try_pop(self) -> Optional[Disc]:
        """
        Remove and return the top disc.

        Returns:
            Top disc, or None if the peg is empty
        """
        if not self._discs:
            return None
        return self._discs.pop()

    def peek(self) -> Optional[Disc]:
        """Get the top disc without removing it."""
        if not self._discs:
            return None
        return self._discs[-1]

    def is_empty(self) -> bool:
        return not self._discs

    def is_full(self) -> bool:
        return len(self._discs) >= self.capacity

    def count(self) -> int:
        """Number of discs on the peg."""
        return len(self._discs)

    def can_move_to(self, target: 'Peg') -> bool:
        """
        Check whether the top disc of this peg may move onto target.

        Args:
            target: Destination peg

        Returns:
            True if this peg has a disc, target has room, and the
            disc may rest on target's top disc
        """
        if self.is_empty():
            return False
        if target.is_full():
            return False
        return self.peek().can_stack_on(target.peek())

    def clear(self) -> None:
        """Remove every disc."""
        self._discs.clear()

    def all_discs_bottom_to_top(self) -> Tuple[Disc, ...]:
        """
        Snapshot of the peg contents.

        Returns:
            Tuple of discs, bottom disc first
        """
        return tuple(self._discs)

    def sizes(self) -> Tuple[int, ...]:
        """Disc sizes, bottom disc first."""
        return tuple(disc.size for disc in self._discs)

    def __len__(self):
        return len(self._discs)

    def __iter__(self):
        """Iterate discs bottom to top."""
        return iter(tuple(self._discs))

    def __repr__(self):
        return f"Peg({self.identifier!r}, discs={list(self.sizes())}, capacity={self.capacity})"
