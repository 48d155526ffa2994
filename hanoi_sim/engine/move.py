"""
Move Module - Record of one completed disc transfer.
"""

from dataclasses import dataclass
from typing import Tuple

from .disc import Disc


@dataclass(frozen=True)
class Move:
    """
    Represents one completed transfer of a top disc between pegs.

    Moves are created by the engine after the transfer succeeds and
    are never modified afterwards.

    Attributes:
        source: Identifier of the peg the disc left
        destination: Identifier of the peg the disc landed on
        disc: The disc that moved
        sequence_number: 1-based position in the move history
    """
    source: str
    destination: str
    disc: Disc
    sequence_number: int

    def __post_init__(self):
        if self.sequence_number < 1:
            raise ValueError(
                f"Move sequence number must be at least 1, got {self.sequence_number}"
            )

    @property
    def pegs(self) -> Tuple[str, str]:
        """(source, destination) peg identifiers."""
        return (self.source, self.destination)

    def __str__(self):
        return (f"Move {self.sequence_number}: disc {self.disc.size} "
                f"from peg {self.source} to peg {self.destination}")
