"""
Puzzle Engine Module - Owns the pegs, validates moves and runs the solver.
"""

import logging
from typing import Callable, Iterator, List, Optional, Tuple, Union

from .disc import Disc
from .errors import InvalidConfiguration
from .move import Move
from .peg import PEG_IDS, Peg
from .solver import minimum_moves, solution_moves

logger = logging.getLogger(__name__)

# Supported disc counts (inclusive)
MIN_DISCS = 3
MAX_DISCS = 6

# Start, goal and spare pegs of the puzzle
SOURCE_PEG = "A"
AUXILIARY_PEG = "B"
TARGET_PEG = "C"

MoveObserver = Callable[[Move], None]
PegRef = Union[Peg, str]


class PuzzleEngine:
    """
    State engine for one Towers of Hanoi session.

    Holds three pegs (A, B, C), the move history and an optional
    observer that is called synchronously after every successful move,
    whether the move came from play or from the auto-solution.

    The engine has no internal locking: callers must serialize
    move_disc(), reset() and the auto-solution on one instance.

    Example:
        engine = PuzzleEngine(3)
        engine.observer = lambda move: print(move)
        engine.move_disc("A", "C")
        engine.reset()
        engine.start_auto_solution()
        assert engine.is_completed()
    """

    def __init__(self, disc_count: int, observer: Optional[MoveObserver] = None):
        """
        Initialize the engine with a full stack on peg A.

        Args:
            disc_count: Number of discs (3-6)
            observer: Optional callback receiving each Move

        Raises:
            InvalidConfiguration: If disc_count is outside [3, 6]
        """
        self._disc_count = 0
        self._pegs: Tuple[Peg, ...] = ()
        self._history: List[Move] = []
        self._in_progress = False
        # Bumped on every (re)population; a solve only runs within one board
        self._board_generation = 0
        self.observer = observer
        self.initialize(disc_count)

    # ------------------------------------------------------------------
    # Construction and reset
    # ------------------------------------------------------------------

    def initialize(self, disc_count: int) -> None:
        """
        (Re)build the pegs for the given disc count.

        Args:
            disc_count: Number of discs (3-6)

        Raises:
            InvalidConfiguration: If disc_count is not an integer in
                [3, 6]. The engine is left untouched in that case.
        """
        if (isinstance(disc_count, bool) or not isinstance(disc_count, int)
                or not MIN_DISCS <= disc_count <= MAX_DISCS):
            raise InvalidConfiguration(disc_count, MIN_DISCS, MAX_DISCS)

        self._disc_count = disc_count
        self._pegs = tuple(Peg(peg_id, disc_count) for peg_id in PEG_IDS)
        self._populate()
        logger.info(f"Puzzle initialized with {disc_count} discs")

    def reset(self) -> None:
        """
        Restore the initial configuration without changing disc count.

        The registered observer is kept.
        """
        for peg in self._pegs:
            peg.clear()
        self._populate()
        logger.info("Puzzle reset")

    def _populate(self) -> None:
        """Stack all discs on the source peg, largest first."""
        source = self.peg_by_identifier(SOURCE_PEG)
        for size in range(self._disc_count, 0, -1):
            source.try_push(Disc(size))
        self._history = []
        self._in_progress = False
        self._board_generation += 1

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def move_disc(self, source: Optional[PegRef], destination: Optional[PegRef]) -> bool:
        """
        Move the top disc of source onto destination.

        Args:
            source: Peg or peg identifier to take the disc from
            destination: Peg or peg identifier to put the disc on

        Returns:
            True if the move was made. False if a peg is unknown, the
            source is empty, the destination is full, or the disc would
            land on a smaller one. Pegs are unchanged on False.
        """
        from_peg = self._resolve(source)
        to_peg = self._resolve(destination)
        if from_peg is None or to_peg is None:
            logger.debug(f"Rejected move {source!r} -> {destination!r}: unknown peg")
            return False

        if not from_peg.can_move_to(to_peg):
            logger.debug(f"Rejected move {from_peg.identifier} -> {to_peg.identifier}: illegal")
            return False

        disc = from_peg.try_pop()
        if not to_peg.try_push(disc):
            from_peg.try_push(disc)
            logger.debug(f"Rejected move {from_peg.identifier} -> {to_peg.identifier}: push failed")
            return False

        move = Move(
            source=from_peg.identifier,
            destination=to_peg.identifier,
            disc=disc,
            sequence_number=len(self._history) + 1,
        )
        self._history.append(move)
        logger.debug(str(move))

        if self.observer is not None:
            self.observer(move)
        return True

    def _resolve(self, ref: Optional[PegRef]) -> Optional[Peg]:
        """Map a peg reference or identifier to one of this engine's pegs."""
        if isinstance(ref, Peg):
            for peg in self._pegs:
                if peg is ref:
                    return peg
            return None
        if isinstance(ref, str):
            return self.peg_by_identifier(ref)
        return None

    # ------------------------------------------------------------------
    # Auto-solution
    # ------------------------------------------------------------------

    def start_auto_solution(self) -> None:
        """
        Solve the puzzle from peg A to peg C using peg B as spare.

        Runs to completion. Does nothing if a solve is already running
        on this engine. From the initial configuration this makes
        exactly minimum_moves() moves.
        """
        if self._in_progress:
            logger.warning("Auto-solution already in progress, ignoring request")
            return

        for _ in self.iter_auto_solution():
            pass

        if not self.is_completed():
            logger.warning("Auto-solution finished without completing the puzzle")

    def iter_auto_solution(self) -> Iterator[Move]:
        """
        Run the auto-solution one move at a time.

        Each transfer goes through move_disc(), so history and observer
        behave exactly as for manual play. Closing the iterator early
        stops the solve and leaves the pegs in the legal state reached
        so far. A reset() or initialize() while the iterator is paused
        ends it without touching the new board.

        Yields:
            Each Move as it is made
        """
        if self._in_progress:
            logger.warning("Auto-solution already in progress, ignoring request")
            return

        self._in_progress = True
        generation = self._board_generation
        logger.info(f"Auto-solution started for {self._disc_count} discs")
        try:
            for source, destination in solution_moves(
                    self._disc_count, SOURCE_PEG, TARGET_PEG, AUXILIARY_PEG):
                if self._board_generation != generation:
                    logger.info("Board was reset, abandoning auto-solution")
                    return
                if not self.move_disc(source, destination):
                    logger.debug(f"Auto-solution move {source} -> {destination} rejected")
                    continue
                if self._board_generation != generation:
                    # Observer reset the board during the move
                    logger.info("Board was reset, abandoning auto-solution")
                    return
                yield self._history[-1]
        finally:
            if self._board_generation == generation:
                self._in_progress = False
            logger.info(f"Auto-solution stopped after {self.move_count} moves, "
                        f"completed={self.is_completed()}")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def pegs(self) -> Tuple[Peg, ...]:
        """Pegs A, B and C in board order."""
        return self._pegs

    @property
    def disc_count(self) -> int:
        return self._disc_count

    @property
    def move_count(self) -> int:
        """Number of successful moves since the last reset."""
        return len(self._history)

    @property
    def history(self) -> List[Move]:
        """Copy of the move history, oldest first."""
        return list(self._history)

    def peg_by_identifier(self, identifier: str) -> Optional[Peg]:
        """
        Look up a peg by its label.

        Args:
            identifier: "A", "B" or "C"

        Returns:
            Matching Peg, or None if no peg has that label
        """
        for peg in self._pegs:
            if peg.identifier == identifier:
                return peg
        return None

    def is_completed(self) -> bool:
        """True if every disc is on peg C and pegs A and B are empty."""
        target = self.peg_by_identifier(TARGET_PEG)
        return (target.count() == self._disc_count
                and all(peg.is_empty() for peg in self._pegs if peg is not target))

    def is_in_progress(self) -> bool:
        """True while an auto-solution is running."""
        return self._in_progress

    def progress(self) -> float:
        """
        Fraction of discs currently on the target peg.

        Returns:
            count(peg C) / disc_count, or 1.0 when there are no discs
        """
        if self._disc_count == 0:
            return 1.0
        return self.peg_by_identifier(TARGET_PEG).count() / self._disc_count

    def settled_progress(self) -> float:
        """
        Fraction of discs resting in their final position.

        A disc is settled when it sits on peg C above an unbroken run of
        larger discs that starts with the largest disc at the base. This
        never decreases during the auto-solution, unlike progress().

        Returns:
            Settled disc count / disc_count, or 1.0 when there are no discs
        """
        if self._disc_count == 0:
            return 1.0
        settled = 0
        for size in self.peg_by_identifier(TARGET_PEG).sizes():
            if size != self._disc_count - settled:
                break
            settled += 1
        return settled / self._disc_count

    def minimum_moves(self) -> int:
        """Minimal number of moves for this disc count (2^n - 1)."""
        return minimum_moves(self._disc_count)

    def last_move(self) -> Optional[Move]:
        """Most recent move, or None if no move has been made."""
        if not self._history:
            return None
        return self._history[-1]

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """
        Hashable view of the pegs.

        Returns:
            Disc sizes per peg (A, B, C), bottom disc first
        """
        return tuple(peg.sizes() for peg in self._pegs)

    def __repr__(self):
        return (f"PuzzleEngine(disc_count={self._disc_count}, "
                f"moves={self.move_count}, pegs={self.snapshot()})")
