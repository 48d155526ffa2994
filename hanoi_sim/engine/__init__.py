"""
Engine Package - Puzzle state engine for the Towers of Hanoi.

This package holds everything with rules in it: discs, pegs, the
move record, legality checks, the recursive solver and progress
tracking. It draws nothing, sleeps never and performs no I/O; callers
drive it and listen for moves through an observer callback.

Public API:
    - Disc: Immutable puzzle piece
    - Peg: LIFO disc holder enforcing the size rule
    - Move: Record of one completed transfer
    - PuzzleEngine: Pegs, moves, history and auto-solution
    - InvalidConfiguration: Raised for unsupported disc counts
    - solution_moves(): Recursive transfer order
    - minimum_moves(): 2^n - 1
    - format_game_state() / format_towers() / format_peg(): Text views

Usage:
    from hanoi_sim.engine import PuzzleEngine

    engine = PuzzleEngine(4)
    engine.observer = lambda move: print(move)
    engine.start_auto_solution()

    print(engine.move_count, engine.minimum_moves())   # 15 15
"""

from .disc import Disc
from .peg import Peg, PEG_IDS
from .move import Move
from .errors import InvalidConfiguration
from .solver import minimum_moves, solution_moves
from .game import (
    PuzzleEngine,
    MoveObserver,
    MIN_DISCS,
    MAX_DISCS,
    SOURCE_PEG,
    AUXILIARY_PEG,
    TARGET_PEG,
)
from .render import format_game_state, format_peg, format_towers

__all__ = [
    # Data structures
    "Disc",
    "Peg",
    "PEG_IDS",
    "Move",
    # Engine
    "PuzzleEngine",
    "MoveObserver",
    "InvalidConfiguration",
    "MIN_DISCS",
    "MAX_DISCS",
    "SOURCE_PEG",
    "AUXILIARY_PEG",
    "TARGET_PEG",
    # Solver
    "minimum_moves",
    "solution_moves",
    # Text views
    "format_game_state",
    "format_peg",
    "format_towers",
]
