"""
Render Module - Plain-text views of the puzzle for consoles and logs.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .game import PuzzleEngine
    from .peg import Peg

COLUMN_WIDTH = 10


def format_peg(peg: 'Peg') -> str:
    """
    List the discs of a peg from top to base.

    Args:
        peg: Peg to describe

    Returns:
        Multi-line listing, or a single "[empty]" line
    """
    if peg.is_empty():
        return f"Peg {peg.identifier}: [empty]"

    lines = [f"Peg {peg.identifier} (top -> base):"]
    for disc in reversed(peg.all_discs_bottom_to_top()):
        lines.append(f"  {disc}")
    return "\n".join(lines)


def format_towers(engine: 'PuzzleEngine') -> str:
    """
    Draw the three pegs side by side, top level first.

    Empty slots are drawn as "|".

    Args:
        engine: Puzzle to draw

    Returns:
        Multi-line ASCII drawing
    """
    pegs = engine.pegs
    lines = ["".join(f"Peg {peg.identifier}".ljust(COLUMN_WIDTH) for peg in pegs).rstrip(),
             "".join("-----".ljust(COLUMN_WIDTH) for _ in pegs).rstrip()]

    height = max(peg.count() for peg in pegs)
    for level in range(height - 1, -1, -1):
        row = ""
        for peg in pegs:
            sizes = peg.sizes()
            cell = str(sizes[level]) if level < len(sizes) else "|"
            row += f"  {cell}".ljust(COLUMN_WIDTH)
        lines.append(row.rstrip())

    lines.append("".join("=====".ljust(COLUMN_WIDTH) for _ in pegs).rstrip())
    return "\n".join(lines)


def format_game_state(engine: 'PuzzleEngine') -> str:
    """
    Summarize the puzzle: counters, progress and every peg's contents.

    Args:
        engine: Puzzle to summarize

    Returns:
        Multi-line report
    """
    lines = [
        "=== Game State ===",
        f"Discs: {engine.disc_count}",
        f"Moves made: {engine.move_count}",
        f"Minimum moves: {engine.minimum_moves()}",
        f"Progress: {engine.progress() * 100:.1f}%",
        f"Completed: {'yes' if engine.is_completed() else 'no'}",
        "",
    ]
    for peg in engine.pegs:
        lines.append(format_peg(peg))
    return "\n".join(lines)
