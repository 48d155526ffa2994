"""
Solver Module - Classic recursive Towers of Hanoi procedure.

The procedure does not look at peg contents: it produces the same
transfer order for a given disc count every time, which is the unique
minimal solution from the initial configuration.
"""

from typing import Iterator, Tuple


def minimum_moves(disc_count: int) -> int:
    """
    Minimal number of moves needed to transfer a full stack.

    Args:
        disc_count: Number of discs

    Returns:
        2^disc_count - 1

    Raises:
        ValueError: If disc_count is negative
    """
    if disc_count < 0:
        raise ValueError(f"Disc count must be non-negative, got {disc_count}")
    return (1 << disc_count) - 1


def solution_moves(n: int, source: str, destination: str,
                   auxiliary: str) -> Iterator[Tuple[str, str]]:
    """
    Yield the transfers that move n discs from source to destination.

    Moves the n-1 smaller discs out of the way onto the auxiliary peg,
    moves the largest disc, then moves the n-1 discs back on top of it.

    Args:
        n: Number of discs to move
        source: Peg the discs start on
        destination: Peg the discs end on
        auxiliary: Spare peg

    Yields:
        (from_peg, to_peg) identifier pairs in execution order
    """
    if n < 1:
        return
    if n == 1:
        yield (source, destination)
    else:
        yield from solution_moves(n - 1, source, auxiliary, destination)
        yield (source, destination)
        yield from solution_moves(n - 1, auxiliary, destination, source)
