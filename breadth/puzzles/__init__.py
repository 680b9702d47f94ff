"""
Puzzles Package - Concrete Puzzle implementations.
"""

from .klotski import Klotski, Move as KlotskiMove, MoveSet as KlotskiMoveSet, Piece, Direction

__all__ = [
    "Klotski",
    "KlotskiMove",
    "KlotskiMoveSet",
    "Piece",
    "Direction",
]
