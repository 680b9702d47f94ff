"""
Breadth Solver - Generic breadth-first search for puzzles.

See breadth.solver for the engine and breadth.puzzles for bundled puzzles.
"""

from .solver import Puzzle, Solver, Solution, SearchMetrics, solve_puzzle

__version__ = "0.1.0"

__all__ = [
    "Puzzle",
    "Solver",
    "Solution",
    "SearchMetrics",
    "solve_puzzle",
    "__version__",
]
