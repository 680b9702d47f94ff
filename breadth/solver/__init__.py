"""
Solver Package - Generic breadth-first search over puzzle states.

Any state type implementing the Puzzle contract (make_move,
get_possible_moves, is_final, plus value equality) can be searched.
The visited-state container is pluggable by name.

Public API:
    - Puzzle: Abstract contract for puzzle states
    - Solver: Breadth-first solver for one initial state
    - solve_puzzle(): Convenience wrapper returning a Solution
    - Solution: Shortest path plus metrics
    - SearchMetrics: Performance statistics
    - Path: Append-only state sequence used on the frontier
    - VisitedSet: Abstract base for visited-state containers
    - create_visited_set(): Factory function
    - get_backend_names(): List available backends
    - get_backend_info(): Get backend metadata

Usage:
    from breadth.solver import Solver
    from breadth.puzzles import Klotski

    solver = Solver(Klotski.initial(), backend="hash")
    path = solver.solve()

    if path is None:
        print("No solution")
    else:
        for state in path:
            print(state)
        print(f"{len(path) - 1} moves, {solver.metrics.states_visited} states visited")
"""

# Core data structures
from .puzzle import Puzzle
from .path import Path
from .solution import Solution, SearchMetrics

# Visited-set backends
from .visited import (
    VisitedSet,
    HashVisitedSet,
    TreeVisitedSet,
    create_visited_set,
    get_backend_names,
    get_backend_info,
    get_default_backend_name,
    register_backend,
)

# Engine
from .engine import Solver, solve_puzzle

__all__ = [
    # Data structures
    "Puzzle",
    "Path",
    "Solution",
    "SearchMetrics",
    # Visited sets
    "VisitedSet",
    "HashVisitedSet",
    "TreeVisitedSet",
    "create_visited_set",
    "get_backend_names",
    "get_backend_info",
    "get_default_backend_name",
    "register_backend",
    # Engine
    "Solver",
    "solve_puzzle",
]
