"""
Search Engine Module - Level-synchronous breadth-first puzzle solver.

Expands the frontier one level at a time and returns the first path whose
last state is final. Because every path on a level has the same length and
a level is only left once all of its paths were checked, the first goal
found is at minimum depth. Within a level, paths are expanded in frontier
order and moves in the puzzle's enumeration order, so the result is fully
deterministic for a deterministic puzzle.

Usage:
    from breadth.solver import Solver

    solver = Solver(initial_state, backend="tree")
    path = solver.solve()
    if path is None:
        print("No solution")
"""

import logging
import time
from typing import Any, Dict, List, Optional

from .path import Path
from .puzzle import Puzzle
from .solution import Solution, SearchMetrics
from .visited import create_visited_set, get_default_backend_name
from ..settings import load_settings, get_visited_backend

logger = logging.getLogger(__name__)


def _duplicate(state: Any) -> Any:
    """Independent copy of a state; states without copy() are kept as-is."""
    copy = getattr(state, "copy", None)
    return copy() if callable(copy) else state


class Solver:
    """
    Breadth-first solver over any Puzzle implementation.

    A Solver owns its frontier and visited set for exactly one search:
    solve() consumes it, and a second call raises RuntimeError.

    The initial state is seeded into the visited set at construction, so
    it is never re-enqueued when it is reachable again from a successor.
    Every other state is added the moment it is first generated, not when
    it is dequeued, so two paths on the same level can never both end in
    the same state.

    Attributes:
        metrics: Statistics of the search, filled in by solve()
    """

    def __init__(self, initial: Puzzle, backend: Optional[str] = None):
        """
        Create a solver for one initial state.

        Args:
            initial: Starting puzzle state
            backend: Visited-set backend name ("hash", "tree"); the
                registry default when omitted

        Raises:
            ValueError: If backend name not found
        """
        backend_name = backend or get_default_backend_name()
        self._seen = create_visited_set(backend_name)
        self._seen.add(_duplicate(initial))
        self._todo: List[Path] = [Path(_duplicate(initial))]
        self._consumed = False
        self.metrics = SearchMetrics(backend_name=backend_name)

    @classmethod
    def from_settings(cls, initial: Puzzle,
                      settings: Optional[Dict[str, Any]] = None) -> "Solver":
        """
        Create a solver using the backend named in the settings.

        Args:
            initial: Starting puzzle state
            settings: Settings dict; loaded from config.json when omitted

        Returns:
            Solver instance
        """
        if settings is None:
            settings = load_settings()
        return cls(initial, backend=get_visited_backend(settings))

    def solve(self) -> Optional[List[Puzzle]]:
        """
        Search for a shortest path to a final state.

        Runs to completion in one call. Only terminates on puzzles whose
        reachable state space is finite or which have a solution at
        finite depth.

        Returns:
            States from the initial state to a final state, or None if
            the reachable state space holds no final state

        Raises:
            RuntimeError: If solve() was already called on this solver
        """
        if self._consumed:
            raise RuntimeError("Solver.solve() can only be called once per solver")
        self._consumed = True

        start_time = time.perf_counter()
        logger.info(f"Starting breadth-first search ({self.metrics.backend_name} backend)")

        result = self._search()

        self.metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        self.metrics.states_visited = len(self._seen)
        self.metrics.solved = result is not None

        if result is None:
            logger.info(
                f"No solution: exhausted {self.metrics.states_visited} states "
                f"in {self.metrics.computation_time_ms:.1f}ms"
            )
        else:
            logger.info(
                f"Solved in {len(result) - 1} moves, {self.metrics.states_visited} states "
                f"visited, {self.metrics.computation_time_ms:.1f}ms"
            )
        return result

    def _search(self) -> Optional[List[Puzzle]]:
        metrics = self.metrics
        level = 0

        while self._todo:
            paths, self._todo = self._todo, []
            metrics.max_frontier_size = max(metrics.max_frontier_size, len(paths))
            logger.debug(
                f"Level {level}: {len(paths)} paths, {len(self._seen)} states visited"
            )

            for path in paths:
                current = path.last()
                metrics.states_explored += 1
                if current.is_final():
                    return path.to_list()

                for move in current.get_possible_moves():
                    next_state = current.make_move(move)
                    if not self._seen.contains(next_state):
                        self._seen.add(_duplicate(next_state))
                        next_path = path.copy()
                        next_path.push(next_state)
                        self._todo.append(next_path)

            level += 1
            metrics.levels_expanded = level

        return None


def solve_puzzle(initial: Puzzle, backend: Optional[str] = None) -> Optional[Solution]:
    """
    Solve a puzzle and bundle the path with its search metrics.

    Args:
        initial: Starting puzzle state
        backend: Visited-set backend name (default "hash")

    Returns:
        Solution, or None if no final state is reachable
    """
    solver = Solver(initial, backend=backend)
    states = solver.solve()
    if states is None:
        return None
    return Solution(states=states, metrics=solver.metrics)
