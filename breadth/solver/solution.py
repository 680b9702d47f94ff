"""
Solution Module - Result of a search and its performance metrics.
"""

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class SearchMetrics:
    """
    Performance metrics for one search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of states goal-checked (dequeued from the frontier)
        states_visited: Size of the visited set when the search stopped
        levels_expanded: Number of breadth-first levels fully expanded
        max_frontier_size: Largest frontier seen at the start of a level
        backend_name: Visited-set backend used
        solved: True if a goal state was reached
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    states_visited: int = 0
    levels_expanded: int = 0
    max_frontier_size: int = 0
    backend_name: str = ""
    solved: bool = False


@dataclass
class Solution:
    """
    A shortest path found by the solver.

    Attributes:
        states: States from the initial state to a goal state (never empty)
        metrics: Performance statistics of the search that found it
    """
    states: List[Any]
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    def __post_init__(self):
        if not self.states:
            raise ValueError("Solution must contain at least the initial state")

    @property
    def move_count(self) -> int:
        """Number of moves in solution."""
        return len(self.states) - 1

    @property
    def initial_state(self) -> Any:
        return self.states[0]

    @property
    def final_state(self) -> Any:
        return self.states[-1]

    def get_state_after_move(self, index: int) -> Any:
        """
        Get the state reached after executing the move at index.

        Args:
            index: Move index (0-based)

        Returns:
            State after the move (index+1 in states)

        Raises:
            IndexError: If index out of range
        """
        if index < 0 or index >= self.move_count:
            raise IndexError(f"Move index {index} out of range (solution has {self.move_count} moves)")
        return self.states[index + 1]
