"""
Puzzle Module - Abstract contract every searchable puzzle state implements.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable


class Puzzle(ABC):
    """
    Abstract base class for puzzle states.

    An instance represents one configuration of the puzzle. The solver only
    ever talks to states through this interface, so any state type works
    as long as it provides the three operations below plus value semantics:

        - __eq__ / __hash__ for the "hash" visited-set backend
        - a total order (__lt__) for the "tree" visited-set backend
        - optionally copy() returning an independent value

    Subclassing is not required: the solver calls copy() only when a state
    has one, and otherwise relies on make_move() returning a fresh value.
    Frozen dataclasses (``@dataclass(frozen=True, order=True)``) give all of
    these for free. Because such instances are immutable, the default copy()
    simply returns self; mutable subclasses must override it.

    Moves are opaque to the solver. They only need to be comparable and
    passed back unchanged to make_move().
    """

    @abstractmethod
    def make_move(self, move: Any) -> "Puzzle":
        """
        Apply a move and return the resulting state.

        The move must come from get_possible_moves() on this same state.
        What happens otherwise is up to the implementation; the solver
        never does it.

        Args:
            move: A move yielded by get_possible_moves()

        Returns:
            New, independent state. This state is unchanged.
        """
        pass

    @abstractmethod
    def get_possible_moves(self) -> Iterable[Any]:
        """
        Enumerate every legal move from this state.

        Must depend on the state alone. The enumeration order decides
        which of several equally short solutions is returned. The solver
        iterates the result exactly once.

        Returns:
            Finite iterable of moves
        """
        pass

    @abstractmethod
    def is_final(self) -> bool:
        """True if this state is a goal state."""
        pass

    def copy(self) -> "Puzzle":
        """Duplicate this state. Immutable states can return themselves."""
        return self
