"""
Path Module - Sequence of states from the initial state to a frontier state.
"""

from typing import Any, Iterator, List


class Path:
    """
    Append-only, never-empty list of states.

    Every frontier entry owns its own Path. When a path branches, each
    successor gets a copy() so sibling branches never see each other's
    pushes.
    """

    __slots__ = ("_states",)

    def __init__(self, start: Any):
        self._states: List[Any] = [start]

    def last(self) -> Any:
        """State at the end of the path."""
        return self._states[-1]

    def push(self, state: Any) -> None:
        """Append exactly one state."""
        self._states.append(state)

    def copy(self) -> "Path":
        duplicate = Path.__new__(Path)
        duplicate._states = list(self._states)
        return duplicate

    def to_list(self) -> List[Any]:
        """Independent list of the states, first to last."""
        return list(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._states)

    def __repr__(self) -> str:
        return f"Path(length={len(self._states)}, last={self.last()!r})"
