"""
Visited Set Module - Capability interface and registry of backends.

The solver records every state it has scheduled for expansion in a visited
set. It is written against the three operations of VisitedSet only, so the
backend can be swapped by name:

    hash: Python set, O(1) expected add/contains, needs hashable states
    tree: sortedcontainers.SortedList, O(log n) add/contains, needs ordered
          states, iterates in sorted order
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Type

from sortedcontainers import SortedList

logger = logging.getLogger(__name__)


class VisitedSet(ABC):
    """
    Abstract base class for visited-state containers.

    Subclasses must be constructible with no arguments (an empty set) and
    define name and description class attributes. Sets only grow: there
    is no removal.

    Attributes:
        name: Short identifier used by create_visited_set()
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base visited set"

    @abstractmethod
    def add(self, state: Any) -> None:
        """Insert a state. Adding a state already present is a no-op."""
        pass

    @abstractmethod
    def contains(self, state: Any) -> bool:
        """Check whether a state has been added."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __contains__(self, state: Any) -> bool:
        return self.contains(state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self)})"


# Global registry of backends
_BACKENDS: Dict[str, Type[VisitedSet]] = {}


def register_backend(cls: Type[VisitedSet]) -> Type[VisitedSet]:
    """
    Decorator to register a visited-set backend.

    Usage:
        @register_backend
        class MyVisitedSet(VisitedSet):
            name = "mine"
            ...

    Args:
        cls: Backend class to register

    Returns:
        The same class (for decorator chaining)
    """
    if cls.name in _BACKENDS and _BACKENDS[cls.name] is not cls:
        logger.warning(f"Replacing visited-set backend '{cls.name}' with {cls.__name__}")
    _BACKENDS[cls.name] = cls
    return cls


@register_backend
class HashVisitedSet(VisitedSet):
    """Hash-based visited set. States must be hashable."""
    name = "hash"
    description = "Hash set - O(1) membership, requires hashable states"

    def __init__(self):
        self._states = set()

    def add(self, state: Any) -> None:
        self._states.add(state)

    def contains(self, state: Any) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)


@register_backend
class TreeVisitedSet(VisitedSet):
    """
    Ordered visited set backed by a SortedList.

    States only need a total order (no hash). Iterating yields the
    visited states in ascending order, which keeps debug dumps stable
    between runs.
    """
    name = "tree"
    description = "Sorted set - O(log n) membership, requires ordered states"

    def __init__(self):
        self._states = SortedList()

    def add(self, state: Any) -> None:
        # SortedList keeps duplicates; membership is a bisect, no hashing
        if state not in self._states:
            self._states.add(state)

    def contains(self, state: Any) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._states)


def create_visited_set(name: str) -> VisitedSet:
    """
    Create an empty visited set by backend name.

    Args:
        name: Backend name (e.g., "hash", "tree")

    Returns:
        Empty VisitedSet instance

    Raises:
        ValueError: If backend name not found
    """
    if name not in _BACKENDS:
        available = ", ".join(_BACKENDS.keys())
        raise ValueError(f"Unknown visited-set backend: {name}. Available: {available}")
    return _BACKENDS[name]()


def get_backend_names() -> List[str]:
    """
    Get list of available backend names.

    Returns:
        List of registered backend names
    """
    return list(_BACKENDS.keys())


def get_backend_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered backends.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _BACKENDS.values()
    ]


def get_default_backend_name() -> str:
    """
    Get the default backend name.

    Returns:
        "hash" if available, else first registered
    """
    if "hash" in _BACKENDS:
        return "hash"
    if _BACKENDS:
        return next(iter(_BACKENDS.keys()))
    return ""
