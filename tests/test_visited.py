"""
Tests for the visited-set backends and their registry.
"""

import pytest

from breadth.solver import (
    VisitedSet,
    HashVisitedSet,
    TreeVisitedSet,
    create_visited_set,
    get_backend_names,
    get_backend_info,
    get_default_backend_name,
)

from toy_puzzles import Counter, OrderedOnly


def test_new_set_is_empty(backend):
    visited = create_visited_set(backend)

    assert isinstance(visited, VisitedSet)
    assert len(visited) == 0
    assert not visited.contains(Counter(1))


def test_add_then_contains(backend):
    visited = create_visited_set(backend)
    visited.add(Counter(1))
    visited.add(Counter(3))

    assert visited.contains(Counter(1))
    assert Counter(3) in visited
    assert Counter(2) not in visited
    assert len(visited) == 2


def test_adding_twice_keeps_one_entry(backend):
    visited = create_visited_set(backend)
    visited.add(Counter(5))
    visited.add(Counter(5))
    assert len(visited) == 1


def test_equal_states_are_found(backend):
    """Membership is by value, not identity."""
    visited = create_visited_set(backend)
    visited.add(Counter(4, goal=1))
    assert visited.contains(Counter(4, goal=99))


def test_tree_set_iterates_in_order():
    visited = TreeVisitedSet()
    for value in (5, -2, 9, 0):
        visited.add(OrderedOnly(value))
    assert [s.value for s in visited] == [-2, 0, 5, 9]


def test_registry():
    names = get_backend_names()
    assert "hash" in names
    assert "tree" in names
    assert get_default_backend_name() == "hash"

    info = {entry["name"]: entry["description"] for entry in get_backend_info()}
    assert info["hash"] == HashVisitedSet.description
    assert info["tree"] == TreeVisitedSet.description


def test_create_unknown_backend_lists_available():
    with pytest.raises(ValueError) as excinfo:
        create_visited_set("bloom")
    assert "hash" in str(excinfo.value)
    assert "tree" in str(excinfo.value)
