"""
Tests for the Klotski puzzle and solving it with the breadth-first solver.
"""

import pytest

from breadth.solver import Solver
from breadth.puzzles import Klotski, KlotskiMove as Move, KlotskiMoveSet as MoveSet, Piece, Direction

C0, C1, C2, C3 = Piece.C0, Piece.C1, Piece.C2, Piece.C3
H0, S0, X0 = Piece.H0, Piece.S0, Piece.X0
V0, V1, V2, V3 = Piece.V0, Piece.V1, Piece.V2, Piece.V3

# S0 one slide above the exit
ONE_MOVE_BOARD = [
    [V0, C0, C1, V1],
    [V0, H0, H0, V1],
    [V2, S0, S0, V3],
    [V2, S0, S0, V3],
    [C2, X0, X0, C3],
]

# C2 must step aside before S0 can slide down
TWO_MOVE_BOARD = [
    [V0, C0, C1, V1],
    [V0, H0, H0, V1],
    [V2, S0, S0, V3],
    [V2, S0, S0, V3],
    [X0, C2, X0, C3],
]


def is_single_legal_move(before, after):
    return any(before.make_move(m) == after for m in before.get_possible_moves())


# ========== Move encoding ==========

def test_move_index_round_trip():
    for n in range(40):
        assert Move.from_index(n).index == n


def test_move_index_layout():
    assert Move(C0, Direction.NORTH).index == 0
    assert Move(V3, Direction.NORTH).index == 9
    assert Move(C0, Direction.SOUTH).index == 10
    assert Move(S0, Direction.WEST).index == 25
    assert Move(V3, Direction.EAST).index == 39


def test_move_set_starts_full_and_iterates_in_index_order():
    moves = MoveSet()
    assert len(moves) == 40

    moves.remove(Move(C0, Direction.NORTH))
    moves.remove(Move(H0, Direction.EAST))

    listed = list(moves)
    assert len(moves) == 38
    assert not moves.is_allowed(Move(C0, Direction.NORTH))
    assert moves.is_allowed(Move(C1, Direction.NORTH))
    assert [m.index for m in listed] == sorted(m.index for m in listed)
    assert Move(H0, Direction.EAST) not in listed


def test_direction_step_stops_at_edges():
    assert Direction.NORTH.step(1, 0) is None
    assert Direction.SOUTH.step(1, 4) is None
    assert Direction.WEST.step(0, 2) is None
    assert Direction.EAST.step(3, 2) is None
    assert Direction.EAST.step(1, 2) == (2, 2)
    assert Direction.NORTH.step(1, 2) == (1, 1)


# ========== Board ==========

def test_initial_board_moves():
    moves = list(Klotski.initial().get_possible_moves())
    assert moves == [
        Move(C0, Direction.SOUTH),
        Move(C1, Direction.SOUTH),
        Move(C3, Direction.WEST),
        Move(C2, Direction.EAST),
    ]


def test_initial_board_is_not_final():
    assert not Klotski.initial().is_final()


def test_make_move_shifts_whole_piece():
    board = Klotski.from_rows(ONE_MOVE_BOARD)
    after = board.make_move(Move(S0, Direction.SOUTH))

    assert after.grid[2] == (V2, X0, X0, V3)
    assert after.grid[3] == (V2, S0, S0, V3)
    assert after.grid[4] == (C2, S0, S0, C3)
    assert after.is_final()
    # Original unchanged
    assert board.grid[2] == (V2, S0, S0, V3)


def test_make_move_keeps_other_pieces():
    board = Klotski.initial()
    after = board.make_move(Move(C2, Direction.EAST))

    assert after.grid[4] == (X0, C2, X0, C3)
    assert after.grid[:4] == board.grid[:4]


def test_blocked_moves_are_excluded():
    board = Klotski.from_rows(TWO_MOVE_BOARD)
    moves = set(board.get_possible_moves())

    assert Move(S0, Direction.SOUTH) not in moves
    assert Move(C2, Direction.WEST) in moves
    assert Move(C2, Direction.EAST) in moves
    assert Move(V2, Direction.SOUTH) in moves
    # Board edges
    assert Move(C3, Direction.EAST) not in moves
    assert Move(V0, Direction.NORTH) not in moves


def test_boards_are_hashable_and_ordered():
    a = Klotski.initial()
    b = Klotski.from_rows(a.to_list())

    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    c = a.make_move(Move(C0, Direction.SOUTH))
    assert (a < c) != (c < a)


def test_from_rows_validates_shape():
    with pytest.raises(ValueError):
        Klotski.from_rows(ONE_MOVE_BOARD[:4])
    with pytest.raises(ValueError):
        Klotski.from_rows([row[:3] for row in ONE_MOVE_BOARD])
    with pytest.raises(ValueError):
        Klotski.from_rows([[42] * 4] * 5)


def test_str_rendering():
    text = str(Klotski.initial())
    lines = text.splitlines()

    print(f"\n{text}")
    assert len(lines) == 5
    assert lines[0] == "V0 S0 S0 V1"
    assert lines[4] == "C2 .. .. C3"


# ========== Solving ==========

def test_one_move_board(backend):
    board = Klotski.from_rows(ONE_MOVE_BOARD)
    path = Solver(board, backend=backend).solve()

    assert path == [board, board.make_move(Move(S0, Direction.SOUTH))]


def test_two_move_board(backend):
    board = Klotski.from_rows(TWO_MOVE_BOARD)
    path = Solver(board, backend=backend).solve()

    step = board.make_move(Move(C2, Direction.WEST))
    assert path == [board, step, step.make_move(Move(S0, Direction.SOUTH))]


def test_already_solved_board():
    board = Klotski.from_rows(ONE_MOVE_BOARD).make_move(Move(S0, Direction.SOUTH))
    assert Solver(board).solve() == [board]


@pytest.mark.slow
def test_classic_board():
    """
    Full search from the classic layout.

    Every labelled layout is a distinct state and every frontier entry
    carries its whole path, so this runs well past ten minutes in CPython.
    It checks the path is a legal move sequence ending in the goal;
    minimality is covered by the near-goal boards.
    """
    solver = Solver(Klotski.initial())
    path = solver.solve()

    print(f"\n  {len(path) - 1} moves, {solver.metrics.states_visited} states, "
          f"{solver.metrics.computation_time_ms / 1000:.1f}s")
    assert path[0] == Klotski.initial()
    assert path[-1].is_final()
    assert not any(state.is_final() for state in path[:-1])
    for before, after in zip(path, path[1:]):
        assert is_single_legal_move(before, after)
