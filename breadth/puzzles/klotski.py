"""
Klotski Module - The classic 4x5 sliding-block puzzle as a Puzzle.

Ten labelled pieces and two empty cells share a 4-wide, 5-tall board.
A move slides one piece one cell north, south, west or east. The puzzle is
solved when the 2x2 piece S0 covers the middle two cells of the bottom two
rows.

Moves are identified by a linear index, piece + direction offset, and the
legal moves of a board are tracked in a 40-bit bitset.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple

from ..solver.puzzle import Puzzle

WIDTH = 4
HEIGHT = 5

N_PIECES = 10
N_DIRECTIONS = 4


class Piece(IntEnum):
    """
    Piece labels.

    C*: 1x1 squares, H0: 2x1 horizontal bar, S0: 2x2 target block,
    V*: 1x2 vertical bars, X0: empty cell (not a piece).
    """
    C0 = 0
    C1 = 1
    C2 = 2
    C3 = 3
    H0 = 4
    S0 = 5
    V0 = 6
    V1 = 7
    V2 = 8
    V3 = 9
    X0 = -1


class Direction(IntEnum):
    """Slide directions. Values are offsets into the move index (index * N_PIECES)."""
    NORTH = 0 * N_PIECES
    SOUTH = 1 * N_PIECES
    WEST = 2 * N_PIECES
    EAST = 3 * N_PIECES

    def step(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """
        Neighbouring cell in this direction.

        Args:
            x: Column index
            y: Row index

        Returns:
            (x, y) of the neighbour, or None if it would leave the board
        """
        if self is Direction.NORTH:
            return (x, y - 1) if y > 0 else None
        if self is Direction.SOUTH:
            return (x, y + 1) if y < HEIGHT - 1 else None
        if self is Direction.WEST:
            return (x - 1, y) if x > 0 else None
        return (x + 1, y) if x < WIDTH - 1 else None


PIECES: Tuple[Piece, ...] = tuple(p for p in Piece if p is not Piece.X0)
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True, order=True)
class Move:
    """
    Slide one piece one cell.

    Attributes:
        piece: Piece to move (never X0)
        direction: Direction to slide it
    """
    piece: Piece
    direction: Direction

    @property
    def index(self) -> int:
        """Linear index in [0, N_PIECES * N_DIRECTIONS)."""
        return int(self.piece) + int(self.direction)

    @classmethod
    def from_index(cls, n: int) -> 'Move':
        return cls(piece=PIECES[n % N_PIECES], direction=DIRECTIONS[n // N_PIECES])

    def __str__(self) -> str:
        return f"{self.piece.name} {self.direction.name.lower()}"


class MoveSet:
    """
    Bitset of moves. A set bit means the move is disallowed.

    Starts with every move allowed; iterating yields the allowed moves in
    index order (all north moves by piece, then south, west, east).
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0):
        self._bits = bits

    def remove(self, move: Move) -> None:
        self._bits |= 1 << move.index

    def is_allowed(self, move: Move) -> bool:
        return self._bits & (1 << move.index) == 0

    def __iter__(self) -> Iterator[Move]:
        for n in range(N_PIECES * N_DIRECTIONS):
            if not self._bits & (1 << n):
                yield Move.from_index(n)

    def __len__(self) -> int:
        total = N_PIECES * N_DIRECTIONS
        return total - bin(self._bits & ((1 << total) - 1)).count("1")

    def __eq__(self, other):
        if not isinstance(other, MoveSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self):
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"MoveSet({[str(m) for m in self]})"


Grid = Tuple[Tuple[Piece, ...], ...]


@dataclass(frozen=True, order=True)
class Klotski(Puzzle):
    """
    Immutable Klotski board.

    Uses tuple-of-tuples for hashability and ordering, so boards work with
    both the "hash" and "tree" visited-set backends.

    Attributes:
        grid: HEIGHT rows of WIDTH pieces, X0 for empty cells
    """
    grid: Grid

    @classmethod
    def initial(cls) -> 'Klotski':
        """
        The classic starting layout:

            V0 S0 S0 V1
            V0 S0 S0 V1
            V2 H0 H0 V3
            V2 C0 C1 V3
            C2 .. .. C3
        """
        return INITIAL_BOARD

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Klotski':
        """
        Create a board from nested rows of piece values.

        Args:
            rows: HEIGHT rows of WIDTH Piece members or their int values

        Returns:
            Klotski instance

        Raises:
            ValueError: If dimensions are wrong or a value is not a piece
        """
        if len(rows) != HEIGHT:
            raise ValueError(f"Klotski board needs {HEIGHT} rows, got {len(rows)}")
        grid = []
        for y, row in enumerate(rows):
            if len(row) != WIDTH:
                raise ValueError(f"Row {y} needs {WIDTH} cells, got {len(row)}")
            grid.append(tuple(Piece(value) for value in row))
        return cls(grid=tuple(grid))

    def is_final(self) -> bool:
        return (self.grid[3][1] == Piece.S0
                and self.grid[3][2] == Piece.S0
                and self.grid[4][1] == Piece.S0
                and self.grid[4][2] == Piece.S0)

    def get_possible_moves(self) -> MoveSet:
        """
        Find every legal slide.

        A move is ruled out as soon as any cell of its piece would leave
        the board or land on a cell that is neither empty nor the same piece.

        Returns:
            MoveSet of legal moves
        """
        result = MoveSet()

        for y, row in enumerate(self.grid):
            for x, piece in enumerate(row):
                if piece == Piece.X0:
                    continue
                for direction in DIRECTIONS:
                    target = direction.step(x, y)
                    if target is None:
                        result.remove(Move(piece, direction))
                        continue
                    nx, ny = target
                    occupant = self.grid[ny][nx]
                    if not (occupant == Piece.X0 or occupant == piece):
                        result.remove(Move(piece, direction))

        return result

    def make_move(self, move: Move) -> 'Klotski':
        """
        Slide a piece one cell.

        Args:
            move: A move from get_possible_moves()

        Returns:
            New Klotski board. Original board is unchanged.
        """
        new_grid: List[List[Piece]] = [[Piece.X0] * WIDTH for _ in range(HEIGHT)]

        for y, row in enumerate(self.grid):
            for x, piece in enumerate(row):
                if piece == Piece.X0:
                    continue
                if piece == move.piece:
                    target = move.direction.step(x, y)
                    if target is None:
                        raise ValueError(f"Illegal move {move}: {piece.name} would leave the board")
                    nx, ny = target
                    new_grid[ny][nx] = piece
                else:
                    new_grid[y][x] = piece

        return Klotski(grid=tuple(tuple(row) for row in new_grid))

    def to_list(self) -> List[List[int]]:
        """Convert to mutable 2D list of int piece values."""
        return [[int(piece) for piece in row] for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(".." if piece == Piece.X0 else piece.name for piece in row)
            for row in self.grid
        )


_V0, _V1, _V2, _V3 = Piece.V0, Piece.V1, Piece.V2, Piece.V3
_S0, _H0, _X0 = Piece.S0, Piece.H0, Piece.X0

INITIAL_BOARD = Klotski(grid=(
    (_V0, _S0, _S0, _V1),
    (_V0, _S0, _S0, _V1),
    (_V2, _H0, _H0, _V3),
    (_V2, Piece.C0, Piece.C1, _V3),
    (Piece.C2, _X0, _X0, Piece.C3),
))
