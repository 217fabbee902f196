"""
Board basics: cell marks, the 3x3 grid, win descriptors and win detection.
Teaching notes:
- Cells are stored row-major in a flat list of 9 marks; (row, column) maps to row * 3 + column.
- X always starts. A "turn" is one accepted move.
- Win detection comes in two flavours: scoped to the lines through the last
  played cell (used by the state machine) and a full-board scan (used by search,
  where there is no last-move context).
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterator, List, Optional, Tuple

SIZE = 3
CELLS = SIZE * SIZE


class Mark(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY

    @property
    def symbol(self) -> str:
        return {Mark.EMPTY: '.', Mark.X: 'X', Mark.O: 'O'}[self]

    @classmethod
    def parse(cls, text: str) -> "Mark":
        """Parse a player mark from 'X'/'O' (any case) or '1'/'2'."""
        raw = text.strip().upper()
        if raw in ('X', '1'):
            return cls.X
        if raw in ('O', '2'):
            return cls.O
        raise ValueError(f"Unknown player mark: {text!r}")


class WinType(Enum):
    ROW = 'row'
    COLUMN = 'column'
    DIAGONAL = 'diagonal'
    REVERSE_DIAGONAL = 'reverse_diagonal'


@dataclass(frozen=True)
class WinInfo:
    kind: WinType
    # Row or column index; None for the diagonals.
    index: Optional[int] = None

    def cells(self) -> List[Tuple[int, int]]:
        """Coordinates of the winning line, for drawing it."""
        if self.kind is WinType.ROW:
            return [(self.index, c) for c in range(SIZE)]
        if self.kind is WinType.COLUMN:
            return [(r, self.index) for r in range(SIZE)]
        if self.kind is WinType.DIAGONAL:
            return [(i, i) for i in range(SIZE)]
        return [(i, SIZE - 1 - i) for i in range(SIZE)]


@dataclass(frozen=True)
class GameResult:
    """Terminal outcome. winner is Mark.EMPTY for a draw, and win is then None."""
    winner: Mark
    win: Optional[WinInfo] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is Mark.EMPTY


def in_bounds(row: int, column: int) -> bool:
    return (
        isinstance(row, int) and isinstance(column, int)
        and not isinstance(row, bool) and not isinstance(column, bool)
        and 0 <= row < SIZE and 0 <= column < SIZE
    )


class Board:
    """Fixed 3x3 grid of marks with bounds-checked (row, column) access."""

    __slots__ = ('_cells',)

    def __init__(self, cells: Optional[List[Mark]] = None) -> None:
        if cells is None:
            self._cells = [Mark.EMPTY] * CELLS
        else:
            if len(cells) != CELLS:
                raise ValueError(f"Board needs {CELLS} cells, got {len(cells)}")
            self._cells = [Mark(v) for v in cells]

    @staticmethod
    def _index(row: int, column: int) -> int:
        if not in_bounds(row, column):
            raise IndexError(f"Cell out of range: ({row}, {column})")
        return row * SIZE + column

    def __getitem__(self, pos: Tuple[int, int]) -> Mark:
        return self._cells[self._index(*pos)]

    def __setitem__(self, pos: Tuple[int, int], mark: Mark) -> None:
        self._cells[self._index(*pos)] = Mark(mark)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({self.serialize()!r})"

    def copy(self) -> "Board":
        return Board(self._cells)

    def swapped(self) -> "Board":
        """Copy with X and O exchanged."""
        return Board([m.opponent for m in self._cells])

    @contextmanager
    def placed(self, row: int, column: int, mark: Mark) -> Iterator["Board"]:
        """Temporarily place mark on an empty cell; the cell is cleared on exit."""
        idx = self._index(row, column)
        if self._cells[idx] is not Mark.EMPTY:
            raise ValueError(f"Cell ({row}, {column}) is occupied")
        self._cells[idx] = Mark(mark)
        try:
            yield self
        finally:
            self._cells[idx] = Mark.EMPTY

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [divmod(i, SIZE) for i, v in enumerate(self._cells) if v is Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        return self._cells.count(mark)

    def filled(self) -> int:
        return CELLS - self._cells.count(Mark.EMPTY)

    def is_full(self) -> bool:
        return Mark.EMPTY not in self._cells

    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        return tuple(tuple(self._cells[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE))

    def serialize(self) -> str:
        return ''.join(str(int(v)) for v in self._cells)

    @classmethod
    def deserialize(cls, text: str) -> "Board":
        raw = text.strip()
        if len(raw) != CELLS or any(c not in '012' for c in raw):
            raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
        return cls([Mark(int(c)) for c in raw])

    def render(self) -> str:
        return '\n'.join(' '.join(m.symbol for m in row) for row in self.rows())


def _line_owned(board: Board, cells, mark: Mark) -> bool:
    return all(board[r, c] is mark for r, c in cells)


def detect_win(board: Board, row: int, column: int, mark: Mark) -> Optional[WinInfo]:
    """Win through the just-played cell, checked Row > Column > Diagonal > ReverseDiagonal."""
    if _line_owned(board, [(row, c) for c in range(SIZE)], mark):
        return WinInfo(WinType.ROW, row)
    if _line_owned(board, [(r, column) for r in range(SIZE)], mark):
        return WinInfo(WinType.COLUMN, column)
    if row == column and _line_owned(board, WinInfo(WinType.DIAGONAL).cells(), mark):
        return WinInfo(WinType.DIAGONAL)
    if row + column == SIZE - 1 and _line_owned(board, WinInfo(WinType.REVERSE_DIAGONAL).cells(), mark):
        return WinInfo(WinType.REVERSE_DIAGONAL)
    return None


ALL_LINES = (
    [WinInfo(WinType.ROW, i) for i in range(SIZE)]
    + [WinInfo(WinType.COLUMN, i) for i in range(SIZE)]
    + [WinInfo(WinType.DIAGONAL), WinInfo(WinType.REVERSE_DIAGONAL)]
)


# Flat indices per line, same order as ALL_LINES; search calls find_winner at every node.
LINE_INDICES = [tuple(r * SIZE + c for r, c in line.cells()) for line in ALL_LINES]


def _line_owner(board: Board, line: WinInfo) -> Mark:
    cells = line.cells()
    first = board[cells[0]]
    if first is not Mark.EMPTY and _line_owned(board, cells, first):
        return first
    return Mark.EMPTY


def find_winner(board: Board) -> Tuple[Mark, Optional[WinInfo]]:
    """Full-board scan. Returns (Mark.EMPTY, None) when nobody has three in a row."""
    cells = board._cells
    for line, (a, b, c) in zip(ALL_LINES, LINE_INDICES):
        v = cells[a]
        if v is not Mark.EMPTY and v is cells[b] and v is cells[c]:
            return v, line
    return Mark.EMPTY, None


def is_valid_state(board: Board) -> bool:
    """Reachable from the empty board with X moving first."""
    x_count, o_count = board.count(Mark.X), board.count(Mark.O)
    if not (x_count == o_count or x_count == o_count + 1):
        return False
    owners = {_line_owner(board, line) for line in ALL_LINES} - {Mark.EMPTY}
    if len(owners) > 1:
        return False
    if Mark.X in owners and x_count != o_count + 1:
        return False
    if Mark.O in owners and x_count != o_count:
        return False
    return True


def side_to_move(board: Board) -> Mark:
    return Mark.X if board.count(Mark.X) == board.count(Mark.O) else Mark.O
