"""
Grid: the N×N board of cell states.

- PlayerId / CellState / Position are the shared value types.
- Grid stores one CellState per cell and bounds-checks every access.
- The one-way EMPTY -> occupied -> BLOCKED rule is the caller's precondition;
  Referee enforces it, Grid does not.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .errors import OutOfBounds


class PlayerId(Enum):
    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"

    def opponent(self) -> "PlayerId":
        return PlayerId.PLAYER_TWO if self is PlayerId.PLAYER_ONE else PlayerId.PLAYER_ONE

    @property
    def label(self) -> str:
        return "Player One" if self is PlayerId.PLAYER_ONE else "Player Two"


class CellState(Enum):
    EMPTY = "empty"
    PLAYER_ONE = "player_one"
    PLAYER_TWO = "player_two"
    BLOCKED = "blocked"

    @classmethod
    def occupied_by(cls, player: PlayerId) -> "CellState":
        return cls.PLAYER_ONE if player is PlayerId.PLAYER_ONE else cls.PLAYER_TWO

    @property
    def owner(self) -> PlayerId | None:
        if self is CellState.PLAYER_ONE:
            return PlayerId.PLAYER_ONE
        if self is CellState.PLAYER_TWO:
            return PlayerId.PLAYER_TWO
        return None


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class Grid:
    """Square board of CellState, row-major."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        self.size = size
        self._cells: list[list[CellState]] = [[CellState.EMPTY] * size for _ in range(size)]

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.size and 0 <= pos.col < self.size

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfBounds(f"{pos} is outside the {self.size}x{self.size} board")

    def get(self, pos: Position) -> CellState:
        self._check(pos)
        return self._cells[pos.row][pos.col]

    def set(self, pos: Position, state: CellState) -> None:
        self._check(pos)
        self._cells[pos.row][pos.col] = state

    def positions(self) -> Iterator[Position]:
        for r in range(self.size):
            for c in range(self.size):
                yield Position(r, c)

    def empty_positions(self) -> list[Position]:
        return [p for p in self.positions() if self._cells[p.row][p.col] is CellState.EMPTY]

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self._cells)

    def rows(self) -> tuple[tuple[CellState, ...], ...]:
        """Read-only snapshot for renderers."""
        return tuple(tuple(row) for row in self._cells)

    def copy(self) -> "Grid":
        g = Grid(self.size)
        g._cells = [list(row) for row in self._cells]
        return g

    def __repr__(self) -> str:
        return f"Grid(size={self.size}, empty={self.count(CellState.EMPTY)}, blocked={self.count(CellState.BLOCKED)})"
