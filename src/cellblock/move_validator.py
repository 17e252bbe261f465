"""
Move validation: token -> Position (parsing) and Position -> legality.

Parsing and legality are separate steps so each failure carries its own
reason code and message:
- parse(): MalformedInput / UnknownColumn / RowOutOfRange (raised).
- validate_move(): MoveCheck.ok() or MoveCheck.rejected(reason, message).

Any empty cell on the board is a legal destination; there is no adjacency
rule.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import (
    CellBlocked,
    CellOccupiedByOpponent,
    CellOccupiedBySelf,
    IllegalMove,
    OutOfBounds,
)
from .grid import CellState, PlayerId, Position
from .notation import parse_position, position_label
from .state import GameState


class RejectReason(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_BLOCKED = "cell_blocked"
    CELL_OCCUPIED_BY_OPPONENT = "cell_occupied_by_opponent"
    CELL_OCCUPIED_BY_SELF = "cell_occupied_by_self"


_ERRORS: dict[RejectReason, type[IllegalMove]] = {
    RejectReason.OUT_OF_BOUNDS: OutOfBounds,
    RejectReason.CELL_BLOCKED: CellBlocked,
    RejectReason.CELL_OCCUPIED_BY_OPPONENT: CellOccupiedByOpponent,
    RejectReason.CELL_OCCUPIED_BY_SELF: CellOccupiedBySelf,
}


@dataclass(frozen=True)
class MoveCheck:
    """Result of validate_move()."""
    is_ok: bool
    reason: RejectReason | None = None
    message: str = ""

    @staticmethod
    def ok() -> "MoveCheck":
        return MoveCheck(is_ok=True)

    @staticmethod
    def rejected(reason: RejectReason, message: str) -> "MoveCheck":
        return MoveCheck(is_ok=False, reason=reason, message=message)

    def to_error(self) -> IllegalMove:
        if self.reason is None:
            raise ValueError("accepted move has no error")
        return _ERRORS[self.reason](self.message)


class MoveValidator:
    def __init__(self, size: int, ignore_case: bool = False):
        self.size = size
        self.ignore_case = ignore_case

    def parse(self, token: str) -> Position:
        return parse_position(token, self.size, ignore_case=self.ignore_case)

    def validate_move(self, state: GameState, pos: Position, player: PlayerId | None = None) -> MoveCheck:
        """Check pos for `player` (default: whoever is to move). Never mutates state."""
        player = player or state.current_player
        grid = state.grid
        if not grid.in_bounds(pos):
            return MoveCheck.rejected(
                RejectReason.OUT_OF_BOUNDS,
                f"{pos} is outside the {grid.size}x{grid.size} board",
            )
        label = position_label(pos)
        cell = grid.get(pos)
        if cell is CellState.BLOCKED:
            return MoveCheck.rejected(RejectReason.CELL_BLOCKED, f"{label} is blocked")
        if cell.owner is player:
            return MoveCheck.rejected(RejectReason.CELL_OCCUPIED_BY_SELF, f"you are already on {label}")
        if cell.owner is not None:
            return MoveCheck.rejected(
                RejectReason.CELL_OCCUPIED_BY_OPPONENT,
                f"{label} is occupied by {cell.owner.label}",
            )
        return MoveCheck.ok()

    def legal_moves(self, state: GameState) -> list[Position]:
        """Every empty cell, row-major."""
        return state.grid.empty_positions()

    def has_legal_move(self, state: GameState) -> bool:
        return state.grid.count(CellState.EMPTY) > 0


__all__ = ["MoveValidator", "MoveCheck", "RejectReason"]
