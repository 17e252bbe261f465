"""
Error taxonomy for cellblock.

- InputError: the raw token could not be turned into a board position.
- IllegalMove: the position is well formed but not a legal destination.
- GameAlreadyFinished / InternalError: not retryable.

Every error carries a stable `reason` code used in logs and metrics.
"""
from __future__ import annotations


class CellblockError(Exception):
    reason = "error"
    recoverable = True

    def __init__(self, message: str | None = None):
        super().__init__(message or self.reason.replace("_", " "))

    @property
    def message(self) -> str:
        return str(self)


# ---------------- Parse errors -----------------
class InputError(CellblockError):
    reason = "input_error"


class MalformedInput(InputError):
    reason = "malformed_input"


class UnknownColumn(InputError):
    reason = "unknown_column"


class RowOutOfRange(InputError):
    reason = "row_out_of_range"


# ---------------- Validation errors -----------------
class IllegalMove(CellblockError):
    reason = "illegal_move"


class OutOfBounds(IllegalMove):
    reason = "out_of_bounds"


class CellBlocked(IllegalMove):
    reason = "cell_blocked"


class CellOccupiedByOpponent(IllegalMove):
    reason = "cell_occupied_by_opponent"


class CellOccupiedBySelf(IllegalMove):
    reason = "cell_occupied_by_self"


# ---------------- Fatal -----------------
class GameAlreadyFinished(CellblockError):
    reason = "game_already_finished"
    recoverable = False


class InternalError(CellblockError):
    reason = "internal_error"
    recoverable = False


class RenderError(InternalError):
    """A cell holds a value the renderer has no symbol for."""


__all__ = [
    "CellblockError",
    "InputError",
    "MalformedInput",
    "UnknownColumn",
    "RowOutOfRange",
    "IllegalMove",
    "OutOfBounds",
    "CellBlocked",
    "CellOccupiedByOpponent",
    "CellOccupiedBySelf",
    "GameAlreadyFinished",
    "InternalError",
    "RenderError",
]
