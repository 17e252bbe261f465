"""
GameState: everything the referee tracks between turns.

- grid, each player's current position (None before their first move),
  whose turn it is, the outcome once the game ends, and the move history.
- Mutated only by Referee.apply(); read-only after an outcome is recorded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .grid import CellState, Grid, PlayerId, Position


class Outcome(Enum):
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"

    @classmethod
    def win_for(cls, player: PlayerId) -> "Outcome":
        return cls.PLAYER_ONE_WINS if player is PlayerId.PLAYER_ONE else cls.PLAYER_TWO_WINS

    @property
    def winner(self) -> PlayerId | None:
        if self is Outcome.PLAYER_ONE_WINS:
            return PlayerId.PLAYER_ONE
        if self is Outcome.PLAYER_TWO_WINS:
            return PlayerId.PLAYER_TWO
        return None


class Phase(Enum):
    AWAITING_PLAYER_ONE = "awaiting_player_one"
    AWAITING_PLAYER_TWO = "awaiting_player_two"
    FINISHED = "finished"


@dataclass(frozen=True)
class MoveRecord:
    number: int                     # 1-based, counts applied moves only
    player: PlayerId
    position: Position
    blocked: Position | None        # cell the player left, None on a first move


@dataclass
class GameState:
    grid: Grid
    positions: dict[PlayerId, Position | None] = field(
        default_factory=lambda: {PlayerId.PLAYER_ONE: None, PlayerId.PLAYER_TWO: None}
    )
    current_player: PlayerId = PlayerId.PLAYER_ONE
    outcome: Outcome | None = None
    moves: list[MoveRecord] = field(default_factory=list)

    @classmethod
    def new(cls, size: int) -> "GameState":
        return cls(grid=Grid(size))

    @property
    def is_finished(self) -> bool:
        return self.outcome is not None

    @property
    def phase(self) -> Phase:
        if self.outcome is not None:
            return Phase.FINISHED
        if self.current_player is PlayerId.PLAYER_ONE:
            return Phase.AWAITING_PLAYER_ONE
        return Phase.AWAITING_PLAYER_TWO

    def position_of(self, player: PlayerId) -> Position | None:
        return self.positions.get(player)

    def blocked_positions(self) -> set[Position]:
        return {p for p in self.grid.positions() if self.grid.get(p) is CellState.BLOCKED}

    def copy(self) -> "GameState":
        return GameState(
            grid=self.grid.copy(),
            positions=dict(self.positions),
            current_player=self.current_player,
            outcome=self.outcome,
            moves=list(self.moves),
        )
