"""
Referee: the game state machine.

- Owns the GameState and is the only thing that mutates it.
- apply()/submit() validate a move, block the mover's previous cell, occupy
  the new one, then either hand the turn over or record an outcome.
- A rejected move leaves the state untouched and does not consume the turn.
"""
from __future__ import annotations

import logging

from .errors import GameAlreadyFinished
from .grid import CellState, PlayerId, Position
from .move_validator import MoveValidator
from .notation import position_label
from .state import GameState, MoveRecord, Outcome, Phase


class Referee:
    def __init__(self, size: int, ignore_case: bool = False):
        self.log = logging.getLogger("Referee")
        self.validator = MoveValidator(size, ignore_case=ignore_case)
        self.state = GameState.new(size)

    # ---------------- Read-only views -----------------
    @property
    def grid(self):
        return self.state.grid

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def current_player(self) -> PlayerId:
        return self.state.current_player

    @property
    def outcome(self) -> Outcome | None:
        return self.state.outcome

    @property
    def move_count(self) -> int:
        return len(self.state.moves)

    def position_of(self, player: PlayerId) -> Position | None:
        return self.state.position_of(player)

    def blocked_positions(self) -> set[Position]:
        return self.state.blocked_positions()

    def status(self) -> str:
        """"*" while in progress, otherwise the outcome value."""
        return self.state.outcome.value if self.state.outcome else "*"

    # ---------------- Move Application -----------------
    def submit(self, token: str) -> MoveRecord:
        """Parse a raw token and apply it for the player to move."""
        if self.state.is_finished:
            raise GameAlreadyFinished(f"the game is over ({self.status()})")
        return self.apply(self.validator.parse(token))

    def apply(self, pos: Position) -> MoveRecord:
        state = self.state
        if state.is_finished:
            raise GameAlreadyFinished(f"the game is over ({self.status()})")
        check = self.validator.validate_move(state, pos)
        if not check.is_ok:
            raise check.to_error()

        player = state.current_player
        previous = state.positions[player]
        if previous is not None:
            state.grid.set(previous, CellState.BLOCKED)
        state.grid.set(pos, CellState.occupied_by(player))
        state.positions[player] = pos
        record = MoveRecord(number=len(state.moves) + 1, player=player, position=pos, blocked=previous)
        state.moves.append(record)
        self.log.debug(
            "Move %d %s -> %s (blocked %s)",
            record.number, player.label, position_label(pos),
            position_label(previous) if previous else "-",
        )

        opponent = player.opponent()
        state.current_player = opponent
        if self.validator.has_legal_move(state):
            return record
        # Destinations are shared, so the mover is stuck too. An opponent that
        # never reached the board (1x1) did not lose a contest: draw.
        if state.positions[opponent] is None:
            state.outcome = Outcome.DRAW
        else:
            state.outcome = Outcome.win_for(player)
        self.log.info("Game finished after %d moves: %s", record.number, state.outcome.value)
        return record
