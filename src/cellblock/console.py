"""
Presentation adapter: board rendering and line input.

- Presenter is the seam between the game loop and the terminal.
- TerminalPresenter renders the board as a rich table and reads from stdin.
- ScriptedPresenter replays fixed tokens and records what would be shown.
"""
from __future__ import annotations

from typing import Iterable, Protocol

from rich.console import Console
from rich.table import Table

from .errors import CellblockError, RenderError
from .grid import CellState, Grid, PlayerId
from .notation import column_label, row_label
from .state import GameState, Outcome

CELL_SYMBOLS: dict[CellState, str] = {
    CellState.EMPTY: "",
    CellState.PLAYER_ONE: "X",
    CellState.PLAYER_TWO: "O",
    CellState.BLOCKED: "~",
}


def cell_symbol(state: CellState) -> str:
    try:
        return CELL_SYMBOLS[state]
    except (KeyError, TypeError):
        raise RenderError(f"unknown cell state {state!r}") from None


def build_table(grid: Grid) -> Table:
    """Header row of column letters, header column of row numbers."""
    table = Table(show_lines=True)
    table.add_column("", justify="right")
    for c in range(grid.size):
        table.add_column(column_label(c), justify="center")
    for r, row in enumerate(grid.rows()):
        table.add_row(row_label(r), *(cell_symbol(cell) for cell in row))
    return table


def outcome_text(outcome: Outcome) -> str:
    if outcome.winner is not None:
        return f"{outcome.winner.label} wins!"
    return "It's a draw."


class Presenter(Protocol):
    def render(self, grid: Grid) -> None: ...

    def read_move(self, player: PlayerId) -> str: ...

    def show_error(self, player: PlayerId, error: CellblockError) -> None: ...

    def show_outcome(self, state: GameState) -> None: ...


class TerminalPresenter:
    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def render(self, grid: Grid) -> None:
        self.console.print(build_table(grid))

    def read_move(self, player: PlayerId) -> str:
        """Prompt for one line; EOFError/KeyboardInterrupt propagate to the caller."""
        return self.console.input(f"[{player.label}] Where would you like to move to?: ", markup=False)

    def show_error(self, player: PlayerId, error: CellblockError) -> None:
        self.console.print(f"Error: {error}", style="red", markup=False)

    def show_outcome(self, state: GameState) -> None:
        if state.outcome is None:
            return
        self.console.print(
            f"Game over after {len(state.moves)} moves. {outcome_text(state.outcome)}",
            style="bold",
            markup=False,
        )


class ScriptedPresenter:
    """Feeds a fixed list of tokens; raises EOFError once they run out."""

    def __init__(self, tokens: Iterable[str]):
        self._tokens = list(tokens)
        self.renders: list[tuple[tuple[CellState, ...], ...]] = []
        self.prompts: list[PlayerId] = []
        self.errors: list[tuple[PlayerId, str]] = []
        self.outcome: Outcome | None = None

    def render(self, grid: Grid) -> None:
        # Build the table so unknown cell states surface here as in the terminal.
        build_table(grid)
        self.renders.append(grid.rows())

    def read_move(self, player: PlayerId) -> str:
        self.prompts.append(player)
        if not self._tokens:
            raise EOFError("script exhausted")
        return self._tokens.pop(0)

    def show_error(self, player: PlayerId, error: CellblockError) -> None:
        self.errors.append((player, error.reason))

    def show_outcome(self, state: GameState) -> None:
        self.outcome = state.outcome
