"""
Single-game runner and config.

- GameConfig: knobs for board size, case policy, quit word, and console move logging.
- GameRunner: drives one game through a Presenter.
  - Renders, reads a token, hands it to the Referee, re-prompts the same
    player on a recoverable error, and stops on a result or a quit request.
  - Keeps per-turn records and exposes metrics() at the end.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging
import time

from .config import SETTINGS
from .console import Presenter, TerminalPresenter
from .errors import CellblockError, GameAlreadyFinished
from .notation import MAX_BOARD_SIZE, position_label
from .referee import Referee


@dataclass
class GameConfig:
    board_size: int = field(default_factory=lambda: SETTINGS.board_size)
    ignore_case: bool = field(default_factory=lambda: SETTINGS.ignore_case)
    quit_word: str | None = field(default_factory=lambda: SETTINGS.quit_word)
    # Console logging of moves as they happen
    game_log: bool = False

    def __post_init__(self):
        if not 1 <= self.board_size <= MAX_BOARD_SIZE:
            raise ValueError(f"board_size must be between 1 and {MAX_BOARD_SIZE}, got {self.board_size}")


class GameRunner:
    def __init__(self, cfg: GameConfig | None = None, presenter: Presenter | None = None):
        self.log = logging.getLogger("GameRunner")
        self.cfg = cfg or GameConfig()
        self.presenter = presenter or TerminalPresenter()
        self.ref = Referee(self.cfg.board_size, ignore_case=self.cfg.ignore_case)
        self.records: list[dict] = []  # one dict per submitted token
        self.termination_reason: str | None = None
        self.start_ts = time.time()

    def _is_quit(self, raw: str) -> bool:
        q = self.cfg.quit_word
        return bool(q) and raw.strip().lower() == q.lower()

    def step(self, raw: str) -> bool:
        """Submit one raw token for the player to move. Returns True if applied.

        Recoverable errors are reported to the same player and leave the
        turn unchanged; GameAlreadyFinished propagates.
        """
        player = self.ref.current_player
        try:
            rec = self.ref.submit(raw)
        except GameAlreadyFinished:
            raise
        except CellblockError as e:
            self.records.append({"player": player.value, "raw": raw, "ok": False, "reason": e.reason})
            self.log.info("[%s] rejected %r: %s (%s)", player.label, raw, e, e.reason)
            self.presenter.show_error(player, e)
            return False
        self.records.append({"player": player.value, "raw": raw, "ok": True, "move": position_label(rec.position)})
        if self.cfg.game_log:
            self.log.info("[move %d] %s: %s", rec.number, player.label, position_label(rec.position))
        else:
            self.log.debug("Move %d %s %s", rec.number, player.label, position_label(rec.position))
        return True

    def play(self) -> str:
        """Run the loop until a result or a quit request; return the referee status."""
        self.presenter.render(self.ref.grid)
        while self.ref.outcome is None:
            player = self.ref.current_player
            try:
                raw = self.presenter.read_move(player)
            except EOFError:
                self.termination_reason = "end_of_input"
                break
            except KeyboardInterrupt:
                self.termination_reason = "interrupted"
                break
            if self._is_quit(raw):
                self.termination_reason = "quit"
                break
            if self.step(raw):
                self.presenter.render(self.ref.grid)

        if self.ref.outcome is not None:
            self.termination_reason = "finished"
            self.presenter.show_outcome(self.ref.state)
        else:
            self.log.info("Game stopped (%s) after %d moves", self.termination_reason, self.ref.move_count)
        return self.ref.status()

    def metrics(self) -> dict:
        rejected = Counter(r["reason"] for r in self.records if not r["ok"])
        return {
            "result": self.ref.status(),
            "termination_reason": self.termination_reason,
            "board_size": self.cfg.board_size,
            "moves": self.ref.move_count,
            "blocked": len(self.ref.blocked_positions()),
            "rejected_inputs": sum(rejected.values()),
            "rejected_by_reason": dict(rejected),
            "wall_time_s": round(time.time() - self.start_ts, 3),
        }
