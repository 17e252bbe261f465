"""
Command-line entry point: play one game in the terminal.

Values resolve with precedence: CLI flag -> JSON config (--config) -> SETTINGS.
Exit status is 0 when the game ends, is quit, or input runs out; 2 on an
internal error.
"""
from __future__ import annotations

import argparse
import json
import logging

from rich.traceback import install

from .config import SETTINGS, _as_bool
from .console import Presenter
from .errors import InternalError
from .game import GameConfig, GameRunner

EXIT_OK = 0
EXIT_INTERNAL_ERROR = 2


def load_json_config(path: str) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logging.getLogger("cellblock").error("Failed to read config %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="cellblock", description="Two-player light-cycle board game.")
    ap.add_argument("--config", default=None, help="Optional JSON config file to load defaults from.")
    ap.add_argument("--size", type=int, default=None, help="Board size N for an NxN board (1-26)")
    ap.add_argument("--ignore-case", action="store_true", default=None, help="Accept lowercase column letters")
    ap.add_argument("--quit-word", default=None, help="Input that ends the game early")
    ap.add_argument("--game-log", action="store_true", default=None, help="Log every applied move at INFO")
    ap.add_argument("--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)")
    return ap


def main(argv: list[str] | None = None, presenter: Presenter | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    cfg_dict = load_json_config(args.config) if args.config else {}

    def pick(key, default=None):
        v = getattr(args, key, None)
        if v is not None:
            return v
        if cfg_dict.get(key) is not None:
            return cfg_dict[key]
        return default

    log_level = str(pick("log_level", default=SETTINGS.log_level)).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.INFO), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("cellblock")
    install(show_locals=False)

    try:
        gcfg = GameConfig(
            board_size=int(pick("size", default=SETTINGS.board_size)),
            ignore_case=_as_bool(pick("ignore_case", default=SETTINGS.ignore_case)),
            quit_word=pick("quit_word", default=SETTINGS.quit_word),
            game_log=_as_bool(pick("game_log", default=False)),
        )
    except ValueError as e:
        ap.error(str(e))

    runner = GameRunner(cfg=gcfg, presenter=presenter)
    log.info("Starting game: size=%dx%d ignore_case=%s", gcfg.board_size, gcfg.board_size, gcfg.ignore_case)
    try:
        result = runner.play()
    except InternalError:
        log.exception("Internal error; aborting game")
        return EXIT_INTERNAL_ERROR
    log.info("Result: %s (%s) metrics=%s", result, runner.termination_reason, runner.metrics())
    return EXIT_OK
