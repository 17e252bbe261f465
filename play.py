"""
PLAY.py: start a two-player game in this terminal.
Usage: python play.py [--size 8] [--ignore-case] [--config game.json] [--log-level DEBUG]
Env knobs: CELLBLOCK_BOARD_SIZE, CELLBLOCK_IGNORE_CASE, CELLBLOCK_QUIT_WORD, CELLBLOCK_LOG_LEVEL.
"""
import os
import sys

# Ensure src/ is importable without an install
SRC = os.path.join(os.path.abspath(os.path.dirname(__file__)), "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from cellblock.cli import main


if __name__ == "__main__":
    sys.exit(main())
