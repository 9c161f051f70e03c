"""
main.py
-------
Entry point: builds the GameLoop and runs it.

Usage:
    dodge-game                          # assets/ under the current directory
    dodge-game --assets /path/to/assets
    dodge-game --config my_game.json
"""

import sys
import argparse

from dodge_game.core.debug.debug_logger import DebugLogger
from dodge_game.core.runtime.game_loop import GameLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Dodge falling attacks and collect falling items")
    parser.add_argument("--assets", default=None,
                        help="Asset directory holding audio/ and image/ (overrides the config)")
    parser.add_argument("--config", default="game.json",
                        help="JSON config file or name to look up (default: game.json)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        game = GameLoop(config_file=args.config, asset_root=args.assets)
    except FileNotFoundError as e:
        DebugLogger.fail(f"Startup failed: {e}")
        DebugLogger.fail("Run from a directory containing assets/ or pass --assets PATH")
        return 1

    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
