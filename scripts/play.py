#!/usr/bin/env python3
"""
Robots - Play Script

Play the game in the terminal or show the highscore table.

Usage:
    python scripts/play.py -u alice                 # Play as alice
    python scripts/play.py -u alice -p scores.txt   # Use another highscore file
    python scripts/play.py -s                       # Show highscores and exit
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from robots_game.controls import KeyboardInput
from robots_game.controls.keyboard import parse_bindings
from robots_game.game import GameSession, HighscoreStore, RobotsGame
from robots_game.utils import load_config, setup_logging
from robots_game.utils.config_loader import Config
from robots_game.visualization import TerminalDisplay

logger = logging.getLogger("robots.play")


def parse_args(argv: Optional[List[str]] = None) -> Tuple[argparse.ArgumentParser, argparse.Namespace]:
    """Parse command line arguments, returning the parser for --help output."""
    parser = argparse.ArgumentParser(
        description="Robots - dodge the robots and make them crash",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py -u alice                  # Play as alice
  python scripts/play.py -u alice -p scores.txt    # Custom highscore file
  python scripts/play.py -s                        # Show highscores
"""
    )

    parser.add_argument(
        "-u", "--username",
        type=str,
        default=None,
        help="Name recorded with your score"
    )
    parser.add_argument(
        "-p", "--path",
        type=str,
        default=None,
        help="Highscore file (default: highscore.txt)"
    )
    parser.add_argument(
        "-s", "--show-highscore",
        action="store_true",
        help="Show the highscore table and exit"
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to a YAML config file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible game"
    )
    parser.add_argument(
        "--no-splash",
        action="store_true",
        help="Skip the intro screen"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: from config)"
    )

    return parser, parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict:
    """Config overrides taken from the command line."""
    overrides: Dict = {}
    if args.path:
        overrides.setdefault("highscore", {})["path"] = args.path
    if args.no_splash:
        overrides.setdefault("display", {})["show_splash"] = False
    if args.log_level:
        overrides.setdefault("logging", {})["level"] = args.log_level
    return overrides


def show_highscores(config: Config, display: TerminalDisplay) -> None:
    """Print the top highscores."""
    store = HighscoreStore(config.highscore.path)
    store.ensure_exists()
    display.show_highscores(store.top(config.highscore.top_n))


def play(config: Config, username: str, seed: Optional[int]) -> None:
    """Play until the player quits or declines a retry."""
    store = HighscoreStore(config.highscore.path)
    store.ensure_exists()

    display = TerminalDisplay(color=config.display.color)
    controls = KeyboardInput(bindings=config.controls.bindings)

    if config.display.show_splash:
        display.show_splash()
        controls.wait_for_key()

    game = RobotsGame(config.game, username=username, seed=seed)
    session = GameSession(
        game, display, controls,
        highscores=store,
        top_n=config.highscore.top_n,
    )
    logger.info(f"Starting session for '{username}' (seed={seed})")
    session.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser, args = parse_args(argv)

    if not args.username and not args.show_highscore:
        parser.print_help()
        return 0

    config = load_config(args.config, build_overrides(args))
    setup_logging(config.logging)

    try:
        parse_bindings(config.controls.bindings or {})
    except ValueError as e:
        print(f"Error: invalid key binding in config: {e}")
        return 1

    try:
        if args.show_highscore:
            show_highscores(config, TerminalDisplay(color=config.display.color))
        else:
            play(config, args.username, args.seed)
    except KeyboardInterrupt:
        print("\nInterrupted.")
    except OSError as e:
        logger.error(f"Highscore file error: {e}")
        print(f"Error: could not use highscore file '{config.highscore.path}': {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
