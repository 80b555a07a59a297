"""
2048 Engine CLI.

Entry point for playing games against the engine and inspecting boards.

Usage:
    python -m lib2048 play [--games N] [--seed S] [--config PATH]
    python -m lib2048 show <board.json>
    python -m lib2048 config --output <config.yaml>
"""

import argparse
import json
import logging
import random
import statistics
import sys
from pathlib import Path

from lib2048.agent import GameState
from lib2048.board import Board, MalformedBoardError
from lib2048.config import EngineConfig, load_config, save_config
from lib2048.text import print_grid
from lib2048.user import RandomUser


logger = logging.getLogger("lib2048")


def cmd_play(args):
    """Play games with a random player and print a summary.

    Args:
        args: Parsed command line arguments
    """
    if args.config:
        try:
            config = load_config(args.config)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error loading config: {e}")
            sys.exit(1)
    else:
        config = EngineConfig()

    seed = args.seed if args.seed is not None else config.seed
    rng = random.Random(seed)

    results = []
    for game_idx in range(args.games):
        board = Board.from_config(config, rng=random.Random(rng.getrandbits(32)))
        user = RandomUser(rng=random.Random(rng.getrandbits(32)), max_moves=args.max_moves)
        user.bind(board)
        result = user.start()
        results.append(result)

        logger.info(
            "Game %d: score=%d max_tile=%d moves=%d state=%s",
            game_idx + 1, result.score, result.max_tile_display,
            result.moves, result.state.name,
        )
        if args.show:
            print(f"\nGame {game_idx + 1}: {result.state.name}, score {result.score}")
            print_grid(board.get_cells())

    scores = [r.score for r in results]
    wins = sum(1 for r in results if r.state == GameState.WIN)

    print(f"\nSummary ({len(results)} games):")
    print(f"  Mean score: {statistics.mean(scores):.1f}")
    print(f"  Best score: {max(scores)}")
    print(f"  Best tile: {max(r.max_tile_display for r in results)}")
    print(f"  Wins: {wins}/{len(results)}")


def cmd_show(args):
    """Print a serialized board read from a JSON file.

    Args:
        args: Parsed command line arguments
    """
    path = Path(args.board)
    if not path.exists():
        print(f"Error: Board file not found: {args.board}")
        sys.exit(1)

    try:
        with open(path, 'r') as f:
            board = Board.deserialize(json.load(f))
    except (json.JSONDecodeError, MalformedBoardError) as e:
        print(f"Error reading board: {e}")
        sys.exit(1)

    print_grid(board.get_cells())
    print(f"Score: {board.get_score()}")
    print(f"State: {board.get_game_state().name}")


def cmd_config(args):
    """Write the default engine configuration.

    Args:
        args: Parsed command line arguments
    """
    save_config(EngineConfig(), args.output)
    print(f"Saved default config to: {args.output}")


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="lib2048",
        description="2048 Board Engine",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # play command
    play_parser = subparsers.add_parser(
        "play",
        help="Play games with a random player",
    )
    play_parser.add_argument(
        "--games",
        type=int,
        default=1,
        help="Number of games to play (default: 1)",
    )
    play_parser.add_argument(
        "--seed",
        type=int,
        help="Seed for reproducible games",
    )
    play_parser.add_argument(
        "--config",
        help="Path to YAML engine configuration",
    )
    play_parser.add_argument(
        "--max-moves",
        type=int,
        help="Stop each game after this many moves",
    )
    play_parser.add_argument(
        "--show",
        action="store_true",
        help="Print the final grid of each game",
    )
    play_parser.set_defaults(func=cmd_play)

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print a serialized board from a JSON file",
    )
    show_parser.add_argument(
        "board",
        help="Path to JSON file with {\"rows\": [...], \"score\": N}",
    )
    show_parser.set_defaults(func=cmd_show)

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Write the default engine configuration",
    )
    config_parser.add_argument(
        "--output", "-o",
        default="configs/default.yaml",
        help="Output path (default: configs/default.yaml)",
    )
    config_parser.set_defaults(func=cmd_config)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "play" and args.games <= 0:
        print("Error: --games must be positive")
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
