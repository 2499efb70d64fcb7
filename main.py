"""Main entry point for Iso-Path."""

import argparse
import logging
import sys

from factory import IsopathFactory
from game.constants import DEFAULT_BOARD_SIZE, DEFAULT_MAX_TURNS, MIN_BOARD_SIZE
from game.player_config import parse_player_spec


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Iso-Path",
        epilog="""
Player Configuration:
  Use --player1 and --player2 to configure each player with the format:
    TYPE[:PARAM=VALUE,PARAM=VALUE,...]

  Player 1 plays the climbing side (top row, moves first),
  player 2 plays the trench side (bottom row).

  Types:
    random          - Random move selection
    linear          - One-ply search with a linear board evaluation

  Linear Parameters (examples):
    win=X           - Bonus for a won board (default: 1000)
    threat=X        - Penalty per threatened piece (default: 1.0)
    min=X           - Penalty for the closest piece's distance (default: 1.0)
    sum=X           - Penalty for the summed distances (default: 0.25)
    name=S          - Display name (any type)

  Examples:
    --player1 random
    --player2 linear:threat=2,sum=0.5
    --player1 linear:win=500,name=Alice
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board size, the edge length of the hexagon (default: {DEFAULT_BOARD_SIZE})"
    )
    parser.add_argument(
        "--player1",
        type=str,
        default="linear",
        metavar="SPEC",
        help="Player 1 configuration (default: linear). See --help for format."
    )
    parser.add_argument(
        "--player2",
        type=str,
        default="linear",
        metavar="SPEC",
        help="Player 2 configuration (default: linear). See --help for format."
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible games",
    )
    parser.add_argument(
        "--games", type=int, default=1, help="Number of games to play (default: 1)"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=DEFAULT_MAX_TURNS,
        help=f"Turns after which a game is a tie (default: {DEFAULT_MAX_TURNS})",
    )
    parser.add_argument(
        "--headless", action="store_true", help="Do not print the board after every action"
    )
    parser.add_argument(
        "--transcript-screen",
        action="store_true",
        help="Output transcript format game actions to screen",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Track and report statistics for each game",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.size < MIN_BOARD_SIZE:
        parser.error(f"Board size must be at least {MIN_BOARD_SIZE}")
    if args.max_turns is not None and args.max_turns < 1:
        parser.error("--max-turns must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Parse player configurations
    try:
        player1_config = parse_player_spec(args.player1)
        player2_config = parse_player_spec(args.player2)
    except ValueError as e:
        parser.error(f"Invalid player configuration: {e}")

    factory = IsopathFactory()
    controller = factory.create_controller(
        n=args.size,
        seed=args.seed,
        max_turns=args.max_turns,
        log_to_screen=args.transcript_screen,
        headless=args.headless,
        max_games=args.games,
        track_statistics=args.stats,
        player1_config=player1_config,
        player2_config=player2_config,
    )
    try:
        controller.run()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Print timing statistics if enabled
    if args.stats:
        controller.print_statistics()
    return 0


if __name__ == "__main__":
    sys.exit(main())
