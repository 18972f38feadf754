"""
Bulgarian Solitaire CLI - Play a game in the terminal.

Usage:
    bulgarian                Play from a random starting configuration
    bulgarian -u             Enter the starting configuration yourself
    bulgarian -s             Stop after each round until return is pressed
    bulgarian -u -s --piles 4
"""

import argparse
import random
import sys

from pydantic import ValidationError as ConfigError

from .engine_core import Board, BoardConfig, is_valid_config_string
from .session import GameLoop, RoundLimitExceeded


PROMPT = "Please enter a space-separated list of positive integers followed by newline:"


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Bulgarian Solitaire simulator",
        prog="bulgarian",
    )
    parser.add_argument(
        "-u", "--user-config", action="store_true",
        help="Enter the initial configuration instead of using a random one",
    )
    parser.add_argument(
        "-s", "--single-step", action="store_true",
        help="Stop after each round and wait for return",
    )
    parser.add_argument("--piles", type=int, help="Number of piles in the final configuration")
    parser.add_argument("--seed", type=int, help="Seed for the random starting configuration")
    parser.add_argument(
        "--max-rounds", type=int,
        help="Give up after this many rounds (default: enough for any start)",
    )

    args = parser.parse_args(argv)

    try:
        config = BoardConfig.from_env()
        if args.piles is not None:
            config = BoardConfig(final_pile_count=args.piles, check_invariants=config.check_invariants)
    except ConfigError as e:
        parser.error(f"invalid board configuration: {e.errors()[0]['msg']}")
    if args.max_rounds is not None and args.max_rounds < 1:
        parser.error("--max-rounds must be >= 1")

    sys.exit(play_game(args, config))


def play_game(args, config: BoardConfig) -> int:
    """Play one game. Returns the process exit status."""
    if args.user_config:
        text = read_user_config(config)
        if text is None:
            print("Error: No configuration entered")
            return 1
        board = Board.from_text(text, config)
    else:
        board = Board.random(random.Random(args.seed), config)

    print(f"Initial configuration: {board.config_string()}")

    def show_round(record):
        print(f"[{record.round_number}] Current configuration: {record.config}")
        if args.single_step:
            print("<Type return to continue>", end="")
            try:
                input()
            except EOFError:
                print()

    loop = GameLoop(board, max_rounds=args.max_rounds)
    try:
        loop.run(on_round=show_round)
    except RoundLimitExceeded as e:
        print(f"Error: {e}")
        return 1

    print("Done!")
    return 0


def read_user_config(config: BoardConfig):
    """
    Prompt until a valid configuration is entered.

    Returns the configuration text, or None if input ran out.
    """
    print(f"Number of total cards is {config.card_total}")
    print("You will be entering the initial configuration of the cards (i.e., how many in each pile).")
    print(PROMPT)

    while True:
        try:
            text = input()
        except EOFError:
            return None
        if is_valid_config_string(text, config):
            return text
        print(
            "ERROR: Each pile must have at least one card and the total number of cards must be "
            f"{config.card_total}"
        )
        print(PROMPT)


if __name__ == "__main__":
    main()
