import argparse
from typing import Optional, Sequence

# Frozen design constants
CODE_LENGTH = 4
COLOR_COUNT = 6

DEFAULT_MAX_TURNS = 10
DEFAULT_SCORER = "least"
DEFAULT_LOG_LEVEL = "WARNING"

MODES = ("guess", "solve", "simulate")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Argument Parser
parser = argparse.ArgumentParser(prog="mastermind", description="Play Mastermind or watch the solver crack your code.")
parser.add_argument("-m", "--mode", help="Game mode (prompted when omitted)", choices=MODES, default=None)
parser.add_argument("-t", "--max-turns", help="Number of turns before the game is lost", type=int, default=DEFAULT_MAX_TURNS)
parser.add_argument("-s", "--seed", help="Random seed for reproducible games", type=int, default=None)
parser.add_argument("-n", "--game-number", help="Number of secrets to simulate (-1 for all 360)", type=int, default=-1)
parser.add_argument("--scorer", help="Color selection heuristic used by the solver", choices=("least", "most"), default=DEFAULT_SCORER)
parser.add_argument("--log-level", help="Logging verbosity", choices=LOG_LEVELS, default=DEFAULT_LOG_LEVEL)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command line arguments and checks the values argparse cannot.

    Args:
        argv (Optional[Sequence[str]], optional): Arguments to parse. Defaults to sys.argv.

    Returns:
        argparse.Namespace: The parsed arguments.
    """

    args = parser.parse_args(argv)
    if args.max_turns < 1:
        parser.error("--max-turns must be at least 1")
    if args.game_number == 0 or args.game_number < -1:
        parser.error("--game-number must be positive (or -1 for all)")
    return args
