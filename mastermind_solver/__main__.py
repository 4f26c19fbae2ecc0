import logging
import random as rnd
import sys

from typing import Optional, Sequence

from rich.console import Console

from mastermind_solver.candidate_scorers import get_scorer
from mastermind_solver.config import parse_args
from mastermind_solver.errors import SolverInvariantViolation
from mastermind_solver.log import setup_logging
from mastermind_solver.mastermind import Match, choose_mode, play_computer, play_human, print_presentation, read_code
from mastermind_solver.simulate import all_secrets, generate_stats_table, run_simulation

log = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None, input_func=input, console: Optional[Console] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)
    log.debug("Arguments: %s", args)

    console = console or Console()
    rng = rnd.Random(args.seed)
    scorer = get_scorer(args.scorer)

    if args.mode == "simulate":
        secrets = all_secrets()
        if args.game_number != -1:
            secrets = rng.sample(secrets, min(args.game_number, len(secrets)))
        result = run_simulation(secrets, max_turns=args.max_turns, seed=args.seed, scorer=scorer, show_progress=True, console=console)
        console.print(generate_stats_table(result))
        return 0

    print_presentation(console, args.max_turns)
    mode = args.mode or choose_mode(input_func, console)

    if mode == "guess":
        play_human(Match(max_turns=args.max_turns, rng=rng), input_func, console)
        return 0

    secret = read_code("Please enter your code : ", input_func, console)
    try:
        play_computer(secret, max_turns=args.max_turns, rng=rng, scorer=scorer, console=console)
    except SolverInvariantViolation as e:
        console.print(f"[red]The solver failed:[/red] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
