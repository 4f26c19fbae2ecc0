import itertools
import logging
import random as rnd

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TimeElapsedColumn
from rich.table import Table

from mastermind_solver.candidate_scorers import LeastOccurrenceScorer
from mastermind_solver.codes import Code
from mastermind_solver.colors import ALPHABET
from mastermind_solver.config import CODE_LENGTH, DEFAULT_MAX_TURNS
from mastermind_solver.feedback import is_win, score
from mastermind_solver.solver import GuessStrategist

log = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    games: int = 0
    wins: int = 0
    total_turns: int = 0
    max_turns: int = DEFAULT_MAX_TURNS
    distribution: dict[int, int] = field(default_factory=lambda: defaultdict(int))
    examples: dict[int, Code] = field(default_factory=dict)
    failures: list[Code] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        return self.wins / self.games * 100 if self.games else 0.0

    @property
    def average_turns(self) -> float:
        return self.total_turns / self.games if self.games else 0.0

    @property
    def worst(self) -> int:
        return max(self.distribution) if self.distribution else 0


def all_secrets() -> list[Code]:
    """
    Returns every possible secret: the 360 ordered selections of four distinct colors.
    """
    return [Code(colors) for colors in itertools.permutations(ALPHABET, CODE_LENGTH)]


def play_single_game(secret: Code, max_turns: int = DEFAULT_MAX_TURNS, rng: Optional[rnd.Random] = None, scorer=LeastOccurrenceScorer) -> Tuple[bool, int]:
    """
    Plays a single game where the solver tries to guess the secret.

    Args:
        secret (Code): The code to guess.
        max_turns (int): Turns allowed before the game is lost.
        rng (Optional[rnd.Random]): Randomness source for the opening guess.
        scorer: The color selection heuristic to use.

    Returns:
        Tuple[bool, int]: (success, number_of_turns)
    """

    strategist = GuessStrategist(rng=rng, scorer=scorer)
    turns = 0

    while turns < max_turns:
        guess = strategist.guess()
        turns += 1

        feedback = score(guess, secret)
        if is_win(feedback):
            return True, turns

        strategist.update(feedback)

    return False, turns


def run_simulation(
    secrets: Optional[Iterable[Code]] = None,
    max_turns: int = DEFAULT_MAX_TURNS,
    seed: Optional[int] = None,
    scorer=LeastOccurrenceScorer,
    show_progress: bool = False,
    console: Optional[Console] = None,
) -> SimulationResult:
    """
    Plays one game per secret and collects statistics about the solver's performance.

    Args:
        secrets (Optional[Iterable[Code]]): Secrets to play against. Defaults to all 360 secrets.
        max_turns (int): Turns allowed per game.
        seed (Optional[int]): Seed for the solver's opening guesses.
        scorer: The color selection heuristic to use.
        show_progress (bool): Whether to show a progress bar.
        console (Optional[Console]): Console the progress bar is drawn on.

    Returns:
        SimulationResult: The collected statistics.
    """

    secrets = list(secrets) if secrets is not None else all_secrets()
    rng = rnd.Random(seed)
    result = SimulationResult(max_turns=max_turns)

    with Progress(
        SpinnerColumn(),
        "[progress.description]{task.description}",
        BarColumn(),
        "[progress.percentage]{task.percentage:>3.0f}%",
        "•",
        TimeElapsedColumn(),
        console=console,
        transient=True,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task(f"Running {len(secrets)} games...", total=len(secrets))

        for secret in secrets:
            success, turns = play_single_game(secret, max_turns=max_turns, rng=rng, scorer=scorer)
            progress.advance(task)

            result.games += 1
            result.total_turns += turns
            result.distribution[turns] += 1
            result.examples.setdefault(turns, secret)
            if success:
                result.wins += 1
            else:
                result.failures.append(secret)
                log.info("Failed to find %s within %d turns", secret, max_turns)

    return result


def calculate_performance(wins: int, total_games: int, total_turns: int, max_turns: int = DEFAULT_MAX_TURNS) -> float:
    """
    Rates a batch of games from 0 to 100.

    Winning counts for 60% and speed for 40%. Speed compares the mean turns per game, lost games included,
    against a game that runs one turn past the limit. A batch without a single win gets no speed credit.
    """
    if total_games == 0:
        return 0.0

    win_rate = wins / total_games
    avg_turns = total_turns / total_games if wins else max_turns + 1
    turn_score = max(0, (max_turns + 1 - avg_turns) / (max_turns + 1))

    return (0.6 * win_rate + 0.4 * turn_score) * 100


def generate_stats_table(result: SimulationResult) -> Group:
    table = Table.grid(expand=True)
    table.add_column(justify="left")
    table.add_column(justify="right")

    table.add_row("Games played:", f"{result.games}")
    table.add_row("Games won:", f"{result.wins}")
    table.add_row("Win rate:", f"{result.win_rate:.2f}%")
    table.add_row("Average turns:", f"{result.average_turns:.2f}")
    table.add_row("Performance:", f"{calculate_performance(result.wins, result.games, result.total_turns, result.max_turns):.2f}%")

    dist_table = Table(title="Turn Distribution", show_header=True, header_style="bold magenta")
    dist_table.add_column("Turns", justify="right")
    dist_table.add_column("Count", justify="right")
    dist_table.add_column("Example Secret", justify="left")

    for turns in range(1, result.worst + 1):
        count = result.distribution.get(turns, 0)
        example = result.examples.get(turns)
        style = "red" if turns >= result.max_turns and count and result.failures else None
        dist_table.add_row(str(turns), str(count), str(example) if example else "", style=style)

    return Group(
        Panel(table, title="Statistics", border_style="green"),
        dist_table
    )
