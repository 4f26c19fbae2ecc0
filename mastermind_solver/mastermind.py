import logging
import random as rnd

from typing import Callable, Optional

from rich.console import Console
from rich.table import Table

from mastermind_solver.candidate_scorers import LeastOccurrenceScorer
from mastermind_solver.codes import Code
from mastermind_solver.colors import NAMES
from mastermind_solver.config import CODE_LENGTH, COLOR_COUNT, DEFAULT_MAX_TURNS
from mastermind_solver.errors import SolverInvariantViolation, ValidationError
from mastermind_solver.feedback import Feedback, format_feedback, is_win, score
from mastermind_solver.solver import GuessStrategist

log = logging.getLogger(__name__)

InputFunc = Callable[[str], str]


class Match:

    def __init__(self, secret: Optional[Code] = None, max_turns: int = DEFAULT_MAX_TURNS, rng: Optional[rnd.Random] = None):
        """
        Initializes a match against a secret code.

        Args:
            secret (Optional[Code], optional): The code to find. Generated at random when omitted. Defaults to None.
            max_turns (int, optional): Turns allowed before the match is lost. Defaults to DEFAULT_MAX_TURNS.
            rng (Optional[rnd.Random], optional): Randomness source for the generated secret. Defaults to None.
        """

        if max_turns < 1:
            raise ValueError("A match needs at least one turn.")

        self.secret = secret or Code.generate_random_unique(rng)
        self.max_turns = max_turns
        self.history: list[tuple[Code, Feedback]] = []

    def add_guess(self, guess: Code) -> Feedback:
        if self.is_over():
            raise RuntimeError("The match is already over.")

        feedback = score(guess, self.secret)
        self.history.append((guess, feedback))
        log.info("Turn %d: %s -> %s", self.turns_elapsed, guess, format_feedback(feedback))
        return feedback

    @property
    def turns_elapsed(self) -> int:
        return len(self.history)

    def is_full(self) -> bool:
        return self.turns_elapsed >= self.max_turns

    def is_won(self) -> bool:
        return bool(self.history) and is_win(self.history[-1][1])

    def is_over(self) -> bool:
        return self.is_won() or self.is_full()

    @property
    def outcome(self) -> Optional[str]:
        if self.is_won():
            return "win"
        if self.is_full():
            return "lose"
        return None

    def render(self) -> Table:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Turn", justify="right")
        for i in range(CODE_LENGTH):
            table.add_column(f"#{i + 1}", justify="center")
        table.add_column("Feedback", justify="left")

        for turn, (guess, feedback) in enumerate(self.history, start=1):
            table.add_row(str(turn), *guess.names(), format_feedback(feedback))
        return table


def print_presentation(console: Console, max_turns: int = DEFAULT_MAX_TURNS) -> None:
    console.print("[bold]Welcome to Mastermind![/bold]\n")
    console.print(f"The goal of the game is to find a secret code composed of {CODE_LENGTH} of the following {COLOR_COUNT} colors in less than {max_turns} turns :")
    console.print(", ".join(NAMES) + "\n")
    console.print("Each color has to be unique in the code.")
    console.print('The input has to be formated such as "CCCC", "C C C C" or "C, C, C, C" where C stands for [C]OLOR.\n', markup=False)


def read_code(prompt: str, input_func: InputFunc = input, console: Optional[Console] = None) -> Code:
    """
    Prompts until the input parses as a valid code.

    Args:
        prompt (str): Text shown before the first attempt.
        input_func (InputFunc, optional): Function used to read a line. Defaults to input.
        console (Optional[Console], optional): Console errors are printed to. Defaults to None.

    Returns:
        Code: The first valid code entered.
    """

    console = console or Console()
    text = input_func(prompt)
    while True:
        try:
            return Code.parse(text)
        except ValidationError as e:
            log.debug("Rejected input %r: %s", e.input, type(e).__name__)
            console.print(str(e), markup=False)
            text = input_func("Please enter a valid code (ex: R B Y C) : ")


def choose_mode(input_func: InputFunc = input, console: Optional[Console] = None) -> str:
    console = console or Console()
    console.print("Please chose your game mode :")
    console.print("1. A secret code is generated, you have to guess it.")
    console.print("2. You give a secret code, and the computer has to guess it.")

    while True:
        selection = input_func("").strip()
        if selection in ("1", "2"):
            return "guess" if selection == "1" else "solve"
        console.print(f"Your choice ({selection}) is not valid, you have to chose between 1 and 2.", markup=False)


def play_human(match: Match, input_func: InputFunc = input, console: Optional[Console] = None) -> Match:
    """
    Lets a human guess the match's secret until it is found or the turns run out.
    """
    console = console or Console()

    while not match.is_over():
        guess = read_code("Please enter your code : ", input_func, console)
        match.add_guess(guess)
        console.print(match.render())

    if match.is_won():
        console.print(f"Congratulation you found the secret code in {match.turns_elapsed} turns.")
    else:
        console.print(f"The secret code wasn't found in time ({match.max_turns} turns elapsed). It was {match.secret}.")
    return match


def play_computer(
    secret: Code,
    max_turns: int = DEFAULT_MAX_TURNS,
    rng: Optional[rnd.Random] = None,
    scorer=LeastOccurrenceScorer,
    console: Optional[Console] = None,
) -> Match:
    """
    Lets the solver guess a secret supplied by the human.

    Raises:
        SolverInvariantViolation: If the solver's belief state becomes inconsistent. The match is abandoned.
    """
    console = console or Console()
    match = Match(secret, max_turns=max_turns)
    strategist = GuessStrategist(rng=rng, scorer=scorer)

    while not match.is_over():
        feedback = match.add_guess(strategist.guess())
        console.print(match.render())
        if match.is_won():
            break
        try:
            strategist.update(feedback)
        except SolverInvariantViolation:
            log.error("Solver aborted on turn %d against %s", match.turns_elapsed, secret)
            raise

    if match.is_won():
        console.print(f"The computer found the secret code in {match.turns_elapsed} turns.")
    else:
        console.print(f"The secret code wasn't found in time ({match.max_turns} turns elapsed).")
    return match
