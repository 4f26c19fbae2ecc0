from enum import Enum
from typing import Optional, TypeAlias

from mastermind_solver.codes import Code
from mastermind_solver.colors import Color


class Mark(Enum):
    EXACT = "exact"
    PRESENT = "present"
    ABSENT = "absent"


Feedback: TypeAlias = tuple[Mark, ...]

SYMBOLS = {
    Mark.EXACT: "✓",
    Mark.ABSENT: "𐄂",
    Mark.PRESENT: "?",
}


def score(guess: Code, secret: Code) -> Feedback:
    """
    Returns one mark per position for the guess compared to the secret.

    Exact matches are taken first and consume their position in both codes. The remaining positions are
    then scanned in index order, each claiming one leftover occurrence of its color in the secret if one
    is still available.
    """
    feedback = [Mark.ABSENT] * len(guess)
    secret_colors: list[Optional[Color]] = list(secret)

    # First pass for exact matches
    for i, color in enumerate(guess):
        if color == secret[i]:
            feedback[i] = Mark.EXACT
            secret_colors[i] = None  # Remove matched color

    # Second pass for misplaced colors
    for i, color in enumerate(guess):
        if feedback[i] == Mark.ABSENT and color in secret_colors:
            feedback[i] = Mark.PRESENT
            secret_colors[secret_colors.index(color)] = None  # Remove matched color

    return tuple(feedback)


def is_win(feedback: Feedback) -> bool:
    return all(mark == Mark.EXACT for mark in feedback)


def count(feedback: Feedback, mark: Mark) -> int:
    return sum(1 for m in feedback if m == mark)


def format_feedback(feedback: Feedback) -> str:
    """
    Formats the feedback into glyphs for printing, e.g. "✓ - ? - ? - 𐄂".
    """
    return " - ".join(SYMBOLS[mark] for mark in feedback)
