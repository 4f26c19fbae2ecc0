import logging
import random as rnd

from typing import Optional

from mastermind_solver.candidate_scorers import LeastOccurrenceScorer
from mastermind_solver.candidate_tracker import CandidateTracker
from mastermind_solver.codes import Code
from mastermind_solver.colors import ALPHABET, Color
from mastermind_solver.config import CODE_LENGTH
from mastermind_solver.feedback import Feedback

log = logging.getLogger(__name__)


class GuessStrategist:

    def __init__(self, rng: Optional[rnd.Random] = None, scorer=LeastOccurrenceScorer):
        """
        Initializes the strategist with a fresh belief state.

        Args:
            rng (Optional[rnd.Random], optional): Randomness source for the opening guess. Defaults to None.
            scorer (optional): Class used to choose a color for a position. Defaults to LeastOccurrenceScorer.
        """

        self.rng = rng
        self.scorer = scorer()
        self.tracker = CandidateTracker()
        self.previous_guess: Optional[Code] = None

    def guess(self) -> Code:
        """
        Returns the opening guess on the first call and a constrained guess afterwards.
        """
        if self.previous_guess is None:
            return self.initial_guess()
        return self.next_guess()

    def initial_guess(self) -> Code:
        """
        Returns four distinct random colors. Nothing is known before the first feedback.
        """
        self.previous_guess = Code.generate_random_unique(self.rng)
        log.debug("Opening guess: %s", self.previous_guess)
        return self.previous_guess

    def next_guess(self) -> Code:
        """
        Builds the next guess from the current belief state.

        Resolved positions keep their color. The open positions are then filled one at a time, always taking
        the position with the smallest pool (lowest index on ties) and letting the scorer choose a color from
        it. A chosen color is removed from the other pools for the rest of this guess only, so the guess never
        repeats a color. The tracker itself is left untouched.

        Returns:
            Code: The next guess.
        """

        guess: list[Optional[Color]] = [self.tracker.resolved(i) for i in range(CODE_LENGTH)]
        pools = self.tracker.pools()

        while any(color is None for color in guess):
            position = self._smallest_pool_position(pools, guess)
            pool = pools[position]

            if pool:
                color = self.scorer.choose(pools, position)
            else:
                color = self._fallback_color(position, guess)

            guess[position] = color
            pools[position] = None
            for other in pools:
                if other and color in other:
                    other.remove(color)

        self.previous_guess = Code(guess)  # type: ignore[arg-type]
        log.debug("Next guess: %s from %s", self.previous_guess, self.tracker)
        return self.previous_guess

    def update(self, feedback: Feedback) -> None:
        """
        Applies the feedback received for the last guess to the belief state.

        Raises:
            RuntimeError: If no guess has been made yet.
            SolverInvariantViolation: If the feedback leaves a position with no possible color.
        """
        if self.previous_guess is None:
            raise RuntimeError("Cannot apply feedback before a guess has been made.")
        self.tracker.apply(self.previous_guess, feedback)

    @staticmethod
    def _smallest_pool_position(pools: list[Optional[list[Color]]], guess: list[Optional[Color]]) -> int:
        # Strict comparison keeps the lowest index on ties
        smallest_position = -1
        smallest_size = float("inf")
        for i, pool in enumerate(pools):
            if guess[i] is not None:
                continue
            size = len(pool) if pool else 0
            if size < smallest_size:
                smallest_position = i
                smallest_size = size
        return smallest_position

    def _fallback_color(self, position: int, guess: list[Optional[Color]]) -> Color:
        # Every color of this position's pool was taken earlier in the same guess
        used = {color for color in guess if color is not None}
        options = [color for color in self.tracker.pool(position) if color not in used]
        if not options:
            options = [color for color in ALPHABET if color not in used]
        log.warning("Position %d ran out of colors while building a guess, falling back to %s", position, options[0])
        return options[0]
