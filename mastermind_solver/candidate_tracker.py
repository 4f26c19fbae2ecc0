import logging

from typing import Optional

from mastermind_solver.codes import Code
from mastermind_solver.colors import ALPHABET, Color
from mastermind_solver.config import CODE_LENGTH
from mastermind_solver.errors import SolverInvariantViolation
from mastermind_solver.feedback import Feedback, Mark, format_feedback

log = logging.getLogger(__name__)


class CandidateTracker:

    def __init__(self, slots: Optional[list[Color | list[Color]]] = None):
        """
        Initializes the tracker with every position unresolved and every color possible.

        Each slot is either a resolved Color or the list of colors still possible at that position.
        Pools keep alphabet order so that scans over them are deterministic.

        Args:
            slots (Optional[list[Color | list[Color]]], optional): Starting belief state. Defaults to None.
        """

        if slots is None:
            slots = [list(ALPHABET) for _ in range(CODE_LENGTH)]
        if len(slots) != CODE_LENGTH:
            raise ValueError(f"Expected {CODE_LENGTH} slots, got {len(slots)}.")

        self.slots: list[Color | list[Color]] = [slot if isinstance(slot, Color) else list(slot) for slot in slots]

    def __str__(self) -> str:
        return " | ".join(
            f"{i}: {slot}" if isinstance(slot, Color) else f"{i}: {{{''.join(map(str, slot))}}}"
            for i, slot in enumerate(self.slots)
        )

    def copy(self) -> "CandidateTracker":
        return CandidateTracker(self.slots)

    def resolved(self, position: int) -> Optional[Color]:
        slot = self.slots[position]
        return slot if isinstance(slot, Color) else None

    def pool(self, position: int) -> list[Color]:
        """
        Returns a copy of the colors still possible at a position. A resolved position has a single-color pool.
        """
        slot = self.slots[position]
        return [slot] if isinstance(slot, Color) else list(slot)

    def pools(self) -> list[Optional[list[Color]]]:
        """
        Returns a fresh copy of the unresolved pools, with None in place of resolved positions.
        Mutating the result never touches the tracker.
        """
        return [None if isinstance(slot, Color) else list(slot) for slot in self.slots]

    def unresolved_positions(self) -> list[int]:
        return [i for i, slot in enumerate(self.slots) if not isinstance(slot, Color)]

    def is_solved(self) -> bool:
        return not self.unresolved_positions()

    def apply(self, previous_guess: Code, feedback: Feedback) -> None:
        """
        Narrows the belief state using the feedback received for the previous guess.

        The feedback is applied in three passes so that the result does not depend on the order of
        marks within it:
            - Exact: the position is resolved and the color is removed from every other unresolved position.
            - Absent: the color is removed from every unresolved position.
            - Present: the color is removed from its own position only.

        Args:
            previous_guess (Code): The guess the feedback was produced for.
            feedback (Feedback): One mark per position of the guess.

        Raises:
            ValueError: If the feedback does not have one mark per position.
            SolverInvariantViolation: If an unresolved position is left with no possible color.
        """

        if len(feedback) != CODE_LENGTH or len(previous_guess) != CODE_LENGTH:
            raise ValueError(f"Feedback {feedback!r} does not match guess {previous_guess}.")

        for i, mark in enumerate(feedback):
            if mark == Mark.EXACT:
                self._exact(i, previous_guess[i])

        for i, mark in enumerate(feedback):
            if mark == Mark.ABSENT:
                self._absent(previous_guess[i])

        for i, mark in enumerate(feedback):
            if mark == Mark.PRESENT:
                self._misplaced(i, previous_guess[i])

        log.debug("After %s [%s]: %s", previous_guess, format_feedback(feedback), self)

        for i, slot in enumerate(self.slots):
            if isinstance(slot, list) and not slot:
                log.error("Position %d has no possible color left after %s [%s]", i, previous_guess, format_feedback(feedback))
                raise SolverInvariantViolation(
                    f"Position {i} has no possible color left after guess {previous_guess} "
                    f"with feedback {format_feedback(feedback)}."
                )

    def _exact(self, position: int, color: Color) -> None:
        # Resolve the position, then remove the color from every other position
        self.slots[position] = color
        for slot in self.slots:
            if isinstance(slot, list) and color in slot:
                slot.remove(color)

    def _absent(self, color: Color) -> None:
        for slot in self.slots:
            if isinstance(slot, list) and color in slot:
                slot.remove(color)

    def _misplaced(self, position: int, color: Color) -> None:
        slot = self.slots[position]
        if isinstance(slot, list) and color in slot:
            slot.remove(color)
