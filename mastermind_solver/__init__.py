# Package initialization for mastermind_solver
from mastermind_solver.codes import Code
from mastermind_solver.colors import Color
from mastermind_solver.errors import (
    DuplicateColorError,
    InvalidLengthError,
    SolverInvariantViolation,
    UnrecognizedColorError,
    ValidationError,
)
from mastermind_solver.feedback import Feedback, Mark, score
from mastermind_solver.candidate_tracker import CandidateTracker
from mastermind_solver.solver import GuessStrategist
