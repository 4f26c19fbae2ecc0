class ValidationError(ValueError):

    """
    Raised when external input cannot be turned into a valid Code.

    The raw input is kept on `input` so the prompting layer can echo it back.
    """

    def __init__(self, input: str, message: str):
        super().__init__(message)
        self.input = input


class InvalidLengthError(ValidationError):
    pass


class UnrecognizedColorError(ValidationError):
    pass


class DuplicateColorError(ValidationError):
    pass


class SolverInvariantViolation(RuntimeError):

    """
    The solver's belief state became inconsistent: an unresolved position has no
    colors left. This is a defect in scoring or tracking, never a user error.
    """
