"""Engine error taxonomy."""


class CoalitionError(Exception):
    """Base class for all engine errors."""

    default_message = "Coalition engine error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(CoalitionError):
    """Malformed or out-of-range vote, seat or party input."""

    default_message = "Invalid input"


class InsufficientPartiesError(CoalitionError):
    """Fewer parties than an operation needs."""

    default_message = "At least two parties are required"


class InvalidRangeError(CoalitionError):
    """Malformed coalition size bounds."""

    default_message = "Invalid coalition size range"


class DataInconsistencyError(CoalitionError):
    """Votes, catalogue or reference tables disagree with each other."""

    default_message = "Inconsistent data"
