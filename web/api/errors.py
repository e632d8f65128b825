"""API errors and validation helpers."""

from settings import MAX_COALITION_SIZE, MIN_COALITION_SIZE


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Largest parliament worth tabulating in one request
MAX_TOTAL_SEATS = 1000


def validate_total_seats(total_seats: int) -> None:
    """Validate total_seats is in valid range."""
    if not 1 <= total_seats <= MAX_TOTAL_SEATS:
        raise ValidationError(f"Invalid total_seats: {total_seats}. Must be between 1 and {MAX_TOTAL_SEATS}")


def validate_size_range(min_size: int, max_size: int) -> None:
    """Validate coalition size bounds."""
    if not MIN_COALITION_SIZE <= min_size <= max_size <= MAX_COALITION_SIZE:
        raise ValidationError(
            f"Invalid size range: {min_size}-{max_size}. "
            f"Must satisfy {MIN_COALITION_SIZE} <= min <= max <= {MAX_COALITION_SIZE}"
        )


def validate_min_compatibility(value: float) -> None:
    if not 0 <= value <= 1:
        raise ValidationError(f"Invalid min_compatibility: {value}. Must be between 0 and 1")
