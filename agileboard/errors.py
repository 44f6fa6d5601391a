"""
Error taxonomy for board construction and iteration operations.

Every error is recoverable by the caller; nothing here is fatal to the
process and nothing is retried internally.
"""


class BoardError(Exception):
    """Base class for every board and iteration failure."""
    pass


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Construction
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class BoardValidationError(BoardError):
    """Raised when a column set cannot form a board."""
    pass


class NoStartColumn(BoardValidationError):
    pass


class MultipleStartColumns(BoardValidationError):
    pass


class NoDoneColumn(BoardValidationError):
    pass


class MultipleDoneColumns(BoardValidationError):
    pass


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Lookup
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class CardNotFound(BoardError):
    """Raised when a card is not a member of the iteration."""
    pass


class ColumnNotFound(BoardError):
    """Raised when a column does not belong to the board."""
    pass


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# State & policy
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class CardAlreadyAdded(BoardError):
    """Raised when the same card is added to an iteration twice."""
    pass


class NoLastMove(BoardError):
    """Raised when there is no recorded move to undo."""
    pass


class WIPLimitExceeded(BoardError):
    """Raised when a move would push a column past its points limit."""

    def __init__(self, column, current_points: int, estimate: int):
        self.column = column
        self.current_points = current_points
        self.estimate = estimate
        self.limit = column.points_limit
        super().__init__(
            f"Column '{column.name}' holds {current_points} of {self.limit} points; "
            f"adding {estimate} would exceed the limit"
        )
