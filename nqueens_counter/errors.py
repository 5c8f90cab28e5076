"""
Error types raised while building an N-Queens board.

Only board construction can fail. Once a board exists, the search
operations are total over their documented preconditions.
"""


INVALID_SIZE_MESSAGE = "The number of queens must be greater than 0."

# Messages for each allocation made by board construction
ALLOCATION_MESSAGES = {
    'board': "Failed to allocate memory for chess board.",
    'queens': "Failed to allocate memory for chess queens.",
    'column': "Failed to allocate memory for column attacks.",
    'diagonal_up': "Failed to allocate memory for diagonal up attacks.",
    'diagonal_down': "Failed to allocate memory for diagonal down attacks.",
}


class NQueensError(Exception):
    """Base class for every error reported by the counter."""


class InvalidSizeError(NQueensError, ValueError):
    """Requested board dimension is not a positive integer."""

    def __init__(self, n=None):
        self.n = n
        super().__init__(INVALID_SIZE_MESSAGE)


class AllocationFailureError(NQueensError, MemoryError):
    """
    Memory for one of the board arrays could not be obtained.

    Attributes:
        what: Key of ALLOCATION_MESSAGES naming the failed allocation
    """

    def __init__(self, what: str):
        self.what = what
        super().__init__(ALLOCATION_MESSAGES[what])
