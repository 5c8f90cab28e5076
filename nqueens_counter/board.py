"""
Board state implementations for the N-Queens counter.

This module provides two board state implementations:
- ArrayBoardState: numpy boolean availability arrays (reference representation)
- BitBoardState: Python integers used as bit-sets of occupied lines

Both use the same index arithmetic, so a search over either one makes
exactly the same placements in the same order.
"""

import numbers
import numpy as np
from typing import List

from .errors import AllocationFailureError, InvalidSizeError
from .interfaces import BoardInterface, SearchResult
from .utils import diag_up_index, diag_down_index, diagonal_count


def validate_size(n) -> int:
    """
    Check a requested board dimension.

    Args:
        n: Requested number of queens

    Returns:
        n as a plain int.

    Raises:
        InvalidSizeError: if n is not an integer of at least 1.
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise InvalidSizeError(n)
    return int(n)


def _allocate(what: str, size: int, fill, dtype) -> np.ndarray:
    """Allocate one board array, reporting which allocation failed."""
    try:
        return np.full(size, fill, dtype=dtype)
    except MemoryError as e:
        raise AllocationFailureError(what) from e


class ArrayBoardState(BoardInterface):
    """
    Board backed by three numpy boolean availability arrays.

    Attributes:
        _n: Board dimension
        _queen_row: Row of the queen in each column (valid below _depth)
        _column_free: n flags, True if no queen sits in that row
        _diag_up_free: 2n-1 flags indexed by (n-1) + (col-row)
        _diag_down_free: 2n-1 flags indexed by col + row
        _depth: Number of filled columns
        _placements: Tentative placements so far
        _solutions: Complete boards so far
    """

    def __init__(self, n: int):
        """
        Initialize an empty board.

        Args:
            n: Board dimension, at least 1

        Raises:
            InvalidSizeError: n < 1
            AllocationFailureError: an array could not be allocated
        """
        self._n = validate_size(n)
        self._queen_row = _allocate('queens', self._n, 0, np.int64)
        self._column_free = _allocate('column', self._n, True, bool)
        self._diag_up_free = _allocate('diagonal_up', diagonal_count(self._n), True, bool)
        self._diag_down_free = _allocate('diagonal_down', diagonal_count(self._n), True, bool)
        self._depth = 0
        self._placements = 0
        self._solutions = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def placement_count(self) -> int:
        return self._placements

    @property
    def solution_count(self) -> int:
        return self._solutions

    @property
    def column_free(self) -> np.ndarray:
        return self._column_free.copy()

    @property
    def diag_up_free(self) -> np.ndarray:
        return self._diag_up_free.copy()

    @property
    def diag_down_free(self) -> np.ndarray:
        return self._diag_down_free.copy()

    def is_free(self, row: int, depth: int) -> bool:
        return bool(
            self._column_free[row]
            and self._diag_up_free[self._n - 1 + depth - row]
            and self._diag_down_free[depth + row]
        )

    def place(self, row: int, depth: int) -> None:
        self._queen_row[depth] = row
        self._column_free[row] = False
        self._diag_up_free[self._n - 1 + depth - row] = False
        self._diag_down_free[depth + row] = False
        self._depth = depth + 1
        self._placements += 1

    def remove(self, row: int, depth: int) -> None:
        # queen_row[depth] is left stale until the next place() overwrites it
        self._depth = depth
        self._diag_down_free[depth + row] = True
        self._diag_up_free[self._n - 1 + depth - row] = True
        self._column_free[row] = True

    def record_solution(self) -> None:
        self._solutions += 1

    def get_queens(self) -> List[int]:
        return [int(r) for r in self._queen_row[:self._depth]]

    def finalize(self) -> SearchResult:
        return SearchResult(self._n, self._placements, self._solutions)


class BitBoardState(BoardInterface):
    """
    Board backed by integer bit-sets.

    Bit i of each set is 1 when line i is occupied, so a square is free
    when none of its three bits is set. Indices match ArrayBoardState.

    Attributes:
        _n: Board dimension
        _queen_row: Row of the queen in each column (valid below _depth)
        _rows: Occupied rows
        _up: Occupied up diagonals
        _down: Occupied down diagonals
    """

    def __init__(self, n: int):
        self._n = validate_size(n)
        try:
            self._queen_row = [0] * self._n
        except MemoryError as e:
            raise AllocationFailureError('queens') from e
        self._rows = 0
        self._up = 0
        self._down = 0
        self._depth = 0
        self._placements = 0
        self._solutions = 0

    @property
    def n(self) -> int:
        return self._n

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def placement_count(self) -> int:
        return self._placements

    @property
    def solution_count(self) -> int:
        return self._solutions

    @property
    def column_free(self) -> np.ndarray:
        return _bits_to_free_flags(self._rows, self._n)

    @property
    def diag_up_free(self) -> np.ndarray:
        return _bits_to_free_flags(self._up, diagonal_count(self._n))

    @property
    def diag_down_free(self) -> np.ndarray:
        return _bits_to_free_flags(self._down, diagonal_count(self._n))

    def is_free(self, row: int, depth: int) -> bool:
        return not (
            (self._rows >> row) & 1
            or (self._up >> (self._n - 1 + depth - row)) & 1
            or (self._down >> (depth + row)) & 1
        )

    def place(self, row: int, depth: int) -> None:
        self._queen_row[depth] = row
        self._rows |= 1 << row
        self._up |= 1 << (self._n - 1 + depth - row)
        self._down |= 1 << (depth + row)
        self._depth = depth + 1
        self._placements += 1

    def remove(self, row: int, depth: int) -> None:
        self._depth = depth
        self._down &= ~(1 << (depth + row))
        self._up &= ~(1 << (self._n - 1 + depth - row))
        self._rows &= ~(1 << row)

    def record_solution(self) -> None:
        self._solutions += 1

    def get_queens(self) -> List[int]:
        return list(self._queen_row[:self._depth])

    def finalize(self) -> SearchResult:
        return SearchResult(self._n, self._placements, self._solutions)


def _bits_to_free_flags(bits: int, length: int) -> np.ndarray:
    """Expand an occupied-bit set into availability flags."""
    return np.array([not (bits >> i) & 1 for i in range(length)], dtype=bool)


def check_board_invariant(board: BoardInterface) -> bool:
    """
    Verify that the free flags match the queens currently on the board.

    Every filled column blocks exactly its row and two diagonals;
    everything else must be free.

    Args:
        board: Board with column_free / diag_up_free / diag_down_free views

    Returns:
        True if the tracked flags agree with get_queens().
    """
    n = board.n
    expected_rows = np.ones(n, dtype=bool)
    expected_up = np.ones(diagonal_count(n), dtype=bool)
    expected_down = np.ones(diagonal_count(n), dtype=bool)

    for col, row in enumerate(board.get_queens()):
        expected_rows[row] = False
        expected_up[diag_up_index(n, col, row)] = False
        expected_down[diag_down_index(col, row)] = False

    return (
        np.array_equal(board.column_free, expected_rows)
        and np.array_equal(board.diag_up_free, expected_up)
        and np.array_equal(board.diag_down_free, expected_down)
    )
