"""
Test suite for board state implementations.

Tests verify:
1. Construction and size validation
2. Allocation failure reporting
3. is_free / place / remove semantics
4. Agreement between array and bit-set boards
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import pytest

from nqueens_counter import board as board_module
from nqueens_counter.board import ArrayBoardState, BitBoardState, check_board_invariant
from nqueens_counter.errors import (
    AllocationFailureError,
    InvalidSizeError,
    ALLOCATION_MESSAGES,
    INVALID_SIZE_MESSAGE,
)

BOARD_CLASSES = [ArrayBoardState, BitBoardState]


# =============================================================================
# Construction Tests
# =============================================================================

@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
def test_board_initialization(board_cls):
    """Fresh boards are empty with every line free."""
    for n in [1, 4, 8]:
        board = board_cls(n)

        assert board.n == n
        assert board.depth == 0
        assert board.placement_count == 0
        assert board.solution_count == 0
        assert board.get_queens() == []
        assert board.column_free.shape == (n,)
        assert board.diag_up_free.shape == (2 * n - 1,)
        assert board.diag_down_free.shape == (2 * n - 1,)
        assert board.column_free.all()
        assert board.diag_up_free.all()
        assert board.diag_down_free.all()


@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
@pytest.mark.parametrize("n", [0, -1, -8])
def test_invalid_size_rejected(board_cls, n):
    """Sizes below 1 are rejected at construction."""
    with pytest.raises(InvalidSizeError) as exc_info:
        board_cls(n)

    assert str(exc_info.value) == INVALID_SIZE_MESSAGE
    assert exc_info.value.n == n


@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
@pytest.mark.parametrize("n", [2.0, "4", None, True])
def test_non_integer_size_rejected(board_cls, n):
    """Only integers are accepted as sizes."""
    with pytest.raises(InvalidSizeError):
        board_cls(n)


def test_invalid_size_is_value_error():
    """InvalidSizeError can be handled as a ValueError."""
    with pytest.raises(ValueError):
        ArrayBoardState(0)


def test_numpy_integer_size_accepted():
    board = ArrayBoardState(np.int64(5))
    assert board.n == 5
    assert type(board.n) is int


@pytest.mark.parametrize("failing_call, what", [
    (1, 'queens'),
    (2, 'column'),
    (3, 'diagonal_up'),
    (4, 'diagonal_down'),
])
def test_allocation_failure_names_allocation(monkeypatch, failing_call, what):
    """A MemoryError during allocation is reported with the failed array."""
    real_full = np.full
    calls = []

    def failing_full(*args, **kwargs):
        calls.append(args)
        if len(calls) == failing_call:
            raise MemoryError("simulated")
        return real_full(*args, **kwargs)

    monkeypatch.setattr(board_module.np, 'full', failing_full)

    with pytest.raises(AllocationFailureError) as exc_info:
        ArrayBoardState(4)

    assert exc_info.value.what == what
    assert str(exc_info.value) == ALLOCATION_MESSAGES[what]
    assert isinstance(exc_info.value.__cause__, MemoryError)


def test_allocation_failure_is_memory_error():
    assert issubclass(AllocationFailureError, MemoryError)
    assert not issubclass(InvalidSizeError, MemoryError)


# =============================================================================
# Placement Tests
# =============================================================================

@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
def test_place_blocks_lines(board_cls):
    """Placing a queen blocks its row and both diagonals."""
    board = board_cls(4)
    board.place(1, 0)

    assert board.get_queens() == [1]
    assert board.depth == 1
    assert board.placement_count == 1

    # Row 1 is taken
    assert not board.column_free[1]
    # Up diagonal (n-1) + (col-row) = 3 + (0-1) = 2
    assert not board.diag_up_free[2]
    # Down diagonal col + row = 1
    assert not board.diag_down_free[1]

    # Column 1: row 0 (down diag 1), row 1 (row), row 2 (up diag 2) blocked
    assert not board.is_free(0, 1)
    assert not board.is_free(1, 1)
    assert not board.is_free(2, 1)
    assert board.is_free(3, 1)

    assert check_board_invariant(board)


@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
def test_place_remove_restores_is_free(board_cls):
    """place followed by remove leaves every is_free answer unchanged."""
    n = 6
    board = board_cls(n)
    board.place(2, 0)
    board.place(4, 1)

    depth = 2
    before = [[board.is_free(r, d) for r in range(n)] for d in range(depth, n)]

    for row in range(n):
        if not board.is_free(row, depth):
            continue
        board.place(row, depth)
        board.remove(row, depth)
        after = [[board.is_free(r, d) for r in range(n)] for d in range(depth, n)]
        assert after == before, f"Row {row} leaked state after backtracking"
        assert board.depth == depth

    assert check_board_invariant(board)


@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
def test_placement_count_never_decreases(board_cls):
    board = board_cls(4)
    board.place(0, 0)
    board.remove(0, 0)
    board.place(1, 0)
    board.remove(1, 0)

    assert board.placement_count == 2
    assert board.depth == 0
    assert board.column_free.all()


@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
def test_remove_leaves_queen_row(board_cls):
    """remove() only frees lines; the queen record is simply out of range."""
    board = board_cls(4)
    board.place(1, 0)
    board.place(3, 1)
    board.remove(3, 1)

    assert board.get_queens() == [1]
    assert board.is_free(3, 1)


def test_array_and_bitset_agree():
    """Both representations answer is_free identically after the same moves."""
    n = 8
    moves = [(0, 0), (4, 1), (7, 2), (5, 3)]
    array_board = ArrayBoardState(n)
    bit_board = BitBoardState(n)

    for row, depth in moves:
        assert array_board.is_free(row, depth) == bit_board.is_free(row, depth)
        array_board.place(row, depth)
        bit_board.place(row, depth)

    for depth in range(len(moves), n):
        for row in range(n):
            assert array_board.is_free(row, depth) == bit_board.is_free(row, depth)

    assert np.array_equal(array_board.column_free, bit_board.column_free)
    assert np.array_equal(array_board.diag_up_free, bit_board.diag_up_free)
    assert np.array_equal(array_board.diag_down_free, bit_board.diag_down_free)


@pytest.mark.parametrize("board_cls", BOARD_CLASSES)
def test_finalize(board_cls):
    board = board_cls(1)
    board.place(0, 0)
    board.record_solution()
    board.remove(0, 0)

    result = board.finalize()
    assert (result.n, result.placement_count, result.solution_count) == (1, 1, 1)
    assert result.to_dict() == {'n': 1, 'placement_count': 1, 'solution_count': 1}

    with pytest.raises(AttributeError):
        result.solution_count = 5
