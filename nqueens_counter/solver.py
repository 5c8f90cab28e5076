"""
Backtracking solver for the N-Queens counter.

The search fixes one queen per column, left to right. At each column it
tries every row in turn, places a queen where the square is free, goes one
column deeper, and removes the queen again before trying the next row.
All work happens on a single board; nothing is copied per call.
"""

import time
from typing import Optional

from .board import ArrayBoardState, BitBoardState
from .interfaces import BoardInterface, SearchResult, SolverInterface
from .errors import AllocationFailureError


BOARD_TYPES = {
    'array': ArrayBoardState,
    'bitset': BitBoardState,
}

ROW_ORDERS = ('ascending', 'descending')


class BacktrackingSolver(SolverInterface):
    """
    Depth-first solution counter.

    Attributes:
        _board: Board being searched (owned for the whole run)
        _rows: Row indices in the order they are tried at every column
        _elapsed: Wall time of the finished run in seconds
    """

    def __init__(self, board: BoardInterface, row_order: str = 'ascending'):
        if row_order not in ROW_ORDERS:
            raise ValueError(f"Unknown row order: {row_order}. "
                             f"Valid options: {list(ROW_ORDERS)}")
        self._board = board
        self._row_order = row_order
        rows = range(board.n)
        self._rows = tuple(reversed(rows)) if row_order == 'descending' else tuple(rows)
        self._elapsed: Optional[float] = None

    def get_board(self) -> BoardInterface:
        return self._board

    @property
    def row_order(self) -> str:
        return self._row_order

    @property
    def elapsed(self) -> Optional[float]:
        return self._elapsed

    def search(self, depth: int) -> None:
        """
        Count every solution reachable from the current partial board.

        Args:
            depth: Column to fill next; columns below it are already filled
        """
        board = self._board
        n = board.n

        if depth == n:
            board.record_solution()
            return

        for row in self._rows:
            if not board.is_free(row, depth):
                continue
            board.place(row, depth)
            if depth + 1 == n:
                board.record_solution()
            else:
                self.search(depth + 1)
            board.remove(row, depth)

    def run(self, verbose: bool = False) -> SearchResult:
        if self._elapsed is not None:
            raise RuntimeError("Search has already been run on this board")

        board = self._board
        if verbose:
            print("=" * 60)
            print(f"Backtracking Search (N={board.n})")
            print("=" * 60)
            print(f"Board: {board.n}×{board.n}, State: {type(board).__name__}")
            print(f"Row order: {self._row_order}")
            print("=" * 60)

        start = time.time()
        self.search(0)
        self._elapsed = time.time() - start

        result = board.finalize()

        if verbose:
            rate = result.placement_count / self._elapsed if self._elapsed > 0 else 0.0
            print(f"Completed in {self._elapsed:.3f}s ({rate:.0f} placements/s)")
            print(f"Placements: {result.placement_count:,}")
            print(f"Solutions: {result.solution_count:,}")
            print("=" * 60)

        return result


# =============================================================================
# Factory Functions
# =============================================================================

def create_board(n: int, state_space: str = 'array') -> BoardInterface:
    """
    Build an empty board of the requested representation.

    Args:
        n: Board dimension
        state_space: 'array' (numpy flags) or 'bitset' (integer bit-sets)

    Raises:
        InvalidSizeError: n < 1
        AllocationFailureError: the board could not be allocated
    """
    if state_space not in BOARD_TYPES:
        raise ValueError(f"Unknown state space: {state_space}. "
                         f"Valid options: {list(BOARD_TYPES.keys())}")
    try:
        return BOARD_TYPES[state_space](n)
    except AllocationFailureError:
        raise
    except MemoryError as e:
        raise AllocationFailureError('board') from e


def create_solver(board: BoardInterface, row_order: str = 'ascending') -> BacktrackingSolver:
    """Factory function to create a solver for a freshly built board."""
    if not isinstance(board, BoardInterface):
        raise TypeError(f"Unknown board type: {type(board)}")
    return BacktrackingSolver(board, row_order)


def count_solutions(
    n: int,
    state_space: str = 'array',
    row_order: str = 'ascending',
    verbose: bool = False
) -> SearchResult:
    """
    Build a board, search it to completion and return the counts.

    Args:
        n: Board dimension
        state_space: Board representation ('array' or 'bitset')
        row_order: Order rows are tried in ('ascending' or 'descending')
        verbose: Whether to print a banner and timing summary

    Returns:
        SearchResult(n, placement_count, solution_count)
    """
    board = create_board(n, state_space)
    solver = create_solver(board, row_order)
    return solver.run(verbose=verbose)
