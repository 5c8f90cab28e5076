"""
N-Queens Solution Counter Package

This package counts every solution of the N-Queens problem with a
column-by-column backtracking search and reports how many tentative
queen placements the search needed.

Modules:
    - interfaces: Abstract base classes for Board and Solver, SearchResult record
    - errors: InvalidSizeError and AllocationFailureError
    - utils: Index helpers, size parsing, result formatting, known counts
    - board: Board state implementations (numpy arrays and integer bit-sets)
    - solver: Backtracking solver and factories
    - config: Configuration management
    - visualize: Count plots and result saving
"""

from .interfaces import BoardInterface, SolverInterface, SearchResult
from .errors import NQueensError, InvalidSizeError, AllocationFailureError
from .board import ArrayBoardState, BitBoardState
from .solver import BacktrackingSolver, create_board, create_solver, count_solutions
from .config import Config
from .utils import format_result, parse_board_size, check_known_count
from .visualize import (
    plot_search_counts,
    save_run_results,
    save_sweep_results,
    create_run_output_folder,
)

__all__ = [
    'BoardInterface',
    'SolverInterface',
    'SearchResult',
    'NQueensError',
    'InvalidSizeError',
    'AllocationFailureError',
    'ArrayBoardState',
    'BitBoardState',
    'BacktrackingSolver',
    'create_board',
    'create_solver',
    'count_solutions',
    'Config',
    'format_result',
    'parse_board_size',
    'check_known_count',
    'plot_search_counts',
    'save_run_results',
    'save_sweep_results',
    'create_run_output_folder',
]
