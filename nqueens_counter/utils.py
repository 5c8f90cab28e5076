"""
Utility functions for the N-Queens counter.

This module contains:
- Diagonal index calculations shared by the board implementations
- Command-line size parsing
- Result formatting
- Known solution counts for sanity checks
"""

import re
from typing import Dict, Any

from .interfaces import SearchResult


# =============================================================================
# Index Helpers
# =============================================================================

def diagonal_count(n: int) -> int:
    """Number of diagonals in each direction on an n x n board."""
    return 2 * n - 1


def diag_up_index(n: int, col: int, row: int) -> int:
    """Index of the up diagonal (constant col - row) through (row, col)."""
    return (n - 1) + (col - row)


def diag_down_index(col: int, row: int) -> int:
    """Index of the down diagonal (constant col + row) through (row, col)."""
    return col + row


# =============================================================================
# Parsing and Formatting
# =============================================================================

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def parse_board_size(text: str) -> int:
    """
    Parse a board size the way C atoi() does.

    Leading whitespace and an optional sign are accepted, then as many
    digits as follow. Input without a leading number gives 0, which board
    construction then rejects.

    Args:
        text: Raw command-line argument

    Returns:
        Parsed integer (0 when nothing parses).
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def format_result(result: SearchResult) -> str:
    """Format the one-line report printed for a finished search."""
    return (f"The {result.n}-Queens problem "
            f"required {result.placement_count} queen placements "
            f"to find all {result.solution_count} solutions")


# =============================================================================
# Known Values
# =============================================================================

# Total solutions, rotations and reflections counted as distinct
KNOWN_SOLUTION_COUNTS: Dict[int, int] = {
    1: 1,
    2: 0,
    3: 0,
    4: 2,
    5: 10,
    6: 4,
    7: 40,
    8: 92,
    9: 352,
    10: 724,
    11: 2680,
    12: 14200,
    13: 73712,
    14: 365596,
    15: 2279184,
}


def check_known_count(result: SearchResult) -> Dict[str, Any]:
    """
    Compare a search result with the published solution count.

    Args:
        result: Finished search

    Returns:
        Dictionary with the expected count (None if not tabulated) and
        whether the result matches it.
    """
    expected = KNOWN_SOLUTION_COUNTS.get(result.n)
    return {
        'N': result.n,
        'expected': expected,
        'found': result.solution_count,
        'known': expected is not None,
        'matches': expected is None or expected == result.solution_count,
    }
