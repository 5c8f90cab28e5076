"""
Abstract interfaces for Board and Solver classes.

A board owns the conflict-tracking state of a column-by-column N-Queens
search. A solver drives a board through depth-first placement and
removal and reads the final counts back from it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class SearchResult:
    """
    Immutable record produced once a search has finished.

    Attributes:
        n: Board dimension
        placement_count: Tentative queen placements made, backtracked ones included
        solution_count: Complete non-attacking boards found
    """
    n: int
    placement_count: int
    solution_count: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class BoardInterface(ABC):
    """
    Abstract interface for board state representations.

    Queens are placed one per column, left to right. The current column
    is the search depth. Rows and the two diagonal directions are tracked
    so that a conflict check is O(1):

    - up diagonal index:   (n - 1) + (col - row)
    - down diagonal index: col + row
    """

    @property
    @abstractmethod
    def n(self) -> int:
        """Board dimension."""
        pass

    @property
    @abstractmethod
    def depth(self) -> int:
        """Number of columns currently filled."""
        pass

    @property
    @abstractmethod
    def placement_count(self) -> int:
        pass

    @property
    @abstractmethod
    def solution_count(self) -> int:
        pass

    @abstractmethod
    def is_free(self, row: int, depth: int) -> bool:
        """
        Check whether a queen can go at (row, column=depth).

        Args:
            row: Row index in [0, n)
            depth: Column index in [0, n)

        Returns:
            True if the row and both diagonals through the square are unoccupied.
        """
        pass

    @abstractmethod
    def place(self, row: int, depth: int) -> None:
        """
        Put a queen at (row, column=depth) and count the attempt.

        The square must be free and depth must be below n.
        """
        pass

    @abstractmethod
    def remove(self, row: int, depth: int) -> None:
        """
        Undo the matching place(row, depth).

        Calls must pair with place() in strict LIFO order.
        """
        pass

    @abstractmethod
    def record_solution(self) -> None:
        """Count one completed board."""
        pass

    @abstractmethod
    def get_queens(self) -> list:
        """Row of the queen in each filled column."""
        pass

    @abstractmethod
    def finalize(self) -> SearchResult:
        """
        Read the final counts.

        Returns:
            SearchResult with n, placement_count and solution_count.
        """
        pass


class SolverInterface(ABC):
    """
    Abstract interface for solution-counting searches.

    A solver is bound to one freshly built board and runs it to
    completion exactly once.
    """

    @abstractmethod
    def run(self, verbose: bool = False) -> SearchResult:
        """
        Enumerate every solution on the board.

        Args:
            verbose: Whether to print a banner and timing summary

        Returns:
            SearchResult of the finished search.
        """
        pass

    @abstractmethod
    def get_board(self) -> BoardInterface:
        pass
