"""
Main entry point for the N-Queens solution counter.

Counts every solution of the N-Queens problem with backtracking and
reports how many queen placements the search needed.

Usage:
    python main.py            # defaults to the 4-Queens problem
    python main.py 12
    python main.py 4 5 6 7 8 --save --output-dir results
    python main.py --config config.yaml --state-space bitset
"""

import argparse
import sys
from typing import List, Optional

from nqueens_counter.config import Config
from nqueens_counter.board import validate_size
from nqueens_counter.errors import NQueensError
from nqueens_counter.interfaces import SearchResult
from nqueens_counter.solver import create_board, create_solver
from nqueens_counter.utils import format_result, parse_board_size, check_known_count
from nqueens_counter.visualize import (
    plot_search_counts,
    save_run_results,
    save_sweep_results,
)


# =============================================================================
# Runner Class
# =============================================================================

class SearchRunner:
    """
    Orchestrates searches based on configuration.
    """

    def __init__(self, config: Config):
        """
        Initialize runner with configuration.

        Args:
            config: Configuration instance
        """
        self.config = config
        self.elapsed: List[Optional[float]] = []

    def run_single(self, size: int) -> SearchResult:
        """
        Run one search to completion.

        Args:
            size: Board dimension N

        Returns:
            SearchResult of the finished search
        """
        board = create_board(size, self.config.state_space)
        solver = create_solver(board, self.config.row_order)
        result = solver.run(verbose=self.config.verbose)
        self.elapsed.append(solver.elapsed)

        if self.config.verbose:
            self._print_known_check(check_known_count(result))

        return result

    def run(self) -> List[SearchResult]:
        """
        Execute a search for every configured size.

        Every size is validated before the first search starts. Each
        result line is printed as soon as its search finishes.

        Returns:
            List of results in configuration order
        """
        for size in self.config.sizes:
            validate_size(size)

        results = []
        for size in self.config.sizes:
            result = self.run_single(size)
            print(format_result(result))
            results.append(result)
        return results

    def _print_known_check(self, info: dict) -> None:
        """Print comparison with the published solution count."""
        if not info['known']:
            print(f"N={info['N']}: no published count to compare with")
        elif info['matches']:
            print(f"N={info['N']}: ✓ matches published count {info['expected']}")
        else:
            print(f"N={info['N']}: ✗ expected {info['expected']}, found {info['found']}")


# =============================================================================
# CLI Interface
# =============================================================================

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='N-Queens solution counter',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        'n',
        nargs='*',
        help='Board size(s) N (default 4, overrides config)'
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Path to YAML configuration file'
    )

    parser.add_argument(
        '--state-space',
        type=str,
        choices=['array', 'bitset'],
        help='Board representation (overrides config)'
    )

    parser.add_argument(
        '--row-order',
        type=str,
        choices=['ascending', 'descending'],
        help='Order rows are tried in at each column (overrides config)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )

    parser.add_argument(
        '--save',
        action='store_true',
        help='Save results (metadata and plot)'
    )

    parser.add_argument(
        '--output-dir', '-o',
        type=str,
        help='Output directory for saved results'
    )

    parser.add_argument(
        '--show',
        action='store_true',
        help='Show plot interactively'
    )

    return parser.parse_args(argv)


def load_config_with_overrides(args: argparse.Namespace) -> Config:
    """
    Load configuration from file and apply CLI overrides.

    Args:
        args: Parsed command line arguments

    Returns:
        Configuration with overrides applied
    """
    if args.config:
        try:
            config = Config.from_yaml(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = Config()

    # Apply CLI overrides
    if args.n:
        config.sizes = [parse_board_size(text) for text in args.n]
    if args.state_space:
        config.state_space = args.state_space
    if args.row_order:
        config.row_order = args.row_order
    if args.verbose:
        config.verbose = True
    if args.save:
        config.save = True
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.show:
        config.show = True

    return config


def save_and_show(config: Config, runner: SearchRunner, results: List[SearchResult]) -> None:
    """Persist and display results as the configuration asks."""
    metadata = {
        'state_space': config.state_space,
        'row_order': config.row_order,
    }

    if config.save:
        for result, elapsed in zip(results, runner.elapsed):
            run_metadata = metadata.copy()
            run_metadata['board_size'] = result.n
            run_metadata['elapsed'] = elapsed
            saved = save_run_results(config.output_dir, result, run_metadata)
            print(f"N={result.n}: Saved to {saved['run_folder']}/")

        if len(results) > 1:
            save_sweep_results(config.output_dir, results, metadata, save_plots=True)
            print(f"Summary saved to {config.output_dir}/")

    if config.show:
        plot_search_counts(results, show=True, metadata=metadata)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    config = load_config_with_overrides(args)

    # Validate
    errors = config.validate()
    if errors:
        print("Configuration errors:", file=sys.stderr)
        for error in errors:
            print(f"  - {error}", file=sys.stderr)
        sys.exit(1)

    if config.verbose:
        config.print_summary()

    # Run searches
    runner = SearchRunner(config)
    try:
        results = runner.run()
    except NQueensError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    save_and_show(config, runner, results)


if __name__ == "__main__":
    main()
