"""
Visualization and persistence for N-Queens counter results.

This module provides:
- Plot of placements and solutions against board size
- Timestamped run folders with JSON metadata
- Sweep summaries over several board sizes
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any

import numpy as np
import matplotlib.pyplot as plt

from .interfaces import SearchResult


def plot_search_counts(
    results: List[SearchResult],
    filename: Optional[str] = None,
    show: bool = False,
    metadata: Optional[Dict] = None
) -> Optional[str]:
    """
    Plot placements and solutions against board size.

    Both series are drawn on a log axis. Sizes with zero solutions are
    left out of the solutions series.

    Args:
        results: Finished searches, one per board size
        filename: Optional path to save the figure
        show: Whether to display the plot
        metadata: Optional dict with run parameters

    Returns:
        Filename if saved, None otherwise
    """
    ordered = sorted(results, key=lambda r: r.n)
    sizes = np.array([r.n for r in ordered])
    placements = np.array([r.placement_count for r in ordered], dtype=float)
    solutions = np.array([r.solution_count for r in ordered], dtype=float)

    plt.figure(figsize=(10, 6))

    plt.plot(sizes, placements, 'o-', color='blue', linewidth=1.5, label='Queen placements')
    has_solutions = solutions > 0
    plt.plot(sizes[has_solutions], solutions[has_solutions], 's-', color='green',
             linewidth=1.5, label='Solutions')

    plt.yscale('log')
    plt.xticks(sizes)
    plt.xlabel('Board size N', fontsize=12)
    plt.ylabel('Count', fontsize=12)

    title = 'N-Queens Backtracking Search'
    if metadata:
        subtitle_parts = []
        if 'state_space' in metadata:
            subtitle_parts.append(f"State={metadata['state_space']}")
        if 'row_order' in metadata:
            subtitle_parts.append(f"Rows={metadata['row_order']}")
        if subtitle_parts:
            title += '\n' + ' | '.join(subtitle_parts)

    plt.title(title, fontsize=13, fontweight='bold')
    plt.grid(True, alpha=0.3, which='both')
    plt.legend()
    plt.tight_layout()

    if filename:
        plt.savefig(filename, dpi=150, bbox_inches='tight')
        if not show:
            plt.close()
        return filename

    if show:
        plt.show()

    return None


def create_run_output_folder(base_output_dir: str, board_size: int) -> str:
    """
    Create a timestamped output folder for a run.

    Structure: base_output_dir/N{board_size}/run_{datetime}/

    Args:
        base_output_dir: Base output directory
        board_size: Board dimension N

    Returns:
        Path to created folder
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    run_folder = Path(base_output_dir) / f"N{board_size}" / f"run_{timestamp}"
    run_folder.mkdir(parents=True, exist_ok=True)
    return str(run_folder)


def _json_ready(metadata: Dict[str, Any]) -> Dict[str, Any]:
    """Convert numpy values in metadata to plain Python types."""
    json_metadata = {}
    for k, v in metadata.items():
        if isinstance(v, np.ndarray):
            json_metadata[k] = v.tolist()
        elif isinstance(v, np.integer):
            json_metadata[k] = int(v)
        elif isinstance(v, np.floating):
            json_metadata[k] = float(v)
        else:
            json_metadata[k] = v
    return json_metadata


def save_run_results(
    output_dir: str,
    result: SearchResult,
    metadata: Dict
) -> Dict[str, str]:
    """
    Save the result of a single search to a timestamped folder.

    Creates: output_dir/N{size}/run_{datetime}/metadata.json

    Args:
        output_dir: Base output directory
        result: Finished search
        metadata: Dict with run parameters

    Returns:
        Dict mapping result type to path
    """
    run_folder = create_run_output_folder(output_dir, result.n)

    json_metadata = _json_ready(metadata)
    json_metadata.update(result.to_dict())
    json_metadata['timestamp'] = datetime.now().isoformat()

    json_file = Path(run_folder) / "metadata.json"
    with open(json_file, 'w') as f:
        json.dump(json_metadata, f, indent=2)

    return {
        'run_folder': run_folder,
        'metadata': str(json_file),
    }


def save_sweep_results(
    output_dir: str,
    results: List[SearchResult],
    metadata: Dict,
    save_plots: bool = True
) -> Dict[str, str]:
    """
    Save a summary of searches over several board sizes.

    Args:
        output_dir: Directory to save results
        results: Finished searches
        metadata: Dict with run parameters
        save_plots: Whether to save the counts plot

    Returns:
        Dict mapping result type to path
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    saved_files = {}

    summary = _json_ready(metadata)
    summary['results'] = [r.to_dict() for r in sorted(results, key=lambda r: r.n)]
    summary['timestamp'] = datetime.now().isoformat()

    json_file = output_path / "summary.json"
    with open(json_file, 'w') as f:
        json.dump(summary, f, indent=2)
    saved_files['summary'] = str(json_file)

    if save_plots:
        plot_file = output_path / "search_counts.png"
        plot_search_counts(results, filename=str(plot_file), metadata=metadata)
        saved_files['plot'] = str(plot_file)

    return saved_files
