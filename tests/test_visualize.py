"""
Test suite for plotting and result saving.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json
from pathlib import Path

import numpy as np

from nqueens_counter.interfaces import SearchResult
from nqueens_counter.solver import count_solutions
from nqueens_counter.visualize import (
    create_run_output_folder,
    plot_search_counts,
    save_run_results,
    save_sweep_results,
)


def test_create_run_output_folder(tmp_path):
    folder = Path(create_run_output_folder(str(tmp_path), 8))
    assert folder.is_dir()
    assert folder.parent.name == 'N8'
    assert folder.name.startswith('run_')


def test_save_run_results(tmp_path):
    result = count_solutions(4)
    saved = save_run_results(str(tmp_path), result, {
        'state_space': 'array',
        'elapsed': np.float64(0.25),
    })

    with open(saved['metadata']) as f:
        data = json.load(f)

    assert data['n'] == 4
    assert data['placement_count'] == 16
    assert data['solution_count'] == 2
    assert data['state_space'] == 'array'
    assert data['elapsed'] == 0.25
    assert 'timestamp' in data


def test_save_sweep_results(tmp_path):
    results = [count_solutions(n) for n in [6, 4, 5]]
    saved = save_sweep_results(str(tmp_path), results, {'row_order': 'ascending'})

    with open(saved['summary']) as f:
        data = json.load(f)

    assert [r['n'] for r in data['results']] == [4, 5, 6]
    assert [r['solution_count'] for r in data['results']] == [2, 10, 4]
    assert data['row_order'] == 'ascending'
    assert Path(saved['plot']).is_file()


def test_save_sweep_without_plot(tmp_path):
    saved = save_sweep_results(str(tmp_path), [count_solutions(4)], {}, save_plots=False)
    assert 'plot' not in saved
    assert not (tmp_path / 'search_counts.png').exists()


def test_plot_search_counts_with_zero_solutions(tmp_path):
    """Sizes with no solutions (N=2, 3) can still be plotted."""
    results = [SearchResult(2, 2, 0), SearchResult(3, 5, 0), SearchResult(4, 16, 2)]
    filename = str(tmp_path / 'counts.png')

    assert plot_search_counts(results, filename=filename, metadata={'state_space': 'array'}) == filename
    assert Path(filename).is_file()
