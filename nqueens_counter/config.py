"""
Configuration management for the N-Queens counter.

This module provides a clean interface for loading and validating
configuration from YAML files.
"""

import yaml
from dataclasses import dataclass, field
from typing import List


VALID_STATE_SPACES = ['array', 'bitset']
VALID_ROW_ORDERS = ['ascending', 'descending']


@dataclass
class Config:
    """
    Configuration container for the counter.

    Attributes:
        sizes: List of board sizes to run
        state_space: Board representation ('array' or 'bitset')
        row_order: Order rows are tried in ('ascending' or 'descending')
        verbose: Whether to print search banners and timing
        save: Whether to save results
        show: Whether to show plots
        output_dir: Directory to save results
    """

    # Board configuration
    sizes: List[int] = field(default_factory=lambda: [4])

    # Search configuration
    state_space: str = 'array'
    row_order: str = 'ascending'
    verbose: bool = False

    # Visualization and output
    show: bool = False
    save: bool = False
    output_dir: str = 'results'

    @classmethod
    def from_yaml(cls, path: str) -> 'Config':
        """
        Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance
        """
        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """
        Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Config instance
        """
        # 'size' is accepted as a single-board shorthand for 'sizes'
        sizes = data.get('sizes')
        if sizes is None:
            size = data.get('size')
            sizes = [size] if size is not None else [4]
        if not isinstance(sizes, list):
            sizes = [sizes]

        return cls(
            sizes=sizes,
            state_space=data.get('state_space', 'array'),
            row_order=data.get('row_order', 'ascending'),
            verbose=data.get('verbose', False),
            show=data.get('show', False),
            save=data.get('save', False),
            output_dir=data.get('output_dir', 'results'),
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return {
            'sizes': self.sizes,
            'state_space': self.state_space,
            'row_order': self.row_order,
            'verbose': self.verbose,
            'show': self.show,
            'save': self.save,
            'output_dir': self.output_dir,
        }

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Board sizes are only checked for presence here; a size below 1 is
        reported by board construction instead.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.sizes:
            errors.append("At least one board size must be specified")
        for size in self.sizes:
            if isinstance(size, bool) or not isinstance(size, int):
                errors.append(f"Board size must be an integer, got {size!r}")

        if self.state_space not in VALID_STATE_SPACES:
            errors.append(f"Invalid state_space '{self.state_space}', must be one of {VALID_STATE_SPACES}")

        if self.row_order not in VALID_ROW_ORDERS:
            errors.append(f"Invalid row_order '{self.row_order}', must be one of {VALID_ROW_ORDERS}")

        return errors

    def print_summary(self) -> None:
        """Print configuration summary."""
        print("=" * 60)
        print("Configuration Summary")
        print("=" * 60)
        print(f"Board sizes: {self.sizes}")
        print(f"State space: {self.state_space}")
        print(f"Row order: {self.row_order}")
        print(f"Save: {self.save}" + (f" → {self.output_dir}" if self.save else ""))
        print("=" * 60)
