"""
YAML configuration file loader for grid searches.

This module provides utilities to load the grid description and the
per-algorithm parameters from YAML configuration files.
"""

import yaml
from typing import Dict, Any
from pathlib import Path


def load_yaml_config(filepath: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary containing configuration parameters ({} for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If file is not valid YAML

    Example:
        >>> config = load_yaml_config('configs/grid.yaml')
        >>> print(config['grid']['rows'])
        5
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        try:
            config = yaml.safe_load(f)
            return config if config is not None else {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {filepath}: {e}")


def load_grid_config(config_dir: str = 'configs') -> Dict[str, Any]:
    """
    Load the grid description from grid.yaml.

    Args:
        config_dir: Directory containing config files (default: 'configs')

    Returns:
        Dictionary with grid parameters:
        - rows, cols: Grid dimensions
        - default_cost: Cost of cells without an override
        - costs: List of {row, col, cost} overrides
        - cost_file: Optional CSV file with the full cost matrix
        - start, goal: {row, col} endpoints
    """
    config_path = Path(config_dir) / 'grid.yaml'
    config = load_yaml_config(str(config_path))
    return config.get('grid', {})


def load_algorithm_config(algorithm_name: str, config_dir: str = 'configs') -> Dict[str, Any]:
    """
    Load algorithm-specific configuration from YAML file.

    Args:
        algorithm_name: Name of algorithm ('bfs', 'ucs')
        config_dir: Directory containing config files (default: 'configs')

    Returns:
        Dictionary with algorithm-specific parameters

    Raises:
        FileNotFoundError: If algorithm config file doesn't exist

    Example:
        >>> ucs_config = load_algorithm_config('ucs')
        >>> policy = ucs_config['parameters']['cost_policy']
    """
    config_path = Path(config_dir) / f'{algorithm_name}.yaml'
    config = load_yaml_config(str(config_path))
    return config.get('algorithm', {})


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.

    Later dictionaries override earlier ones for conflicting keys.

    Example:
        >>> merge_configs({'rows': 5, 'cols': 5}, {'cols': 8})
        {'rows': 5, 'cols': 8}
    """
    merged = {}
    for config in configs:
        merged.update(config)
    return merged
