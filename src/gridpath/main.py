"""
Main entry point for grid searches.

This CLI builds a grid from YAML configuration files, runs a search
between two cells and prints (and optionally plots) the resulting path.
"""

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml

from .algorithms import ALGORITHM_MAP
from .core.exceptions import GridPathError, InvalidInputError
from .core.graph_search import GraphSearch
from .utils.config_loader import load_algorithm_config, load_grid_config, merge_configs
from .utils.graph_builder import Cell, Grid, cost_overrides, load_cost_matrix, make_grid

logger = logging.getLogger(__name__)


def create_grid_from_config(grid_config: Dict[str, Any]) -> Grid:
    """
    Create a Grid from the grid configuration dictionary.

    A cost_file, when set, supplies the full cost matrix and fixes the
    dimensions; otherwise rows/cols/default_cost/costs are used.

    Args:
        grid_config: Grid configuration from YAML

    Returns:
        Grid object
    """
    cost_file = grid_config.get('cost_file')
    if cost_file:
        matrix = load_cost_matrix(cost_file)
        return make_grid(matrix.shape[0], matrix.shape[1], costs=matrix)

    return make_grid(
        int(grid_config.get('rows', 5)),
        grid_config.get('cols'),
        default_cost=grid_config.get('default_cost', 1.0),
        costs=cost_overrides(grid_config.get('costs') or []),
    )


def fit_config_to_dimensions(grid_config: Dict[str, Any],
                             keep: Iterable[str] = ()) -> Dict[str, Any]:
    """
    Drop configured cells that fall outside the configured dimensions.

    Used when rows/cols are overridden: cost overrides and endpoints written
    for a larger grid are discarded with a warning instead of failing the
    build. Keys listed in ``keep`` (endpoints given explicitly) are left
    alone so that they are still reported as out-of-grid errors.

    Args:
        grid_config: Merged grid configuration
        keep: Keys whose cells must not be dropped

    Returns:
        A new configuration dictionary
    """
    rows = int(grid_config.get('rows', 5))
    cols = int(grid_config.get('cols') or rows)

    def inside(cell: Dict[str, Any]) -> bool:
        return 0 <= int(cell['row']) < rows and 0 <= int(cell['col']) < cols

    fitted = dict(grid_config)
    costs = []
    for entry in grid_config.get('costs') or []:
        if inside(entry):
            costs.append(entry)
        else:
            logger.warning("Dropping cost override for (%s, %s): outside the %dx%d grid",
                           entry['row'], entry['col'], rows, cols)
    fitted['costs'] = costs

    for key in ('start', 'goal'):
        cell = grid_config.get(key)
        if cell and key not in keep and not inside(cell):
            logger.warning("Ignoring configured %s (%s, %s): outside the %dx%d grid",
                           key, cell['row'], cell['col'], rows, cols)
            fitted[key] = None
    return fitted


def parse_cell(value: str) -> Cell:
    """
    Parse a 'row,col' string.

    Raises:
        argparse.ArgumentTypeError: If the value is not two comma-separated integers
    """
    try:
        row, col = (int(part) for part in value.split(','))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got {value!r}")
    return row, col


def _config_cell(grid_config: Dict[str, Any], key: str, default: Cell) -> Cell:
    cell = grid_config.get(key)
    if not cell:
        return default
    return int(cell['row']), int(cell['col'])


def format_path(search: GraphSearch) -> str:
    """Render the last path of a search as 'cell -> cell -> ...'."""
    return " -> ".join(str(node.data) for node in search.path_nodes())


def run_search(algorithm_name: str,
               config_dir: str = 'configs',
               overrides: Optional[Dict[str, Any]] = None,
               visualize: bool = True,
               save: bool = False) -> Tuple[GraphSearch, Optional[List[Any]]]:
    """
    Run a search algorithm on the configured grid.

    Args:
        algorithm_name: Name of algorithm ('bfs', 'ucs')
        config_dir: Directory containing configuration files
        overrides: Grid configuration keys taking precedence over grid.yaml
        visualize: Whether to show visualization
        save: Whether to save the plot

    Returns:
        The search object and the path it returned (None if no path)

    Raises:
        InvalidInputError: If the algorithm name is unknown
    """
    if algorithm_name not in ALGORITHM_MAP:
        raise InvalidInputError(
            f"Unknown algorithm '{algorithm_name}'. "
            f"Available algorithms: {', '.join(ALGORITHM_MAP.keys())}")

    print(f"\n{'='*60}")
    print(f"Running {algorithm_name.upper()} Grid Search")
    print(f"{'='*60}\n")

    overrides = overrides or {}
    grid_config = merge_configs(load_grid_config(config_dir), overrides)
    if ('rows' in overrides or 'cols' in overrides) and not grid_config.get('cost_file'):
        grid_config = fit_config_to_dimensions(grid_config, keep=overrides)
    alg_config = load_algorithm_config(algorithm_name, config_dir)

    grid = create_grid_from_config(grid_config)
    print(f"Grid: {grid.rows}x{grid.cols}")

    start = _config_cell(grid_config, 'start', (0, 0))
    goal = _config_cell(grid_config, 'goal', (grid.rows - 1, grid.cols - 1))
    print(f"Start: {start}")
    print(f"Goal: {goal}")

    SearchClass = ALGORITHM_MAP[algorithm_name]
    search = SearchClass(alg_config)
    print(f"Search: {search}")

    path = search.search(grid.node(*start), grid.node(*goal), grid.graph)

    print("\n" + "="*60)
    print("Results:")
    print("="*60)
    for key, value in search.get_metrics().items():
        print(f"  {key}: {value}")
    print("="*60 + "\n")

    if path is None:
        print("No path found!")
        return search, path

    print(f"Path found with {len(path)} cells:")
    print(f"  {format_path(search)}")

    if visualize or save:
        import matplotlib.pyplot as plt
        from .utils.visualization import draw_grid

        output_config = alg_config.get('output', {})
        fig, ax = plt.subplots(figsize=(8, 8))
        draw_grid(ax, grid, path=path, start=start, goal=goal,
                  path_color=output_config.get('path_color', 'blue'),
                  path_label=f"{search.name} Path")
        ax.set_title(f"{search.name}: cost {search.path_cost():g}, "
                     f"nodes explored {search.nodes_explored}")
        plt.tight_layout()

        if save:
            save_path = Path(output_config.get('save_path', f'outputs/{algorithm_name}/'))
            save_path.mkdir(parents=True, exist_ok=True)
            plot_file = save_path / output_config.get('plot_filename', 'path_plot.png')
            fig.savefig(plot_file, dpi=150, bbox_inches='tight')
            print(f"Plot saved to: {plot_file}")

        if visualize:
            plt.show()
        else:
            plt.close(fig)

    return search, path


def main(argv: Optional[List[str]] = None):
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description='Shortest paths on a weighted grid',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fewest steps between the configured cells
  gridpath --algorithm bfs

  # Cheapest path, saving the plot without opening a window
  gridpath --algorithm ucs --save --no-viz

  # Override the endpoints from the command line
  gridpath --algorithm ucs --start 0,0 --goal 4,4
        """
    )

    parser.add_argument(
        '--algorithm', '-a',
        type=str,
        choices=list(ALGORITHM_MAP.keys()),
        required=True,
        help='Search algorithm to use'
    )

    parser.add_argument(
        '--config-dir', '-c',
        type=str,
        default='configs',
        help='Directory containing YAML configuration files (default: configs)'
    )

    parser.add_argument('--rows', type=int, help='Override the number of rows')
    parser.add_argument('--cols', type=int, help='Override the number of columns')
    parser.add_argument('--start', type=parse_cell, help="Start cell as 'row,col'")
    parser.add_argument('--goal', type=parse_cell, help="Goal cell as 'row,col'")

    parser.add_argument(
        '--save', '-s',
        action='store_true',
        help='Save the path plot'
    )

    parser.add_argument(
        '--no-viz',
        action='store_true',
        help='Disable visualization'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log every expanded node'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    overrides: Dict[str, Any] = {}
    if args.rows is not None:
        overrides['rows'] = args.rows
    if args.cols is not None:
        overrides['cols'] = args.cols
    if args.start is not None:
        overrides['start'] = {'row': args.start[0], 'col': args.start[1]}
    if args.goal is not None:
        overrides['goal'] = {'row': args.goal[0], 'col': args.goal[1]}

    try:
        run_search(
            algorithm_name=args.algorithm,
            config_dir=args.config_dir,
            overrides=overrides,
            visualize=not args.no_viz,
            save=args.save
        )
    except (FileNotFoundError, yaml.YAMLError, GridPathError) as e:
        logger.error("%s", e)
        parser.exit(1, f"Error: {e}\n")


if __name__ == '__main__':
    main()
