"""
Graph construction utilities for grid-shaped graphs.

This module builds a regular rows x cols grid of nodes with 4-connectivity
(up, down, left, right) and per-cell entry costs.

Used by: the CLI, the renderer and the tests of both search algorithms
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.exceptions import InvalidInputError
from ..core.graph import Graph, Node

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]
CostSpec = Union[Mapping[Cell, float], Sequence[Sequence[float]], np.ndarray]


class Grid:
    """
    A rows x cols grid of nodes backed by a Graph.

    Node ids are ``row * cols + col`` and every node's ``data`` is its
    ``(row, col)`` cell, so callers can map a returned path back onto the grid.

    Attributes:
        rows (int): Number of rows
        cols (int): Number of columns
        graph (Graph): Arena holding every node
        cells (List[List[Node]]): Nodes indexed as cells[row][col]
    """

    def __init__(self, rows: int, cols: int, costs: np.ndarray):
        """
        Create the nodes and connect them.

        Args:
            rows: Number of rows
            cols: Number of columns
            costs: (rows, cols) array of entry costs
        """
        self.rows = rows
        self.cols = cols
        self.graph = Graph()
        self.cells: List[List[Node]] = [
            [self.graph.add_node(Node(row * cols + col, float(costs[row, col]), (row, col)))
             for col in range(cols)]
            for row in range(rows)
        ]
        self._populate_neighbors()

    def _populate_neighbors(self) -> None:
        """
        Connect every cell to its 4-neighbours.

        Neighbours are appended in the order left, up, down, right; each edge
        captures the source cell's cost at this moment.
        """
        for row in range(self.rows):
            for col in range(self.cols):
                node = self.cells[row][col]
                node.neighbors.clear()
                if col > 0:
                    node.connect(self.cells[row][col - 1])
                if row > 0:
                    node.connect(self.cells[row - 1][col])
                if row < self.rows - 1:
                    node.connect(self.cells[row + 1][col])
                if col < self.cols - 1:
                    node.connect(self.cells[row][col + 1])

    def node(self, row: int, col: int) -> Node:
        """
        Get the node at a cell.

        Raises:
            InvalidInputError: If the cell is outside the grid
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise InvalidInputError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    def iter_nodes(self) -> Iterator[Node]:
        """Yield nodes row by row."""
        for row in self.cells:
            yield from row

    def set_cost(self, row: int, col: int, cost: float) -> None:
        """
        Change a cell's entry cost in place.

        Edges already built keep the cost they captured; call
        refresh_edge_costs() to rebuild them.
        """
        self.node(row, col).set_cost(cost)
        logger.debug("cell (%d, %d) cost set to %s", row, col, cost)

    def refresh_edge_costs(self) -> None:
        """Rebuild every edge so the captured costs match the current cell costs."""
        self._populate_neighbors()

    def cost_matrix(self) -> np.ndarray:
        """Current cell costs as a (rows, cols) float array."""
        return np.array([[node.cost for node in row] for row in self.cells], dtype=float)

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"


def make_grid(rows: int, cols: Optional[int] = None, default_cost: float = 1.0,
              costs: Optional[CostSpec] = None) -> Grid:
    """
    Build a 4-connected grid graph.

    Args:
        rows: Number of rows
        cols: Number of columns (default: same as rows)
        default_cost: Entry cost of cells not listed in costs
        costs: Either a full (rows, cols) array-like of costs, or a mapping
               {(row, col): cost} overriding individual cells

    Returns:
        The constructed Grid

    Raises:
        InvalidInputError: On non-positive dimensions, a cost array of the wrong
            shape or an override outside the grid
        InvalidGraphError: On a negative cost

    Example:
        >>> grid = make_grid(3, costs={(1, 1): 100})
        >>> grid.node(1, 1).cost
        100.0
        >>> len(grid.node(1, 1).neighbors)
        4
    """
    if cols is None:
        cols = rows
    if rows <= 0 or cols <= 0:
        raise InvalidInputError(f"Grid dimensions must be positive, got {rows}x{cols}")

    matrix = np.full((rows, cols), float(default_cost))
    if isinstance(costs, Mapping):
        for (row, col), cost in costs.items():
            if not (0 <= row < rows and 0 <= col < cols):
                raise InvalidInputError(f"Cost override for ({row}, {col}) is outside the grid")
            matrix[row, col] = cost
    elif costs is not None:
        array = np.asarray(costs, dtype=float)
        if array.shape != (rows, cols):
            raise InvalidInputError(
                f"Cost array has shape {array.shape}, expected {(rows, cols)}")
        matrix = array

    grid = Grid(rows, cols, matrix)
    logger.debug("built %r", grid)
    return grid


def load_cost_matrix(filepath: Union[str, Path]) -> np.ndarray:
    """
    Load a grid of cell costs from a CSV file.

    Args:
        filepath: CSV file with one row of comma-separated costs per grid row

    Returns:
        2-D float array of costs

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Cost file not found: {filepath}")
    return np.loadtxt(filepath, delimiter=',', ndmin=2)


def cost_overrides(entries: Sequence[Dict[str, float]]) -> Dict[Cell, float]:
    """
    Convert config entries ``{row, col, cost}`` into a cost override mapping.

    Example:
        >>> cost_overrides([{'row': 1, 'col': 1, 'cost': 100}])
        {(1, 1): 100}
    """
    return {(int(entry['row']), int(entry['col'])): entry['cost'] for entry in entries}
