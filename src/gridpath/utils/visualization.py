"""
Visualization utilities for grid searches.

This module draws a grid's cell costs with matplotlib and overlays the path
returned by a search, together with the start and goal cells.
"""

from typing import List, Optional, Sequence

from ..core.graph import Node
from .graph_builder import Cell, Grid


def path_cells(path: Optional[Sequence]) -> List[Cell]:
    """
    Extract the (row, col) cells of a path.

    Accepts both BFS paths (nodes) and UCS paths (PathStep(node, cost)).
    """
    if not path:
        return []
    cells = []
    for entry in path:
        node = entry if isinstance(entry, Node) else entry.node
        cells.append(node.data)
    return cells


def draw_grid(ax,
              grid: Grid,
              path: Optional[Sequence] = None,
              start: Optional[Cell] = None,
              goal: Optional[Cell] = None,
              path_color: str = 'blue',
              path_label: str = "Path",
              show_costs: bool = True,
              cmap: str = 'Greys'):
    """
    Draw the grid with cell costs, start, goal, and optional path.

    Rows grow downwards, matching how the grid is indexed.

    Args:
        ax: Matplotlib axis to draw on
        grid: Grid to draw
        path: Optional path returned by a search
        start: Optional start cell (row, col)
        goal: Optional goal cell (row, col)
        path_color: Color for the path line
        path_label: Label for the path in legend
        show_costs: Write each cell's cost inside it
        cmap: Colormap used for the cost shading

    Example:
        >>> fig, ax = plt.subplots()
        >>> grid = make_grid(5, costs={(2, 2): 50})
        >>> draw_grid(ax, grid, start=(0, 0), goal=(4, 4))
        >>> plt.show()
    """
    ax.clear()

    costs = grid.cost_matrix()
    ax.imshow(costs, cmap=cmap, origin='upper', alpha=0.6)

    if show_costs:
        for row in range(grid.rows):
            for col in range(grid.cols):
                ax.text(col, row, f"{costs[row, col]:g}", ha='center', va='center',
                        fontsize=8, color='black', zorder=2)

    # Draw path if provided
    cells = path_cells(path)
    if cells:
        rows, cols = zip(*cells)
        ax.plot(cols, rows, color=path_color, linewidth=2,
                label=path_label, zorder=3, marker='o', markersize=4)

    # Draw start point (green)
    if start:
        ax.scatter(start[1], start[0], color='green', s=100, marker='o',
                   label="Start", zorder=10, edgecolors='black', linewidths=1.5)

    # Draw goal point (red)
    if goal:
        ax.scatter(goal[1], goal[0], color='red', s=100, marker='*',
                   label="Goal", zorder=10, edgecolors='black', linewidths=1.5)

    ax.set_xticks(range(grid.cols))
    ax.set_yticks(range(grid.rows))
    ax.set_xlabel("Column")
    ax.set_ylabel("Row")
    ax.set_aspect('equal', adjustable='box')
    if cells or start or goal:
        ax.legend(loc='best')
