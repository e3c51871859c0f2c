"""Graph search algorithms."""

from .bfs import BreadthFirstSearch, breadth_first_search
from .ucs import CostPolicy, PathStep, UniformCostSearch, uniform_cost_search

ALGORITHM_MAP = {
    'bfs': BreadthFirstSearch,
    'ucs': UniformCostSearch,
}
