"""Core data structures shared by the search algorithms."""
