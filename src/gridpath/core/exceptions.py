"""
Exception hierarchy for gridpath.

Both concrete errors subclass ValueError so callers that only catch
ValueError keep working.
"""


class GridPathError(Exception):
    """Base class for all gridpath errors."""


class InvalidInputError(GridPathError, ValueError):
    """Raised when search endpoints or builder arguments are invalid."""


class InvalidGraphError(GridPathError, ValueError):
    """Raised when a graph violates a structural rule (negative cost, duplicate id)."""
