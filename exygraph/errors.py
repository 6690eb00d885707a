from __future__ import annotations


class GraphError(ValueError):
    """Raised when chart input data violates its contract."""


class CategoryLabelError(GraphError, LookupError):
    """Raised when a category value has no entry in the label table."""
