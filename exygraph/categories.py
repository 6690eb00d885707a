from __future__ import annotations

import operator
from typing import Any, Protocol, Sequence

from exygraph.errors import CategoryLabelError


MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class CategoryLabeler(Protocol):
    def __call__(self, category: Any) -> str: ...


def table_labeler(table: Sequence[str]) -> CategoryLabeler:
    """Build a lookup that maps an integer index into ``table``."""
    entries = tuple(str(item) for item in table)

    def lookup(category: Any) -> str:
        return entries[_table_index(category, len(entries))]

    return lookup


def month_abbreviation(category: Any) -> str:
    return MONTH_ABBREVIATIONS[_table_index(category, len(MONTH_ABBREVIATIONS))]


def _table_index(category: Any, size: int) -> int:
    if isinstance(category, bool):
        raise CategoryLabelError(f"category must be an integer index, got {category!r}")
    try:
        idx = operator.index(category)
    except TypeError:
        if isinstance(category, float) and category.is_integer():
            idx = int(category)
        else:
            raise CategoryLabelError(f"category must be an integer index, got {category!r}") from None
    if idx < 0 or idx >= size:
        raise CategoryLabelError(f"category index out of range: {idx} not in [0, {size})")
    return idx
