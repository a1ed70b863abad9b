"""
Polars integration for fuzzyrank.

Levels:
    1. **Expression Namespace** (`.fuzzy`) - Per-row operations
       Example: `df.with_columns(dist=pl.col("name").fuzzy.distance("John"))`

    2. **Series Functions** - Top-N matching and sorting
       Example: `match_series(queries, targets, n=3)`

Examples:
    >>> import polars as pl
    >>> import fuzzyrank.polars as fzp  # or: from fuzzyrank import polars as fzp

    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(dist=pl.col("name").fuzzy.distance("John"))

    >>> fzp.sort_series_by_similarity(df["name"], "Jon")
"""

# Expression namespace is registered on import
import fuzzyrank.expr as _expr  # noqa: F401
from fuzzyrank.polars_ext import (
    match_series,
    sort_series_by_similarity,
)

__all__ = [
    "match_series",
    "sort_series_by_similarity",
]
