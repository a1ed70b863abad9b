"""High-level Polars Series operations for fuzzyrank.

Functions in This Module
------------------------
- ``match_series()``: For each query, the ``n`` closest targets with distances
- ``sort_series_by_similarity()``: Reorder a Series by closeness to a target

Example Usage
-------------
>>> import polars as pl
>>> import fuzzyrank as fz
>>>
>>> queries = pl.Series(["helo", "wrld"])
>>> targets = pl.Series(["hello", "world", "help"])
>>> fz.match_series(queries, targets, n=1)
>>>
>>> fz.sort_series_by_similarity(pl.Series("words", ["world", "help", "hello"]), "hep")

See Also
--------
- ``fuzzyrank.expr``: Polars expression namespace for column operations
- ``fuzzyrank.batch``: Batch operations on plain lists
"""

from typing import Optional

import polars as pl

from fuzzyrank.options import MatchingOptions
from fuzzyrank.ranking import rank

_MATCH_SCHEMA = {
    "query_idx": pl.Int64,
    "query": pl.Utf8,
    "rank": pl.Int64,
    "target_idx": pl.Int64,
    "target": pl.Utf8,
    "distance": pl.Int64,
}


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    n: int = 1,
    options: Optional[MatchingOptions] = None,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each non-null query, keeps the ``n`` closest non-null targets. Ties
    keep target order.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        n: Number of matches to keep per query
        options: Matching options (default: case-insensitive Levenshtein)

    Returns:
        DataFrame with columns: query_idx, query, rank, target_idx, target,
        distance. ``rank`` starts at 1; indices refer to the input Series.

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, n=2)
    """
    targets = [
        (idx, str(value)) for idx, value in enumerate(target_series.to_list()) if value is not None
    ]
    target_texts = [text for _, text in targets]

    rows = []
    for query_idx, query in enumerate(query_series.to_list()):
        if query is None:
            continue
        for position, match in enumerate(rank(str(query), target_texts, options, limit=n), 1):
            rows.append(
                {
                    "query_idx": query_idx,
                    "query": str(query),
                    "rank": position,
                    "target_idx": targets[match.index][0],
                    "target": match.text,
                    "distance": match.distance,
                }
            )

    return pl.DataFrame(rows, schema=_MATCH_SCHEMA)


def sort_series_by_similarity(
    series: "pl.Series",
    target: str,
    options: Optional[MatchingOptions] = None,
) -> "pl.Series":
    """
    Sort a Series by ascending edit distance to ``target``.

    Nulls are dropped; the Series name is kept.

    Example:
        >>> s = pl.Series("words", ["world", "help", "hello", "test"])
        >>> sort_series_by_similarity(s, "hep").to_list()[0]
        'help'
    """
    values = [str(v) for v in series.to_list() if v is not None]
    ordered = [match.text for match in rank(target, values, options)]
    return pl.Series(series.name, ordered, dtype=pl.Utf8)


__all__ = ["match_series", "sort_series_by_similarity"]
