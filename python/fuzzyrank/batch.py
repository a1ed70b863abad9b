"""Batch operations API for fuzzyrank.

List-in, list-out helpers built on the same comparator and ranking code as
the single-query functions. Each call resolves its options into one
comparator and reuses it for every pair.

Example usage:
    >>> import fuzzyrank.batch as batch

    # Distance of a query to every string, in input order
    >>> batch.distances(["hello", "hallo", "world"], "helo")
    [1, 2, 4]

    # Top N closest strings with their distances
    >>> matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
    >>> [(m.text, m.distance) for m in matches]
    [('apple', 2), ('apply', 2)]

    # Pairwise distances between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [1, 1]

    # Full distance matrix
    >>> matrix = batch.distance_matrix(["hello", "world"], ["hallo", "word", "help"])
    >>> # matrix[0] = distances of "hello" to each choice
"""

from __future__ import annotations

from typing import Optional

from fuzzyrank.exceptions import ValidationError
from fuzzyrank.options import MatchingOptions, build_comparator
from fuzzyrank.ranking import MatchResult, _compute_distances, rank

__all__ = [
    "distances",
    "best_matches",
    "pairwise",
    "distance_matrix",
]


def distances(
    strings: list[str],
    query: str,
    options: Optional[MatchingOptions] = None,
    workers: Optional[int] = None,
) -> list[int]:
    """Compute the distance from a query to every string.

    Args:
        strings: Strings to compare against the query.
        query: The query string.
        options: Matching options (default: case-insensitive Levenshtein).
        workers: Compute distances on a thread pool of this size.

    Returns:
        Distances in the same order as ``strings``.

    Raises:
        ValidationError: If ``workers`` is less than 1.
    """
    compare = build_comparator(options)
    return _compute_distances(query, list(strings), compare, workers)


def best_matches(
    strings: list[str],
    query: str,
    limit: int = 5,
    options: Optional[MatchingOptions] = None,
    max_distance: Optional[int] = None,
    workers: Optional[int] = None,
) -> list[MatchResult]:
    """Find the top N closest strings to a query.

    Computes every distance, drops strings farther than ``max_distance``,
    sorts ascending by distance (ties keep input order) and returns at most
    ``limit`` results.

    Args:
        strings: Strings to search.
        query: The query string.
        limit: Maximum number of results to return (default: 5).
        options: Matching options (default: case-insensitive Levenshtein).
        max_distance: Largest distance to keep, inclusive (default: no limit).
        workers: Compute distances on a thread pool of this size.

    Returns:
        List of MatchResult objects with ``text``, ``distance`` and ``index``.

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", max_distance=2)
        >>> [m.text for m in matches]
        ['apple', 'apply']
    """
    results = rank(query, strings, options, workers=workers)
    if max_distance is not None:
        results = [r for r in results if r.distance <= max_distance]
    return results[: max(limit, 0)]


def pairwise(
    left: list[str],
    right: list[str],
    options: Optional[MatchingOptions] = None,
) -> list[int]:
    """Compute distances between two equal-length lists, pair by pair.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["hello", "world"], ["hallo", "word"])
        [1, 1]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"pairwise() needs equal-length lists, got {len(left)} and {len(right)}"
        )
    compare = build_comparator(options)
    return [compare(a, b) for a, b in zip(left, right)]


def distance_matrix(
    queries: list[str],
    choices: list[str],
    options: Optional[MatchingOptions] = None,
) -> list[list[int]]:
    """Compute the distance between every query and every choice.

    Returns:
        2D list where ``result[i][j]`` is the distance between
        ``queries[i]`` and ``choices[j]``.

    Example:
        >>> matrix = distance_matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(matrix), len(matrix[0])
        (2, 3)
    """
    compare = build_comparator(options)
    return [[compare(query, choice) for choice in choices] for query in queries]
