"""Ranking candidates by edit distance to a query.

Every operation here builds a single comparator from its options, computes
one distance per candidate, and only then orders the candidates. Ordering is
ascending by distance; ties keep the caller's input order.

Example:
    >>> from fuzzyrank import closest_string, closest_strings, sort_by_similarity
    >>> closest_string("hep", ["length", "size", "help", "world"])
    'help'
    >>> closest_strings("hep", ["length", "size", "help", "world"], 2)
    ['help', 'size']
    >>> sort_by_similarity(["world", "help", "hello", "test"], "hep")[0]
    'help'
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, NamedTuple, Optional, Sequence

from fuzzyrank.exceptions import StringMatchingError, ValidationError
from fuzzyrank.options import DistanceFunction, MatchingOptions, build_comparator

logger = logging.getLogger(__name__)

EMPTY_CANDIDATES_MESSAGE = (
    "When using closest_string(), the possible_words array must contain at least one word"
)


class MatchResult(NamedTuple):
    """A candidate together with its distance to the query.

    Attributes:
        text: The candidate string, unchanged.
        distance: Distance from the query under the active options.
        index: Position of the candidate in the input sequence.
    """

    text: str
    distance: int
    index: int


def _compute_distances(
    query: str,
    candidates: Sequence[str],
    compare: DistanceFunction,
    workers: Optional[int] = None,
) -> list[int]:
    if workers is not None and workers < 1:
        raise ValidationError(f"workers must be a positive integer, got {workers}")
    if workers is None or workers == 1 or len(candidates) < 2:
        return [compare(query, candidate) for candidate in candidates]
    # Executor.map yields in submission order, regardless of completion order.
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda candidate: compare(query, candidate), candidates))


def _ranked(
    query: str,
    candidates: Sequence[str],
    compare: DistanceFunction,
    workers: Optional[int] = None,
) -> list[MatchResult]:
    distances = _compute_distances(query, candidates, compare, workers)
    results = [
        MatchResult(text, distance, index)
        for index, (text, distance) in enumerate(zip(candidates, distances))
    ]
    results.sort(key=lambda r: (r.distance, r.index))
    return results


def rank(
    query: str,
    candidates: Iterable[str],
    options: Optional[MatchingOptions] = None,
    limit: Optional[int] = None,
    workers: Optional[int] = None,
) -> list[MatchResult]:
    """Rank candidates by distance to the query, keeping the distances.

    Args:
        query: The string to match.
        candidates: Candidate strings; order is used to break ties.
        options: Matching options (default: case-insensitive Levenshtein).
        limit: Keep at most this many results; ``None`` keeps all and
            values ``<= 0`` keep none.
        workers: Compute distances on a thread pool of this size.

    Returns:
        MatchResult objects sorted by ascending distance.

    Raises:
        ValidationError: If ``workers`` is less than 1.

    Example:
        >>> [(r.text, r.distance) for r in rank("helo", ["world", "hello"])]
        [('hello', 1), ('world', 4)]
    """
    candidates = list(candidates)
    compare = build_comparator(options)
    logger.debug("Ranking %d candidates against %r", len(candidates), query)
    results = _ranked(query, candidates, compare, workers)
    if limit is None:
        return results
    return results[: max(limit, 0)]


def closest_string(
    query: str,
    candidates: Iterable[str],
    options: Optional[MatchingOptions] = None,
) -> str:
    """Return the candidate closest to the query.

    When several candidates share the minimum distance, the first one in
    input order wins.

    Raises:
        StringMatchingError: If ``candidates`` is empty.
    """
    candidates = list(candidates)
    if not candidates:
        logger.debug("closest_string() called with no candidates for %r", query)
        raise StringMatchingError(EMPTY_CANDIDATES_MESSAGE)

    compare = build_comparator(options)
    best_index = 0
    best_distance = compare(query, candidates[0])
    for index in range(1, len(candidates)):
        distance = compare(query, candidates[index])
        if distance < best_distance:
            best_index, best_distance = index, distance
    return candidates[best_index]


def closest_string_simple(query: str, candidates: Iterable[str]) -> str:
    """:func:`closest_string` with default options."""
    return closest_string(query, candidates)


def closest_strings(
    query: str,
    candidates: Iterable[str],
    n: int,
    options: Optional[MatchingOptions] = None,
) -> list[str]:
    """Return the ``n`` candidates closest to the query, closest first.

    ``n <= 0`` gives an empty list and ``n`` larger than the candidate count
    gives every candidate, sorted. An empty candidate set is not an error.
    """
    if n <= 0:
        return []
    return [r.text for r in rank(query, candidates, options, limit=n)]


def sort_by_similarity(
    candidates: Iterable[str],
    target: str,
    options: Optional[MatchingOptions] = None,
) -> list[str]:
    """Return all candidates ordered by ascending distance to ``target``."""
    return [r.text for r in rank(target, candidates, options)]


def compare_similarity(
    target: str,
    options: Optional[MatchingOptions] = None,
) -> Callable[[str, str], int]:
    """Build a sort comparator ordering strings by closeness to ``target``.

    The comparator returns a negative number when its first argument is
    closer to ``target`` than its second, zero on a tie, positive otherwise.

    Example:
        >>> from functools import cmp_to_key
        >>> sorted(["world", "help"], key=cmp_to_key(compare_similarity("hep")))
        ['help', 'world']
    """
    compare = build_comparator(options)

    def compare_to_target(a: str, b: str) -> int:
        return compare(a, target) - compare(b, target)

    return compare_to_target


def compare_similarity_simple(target: str) -> Callable[[str, str], int]:
    """:func:`compare_similarity` with default options."""
    return compare_similarity(target)


__all__ = [
    "EMPTY_CANDIDATES_MESSAGE",
    "MatchResult",
    "rank",
    "closest_string",
    "closest_string_simple",
    "closest_strings",
    "sort_by_similarity",
    "compare_similarity",
    "compare_similarity_simple",
]
