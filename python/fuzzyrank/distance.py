"""Levenshtein edit distance.

Two implementations share one contract: for any pair of strings they return
the same distance. ``levenshtein_distance`` picks between them by input
length only.

- ``bit_parallel_distance``: Myers' bit-vector algorithm (Hyyrö's
  formulation for global edit distance). The pattern is encoded as one
  bitmask per distinct character and each column of the DP table is updated
  with a handful of integer operations.
- ``dp_distance``: the classic Wagner-Fischer recurrence over two rolling
  rows.

Example:
    >>> from fuzzyrank import levenshtein_distance
    >>> levenshtein_distance("kitten", "sitting")
    3
"""

from typing import Dict

# Inputs whose longer side is shorter than this use the bit-parallel path.
BIT_PARALLEL_THRESHOLD = 32


def _check_str(a, b) -> None:
    if not isinstance(a, str) or not isinstance(b, str):
        raise TypeError(
            "levenshtein_distance() arguments must be str, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )


def bit_parallel_distance(a: str, b: str) -> int:
    """Levenshtein distance using Myers' bit-parallel algorithm.

    ``a`` is the pattern; each bit ``i`` of the vertical delta vectors
    tracks row ``i + 1`` of the DP table. Python integers are unbounded, so
    this is correct for any length, but it is only faster than
    :func:`dp_distance` while the pattern fits a machine word.
    """
    m = len(a)
    if m == 0:
        return len(b)
    if not b:
        return m

    peq: Dict[str, int] = {}
    for i, ch in enumerate(a):
        peq[ch] = peq.get(ch, 0) | (1 << i)

    mask = (1 << m) - 1
    last = 1 << (m - 1)
    pv = mask
    mv = 0
    score = m

    for ch in b:
        eq = peq.get(ch, 0)
        xv = eq | mv
        xh = (((eq & pv) + pv) ^ pv) | eq
        ph = mv | ~(xh | pv)
        mh = pv & xh
        if ph & last:
            score += 1
        elif mh & last:
            score -= 1
        # Row 0 grows by one per column, so a +1 shifts in at the bottom.
        ph = (ph << 1) | 1
        mh <<= 1
        pv = (mh | ~(xv | ph)) & mask
        mv = ph & xv & mask

    return score


def dp_distance(a: str, b: str) -> int:
    """Levenshtein distance using the full dynamic-programming recurrence.

    Only two rows are kept; the shorter string indexes the columns so memory
    is ``O(min(len(a), len(b)))``.
    """
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur.append(prev[j - 1])
            else:
                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))
        prev = cur
    return prev[-1]


def levenshtein_distance(a: str, b: str) -> int:
    """Return the Levenshtein edit distance between two strings.

    Comparison is exact (case-sensitive); use a comparator from
    :func:`fuzzyrank.build_comparator` for case-insensitive matching.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Minimum number of single-character insertions, deletions and
        substitutions turning ``a`` into ``b``.

    Raises:
        TypeError: If either argument is not a ``str``.

    Example:
        >>> levenshtein_distance("", "abc")
        3
        >>> levenshtein_distance("hello", "hallo")
        1
    """
    _check_str(a, b)
    if a == b:
        return 0
    if max(len(a), len(b)) < BIT_PARALLEL_THRESHOLD:
        return bit_parallel_distance(a, b)
    return dp_distance(a, b)


def levenshtein_similarity(a: str, b: str) -> float:
    """Normalized Levenshtein similarity in ``[0.0, 1.0]``.

    ``1 - distance / max(len(a), len(b))``; two empty strings score 1.0.
    """
    _check_str(a, b)
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


__all__ = [
    "BIT_PARALLEL_THRESHOLD",
    "bit_parallel_distance",
    "dp_distance",
    "levenshtein_distance",
    "levenshtein_similarity",
]
