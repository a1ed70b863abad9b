"""Matching options and the comparator factory.

A :class:`MatchingOptions` value says *how* two strings are compared: whether
case is folded first and which distance function is used. The factory
:func:`build_comparator` resolves it once into a plain two-argument function
that every ranking operation reuses for all of its candidates.

Example:
    >>> from fuzzyrank import MatchingOptions, build_comparator
    >>> compare = build_comparator(MatchingOptions(case_sensitive=False))
    >>> compare("ABC", "abc")
    0
    >>> compare = build_comparator(MatchingOptions(case_sensitive=True))
    >>> compare("ABC", "abc")
    3
"""

from dataclasses import dataclass
from typing import Callable, Optional, Union

from fuzzyrank._utils import normalize_metric
from fuzzyrank.distance import levenshtein_distance
from fuzzyrank.enums import Metric

DistanceFunction = Callable[[str, str], int]

_BUILTIN_METRICS = {
    Metric.LEVENSHTEIN: levenshtein_distance,
}


@dataclass(frozen=True)
class MatchingOptions:
    """Configuration shared by every matching operation.

    Attributes:
        case_sensitive: When False (the default) both strings are lowercased
            before they reach the distance function.
        compare_fn: ``None`` for Levenshtein distance, a built-in metric
            (``Metric`` member or its name), or any callable
            ``(str, str) -> int`` that replaces the metric entirely. Custom
            functions are not checked for non-negativity or symmetry.

    Raises:
        AlgorithmError: If ``compare_fn`` names an unknown metric.
    """

    case_sensitive: bool = False
    compare_fn: Optional[Union[DistanceFunction, Metric, str]] = None

    def __post_init__(self):
        if isinstance(self.compare_fn, (str, Metric)):
            # Validate names eagerly rather than on first comparison.
            object.__setattr__(self, "compare_fn", normalize_metric(self.compare_fn))
        elif self.compare_fn is not None and not callable(self.compare_fn):
            raise TypeError(
                "compare_fn must be callable, a Metric or a metric name, "
                f"got {type(self.compare_fn).__name__}"
            )

    @property
    def metric(self) -> Metric:
        """The distance strategy these options resolve to."""
        if self.compare_fn is None:
            return Metric.LEVENSHTEIN
        if isinstance(self.compare_fn, Metric):
            return self.compare_fn
        return Metric.CUSTOM

    @classmethod
    def default(cls) -> "MatchingOptions":
        """Case-insensitive Levenshtein matching."""
        return cls()

    @classmethod
    def case_sensitive_default(cls) -> "MatchingOptions":
        """Case-sensitive Levenshtein matching."""
        return cls(case_sensitive=True)


def default_closest_string_options() -> MatchingOptions:
    return MatchingOptions.default()


def case_sensitive_closest_string_options() -> MatchingOptions:
    return MatchingOptions.case_sensitive_default()


def default_compare_similarity_options() -> MatchingOptions:
    return MatchingOptions.default()


def case_sensitive_compare_similarity_options() -> MatchingOptions:
    return MatchingOptions.case_sensitive_default()


def _resolve_metric(options: MatchingOptions) -> DistanceFunction:
    if options.compare_fn is None:
        return levenshtein_distance
    if isinstance(options.compare_fn, Metric):
        return _BUILTIN_METRICS[options.compare_fn]
    return options.compare_fn


def build_comparator(options: Optional[MatchingOptions] = None) -> DistanceFunction:
    """Build a two-argument distance function from matching options.

    The returned function holds no state and can be shared freely, including
    across threads.

    Args:
        options: Matching options; ``None`` means case-insensitive
            Levenshtein distance.

    Returns:
        A callable ``(a, b) -> int``.

    Example:
        >>> compare = build_comparator(MatchingOptions(compare_fn=lambda a, b: 0))
        >>> compare("anything", "else")
        0
    """
    if options is None:
        options = MatchingOptions.default()

    metric = _resolve_metric(options)
    if options.case_sensitive:
        return metric

    def compare(a: str, b: str) -> int:
        return metric(a.lower(), b.lower())

    return compare


__all__ = [
    "DistanceFunction",
    "MatchingOptions",
    "build_comparator",
    "default_closest_string_options",
    "case_sensitive_closest_string_options",
    "default_compare_similarity_options",
    "case_sensitive_compare_similarity_options",
]
