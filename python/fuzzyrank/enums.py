"""Enums for fuzzyrank API."""

from enum import Enum


class Metric(str, Enum):
    """Distance strategies a comparator can be built from.

    String values are accepted wherever a ``Metric`` is, so
    ``MatchingOptions(compare_fn="levenshtein")`` is equivalent to
    ``MatchingOptions(compare_fn=Metric.LEVENSHTEIN)``.

    Example:
        >>> from fuzzyrank import MatchingOptions, Metric
        >>> MatchingOptions(compare_fn=Metric.LEVENSHTEIN).metric
        <Metric.LEVENSHTEIN: 'levenshtein'>
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    CUSTOM = "custom"
    """A caller-supplied distance function"""


class CaseStyle(str, Enum):
    """Identifier case styles understood by :mod:`fuzzyrank.casing`.

    Example:
        >>> from fuzzyrank import CaseStyle, convert_case
        >>> convert_case("HTTP server error", CaseStyle.SNAKE)
        'http_server_error'
    """

    CAMEL = "camel"
    """``fooBarBaz``"""

    PASCAL = "pascal"
    """``FooBarBaz``"""

    SNAKE = "snake"
    """``foo_bar_baz``"""

    KEBAB = "kebab"
    """``foo-bar-baz``"""


__all__ = ["Metric", "CaseStyle"]
