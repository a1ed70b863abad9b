"""
fuzzyrank - Edit distance and closest-match ranking for Python

Computes Levenshtein distance, ranks candidate strings by closeness to a
query, and picks the best or top-N matches.

Example usage:
    >>> import fuzzyrank as fz

    # Edit distance
    >>> fz.levenshtein_distance("kitten", "sitting")
    3

    # Best match (case-insensitive by default)
    >>> fz.closest_string("hep", ["length", "size", "help", "world"])
    'help'

    # Top N, closest first
    >>> fz.closest_strings("hep", ["length", "size", "help", "world"], 2)
    ['help', 'size']

    # Case-sensitive matching or a custom metric
    >>> opts = fz.MatchingOptions(case_sensitive=True)
    >>> fz.sort_by_similarity(["HELP", "help"], "help", opts)
    ['help', 'HELP']
"""

import logging
from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzyrank.expr  # noqa: F401

# Import polars subpackage for `from fuzzyrank import polars` style
from fuzzyrank import polars
from fuzzyrank.casing import (
    capitalize,
    convert_case,
    lowercase,
    split_words,
    suggest_case_style,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)
from fuzzyrank.distance import (
    BIT_PARALLEL_THRESHOLD,
    levenshtein_distance,
    levenshtein_similarity,
)
from fuzzyrank.enums import CaseStyle, Metric
from fuzzyrank.exceptions import (
    AlgorithmError,
    FuzzyRankError,
    StringMatchingError,
    ValidationError,
)
from fuzzyrank.options import (
    DistanceFunction,
    MatchingOptions,
    build_comparator,
    case_sensitive_closest_string_options,
    case_sensitive_compare_similarity_options,
    default_closest_string_options,
    default_compare_similarity_options,
)
from fuzzyrank.polars_ext import match_series, sort_series_by_similarity
from fuzzyrank.ranking import (
    MatchResult,
    closest_string,
    closest_string_simple,
    closest_strings,
    compare_similarity,
    compare_similarity_simple,
    rank,
    sort_by_similarity,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fuzzyrank")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyRankError",
    "StringMatchingError",
    "ValidationError",
    "AlgorithmError",
    # Result types
    "MatchResult",
    # Enums
    "Metric",
    "CaseStyle",
    # Distance functions
    "BIT_PARALLEL_THRESHOLD",
    "levenshtein_distance",
    "levenshtein_similarity",
    # Options and comparators
    "DistanceFunction",
    "MatchingOptions",
    "build_comparator",
    "default_closest_string_options",
    "case_sensitive_closest_string_options",
    "default_compare_similarity_options",
    "case_sensitive_compare_similarity_options",
    # Ranking
    "closest_string",
    "closest_string_simple",
    "closest_strings",
    "sort_by_similarity",
    "compare_similarity",
    "compare_similarity_simple",
    "rank",
    # Case conversion
    "split_words",
    "lowercase",
    "capitalize",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "to_kebab_case",
    "convert_case",
    "suggest_case_style",
    # Polars integration
    "match_series",
    "sort_series_by_similarity",
    # Polars subpackage
    "polars",
]


# Convenience aliases
levenshtein = levenshtein_distance
edit_distance = levenshtein_distance
