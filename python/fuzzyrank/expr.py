"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions, enabling
edit-distance operations directly in Polars expression contexts. Values are
computed row by row with ``map_elements``.

Warning:
    For large candidate lists prefer :mod:`fuzzyrank.batch` on plain lists,
    which builds a single comparator for the whole batch.

Example:
    >>> import polars as pl
    >>> import fuzzyrank  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["John", "Jon", "Jane"]})
    >>> df.with_columns(
    ...     dist=pl.col("name").fuzzy.distance("John"),
    ...     close=pl.col("name").fuzzy.is_similar("john", max_distance=1),
    ... )
"""

from typing import Union

import polars as pl

from fuzzyrank._utils import normalize_case_style
from fuzzyrank.casing import convert_case
from fuzzyrank.distance import levenshtein_similarity
from fuzzyrank.enums import CaseStyle
from fuzzyrank.options import MatchingOptions, build_comparator
from fuzzyrank.ranking import closest_string


def _str_or_empty(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def _pairwise(self, other: Union[str, pl.Expr], func, return_dtype) -> pl.Expr:
        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: func(_str_or_empty(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )
        # Compare against another column
        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_str_or_empty(row["_left"]), _str_or_empty(row["_right"])),
            return_dtype=return_dtype,
        )

    def distance(
        self,
        other: Union[str, pl.Expr],
        case_sensitive: bool = True,
    ) -> pl.Expr:
        """
        Calculate Levenshtein distance between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            case_sensitive: Compare without lowercasing (default: True)

        Returns:
            Expression producing integer distances; nulls count as empty strings

        Example:
            >>> df.with_columns(
            ...     dist=pl.col("name").fuzzy.distance("John")
            ... )
        """
        compare = build_comparator(MatchingOptions(case_sensitive=case_sensitive))
        return self._pairwise(other, compare, pl.Int64)

    def similarity(
        self,
        other: Union[str, pl.Expr],
        case_sensitive: bool = True,
    ) -> pl.Expr:
        """
        Calculate normalized Levenshtein similarity (0.0 to 1.0).

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"))
            ... )
        """
        if case_sensitive:
            func = levenshtein_similarity
        else:
            def func(a: str, b: str) -> float:
                return levenshtein_similarity(a.lower(), b.lower())

        return self._pairwise(other, func, pl.Float64)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        max_distance: int = 2,
        case_sensitive: bool = False,
    ) -> pl.Expr:
        """
        Check if values are within an edit distance of another value/column.

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("john", max_distance=1))
        """
        return self.distance(other, case_sensitive=case_sensitive) <= max_distance

    def closest(
        self,
        choices: list[str],
        case_sensitive: bool = False,
    ) -> pl.Expr:
        """
        Find the closest string from a list of choices.

        Args:
            choices: List of strings to match against
            case_sensitive: Compare without lowercasing (default: False)

        Returns:
            Expression with the closest choice per row, null for null rows
            or when ``choices`` is empty

        Example:
            >>> categories = ["Electronics", "Clothing", "Food"]
            >>> df.with_columns(
            ...     category=pl.col("raw_category").fuzzy.closest(categories)
            ... )
        """
        options = MatchingOptions(case_sensitive=case_sensitive)
        choices = list(choices)

        def find_closest(value):
            if value is None or not choices:
                return None
            return closest_string(str(value), choices, options)

        return self._expr.map_elements(find_closest, return_dtype=pl.Utf8)

    def to_case(self, style: Union[str, CaseStyle]) -> pl.Expr:
        """
        Convert identifiers to a case style ("camel", "pascal", "snake", "kebab").

        Example:
            >>> df.with_columns(column=pl.col("header").fuzzy.to_case("snake"))
        """
        style = normalize_case_style(style)
        return self._expr.map_elements(
            lambda value: convert_case(str(value), style),
            return_dtype=pl.Utf8,
        )


__all__ = ["FuzzyExprNamespace"]
