"""Internal utilities for fuzzyrank."""

from typing import Union

from fuzzyrank.enums import CaseStyle, Metric
from fuzzyrank.exceptions import AlgorithmError

# Metric names a caller may pass as a string. "custom" is reported by
# MatchingOptions.metric but cannot be requested by name.
VALID_METRICS = frozenset({
    "levenshtein",
})

VALID_CASE_STYLES = frozenset(style.value for style in CaseStyle)


def normalize_metric(metric: Union[str, Metric]) -> Metric:
    """Convert a metric name to a built-in Metric member.

    Args:
        metric: Either a Metric enum value or a string metric name.

    Returns:
        The matching Metric member.

    Raises:
        AlgorithmError: If the metric name is not a built-in metric.
        TypeError: If metric is not a string or Metric enum.

    Example:
        >>> normalize_metric("Levenshtein")
        <Metric.LEVENSHTEIN: 'levenshtein'>
    """
    if isinstance(metric, Metric):
        if metric.value not in VALID_METRICS:
            raise AlgorithmError(f"{metric!r} is not a built-in metric")
        return metric

    if isinstance(metric, str):
        name = metric.strip().lower()
        if name in VALID_METRICS:
            return Metric(name)
        raise AlgorithmError(
            f"Unknown metric: '{metric}'. Valid options: {sorted(VALID_METRICS)}"
        )

    raise TypeError(f"metric must be str or Metric enum, got {type(metric).__name__}")


def normalize_case_style(style: Union[str, CaseStyle]) -> CaseStyle:
    """Convert a case style name to a CaseStyle member.

    Accepts the enum, its value, or common spellings such as
    ``"snake_case"`` and ``"camelCase"``.
    """
    if isinstance(style, CaseStyle):
        return style

    if isinstance(style, str):
        name = style.strip().lower().replace("-", "_")
        if name.endswith("_case"):
            name = name[: -len("_case")]
        elif name.endswith("case") and name != "case":
            name = name[: -len("case")]
        if name in VALID_CASE_STYLES:
            return CaseStyle(name)
        raise AlgorithmError(
            f"Unknown case style: '{style}'. Valid options: {sorted(VALID_CASE_STYLES)}"
        )

    raise TypeError(f"style must be str or CaseStyle enum, got {type(style).__name__}")


__all__ = ["normalize_metric", "normalize_case_style", "VALID_METRICS", "VALID_CASE_STYLES"]
