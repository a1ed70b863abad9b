"""Exception hierarchy for fuzzyrank."""


class FuzzyRankError(Exception):
    """Base exception for all fuzzyrank errors."""


class StringMatchingError(FuzzyRankError):
    """A single best match was requested from an empty candidate set."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FuzzyRankError, ValueError):
    """An argument failed validation (lengths, worker counts, ...)."""


class AlgorithmError(FuzzyRankError, ValueError):
    """An unknown metric or case style name was requested."""


__all__ = [
    "FuzzyRankError",
    "StringMatchingError",
    "ValidationError",
    "AlgorithmError",
]
